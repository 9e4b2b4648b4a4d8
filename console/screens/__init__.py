"""Screen configurations of the console."""

from console.screens.dashboard import DashboardScreen
from console.screens.documents import DOCUMENT_SCHEMA, make_documents
from console.screens.login import LoginScreen
from console.screens.products import PRODUCT_SCHEMA, make_products
from console.screens.profile import Profile, ProfileScreen
from console.screens.reports import ReportsScreen
from console.screens.users import USER_SCHEMA, make_users

__all__ = [
    "USER_SCHEMA",
    "PRODUCT_SCHEMA",
    "DOCUMENT_SCHEMA",
    "make_users",
    "make_products",
    "make_documents",
    "DashboardScreen",
    "ReportsScreen",
    "Profile",
    "ProfileScreen",
    "LoginScreen",
]
