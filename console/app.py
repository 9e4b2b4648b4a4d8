"""
Console composition.

Builds every screen explicitly from seed data and owns them until close().
Nothing is created at import time; two Console instances share no state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from console.config import Settings, settings as default_settings
from console.kernel.manager import CollectionManager
from console.kernel.notifications import LoggingNotifier, Notifier
from console.kernel.store import new_id
from console.kernel.timers import AsyncioScheduler, Scheduler
from console.screens.dashboard import DashboardScreen
from console.screens.documents import make_documents
from console.screens.login import LoginScreen
from console.screens.products import make_products
from console.screens.profile import ProfileScreen
from console.screens.reports import ReportsScreen
from console.screens.users import make_users

logger = logging.getLogger(__name__)

SIDEBAR_ITEMS: list[dict[str, str]] = [
    {"id": "dashboard", "label": "Dashboard", "path": "/dashboard"},
    {"id": "users", "label": "Users", "path": "/users"},
    {"id": "products", "label": "Products", "path": "/products"},
    {"id": "reports", "label": "Reports", "path": "/reports"},
    {"id": "documents", "label": "Documents", "path": "/documents"},
    {"id": "settings", "label": "Settings", "path": "/settings"},
    {"id": "login", "label": "Login", "path": "/login"},
]

SECTIONS: set[str] = {item["id"] for item in SIDEBAR_ITEMS}


class Console:
    """
    Args:
        settings: Delays and demo credentials (module settings by default)
        scheduler: Timer source for simulated round trips (asyncio by default)
        notifier: Sink for every screen's messages (logging by default)
        id_factory: Identifier source for new records
    """

    def __init__(
        self,
        settings: Settings | None = None,
        scheduler: Scheduler | None = None,
        notifier: Notifier | None = None,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        cfg = settings or default_settings
        self.settings = cfg
        self.scheduler = scheduler or AsyncioScheduler()
        self.notifier = notifier or LoggingNotifier()

        self.users = make_users(self.notifier, id_factory)
        self.products = make_products(self.notifier, id_factory)
        self.documents = make_documents(self.notifier, id_factory)
        self.dashboard = DashboardScreen(self.scheduler, cfg.DASHBOARD_DELAY, self.users, self.products)
        self.reports = ReportsScreen(self.scheduler, cfg.REPORT_DELAY, self.products, self.notifier)
        self.profile = ProfileScreen(notifier=self.notifier)
        self.login = LoginScreen(
            self.scheduler,
            cfg.LOGIN_DELAY,
            cfg.DEMO_EMAIL,
            cfg.DEMO_PASSWORD,
            self.notifier,
        )

        self.active_section = "dashboard"
        self.sidebar_open = True
        self.closed = False

    @property
    def managers(self) -> dict[str, CollectionManager]:
        return {"users": self.users, "products": self.products, "documents": self.documents}

    def start(self) -> None:
        """Mount the initial section."""
        self._mount(self.active_section)

    def navigate(self, section: str) -> None:
        if section not in SECTIONS:
            raise ValueError(f"Unknown section: {section}")
        if self.closed:
            raise RuntimeError("Console is closed")
        if section == self.active_section:
            return
        self._unmount(self.active_section)
        self.active_section = section
        self._mount(section)
        logger.debug("Navigated to %s", section)

    def toggle_sidebar(self) -> bool:
        self.sidebar_open = not self.sidebar_open
        return self.sidebar_open

    def close(self) -> None:
        """Tear down every screen. Pending timers are cancelled."""
        if self.closed:
            return
        self.dashboard.close()
        self.reports.close()
        self.login.close()
        for manager in self.managers.values():
            manager.close()
        self.closed = True

    def __enter__(self) -> Console:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # -- internal --

    def _mount(self, section: str) -> None:
        if section == "dashboard":
            self.dashboard.load()
        elif section == "reports":
            self.reports.generate()

    def _unmount(self, section: str) -> None:
        if section == "dashboard":
            self.dashboard.close()
        elif section == "reports":
            self.reports.close()
        elif section == "login":
            self.login.close()
