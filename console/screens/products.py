"""Products screen: catalog items with price and stock."""

from __future__ import annotations

from collections.abc import Callable

from console.kernel.manager import CollectionManager
from console.kernel.notifications import Notifier
from console.kernel.store import EntityStore, new_id
from console.kernel.types import EntitySchema, FieldSpec

PRODUCT_SCHEMA = EntitySchema(
    name="product",
    plural="products",
    fields=(
        FieldSpec("name", required=True, searchable=True),
        FieldSpec("description", kind="text", required=True, searchable=True),
        FieldSpec("price", kind="number", non_negative=True),
        FieldSpec("category", required=True, searchable=True),
        FieldSpec("stock", kind="integer", non_negative=True),
    ),
)

SEED_PRODUCTS = [
    {"id": "1", "name": "Product A", "description": "Description of Product A", "price": 25.99, "category": "Electronics", "stock": 100},
    {"id": "2", "name": "Product B", "description": "Description of Product B", "price": 19.99, "category": "Clothing", "stock": 50},
    {"id": "3", "name": "Product C", "description": "Description of Product C", "price": 49.99, "category": "Home Goods", "stock": 20},
    {"id": "4", "name": "Product D", "description": "Description of Product D", "price": 12.50, "category": "Books", "stock": 150},
    {"id": "5", "name": "Product E", "description": "Description of Product E", "price": 79.00, "category": "Electronics", "stock": 30},
]

PRODUCT_MESSAGES = {
    "negative_numbers": "Price and stock must be non-negative.",
}


def make_products(notifier: Notifier | None = None, id_factory: Callable[[], str] = new_id) -> CollectionManager:
    store = EntityStore(PRODUCT_SCHEMA, SEED_PRODUCTS, id_factory=id_factory)
    return CollectionManager(store, notifier, messages=PRODUCT_MESSAGES)
