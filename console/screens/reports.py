"""
Reports screen: canned reports produced after a simulated generation delay.

Changing the report type supersedes a generation still in flight; asking
to generate again while one is running is refused (the button is disabled).
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from console.kernel.manager import CollectionManager
from console.kernel.notifications import Notifier
from console.kernel.timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

REPORT_TYPES: dict[str, str] = {
    "sales": "Sales Report",
    "inventory": "Inventory Report",
}

SALES_BY_MONTH: list[dict[str, Any]] = [
    {"month": "Jan", "sales": 120},
    {"month": "Feb", "sales": 150},
    {"month": "Mar", "sales": 200},
    {"month": "Apr", "sales": 180},
    {"month": "May", "sales": 250},
]

# Used when no products screen is attached
INVENTORY_SAMPLE: list[dict[str, Any]] = [
    {"product": "Product A", "stock": 100, "category": "Electronics"},
    {"product": "Product B", "stock": 50, "category": "Clothing"},
    {"product": "Product C", "stock": 20, "category": "Home Goods"},
    {"product": "Product D", "stock": 150, "category": "Books"},
]

NO_DATA_MESSAGE = "No data available for this report type."


class Report(BaseModel):
    """One generated report."""

    model_config = {"extra": "forbid"}

    report_type: str
    rows: list[dict[str, Any]] = Field(default_factory=list)
    message: str | None = None
    generated_at: datetime


class ReportsScreen:
    def __init__(
        self,
        scheduler: Scheduler,
        delay: float,
        products: CollectionManager | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._products = products
        self._notifier = notifier
        self._timer: TimerHandle | None = None
        self.report_type = "sales"
        self.loading = False
        self.report: Report | None = None

    def generate(self) -> bool:
        """Start generating the current report type. False if one is already running."""
        if self.loading:
            return False
        self.loading = True
        requested = self.report_type
        self._timer = self._scheduler.call_later(self._delay, lambda: self._finish(requested))
        logger.debug("Generating %s report", requested)
        return True

    def set_report_type(self, report_type: str) -> None:
        """Switch report type and regenerate, dropping any generation in flight."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.loading = False
        self.report_type = report_type
        self.generate()

    def _finish(self, report_type: str) -> None:
        self._timer = None
        self.loading = False
        self.report = build_report(report_type, self._products)
        if self._notifier is not None and self.report.rows:
            self._notifier.success(f"{REPORT_TYPES[report_type]} generated.")

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.loading = False


def build_report(report_type: str, products: CollectionManager | None = None) -> Report:
    now = datetime.now(UTC)
    if report_type == "sales":
        return Report(report_type=report_type, rows=[dict(r) for r in SALES_BY_MONTH], generated_at=now)
    if report_type == "inventory":
        rows = [dict(r) for r in INVENTORY_SAMPLE]
        if products is not None:
            rows = [
                {"product": p.get("name"), "stock": p.get("stock"), "category": p.get("category")}
                for p in products.store
            ]
        return Report(report_type=report_type, rows=rows, generated_at=now)
    return Report(report_type=report_type, message=NO_DATA_MESSAGE, generated_at=now)
