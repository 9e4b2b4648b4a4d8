"""Dashboard screen: summary cards behind a simulated loading delay."""

from __future__ import annotations

import logging

from console.kernel.manager import CollectionManager
from console.kernel.timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class DashboardScreen:
    def __init__(
        self,
        scheduler: Scheduler,
        delay: float,
        users: CollectionManager | None = None,
        products: CollectionManager | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._users = users
        self._products = products
        self._timer: TimerHandle | None = None
        self.loading = False

    def load(self) -> None:
        """Show the spinner, then the cards once the delay has passed."""
        if self._timer is not None:
            self._timer.cancel()
        self.loading = True
        self._timer = self._scheduler.call_later(self._delay, self._finish)

    def _finish(self) -> None:
        self._timer = None
        self.loading = False
        logger.debug("Dashboard loaded")

    @property
    def cards(self) -> list[dict[str, str]]:
        """Info cards. Empty while loading."""
        if self.loading:
            return []
        cards: list[dict[str, str]] = []
        if self._users is not None:
            cards.append({"title": "Total Users", "value": f"{len(self._users.store):,}"})
        if self._products is not None:
            products = self._products.store
            stock_value = sum(p.get("price", 0) * p.get("stock", 0) for p in products)
            cards.append({"title": "Total Products", "value": f"{len(products):,}"})
            cards.append({"title": "Stock Value", "value": f"${stock_value:,.2f}"})
        return cards

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
