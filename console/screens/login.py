"""
Login screen: credential check behind a simulated round trip.

Nothing is enforced anywhere else in the console; this only reports
whether the submitted pair matches the configured demo account.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel, Field, ValidationError

from console.kernel.notifications import LoggingNotifier, Notifier
from console.kernel.timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials. Please try again."
MISSING_CREDENTIALS = "Please enter your email and password."


class LoginRequest(BaseModel):
    """What the login form submits."""

    model_config = {"extra": "forbid"}

    email: str = Field(min_length=1, max_length=320)
    password: str = Field(min_length=1, max_length=1024)


class LoginScreen:
    def __init__(
        self,
        scheduler: Scheduler,
        delay: float,
        demo_email: str,
        demo_password: str,
        notifier: Notifier | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._delay = delay
        self._demo = (demo_email, demo_password)
        self.notifier = notifier or LoggingNotifier()
        self._timer: TimerHandle | None = None
        self.loading = False
        self.error = ""
        self.authenticated = False

    def submit(self, email: str, password: str, on_complete: Callable[[bool], None] | None = None) -> bool:
        """
        Start a login attempt. Returns False without doing anything if one
        is already in flight or the form is incomplete.
        """
        if self.loading:
            return False
        try:
            request = LoginRequest(email=email.strip(), password=password)
        except ValidationError:
            self.error = MISSING_CREDENTIALS
            self.notifier.error(MISSING_CREDENTIALS)
            return False

        self.error = ""
        self.loading = True
        self._timer = self._scheduler.call_later(self._delay, lambda: self._finish(request, on_complete))
        return True

    def _finish(self, request: LoginRequest, on_complete: Callable[[bool], None] | None) -> None:
        self._timer = None
        self.loading = False
        self.authenticated = (request.email, request.password) == self._demo
        if self.authenticated:
            logger.info("Login succeeded for %s", request.email)
            self.notifier.success("Logged in successfully!")
        else:
            logger.info("Login failed for %s", request.email)
            self.error = INVALID_CREDENTIALS
            self.notifier.error("Invalid credentials")
        if on_complete is not None:
            on_complete(self.authenticated)

    def close(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self.loading = False
