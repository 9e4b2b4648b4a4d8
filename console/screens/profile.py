"""
Profile screen: a single form, edited in place.

Cancel restores the last saved profile. Save validates through the
Profile model; a failed save keeps the form open with the user's input.
"""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from console.kernel.notifications import LoggingNotifier, Notifier
from console.kernel.types import InvalidState

logger = logging.getLogger(__name__)


class Profile(BaseModel):
    """The signed-in user's profile and preferences."""

    model_config = {"extra": "forbid"}

    name: str = Field(min_length=1, max_length=200)
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    bio: str = Field(default="", max_length=1000)
    theme: Literal["dark", "light"] = "dark"
    notifications_enabled: bool = True


DEFAULT_PROFILE = Profile(
    name="John Doe",
    email="john.doe@example.com",
    bio="Software Engineer",
    theme="dark",
    notifications_enabled=True,
)


class ProfileScreen:
    def __init__(self, profile: Profile | None = None, notifier: Notifier | None = None) -> None:
        self.saved = profile or DEFAULT_PROFILE.model_copy()
        self.notifier = notifier or LoggingNotifier()
        self.editing = False
        self._draft: dict[str, Any] = self.saved.model_dump()

    @property
    def draft(self) -> dict[str, Any]:
        return dict(self._draft)

    def begin_edit(self) -> None:
        self.editing = True
        self._draft = self.saved.model_dump()

    def change(self, field: str, value: Any) -> None:
        if not self.editing:
            raise InvalidState("Profile is not being edited")
        if field not in Profile.model_fields:
            raise ValueError(f"Unknown profile field: {field}")
        self._draft[field] = value

    def save(self) -> Profile | None:
        if not self.editing:
            raise InvalidState("Profile is not being edited")
        try:
            profile = Profile.model_validate(self._draft)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            self.notifier.error(f"Invalid {field}: {first['msg']}")
            return None

        self.saved = profile
        self.editing = False
        self._draft = profile.model_dump()
        self.notifier.success("Profile updated successfully!")
        return profile

    def cancel(self) -> None:
        self.editing = False
        self._draft = self.saved.model_dump()
