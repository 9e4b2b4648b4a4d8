"""
Console configuration: all environment variables in one place.

Read from environment at import time. Delays are in seconds.
"""

from __future__ import annotations

import os


class Settings:
    """Console settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("CONSOLE_ENVIRONMENT", "development")

    # Simulated round trips
    DASHBOARD_DELAY: float = float(os.environ.get("CONSOLE_DASHBOARD_DELAY", "1.5"))
    REPORT_DELAY: float = float(os.environ.get("CONSOLE_REPORT_DELAY", "2.0"))
    LOGIN_DELAY: float = float(os.environ.get("CONSOLE_LOGIN_DELAY", "2.0"))

    # Demo login
    DEMO_EMAIL: str = os.environ.get("CONSOLE_DEMO_EMAIL", "test@example.com")
    DEMO_PASSWORD: str = os.environ.get("CONSOLE_DEMO_PASSWORD", "password")


# Singleton instance
settings = Settings()

for _name in ("DASHBOARD_DELAY", "REPORT_DELAY", "LOGIN_DELAY"):
    if getattr(settings, _name) < 0:
        raise RuntimeError(f"CONSOLE_{_name} must be non-negative")
