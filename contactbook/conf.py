"""
Contactbook configuration.

Usage in settings.py:
    CONTACTBOOK = {
        "SITE_NAME": "Remix Forms",
        "SUCCESS_URL": "/success/",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


@dataclass
class ContactBookSettings:
    """Contactbook configuration settings."""

    # Suffix for every page title ("Edit · Remix Forms")
    SITE_NAME: str = "Remix Forms"

    # Where the validation example redirects after a valid submission
    SUCCESS_URL: str = "/success/"

    # Max history rows shown in the grid
    HISTORY_LIMIT: int = 50

    # Max contacts shown in the sidebar
    SEARCH_LIMIT: int = 100

    # AG Grid presentation
    GRID_THEME: str = "ag-theme-quartz"
    GRID_HEIGHT: int = 500


def get_contactbook_settings() -> ContactBookSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "CONTACTBOOK", {})
    return ContactBookSettings(**user_settings)


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_contactbook_settings(), name)


contactbook_settings = _LazySettings()
