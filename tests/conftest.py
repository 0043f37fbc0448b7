"""Shared pytest configuration for the editor tests."""

from __future__ import annotations

import django
import pytest
from django.conf import settings


def pytest_configure(config: pytest.Config) -> None:
    """Minimal Django settings so the template filters can be loaded."""
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["editor"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()
