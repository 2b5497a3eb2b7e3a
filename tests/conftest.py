"""Shared test configuration for the Grafana kiosk launcher tests."""

import logging
import os
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def clean_kiosk_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove GRAFANA_KIOSK_* variables so settings start from defaults."""
    for name in list(os.environ):
        if name.startswith("GRAFANA_KIOSK_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo setup_logging() handler changes after each test."""
    yield
    logger = logging.getLogger("grafana_kiosk")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
