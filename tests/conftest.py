"""Shared fixtures: every test starts from environment-default settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from optionkit.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("OPTIONKIT_TRACE_RESOLUTION", "OPTIONKIT_LOG_LEVEL", "OPTIONKIT_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
