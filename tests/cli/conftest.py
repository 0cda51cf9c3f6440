"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host ``TEMPCONV_*`` settings out of CLI tests."""
    monkeypatch.delenv("TEMPCONV_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("TEMPCONV_VERBOSE", raising=False)
