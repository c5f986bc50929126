import pytest

import alexandria.config as cfg


@pytest.fixture
def colorless(monkeypatch):
    """Turn off ANSI colours for the duration of a test."""
    monkeypatch.setattr(cfg, "COLORLESS", True)


@pytest.fixture
def colored(monkeypatch):
    monkeypatch.setattr(cfg, "COLORLESS", False)
