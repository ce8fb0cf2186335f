import logging

import pytest

from penumbra.logging_config import configure_logging, level_for_verbosity


@pytest.mark.parametrize(
    "verbosity,level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_levels(verbosity, level):
    assert level_for_verbosity(verbosity) == level


def test_env_level_wins_over_verbosity(monkeypatch):
    monkeypatch.setenv("PENUMBRA_LOG_LEVEL", "debug")
    assert configure_logging(0) == logging.DEBUG


def test_unknown_env_level_is_ignored(monkeypatch, caplog):
    monkeypatch.setenv("PENUMBRA_LOG_LEVEL", "chatty")
    with caplog.at_level(logging.WARNING):
        assert configure_logging(1) == logging.INFO
    assert "chatty" in caplog.text
