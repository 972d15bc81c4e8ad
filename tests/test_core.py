"""Tests for configuration and logging setup."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

import pytest

from pokemon_team_api.app.core.config import Settings, settings
from pokemon_team_api.app.core.logging_config import resolve_level_name, setup_logging


@contextmanager
def bare_root_logger() -> Iterator[logging.Logger]:
    """Temporarily strip the root logger, including pytest's capture handlers."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers = []
    try:
        yield root
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.project_name
    assert isinstance(settings.port, int)


def test_base_url() -> None:
    settings = Settings(host="0.0.0.0", port=8080)

    assert settings.base_url == "http://0.0.0.0:8080"


def test_setup_logging_configures_console_and_file(tmp_path: Path) -> None:
    logfile = tmp_path / "api.log"

    with bare_root_logger() as root:
        setup_logging("debug", str(logfile))
        logging.getLogger("pokemon_team_api.test").info("hello team")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

    assert "[INFO] pokemon_team_api.test: hello team" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once() -> None:
    with bare_root_logger() as root:
        setup_logging("INFO")
        setup_logging("DEBUG")

        assert len(root.handlers) == 1
        assert root.level == logging.INFO


def test_setup_logging_unknown_level_falls_back_to_info() -> None:
    with bare_root_logger() as root:
        setup_logging("chatty")

        assert root.level == logging.INFO


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("debug", "DEBUG"),
        (" Warning ", "WARNING"),
        ("warn", "WARNING"),
        ("chatty", "INFO"),
        ("notset", "INFO"),
        ("", "INFO"),
    ],
)
def test_resolve_level_name(given: str, expected: str) -> None:
    assert resolve_level_name(given) == expected


@pytest.mark.parametrize(("given", "expected"), [("chatty", "info"), ("DEBUG", "debug")])
def test_uvicorn_config_uses_resolved_level(monkeypatch: pytest.MonkeyPatch, given: str, expected: str) -> None:
    import run

    monkeypatch.setattr(settings, "log_level", given)
    monkeypatch.setattr(settings, "port", 3001)

    config = run.build_config()

    assert config.log_level == expected
    assert config.port == 3001
    assert config.host == settings.host
