"""Pytest configuration and shared fixtures for tests."""

import io
import logging

import pytest

from rangesum.core.config import config

ENV_VARS = ("LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE", "GCD_MAX_STEPS", "SHOW_PROMPTS", "RANGESUM_OUTPUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test against default configuration and restore logging."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reload()

    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    config.reload()


@pytest.fixture
def streams():
    """Provide in-memory stdout/stderr for CLI runs."""
    return io.StringIO(), io.StringIO()


@pytest.fixture
def run_cli(streams):
    """Invoke the CLI with the given stdin text and argv.

    Returns (exit_code, stdout_text, stderr_text).
    """
    from rangesum.main import main

    def _run(stdin_text: str = "", argv: list[str] | None = None):
        out, err = streams
        code = main(argv or [], stdin=io.StringIO(stdin_text), stdout=out, stderr=err)
        return code, out.getvalue(), err.getvalue()

    return _run
