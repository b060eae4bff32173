# tests/conftest.py

import logging

import pytest

from twang.utils.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_twang_logging():
    """Drops handlers/levels installed by setup_logging (e.g. via CLI runs)."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
