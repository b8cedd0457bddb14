from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_pathalg_logger():
    """Drop handlers bound to CliRunner's temporary streams after each CLI test."""
    yield
    logger = logging.getLogger("pathalg")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
