from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.style_tree import StyleTreeBuilder


@pytest.fixture
def style_tree(tmp_path: Path) -> StyleTreeBuilder:
    """Provide a reusable asset tree rooted at the pytest tmp_path."""
    return StyleTreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_stylegen_logger():
    """Undo handler changes made by configure_logging so caplog keeps working."""
    yield
    logger = logging.getLogger("stylegen")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
