from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.docs_builder import DocsBuilder


@pytest.fixture
def docs_builder(tmp_path: Path) -> DocsBuilder:
    """Provide a reusable docs tree builder rooted at the pytest tmp_path."""
    return DocsBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_docs_list_logger() -> Iterator[None]:
    """Drop handlers bound to per-test capture streams."""
    yield
    logger = logging.getLogger("docs_list")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
