"""Shared pytest fixtures."""

import logging
from pathlib import Path

import pytest

from rpc_catalog.parser.tree import parse_html

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def docs_html() -> str:
    return (FIXTURES / "rpc-docs.html").read_text(encoding="utf-8")


@pytest.fixture
def document(docs_html):
    return parse_html(docs_html)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger("rpc_catalog")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
