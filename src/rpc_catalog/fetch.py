"""Fetches the reference page and parses it into a document tree."""

import logging
from pathlib import Path

import requests

from rpc_catalog.errors import FetchError
from rpc_catalog.parser.tree import SoupNode, parse_html

logger = logging.getLogger(__name__)

USER_AGENT = "rpc-catalog/0.1"


def fetch_document(url: str, timeout: float = 30.0) -> SoupNode:
    """Download *url* and parse it. Raises FetchError on any failure."""
    logger.info("Fetching %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch {url}: {e}") from e

    if not response.text.strip():
        raise FetchError(f"Empty document returned by {url}")
    return parse_html(response.text)


def load_document(file_path: Path) -> SoupNode:
    """Parse a saved copy of the reference page."""
    try:
        html = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FetchError(f"Failed to read {file_path}: {e}") from e

    if not html.strip():
        raise FetchError(f"Empty document in {file_path}")
    return parse_html(html)
