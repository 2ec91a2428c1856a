"""Extraction pipeline: turns a whole reference page into a catalogue.

Method blocks are processed one at a time in document order so that the
category buckets keep first-seen order.
"""

import logging

from rpc_catalog.catalog.aggregate import Catalogue
from rpc_catalog.config import Settings
from rpc_catalog.parser.method import build_method
from rpc_catalog.parser.tree import DocumentNode

logger = logging.getLogger(__name__)


def extract_catalogue(document: DocumentNode, settings: Settings | None = None) -> Catalogue:
    """Build a catalogue from every method block in *document*."""
    settings = settings or Settings()
    catalogue = Catalogue()

    blocks = document.find_all(settings.markers.method_block)
    logger.info("Found %d method blocks", len(blocks))

    skipped = 0
    for position, block in enumerate(blocks):
        record = build_method(block, settings, position=position)
        if record is None:
            skipped += 1
            continue
        catalogue.add(record)

    logger.info("Found %d methods (%d skipped)", len(catalogue), skipped)
    return catalogue
