"""Method record builder.

Composes the classifier, parameter extractor and sample recoverer into
one MethodRecord per method block. Any missing required section or
unparseable sample skips the method with a warning; nothing raised here
reaches the caller.
"""

import logging

from rpc_catalog.config import Settings
from rpc_catalog.errors import ExtractionError, SectionMissingError
from rpc_catalog.parser.base import MethodRecord, SampleBody
from rpc_catalog.parser.categories import classify
from rpc_catalog.parser.params import extract_params
from rpc_catalog.parser.samples import recover_samples
from rpc_catalog.parser.sanitize import sanitize_text
from rpc_catalog.parser.tree import DocumentNode

logger = logging.getLogger(__name__)

DEPRECATION_KEYWORD = "deprecated"


def build_method(block: DocumentNode, settings: Settings, position: int = 0) -> MethodRecord | None:
    """Build a record from one method block, or return None if it must be skipped.

    *position* is only used to identify blocks that have no name.
    """
    markers = settings.markers

    heading = block.find(markers.heading)
    name = sanitize_text(heading.text).strip() if heading is not None else ""
    if not name:
        logger.warning("Method name not found for method block #%d, skipping", position)
        return None

    try:
        return _build(block, name, settings)
    except ExtractionError as e:
        logger.warning("Skipping method %s: %s", name, e)
        return None


def _build(block: DocumentNode, name: str, settings: Settings) -> MethodRecord:
    markers = settings.markers
    category = classify(name, settings.category_rules)
    deprecated = is_deprecated(block, settings)

    params_section = block.find(markers.params_section)
    if params_section is None:
        raise SectionMissingError(name, "Params section")
    params = extract_params(params_section, name, markers)

    snippets = block.find(markers.code_samples)
    if snippets is None:
        raise SectionMissingError(name, "Code samples section")
    samples = recover_samples(snippets, name, markers, capture_response=settings.capture_details)

    description = None
    if settings.capture_details:
        description = extract_description(block, settings)

    return MethodRecord(
        name=name,
        description=description,
        category=category,
        deprecated=deprecated,
        params=tuple(params),
        sample_body=SampleBody(params=samples.params) if samples.has_params else SampleBody(),
        sample_response=samples.response,
    )


def is_deprecated(block: DocumentNode, settings: Settings) -> bool:
    warning = block.find(settings.markers.deprecation)
    return warning is not None and DEPRECATION_KEYWORD in warning.text.lower()


def extract_description(block: DocumentNode, settings: Settings) -> str | None:
    node = block.find(settings.markers.description)
    if node is None:
        return None
    return sanitize_text(node.text).strip() or None
