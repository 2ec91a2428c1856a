"""Parameter extractor.

Walks the parameter section of a method block into ParamSpec models,
descending into the fields of object-typed parameters. A malformed
field or parameter is logged and dropped; its siblings are still
extracted.
"""

import logging

from rpc_catalog.config import DocumentMarkers
from rpc_catalog.errors import ExtractionError, SectionMissingError
from rpc_catalog.parser.base import FieldSpec, ParamSpec
from rpc_catalog.parser.sanitize import sanitize_text
from rpc_catalog.parser.tree import DocumentNode

logger = logging.getLogger(__name__)

OBJECT_TYPE = "object"
REQUIRED_FLAG = "required"


def extract_params(
    section: DocumentNode, method_name: str, markers: DocumentMarkers
) -> list[ParamSpec]:
    """Extract every well-formed parameter in document order."""
    params = []
    for node in section.find_all(markers.param):
        try:
            params.append(_parse_param(node, method_name, markers))
        except ExtractionError as e:
            logger.warning("Skipping parameter: %s", e)
    return params


def _parse_param(node: DocumentNode, method_name: str, markers: DocumentMarkers) -> ParamSpec:
    header = node.find(markers.param_header)
    if header is None:
        raise SectionMissingError(method_name, "Parameter header")
    label = header.find(markers.type_label)
    param_type = sanitize_text(label.text.strip()) if label is not None else ""
    if not param_type:
        raise SectionMissingError(method_name, "Type")

    fields: list[FieldSpec] = []
    if param_type == OBJECT_TYPE:
        fields = _parse_fields(node, method_name, markers)

    return ParamSpec(
        type=param_type,
        required=_is_required(node, markers),
        fields=tuple(fields),
    )


def _parse_fields(node: DocumentNode, method_name: str, markers: DocumentMarkers) -> list[FieldSpec]:
    fields = []
    for field_node in node.find_all(markers.field):
        try:
            fields.append(_parse_field(field_node, method_name, markers))
        except ExtractionError as e:
            logger.warning("Skipping field: %s", e)
    return fields


def _parse_field(node: DocumentNode, method_name: str, markers: DocumentMarkers) -> FieldSpec:
    name_node = node.find(markers.field_name)
    type_node = node.find(markers.type_label)
    name = sanitize_text(name_node.text).strip() if name_node is not None else ""
    field_type = sanitize_text(type_node.text).strip() if type_node is not None else ""
    if not name or not field_type:
        raise SectionMissingError(method_name, "Field name or type")

    logger.debug("Field %s: %s (%s)", method_name, name, field_type)
    return FieldSpec(name=name, type=field_type, required=_is_required(node, markers))


def _is_required(node: DocumentNode, markers: DocumentMarkers) -> bool:
    flag = node.find(markers.flag)
    return flag is not None and sanitize_text(flag.text) == REQUIRED_FLAG
