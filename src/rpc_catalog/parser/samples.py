"""Sample payload recoverer.

Each method block carries code samples in a fixed order: the request
(a curl command wrapping one JSON object) first, the response second.
The request JSON is recovered positionally: everything from the first
``{`` up to, but excluding, the final character of the block (the
closing quote of the curl ``-d`` argument), with all whitespace removed.
Blocks that do not follow that shape fail to parse and void the method.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rpc_catalog.config import DocumentMarkers
from rpc_catalog.errors import SampleParseError, SectionMissingError
from rpc_catalog.parser.sanitize import sanitize_text
from rpc_catalog.parser.tree import DocumentNode

logger = logging.getLogger(__name__)


def _remove_at(index: int, s: str) -> str:
    return s[:index] + s[index + 1 :]


def _drop_stray_trailing_char(candidate: str) -> str:
    # The published simulateTransaction sample has a stray character just
    # before its closing "}]}". Offset is tied to that exact sample; re-check
    # it whenever the page layout changes.
    return _remove_at(len(candidate) - 4, candidate)


# (marker contained in the candidate, correction applied before parsing)
SAMPLE_PATCHES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("simulateTransaction", _drop_stray_trailing_char),
)


@dataclass(frozen=True)
class RecoveredSamples:
    request: dict
    response: Any = None

    @property
    def params(self) -> Any:
        return self.request.get("params")

    @property
    def has_params(self) -> bool:
        return "params" in self.request


def extract_request_json(raw: str) -> str:
    """Isolate the compact JSON candidate embedded in a request sample."""
    start = raw.find("{")
    if start == -1:
        return ""
    return "".join(raw[start:-1].strip().split())


def apply_patches(candidate: str) -> str:
    for marker, patch in SAMPLE_PATCHES:
        if marker in candidate:
            candidate = patch(candidate)
    return candidate


def parse_request(raw: str, method_name: str) -> dict:
    """Recover and parse the request JSON of a sample block."""
    candidate = apply_patches(extract_request_json(raw))
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise SampleParseError(method_name, candidate) from e
    if not isinstance(data, dict):
        raise SampleParseError(method_name, candidate)
    return data


def parse_response(raw: str, method_name: str) -> Any:
    """Parse a response sample, which holds a bare JSON document."""
    text = raw.strip()
    start = text.find("{")
    payload = text[start:] if start != -1 else text
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise SampleParseError(method_name, payload) from e


def recover_samples(
    snippets: DocumentNode,
    method_name: str,
    markers: DocumentMarkers,
    capture_response: bool = False,
) -> RecoveredSamples:
    """Recover the request sample (and optionally the response) of a method.

    Raises:
        SectionMissingError: no request block, or it is empty.
        SampleParseError: a present sample is not valid JSON.
    """
    blocks = snippets.find_all(markers.code_block)
    request_text = sanitize_text(blocks[0].text) if blocks else ""
    if not request_text:
        raise SectionMissingError(method_name, "Sample request")

    request = parse_request(request_text, method_name)

    response = None
    if capture_response and len(blocks) > 1:
        response = parse_response(sanitize_text(blocks[1].text), method_name)

    return RecoveredSamples(request=request, response=response)
