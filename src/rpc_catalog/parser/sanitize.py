"""Strip control and zero-width characters from extracted text."""

import re

# C0 controls, DEL + C1 controls, zero-width space
_UNSAFE_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f\u200b]")


def sanitize_text(text: str) -> str:
    """Remove control characters, keeping everything else verbatim."""
    return _UNSAFE_CHARS.sub("", text)
