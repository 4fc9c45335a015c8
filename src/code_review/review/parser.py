import json
import logging
from typing import Any

from code_review.errors import InvalidJSONError, NoJSONFoundError


logger = logging.getLogger(__name__)


def extract_json_span(text: str) -> str | None:
    """Return the first balanced ``{...}`` block in ``text``.

    Scanning starts at the first ``{`` and ends at the brace that closes it.
    Braces inside JSON string literals are ignored. Returns ``None`` when the
    text has no ``{`` or the first one is never closed.
    """
    start = text.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escaped = False

    for pos in range(start, len(text)):
        char = text[pos]

        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:pos + 1]

    return None


def parse_review_payload(text: str) -> dict[str, Any]:
    """Extract and decode the JSON object embedded in a model reply.

    Only syntax is checked: the decoded object is returned as-is, whatever
    keys it carries.
    """
    span = extract_json_span(text)
    if span is None:
        logger.error(f"No valid JSON block found in response: {text!r}")
        raise NoJSONFoundError()

    try:
        return json.loads(span)
    except json.JSONDecodeError as e:
        logger.error(f"Extracted JSON is invalid: {span!r} ({e})")
        raise InvalidJSONError() from e
