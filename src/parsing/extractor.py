"""JSON extraction from free-form model output.

Models often wrap the requested JSON in prose ("Here are your recipes: ...")
or emit partial fragments. Two strategies run in order:

1. Regex scan for `{ ... recipes ... }` fragments; the first one that parses wins.
2. Balanced-brace scan; the first complete top-level `{...}` span is parsed.
   If that span does not parse, extraction fails immediately with
   InvalidJSONError rather than scanning further.

No balanced span at all raises JSONNotFoundError.
"""

import json
import re
from typing import Any, Optional

from src.utils.errors import InvalidJSONError, JSONNotFoundError, safe_execute_sync
from src.utils.logger import logger


_RECIPES_FRAGMENT = re.compile(r"\{.*?recipes.*?\}", re.DOTALL)


def _parse_object(candidate: str) -> Optional[dict[str, Any]]:
    """Parse a candidate fragment, returning it only if it is a JSON object."""
    parsed = json.loads(candidate)
    return parsed if isinstance(parsed, dict) else None


def _extract_by_regex(text: str) -> Optional[dict[str, Any]]:
    for match in _RECIPES_FRAGMENT.findall(text):
        parsed = safe_execute_sync(
            lambda: _parse_object(match),
            "Regex JSON fragment parse",
            log_level="debug",
            default_return=None,
        )
        if parsed is not None:
            return parsed
    return None


def _extract_by_brackets(text: str) -> dict[str, Any]:
    depth = 0
    start = -1

    for pos, char in enumerate(text):
        if char == "{":
            if depth == 0:
                start = pos
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                candidate = text[start : pos + 1]
                try:
                    return json.loads(candidate)
                except (json.JSONDecodeError, RecursionError) as e:
                    raise InvalidJSONError(f"Could not extract valid JSON from response: {e}") from e

    raise JSONNotFoundError("No JSON found in response")


def extract_json(text: str) -> dict[str, Any]:
    """Locate and parse the JSON object embedded in model output.

    Args:
        text: Raw model output, possibly with prose before or after the JSON.

    Returns:
        The parsed JSON object.

    Raises:
        InvalidJSONError: A balanced object was found but failed to parse.
        JSONNotFoundError: No balanced object was found.
    """
    text = text or ""

    parsed = _extract_by_regex(text)
    if parsed is not None:
        logger.debug("Extracted JSON via regex fragment scan")
        return parsed

    parsed = _extract_by_brackets(text)
    logger.debug("Extracted JSON via balanced-brace scan")
    return parsed
