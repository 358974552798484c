"""Tolerant extraction of JSON from language model output.

Models are asked to reply with a bare JSON array but often wrap it in
prose or markdown, or emit something that is almost JSON. Parsing tries,
in order: the whole text, the outermost ``[...]`` slice, and finally each
flat ``{...}`` object found in the text. Anything that still fails yields
an empty list. The result is untrusted and must be validated by the
caller.
"""

import json
import re
from typing import Any

# Flat objects only; nested braces are not salvaged
_FLAT_OBJECT_RE = re.compile(r"\{[^{}]+\}")

# Strings shorter than this are not taken as model output in the fallback
_MIN_FALLBACK_TEXT_LENGTH = 11


def extract_output_text(data: Any) -> str:
    """Pull the generated text out of a Responses API body.

    Handles ``output_text``, ``output[0].content[*]`` parts and
    ``output[0].text``; otherwise returns the first substantial string
    found anywhere in the body.
    """
    if not isinstance(data, dict):
        return _find_first_text(data)

    if isinstance(data.get("output_text"), str):
        return data["output_text"]

    output = data.get("output")
    if isinstance(output, list) and output and isinstance(output[0], dict):
        first = output[0]
        content = first.get("content")
        if isinstance(content, list):
            for part in content:
                if not isinstance(part, dict):
                    continue
                if part.get("type") == "output_text" and isinstance(
                    part.get("text"), str
                ):
                    return part["text"]
                if isinstance(part.get("content"), str):
                    return part["content"]
        if isinstance(first.get("text"), str):
            return first["text"]

    return _find_first_text(data)


def _find_first_text(value: Any) -> str:
    if isinstance(value, str):
        return value if len(value) >= _MIN_FALLBACK_TEXT_LENGTH else ""
    if isinstance(value, dict):
        value = list(value.values())
    if isinstance(value, list):
        for item in value:
            text = _find_first_text(item)
            if text:
                return text
    return ""


def parse_strict(raw: str) -> list[Any] | None:
    """Parse the whole text as a JSON array."""
    try:
        parsed = json.loads(raw.strip())
    except ValueError:
        return None
    return parsed if isinstance(parsed, list) else None


def parse_bracket_slice(raw: str) -> list[Any] | None:
    """Parse the text between the first ``[`` and the last ``]``."""
    start = raw.find("[")
    end = raw.rfind("]")
    if start == -1 or end <= start:
        return None
    return parse_strict(raw[start : end + 1])


def salvage_objects(raw: str) -> list[dict[str, Any]]:
    """Collect every flat ``{...}`` object in the text that parses on its own."""
    objects = []
    for match in _FLAT_OBJECT_RE.finditer(raw):
        try:
            parsed = json.loads(match.group(0))
        except ValueError:
            continue
        if isinstance(parsed, dict):
            objects.append(parsed)
    return objects


def parse_json_array(raw: str | None) -> list[Any]:
    """Best-effort parse of a JSON array out of free-form text.

    Returns:
        The parsed items, or an empty list when nothing could be salvaged.
    """
    if not raw:
        return []
    for parse in (parse_strict, parse_bracket_slice):
        parsed = parse(raw)
        if parsed is not None:
            return parsed
    return salvage_objects(raw)
