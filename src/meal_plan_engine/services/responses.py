"""Parsing of raw text returned by the generative model."""

import json
import re

_FENCE_OPEN = re.compile(r"^\s*```(?:json)?\s*", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```\s*$")


def parse_model_response(text: str) -> object:
    """Decode the JSON document in a model reply, ignoring markdown fences."""
    cleaned = _strip_code_fences(text)
    if not cleaned:
        raise ValueError("Model returned an empty response")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Model response is not valid JSON: {exc}") from exc


def _strip_code_fences(text: str) -> str:
    cleaned = _FENCE_OPEN.sub("", text, count=1)
    return _FENCE_CLOSE.sub("", cleaned, count=1).strip()
