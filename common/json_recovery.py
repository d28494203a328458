"""
Tolerant JSON recovery for LLM responses.

Models frequently wrap their JSON in prose or Markdown fences, or leave a
trailing comma behind. ``recover`` tries four increasingly lenient stages and
reports the first one that yields valid JSON:

1. direct        - strict parse of the raw text
2. fenced        - strict parse after stripping code fences
3. bracket_scan  - strict parse of the first balanced {...} / [...] block
4. comma_repair  - strict parse after dropping commas before } or ]

It never raises: failures come back as ``RecoveryResult`` with ``ok=False``.
"""

import json
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


EMPTY = "empty"
PARSE_FAILED = "parse_failed"

STAGE_DIRECT = "direct"
STAGE_FENCED = "fenced"
STAGE_BRACKET_SCAN = "bracket_scan"
STAGE_COMMA_REPAIR = "comma_repair"

# Language tag: any word followed by whitespace, or json glued to the payload
_OPENING_FENCE = re.compile(r"^```(?:[\w+.-]+(?=\s)|json|JSON)?\s*", re.MULTILINE)
_CLOSING_FENCE = re.compile(r"```\s*$", re.MULTILINE)
_TRAILING_COMMA = re.compile(r",\s*([}\]])")

_PARSE_ERRORS = (ValueError, RecursionError)

_OPENERS = "{["
_CLOSERS = "}]"


class RecoveryResult(BaseModel):
    """Outcome of a recovery attempt: a parsed value or a failure reason."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None
    error: Optional[str] = None
    stage: Optional[str] = None

    @classmethod
    def success(cls, value: Any, stage: str = STAGE_DIRECT) -> "RecoveryResult":
        return cls(ok=True, value=value, stage=stage)

    @classmethod
    def failure(cls, reason: str) -> "RecoveryResult":
        return cls(ok=False, error=reason)


def _reject_constant(name: str):
    # NaN / Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _strict_loads(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def strip_code_fences(text: str) -> str:
    """Remove the first opening fence (with its language tag) and the first closing fence."""
    if not text or not isinstance(text, str):
        return ""
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def find_first_json(text: str) -> Optional[str]:
    """
    Return the first balanced top-level ``{...}`` or ``[...]`` block.

    Object and array nesting share a single depth counter, so bracket types
    are not matched against each other and quotes are not tracked. Scanning
    stops at the first block that closes back to depth zero.
    """
    if not text or not isinstance(text, str):
        return None

    start = -1
    depth = 0
    for i, ch in enumerate(text):
        if ch in _OPENERS:
            if depth == 0:
                start = i
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
            if depth == 0 and start != -1:
                return text[start:i + 1]
    return None


def remove_trailing_commas(text: str) -> str:
    """Drop commas that sit directly (modulo whitespace) before } or ]."""
    return _TRAILING_COMMA.sub(r"\1", text)


def recover(raw: Any) -> RecoveryResult:
    """
    Recover a JSON value from raw model output.

    Args:
        raw: Text returned by the provider (``None`` is allowed)

    Returns:
        ``RecoveryResult.success`` with the parsed value and winning stage, or
        ``RecoveryResult.failure`` with ``"empty"`` / ``"parse_failed"``.
    """
    if raw is None:
        return RecoveryResult.failure(EMPTY)
    text = raw if isinstance(raw, str) else str(raw)
    if text == "":
        return RecoveryResult.failure(EMPTY)

    try:
        return RecoveryResult.success(_strict_loads(text), STAGE_DIRECT)
    except _PARSE_ERRORS:
        pass

    text = strip_code_fences(text)
    try:
        return RecoveryResult.success(_strict_loads(text), STAGE_FENCED)
    except _PARSE_ERRORS:
        pass

    candidate = find_first_json(text)
    if candidate:
        try:
            return RecoveryResult.success(_strict_loads(candidate), STAGE_BRACKET_SCAN)
        except _PARSE_ERRORS:
            pass

    try:
        return RecoveryResult.success(_strict_loads(remove_trailing_commas(text)), STAGE_COMMA_REPAIR)
    except _PARSE_ERRORS:
        return RecoveryResult.failure(PARSE_FAILED)
