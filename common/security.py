"""
Security utilities: sanitization of user text before it is placed in a prompt.
"""
import re
from typing import Any, Dict


DEFAULT_MAX_LENGTH = 9000

CONTROL_CHARS_PATTERN = re.compile(r'[\x00-\x1f\x7f]')
WHITESPACE_PATTERN = re.compile(r'\s+')


def sanitize_text(value: Any, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Neutralize user text for prompt embedding.
    Control characters become spaces, code fences are broken open so the user
    cannot close ours, whitespace is collapsed and the result truncated.
    """
    if not isinstance(value, str):
        return ""

    text = CONTROL_CHARS_PATTERN.sub(" ", value).replace("```", "``` ")
    text = WHITESPACE_PATTERN.sub(" ", text).strip()

    if len(text) > max_length:
        text = text[:max_length]
    return text


def sanitize_payload(payload: Dict[str, Any], max_length: int = DEFAULT_MAX_LENGTH) -> Dict[str, Any]:
    """
    Sanitize the free-text fields of a validated request payload.
    Returns a new dict; the input is left untouched.
    """
    if not isinstance(payload, dict):
        return payload

    out = dict(payload)
    for key in ("idea", "instructions"):
        if out.get(key):
            out[key] = sanitize_text(out[key], max_length)

    if isinstance(out.get("answered_questions"), list):
        out["answered_questions"] = [
            {
                "text": sanitize_text(q.get("text"), max_length),
                "answer": sanitize_text(q.get("answer"), max_length),
            }
            for q in out["answered_questions"]
        ]

    styles = out.get("applied_styles")
    if styles:
        out["applied_styles"] = {
            "primary": sanitize_text(styles.get("primary"), max_length),
            "modifier": sanitize_text(styles["modifier"], max_length) if styles.get("modifier") else None,
        }

    return out
