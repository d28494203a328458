"""
Response normalization for prompt assistant outputs.

Maps a recovered (untyped) JSON value onto one of the three domain shapes.
The check is shallow: once the value is an object carrying the
expected top-level field it is passed through as-is. The only repair applied
is the clarifying-question count, which the UI lays out as 2 to 5 cards.
Anything unusable is replaced wholesale by the caller's fallback.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from common.json_recovery import RecoveryResult
from .models import ResponseStatus, ShapeKind


logger = logging.getLogger(__name__)

MIN_QUESTIONS = 2
MAX_QUESTIONS = 5


def clamp_questions(items: List[Any], fallback_items: List[Any]) -> List[Any]:
    """Keep 2-5 questions: too few -> fallback list, too many -> first 5."""
    if len(items) < MIN_QUESTIONS:
        return list(fallback_items)
    if len(items) > MAX_QUESTIONS:
        return items[:MAX_QUESTIONS]
    return items


def has_expected_shape(value: Any, shape: ShapeKind) -> bool:
    """Check that a recovered value is an object carrying the shape's payload field."""
    return isinstance(value, dict) and isinstance(value.get(shape.field), shape.field_type)


def _validates(value: Dict[str, Any], shape: ShapeKind) -> bool:
    try:
        shape.model.model_validate(value)
    except ValidationError as e:
        logger.info("Recovered %s response failed strict validation: %d error(s)", shape.value, e.error_count())
        return False
    return True


def normalize(recovery: RecoveryResult, shape: ShapeKind, fallback: Dict[str, Any],
              strict: bool = False) -> Dict[str, Any]:
    """
    Normalize a recovery result to the expected domain shape.

    Args:
        recovery: Output of ``common.json_recovery.recover``
        shape: Expected shape kind
        fallback: Response to use when the recovered value is unusable
        strict: Also require the value to validate against the shape's model

    Returns:
        The recovered object (shallow copy, question count clamped) or
        ``fallback`` itself. Never raises for bad model output.
    """
    shape = ShapeKind(shape)

    if not recovery.ok:
        logger.info("Using %s fallback: recovery failed (%s)", shape.value, recovery.error)
        return fallback

    value = recovery.value
    if not has_expected_shape(value, shape):
        logger.info("Using %s fallback: recovered %s has no usable '%s' field",
                    shape.value, type(value).__name__, shape.field)
        return fallback

    if strict and not _validates(value, shape):
        return fallback

    result = dict(value)
    result.setdefault("status", ResponseStatus.SUCCESS.value)

    if shape is ShapeKind.CLARIFYING_QUESTIONS:
        questions = result[shape.field]
        result[shape.field] = clamp_questions(questions, fallback.get(shape.field) or [])
        if len(questions) < MIN_QUESTIONS:
            logger.info("Replaced %d clarifying question(s) with fallback list", len(questions))
        elif len(questions) > MAX_QUESTIONS:
            logger.info("Truncated %d clarifying questions to %d", len(questions), MAX_QUESTIONS)

    return result
