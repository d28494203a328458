"""
Pydantic models for the prompt assistant.

This module defines the domain responses returned to the wizard UI for each
workflow stage (style suggestions, clarifying questions, optimized prompt) and
the shape kinds the normalizer dispatches on. Responses serialize with the
camelCase keys the front-end reads.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class ResponseStatus(str, Enum):
    """Discriminant carried by every domain response."""
    SUCCESS = "success"
    ERROR = "error"


class _DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary using wire keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StyleSuggestion(_DomainModel):
    """A prompting style recommended for the user's idea."""
    id: str = Field(description="Stable style identifier")
    name: str = Field(description="Display name")
    explanation: str = Field(description="Why the style fits, 1-2 sentences")
    example: str = Field(description="Short example tailored to the idea")


class Question(_DomainModel):
    """A multiple-choice clarifying question."""
    text: str = Field(description="Question text")
    options: List[str] = Field(default_factory=list, description="Answer options (4-6 typical)")


class StyleSuggestions(_DomainModel):
    status: ResponseStatus = ResponseStatus.SUCCESS
    suggested_styles: List[StyleSuggestion] = Field(alias="suggestedStyles")


class ClarifyingQuestions(_DomainModel):
    status: ResponseStatus = ResponseStatus.SUCCESS
    clarifying_questions: List[Question] = Field(alias="clarifyingQuestions")


class OptimizedPrompt(_DomainModel):
    status: ResponseStatus = ResponseStatus.SUCCESS
    optimized_prompt: str = Field(alias="optimizedPrompt", description="Fenced code block")
    applied_styles: List[str] = Field(default_factory=list, alias="appliedStyles")


class ErrorResponse(_DomainModel):
    """Terminal error for a request; carries a reason code instead of payload."""
    status: ResponseStatus = ResponseStatus.ERROR
    error: str
    details: Optional[Dict[str, Any]] = None


class ShapeKind(str, Enum):
    """Workflow stage a provider response is expected to answer."""
    STYLE_SUGGESTIONS = "styles"
    CLARIFYING_QUESTIONS = "questions"
    OPTIMIZED_PROMPT = "optimize"

    @property
    def field(self) -> str:
        """Wire key holding the payload for this shape."""
        return _SHAPE_FIELDS[self]

    @property
    def field_type(self) -> type:
        """Python type the payload field must have to be usable."""
        return _SHAPE_FIELD_TYPES[self]

    @property
    def model(self) -> Type[_DomainModel]:
        return _SHAPE_MODELS[self]


_SHAPE_FIELDS = {
    ShapeKind.STYLE_SUGGESTIONS: "suggestedStyles",
    ShapeKind.CLARIFYING_QUESTIONS: "clarifyingQuestions",
    ShapeKind.OPTIMIZED_PROMPT: "optimizedPrompt",
}

_SHAPE_FIELD_TYPES = {
    ShapeKind.STYLE_SUGGESTIONS: list,
    ShapeKind.CLARIFYING_QUESTIONS: list,
    ShapeKind.OPTIMIZED_PROMPT: str,
}

_SHAPE_MODELS = {
    ShapeKind.STYLE_SUGGESTIONS: StyleSuggestions,
    ShapeKind.CLARIFYING_QUESTIONS: ClarifyingQuestions,
    ShapeKind.OPTIMIZED_PROMPT: OptimizedPrompt,
}
