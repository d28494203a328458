# SPDX-License-Identifier: AGPL-3.0-only

"""
Tests for prompt assistant models and fallback constants.

This module tests the Pydantic models returned to the wizard UI.
"""

import pytest
from pydantic import ValidationError

from prompting.fallbacks import (
    FALLBACK_OPTIMIZED_PROMPT,
    FALLBACK_QUESTIONS,
    FALLBACK_STYLES,
    fallback_for,
)
from prompting.models import (
    ClarifyingQuestions,
    ErrorResponse,
    OptimizedPrompt,
    Question,
    ResponseStatus,
    ShapeKind,
    StyleSuggestion,
    StyleSuggestions,
)


class TestShapeKind:
    """Test ShapeKind enum."""

    def test_shape_values(self):
        assert ShapeKind("styles") is ShapeKind.STYLE_SUGGESTIONS
        assert ShapeKind("questions") is ShapeKind.CLARIFYING_QUESTIONS
        assert ShapeKind("optimize") is ShapeKind.OPTIMIZED_PROMPT

    def test_shape_fields(self):
        assert ShapeKind.STYLE_SUGGESTIONS.field == "suggestedStyles"
        assert ShapeKind.CLARIFYING_QUESTIONS.field == "clarifyingQuestions"
        assert ShapeKind.OPTIMIZED_PROMPT.field == "optimizedPrompt"
        assert ShapeKind.OPTIMIZED_PROMPT.field_type is str
        assert ShapeKind.CLARIFYING_QUESTIONS.model is ClarifyingQuestions


class TestDomainModels:
    """Test response models and their wire format."""

    def test_style_suggestions_wire_keys(self):
        response = StyleSuggestions(suggested_styles=[
            StyleSuggestion(id="role", name="Role/Persona", explanation="e", example="x")
        ])
        assert response.to_dict() == {
            "status": "success",
            "suggestedStyles": [{"id": "role", "name": "Role/Persona", "explanation": "e", "example": "x"}],
        }

    def test_validate_from_wire_keys(self):
        response = ClarifyingQuestions.model_validate({
            "status": "success",
            "clarifyingQuestions": [{"text": "Who reads this?", "options": ["Devs", "Execs"]}],
        })
        assert response.clarifying_questions[0] == Question(text="Who reads this?", options=["Devs", "Execs"])
        assert response.status == "success"

    def test_optimized_prompt_defaults(self):
        response = OptimizedPrompt(optimized_prompt="```text\nhi\n```")
        assert response.to_dict() == {
            "status": "success",
            "optimizedPrompt": "```text\nhi\n```",
            "appliedStyles": [],
        }

    def test_error_response(self):
        assert ErrorResponse(error="timeout").to_dict() == {"status": "error", "error": "timeout"}
        assert ResponseStatus.ERROR == "error"

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            StyleSuggestion(id="role", name="Role/Persona")


class TestFallbacks:
    """Test the static fallback constants."""

    def test_style_fallback(self):
        data = FALLBACK_STYLES.to_dict()
        assert data["status"] == "success"
        assert [s["id"] for s in data["suggestedStyles"]] == ["instruction", "role", "format"]

    def test_question_fallback_is_within_clamp_range(self):
        questions = FALLBACK_QUESTIONS.to_dict()["clarifyingQuestions"]
        assert len(questions) == 3
        for question in questions:
            assert question["text"]
            assert len(question["options"]) == 4

    def test_optimized_prompt_fallback_is_fenced(self):
        data = FALLBACK_OPTIMIZED_PROMPT.to_dict()
        assert data["optimizedPrompt"].startswith("```text\n")
        assert data["optimizedPrompt"].endswith("\n```")
        assert data["appliedStyles"] == []

    def test_constants_are_frozen(self):
        with pytest.raises(ValidationError):
            FALLBACK_STYLES.status = "error"

    @pytest.mark.parametrize("shape", list(ShapeKind))
    def test_fallback_for_returns_fresh_copies(self, shape):
        first = fallback_for(shape)
        second = fallback_for(shape)
        assert first == second
        assert first is not second

        first[shape.field] = "mutated"
        assert fallback_for(shape) == second

    def test_fallback_for_accepts_shape_name(self):
        assert fallback_for("styles") == FALLBACK_STYLES.to_dict()
