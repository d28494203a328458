# SPDX-License-Identifier: AGPL-3.0-only

"""
Tests for the prompt assistant service.
"""

import json

import pytest
from unittest.mock import patch

from common.llm_client import ProviderError
from prompting.fallbacks import fallback_for
from prompting.models import ShapeKind
from prompting.prompt_pack import build_optimize_prompt, format_answers
from prompting.service import PromptAssistantService
from conftest import llm_reply


@pytest.fixture
def styles_request():
    return {"idea": "Plan a week in Lisbon", "instructions": "Keep it\nunder budget"}


@pytest.fixture
def optimize_request():
    return {
        "idea": "Plan a week in Lisbon",
        "instructions": "Keep it under budget",
        "answered_questions": [{"text": "Budget?", "answer": "Low"}],
        "applied_styles": {"primary": "Role/Persona", "modifier": "Few-shot"},
        "selected_models": ["google/gemma-2-9b-it:free", "openchat/openchat-7b:free"],
        "provider": "openrouter",
    }


class TestPromptAssistantService:
    """Test suite for PromptAssistantService."""

    def test_suggest_styles(self, service, mock_llm_client, style_payload, styles_request):
        """Test recovered styles are returned as the model sent them."""
        mock_llm_client.call.return_value = llm_reply("```json\n" + json.dumps(style_payload) + "\n```")

        result = service.suggest_styles(styles_request)

        assert result == style_payload
        prompt = mock_llm_client.call.call_args[0][0]
        assert "User's Idea: Plan a week in Lisbon" in prompt
        assert "Keep it under budget" in prompt
        assert mock_llm_client.call.call_args[1] == {"provider": None, "model": None}

    def test_unparseable_reply_uses_fallback(self, service, mock_llm_client, styles_request):
        mock_llm_client.call.return_value = llm_reply("I'm sorry, I can't help with that.")
        result = service.suggest_styles(styles_request)
        assert result == fallback_for(ShapeKind.STYLE_SUGGESTIONS)

    def test_clarifying_questions_are_clamped(self, service, mock_llm_client, make_questions, styles_request):
        mock_llm_client.call.return_value = llm_reply(json.dumps(make_questions(8)))
        result = service.clarifying_questions(dict(styles_request, provider="gemini"))
        assert len(result["clarifyingQuestions"]) == 5
        assert mock_llm_client.call.call_args[1]["provider"] == "gemini"

    def test_optimize_uses_first_selected_model(self, service, mock_llm_client, optimize_request):
        mock_llm_client.call.return_value = llm_reply(
            '{"status":"success","optimizedPrompt":"```text\\nYou are a travel agent.\\n```","appliedStyles":["Role/Persona"],}',
            provider="openrouter",
        )

        result = service.optimize_prompt(optimize_request)

        assert result["optimizedPrompt"] == "```text\nYou are a travel agent.\n```"
        assert mock_llm_client.call.call_args[1] == {
            "provider": "openrouter",
            "model": "google/gemma-2-9b-it:free",
        }
        prompt = mock_llm_client.call.call_args[0][0]
        assert "Primary style: Role/Persona" in prompt
        assert "Q: Budget?\nA: Low" in prompt

    def test_empty_reply_uses_optimize_fallback(self, service, mock_llm_client, optimize_request):
        mock_llm_client.call.return_value = llm_reply("")
        result = service.optimize_prompt(optimize_request)
        assert result == fallback_for(ShapeKind.OPTIMIZED_PROMPT)
        assert "Lisbon" not in result["optimizedPrompt"]

    def test_provider_error_propagates(self, service, mock_llm_client, styles_request):
        mock_llm_client.call.side_effect = ProviderError("timeout")
        with pytest.raises(ProviderError) as exc_info:
            service.suggest_styles(styles_request)
        assert exc_info.value.code == "timeout"

    def test_strict_validation_setting(self, mock_llm_client, settings, styles_request):
        settings.strict_validation = True
        service = PromptAssistantService(llm_client=mock_llm_client, settings=settings)
        mock_llm_client.call.return_value = llm_reply('{"suggestedStyles": [{"id": "role"}]}')

        assert service.suggest_styles(styles_request) == fallback_for(ShapeKind.STYLE_SUGGESTIONS)

    def test_fallback_is_logged(self, service, mock_llm_client, styles_request):
        mock_llm_client.call.return_value = llm_reply("")
        with patch("prompting.service.logger") as mock_logger:
            service.suggest_styles(styles_request)
        metrics = mock_logger.info.call_args[0][2]
        assert metrics["used_fallback"] is True
        assert metrics["recovery_error"] == "empty"


class TestPromptPack:

    def test_format_answers(self):
        assert format_answers([{"text": "Q1", "answer": "A1"}, {"text": "Q2", "answer": "A2"}]) == \
            "Q: Q1\nA: A1\nQ: Q2\nA: A2"
        assert format_answers(None) == ""

    def test_optimize_prompt_without_modifier(self):
        prompt = build_optimize_prompt({
            "idea": "x",
            "instructions": "y",
            "applied_styles": {"primary": "Few-shot", "modifier": None},
        })
        assert "Primary style: Few-shot\nModifier style: \n" in prompt
        assert prompt.endswith("Answers:\n")
