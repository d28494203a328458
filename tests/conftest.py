# SPDX-License-Identifier: AGPL-3.0-only

"""
Pytest configuration and fixtures.

This module provides shared fixtures and configuration for all tests.
"""

import json

import pytest
from unittest.mock import Mock

from app import create_app
from common.llm_client import LLMClient
from prompting.config import PromptAssistantConfig
from prompting.service import PromptAssistantService


def llm_reply(text, provider="gemini", model="gemini-2.5-pro", tokens=0):
    """Shape of a successful LLMClient.call result."""
    return {"text": text, "tokens": tokens, "cost": 0.0, "provider": provider, "model": model}


@pytest.fixture
def settings():
    """Settings with both providers configured and no retries."""
    return PromptAssistantConfig(
        gemini_api_key="test-gemini-key",
        openrouter_api_key="test-openrouter-key",
        default_provider="gemini",
        llm_max_retries=1,
        cors_origins="http://localhost:5173",
        log_level="WARNING",
    )


@pytest.fixture
def style_payload():
    """Recovered style suggestions as a provider would send them."""
    return {
        "status": "success",
        "suggestedStyles": [
            {
                "id": "role",
                "name": "Role/Persona",
                "explanation": "Frame the model as a travel agent.",
                "example": "You are a seasoned travel agent planning a week in Lisbon ...",
            },
            {
                "id": "cot",
                "name": "Chain-of-Thought",
                "explanation": "Reason through budget and logistics step by step.",
                "example": "First list constraints, then plan each day ...",
            },
        ],
    }


@pytest.fixture
def make_questions():
    """Factory for a clarifying-questions payload with n questions."""
    def _make(n):
        return {
            "status": "success",
            "clarifyingQuestions": [
                {"text": f"Q{i}", "options": ["A", "B", "C", "D"]} for i in range(1, n + 1)
            ],
        }
    return _make


@pytest.fixture
def mock_llm_client():
    """Mock provider client answering with valid style suggestions."""
    client = Mock(spec=LLMClient)
    client.call.return_value = llm_reply(json.dumps({"status": "success", "suggestedStyles": []}))
    return client


@pytest.fixture
def service(mock_llm_client, settings):
    """Assistant service wired to the mock provider client."""
    return PromptAssistantService(llm_client=mock_llm_client, settings=settings)


@pytest.fixture
def app(settings, service):
    """Flask application under test."""
    flask_app = create_app(settings=settings, service=service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection."""
    for item in items:
        if "test_endpoints" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
