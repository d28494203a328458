"""
Flask endpoints for the prompt assistant workflow.
"""
import logging

from flask import request, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

from common.llm_client import OPENROUTER_FREE_MODELS, ProviderError, TIMEOUT
from common.rate_limit import per_window
from validators import OptimizeRequestSchema, QuestionsRequestSchema, StylesRequestSchema
from .models import ErrorResponse
from .service import PromptAssistantService


logger = logging.getLogger(__name__)


def error_response(code: str, status: int):
    return jsonify(ErrorResponse(error=code).to_dict()), status


def _handle(schema, operation):
    """Validate the JSON body, run the service operation, map failures to HTTP codes."""
    try:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error_response("invalid_payload", 400)
        try:
            payload = schema.load(body)
        except ValidationError as e:
            logger.info("Rejected %s payload: %s", request.path, e.messages)
            return error_response("invalid_payload", 400)

        try:
            result = operation(payload)
        except ProviderError as e:
            if e.code == TIMEOUT:
                return error_response("timeout", 504)
            return error_response("provider_unavailable", 502)

        return jsonify(result)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error on %s", request.path)
        return error_response("internal_error", 500)


def register_prompting_endpoints(app, service: PromptAssistantService, settings, limiter):
    """Register prompt assistant endpoints with Flask app."""
    window = settings.rate_limit_window_seconds

    styles_schema = StylesRequestSchema()
    questions_schema = QuestionsRequestSchema()
    optimize_schema = OptimizeRequestSchema()

    @app.post("/api/styles")
    @limiter.limit(per_window(settings.styles_rate_limit, window))
    def suggest_styles():
        """Recommend 2-3 prompting styles."""
        return _handle(styles_schema, service.suggest_styles)

    @app.post("/api/questions")
    @limiter.limit(per_window(settings.questions_rate_limit, window))
    def clarifying_questions():
        """Generate 2-5 clarifying questions."""
        return _handle(questions_schema, service.clarifying_questions)

    @app.post("/api/optimize")
    @limiter.limit(per_window(settings.optimize_rate_limit, window))
    def optimize_prompt():
        """Build the final optimized prompt."""
        return _handle(optimize_schema, service.optimize_prompt)

    @app.get("/api/models")
    def list_models():
        """Free OpenRouter models the UI can offer."""
        return jsonify({"models": OPENROUTER_FREE_MODELS})

