"""
Prompt Assistant – API proxy back-end

Endpoints
─────────
GET  /api/health      → {"status": "ok", "providers": {...}}
GET  /api/models      → free OpenRouter model catalogue
POST /api/styles      → suggested prompting styles
POST /api/questions   → clarifying questions
POST /api/optimize    → final optimized prompt
(no HTML rendered; the wizard UI lives in the React/Vite front-end)
"""

# SPDX-License-Identifier: AGPL-3.0-only

# ── imports ──────────────────────────────────────────────────────
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS                 # allow front-end origin

# Load environment variables from .env file before settings are read
load_dotenv()

from common.rate_limit import create_limiter
from prompting.config import PromptAssistantConfig, config as default_config
from prompting.endpoints import register_prompting_endpoints
from prompting.models import ErrorResponse
from prompting.service import PromptAssistantService


logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: PromptAssistantConfig = None, service: PromptAssistantService = None) -> Flask:
    """
    Build the Flask application.

    Args:
        settings: Configuration (module default when omitted)
        service: Assistant service (built from settings when omitted)
    """
    settings = settings or default_config
    configure_logging(settings.log_level)

    app = Flask(__name__)

    # ── config & housekeeping ───────────────────────────────────
    app.config["MAX_CONTENT_LENGTH"] = settings.max_content_length

    origins = settings.get_cors_origins()
    CORS(
        app,
        resources={r"/api/*": {"origins": origins or "*"}},
        methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    # ── ROUTES ──────────────────────────────────────────────────
    @app.get("/api/health")
    def health():
        """Used by the front-end (and uptime checks) to verify the API is alive."""
        return jsonify(status="ok", providers=settings.get_provider_status()), 200

    @app.errorhandler(413)
    def payload_too_large(e):
        return jsonify(ErrorResponse(error="payload_too_large").to_dict()), 413

    limiter = create_limiter(app, settings.rate_limit_storage_uri)
    register_prompting_endpoints(app, service or PromptAssistantService(settings=settings), settings, limiter)

    logger.info(
        "Prompt assistant configured: default_provider=%s gemini=%s openrouter=%s",
        settings.default_provider,
        "SET" if settings.gemini_api_key else "NOT SET",
        "SET" if settings.openrouter_api_key else "NOT SET",
    )
    return app


app = create_app()
