"""
Per-client rate limiting for the API, backed by Flask-Limiter.
"""
import logging

from flask import Flask, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address


logger = logging.getLogger(__name__)


def per_window(max_requests: int, window_seconds: int) -> str:
    """Limit string understood by Flask-Limiter, e.g. ``20 per 600 seconds``."""
    return f"{max_requests} per {window_seconds} seconds"


def create_limiter(app: Flask, storage_uri: str = "memory://") -> Limiter:
    """
    Attach a limiter keyed by client address to ``app``.

    No default limits are set; views opt in with ``@limiter.limit(...)``.
    Exceeding a limit answers 429 with the standard error body plus the
    ``X-RateLimit-*`` and ``Retry-After`` headers.
    """
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        storage_uri=storage_uri,
        strategy="moving-window",
        headers_enabled=True,
    )

    @app.errorhandler(429)
    def rate_limited(e):
        logger.warning("Rate limit exceeded for %s on %s: %s", get_remote_address(), request.path, e.description)
        return jsonify(status="error", error="rate_limited"), 429

    return limiter
