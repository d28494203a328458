"""Shared utilities: JSON recovery, provider client, sanitization, rate limiting, metrics."""
