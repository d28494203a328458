"""Prompt assistant workflow: models, fallbacks, normalization, service and endpoints."""
