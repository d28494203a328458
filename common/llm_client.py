"""
LLM client wrapper with retries, timeouts, and provider abstraction.
"""
import logging
import time
from typing import Optional, Dict, Any

import requests


logger = logging.getLogger(__name__)

TIMEOUT = "timeout"
PROVIDER_UNAVAILABLE = "provider_unavailable"

SUPPORTED_PROVIDERS = ("gemini", "openrouter")

OPENROUTER_SYSTEM_PROMPT = "You are a precise JSON-only generator."

# Free OpenRouter models offered to the front-end
OPENROUTER_FREE_MODELS = [
    {"id": "mistralai/mistral-7b-instruct:free", "name": "Mistral 7B Instruct", "description": "Fast and efficient open-source model"},
    {"id": "meta-llama/llama-3.2-3b-instruct:free", "name": "LLaMA 3.2 3B Instruct", "description": "Meta's open-source language model"},
    {"id": "microsoft/phi-3-mini-128k-instruct:free", "name": "Phi-3 Mini 128K", "description": "Microsoft's compact instruction model"},
    {"id": "huggingface/zephyr-7b-beta:free", "name": "Zephyr 7B Beta", "description": "Fine-tuned for helpful conversations"},
    {"id": "google/gemma-2-9b-it:free", "name": "Gemma 2 9B Instruct", "description": "Google's instruction-tuned model"},
    {"id": "openchat/openchat-7b:free", "name": "OpenChat 7B", "description": "Open-source conversational model"},
]


class ProviderError(Exception):
    """Provider call failed; ``code`` is ``timeout`` or ``provider_unavailable``."""

    def __init__(self, code: str, message: str = ""):
        super().__init__(message or code)
        self.code = code


class LLMClient:
    """Unified client for calling LLM providers (Gemini, OpenRouter)."""

    def __init__(self, settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.timeout = settings.provider_timeout
        self.max_retries = settings.llm_max_retries
        self.session = session or requests.Session()

    def call(self, prompt: str, provider: Optional[str] = None, model: Optional[str] = None) -> Dict[str, Any]:
        """
        Call LLM with retry logic.
        Returns: {"text": str, "tokens": int, "cost": float, "provider": str, "model": str}
        """
        provider = (provider or self.settings.default_provider or "gemini").lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ProviderError(PROVIDER_UNAVAILABLE, f"Unknown provider: {provider}")

        for attempt in range(self.max_retries):
            try:
                if provider == "openrouter":
                    return self._call_openrouter(prompt, model)
                return self._call_gemini(prompt, model)
            except ProviderError as e:
                logger.warning("%s call failed (attempt %d/%d): %s", provider, attempt + 1, self.max_retries, e)
                if attempt == self.max_retries - 1:
                    raise
                time.sleep(2 ** attempt)  # Exponential backoff

        raise ProviderError(PROVIDER_UNAVAILABLE)

    def _post(self, url: str, **kwargs) -> Dict[str, Any]:
        try:
            resp = self.session.post(url, timeout=self.timeout, **kwargs)
        except requests.Timeout as e:
            raise ProviderError(TIMEOUT, str(e)) from e
        except requests.RequestException as e:
            raise ProviderError(PROVIDER_UNAVAILABLE, str(e)) from e

        if not resp.ok:
            raise ProviderError(PROVIDER_UNAVAILABLE, f"HTTP {resp.status_code}")
        try:
            return resp.json()
        except ValueError as e:
            raise ProviderError(PROVIDER_UNAVAILABLE, "Response body is not JSON") from e

    def _call_gemini(self, prompt: str, model: Optional[str]) -> Dict[str, Any]:
        """Call Gemini generateContent."""
        api_key = self.settings.gemini_api_key
        if not api_key:
            raise ProviderError(PROVIDER_UNAVAILABLE, "GEMINI_API_KEY not set")

        # Model is fixed by configuration; per-request model ids are OpenRouter ids
        model_name = self.settings.gemini_model
        url = f"{self.settings.gemini_api_url.rstrip('/')}/models/{model_name}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}

        data = self._post(
            url,
            params={"key": api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )

        try:
            text = data["candidates"][0]["content"]["parts"][0]["text"] or ""
        except (KeyError, IndexError, TypeError):
            text = ""
        tokens = (data.get("usageMetadata") or {}).get("totalTokenCount", 0) if isinstance(data, dict) else 0

        return {"text": str(text), "tokens": tokens, "cost": 0.0, "provider": "gemini", "model": model_name}

    def _call_openrouter(self, prompt: str, model: Optional[str]) -> Dict[str, Any]:
        """Call OpenRouter chat completions."""
        api_key = self.settings.openrouter_api_key
        if not api_key:
            raise ProviderError(PROVIDER_UNAVAILABLE, "OPENROUTER_API_KEY not set")

        model_name = model or self.settings.openrouter_model
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json"
        }
        payload = {
            "model": model_name,
            "messages": [
                {"role": "system", "content": OPENROUTER_SYSTEM_PROMPT},
                {"role": "user", "content": prompt}
            ],
            "response_format": {"type": "json_object"}
        }

        data = self._post(self.settings.openrouter_api_url, headers=headers, json=payload)

        try:
            text = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            text = ""
        tokens = (data.get("usage") or {}).get("total_tokens", 0) if isinstance(data, dict) else 0

        return {"text": str(text), "tokens": tokens, "cost": 0.0, "provider": "openrouter", "model": model_name}
