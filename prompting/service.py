"""
Prompt assistant service: coordinates prompt building, the provider call,
JSON recovery and response normalization for each workflow stage.
"""
import logging
from typing import Any, Dict, Optional

from common.json_recovery import recover
from common.llm_client import LLMClient
from common.metrics import RequestMetrics
from common.security import sanitize_payload
from .config import config as default_config
from .fallbacks import fallback_for
from .models import ShapeKind
from .normalizer import normalize
from .prompt_pack import build_optimize_prompt, build_questions_prompt, build_styles_prompt


logger = logging.getLogger(__name__)


class PromptAssistantService:
    """Service turning a rough idea into styles, questions and a final prompt."""

    def __init__(self, llm_client: Optional[LLMClient] = None, settings=None):
        """
        Initialize the service.

        Args:
            llm_client: Provider client (built from settings when omitted)
            settings: PromptAssistantConfig instance (module default when omitted)
        """
        self.settings = settings or default_config
        self.llm_client = llm_client or LLMClient(self.settings)

    def suggest_styles(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Recommend prompting styles for the idea."""
        payload = sanitize_payload(payload, self.settings.max_input_length)
        return self._complete(
            ShapeKind.STYLE_SUGGESTIONS,
            build_styles_prompt(payload),
            payload.get("provider"),
            payload.get("selected_model"),
        )

    def clarifying_questions(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Generate 2-5 clarifying questions for the idea."""
        payload = sanitize_payload(payload, self.settings.max_input_length)
        return self._complete(
            ShapeKind.CLARIFYING_QUESTIONS,
            build_questions_prompt(payload),
            payload.get("provider"),
            payload.get("selected_model"),
        )

    def optimize_prompt(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Produce the final optimized prompt from idea, answers and styles."""
        payload = sanitize_payload(payload, self.settings.max_input_length)
        selected_models = payload.get("selected_models") or []
        return self._complete(
            ShapeKind.OPTIMIZED_PROMPT,
            build_optimize_prompt(payload),
            payload.get("provider"),
            selected_models[0] if selected_models else None,
        )

    def _complete(self, shape: ShapeKind, prompt: str, provider: Optional[str], model: Optional[str]) -> Dict[str, Any]:
        """
        Run one provider round-trip and normalize the answer.

        Raises:
            ProviderError: The provider could not be reached or timed out
        """
        metrics = RequestMetrics(shape.value)
        metrics.mark_stage("prompt_built")

        llm_response = self.llm_client.call(prompt, provider=provider, model=model)
        metrics.add_llm_call(
            llm_response.get("tokens", 0),
            llm_response.get("cost", 0.0),
            llm_response.get("provider"),
            llm_response.get("model"),
        )
        metrics.mark_stage("llm_done")

        recovery = recover(llm_response.get("text"))
        metrics.record_recovery(recovery.stage, recovery.error)
        metrics.mark_stage("recovery_done")

        fallback = fallback_for(shape)
        result = normalize(recovery, shape, fallback, strict=self.settings.strict_validation)
        metrics.used_fallback = result is fallback
        metrics.mark_stage("normalization_done")

        metrics.finish()
        logger.info("%s request completed: %s", shape.value, metrics.to_dict())
        return result
