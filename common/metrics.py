"""
Metrics and observability utilities.
"""
import time
from typing import Dict, Any, Optional
from datetime import datetime


class RequestMetrics:
    """Track metrics for a single assistant request."""

    def __init__(self, shape: str):
        self.shape = shape
        self.start_time = time.time()
        self.end_time = None
        self.stages: Dict[str, float] = {}
        self.llm_calls = 0
        self.total_tokens = 0
        self.total_cost = 0.0
        self.provider: Optional[str] = None
        self.model: Optional[str] = None
        self.recovery_stage: Optional[str] = None
        self.recovery_error: Optional[str] = None
        self.used_fallback = False

    def mark_stage(self, stage_name: str):
        """Mark completion of a stage."""
        self.stages[stage_name] = time.time()

    def finish(self):
        """Mark request as finished."""
        self.end_time = time.time()

    def add_llm_call(self, tokens: int, cost: float = 0.0, provider: str = None, model: str = None):
        """Record an LLM call."""
        self.llm_calls += 1
        self.total_tokens += tokens or 0
        self.total_cost += cost or 0.0
        self.provider = provider or self.provider
        self.model = model or self.model

    def record_recovery(self, stage: Optional[str], error: Optional[str]):
        self.recovery_stage = stage
        self.recovery_error = error

    def duration(self) -> float:
        """Get total duration in seconds."""
        if self.end_time:
            return self.end_time - self.start_time
        return time.time() - self.start_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dict."""
        return {
            "shape": self.shape,
            "duration_seconds": self.duration(),
            "llm_calls": self.llm_calls,
            "total_tokens": self.total_tokens,
            "total_cost": self.total_cost,
            "provider": self.provider,
            "model": self.model,
            "recovery_stage": self.recovery_stage,
            "recovery_error": self.recovery_error,
            "used_fallback": self.used_fallback,
            "stages": {k: v - self.start_time for k, v in self.stages.items()},
            "start_time": datetime.fromtimestamp(self.start_time).isoformat(),
            "end_time": datetime.fromtimestamp(self.end_time).isoformat() if self.end_time else None
        }
