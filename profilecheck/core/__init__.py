"""Core pipeline: rate limiting, orchestration, scoring and export."""

from profilecheck.core.exporter import load_report, save_report, to_dict, to_json
from profilecheck.core.orchestrator import BatchOrchestrator, dynamic_batch_size
from profilecheck.core.rate_limiter import RateLimiter
from profilecheck.core.scoring import (
    VERIFICATION_THRESHOLD,
    WEIGHTS,
    build_result,
    calculate_overall_score,
    degraded_result,
    round_half_up,
)
from profilecheck.core.summary import recommendations, summarize

__all__ = [
    "BatchOrchestrator",
    "RateLimiter",
    "dynamic_batch_size",
    "calculate_overall_score",
    "build_result",
    "degraded_result",
    "round_half_up",
    "WEIGHTS",
    "VERIFICATION_THRESHOLD",
    "summarize",
    "recommendations",
    "to_json",
    "to_dict",
    "save_report",
    "load_report",
]
