"""
Monitoring Module - Structured logging and metrics for AI operations.

Usage:
    from contentai.ai.monitoring import ai_logger, ai_metrics

    ai_logger.log_request(request_id, prompt, "generate", "gemini-pro")
    ai_metrics.record_request(request_id, "simulated", "gemini-pro", 812.0, 0.63)

    stats = ai_metrics.get_stats().to_dict()
"""

from contentai.ai.monitoring.logger import AILogger, ai_logger
from contentai.ai.monitoring.metrics import AIMetrics, ai_metrics

__all__ = [
    "AILogger",
    "ai_logger",
    "AIMetrics",
    "ai_metrics",
]
