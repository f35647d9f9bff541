"""
AI Logger - Structured logging for content and command operations.

Every entry is a JSON object embedded in the log message so that log lines
stay greppable and machine-parseable at the same time:

    [2026-01-01 12:00:00] INFO [contentai.ai] AI Request: {"event": "ai_request", ...}

Events:
- ai_request           a content task entered the orchestrator
- ai_response          an envelope left the orchestrator (any source)
- ai_fallback          a provider failure was replaced by local content
- command_interpreted  a phrase was mapped to an action id
- ai_error             an unexpected failure inside the pipeline

Prompts are truncated before logging; API keys are never logged.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any

# Configure the AI logger
logger = logging.getLogger("contentai.ai")
logger.setLevel(logging.INFO)

# Create console handler if not exists
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _preview(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class AILogger:
    """
    Structured logger for orchestrator and interpreter events.

    Usage:
        ai_logger.log_request(
            request_id="abc123",
            prompt="Write about solar energy",
            task_kind="generate",
            model="gemini-pro",
            provider="gemini",
        )
    """

    def __init__(self):
        self._logger = logger

    def log_request(
        self,
        request_id: str,
        prompt: str,
        task_kind: str,
        model: str,
        provider: Optional[str] = None,
        enhancers: Optional[list] = None,
    ) -> None:
        """
        Log a content task entering the orchestrator.

        Args:
            request_id: Unique request identifier
            prompt: The user prompt (truncated in the log)
            task_kind: generate / rewrite / summarize / translate
            model: Requested model id
            provider: Active provider name, None in simulation mode
            enhancers: Requested enhancer ids
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "task_kind": task_kind,
            "provider": provider,
            "model": model,
            "enhancers": enhancers or [],
            "prompt_length": len(prompt),
            "prompt_preview": _preview(prompt, 100),
            "timestamp": _now(),
        }
        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def log_response(
        self,
        request_id: str,
        source: str,
        model: str,
        confidence: float,
        latency_ms: float,
        content_length: int,
        provider: Optional[str] = None,
        tokens: int = 0,
        error_kind: Optional[str] = None,
    ) -> None:
        """
        Log an envelope leaving the orchestrator.

        Args:
            request_id: Request identifier (for correlation)
            source: provider / simulated / fallback / error
            model: Model id reported in the envelope
            confidence: Envelope confidence
            latency_ms: End-to-end elapsed time
            content_length: Length of the returned content
            provider: Provider name if one was called
            tokens: Total tokens reported by the provider
            error_kind: Classified failure kind, if any
        """
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            "source": source,
            "provider": provider,
            "model": model,
            "confidence": round(confidence, 3),
            "latency_ms": round(latency_ms, 2),
            "tokens": tokens,
            "response_length": content_length,
            "timestamp": _now(),
        }
        if error_kind:
            log_data["error_kind"] = error_kind

        level = logging.INFO if source in ("provider", "simulated") else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def log_fallback(
        self,
        request_id: str,
        provider: str,
        error_kind: str,
        error: str,
    ) -> None:
        """Log a provider failure that is being replaced by local content."""
        log_data = {
            "event": "ai_fallback",
            "request_id": request_id,
            "provider": provider,
            "error_kind": error_kind,
            "error": _preview(error, 200),
            "timestamp": _now(),
        }
        self._logger.warning(f"AI Fallback: {json.dumps(log_data)}")

    def log_command(
        self,
        request_id: str,
        phrase: str,
        language: str,
        action: str,
        parameters: Optional[Dict[str, Any]] = None,
        confidence: float = 0.0,
        source: str = "typed",
    ) -> None:
        """
        Log an interpreted voice or text command.

        Args:
            request_id: Request identifier
            phrase: Recognized or typed phrase (truncated)
            language: Language tag (en / te)
            action: Resolved action id
            parameters: Extracted parameters
            confidence: Recognition confidence
            source: speech / typed / quick-action
        """
        log_data = {
            "event": "command_interpreted",
            "request_id": request_id,
            "language": language,
            "action": action,
            "parameters": parameters or {},
            "confidence": round(confidence, 3),
            "source": source,
            "phrase": _preview(phrase, 50),
            "timestamp": _now(),
        }
        self._logger.info(f"Command Interpreted: {json.dumps(log_data, ensure_ascii=False)}")

    def log_error(
        self,
        request_id: str,
        error: str,
        stage: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an error in the pipeline.

        Args:
            request_id: Request identifier
            error: Error message
            stage: Where the error occurred (provider, synthesis, execution)
            metadata: Additional context
        """
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "error": error,
            "stage": stage,
            "timestamp": _now(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.error(f"AI Error: {json.dumps(log_data)}")


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
ai_logger = AILogger()
