"""
AI Router Module - The Request Orchestrator.

Answers content tasks with the active provider, falling back to the local
synthesizer when no provider is configured or the provider call fails.
"""

from contentai.ai.router.orchestrator import (
    OrchestratorConfig,
    RequestOrchestrator,
    build_orchestrator,
    build_provider,
    fallback_banner,
)

__all__ = [
    "OrchestratorConfig",
    "RequestOrchestrator",
    "build_orchestrator",
    "build_provider",
    "fallback_banner",
]
