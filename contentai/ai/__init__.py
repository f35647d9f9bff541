"""
AI Module - Content generation and command interpretation.

Architecture Overview:
=====================

┌─────────────────────────────────────────────────────────────────────────┐
│                       Request Orchestrator                              │
│        ContentTask → one provider attempt → ResponseEnvelope            │
└───────────────────────────────┬─────────────────────────────────────────┘
                                │
        ┌───────────────────────┼───────────────────────┐
        │                       │                       │
        ▼                       ▼                       ▼
┌───────────────┐     ┌───────────────┐     ┌───────────────┐
│    Gemini     │     │    OpenAI     │     │     Local     │
│  (default)    │     │  (optional)   │     │  Synthesizer  │
│               │     │               │     │ (demo content)│
└───────────────┘     └───────────────┘     └───────────────┘

Module Structure:
================
- providers/: AI provider clients (Gemini, OpenAI) and the failure taxonomy
- router/: The request orchestrator (provider call, fallback, envelope)
- synthesizer/: Template-driven local content for simulation and fallback
- prompts/: System prompt construction per task kind
- schemas/: ContentTask and ResponseEnvelope models
- intent/: Voice/text command interpretation and the speech session
- monitoring/: Structured logging and usage metrics
- catalog.py: Model and enhancer registries
- scoring.py: Confidence and suggestion heuristics
"""

# Version of the AI module
__version__ = "0.1.0"

# Re-export main components for easy imports
from contentai.ai.router.orchestrator import RequestOrchestrator, OrchestratorConfig
from contentai.ai.intent.parser import CommandInterpreter, command_interpreter
from contentai.ai.schemas import ContentTask, ResponseEnvelope, TaskKind

__all__ = [
    "RequestOrchestrator",
    "OrchestratorConfig",
    "CommandInterpreter",
    "command_interpreter",
    "ContentTask",
    "ResponseEnvelope",
    "TaskKind",
]
