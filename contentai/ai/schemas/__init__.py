"""
AI Schemas - Request and response models for the content tools.
"""

from contentai.ai.schemas.content import (
    TaskKind,
    ResponseSource,
    GeneratePrefs,
    RewritePrefs,
    SummarizePrefs,
    TranslatePrefs,
    Preferences,
    ModelConfig,
    ContentTask,
    ResponseEnvelope,
)

__all__ = [
    "TaskKind",
    "ResponseSource",
    "GeneratePrefs",
    "RewritePrefs",
    "SummarizePrefs",
    "TranslatePrefs",
    "Preferences",
    "ModelConfig",
    "ContentTask",
    "ResponseEnvelope",
]
