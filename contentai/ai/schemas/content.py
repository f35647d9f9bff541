"""
Content Schemas - Pydantic models for content tasks and responses.

ContentTask is the orchestrator's input, ResponseEnvelope its output.
Preferences are a tagged union keyed by ``kind`` so each task kind carries
exactly the fields it needs:

    GeneratePrefs   → content_type, tone, length
    RewritePrefs    → rewrite_style
    SummarizePrefs  → summary_type, summary_length
    TranslatePrefs  → source_lang, target_lang
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from contentai.ai.providers.errors import ErrorKind


class TaskKind(str, Enum):
    """The four content tools."""
    GENERATE = "generate"
    REWRITE = "rewrite"
    SUMMARIZE = "summarize"
    TRANSLATE = "translate"


class ResponseSource(str, Enum):
    """Which path produced an envelope."""
    PROVIDER = "provider"    # Real provider call succeeded
    SIMULATED = "simulated"  # No credential, local synthesizer
    FALLBACK = "fallback"    # Provider failed, local synthesizer with diagnostic banner
    ERROR = "error"          # Synthesizer failed too, error block only


# ---------------------------------------------------------------------------
# PREFERENCES (tagged union)
# ---------------------------------------------------------------------------

class GeneratePrefs(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["generate"] = "generate"
    content_type: str = "blog-post"
    tone: str = "professional"
    length: str = "medium"


class RewritePrefs(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rewrite"] = "rewrite"
    rewrite_style: str = "improve"


class SummarizePrefs(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["summarize"] = "summarize"
    summary_type: str = "bullet-points"
    summary_length: str = "medium"


class TranslatePrefs(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["translate"] = "translate"
    source_lang: str = "en"
    target_lang: str = "es"


Preferences = Annotated[
    Union[GeneratePrefs, RewritePrefs, SummarizePrefs, TranslatePrefs],
    Field(discriminator="kind"),
]

DEFAULT_PREFERENCES = {
    TaskKind.GENERATE: GeneratePrefs,
    TaskKind.REWRITE: RewritePrefs,
    TaskKind.SUMMARIZE: SummarizePrefs,
    TaskKind.TRANSLATE: TranslatePrefs,
}


# ---------------------------------------------------------------------------
# TASK
# ---------------------------------------------------------------------------

class ModelConfig(BaseModel):
    """
    Model and enhancer selection for a task.

    temperature and max_tokens are not range-checked here: each provider
    clamps them to its own documented range.
    """
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str = "gemini-pro"
    temperature: float = 0.7
    max_tokens: int = 2000
    system_prompt: Optional[str] = None
    enhancers: List[str] = Field(default_factory=list)


class ContentTask(BaseModel):
    """
    A single content request, built fresh per user action.

    Example:
        task = ContentTask(
            prompt="Write about solar energy",
            task_kind=TaskKind.GENERATE,
            preferences=GeneratePrefs(tone="casual"),
        )
    """
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    prompt: str = Field(min_length=1, description="Primary user message")
    task_kind: TaskKind = TaskKind.GENERATE
    config: ModelConfig = Field(default_factory=ModelConfig)
    preferences: Preferences

    @model_validator(mode="before")
    @classmethod
    def _default_preferences(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("preferences") is None:
            kind = TaskKind(data.get("task_kind", TaskKind.GENERATE))
            data = {**data, "preferences": DEFAULT_PREFERENCES[kind]()}
        return data

    @model_validator(mode="after")
    def _check_preferences(self) -> "ContentTask":
        if not self.prompt.strip():
            raise ValueError("prompt must not be blank")
        if self.preferences.kind != self.task_kind.value:
            raise ValueError(
                f"preferences kind '{self.preferences.kind}' does not match task kind '{self.task_kind.value}'"
            )
        return self


# ---------------------------------------------------------------------------
# RESPONSE ENVELOPE
# ---------------------------------------------------------------------------

class ResponseEnvelope(BaseModel):
    """
    Normalized orchestrator output, identical in shape on every path.

    content and confidence are always populated; content is never empty.
    """
    model_config = ConfigDict(protected_namespaces=())

    content: str = Field(min_length=1)
    model_id: str
    confidence: float = Field(ge=0.1, le=0.98)
    elapsed_ms: float = Field(ge=0.0)
    enhancements_applied: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    source: ResponseSource = ResponseSource.PROVIDER
    provider: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
