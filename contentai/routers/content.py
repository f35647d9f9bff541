"""
Content Router - API endpoints for the content tools.

The router only handles HTTP concerns. Every request is turned into a
ContentTask and handed to the RequestOrchestrator, which always answers
with a ResponseEnvelope (provider output, demo content, or a fallback with
a diagnostic banner), so these endpoints do not fail on provider errors.

Endpoints:
- POST /content/process       Full ContentTask → ResponseEnvelope
- POST /content/generate      Raw input + preferences, prompt assembled here
- POST /content/rewrite
- POST /content/summarize
- POST /content/translate
- GET  /content/models        Model catalog
- GET  /content/enhancers     Enhancer catalog
- GET  /content/status        Active provider and mode
- PUT  /content/credentials   Store an API key and activate that provider
- GET  /content/stats         Usage metrics
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field, field_validator

from contentai.ai.catalog import ENHANCERS, MODELS
from contentai.ai.monitoring import ai_metrics
from contentai.ai.prompts import build_tool_prompt
from contentai.ai.providers import ProviderType, create_provider
from contentai.ai.router import RequestOrchestrator
from contentai.ai.schemas import (
    ContentTask,
    GeneratePrefs,
    ModelConfig,
    ResponseEnvelope,
    RewritePrefs,
    SummarizePrefs,
    TaskKind,
    TranslatePrefs,
)
from contentai.core.credentials import CredentialStore
from contentai.deps import get_credential_store, get_orchestrator


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/content", tags=["content"])


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class ToolRequest(BaseModel):
    """
    Raw input for one of the content tools.

    Example:
    {
        "text": "Remote work in small teams",
        "preferences": {"kind": "generate", "tone": "casual"},
        "config": {"model_id": "creative-writer", "enhancers": ["seo-enhancer"]}
    }
    """
    text: str = Field(..., min_length=1, max_length=20000, description="Topic or source text")
    config: ModelConfig = Field(default_factory=ModelConfig)

    @field_validator("text")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be blank")
        return value


class GenerateRequest(ToolRequest):
    preferences: GeneratePrefs = Field(default_factory=GeneratePrefs)


class RewriteRequest(ToolRequest):
    preferences: RewritePrefs = Field(default_factory=RewritePrefs)


class SummarizeRequest(ToolRequest):
    preferences: SummarizePrefs = Field(default_factory=SummarizePrefs)


class TranslateRequest(ToolRequest):
    preferences: TranslatePrefs = Field(default_factory=TranslatePrefs)


class CredentialRequest(BaseModel):
    """
    Example:
    {
        "provider": "openai",
        "api_key": "sk-..."
    }
    """
    provider: ProviderType
    api_key: str = Field(..., min_length=1, max_length=500)


class StatusResponse(BaseModel):
    mode: str = Field(description="live or simulation")
    provider: Optional[str] = None
    configured: bool
    model: Optional[str] = None
    request_timeout: float
    stored_credentials: Dict[str, bool]


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------

def _tool_task(kind: TaskKind, request: ToolRequest) -> ContentTask:
    """Assemble the tool prompt and add the tool's own optimizer enhancer."""
    enhancers = list(request.config.enhancers)
    optimizer = f"{kind.value}-optimizer"
    if optimizer not in enhancers:
        enhancers.append(optimizer)

    return ContentTask(
        prompt=build_tool_prompt(kind, request.text, request.preferences),
        task_kind=kind,
        config=request.config.model_copy(update={"enhancers": enhancers}),
        preferences=request.preferences,
    )


def _status(orchestrator: RequestOrchestrator, store: CredentialStore) -> StatusResponse:
    return StatusResponse(
        **orchestrator.status(),
        stored_credentials={p.value: store.has(p.value) for p in ProviderType},
    )


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/process", response_model=ResponseEnvelope)
async def process_task(
    task: ContentTask,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
):
    """
    Process a fully specified content task.

    The prompt is sent as-is; preferences, enhancers and the optional
    system prompt are folded into the provider's system instructions.
    """
    return await orchestrator.process(task)


@router.post("/generate", response_model=ResponseEnvelope)
async def generate_content(
    request: GenerateRequest,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
):
    """Create new content about a topic."""
    return await orchestrator.process(_tool_task(TaskKind.GENERATE, request))


@router.post("/rewrite", response_model=ResponseEnvelope)
async def rewrite_content(
    request: RewriteRequest,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
):
    """Rewrite existing text in a new style."""
    return await orchestrator.process(_tool_task(TaskKind.REWRITE, request))


@router.post("/summarize", response_model=ResponseEnvelope)
async def summarize_content(
    request: SummarizeRequest,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
):
    """Summarize text in the requested format and length."""
    return await orchestrator.process(_tool_task(TaskKind.SUMMARIZE, request))


@router.post("/translate", response_model=ResponseEnvelope)
async def translate_content(
    request: TranslateRequest,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
):
    """
    Translate text between languages.

    Without a configured provider the response is a clearly labeled
    placeholder, not a translation.
    """
    return await orchestrator.process(_tool_task(TaskKind.TRANSLATE, request))


@router.get("/models")
async def list_models() -> List[Dict[str, Any]]:
    """Selectable model presets."""
    return [asdict(model) for model in MODELS]


@router.get("/enhancers")
async def list_enhancers() -> List[Dict[str, Any]]:
    """Enhancers that can be stacked on a request."""
    return [asdict(enhancer) for enhancer in ENHANCERS]


@router.get("/status", response_model=StatusResponse)
async def get_status(
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
    store: CredentialStore = Depends(get_credential_store),
):
    """Which provider is active and whether requests are live or simulated."""
    return _status(orchestrator, store)


@router.put("/credentials", response_model=StatusResponse)
async def set_credentials(
    request: CredentialRequest,
    orchestrator: RequestOrchestrator = Depends(get_orchestrator),
    store: CredentialStore = Depends(get_credential_store),
):
    """
    Store an API key and make its provider the active one.

    The key is kept in the local credential file and is only ever sent to
    the provider it belongs to. Keys that are obviously not keys (example
    placeholders, too short) are rejected without being stored.
    """
    provider = create_provider(request.provider.value, api_key=request.api_key.strip())
    if not provider.is_configured():
        raise HTTPException(
            status_code=422,
            detail=f"The {request.provider.value} API key does not look valid",
        )

    store.set(request.provider.value, request.api_key.strip())
    orchestrator.use_provider(provider)
    logger.info(f"Active provider switched to {request.provider.value}")
    return _status(orchestrator, store)


@router.get("/stats")
async def get_stats() -> Dict[str, Any]:
    """
    Usage statistics since startup.

    Requests by source (provider / simulated / fallback / error), by
    provider, failure kinds, token totals and average latency.
    """
    return ai_metrics.get_stats().to_dict()
