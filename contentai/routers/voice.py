"""
Voice Router - API endpoints for voice and text commands.

Speech is normally recognized on the client; the client posts the
transcript (with the recognizer's confidence) to /voice/interpret or
/voice/execute. Typed and quick-action phrases use the same endpoints.

Endpoints:
- POST /voice/interpret   Phrase → VoiceCommand (nothing is executed)
- POST /voice/execute     Phrase → VoiceCommand → device controller result
- POST /voice/listen      Listen with the server's recognizer (503 if none)
- GET  /voice/commands    Quick commands and supported phrases per language
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from contentai.ai.intent import (
    LOCALES,
    CommandCategory,
    CommandInterpreter,
    CommandSource,
    Language,
    QuickCommand,
    SpeechRecognitionError,
    SpeechSession,
    UnsupportedEnvironmentError,
    VoiceCommand,
    command_category,
)
from contentai.core.config import settings
from contentai.deps import get_device_controller, get_interpreter, get_speech_session
from contentai.services.device_control import DeviceController, SystemCommand


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/voice", tags=["voice"])


# ---------------------------------------------------------------------------
# REQUEST/RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

def _default_language() -> Language:
    return Language(settings.DEFAULT_VOICE_LANGUAGE)


class CommandRequest(BaseModel):
    """
    Request schema for /voice/interpret and /voice/execute.

    Example:
    {
        "phrase": "Open YouTube",
        "language": "en",
        "source": "typed"
    }
    """
    phrase: str = Field(..., min_length=1, max_length=500, description="Recognized or typed phrase")
    language: Language = Field(default_factory=_default_language)
    confidence: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, description="Recognizer confidence (speech only)"
    )
    source: CommandSource = CommandSource.TYPED


class InterpretResponse(BaseModel):
    command: VoiceCommand
    category: CommandCategory


class ExecuteResponse(BaseModel):
    command: VoiceCommand
    category: CommandCategory
    success: bool
    result: Optional[str] = None
    error: Optional[str] = None


class ListenResponse(BaseModel):
    command: Optional[VoiceCommand] = Field(
        default=None, description="None when a listen was already in progress"
    )


class CommandsResponse(BaseModel):
    language: Language
    locale: str
    quick_commands: List[QuickCommand]
    phrases: List[Dict[str, str]]


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/interpret", response_model=InterpretResponse)
async def interpret_command(
    request: CommandRequest,
    interpreter: CommandInterpreter = Depends(get_interpreter),
):
    """
    Interpret a phrase without running it.

    An unmatched phrase is not an error: it comes back as
    action_id "unknown-command".
    """
    command = interpreter.parse(
        request.phrase,
        request.language,
        confidence=request.confidence,
        source=request.source,
    )
    return InterpretResponse(command=command, category=command_category(command.action_id))


@router.post("/execute", response_model=ExecuteResponse)
async def execute_command(
    request: CommandRequest,
    interpreter: CommandInterpreter = Depends(get_interpreter),
    controller: DeviceController = Depends(get_device_controller),
):
    """
    Interpret a phrase and run it on the host.

    Most actions need a desktop agent and report success=false with a
    "requires desktop app" result; opening known web apps works anywhere.
    """
    command = interpreter.parse(
        request.phrase,
        request.language,
        confidence=request.confidence,
        source=request.source,
    )
    system_command = SystemCommand.from_voice_command(command)
    result = controller.execute_command(system_command)

    return ExecuteResponse(
        command=command,
        category=system_command.category,
        success=result.success,
        result=result.result,
        error=result.error,
    )


@router.post("/listen", response_model=ListenResponse)
async def listen(
    language: Optional[Language] = Query(default=None),
    session: SpeechSession = Depends(get_speech_session),
):
    """
    Listen for one phrase with the server-side recognizer.

    Returns 503 when the server has no speech capability (the default).
    """
    if language is not None:
        session.set_language(language)

    try:
        command = await session.listen()
    except UnsupportedEnvironmentError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except SpeechRecognitionError as e:
        logger.warning(f"Server-side listen failed: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return ListenResponse(command=command)


@router.get("/commands", response_model=CommandsResponse)
async def list_commands(
    language: Optional[Language] = Query(default=None),
    interpreter: CommandInterpreter = Depends(get_interpreter),
):
    """Quick commands and the key phrases the interpreter understands."""
    language = language or _default_language()
    phrases = [
        {"phrase": phrase, "action_id": action_id}
        for phrase, action_id in interpreter.tables.get(language, [])
    ]
    return CommandsResponse(
        language=language,
        locale=LOCALES[language],
        quick_commands=interpreter.quick_commands(language),
        phrases=phrases,
    )
