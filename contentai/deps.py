"""
Dependencies module - reusable FastAPI dependencies for route handlers.

Each dependency returns a process-wide instance built from settings on
first use. Tests replace them through app.dependency_overrides.
"""

from functools import lru_cache

from contentai.ai.intent import (
    CommandInterpreter,
    SpeechSession,
    UnsupportedRecognizer,
    command_interpreter,
)
from contentai.ai.router import RequestOrchestrator, build_orchestrator
from contentai.core.config import settings
from contentai.core.credentials import CredentialStore
from contentai.services.device_control import DeviceController, device_controller


@lru_cache()
def get_credential_store() -> CredentialStore:
    """Credential store backed by settings.CREDENTIALS_FILE."""
    return CredentialStore(settings.CREDENTIALS_FILE)


@lru_cache()
def get_orchestrator() -> RequestOrchestrator:
    """
    The request orchestrator, wired to settings.ACTIVE_PROVIDER.

    Without a usable credential the orchestrator runs in simulation mode.
    """
    return build_orchestrator(settings, get_credential_store())


def get_interpreter() -> CommandInterpreter:
    return command_interpreter


def get_device_controller() -> DeviceController:
    return device_controller


@lru_cache()
def get_speech_session() -> SpeechSession:
    """
    Server-side speech session.

    A server has no microphone, so the default recognizer reports the
    capability as unsupported; clients recognize speech themselves and
    post the transcript to /voice/interpret.
    """
    return SpeechSession(UnsupportedRecognizer(), language=settings.DEFAULT_VOICE_LANGUAGE)
