"""
Speech Session - single-shot listening on top of an injected recognizer.

The session is a small state machine:

    IDLE ──listen()──► LISTENING ──► RECOGNIZED ─┐
                           │   └───► ERRORED ────┼──► IDLE
                           └─stop()─► CANCELLED ─┘

Only one listen() can be in flight. A second call while listening returns
None immediately; stop() while idle does nothing. Recognizer failures are
raised once as SpeechRecognitionError and are not retried.

The recognizer is whatever the host can offer: a browser bridge, a local
engine, or UnsupportedRecognizer when there is no microphone at all.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from contentai.ai.intent.parser import CommandInterpreter, command_interpreter
from contentai.ai.intent.schemas import LOCALES, CommandSource, Language, VoiceCommand

logger = logging.getLogger("contentai.ai.intent.speech")


class UnsupportedEnvironmentError(Exception):
    """The host has no speech recognition capability."""


class SpeechRecognitionError(Exception):
    """The recognizer failed while listening."""


class ListeningState(str, Enum):
    IDLE = "idle"
    LISTENING = "listening"
    RECOGNIZED = "recognized"
    ERRORED = "errored"
    CANCELLED = "cancelled"


@dataclass
class RecognitionResult:
    """Best transcript from one listening pass."""
    transcript: str
    confidence: float


class SpeechRecognizer(ABC):
    """Speech capability injected into a SpeechSession."""

    def is_supported(self) -> bool:
        return True

    @abstractmethod
    async def recognize(self, locale: str) -> RecognitionResult:
        """
        Listen once and return the best transcript.

        Args:
            locale: Recognizer locale, e.g. "en-US" or "te-IN"

        Raises:
            Any exception on recognizer failure; cancellation aborts listening.
        """
        pass


class UnsupportedRecognizer(SpeechRecognizer):
    """Stands in when the host cannot recognize speech."""

    def is_supported(self) -> bool:
        return False

    async def recognize(self, locale: str) -> RecognitionResult:
        raise UnsupportedEnvironmentError("Speech recognition is not supported in this environment")


class SpeechSession:
    """
    Listens for one phrase at a time and interprets it.

    Usage:
        session = SpeechSession(recognizer, language="te")
        command = await session.listen()
        if command:
            print(command.action_id)
    """

    def __init__(
        self,
        recognizer: SpeechRecognizer,
        interpreter: Optional[CommandInterpreter] = None,
        language: Union[Language, str] = Language.EN,
    ):
        self.recognizer = recognizer
        self.interpreter = interpreter or command_interpreter
        self.language = Language(language)
        self.state = ListeningState.IDLE
        self.last_outcome: Optional[ListeningState] = None
        self._pending: Optional[asyncio.Future] = None
        self._stop_requested = False

    @property
    def locale(self) -> str:
        return LOCALES[self.language]

    @property
    def is_listening(self) -> bool:
        return self.state == ListeningState.LISTENING

    def is_supported(self) -> bool:
        return self.recognizer.is_supported()

    def set_language(self, language: Union[Language, str]) -> None:
        """Switch language; takes effect on the next listen()."""
        self.language = Language(language)

    def _finish(self, outcome: ListeningState) -> None:
        self.last_outcome = outcome
        self.state = ListeningState.IDLE
        self._pending = None
        self._stop_requested = False
        logger.debug(f"Speech session {outcome.value} → idle")

    async def listen(self) -> Optional[VoiceCommand]:
        """
        Listen for one phrase.

        Returns:
            The interpreted command, or None if already listening or
            stopped before a result arrived.

        Raises:
            UnsupportedEnvironmentError: No speech capability
            SpeechRecognitionError: The recognizer failed
        """
        if not self.recognizer.is_supported():
            raise UnsupportedEnvironmentError("Speech recognition is not supported in this environment")

        if self.is_listening:
            return None

        self.state = ListeningState.LISTENING
        self._pending = asyncio.ensure_future(self.recognizer.recognize(self.locale))
        try:
            result = await self._pending
        except asyncio.CancelledError:
            stopped = self._stop_requested
            self._finish(ListeningState.CANCELLED)
            if stopped:
                return None
            raise
        except UnsupportedEnvironmentError:
            self._finish(ListeningState.ERRORED)
            raise
        except Exception as e:
            self._finish(ListeningState.ERRORED)
            logger.warning(f"Speech recognition error: {e}")
            raise SpeechRecognitionError(f"Speech recognition error: {e}") from e

        if not result.transcript.strip():
            self._finish(ListeningState.ERRORED)
            raise SpeechRecognitionError("Speech recognition error: no speech detected")

        self._finish(ListeningState.RECOGNIZED)
        return self.interpreter.parse(
            result.transcript,
            self.language,
            confidence=result.confidence,
            source=CommandSource.SPEECH,
        )

    def stop(self) -> None:
        """Abort an in-flight listen(). No-op while idle."""
        if not self.is_listening or self._pending is None:
            return
        self._stop_requested = True
        self._pending.cancel()
