"""
Tests for the Speech Session - single-shot listening state machine.

Recognizers are faked; nothing here touches a microphone.
"""

import asyncio
from typing import List, Optional

import pytest

from contentai.ai.intent import (
    CommandSource,
    Language,
    ListeningState,
    RecognitionResult,
    SpeechRecognitionError,
    SpeechRecognizer,
    SpeechSession,
    UnsupportedEnvironmentError,
    UnsupportedRecognizer,
)


class FakeRecognizer(SpeechRecognizer):
    """Returns a canned result (or raises) after an optional delay."""

    def __init__(
        self,
        transcript: str = "Volume up",
        confidence: float = 0.9,
        error: Optional[Exception] = None,
        delay: float = 0.0,
    ):
        self.transcript = transcript
        self.confidence = confidence
        self.error = error
        self.delay = delay
        self.locales: List[str] = []

    async def recognize(self, locale: str) -> RecognitionResult:
        self.locales.append(locale)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return RecognitionResult(transcript=self.transcript, confidence=self.confidence)


class TestSupport:
    """Tests for hosts without speech capability."""

    @pytest.mark.asyncio
    async def test_unsupported_environment(self):
        session = SpeechSession(UnsupportedRecognizer())

        with pytest.raises(UnsupportedEnvironmentError):
            await session.listen()

        assert session.is_supported() is False
        assert session.state == ListeningState.IDLE

    def test_locale_per_language(self):
        session = SpeechSession(FakeRecognizer())

        assert session.locale == "en-US"
        session.set_language("te")
        assert session.locale == "te-IN"
        assert session.language == Language.TE


class TestListening:
    """Tests for a complete listening pass."""

    @pytest.mark.asyncio
    async def test_recognized_phrase_is_interpreted(self):
        recognizer = FakeRecognizer("Volume up", confidence=0.87)
        session = SpeechSession(recognizer)

        command = await session.listen()

        assert command.action_id == "volume-up"
        assert command.confidence == 0.87
        assert command.source == CommandSource.SPEECH
        assert recognizer.locales == ["en-US"]
        assert session.state == ListeningState.IDLE
        assert session.last_outcome == ListeningState.RECOGNIZED

    @pytest.mark.asyncio
    async def test_telugu_session(self):
        recognizer = FakeRecognizer("వాల్యూమ్ పెంచండి", confidence=0.7)
        session = SpeechSession(recognizer, language=Language.TE)

        command = await session.listen()

        assert recognizer.locales == ["te-IN"]
        assert command.language == Language.TE
        assert command.action_id == "volume-up"

    @pytest.mark.asyncio
    async def test_listen_while_listening_returns_none(self):
        session = SpeechSession(FakeRecognizer(delay=0.05))

        first = asyncio.ensure_future(session.listen())
        await asyncio.sleep(0)
        assert session.is_listening is True

        second = await session.listen()
        command = await first

        assert second is None
        assert command.action_id == "volume-up"

    @pytest.mark.asyncio
    async def test_session_is_reusable(self):
        session = SpeechSession(FakeRecognizer())

        await session.listen()
        command = await session.listen()

        assert command.action_id == "volume-up"


class TestStopping:
    """Tests for stop()."""

    def test_stop_while_idle_is_noop(self):
        session = SpeechSession(FakeRecognizer())

        session.stop()

        assert session.state == ListeningState.IDLE
        assert session.last_outcome is None

    @pytest.mark.asyncio
    async def test_stop_cancels_listening(self):
        session = SpeechSession(FakeRecognizer(delay=5))

        pending = asyncio.ensure_future(session.listen())
        await asyncio.sleep(0)
        session.stop()
        result = await pending

        assert result is None
        assert session.state == ListeningState.IDLE
        assert session.last_outcome == ListeningState.CANCELLED

    @pytest.mark.asyncio
    async def test_outer_cancellation_propagates(self):
        session = SpeechSession(FakeRecognizer(delay=5))

        pending = asyncio.ensure_future(session.listen())
        await asyncio.sleep(0)
        pending.cancel()

        with pytest.raises(asyncio.CancelledError):
            await pending
        assert session.state == ListeningState.IDLE


class TestErrors:
    """Recognizer failures surface once as SpeechRecognitionError."""

    @pytest.mark.asyncio
    async def test_recognizer_error(self):
        cause = RuntimeError("network unavailable")
        session = SpeechSession(FakeRecognizer(error=cause))

        with pytest.raises(SpeechRecognitionError) as exc_info:
            await session.listen()

        assert exc_info.value.__cause__ is cause
        assert "network unavailable" in str(exc_info.value)
        assert session.state == ListeningState.IDLE
        assert session.last_outcome == ListeningState.ERRORED

    @pytest.mark.asyncio
    async def test_empty_transcript(self):
        session = SpeechSession(FakeRecognizer(transcript="   "))

        with pytest.raises(SpeechRecognitionError, match="no speech detected"):
            await session.listen()

        assert session.last_outcome == ListeningState.ERRORED
