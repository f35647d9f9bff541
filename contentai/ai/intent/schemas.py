"""
Command Schemas - Pydantic models for interpreted voice and text commands.

A VoiceCommand is the interpreter's output: the phrase as heard or typed,
its language, the resolved action id and any parameters pulled from the
phrase. "unknown-command" is a normal action id, not an error.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Supported command languages."""
    EN = "en"
    TE = "te"


# Recognizer locale per language tag
LOCALES = {
    Language.EN: "en-US",
    Language.TE: "te-IN",
}


class ActionId:
    """Action ids produced by the interpreter."""
    OPEN_APPLICATION = "open-application"
    CLOSE_APPLICATION = "close-application"
    SYSTEM_SHUTDOWN = "system-shutdown"
    SYSTEM_RESTART = "system-restart"
    VOLUME_UP = "volume-up"
    VOLUME_DOWN = "volume-down"
    BRIGHTNESS_UP = "brightness-up"
    BRIGHTNESS_DOWN = "brightness-down"
    MEDIA_PLAY = "media-play"
    MEDIA_PAUSE = "media-pause"
    MEDIA_STOP = "media-stop"
    MEDIA_NEXT = "media-next"
    MEDIA_PREVIOUS = "media-previous"
    UNKNOWN = "unknown-command"


class CommandCategory(str, Enum):
    """Device-command category an action belongs to."""
    SYSTEM = "system"
    APPLICATION = "application"
    FILE = "file"
    NETWORK = "network"
    MEDIA = "media"


class CommandSource(str, Enum):
    """Where a phrase came from."""
    SPEECH = "speech"
    TYPED = "typed"
    QUICK_ACTION = "quick-action"


class VoiceCommand(BaseModel):
    """
    An interpreted command.

    Example:
        VoiceCommand(
            phrase="Open Chrome",
            language=Language.EN,
            action_id="open-application",
            parameters={"name": "chrome"},
            confidence=1.0,
            source=CommandSource.TYPED,
        )
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    phrase: str
    language: Language = Language.EN
    action_id: str = ActionId.UNKNOWN
    parameters: Dict[str, Any] = Field(default_factory=dict)
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    source: CommandSource = CommandSource.TYPED
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_known(self) -> bool:
        return self.action_id != ActionId.UNKNOWN


class QuickCommand(BaseModel):
    """A predefined phrase offered as a one-click action."""
    model_config = ConfigDict(frozen=True)

    phrase: str
    action_id: str
    parameters: Dict[str, Any] = Field(default_factory=dict)

