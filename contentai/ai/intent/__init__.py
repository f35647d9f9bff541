"""
Intent Module - Voice and text command interpretation.

Example Flow:
============
User says: "Open Chrome"

CommandInterpreter resolves:
{
    "action_id": "open-application",
    "parameters": {"name": "chrome"},
    "language": "en"
}

command_category("open-application") → "application", which the device
controller uses to decide how (and whether) it can run the command.
"""

from contentai.ai.intent.schemas import (
    ActionId,
    CommandCategory,
    CommandSource,
    Language,
    LOCALES,
    QuickCommand,
    VoiceCommand,
)
from contentai.ai.intent.parser import (
    CommandInterpreter,
    command_category,
    command_interpreter,
)
from contentai.ai.intent.speech import (
    ListeningState,
    RecognitionResult,
    SpeechRecognitionError,
    SpeechRecognizer,
    SpeechSession,
    UnsupportedEnvironmentError,
    UnsupportedRecognizer,
)

__all__ = [
    "ActionId",
    "CommandCategory",
    "CommandSource",
    "Language",
    "LOCALES",
    "QuickCommand",
    "VoiceCommand",
    "CommandInterpreter",
    "command_category",
    "command_interpreter",
    "ListeningState",
    "RecognitionResult",
    "SpeechRecognitionError",
    "SpeechRecognizer",
    "SpeechSession",
    "UnsupportedEnvironmentError",
    "UnsupportedRecognizer",
]
