"""
Command Interpreter - maps spoken or typed phrases to action ids.

Matching is a case-insensitive substring search over an ordered table per
language. The first entry whose key phrase occurs in the input wins, so
order matters: "Open the video and play it" resolves to open-application
because "open" is checked before "play".

Parameter extraction currently knows one pattern, the application name
after "open":

    "Open Chrome"       → {"name": "chrome"}
    "క్రోమ్ తెరవండి"      → {"name": "క్రోమ్"}   (Telugu puts the verb last)
"""

import logging
import re
import uuid
from typing import Dict, List, Optional, Pattern, Tuple, Union

from contentai.ai.intent.schemas import (
    ActionId,
    CommandCategory,
    CommandSource,
    Language,
    QuickCommand,
    VoiceCommand,
)
from contentai.ai.monitoring import ai_logger

logger = logging.getLogger("contentai.ai.intent")


# ---------------------------------------------------------------------------
# COMMAND TABLES (ordered, first match wins)
# ---------------------------------------------------------------------------

COMMAND_TABLES: Dict[Language, List[Tuple[str, str]]] = {
    Language.EN: [
        ("open", ActionId.OPEN_APPLICATION),
        ("close", ActionId.CLOSE_APPLICATION),
        ("shutdown", ActionId.SYSTEM_SHUTDOWN),
        ("restart", ActionId.SYSTEM_RESTART),
        ("volume up", ActionId.VOLUME_UP),
        ("volume down", ActionId.VOLUME_DOWN),
        ("brightness up", ActionId.BRIGHTNESS_UP),
        ("brightness down", ActionId.BRIGHTNESS_DOWN),
        ("play", ActionId.MEDIA_PLAY),
        ("pause", ActionId.MEDIA_PAUSE),
        ("stop", ActionId.MEDIA_STOP),
        ("next", ActionId.MEDIA_NEXT),
        ("previous", ActionId.MEDIA_PREVIOUS),
    ],
    Language.TE: [
        ("తెరవండి", ActionId.OPEN_APPLICATION),
        ("మూసివేయండి", ActionId.CLOSE_APPLICATION),
        ("షట్‌డౌన్", ActionId.SYSTEM_SHUTDOWN),
        ("రీస్టార్ట్", ActionId.SYSTEM_RESTART),
        ("వాల్యూమ్ పెంచండి", ActionId.VOLUME_UP),
        ("వాల్యూమ్ తగ్గించండి", ActionId.VOLUME_DOWN),
        ("ప్రకాశం పెంచండి", ActionId.BRIGHTNESS_UP),
        ("ప్రకాశం తగ్గించండి", ActionId.BRIGHTNESS_DOWN),
        ("ప్లే చేయండి", ActionId.MEDIA_PLAY),
        ("పాజ్ చేయండి", ActionId.MEDIA_PAUSE),
        ("ఆపండి", ActionId.MEDIA_STOP),
        ("తదుపరి", ActionId.MEDIA_NEXT),
        ("మునుపటి", ActionId.MEDIA_PREVIOUS),
    ],
}

# \w does not cover Telugu vowel signs, so Telugu names are matched with \S+
PARAMETER_PATTERNS: Dict[Language, List[Pattern]] = {
    Language.EN: [re.compile(r"\bopen\s+(\w+)", re.IGNORECASE)],
    Language.TE: [
        re.compile(r"(\S+)\s+తెరవండి"),
        re.compile(r"తెరవండి\s+(\S+)"),
    ],
}

QUICK_COMMANDS: Dict[Language, List[QuickCommand]] = {
    Language.EN: [
        QuickCommand(phrase="Open Chrome", action_id=ActionId.OPEN_APPLICATION, parameters={"name": "chrome"}),
        QuickCommand(phrase="Volume up", action_id=ActionId.VOLUME_UP),
        QuickCommand(phrase="Volume down", action_id=ActionId.VOLUME_DOWN),
        QuickCommand(phrase="Brightness up", action_id=ActionId.BRIGHTNESS_UP),
        QuickCommand(phrase="Brightness down", action_id=ActionId.BRIGHTNESS_DOWN),
        QuickCommand(phrase="Play music", action_id=ActionId.MEDIA_PLAY),
        QuickCommand(phrase="Pause music", action_id=ActionId.MEDIA_PAUSE),
        QuickCommand(phrase="Shutdown system", action_id=ActionId.SYSTEM_SHUTDOWN),
        QuickCommand(phrase="Restart system", action_id=ActionId.SYSTEM_RESTART),
    ],
    Language.TE: [
        QuickCommand(phrase="క్రోమ్ తెరవండి", action_id=ActionId.OPEN_APPLICATION, parameters={"name": "chrome"}),
        QuickCommand(phrase="వాల్యూమ్ పెంచండి", action_id=ActionId.VOLUME_UP),
        QuickCommand(phrase="వాల్యూమ్ తగ్గించండి", action_id=ActionId.VOLUME_DOWN),
        QuickCommand(phrase="ప్రకాశం పెంచండి", action_id=ActionId.BRIGHTNESS_UP),
        QuickCommand(phrase="ప్రకాశం తగ్గించండి", action_id=ActionId.BRIGHTNESS_DOWN),
        QuickCommand(phrase="సంగీతం ప్లే చేయండి", action_id=ActionId.MEDIA_PLAY),
        QuickCommand(phrase="సంగీతం పాజ్ చేయండి", action_id=ActionId.MEDIA_PAUSE),
        QuickCommand(phrase="సిస్టమ్ షట్‌డౌన్ చేయండి", action_id=ActionId.SYSTEM_SHUTDOWN),
        QuickCommand(phrase="సిస్టమ్ రీస్టార్ట్ చేయండి", action_id=ActionId.SYSTEM_RESTART),
    ],
}


def command_category(action_id: str) -> CommandCategory:
    """
    Device-command category for an action id.

    media-* → MEDIA, volume/brightness → SYSTEM, open/close → APPLICATION,
    everything else (shutdown, restart, unknown) → SYSTEM.
    """
    if "media" in action_id:
        return CommandCategory.MEDIA
    if "volume" in action_id or "brightness" in action_id:
        return CommandCategory.SYSTEM
    if "open" in action_id or "close" in action_id:
        return CommandCategory.APPLICATION
    return CommandCategory.SYSTEM


class CommandInterpreter:
    """
    Interprets phrases in English or Telugu.

    Usage:
        interpreter = CommandInterpreter()
        interpreter.interpret("Volume up", "en")          # "volume-up"
        command = interpreter.parse("Open Chrome", "en")
        command.parameters                                # {"name": "chrome"}
    """

    def __init__(
        self,
        tables: Optional[Dict[Language, List[Tuple[str, str]]]] = None,
        parameter_patterns: Optional[Dict[Language, List[Pattern]]] = None,
    ):
        self.tables = tables or COMMAND_TABLES
        self.parameter_patterns = parameter_patterns or PARAMETER_PATTERNS

    def interpret(self, phrase: str, language: Union[Language, str] = Language.EN) -> str:
        """
        Resolve a phrase to an action id.

        Returns:
            The action id of the first matching table entry, or
            "unknown-command" when nothing matches.
        """
        lowered = phrase.lower()
        for key_phrase, action_id in self.tables.get(Language(language), []):
            if key_phrase in lowered:
                return action_id
        return ActionId.UNKNOWN

    def extract_parameters(self, phrase: str, language: Union[Language, str] = Language.EN) -> Dict[str, str]:
        """Pull the application name out of an "open" phrase, lowercased."""
        for pattern in self.parameter_patterns.get(Language(language), []):
            match = pattern.search(phrase)
            if match:
                return {"name": match.group(1).lower()}
        return {}

    def parse(
        self,
        phrase: str,
        language: Union[Language, str] = Language.EN,
        confidence: Optional[float] = None,
        source: CommandSource = CommandSource.TYPED,
    ) -> VoiceCommand:
        """
        Build a VoiceCommand from a phrase.

        Speech confidence is carried through unchanged; typed and quick-action
        input is always 1.0. A quick-action phrase that matches a predefined
        command uses that command's action and parameters.
        """
        language = Language(language)
        phrase = phrase.strip()
        if source != CommandSource.SPEECH or confidence is None:
            confidence = 1.0

        preset = self._quick_command(phrase, language) if source == CommandSource.QUICK_ACTION else None
        if preset is not None:
            action_id, parameters = preset.action_id, dict(preset.parameters)
        else:
            action_id = self.interpret(phrase, language)
            parameters = self.extract_parameters(phrase, language)

        command = VoiceCommand(
            phrase=phrase,
            language=language,
            action_id=action_id,
            parameters=parameters,
            confidence=confidence,
            source=source,
        )

        ai_logger.log_command(
            request_id=str(uuid.uuid4()),
            phrase=phrase,
            language=language.value,
            action=command.action_id,
            parameters=command.parameters,
            confidence=command.confidence,
            source=source.value,
        )
        if not command.is_known:
            logger.info(f"No command matched phrase ({language.value}): {phrase[:50]}")
        return command

    def quick_commands(self, language: Union[Language, str] = Language.EN) -> List[QuickCommand]:
        """Predefined one-click phrases for a language."""
        return list(QUICK_COMMANDS.get(Language(language), []))

    def _quick_command(self, phrase: str, language: Language) -> Optional[QuickCommand]:
        lowered = phrase.lower()
        for quick in QUICK_COMMANDS.get(language, []):
            if quick.phrase.lower() == lowered:
                return quick
        return None


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
command_interpreter = CommandInterpreter()
