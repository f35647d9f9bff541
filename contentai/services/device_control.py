"""
Device control service - runs interpreted commands on the local host.

Only harmless actions are performed here:
- Opening well-known web applications in a browser tab
- Reporting basic platform information

Everything else (volume, brightness, shutdown, native applications) needs a
desktop agent with OS-level access and is reported as unsupported rather
than attempted.

Separation of concerns:
- The interpreter turns a phrase into an action id and parameters
- This service decides whether and how the host can run it
- Routers handle HTTP request/response
"""

import logging
import platform
import uuid
import webbrowser
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from contentai.ai.intent.schemas import CommandCategory, VoiceCommand
from contentai.ai.intent.parser import command_category

logger = logging.getLogger("contentai.services.device_control")


# ---------------------------------------------------------------------------
# COMMAND TYPES
# ---------------------------------------------------------------------------

class HostCommand:
    """Host-level commands beyond the interpreter's action ids."""
    OPEN_URL = "open-url"
    GET_SYSTEM_INFO = "get-system-info"


# Web applications that can be opened without a desktop agent
WEB_APPS: Dict[str, str] = {
    "gmail": "https://gmail.com",
    "youtube": "https://youtube.com",
    "github": "https://github.com",
    "calendar": "https://calendar.google.com",
}

DESKTOP_APP_REQUIRED = "requires desktop app"


# ---------------------------------------------------------------------------
# COMMAND & RESULT
# ---------------------------------------------------------------------------

@dataclass
class SystemCommand:
    """
    A command for the device controller.

    Attributes:
        command: Action id or HostCommand value
        category: Device-command category
        description: Human-readable description (usually the spoken phrase)
        parameters: Command parameters (e.g. {"name": "youtube"})
    """
    command: str
    category: CommandCategory
    description: str = ""
    parameters: Dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def from_voice_command(cls, voice_command: VoiceCommand) -> "SystemCommand":
        return cls(
            command=voice_command.action_id,
            category=command_category(voice_command.action_id),
            description=voice_command.phrase,
            parameters=dict(voice_command.parameters),
        )


@dataclass
class CommandResult:
    """
    Result of running a command.

    Attributes:
        success: Whether the command ran
        command_id: ID of the SystemCommand
        result: Human-readable outcome
        error: Error message if the command raised
    """
    success: bool
    command_id: str
    result: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "command_id": self.command_id,
            "result": self.result,
            "error": self.error,
        }


# ---------------------------------------------------------------------------
# DEVICE CONTROLLER
# ---------------------------------------------------------------------------

class DeviceController:
    """
    Runs SystemCommands on the local host.

    Usage:
        from contentai.services.device_control import device_controller

        result = device_controller.execute_command(
            SystemCommand.from_voice_command(command)
        )
        if result.success:
            print(result.result)

    execute_command() never raises; failures come back as
    CommandResult(success=False, ...).
    """

    def __init__(self, open_url: Optional[Callable[[str], Any]] = None):
        self._open_url = open_url or (lambda url: webbrowser.open_new_tab(url))

    def execute_command(self, command: SystemCommand) -> CommandResult:
        """
        Run a command.

        Args:
            command: The command to run

        Returns:
            CommandResult with success status and outcome
        """
        handlers = {
            CommandCategory.APPLICATION: self._execute_application,
            CommandCategory.SYSTEM: self._execute_system,
            CommandCategory.MEDIA: self._execute_media,
        }
        handler = handlers.get(command.category)

        try:
            if handler is None:
                result = self._unsupported(command, "Command not supported on this host, install the desktop app")
            else:
                result = handler(command)
        except Exception as e:
            logger.error(f"Command {command.command} failed: {e}")
            return CommandResult(success=False, command_id=command.id, error=str(e))

        logger.info(f"Command {command.command} ({command.category.value}): success={result.success}")
        return result

    def _execute_application(self, command: SystemCommand) -> CommandResult:
        if command.command == HostCommand.OPEN_URL:
            url = command.parameters.get("url")
            if url:
                self._open_url(url)
                return CommandResult(success=True, command_id=command.id, result=f"Opened {url}")

        if command.command == "open-application":
            name = str(command.parameters.get("name", "")).lower()
            if name in WEB_APPS:
                self._open_url(WEB_APPS[name])
                return CommandResult(success=True, command_id=command.id, result=f"Opened {name}")

        return self._unsupported(command, f"Application command {DESKTOP_APP_REQUIRED}")

    def _execute_system(self, command: SystemCommand) -> CommandResult:
        if command.command == HostCommand.GET_SYSTEM_INFO:
            return CommandResult(success=True, command_id=command.id, result=str(self.get_system_info()))
        return self._unsupported(command, f"System command {DESKTOP_APP_REQUIRED}")

    def _execute_media(self, command: SystemCommand) -> CommandResult:
        return self._unsupported(command, f"Media control {DESKTOP_APP_REQUIRED}")

    def _unsupported(self, command: SystemCommand, message: str) -> CommandResult:
        return CommandResult(success=False, command_id=command.id, result=message)

    def get_system_info(self) -> Dict[str, Any]:
        """Basic information about the host."""
        return {
            "platform": platform.system(),
            "release": platform.release(),
            "machine": platform.machine(),
            "python": platform.python_version(),
            "node": platform.node(),
        }


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------
device_controller = DeviceController()
