"""
Credential store - local persistence for provider API keys.

Keys are kept in a single JSON file keyed by provider name:

    {"gemini": "AIza...", "openai": "sk-..."}

The file is read once when the store is created and rewritten whenever a key
is set. Keys never leave this process except inside provider API calls.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger("contentai.core.credentials")


class CredentialStore:
    """
    Read/write slot for provider API keys.

    Usage:
        store = CredentialStore("~/.contentai/credentials.json")
        store.set("gemini", "AIza...")
        key = store.get("gemini")
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._keys: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read credentials file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed credentials file {self.path}")
            return {}
        return {str(k): str(v) for k, v in data.items() if v}

    def get(self, provider: str) -> Optional[str]:
        """Return the stored key for a provider, or None."""
        return self._keys.get(provider)

    def set(self, provider: str, api_key: str) -> None:
        """Store a key and persist the file."""
        self._keys[provider] = api_key
        self._save()
        logger.info(f"Credential stored for provider: {provider}")

    def has(self, provider: str) -> bool:
        return bool(self._keys.get(provider))

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._keys, indent=2), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError:
            # Not all filesystems support POSIX permissions
            logger.debug(f"Could not restrict permissions on {self.path}")
