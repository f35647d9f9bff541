"""
Tests for the local credential store.
"""

import json
import os
import stat

import pytest

from contentai.core.credentials import CredentialStore


class TestCredentialStore:
    """Tests for CredentialStore."""

    def test_missing_file_is_empty(self, tmp_path):
        store = CredentialStore(tmp_path / "missing.json")

        assert store.get("openai") is None
        assert store.has("openai") is False

    def test_set_persists(self, tmp_path):
        path = tmp_path / "nested" / "credentials.json"
        store = CredentialStore(path)

        store.set("openai", "sk-test-1234567890")

        assert store.get("openai") == "sk-test-1234567890"
        assert json.loads(path.read_text(encoding="utf-8")) == {"openai": "sk-test-1234567890"}
        assert CredentialStore(path).get("openai") == "sk-test-1234567890"

    def test_keys_are_per_provider(self, tmp_path):
        store = CredentialStore(tmp_path / "credentials.json")
        store.set("openai", "sk-one")
        store.set("gemini", "AIza-two")
        store.set("openai", "sk-three")

        reloaded = CredentialStore(tmp_path / "credentials.json")
        assert reloaded.get("openai") == "sk-three"
        assert reloaded.get("gemini") == "AIza-two"

    def test_malformed_file_is_ignored(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text("{not json", encoding="utf-8")

        assert CredentialStore(path).get("openai") is None

    def test_non_object_file_is_ignored(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text('["sk-test"]', encoding="utf-8")

        assert CredentialStore(path).has("openai") is False

    def test_empty_values_are_dropped(self, tmp_path):
        path = tmp_path / "credentials.json"
        path.write_text('{"openai": "", "gemini": "AIza-key"}', encoding="utf-8")

        store = CredentialStore(path)

        assert store.has("openai") is False
        assert store.has("gemini") is True

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions only")
    def test_file_is_private(self, tmp_path):
        path = tmp_path / "credentials.json"
        CredentialStore(path).set("openai", "sk-test-1234567890")

        assert stat.S_IMODE(path.stat().st_mode) == 0o600
