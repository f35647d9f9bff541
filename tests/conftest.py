"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Orchestrator in simulation mode (no synthetic delay, seeded randomness)
- Credential store in a temporary directory
- Test client (FastAPI TestClient) with dependencies overridden
- Mock provider factory
"""

import random
from typing import Callable, Generator, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from contentai.main import app
from contentai.deps import (
    get_credential_store,
    get_device_controller,
    get_orchestrator,
    get_speech_session,
)
from contentai.ai.intent import SpeechSession, UnsupportedRecognizer
from contentai.ai.monitoring import ai_metrics
from contentai.ai.providers import AIProvider, AIResponse, ProviderType
from contentai.ai.router import OrchestratorConfig, RequestOrchestrator
from contentai.core.credentials import CredentialStore
from contentai.services.device_control import DeviceController


# ---------------------------------------------------------------------------
# METRICS
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def reset_metrics() -> Generator[None, None, None]:
    """The metrics singleton is process-wide; start every test from zero."""
    ai_metrics.reset()
    yield
    ai_metrics.reset()


# ---------------------------------------------------------------------------
# ORCHESTRATOR FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def orchestrator() -> RequestOrchestrator:
    """
    Orchestrator without a provider.

    Every request is simulated; the synthetic delay is disabled and the
    RNG is seeded so content and scores are reproducible.
    """
    config = OrchestratorConfig(provider=None, simulation_delay=(0.0, 0.0))
    return RequestOrchestrator(config, rng=random.Random(42))


@pytest.fixture
def make_provider() -> Callable[..., MagicMock]:
    """
    Factory for a configured mock provider.

    Usage:
        provider = make_provider(response=AIResponse(...))
        provider = make_provider(side_effect=RuntimeError("boom"))
    """
    def _make(
        response: Optional[AIResponse] = None,
        side_effect=None,
        provider_type: ProviderType = ProviderType.OPENAI,
        configured: bool = True,
    ) -> MagicMock:
        provider = MagicMock(spec=AIProvider)
        provider.provider_type = provider_type
        provider.model = "gpt-4o-mini" if provider_type == ProviderType.OPENAI else "gemini-2.5-flash"
        provider.is_configured.return_value = configured
        provider.generate = AsyncMock(return_value=response, side_effect=side_effect)
        provider.generate_stream = AsyncMock(return_value=response, side_effect=side_effect)
        return provider

    return _make


# ---------------------------------------------------------------------------
# STORAGE & DEVICE FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def credential_store(tmp_path) -> CredentialStore:
    """Credential store backed by a file in a temporary directory."""
    return CredentialStore(tmp_path / "credentials.json")


@pytest.fixture
def open_url() -> MagicMock:
    """Stands in for the browser so tests never open a real tab."""
    return MagicMock()


@pytest.fixture
def controller(open_url: MagicMock) -> DeviceController:
    return DeviceController(open_url=open_url)


@pytest.fixture
def speech_session() -> SpeechSession:
    """Server-side session with no speech capability (the default)."""
    return SpeechSession(UnsupportedRecognizer())


# ---------------------------------------------------------------------------
# CLIENT FIXTURE
# ---------------------------------------------------------------------------

@pytest.fixture
def client(
    orchestrator: RequestOrchestrator,
    credential_store: CredentialStore,
    controller: DeviceController,
    speech_session: SpeechSession,
) -> Generator[TestClient, None, None]:
    """
    Create a test client wired to the fixtures above.

    Overrides the cached dependencies so no test touches the real
    credential file, a real provider or the host browser.
    """
    app.dependency_overrides[get_orchestrator] = lambda: orchestrator
    app.dependency_overrides[get_credential_store] = lambda: credential_store
    app.dependency_overrides[get_device_controller] = lambda: controller
    app.dependency_overrides[get_speech_session] = lambda: speech_session

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
