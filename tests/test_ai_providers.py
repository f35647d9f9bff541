"""
Tests for AI Providers - Base classes and mocked SDK calls.

This module tests:
- TokenUsage and AIResponse dataclasses
- Credential handling and parameter clamping
- Model resolution for catalog ids
- OpenAI and Gemini providers with mocked SDK clients

We mock the SDK clients to ensure tests are:
- Fast (no network calls)
- Reliable (no API flakiness)
- Free (no token costs)
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from contentai.ai.providers import (
    AIResponse,
    ErrorKind,
    GeminiProvider,
    OpenAIProvider,
    ProviderType,
    TokenUsage,
    create_provider,
)

OPENAI_KEY = "sk-test-1234567890abcdef"
GEMINI_KEY = "AIzaSy-test-1234567890"


class TestTokenUsage:
    """Tests for TokenUsage dataclass."""

    def test_auto_calculate_total(self):
        """Test that total is auto-calculated if not provided."""
        usage = TokenUsage(prompt_tokens=100, completion_tokens=50)

        assert usage.total_tokens == 150

    def test_total_overrides_calculation(self):
        """Test that an explicit non-zero total is preserved."""
        usage = TokenUsage(prompt_tokens=100, completion_tokens=50, total_tokens=200)

        assert usage.total_tokens == 200

    def test_default_values(self):
        usage = TokenUsage()

        assert usage.prompt_tokens == 0
        assert usage.completion_tokens == 0
        assert usage.total_tokens == 0


class TestAIResponse:
    """Tests for AIResponse dataclass."""

    def test_create_error_response(self):
        """Test creating an error response with a classified kind."""
        response = AIResponse(
            content="",
            provider=ProviderType.OPENAI,
            model="gpt-4o-mini",
            success=False,
            error="Error code: 429 - insufficient_quota",
            error_kind=ErrorKind.QUOTA,
        )

        assert response.success is False
        assert response.error_kind == ErrorKind.QUOTA

    def test_to_dict(self):
        """Test conversion to dictionary."""
        response = AIResponse(
            content="Test content",
            provider=ProviderType.GEMINI,
            model="gemini-2.5-flash",
            usage=TokenUsage(prompt_tokens=100, completion_tokens=50),
            latency_ms=200.0,
        )

        result = response.to_dict()

        assert result["provider"] == "gemini"
        assert result["tokens"] == {"prompt": 100, "completion": 50, "total": 150}
        assert result["latency_ms"] == 200.0
        assert result["success"] is True
        assert result["error_kind"] is None

    def test_to_dict_truncates_long_content(self):
        """Test that long content is truncated in to_dict."""
        response = AIResponse(
            content="x" * 200,
            provider=ProviderType.GEMINI,
            model="gemini-2.5-flash",
        )

        result = response.to_dict()

        assert len(result["content"]) == 103  # 100 chars + "..."
        assert result["content"].endswith("...")

    def test_created_at_timestamp(self):
        """Test that created_at is set."""
        before = datetime.now(timezone.utc)
        response = AIResponse(content="Test", provider=ProviderType.GEMINI, model="test")
        after = datetime.now(timezone.utc)

        assert before <= response.created_at <= after


class TestProviderType:
    """Tests for ProviderType enum."""

    def test_all_providers_exist(self):
        assert ProviderType.GEMINI.value == "gemini"
        assert ProviderType.OPENAI.value == "openai"
        assert len(ProviderType) == 2


class TestCredentials:
    """Tests for credential installation."""

    def test_provider_without_key_is_unconfigured(self):
        provider = OpenAIProvider()

        assert provider.is_configured() is False

    def test_valid_key_configures_provider(self):
        provider = OpenAIProvider(api_key=OPENAI_KEY)

        assert provider.is_configured() is True
        assert provider.api_key == OPENAI_KEY

    @pytest.mark.parametrize("key", ["", "short", "your_openai_api_key_here"])
    def test_placeholder_or_short_key_is_ignored(self, key):
        """Test that example placeholders and truncated keys are rejected."""
        provider = OpenAIProvider()
        provider.set_credential(key)

        assert provider.is_configured() is False

    def test_invalid_key_clears_previous_credential(self):
        provider = GeminiProvider(api_key=GEMINI_KEY)
        provider.set_credential("bad")

        assert provider.is_configured() is False
        assert provider.api_key is None

    def test_create_provider_by_name(self):
        provider = create_provider("OpenAI", api_key=OPENAI_KEY)

        assert isinstance(provider, OpenAIProvider)
        assert provider.is_configured() is True

    def test_create_provider_rejects_unknown_name(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_provider("anthropic")


class TestParameterClamping:
    """Tests that sampling parameters stay within each provider's range."""

    @pytest.mark.parametrize("requested, expected", [(-1.0, 0.0), (0.5, 0.5), (1.7, 1.7), (5.0, 2.0)])
    def test_openai_temperature(self, requested, expected):
        assert OpenAIProvider().clamp_temperature(requested) == expected

    @pytest.mark.parametrize("requested, expected", [(-1.0, 0.0), (0.5, 0.5), (1.7, 1.0)])
    def test_gemini_temperature(self, requested, expected):
        assert GeminiProvider().clamp_temperature(requested) == expected

    def test_max_tokens(self):
        assert OpenAIProvider().clamp_max_tokens(0) == 1
        assert OpenAIProvider().clamp_max_tokens(100000) == 4096
        assert GeminiProvider().clamp_max_tokens(100000) == 8192
        assert GeminiProvider().clamp_max_tokens(2000) == 2000


class TestModelResolution:
    """Catalog ids and foreign models fall back to the provider default."""

    def test_openai_models(self):
        provider = OpenAIProvider(model="gpt-4o-mini")

        assert provider.resolve_model("gpt-4o") == "gpt-4o"
        assert provider.resolve_model("creative-writer") == "gpt-4o-mini"
        assert provider.resolve_model("gemini-pro") == "gpt-4o-mini"
        assert provider.resolve_model(None) == "gpt-4o-mini"

    def test_gemini_legacy_ids_use_default(self):
        provider = GeminiProvider(model="gemini-2.5-flash")

        assert provider.resolve_model("gemini-1.5-pro") == "gemini-1.5-pro"
        assert provider.resolve_model("gemini-pro") == "gemini-2.5-flash"
        assert provider.resolve_model("analytical-mind") == "gemini-2.5-flash"


# ---------------------------------------------------------------------------
# OPENAI
# ---------------------------------------------------------------------------

def _openai_completion(content, finish_reason="stop", prompt_tokens=10, completion_tokens=5):
    choice = MagicMock()
    choice.message.content = content
    choice.finish_reason = finish_reason
    completion = MagicMock()
    completion.choices = [choice]
    completion.usage.prompt_tokens = prompt_tokens
    completion.usage.completion_tokens = completion_tokens
    return completion


class TestOpenAIProvider:
    """Tests for OpenAIProvider with a mocked AsyncOpenAI client."""

    @pytest.fixture
    def provider(self):
        provider = OpenAIProvider(model="gpt-4o-mini", api_key=OPENAI_KEY)
        provider._client = MagicMock()
        return provider

    @pytest.mark.asyncio
    async def test_generate_success(self, provider):
        """Test a successful completion and the clamped request parameters."""
        create = AsyncMock(return_value=_openai_completion("Solar panels convert light."))
        provider._client.chat.completions.create = create

        response = await provider.generate(
            "Write about solar",
            system_prompt="You are a writer.",
            temperature=5.0,
            max_tokens=99999,
            model="creative-writer",
        )

        assert response.success is True
        assert response.content == "Solar panels convert light."
        assert response.model == "gpt-4o-mini"
        assert response.usage.total_tokens == 15

        kwargs = create.call_args.kwargs
        assert kwargs["temperature"] == 2.0
        assert kwargs["max_tokens"] == 4096
        assert kwargs["messages"][0] == {"role": "system", "content": "You are a writer."}
        assert kwargs["messages"][1] == {"role": "user", "content": "Write about solar"}

    @pytest.mark.asyncio
    async def test_generate_without_system_prompt(self, provider):
        create = AsyncMock(return_value=_openai_completion("ok"))
        provider._client.chat.completions.create = create

        await provider.generate("Hi")

        assert create.call_args.kwargs["messages"] == [{"role": "user", "content": "Hi"}]

    @pytest.mark.asyncio
    async def test_quota_error_is_classified(self, provider):
        """Test that an SDK exception becomes an error response, not a raise."""
        provider._client.chat.completions.create = AsyncMock(
            side_effect=Exception("Error code: 429 - {'error': {'code': 'insufficient_quota'}}")
        )

        response = await provider.generate("Hi")

        assert response.success is False
        assert response.error_kind == ErrorKind.QUOTA
        assert "insufficient_quota" in response.error

    @pytest.mark.asyncio
    async def test_content_filter_is_safety(self, provider):
        provider._client.chat.completions.create = AsyncMock(
            return_value=_openai_completion(None, finish_reason="content_filter")
        )

        response = await provider.generate("Hi")

        assert response.success is False
        assert response.error_kind == ErrorKind.SAFETY

    @pytest.mark.asyncio
    async def test_unconfigured_provider_reports_auth(self):
        response = await OpenAIProvider().generate("Hi")

        assert response.success is False
        assert response.error_kind == ErrorKind.AUTH

    @pytest.mark.asyncio
    async def test_generate_stream_forwards_chunks(self, provider):
        """Test that every delta reaches on_chunk and the full text is returned."""
        async def fake_stream():
            for text in ["Solar ", "", "power"]:
                chunk = MagicMock()
                chunk.choices = [MagicMock()]
                chunk.choices[0].delta.content = text
                yield chunk

        provider._client.chat.completions.create = AsyncMock(return_value=fake_stream())
        chunks = []

        response = await provider.generate_stream("Hi", on_chunk=chunks.append)

        assert response.success is True
        assert response.content == "Solar power"
        assert chunks == ["Solar ", "power"]
        assert response.metadata == {"streamed": True, "chunks": 2}


# ---------------------------------------------------------------------------
# GEMINI
# ---------------------------------------------------------------------------

class TestGeminiProvider:
    """Tests for GeminiProvider with a mocked google-genai client."""

    @pytest.fixture
    def provider(self):
        provider = GeminiProvider(model="gemini-2.5-flash", api_key=GEMINI_KEY)
        provider._client = MagicMock()
        return provider

    @pytest.mark.asyncio
    async def test_generate_success(self, provider):
        result = MagicMock()
        result.text = "Bees pollinate crops."
        result.usage_metadata.prompt_token_count = 12
        result.usage_metadata.candidates_token_count = 8
        generate = AsyncMock(return_value=result)
        provider._client.aio.models.generate_content = generate

        response = await provider.generate("Write about bees", system_prompt="Be brief.", temperature=1.5)

        assert response.success is True
        assert response.content == "Bees pollinate crops."
        assert response.usage.total_tokens == 20

        kwargs = generate.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "Write about bees"
        assert kwargs["config"].temperature == 1.0
        assert kwargs["config"].system_instruction == "Be brief."

    @pytest.mark.asyncio
    async def test_blocked_prompt_is_safety(self, provider):
        result = MagicMock()
        result.text = None
        result.prompt_feedback.block_reason = "SAFETY"
        provider._client.aio.models.generate_content = AsyncMock(return_value=result)

        response = await provider.generate("Hi")

        assert response.success is False
        assert response.error_kind == ErrorKind.SAFETY

    @pytest.mark.asyncio
    async def test_invalid_key_is_auth(self, provider):
        provider._client.aio.models.generate_content = AsyncMock(
            side_effect=Exception("400 INVALID_ARGUMENT. API key not valid. Reason: API_KEY_INVALID")
        )

        response = await provider.generate("Hi")

        assert response.success is False
        assert response.error_kind == ErrorKind.AUTH

    @pytest.mark.asyncio
    async def test_generate_stream_forwards_chunks(self, provider):
        async def fake_stream():
            for text in ["Hello", " world"]:
                chunk = MagicMock()
                chunk.text = text
                chunk.usage_metadata = None
                yield chunk

        provider._client.aio.models.generate_content_stream = AsyncMock(return_value=fake_stream())
        chunks = []

        response = await provider.generate_stream("Hi", on_chunk=chunks.append)

        assert response.success is True
        assert response.content == "Hello world"
        assert chunks == ["Hello", " world"]
        assert response.usage.total_tokens == 0
