"""
Tests for the /content endpoints.

The client fixture wires a simulation-mode orchestrator, so every envelope
here is produced locally.
"""

from fastapi.testclient import TestClient


class TestHealth:

    def test_health_reports_mode(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "mode": "simulation"}


class TestContentTools:
    """Tests for the four tool endpoints."""

    def test_generate(self, client: TestClient):
        response = client.post("/content/generate", json={"text": "Solar energy for homes"})

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "simulated"
        assert 0.5 <= data["confidence"] <= 0.7
        assert data["enhancements_applied"] == ["generate-optimizer"]
        assert "### Generation Optimizer Applied" in data["content"]
        assert 2 <= len(data["suggestions"]) <= 4

    def test_generate_keeps_requested_enhancers(self, client: TestClient):
        response = client.post("/content/generate", json={
            "text": "Solar energy for homes",
            "preferences": {"kind": "generate", "tone": "casual", "length": "long"},
            "config": {"model_id": "creative-writer", "enhancers": ["seo-enhancer"]},
        })

        data = response.json()
        assert data["enhancements_applied"] == ["seo-enhancer", "generate-optimizer"]
        assert data["model_id"] == "creative-writer"

    def test_rewrite(self, client: TestClient):
        response = client.post("/content/rewrite", json={
            "text": "We will utilize numerous tools.",
            "preferences": {"kind": "rewrite", "rewrite_style": "simplify"},
        })

        assert response.status_code == 200
        assert "We will use many tools." in response.json()["content"]

    def test_summarize(self, client: TestClient):
        response = client.post("/content/summarize", json={
            "text": "Bees pollinate a large share of food crops worldwide. Their decline threatens harvests.",
            "preferences": {"kind": "summarize", "summary_type": "key-takeaways"},
        })

        assert response.status_code == 200
        assert "## Key Takeaways" in response.json()["content"]

    def test_translate_is_labeled_placeholder(self, client: TestClient):
        response = client.post("/content/translate", json={
            "text": "Good morning",
            "preferences": {"kind": "translate", "source_lang": "en", "target_lang": "fr"},
        })

        content = response.json()["content"]
        assert "Demo mode" in content
        assert "## Translation (French)" in content
        assert "Untranslated placeholder" in content

    def test_blank_text_rejected(self, client: TestClient):
        assert client.post("/content/generate", json={"text": "   "}).status_code == 422
        assert client.post("/content/generate", json={"text": ""}).status_code == 422

    def test_wrong_preferences_kind_rejected(self, client: TestClient):
        response = client.post("/content/rewrite", json={
            "text": "Some text",
            "preferences": {"kind": "generate"},
        })

        assert response.status_code == 422


class TestProcess:
    """Tests for POST /content/process."""

    def test_process_with_default_preferences(self, client: TestClient):
        response = client.post("/content/process", json={
            "prompt": "Summarize: Solar panels are getting cheaper every year.",
            "task_kind": "summarize",
        })

        assert response.status_code == 200
        assert response.json()["source"] == "simulated"
        assert response.json()["enhancements_applied"] == []

    def test_mismatched_preferences_rejected(self, client: TestClient):
        response = client.post("/content/process", json={
            "prompt": "Rewrite this",
            "task_kind": "rewrite",
            "preferences": {"kind": "translate"},
        })

        assert response.status_code == 422


class TestCatalogs:

    def test_models(self, client: TestClient):
        models = client.get("/content/models").json()

        assert "creative-writer" in [m["id"] for m in models]
        assert {"id", "name", "description", "category", "capabilities"} <= set(models[0])

    def test_enhancers(self, client: TestClient):
        enhancers = client.get("/content/enhancers").json()

        assert "seo-enhancer" in [e["id"] for e in enhancers]


class TestStatusAndCredentials:
    """Tests for provider status and credential updates."""

    def test_status_in_simulation(self, client: TestClient):
        data = client.get("/content/status").json()

        assert data["mode"] == "simulation"
        assert data["provider"] is None
        assert data["configured"] is False
        assert data["stored_credentials"] == {"gemini": False, "openai": False}

    def test_invalid_key_rejected_and_not_stored(self, client: TestClient, credential_store):
        response = client.put("/content/credentials", json={"provider": "openai", "api_key": "short"})

        assert response.status_code == 422
        assert credential_store.has("openai") is False

    def test_unknown_provider_rejected(self, client: TestClient):
        response = client.put("/content/credentials", json={"provider": "mistral", "api_key": "key-1234567890"})

        assert response.status_code == 422

    def test_valid_key_activates_provider(self, client: TestClient, credential_store, orchestrator):
        response = client.put(
            "/content/credentials",
            json={"provider": "openai", "api_key": "  sk-test-1234567890abcdef  "},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "live"
        assert data["provider"] == "openai"
        assert data["stored_credentials"]["openai"] is True
        assert credential_store.get("openai") == "sk-test-1234567890abcdef"
        assert orchestrator.is_live is True


class TestStats:

    def test_stats_count_requests(self, client: TestClient):
        client.post("/content/generate", json={"text": "Solar energy"})
        client.post("/content/translate", json={"text": "Hello"})

        stats = client.get("/content/stats").json()

        assert stats["total_requests"] == 2
        assert stats["requests_by_source"] == {"simulated": 2}
        assert stats["success_rate"] == "100.0%"
