"""Unit tests for the preview HTTP API."""

import pytest
from fastapi.testclient import TestClient

from template_preview.core.config import Settings
from template_preview.main import create_app


# =============================================================================
# Preview API Tests
# =============================================================================


class TestPreviewAPI:
    """Test suite for the /preview routes."""

    @pytest.fixture
    def client(self):
        """Create a test client for a fresh app instance."""
        with TestClient(create_app(Settings(_env_file=None))) as client:
            yield client

    # =========================================================================
    # Render Tests
    # =========================================================================

    def test_render(self, client):
        """Test rendering with slice syntax."""
        response = client.post(
            "/preview/render",
            json={
                "template": "Hello {{ name[1:-1] }}",
                "data": '{"name": "World"}',
                "data_format": "json",
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["output"] == "Hello orl"
        assert body["ok"] is True
        assert body["error"] is None
        assert body["rewritten_template"] == "Hello {{ name | slice(1,-1) }}"

    def test_render_default_format(self, client):
        """Test that the data format defaults to JSON."""
        response = client.post(
            "/preview/render",
            json={
                "template": "{{ items | slice(-2) | dump }}",
                "data": '{"items": ["a", "b", "c", "d"]}',
            },
        )

        assert response.json()["output"] == '["c","d"]'

    def test_render_yaml(self, client):
        """Test rendering against YAML data."""
        response = client.post(
            "/preview/render",
            json={"template": "{{ x[:3] }}", "data": "x: abcdef", "data_format": "yaml"},
        )

        assert response.json()["output"] == "abc"

    def test_render_malformed_data(self, client):
        """Test that data errors are returned in the body with empty output."""
        response = client.post(
            "/preview/render",
            json={"template": "{{ name }}", "data": '{"name": "Wor'},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["output"] == ""
        assert body["error"].startswith("Data error:")

    def test_render_unknown_format_rejected(self, client):
        """Test that unsupported formats fail request validation."""
        response = client.post(
            "/preview/render",
            json={"template": "{{ x }}", "data": "", "data_format": "toml"},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    # =========================================================================
    # Preprocess Tests
    # =========================================================================

    def test_preprocess(self, client):
        """Test the rewrite preview endpoint."""
        response = client.post("/preview/preprocess", json={"template": "{{ x[2] }} {{ y[1:] }}"})

        assert response.status_code == 200
        assert response.json() == {
            "template": "{{ x[2] }} {{ y[1:] }}",
            "rewritten": "{{ x | slice(2,3) }} {{ y | slice(1,) }}",
            "rewrites": 2,
        }

    # =========================================================================
    # Convert Tests
    # =========================================================================

    def test_convert(self, client):
        """Test converting JSON to YAML."""
        response = client.post(
            "/preview/convert",
            json={
                "data": '{"name": "World", "items": ["a"]}',
                "source_format": "json",
                "target_format": "yaml",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"data": "name: World\nitems:\n- a\n", "format": "yaml"}

    def test_convert_malformed(self, client):
        """Test that unparseable data returns 400 with the parse message."""
        response = client.post(
            "/preview/convert",
            json={"data": '{"name": ', "source_format": "json", "target_format": "yaml"},
        )

        assert response.status_code == 400
        assert "Invalid JSON" in response.json()["detail"]

    # =========================================================================
    # Health Tests
    # =========================================================================

    def test_health(self, client):
        """Test the health check endpoint."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
