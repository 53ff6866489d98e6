"""
Unit tests for the mock i18n API endpoints
"""

import os

import pytest
from fastapi.testclient import TestClient

from i18n_api.main import create_app
from shared.config.settings import Environment


class TestI18nEndpoints:
    """GET /api/i18n and /api/i18n/{locales}"""

    @pytest.fixture(autouse=True)
    def _client(self, make_settings):
        self.client = TestClient(create_app(make_settings()))

    def test_locale_list(self):
        response = self.client.get("/api/i18n/en-US;de-DE")

        assert response.status_code == 200
        data = response.json()
        assert data["language"] == "en"
        assert data["locale"] == "en-US"

    def test_single_locale(self):
        data = self.client.get("/api/i18n/de-DE").json()
        assert data["language"] == "de"
        assert data["locale"] == "de-DE"

    def test_response_shape(self):
        data = self.client.get("/api/i18n/de-DE").json()

        assert set(data.keys()) == {"language", "locale", "lookup", "supportedLocales"}
        assert data["supportedLocales"] == ["en-US", "de-DE"]
        assert data["lookup"] == {
            "some.button": "Increment (API)",
            "some.label": "A simple counter",
            "some.search": "Browse...",
        }

    def test_percent_encoded_separator(self):
        data = self.client.get("/api/i18n/de-DE%3Ben-US").json()
        assert data["locale"] == "de-DE"

    def test_default_request(self):
        response = self.client.get("/api/i18n")

        assert response.status_code == 200
        data = response.json()
        assert data["language"] == "en"
        assert data["locale"] == "en-US"
        assert data["supportedLocales"] == ["en-US", "de-DE"]

    def test_empty_segments_default(self):
        data = self.client.get("/api/i18n/;").json()
        assert data["locale"] == "en-US"
        assert data["language"] == "en"

    def test_malformed_locale_is_used_verbatim(self):
        data = self.client.get("/api/i18n/english").json()
        assert data["locale"] == "english"
        assert data["language"] == "english"

    def test_requests_are_independent(self):
        first = self.client.get("/api/i18n/de-DE").json()
        second = self.client.get("/api/i18n/en-US").json()
        again = self.client.get("/api/i18n/de-DE").json()

        assert first == again
        assert second["locale"] == "en-US"


class TestFixedForm:
    """Earlier single-locale variant"""

    def test_bare_table_in_legacy_mode(self, make_settings):
        client = TestClient(create_app(make_settings(legacy_fixed_lookup=True)))

        response = client.get("/api/i18n")

        assert response.status_code == 200
        assert response.json() == {
            "some.button": "Increment (API)",
            "some.label": "A simple counter",
            "some.search": "Browse...",
        }

    def test_trailing_slash_in_legacy_mode(self, make_settings):
        client = TestClient(create_app(make_settings(legacy_fixed_lookup=True)))

        response = client.get("/api/i18n/")

        assert response.status_code == 200
        assert response.json()["some.button"] == "Increment (API)"

    def test_parameterized_form_still_available_in_legacy_mode(self, make_settings):
        client = TestClient(create_app(make_settings(legacy_fixed_lookup=True)))
        assert client.get("/api/i18n/de-DE").json()["language"] == "de"


class TestEnvironmentGating:
    """Mock routes exist only in development"""

    @pytest.mark.parametrize("environment", [Environment.PRODUCTION, Environment.STAGING, Environment.TEST])
    def test_routes_absent_outside_development(self, make_settings, environment):
        client = TestClient(create_app(make_settings(environment=environment)))

        assert client.get("/api/i18n").status_code == 404
        assert client.get("/api/i18n/en-US").status_code == 404
        assert client.get("/health").status_code == 200


class TestServiceEndpoints:
    """Health, root and static content"""

    def test_health(self, make_settings):
        client = TestClient(create_app(make_settings()))

        data = client.get("/health").json()

        assert data["status"] == "success"
        assert data["message"] == "Service is healthy"
        assert data["data"]["service"] == "I18nMockAPI"
        assert data["data"]["status"] == "healthy"

    def test_root_service_info_without_static_dir(self, make_settings):
        client = TestClient(create_app(make_settings()))

        data = client.get("/").json()

        assert data["service"] == "I18nMockAPI"
        assert data["status"] == "running"

    def test_static_dir_served_at_root(self, make_settings, tmp_path):
        static_dir = tmp_path / "dist"
        static_dir.mkdir()
        (static_dir / "index.html").write_text("<html><body>shell</body></html>", encoding="utf-8")
        (static_dir / "app.js").write_text("console.log('app')", encoding="utf-8")

        client = TestClient(create_app(make_settings(static_dir=str(static_dir))))

        index = client.get("/")
        assert index.status_code == 200
        assert "shell" in index.text
        assert client.get("/app.js").status_code == 200
        assert client.get("/api/i18n/de-DE").json()["locale"] == "de-DE"

    def test_trailing_slash_default_request_with_static_dir(self, make_settings, tmp_path):
        static_dir = tmp_path / "dist"
        static_dir.mkdir()
        (static_dir / "index.html").write_text("<html></html>", encoding="utf-8")

        client = TestClient(create_app(make_settings(static_dir=str(static_dir))))
        response = client.get("/api/i18n/")

        assert response.status_code == 200
        assert response.json()["language"] == "en"
        assert response.json()["locale"] == "en-US"

    def test_missing_static_dir_is_ignored(self, make_settings, tmp_path):
        missing = os.path.join(str(tmp_path), "nope")
        client = TestClient(create_app(make_settings(static_dir=missing)))
        assert client.get("/").json()["status"] == "running"

    def test_openapi_documents_i18n_routes(self, make_settings):
        app = create_app(make_settings())
        paths = app.openapi()["paths"]

        assert "/api/i18n" in paths
        assert "/api/i18n/{locales}" in paths
        assert "summary" in paths["/api/i18n/{locales}"]["get"]

    def test_service_logger_is_i18n_api_logger(self):
        from i18n_api import main as api_main

        assert api_main.logger.name == "i18n_api.main"
        assert api_main.logger.propagate is False
