"""Tests for the application routes outside the waitlist API."""

from __future__ import annotations

import logging

from config.settings import settings
from lib.landing_content import FEATURES, FORM_COPY, MARKET_CATEGORIES, PAGE_METADATA


class TestLandingPage:

    def test_renders_html(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.mimetype == "text/html"
        assert PAGE_METADATA["title"] in response.get_data(as_text=True)

    def test_renders_every_feature_card(self, client):
        html = client.get("/").get_data(as_text=True)

        for feature in FEATURES:
            assert feature["title"] in html

    def test_renders_market_ticker(self, client):
        html = client.get("/").get_data(as_text=True)

        for category in MARKET_CATEGORIES:
            assert f"[{category}]" in html

    def test_form_posts_to_waitlist_endpoint(self, client):
        html = client.get("/").get_data(as_text=True)

        assert 'id="waitlist-form"' in html
        assert 'data-endpoint="/api/waitlist"' in html
        assert 'type="email"' in html
        assert FORM_COPY["submit_idle"] in html

    def test_form_lives_in_dialog_opened_by_button(self, client):
        html = client.get("/").get_data(as_text=True)

        assert '<dialog id="waitlist-dialog"' in html
        assert 'id="waitlist-open"' in html
        assert FORM_COPY["open_dialog"] in html
        assert html.index('<dialog id="waitlist-dialog"') < html.index('id="waitlist-form"') < html.index("</dialog>")

    def test_dialog_closes_after_confirmation_delay(self, client):
        html = client.get("/").get_data(as_text=True)

        expected_ms = int(settings.WAITLIST_CONFIRMATION_DELAY_SECONDS * 1000)
        assert f'data-close-delay="{expected_ms}"' in html
        assert "dialog.close()" in html


class TestHealth:

    def test_health_reports_app_and_version(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.get_json() == {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.VERSION,
        }


class TestErrorHandlers:

    def test_unknown_route_returns_json_404(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert response.get_json() == {"error": "Endpoint not found"}

    def test_wrong_method_on_landing_page(self, client):
        response = client.post("/")

        assert response.status_code == 405
        assert response.get_json() == {"error": "Method not allowed"}


class TestLoggingAtImport:

    def test_importing_app_enables_waitlist_sink(self):
        import main  # noqa: F401

        assert logging.getLogger("waitlist").isEnabledFor(logging.INFO)
