"""Shared fixtures for the waitlist tests."""

from __future__ import annotations

import httpx
import pytest

from main import app as flask_app


# ---------------------------------------------------------------------------
# Fixture: Flask application and test client
# ---------------------------------------------------------------------------

@pytest.fixture
def app():
    """The Flask application in testing mode."""
    flask_app.config.update(TESTING=True)
    yield flask_app


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


# ---------------------------------------------------------------------------
# Fixture: httpx client wired straight into the Flask app
# ---------------------------------------------------------------------------

@pytest.fixture
def wsgi_http_client(app):
    """httpx client that sends requests to the Flask app without a socket."""
    with httpx.Client(transport=httpx.WSGITransport(app=app), base_url="http://testserver") as http_client:
        yield http_client


# ---------------------------------------------------------------------------
# Fixture: timer factory that records instead of sleeping
# ---------------------------------------------------------------------------

class FakeTimer:
    """Stand-in for threading.Timer that never runs on its own."""

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


@pytest.fixture
def timers() -> list:
    """Timers created by fake_timer_factory, in creation order."""
    return []


@pytest.fixture
def fake_timer_factory(timers):
    def factory(interval, function):
        timer = FakeTimer(interval, function)
        timers.append(timer)
        return timer

    return factory
