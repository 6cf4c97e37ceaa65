"""
Pytest configuration and shared fixtures for AllWaysCalc tests.
"""
import os

os.environ.setdefault("FLASK_ENV", "testing")
os.environ.setdefault("APP_BASE_URL", "https://www.allwayscalc.com")

import pytest  # noqa: E402

from allwayscalc import create_app  # noqa: E402

TEST_CONFIG = {
    'TESTING': True,
    'WTF_CSRF_ENABLED': False,
    'SECRET_KEY': 'test-secret-key',
    'RATELIMIT_ENABLED': False,
    'RATELIMIT_STORAGE_URI': 'memory://',
    'CACHE_TYPE': 'NullCache',
    'REDIS_URL': None,
    'APP_BASE_URL': 'https://www.allwayscalc.com',
    'GOOGLE_AI_API_KEY': 'test-google-key',
}


@pytest.fixture
def make_app():
    """Build an app with per-test config overrides."""

    def _factory(**overrides):
        config = dict(TEST_CONFIG)
        config.update(overrides)
        return create_app(config)

    return _factory


@pytest.fixture
def app(make_app):
    """Create and configure a new app instance for each test."""
    return make_app()


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def fake_gemini(monkeypatch):
    """Replace the Gemini transport; tests read ``calls`` and can set ``error``."""
    from allwayscalc.services.ai import GoogleAIClient, GoogleAIClientError, GoogleAIResult

    state = {"calls": [], "error": None, "text": "Step 1: subtract 10.\nStep 2: divide by 2.\nx = 15"}

    def _generate_content(self, *, contents, model=None, **kwargs):
        state["calls"].append({"contents": contents, "model": model})
        if state["error"]:
            raise GoogleAIClientError(state["error"])
        return GoogleAIResult(text=state["text"], raw=None)

    monkeypatch.setattr(GoogleAIClient, "_ensure_global_configuration", lambda self: None)
    monkeypatch.setattr(GoogleAIClient, "generate_content", _generate_content)
    return state
