from formbrowser.core import get_settings, init_formbrowser, settings
from formbrowser.logic.http import BrowserHttp
from formbrowser.settings import Settings


def test_settings_defaults():
    config = Settings()
    assert config.debug is False
    assert config.http_timeout == 30.0
    assert config.verify_ssl is True
    assert config.max_history == 10
    assert "formbrowser/" in config.user_agent


def test_settings_env(monkeypatch):
    monkeypatch.setenv("FORMBROWSER_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("FORMBROWSER_USER_AGENT", "Godzilla Firehose 0.1")
    monkeypatch.setenv("FORMBROWSER_MAX_HISTORY", "3")
    config = Settings()
    assert config.http_timeout == 5.0
    assert config.user_agent == "Godzilla Firehose 0.1"
    assert config.max_history == 3


def test_settings_cached():
    assert get_settings() is get_settings()
    assert settings.user_agent == get_settings().user_agent


def test_init():
    init_formbrowser()


def test_http_client():
    http = BrowserHttp()
    assert http.session.headers["User-Agent"] == settings.user_agent
    assert http.timeout == settings.http_timeout

    http = BrowserHttp(user_agent="Godzilla Firehose 0.1", timeout=2, verify=False)
    assert http.session.headers["User-Agent"] == "Godzilla Firehose 0.1"
    assert http.timeout == 2
    assert http.verify is False
    session = http.session
    assert http.reset() is not session
    assert http.session.headers["User-Agent"] == "Godzilla Firehose 0.1"
    http.close()
