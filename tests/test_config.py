import pytest

from ai_news_digest.core.config import Settings
from ai_news_digest.core.errors import ConfigurationError


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", " gk ")
    monkeypatch.setenv("LINE_CHANNEL_ACCESS_TOKEN", "lt")
    monkeypatch.delenv("LINE_GROUP_ID", raising=False)
    settings = Settings.from_env()
    assert settings.require_gemini_api_key() == "gk"
    assert settings.missing() == ["LINE_GROUP_ID"]
    with pytest.raises(ConfigurationError):
        settings.require_line_credentials()


def test_settings_checks_each_capability_independently() -> None:
    settings = Settings(line_channel_access_token="lt", line_group_id="g")
    assert settings.require_line_credentials() == ("lt", "g")
    with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
        settings.require_gemini_api_key()
