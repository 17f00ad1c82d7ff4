import pytest
from pydantic import ValidationError

from review_action.config.settings import Settings
from review_action.errors import ConfigurationError

_ENV_VARS = (
    "INPUT_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "INPUT_OPENAI_API_KEY",
    "OPENAI_API_KEY",
    "INPUT_OPENAI_API_MODEL",
    "OPENAI_API_MODEL",
    "INPUT_EXCLUDE",
    "EXCLUDE",
    "GITHUB_EVENT_PATH",
    "GITHUB_EVENT_NAME",
    "GITHUB_API_URL",
    "LOG_LEVEL",
    "LOGFIRE_TOKEN",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.github_token is None
    assert settings.openai_api_key is None
    assert settings.openai_api_model == "gpt-4"
    assert settings.exclude_patterns == []
    assert settings.github_api_url == "https://api.github.com"
    assert settings.log_level == "INFO"


def test_action_inputs_take_precedence(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_TOKEN", "ghs_plain")
    monkeypatch.setenv("INPUT_GITHUB_TOKEN", "ghs_input")  # pragma: allowlist secret
    monkeypatch.setenv("OPENAI_API_KEY", "sk-plain")
    monkeypatch.setenv("INPUT_OPENAI_API_KEY", "sk-input")  # pragma: allowlist secret
    monkeypatch.setenv("INPUT_OPENAI_API_MODEL", "gpt-4o")

    settings = Settings(_env_file=None)

    assert settings.github_token == "ghs_input"  # pragma: allowlist secret
    assert settings.openai_api_key == "sk-input"  # pragma: allowlist secret
    assert settings.openai_api_model == "gpt-4o"


def test_plain_names_for_local_runs(monkeypatch) -> None:
    monkeypatch.setenv("GH_TOKEN", "ghs_local")  # pragma: allowlist secret
    monkeypatch.setenv("OPENAI_API_KEY", "sk-local")  # pragma: allowlist secret
    monkeypatch.setenv("GITHUB_EVENT_PATH", "/tmp/event.json")
    monkeypatch.setenv("GITHUB_EVENT_NAME", "pull_request")
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")

    settings = Settings(_env_file=None)

    assert settings.github_token == "ghs_local"  # pragma: allowlist secret
    assert settings.github_event_path == "/tmp/event.json"
    assert settings.github_event_name == "pull_request"
    assert settings.github_api_url == "https://ghe.example.com/api/v3"
    settings.require_credentials()


def test_exclude_patterns_are_trimmed(monkeypatch) -> None:
    monkeypatch.setenv("INPUT_EXCLUDE", " *.md, dist/** ,")

    settings = Settings(_env_file=None)

    assert settings.exclude_patterns == ["*.md", "dist/**"]


def test_require_credentials_lists_missing_values(monkeypatch) -> None:
    monkeypatch.setenv("INPUT_OPENAI_API_KEY", "sk-test")  # pragma: allowlist secret

    settings = Settings(_env_file=None)

    with pytest.raises(ConfigurationError) as exc_info:
        settings.require_credentials()

    assert str(exc_info.value) == (
        "Missing required environment variables: GITHUB_TOKEN, GITHUB_EVENT_PATH"
    )


def test_invalid_log_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
