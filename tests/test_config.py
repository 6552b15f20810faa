from pathlib import Path

import pytest

from config import DEFAULT_BASE_URL, load_settings
from errors import ConfigurationError

REQUIRED = {
    "SUPABASE_ANON_KEY": "anon-key",
    "SUPABASE_PROJECT_URL": "https://auth.example.test/",
    "IDEABROWSER_EMAIL": "founder@example.test",
    "IDEABROWSER_PASSWORD": "hunter2",
}

OPTIONAL = (
    "IDEABROWSER_BASE_URL",
    "IDEABROWSER_OUTPUT_DIR",
    "IDEABROWSER_REQUEST_DELAY",
    "IDEABROWSER_REQUEST_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    for name in OPTIONAL:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_defaults() -> None:
    settings = load_settings()

    assert settings.project_url == "https://auth.example.test"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.output_dir == Path(".")
    assert settings.save_html is False
    assert settings.request_delay_seconds == 1.0
    assert settings.refresh_token_path == Path("refresh_token.txt")


def test_load_settings_arguments_override_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDEABROWSER_OUTPUT_DIR", "/srv/ideas")

    assert load_settings().output_dir == Path("/srv/ideas")
    settings = load_settings(output_dir="out", save_html=True)
    assert settings.output_dir == Path("out")
    assert settings.save_html is True


@pytest.mark.parametrize("name", sorted(REQUIRED))
def test_load_settings_missing_required_variable(
    monkeypatch: pytest.MonkeyPatch, name: str
) -> None:
    monkeypatch.setenv(name, "   ")

    with pytest.raises(ConfigurationError, match=name):
        load_settings()


def test_load_settings_rejects_bad_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IDEABROWSER_REQUEST_DELAY", "soon")

    with pytest.raises(ConfigurationError, match="IDEABROWSER_REQUEST_DELAY"):
        load_settings()


def test_settings_repr_hides_credentials() -> None:
    text = repr(load_settings())

    assert "hunter2" not in text
    assert "anon-key" not in text
