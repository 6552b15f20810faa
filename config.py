"""Environment-backed settings for a scrape run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from errors import ConfigurationError

DEFAULT_BASE_URL = "https://www.ideabrowser.com"
DEFAULT_REQUEST_DELAY_SECONDS = 1.0
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
REFRESH_TOKEN_FILENAME = "refresh_token.txt"

_REQUIRED_VARS = (
    "SUPABASE_ANON_KEY",
    "SUPABASE_PROJECT_URL",
    "IDEABROWSER_EMAIL",
    "IDEABROWSER_PASSWORD",
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Explicit configuration handed to each component at construction."""

    anon_key: str
    project_url: str
    email: str
    password: str
    base_url: str = DEFAULT_BASE_URL
    output_dir: Path = Path(".")
    save_html: bool = False
    request_delay_seconds: float = DEFAULT_REQUEST_DELAY_SECONDS
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def refresh_token_path(self) -> Path:
        return self.output_dir / REFRESH_TOKEN_FILENAME

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks.
        return (
            f"Settings(project_url={self.project_url!r}, base_url={self.base_url!r}, "
            f"output_dir={str(self.output_dir)!r}, save_html={self.save_html})"
        )


def load_settings(
    output_dir: str | Path | None = None,
    save_html: bool = False,
) -> Settings:
    """Build Settings from the environment.

    Call ``load_dotenv()`` first if a .env file should be honoured. Arguments
    override the matching environment variables.

    Raises:
        ConfigurationError: a required variable is missing or a numeric one
            does not parse.
    """
    values = {name: os.getenv(name, "").strip() for name in _REQUIRED_VARS}
    missing = [name for name, value in values.items() if not value]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )

    if output_dir is None:
        output_dir = os.getenv("IDEABROWSER_OUTPUT_DIR", ".")

    return Settings(
        anon_key=values["SUPABASE_ANON_KEY"],
        project_url=values["SUPABASE_PROJECT_URL"].rstrip("/"),
        email=values["IDEABROWSER_EMAIL"],
        password=values["IDEABROWSER_PASSWORD"],
        base_url=os.getenv("IDEABROWSER_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        output_dir=Path(output_dir),
        save_html=save_html,
        request_delay_seconds=_float_env(
            "IDEABROWSER_REQUEST_DELAY", DEFAULT_REQUEST_DELAY_SECONDS
        ),
        request_timeout_seconds=_float_env(
            "IDEABROWSER_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
    )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {raw!r}")
    return value
