"""Application configuration.

Why here:
- Centralizes environment variables (pydantic-settings) away from the CLI.
- Lets adapters (HTTP provider) and the CLI read config consistently.

The naming service never reads settings implicitly: its constructor
validates only the options it is given.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.network import DasNetwork


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "das-resolution"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "das-resolution"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "das-resolution"
    return Path.home() / ".config" / "das-resolution"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env.

    `None` values are skipped so callers can pass optional CLI flags as-is.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# das-resolution user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Precedence: environment variables, project `.env`, user `.env`, defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DAS_",
        extra="ignore",
        case_sensitive=False,
        # Project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    url: str | None = Field(
        default=None,
        description="Indexer endpoint. When unset the network's default endpoint is used.",
    )
    network: DasNetwork = Field(
        default=DasNetwork.MAINNET,
        description="DAS network (mainnet/testnet/aggron).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per indexer request (seconds).",
    )
    user_agent: str = Field(
        default="das-resolution/0.1",
        min_length=1,
        description="User-Agent sent to the indexer.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ...).",
    )
