from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".github-open-prs.yaml"

# Checked in this order; the first one missing is reported.
REQUIRED_FIELDS = ("api_host_url", "search_days", "api_token", "user_name", "teams")


class ConfigError(Exception):
    """The configuration file is absent, unreadable or incomplete."""


@dataclass(frozen=True)
class Config:
    api_host_url: str
    api_token: str
    search_days: int
    user_name: str
    teams: tuple[str, ...]
    updated_since: str


def default_config_path() -> Path:
    return Path.home() / CONFIG_FILE_NAME


def _parse_search_days(value: object) -> int:
    """Accept an int or an integer-valued string such as ``"7"``."""
    error = ConfigError("Invalid configuration field: search_days must be a non-negative integer")
    if isinstance(value, (bool, float)):
        raise error
    try:
        days = int(str(value).strip())
    except ValueError:
        raise error from None
    if days < 0:
        raise error
    return days


def load_config(path: Path | None = None, today: date | None = None) -> Config:
    """Read and validate the YAML configuration.

    *path* defaults to ``~/.github-open-prs.yaml``; *today* defaults to the
    current local date and only exists so the search window can be pinned.
    """
    config_path = path if path is not None else default_config_path()
    if not config_path.is_file():
        raise ConfigError(f"Missing config file: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ConfigError(f"Failed to parse config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    for name in REQUIRED_FIELDS:
        value = data.get(name)
        if name == "teams":
            if not isinstance(value, list) or not value:
                raise ConfigError("Missing configuration field: teams (at least one team is required)")
        elif value is None or str(value).strip() == "":
            raise ConfigError(f"Missing configuration field: {name}")

    teams = tuple(str(t) for t in data["teams"] if t is not None and str(t).strip())
    if not teams:
        raise ConfigError("Missing configuration field: teams (at least one team is required)")

    search_days = _parse_search_days(data["search_days"])
    today = today or date.today()
    try:
        updated_since = (today - timedelta(days=search_days)).isoformat()
    except OverflowError:
        raise ConfigError("Invalid configuration field: search_days is too large") from None

    config = Config(
        api_host_url=str(data["api_host_url"]).strip().rstrip("/"),
        api_token=str(data["api_token"]).strip(),
        search_days=search_days,
        user_name=str(data["user_name"]).strip(),
        teams=teams,
        updated_since=updated_since,
    )
    logger.debug(
        "Loaded config from %s: host=%s user=%s teams=%s updated_since=%s",
        config_path, config.api_host_url, config.user_name, list(config.teams), config.updated_since,
    )
    return config
