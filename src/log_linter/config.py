from __future__ import annotations

import json
import logging
from pathlib import Path

from log_linter.models import (
    DEFAULT_ALLOWED_PUNCTUATION,
    DEFAULT_SENSITIVE_KEYWORDS,
    LinterConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".loglinter.json"

_BOOL_OPTIONS = (
    "check_lowercase",
    "check_english_only",
    "check_special_chars",
    "check_sensitive_data",
    "english_only_gate",
)


class ConfigError(ValueError):
    pass


def default_config() -> LinterConfig:
    return LinterConfig()


def load_config(path: str | Path) -> LinterConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file is not valid UTF-8: {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object")

    flags: dict[str, bool] = {}
    for key in _BOOL_OPTIONS:
        value = raw.get(key, True)
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be true or false")
        flags[key] = value

    keywords = tuple(_ensure_string_list(raw.get("sensitive_keywords"), "sensitive_keywords"))
    extra_methods = tuple(_ensure_string_list(raw.get("extra_log_methods"), "extra_log_methods"))

    allowed_punctuation = raw.get("allowed_punctuation", DEFAULT_ALLOWED_PUNCTUATION)
    if not isinstance(allowed_punctuation, str):
        raise ConfigError("'allowed_punctuation' must be a string")

    return LinterConfig(
        check_lowercase=flags["check_lowercase"],
        check_english_only=flags["check_english_only"],
        check_special_chars=flags["check_special_chars"],
        check_sensitive_data=flags["check_sensitive_data"],
        sensitive_keywords=keywords or DEFAULT_SENSITIVE_KEYWORDS,
        allowed_punctuation=allowed_punctuation,
        english_only_gate=flags["english_only_gate"],
        extra_log_methods=extra_methods,
    )


def load_config_or_default(directory: str | Path = ".") -> LinterConfig:
    """Load ``.loglinter.json`` from ``directory``; any failure falls back to defaults."""
    config_path = Path(directory) / CONFIG_FILE_NAME
    if not config_path.exists():
        return default_config()

    try:
        return load_config(config_path)
    except (ConfigError, OSError) as exc:
        logger.warning("Using default configuration, could not load %s: %s", config_path, exc)
        return default_config()


def write_default_config(path: str | Path, *, force: bool = False) -> Path:
    config_path = Path(path)
    if config_path.exists() and not force:
        raise ConfigError(f"Config file already exists: {config_path}")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as handle:
        json.dump(default_config().to_dict(), handle, indent=2, ensure_ascii=True)
        handle.write("\n")
    return config_path


def _ensure_string_list(value: object, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return [item.strip() for item in value if item.strip()]
