"""
Two-file JSON configuration: shipped defaults overlaid by user overrides.
Both files live in one directory and are created on first run.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "default-config.json"
USER_CONFIG_FILE = "user-config.json"

DEFAULT_CONFIG = {"OutputDir": ""}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class DezhnevConfig:
    output_dir: str = ""

    @staticmethod
    def from_dict(d: dict) -> "DezhnevConfig":
        output_dir = d.get("OutputDir") or ""
        if not isinstance(output_dir, str):
            raise ConfigError(f"OutputDir must be a string, got {output_dir!r}")
        return DezhnevConfig(output_dir=output_dir)


def default_config_dir() -> str:
    env_dir = os.getenv("DEZHNEV_CONFIG_DIR")
    if env_dir:
        return env_dir
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def merge_config(default: dict, user: dict) -> dict:
    """Overlay user onto default key by key. Keys unknown to default are dropped."""
    return {key: user[key] if key in user else value for key, value in default.items()}


def _ensure_file(path: str, content: dict) -> None:
    if os.path.isfile(path):
        return
    logging.info(f"Creating config file: {path}")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(content, f)


def _read_json_object(path: str) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    return payload


def load_config(config_dir: str | None = None) -> DezhnevConfig:
    config_dir = config_dir or default_config_dir()
    default_path = os.path.join(config_dir, DEFAULT_CONFIG_FILE)
    user_path = os.path.join(config_dir, USER_CONFIG_FILE)

    _ensure_file(default_path, DEFAULT_CONFIG)
    _ensure_file(user_path, {})

    effective = merge_config(_read_json_object(default_path), _read_json_object(user_path))
    logging.debug(f"Effective config: {effective}")
    return DezhnevConfig.from_dict(effective)
