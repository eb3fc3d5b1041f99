"""
Configuration constants and the on-disk config used by the CLI.

Token lookup order: explicit value, ``TELEGRAM_BOT_TOKEN``, config file.
"""

import json
import os
from pathlib import Path
from typing import Any, Optional

DEFAULT_BASE_URL = "https://api.telegram.org"
CONNECT_TIMEOUT = 30.0
REQUEST_TIMEOUT = 30.0

TOKEN_ENV = "TELEGRAM_BOT_TOKEN"
CONFIG_FILE = Path.home() / ".tgbots" / "config.json"


def load_config(path: Optional[Path] = None) -> dict[str, Any]:
    try:
        return json.loads((path or CONFIG_FILE).read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def save_config(cfg: dict[str, Any], path: Optional[Path] = None) -> None:
    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(cfg, indent=2))


def resolve_token(token: Optional[str] = None, path: Optional[Path] = None) -> Optional[str]:
    if token:
        return token
    env_token = os.environ.get(TOKEN_ENV)
    if env_token:
        return env_token
    return load_config(path).get("token")
