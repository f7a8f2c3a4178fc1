"""
OTUN - Configuration
Locates and reads the Telegram bot configuration file (YAML or JSON).
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

import yaml

from notifier.errors import ConfigError
from notifier.notifications import TelegramCredentials

logger = logging.getLogger(__name__)


CONFIG_NAMES = ("telegram_config.yaml", "telegram_config.yml", "telegram_config.json")
REQUIRED_KEYS = ("bot_token", "chat_id")


def config_dir() -> Path:
    """Get the user config directory, honoring XDG_CONFIG_HOME."""
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return xdg_config / "otun"


def cache_dir() -> Path:
    """Get the user cache directory (log file location), honoring XDG_CACHE_HOME."""
    xdg_cache = Path(os.environ.get("XDG_CACHE_HOME", Path.home() / ".cache"))
    return xdg_cache / "otun"


def find_config(path: Optional[Path] = None, search_dirs: Optional[list[Path]] = None) -> Path:
    """
    Locate the configuration file.

    Args:
        path: Explicit file given on the command line. Must exist.
        search_dirs: Directories searched when no path is given.
                     Defaults to the current directory, then the user config directory.

    Returns:
        Path to an existing config file.

    Raises:
        ConfigError: If nothing is found.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError(path, "file does not exist")
        return path

    dirs = search_dirs if search_dirs is not None else [Path.cwd(), config_dir()]
    for directory in dirs:
        for name in CONFIG_NAMES:
            candidate = directory / name
            if candidate.is_file():
                logger.info(f"Using config file {candidate}")
                return candidate

    searched = ", ".join(str(d) for d in dirs)
    raise ConfigError(None, f"searched {searched}")


def load_credentials(path: Path) -> TelegramCredentials:
    """
    Read the bot token and chat id from a config file.

    Args:
        path: YAML (.yaml/.yml) or JSON (.json) file.

    Returns:
        TelegramCredentials

    Raises:
        ConfigError: If the file cannot be read or parsed, or a key is missing.
    """
    try:
        with open(path, encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(path, f"cannot be read ({e.strerror})") from e
    except json.JSONDecodeError as e:
        raise ConfigError(path, f"invalid JSON ({e.msg}, line {e.lineno})") from e
    except yaml.YAMLError as e:
        raise ConfigError(path, "invalid YAML") from e

    if not isinstance(data, dict):
        raise ConfigError(path, "expected a mapping with bot_token and chat_id")

    missing = [key for key in REQUIRED_KEYS if data.get(key) in (None, "")]
    if missing:
        raise ConfigError(path, f"missing {', '.join(missing)}")

    # YAML reads an unquoted chat id as an integer
    return TelegramCredentials(
        bot_token=str(data["bot_token"]).strip(),
        chat_id=str(data["chat_id"]).strip(),
    )
