"""
Configuration for songsheet

Settings are read from a YAML file. Lookup order: explicit path,
$SONGSHEET_CONFIG, ./songsheet.yaml. A missing file means defaults.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError
from .layout import BOOK_MODE_THRESHOLD, CHORDS_ONLY_SEPARATOR

logger = logging.getLogger(__name__)


CONFIG_ENV_VAR = 'SONGSHEET_CONFIG'
DEFAULT_CONFIG_FILE = 'songsheet.yaml'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class SongsheetConfig:
    """User preferences for rendering"""
    default_variant: str = 'content'
    book_mode: bool = False
    book_mode_threshold: int = BOOK_MODE_THRESHOLD
    chords_only_separator: str = CHORDS_ONLY_SEPARATOR
    log_level: str = 'WARNING'

    @classmethod
    def from_dict(cls, data: dict) -> 'SongsheetConfig':
        known = {f.name: f for f in fields(cls)}
        values = {}
        for name, value in data.items():
            if name not in known:
                logger.debug("Ignoring unknown config key %r", name)
                continue
            expected = type(getattr(cls, name))
            # bool is a subclass of int, so check it explicitly
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{name} must be {expected.__name__}, got {type(value).__name__}"
                )
            values[name] = value

        config = cls(**values)
        config.log_level = config.log_level.upper()
        if config.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if config.book_mode_threshold < 0:
            raise ConfigError("book_mode_threshold must not be negative")
        return config


def find_config_file(path: Optional[str] = None) -> Optional[Path]:
    """Resolve which config file to read, or None if there is none."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    local = Path.cwd() / DEFAULT_CONFIG_FILE
    if local.exists():
        return local
    return None


def load_config(path: Optional[str] = None) -> SongsheetConfig:
    """Load configuration, falling back to defaults when no file exists."""
    config_path = find_config_file(path)
    if config_path is None:
        return SongsheetConfig()

    if not config_path.exists():
        if path:
            raise ConfigError(f"Config file not found: {config_path}")
        logger.debug("Config file %s does not exist, using defaults", config_path)
        return SongsheetConfig()

    try:
        data = yaml.safe_load(config_path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return SongsheetConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    logger.debug("Loaded config from %s", config_path)
    return SongsheetConfig.from_dict(data)
