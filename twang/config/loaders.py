# twang/config/loaders.py

"""
Functions for loading and merging twang configuration from various sources.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml
from pydantic import ValidationError

from .models import TwangConfig

logger = logging.getLogger(__name__)

# --- Constants ---
ENV_PREFIX = "TWANG_"
CONFIG_FILENAME = "twang.toml"
USER_CONFIG_FILE = Path("~/.config/twang").expanduser() / CONFIG_FILENAME

# --- Helper Functions ---

def _load_toml_file(filepath: Path) -> Dict[str, Any]:
    """Loads a TOML file if it exists, returns empty dict otherwise."""
    if filepath.is_file():
        try:
            with open(filepath, 'r') as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.warning(f"Error decoding TOML file '{filepath}': {e}. Skipping.")
        except OSError as e:
            logger.warning(f"Could not read config file '{filepath}': {e}. Skipping.")
    return {}

def _deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges 'update' dict into 'base' dict."""
    merged = base.copy()
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = _deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged

def _parse_env_value(value: str) -> Any:
    """Parses bool, int and float literals; anything else stays a string."""
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value

def _get_config_from_env() -> Dict[str, Any]:
    """
    Reads configuration settings from environment variables.

    TWANG_<SECTION>_<KEY> maps to [section] key, e.g.
    TWANG_DEFAULTS_SAMPLE_RATE=44100 sets defaults.sample_rate. Only the
    first underscore after the section separates it from the key, so keys
    may contain underscores themselves.
    """
    env_config: Dict[str, Any] = {}
    for env_var, value in os.environ.items():
        if not env_var.startswith(ENV_PREFIX):
            continue
        section, _, key = env_var[len(ENV_PREFIX):].lower().partition('_')
        if not section or not key:
            logger.debug(f"Ignoring environment variable without section/key: {env_var}")
            continue
        env_config.setdefault(section, {})[key] = _parse_env_value(value)
    return env_config

# --- Main Loading Function ---

def load_configuration(
    config_files: Optional[List[Path]] = None,
    disable_project_config: bool = False,
    disable_user_config: bool = False,
) -> TwangConfig:
    """
    Loads twang configuration from defaults, files, and environment variables.

    Precedence (highest first):
    1. Environment Variables (TWANG_*)
    2. User Config File (~/.config/twang/twang.toml)
    3. Project Config File (./twang.toml)
    4. Explicitly passed config files (earlier files win over later ones)
    5. Internal Defaults (from Pydantic models)

    Args:
        config_files: List of additional config file paths to load.
        disable_project_config: If True, ignores ./twang.toml.
        disable_user_config: If True, ignores ~/.config/twang/twang.toml.

    Returns:
        A validated TwangConfig object. Falls back to the defaults if the
        merged configuration does not validate.
    """
    merged_config_dict: Dict[str, Any] = {}

    if config_files:
        for file_path in reversed(config_files):
            merged_config_dict = _deep_merge_dicts(merged_config_dict, _load_toml_file(Path(file_path)))

    if not disable_project_config:
        project_config_file = Path(CONFIG_FILENAME).resolve()
        logger.debug(f"Attempting to load project config: {project_config_file}")
        project_cfg = _load_toml_file(project_config_file)
        if project_cfg:
            logger.info(f"Loaded project configuration from {project_config_file}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, project_cfg)

    if not disable_user_config:
        logger.debug(f"Attempting to load user config: {USER_CONFIG_FILE}")
        user_cfg = _load_toml_file(USER_CONFIG_FILE)
        if user_cfg:
            logger.info(f"Loaded user configuration from {USER_CONFIG_FILE}")
            merged_config_dict = _deep_merge_dicts(merged_config_dict, user_cfg)

    env_cfg = _get_config_from_env()
    if env_cfg:
        logger.debug(f"Applying environment variable configuration: {env_cfg}")
        merged_config_dict = _deep_merge_dicts(merged_config_dict, env_cfg)

    try:
        final_config = TwangConfig(**merged_config_dict)
    except ValidationError as e:
        logger.error(f"Configuration validation failed:\n{e}")
        logger.warning("Falling back to default configuration due to validation errors.")
        return TwangConfig()
    logger.debug("Configuration loaded and validated successfully.")
    return final_config
