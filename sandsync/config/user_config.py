#region Imports
import json
import os
from pathlib import Path
#endregion


#region Types
VALID_CLASSIFIERS = ["filesystem", "static"]
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
#endregion


#region Constants
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "sandsync" / "config.json"
CONFIG_ENV_VAR = "SANDSYNC_CONFIG"
#endregion


#region Functions


def get_config_path() -> Path:
    """
    Get the location of the configuration file.

    Returns:
        Path from SANDSYNC_CONFIG if set, otherwise ~/.config/sandsync/config.json
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config() -> dict:
    """
    Load user configuration from disk.

    Missing keys are filled in from the defaults.

    Returns:
        Configuration dictionary with user preferences
    """
    config = get_default_config()
    config_path = get_config_path()
    if not config_path.exists():
        return config

    try:
        with open(config_path, "r") as f:
            stored = json.load(f)
    except (json.JSONDecodeError, IOError):
        return config

    if isinstance(stored, dict):
        config.update(stored)
    return config


def save_config(config: dict) -> None:
    """
    Save user configuration to disk.

    Args:
        config: Configuration dictionary to save

    Raises:
        IOError: If config cannot be written
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def get_default_config() -> dict:
    """
    Get default configuration values.

    Returns:
        Default configuration dictionary
    """
    return {
        "version": "1.0",
        "classifier": "filesystem",  # "filesystem" or "static"
        "strict": False,  # Abort on the first invalid volume instead of skipping it
        "log_level": "WARNING",  # "DEBUG", "INFO", "WARNING", "ERROR"
    }


def get_classifier_name() -> str:
    """
    Get the default path classifier.

    Returns:
        One of "filesystem" or "static"
    """
    config = load_config()
    name = config.get("classifier", "filesystem")
    return name if name in VALID_CLASSIFIERS else "filesystem"


def set_classifier_name(name: str) -> None:
    """
    Set the default path classifier.

    Args:
        name: One of "filesystem" or "static"

    Raises:
        ValueError: If name is not valid
    """
    if name not in VALID_CLASSIFIERS:
        raise ValueError(f"Invalid classifier: {name}. Must be one of {VALID_CLASSIFIERS}")

    config = load_config()
    config["classifier"] = name
    save_config(config)


def get_strict() -> bool:
    """
    Get whether invalid volumes abort resolution.

    Returns:
        True for strict mode, False to skip and warn
    """
    config = load_config()
    return bool(config.get("strict", False))


def set_strict(strict: bool) -> None:
    """
    Set whether invalid volumes abort resolution.

    Args:
        strict: True for strict mode, False to skip and warn
    """
    config = load_config()
    config["strict"] = bool(strict)
    save_config(config)


def get_log_level() -> str:
    """
    Get the configured log level.

    Returns:
        One of "DEBUG", "INFO", "WARNING", "ERROR"
    """
    config = load_config()
    level = str(config.get("log_level", "WARNING")).upper()
    return level if level in VALID_LOG_LEVELS else "WARNING"


def set_log_level(level: str) -> None:
    """
    Set the log level.

    Args:
        level: One of "DEBUG", "INFO", "WARNING", "ERROR" (case-insensitive)

    Raises:
        ValueError: If level is not valid
    """
    level = level.upper()
    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level}. Must be one of {VALID_LOG_LEVELS}")

    config = load_config()
    config["log_level"] = level
    save_config(config)


#endregion
