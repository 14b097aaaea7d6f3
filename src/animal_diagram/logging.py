"""Python-standard logging configuration for animal-diagram.

Logging is set up with logging.config.dictConfig() from a YAML configuration
file stored in src/animal_diagram/config/. The packaged configuration fans
out to a Rich console handler and a log file, each with its own level. The
file handler is only kept when a log file is requested.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Any, cast

import yaml

CONFIG_DIR = Path(__file__).parent / "config"
DEFAULT_CONFIG_NAME = "logging.yaml"
LOG_LEVEL_ENV_VAR = "ANIMAL_DIAGRAM_LOG_LEVEL"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def get_config_path(config_name: str | None = None) -> Path:
    """Get the path to a logging configuration file.

    Args:
        config_name: Name of config file (without extension)

    Returns:
        Path to the logging configuration file

    Raises:
        LoggingError: If no suitable configuration file is found

    """
    config_file = f"{config_name}.yaml" if config_name else DEFAULT_CONFIG_NAME
    config_path = CONFIG_DIR / config_file

    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}\n"
            f"Available configs: {sorted(p.name for p in CONFIG_DIR.glob('logging*.yaml'))}"
        )

    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return cast(dict[str, Any], config)

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def apply_level_override(config: dict[str, Any], level: str) -> None:
    """Set every logger to level and lower handler thresholds that would hide it.

    Raises:
        LoggingError: If level is not a valid logging level name

    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")
    level = level.upper()

    for logger_config in config.get("loggers", {}).values():
        logger_config["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    # Handlers filter below their own level, so only ever make them more verbose
    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "level" in handler_config:
            current = logging.getLevelName(cast(str, handler_config["level"]))
            if isinstance(current, int) and numeric_level < current:
                handler_config["level"] = level


def remove_file_handlers(config: dict[str, Any]) -> None:
    """Drop file handlers and every logger reference to them."""
    handlers = config.get("handlers", {})
    file_handlers = {
        name
        for name, handler_config in handlers.items()
        if isinstance(handler_config, dict) and "filename" in handler_config
    }
    for name in file_handlers:
        del handlers[name]

    logger_configs = list(config.get("loggers", {}).values())
    if "root" in config:
        logger_configs.append(config["root"])
    for logger_config in logger_configs:
        if "handlers" in logger_config:
            logger_config["handlers"] = [
                h for h in logger_config["handlers"] if h not in file_handlers
            ]


def create_log_directories(config: dict[str, Any]) -> None:
    """Create log directories referenced in the configuration."""
    for handler_config in config.get("handlers", {}).values():
        if isinstance(handler_config, dict) and "filename" in handler_config:
            Path(cast(str, handler_config["filename"])).parent.mkdir(
                parents=True, exist_ok=True
            )


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    log_file: Path | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            defaults to the ANIMAL_DIAGRAM_LOG_LEVEL environment variable
        log_file: Destination for the file handlers; when None, file handlers
            are removed and only console logging is configured
        force_basic: Force basic console logging (fallback mode)

    """
    level = level or os.getenv(LOG_LEVEL_ENV_VAR) or None

    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path()

        config = load_config(config_path)

        if level:
            apply_level_override(config, level)

        if log_file is None:
            remove_file_handlers(config)
        else:
            for handler_config in config.get("handlers", {}).values():
                if isinstance(handler_config, dict) and "filename" in handler_config:
                    handler_config["filename"] = str(log_file)

        create_log_directories(config)
        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.debug("Logging configured from: %s", config_path)

    except (LoggingError, ImportError, KeyError, ValueError, OSError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        fallback_logger = logging.getLogger(__name__)
        fallback_logger.warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback.

    Args:
        level: Logging level string

    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


# Standard Python logging - modules use logging.getLogger(__name__) directly
