"""
Configuration management for the Org Migration Planner.
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .exceptions import ConfigurationError
from .logging_config import get_logger

logger = get_logger('config')

SUPPORTED_FORMATS = ('text', 'json')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ClassifierConfig:
    """Naming conventions used to tell custom components from standard ones."""
    custom_suffix: str = "__c"
    name_separator: str = "."
    # Extra built-in object names on top of the static reference list
    additional_standard_objects: List[str] = field(default_factory=list)


@dataclass
class OutputConfig:
    """Configuration for output formatting."""
    default_format: str = "text"
    show_notes: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    log_file: Optional[str] = None
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Optional path to configuration file

    Returns:
        Config object with loaded settings

    Raises:
        ConfigurationError: If configuration file is invalid
    """
    config = Config()

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

        if config_data:
            if not isinstance(config_data, dict):
                raise ConfigurationError("Configuration file must contain a mapping at the top level")
            _update_config_from_dict(config, config_data)
            logger.info(f"Loaded configuration from {config_path}")

    elif config_path:
        logger.warning(f"Configuration file not found: {config_path}")

    validation_errors = validate_config(config)
    if validation_errors:
        raise ConfigurationError("Configuration validation failed:\n" + "\n".join(validation_errors))

    return config


def validate_config(config: Config) -> List[str]:
    """
    Check configuration values that the engine relies on.

    Returns:
        List of error messages, empty when the configuration is valid
    """
    errors = []

    if not isinstance(config.classifier.custom_suffix, str) or not config.classifier.custom_suffix:
        errors.append("classifier.custom_suffix must be a non-empty string")
    if not isinstance(config.classifier.name_separator, str) or not config.classifier.name_separator:
        errors.append("classifier.name_separator must be a non-empty string")
    if not isinstance(config.classifier.additional_standard_objects, list):
        errors.append("classifier.additional_standard_objects must be a list of object names")

    if config.output.default_format not in SUPPORTED_FORMATS:
        errors.append(
            f"output.default_format '{config.output.default_format}' is not one of {', '.join(SUPPORTED_FORMATS)}"
        )
    if not isinstance(config.output.show_notes, bool):
        errors.append("output.show_notes must be true or false")

    if not isinstance(config.logging.level, str) or config.logging.level.upper() not in LOG_LEVELS:
        errors.append(f"logging.level '{config.logging.level}' is not one of {', '.join(LOG_LEVELS)}")
    if config.logging.log_file is not None and not isinstance(config.logging.log_file, str):
        errors.append("logging.log_file must be a file path")
    if not isinstance(config.logging.verbose, bool):
        errors.append("logging.verbose must be true or false")

    return errors


def _update_config_from_dict(config: Config, config_data: Dict) -> None:
    """
    Update configuration object from dictionary data.

    Args:
        config: Config object to update
        config_data: Dictionary with configuration data
    """
    if 'classifier' in config_data:
        classifier_data = config_data['classifier'] or {}
        if 'custom_suffix' in classifier_data:
            config.classifier.custom_suffix = classifier_data['custom_suffix']
        if 'name_separator' in classifier_data:
            config.classifier.name_separator = classifier_data['name_separator']
        if 'additional_standard_objects' in classifier_data:
            config.classifier.additional_standard_objects = classifier_data['additional_standard_objects']

    if 'output' in config_data:
        output_data = config_data['output'] or {}
        if 'default_format' in output_data:
            config.output.default_format = output_data['default_format']
        if 'show_notes' in output_data:
            config.output.show_notes = output_data['show_notes']

    if 'logging' in config_data:
        logging_data = config_data['logging'] or {}
        if 'level' in logging_data:
            config.logging.level = logging_data['level']
        if 'log_file' in logging_data:
            config.logging.log_file = logging_data['log_file']
        if 'verbose' in logging_data:
            config.logging.verbose = logging_data['verbose']


def get_default_config_path() -> Optional[str]:
    """
    Get the default configuration file path.

    Returns:
        Path to default config file if it exists, None otherwise
    """
    possible_paths = [
        'migration_planner.yaml',
        'migration_planner.yml',
        os.path.expanduser('~/.migration_planner.yaml'),
        os.path.expanduser('~/.migration_planner.yml'),
    ]

    for path in possible_paths:
        if os.path.exists(path):
            return path

    return None
