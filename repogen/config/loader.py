import sys
from pathlib import Path

import yaml
from hotlog import get_logger
from pydantic import ValidationError

from repogen.config.models import TemplateConfig
from repogen.exceptions import ConfigError, ConfigValidationError

logger = get_logger(__name__)

DEFAULT_CONFIG_NAME = 'config.yaml'


def default_config_path() -> Path:
    """Return ``config.yaml`` next to the running executable."""
    return Path(sys.argv[0]).resolve().parent / DEFAULT_CONFIG_NAME


def load_config(yaml_file: Path) -> TemplateConfig:
    """Load and validate the template configuration file.

    Args:
        yaml_file: Path to the YAML configuration file.

    Returns:
        A validated TemplateConfig instance.

    Raises:
        ConfigError: The file cannot be read or is not valid YAML.
        ConfigValidationError: The YAML does not have the expected shape.
    """
    logger.info('loading_config', config_file=str(yaml_file), _display_level=1)
    try:
        with yaml_file.open(encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        msg = f'Cannot read config file {yaml_file}: {e}'
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f'Invalid YAML in config file {yaml_file}: {e}'
        raise ConfigError(msg) from e

    try:
        config = TemplateConfig.model_validate(data)
    except ValidationError as e:
        msg = f'Invalid config file {yaml_file}: {e}'
        raise ConfigValidationError(msg) from e

    logger.debug('config_loaded', templates=config.names())
    return config
