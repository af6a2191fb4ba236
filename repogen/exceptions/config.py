from repogen.exceptions.core import RepogenError


class ConfigError(RepogenError):
    """Config file is missing, unreadable or not valid YAML."""

    log_category = 'config_error'


class ConfigValidationError(ConfigError):
    """Config file does not match the expected structure."""

    log_category = 'config_validation_failed'
