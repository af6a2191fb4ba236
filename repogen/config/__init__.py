from .loader import DEFAULT_CONFIG_NAME, default_config_path, load_config
from .models import TemplateConfig, TemplateEntry

__all__ = [
    # Models
    'TemplateConfig',
    'TemplateEntry',
    # Loader
    'DEFAULT_CONFIG_NAME',
    'default_config_path',
    'load_config',
]
