from .config.models import TemplateConfig, TemplateEntry
from .models import RepoRequest, TemplateRef

__all__ = [
    'RepoRequest',
    'TemplateConfig',
    'TemplateEntry',
    'TemplateRef',
]
