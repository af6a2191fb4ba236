from repogen.exceptions.config import ConfigError, ConfigValidationError
from repogen.exceptions.core import RepogenError, log_exception
from repogen.exceptions.github import (
    ApiError,
    GithubError,
    InvocationError,
    ResponseParseError,
)
from repogen.exceptions.prompt import PromptError

__all__ = [
    'ApiError',
    'ConfigError',
    'ConfigValidationError',
    'GithubError',
    'InvocationError',
    'PromptError',
    'RepogenError',
    'ResponseParseError',
    'log_exception',
]
