import pytest
from pytest_mock import MockerFixture

from repogen.exceptions import (
    ApiError,
    ConfigError,
    ConfigValidationError,
    GithubError,
    InvocationError,
    PromptError,
    RepogenError,
    ResponseParseError,
    log_exception,
)


@pytest.mark.parametrize(
    ('exc_type', 'category'),
    [
        (ConfigError, 'config_error'),
        (ConfigValidationError, 'config_validation_failed'),
        (PromptError, 'prompt_failed'),
        (InvocationError, 'gh_invocation_failed'),
        (ResponseParseError, 'gh_response_invalid'),
        (ApiError, 'github_api_error'),
    ],
    ids=lambda v: v.__name__ if isinstance(v, type) else v,
)
def test_log_categories(exc_type: type[RepogenError], category: str) -> None:
    assert issubclass(exc_type, RepogenError)
    assert exc_type.get_log_category() == category


def test_github_errors_share_base() -> None:
    for exc_type in (InvocationError, ResponseParseError, ApiError):
        assert issubclass(exc_type, GithubError)


def test_api_error_keeps_response() -> None:
    body = {'message': 'name already exists', 'status': '422'}
    err = ApiError(body)

    assert err.response is body
    assert str(err) == 'name already exists'


def test_api_error_without_message() -> None:
    assert str(ApiError(['unexpected'])) == 'response has no "id" field'


def test_log_exception_repogen_error(mocker: MockerFixture) -> None:
    logger = mocker.Mock()

    log_exception(logger, ConfigError('bad config'))

    logger.error.assert_called_once_with('config_error', error='bad config')
    logger.exception.assert_not_called()


def test_log_exception_other_error(mocker: MockerFixture) -> None:
    logger = mocker.Mock()

    log_exception(logger, KeyError('x'))

    logger.exception.assert_called_once_with('keyerror', error="'x'")
