from typing import Any

from repogen.exceptions.core import RepogenError


class GithubError(RepogenError):
    """Base class for errors talking to GitHub through the gh CLI."""

    log_category = 'github_error'


class InvocationError(GithubError):
    """The gh executable could not be started."""

    log_category = 'gh_invocation_failed'


class ResponseParseError(GithubError):
    """gh did not print a JSON document on stdout."""

    log_category = 'gh_response_invalid'


class ApiError(GithubError):
    """GitHub answered, but refused to create the repository.

    The full response body is kept so it can be shown to the operator.
    """

    log_category = 'github_api_error'

    def __init__(self, response: Any) -> None:
        self.response = response
        message = response.get('message') if isinstance(response, dict) else None
        super().__init__(message or 'response has no "id" field')
