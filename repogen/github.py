"""Create repositories through the authenticated ``gh`` CLI.

The ``gh`` executable must be on PATH (or named by ``REPOGEN_GH``) and
already logged in; repogen never handles tokens itself.
"""

import json
import os
import subprocess
from typing import Any

from hotlog import get_logger

from repogen.exceptions import InvocationError, ResponseParseError
from repogen.models import RepoRequest

logger = get_logger(__name__)

GH_ENV_VAR = 'REPOGEN_GH'
DEFAULT_GH = 'gh'


def gh_executable() -> str:
    """Return the gh executable to run, honouring ``REPOGEN_GH``."""
    return os.getenv(GH_ENV_VAR, '').strip() or DEFAULT_GH


def generate_endpoint(link: str) -> str:
    """Return the REST endpoint that generates a repo from template ``link``."""
    return f'/repos/{link.strip("/")}/generate'


def build_command(link: str, request: RepoRequest) -> list[str]:
    """Return the ``gh`` arguments for generating a repository."""
    return [
        'api',
        generate_endpoint(link),
        '-X',
        'POST',
        *request.form_fields(),
    ]


def run_gh(args: list[str]) -> tuple[bytes, bytes]:
    """Run gh with ``args`` and return its captured (stdout, stderr).

    The exit status is not interpreted: ``gh api`` prints the response body
    for HTTP errors too, so the caller decides from the body.

    Raises:
        InvocationError: The executable could not be started.
    """
    executable = gh_executable()
    logger.info('running_gh', command=[executable, *args], _display_level=1)
    try:
        result = subprocess.run(  # noqa: S603
            [executable, *args],
            capture_output=True,
            check=False,
        )
    except OSError as e:
        msg = f'Could not run {executable!r}: {e}'
        raise InvocationError(msg) from e

    logger.debug('gh_finished', returncode=result.returncode)
    return result.stdout, result.stderr


def parse_response(stdout: bytes, stderr: bytes = b'') -> Any:
    """Decode gh's stdout as a JSON document.

    Raises:
        ResponseParseError: Output is empty, not UTF-8 or not JSON.
    """
    try:
        text = stdout.decode('utf-8')
    except UnicodeDecodeError as e:
        msg = f'gh output is not valid UTF-8: {e}'
        raise ResponseParseError(msg) from e

    if not text.strip():
        detail = stderr.decode('utf-8', errors='replace').strip()
        msg = f'gh printed no response: {detail}' if detail else 'gh printed no response'
        raise ResponseParseError(msg)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        msg = f'gh output is not valid JSON: {e}'
        raise ResponseParseError(msg) from e


def create_repository(link: str, request: RepoRequest) -> Any:
    """Generate a repository from template ``link`` and return the response."""
    stdout, stderr = run_gh(build_command(link, request))
    return parse_response(stdout, stderr)
