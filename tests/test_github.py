import subprocess

import pytest
from pytest_mock import MockerFixture

from repogen.exceptions import InvocationError, ResponseParseError
from repogen.github import (
    build_command,
    create_repository,
    generate_endpoint,
    gh_executable,
    parse_response,
    run_gh,
)
from repogen.models import RepoRequest


def _completed(stdout: bytes, stderr: bytes = b'', returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(
        args=[],
        returncode=returncode,
        stdout=stdout,
        stderr=stderr,
    )


@pytest.mark.parametrize(
    ('link', 'endpoint'),
    [
        ('acme/template', '/repos/acme/template/generate'),
        ('/acme/template', '/repos/acme/template/generate'),
        ('acme/template/', '/repos/acme/template/generate'),
    ],
)
def test_generate_endpoint(link: str, endpoint: str) -> None:
    assert generate_endpoint(link) == endpoint


def test_build_command_with_owner() -> None:
    request = RepoRequest(name='demo', description='A demo', private=True, owner='acme')

    assert build_command('acme/template', request) == [
        'api',
        '/repos/acme/template/generate',
        '-X',
        'POST',
        '-F',
        'name=demo',
        '-F',
        'description=A demo',
        '-F',
        'private=true',
        '-F',
        'owner=acme',
    ]


def test_build_command_without_owner() -> None:
    request = RepoRequest(name='demo', description='', private=False, owner='')

    args = build_command('acme/template', request)

    assert args[-2:] == ['-F', 'private=false']
    assert not any(arg.startswith('owner=') for arg in args)


def test_gh_executable_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('REPOGEN_GH', raising=False)
    assert gh_executable() == 'gh'


def test_gh_executable_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('REPOGEN_GH', '/opt/gh/bin/gh')
    assert gh_executable() == '/opt/gh/bin/gh'


def test_run_gh_captures_output(
    mocker: MockerFixture,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv('REPOGEN_GH', raising=False)
    run = mocker.patch(
        'repogen.github.subprocess.run',
        return_value=_completed(b'{"id": 1}', returncode=1),
    )

    stdout, stderr = run_gh(['api', '/user'])

    assert stdout == b'{"id": 1}'
    assert stderr == b''
    assert run.call_args.args[0] == ['gh', 'api', '/user']
    assert run.call_args.kwargs['check'] is False


@pytest.mark.parametrize(
    'error',
    [FileNotFoundError('gh'), PermissionError('gh')],
    ids=['missing', 'not_executable'],
)
def test_run_gh_launch_failure(mocker: MockerFixture, error: OSError) -> None:
    mocker.patch('repogen.github.subprocess.run', side_effect=error)

    with pytest.raises(InvocationError, match='Could not run'):
        run_gh(['api', '/user'])


def test_parse_response_object() -> None:
    assert parse_response(b'{"message": "Not Found"}') == {'message': 'Not Found'}


@pytest.mark.parametrize(
    ('stdout', 'stderr', 'match'),
    [
        (b'', b'', 'gh printed no response'),
        (b'  \n', b'gh: not logged in\n', 'not logged in'),
        (b'not json', b'', 'not valid JSON'),
        (b'\xff\xfe', b'', 'not valid UTF-8'),
    ],
    ids=['empty', 'empty_with_stderr', 'not_json', 'not_utf8'],
)
def test_parse_response_invalid(stdout: bytes, stderr: bytes, match: str) -> None:
    with pytest.raises(ResponseParseError, match=match):
        parse_response(stdout, stderr)


def test_create_repository(mocker: MockerFixture) -> None:
    run = mocker.patch(
        'repogen.github.run_gh',
        return_value=(b'{"id": 42, "name": "demo"}', b''),
    )
    request = RepoRequest(name='demo', private=False)

    response = create_repository('acme/template', request)

    assert response == {'id': 42, 'name': 'demo'}
    run.assert_called_once_with(build_command('acme/template', request))
