import json
from typing import Any

from repogen.display.colors import (
    BLUE,
    BOLD,
    GREEN,
    MAGENTA,
    RESET,
    WHITE,
    YELLOW,
    Syntax,
    cfmt,
)
from repogen.display.filters import RESPONSE_FIELDS, filter_fields
from repogen.display.tree import render_block


def is_success(response: Any) -> bool:
    """Return True when GitHub reported a created repository."""
    return isinstance(response, dict) and 'id' in response


def clone_command(url: str) -> str:
    """Return a colored ``git clone <url>`` line, each word followed by a space."""
    words = [
        cfmt(GREEN, 'git'),
        cfmt(YELLOW, 'clone'),
        cfmt(WHITE, url),
    ]
    return ''.join(f'{word} ' for word in words)


def success_banner(name: Any) -> str:
    """Return the banner announcing the created repository.

    The name is shown as JSON, so a string is quoted and a missing name reads
    ``null``.
    """
    title = f'Repo {json.dumps(name, ensure_ascii=False)} Created'
    return f'{BOLD}{cfmt(GREEN, title)}{RESET}'


def render_success(response: dict[str, Any]) -> list[str]:
    """Render a successful generate response.

    Shows the allow-listed fields followed by ready-to-run clone commands for
    the SSH and HTTPS URLs. A clone line is left out when GitHub did not
    return that URL.
    """
    lines = [success_banner(response.get('name')), '']
    lines.extend(render_block(filter_fields(response, RESPONSE_FIELDS)))

    urls = [
        url
        for url in (response.get('ssh_url'), response.get('clone_url'))
        if isinstance(url, str) and url
    ]
    if urls:
        lines.extend(['', '', cfmt(MAGENTA, 'To clone the repo use:')])
        for i, url in enumerate(urls):
            if i:
                lines.append(cfmt(BLUE, 'or'))
            lines.append(clone_command(url))
    return lines


def render_failure(response: Any) -> list[str]:
    """Render a response without an ``id``: the whole body, unfiltered."""
    return [cfmt(Syntax.ERROR, 'Error Occurred'), *render_block(response, depth=1)]


def render_response(response: Any) -> list[str]:
    """Render a generate response as success or failure."""
    if is_success(response):
        return render_success(response)
    return render_failure(response)
