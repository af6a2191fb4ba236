"""Render JSON values as colored, YAML-like text.

Scalars are formatted by ``render_inline``; containers by ``render_block``,
which returns one string per output line so callers and tests can work with
the lines directly.
"""

import json
from typing import Any

import typer

from repogen.display.colors import INDEX, Syntax, cfmt, indent


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def render_inline(value: Any) -> str:
    """Return a colored scalar: null, boolean, number or string."""
    if value is None:
        return cfmt(Syntax.NULL, 'null')
    if isinstance(value, bool):
        return cfmt(Syntax.BOOL, 'true' if value else 'false')
    if isinstance(value, (int, float)):
        return cfmt(Syntax.NUMBER, json.dumps(value))
    if isinstance(value, str):
        return cfmt(Syntax.STRING, value)
    msg = f'Not a JSON scalar: {value!r}'
    raise TypeError(msg)


def index_prefix(index: int) -> str:
    """Return the marker shown before an array element."""
    return f'{cfmt(INDEX, index)}| '


def render_block(value: Any, depth: int = 0, prefix: str = '') -> list[str]:
    """Render ``value`` depth-first, one entry per line.

    Args:
        value: Any JSON value.
        depth: Indentation level of this value's lines.
        prefix: Text placed between indentation and a scalar (array index
            markers). Not applied to nulls or containers.

    Returns:
        The rendered lines, without trailing newlines.
    """
    if isinstance(value, list):
        lines: list[str] = []
        for i, item in enumerate(value):
            lines.extend(render_block(item, depth, index_prefix(i)))
        return lines

    if isinstance(value, dict):
        lines = []
        for key, item in value.items():
            label = f'{indent(depth)}{cfmt(Syntax.KEY, key)}:'
            if _is_container(item):
                lines.append(label)
                lines.extend(render_block(item, depth + 1))
            else:
                lines.append(f'{label} {render_inline(item)}')
        return lines

    if value is None:
        return [f'{indent(depth)}{render_inline(value)}']
    return [f'{indent(depth)}{prefix}{render_inline(value)}']


def echo_lines(lines: list[str]) -> None:
    """Print rendered lines to stdout."""
    for line in lines:
        typer.echo(line)


def echo_block(value: Any, depth: int = 0) -> None:
    """Render ``value`` and print it to stdout."""
    echo_lines(render_block(value, depth))
