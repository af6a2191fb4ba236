"""Colored terminal rendering of GitHub API responses."""

from repogen.display.colors import COLOR_CODES, Syntax, cfmt, indent
from repogen.display.filters import RESPONSE_FIELDS, filter_fields
from repogen.display.response import (
    is_success,
    render_failure,
    render_response,
    render_success,
)
from repogen.display.tree import echo_block, echo_lines, render_block, render_inline

__all__ = [
    'COLOR_CODES',
    'RESPONSE_FIELDS',
    'Syntax',
    'cfmt',
    'echo_block',
    'echo_lines',
    'filter_fields',
    'indent',
    'is_success',
    'render_block',
    'render_failure',
    'render_inline',
    'render_response',
    'render_success',
]
