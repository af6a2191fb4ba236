from enum import Enum

RESET = '\x1b[0m'
BOLD = '\x1b[1m'

# Codes used outside of the Syntax table
INDENT = 30
INDEX = 35
GREEN = 32
YELLOW = 33
BLUE = 34
MAGENTA = 35
WHITE = 37

INDENT_UNIT = '| '


class Syntax(Enum):
    """Semantic kinds of rendered JSON tokens."""

    STRING = 'string'
    NUMBER = 'number'
    BOOL = 'bool'
    ERROR = 'error'
    NULL = 'null'
    KEY = 'key'


COLOR_CODES: dict[Syntax, int] = {
    Syntax.STRING: 32,
    Syntax.NUMBER: 35,
    Syntax.BOOL: 33,
    Syntax.ERROR: 31,
    Syntax.NULL: 35,
    Syntax.KEY: 34,
}


def cfmt(kind: Syntax | int, data: object) -> str:
    """Wrap ``data`` in a bold ANSI color.

    ``kind`` is either a Syntax member, looked up in COLOR_CODES, or a raw
    SGR color code.

    Examples:
        >>> cfmt(Syntax.STRING, 'hello')
        '\\x1b[1;32mhello\\x1b[0m'
        >>> cfmt(37, 'git')
        '\\x1b[1;37mgit\\x1b[0m'
    """
    code = COLOR_CODES[kind] if isinstance(kind, Syntax) else kind
    return f'\x1b[1;{code}m{data}{RESET}'


def indent(depth: int) -> str:
    """Return the colored indentation marker for ``depth`` levels."""
    if depth <= 0:
        return ''
    return cfmt(INDENT, INDENT_UNIT * depth)
