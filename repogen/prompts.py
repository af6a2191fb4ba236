"""Interactive prompts used to fill in values not given on the command line.

Thin wrappers over ``rich.prompt`` that turn a closed input stream into a
``PromptError``. A ``KeyboardInterrupt`` is left alone so the operator can
abort at any prompt.
"""

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from repogen.exceptions import PromptError

console = Console()


def _closed(message: str) -> PromptError:
    return PromptError(f'No input available for prompt "{message}"')


def ask_text(message: str, default: str | None = None) -> str:
    """Ask for a single line of text.

    With a ``default`` an empty answer returns the default (which may be the
    empty string).
    """
    try:
        if default is None:
            return Prompt.ask(message, console=console)
        return Prompt.ask(message, default=default, show_default=False, console=console)
    except EOFError as e:
        raise _closed(message) from e


def ask_confirm(message: str) -> bool:
    """Ask a yes/no question."""
    try:
        return Confirm.ask(message, console=console)
    except EOFError as e:
        raise _closed(message) from e


def ask_select(message: str, choices: list[str]) -> str:
    """Ask the operator to pick one of ``choices``.

    Choices are listed numbered in the order given. Either the name or its
    number is accepted, a name taking precedence over a number with the same
    text; the prompt repeats until the answer is one of them. The chosen name
    is returned.
    """
    numbers = [str(index) for index in range(1, len(choices) + 1)]
    for number, choice in zip(numbers, choices):
        console.print(f'  [bold]{number}.[/bold] {escape(choice)}', highlight=False)
    try:
        answer = Prompt.ask(
            message,
            choices=[*choices, *numbers],
            show_choices=False,
            console=console,
        )
    except EOFError as e:
        raise _closed(message) from e
    if answer in choices:
        return answer
    return choices[int(answer) - 1]
