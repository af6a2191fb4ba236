"""CLI module for repogen.

The CLI layer stays thin:

- `main.py`: the Typer app. Declares the options and hands them to the
  business logic through `run_cli_command`.
- `utils.py`: logging setup and the exception-to-exit-code wrapper.
- Business logic lives in `repogen.commands.*`, so it can be tested without
  going through Typer.
"""
