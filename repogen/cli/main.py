from pathlib import Path

import typer
from hotlog import verbosity_option

from repogen.cli.utils import run_cli_command, setup_logging
from repogen.commands import create_cmd
from repogen.version import __version__

app = typer.Typer(add_completion=False)

# Module-level constants for Typer options to avoid B008
PRIVATE_OPTION = typer.Option(
    False,
    '--private',
    '-p',
    help='Create the repository as private (skips the prompt)',
)
TEMPLATE_OPTION = typer.Option(
    None,
    '--template',
    '-t',
    help='Template to use: a configured name or an owner/repo reference',
)
CONFIG_OPTION = typer.Option(
    None,
    '--config',
    '-c',
    help='Path to the YAML config file [default: config.yaml next to the executable]',
)
NAME_OPTION = typer.Option(
    None,
    '--name',
    '-n',
    help='Name of the new repository',
)
DESCRIPTION_OPTION = typer.Option(
    None,
    '--description',
    help='Repository description',
)
OWNER_OPTION = typer.Option(
    None,
    '--owner',
    '-o',
    help='User or organization that will own the repository',
)
VERSION_OPTION = typer.Option(
    default=False,
    help='Show version and exit',
)


@app.command()
def main(
    *,
    private: bool = PRIVATE_OPTION,
    template: str | None = TEMPLATE_OPTION,
    config: Path | None = CONFIG_OPTION,
    name: str | None = NAME_OPTION,
    description: str | None = DESCRIPTION_OPTION,
    owner: str | None = OWNER_OPTION,
    verbose: int = verbosity_option,
    version: bool = VERSION_OPTION,
) -> None:
    """Create a GitHub repository from a template."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)

    setup_logging(verbose)

    run_cli_command(
        lambda: create_cmd(
            config_path=config,
            template=template,
            name=name,
            description=description,
            private=private,
            owner=owner,
        ),
    )
