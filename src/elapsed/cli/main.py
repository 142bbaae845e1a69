import logging

import typer

from .commands.timer import timer

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

# Create the main Typer app
typer_app = typer.Typer(add_completion=False)

# Single command: ACTION is a positional argument, not a subcommand.
# Unknown options reach the command as arguments and are reported there.
typer_app.command(
    name="elapsed",
    add_help_option=False,
    context_settings={"ignore_unknown_options": True},
)(timer)

if __name__ == "__main__":
    typer_app()
