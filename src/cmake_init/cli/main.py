"""cmake-init CLI entry point."""

import typer

from cmake_init.cli.init_cmd import init

app = typer.Typer(
    name="cmake-init",
    help="The missing CMake project initializer",
    add_completion=False,
)

# Single command: `cmake-init [DIRECTORY] [OPTIONS]`
app.command()(init)
