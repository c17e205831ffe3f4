"""cmake-init CLI command for project scaffolding.

Parses the option surface, rejects mutually exclusive combinations,
then resolves the configuration and writes the scaffold. Non-interactive.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cmake_init import __version__
from cmake_init.cli.output import render_success
from cmake_init.errors import CmakeInitError, OptionConflictError
from cmake_init.models.config import RawOptions, load_user_defaults
from cmake_init.models.options import CStandard, CxxStandard, Vcs
from cmake_init.observability import configure_logging, get_logger
from cmake_init.scaffold.init import generate

logger = get_logger("cli")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cmake-init {__version__}")
        raise typer.Exit()


def check_exclusive(pairs: list[tuple[str, bool, str, bool]]) -> None:
    """Raise OptionConflictError for the first pair given on both sides."""
    for first, first_given, second, second_given in pairs:
        if first_given and second_given:
            raise OptionConflictError(first, second)


def _flag(value: bool) -> bool | None:
    # Flags only select; an absent flag leaves the choice to the resolver.
    return True if value else None


def init(
    directory: str = typer.Argument(".", help="Directory to initialize"),
    vcs: Optional[Vcs] = typer.Option(
        None,
        "--vcs",
        help="Initialize a new repository for the given version control "
        "system, overriding a global configuration.",
    ),
    bin: bool = typer.Option(False, "--bin", help="Use a binary (application) template"),
    lib: bool = typer.Option(False, "--lib", help="Use a library template"),
    cxx: bool = typer.Option(False, "--cxx", help="Use a C++ template"),
    c: bool = typer.Option(False, "--c", help="Use a C template"),
    c_standard: Optional[CStandard] = typer.Option(
        None, "--c-standard", help="Which edition of The C Standard to configure"
    ),
    cxx_standard: Optional[CxxStandard] = typer.Option(
        None, "--cxx-standard", help="Which edition of The C++ Standard to configure"
    ),
    name: Optional[str] = typer.Option(
        None,
        "--name",
        help="Set the resulting package name, defaults to the directory name",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Defaults file (default: $CMAKE_INIT_CONFIG or the user config dir)",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Initialize a new CMake project.

    Creates .gitignore, CMakeLists.txt, task.cmake, CMakePresets.json and
    starter sources. Existing starter files are left alone; an existing
    CMakeLists.txt, task.cmake or CMakePresets.json stops the run.
    """
    configure_logging()

    try:
        check_exclusive(
            [
                ("--bin", bin, "--lib", lib),
                ("--cxx", cxx, "--c", c),
                ("--c-standard", c_standard is not None, "--cxx-standard", cxx_standard is not None),
            ]
        )
    except OptionConflictError as e:
        raise typer.BadParameter(str(e)) from e

    raw = RawOptions(
        vcs=vcs,
        bin=_flag(bin),
        lib=_flag(lib),
        cxx=_flag(cxx),
        c=_flag(c),
        c_standard=c_standard,
        cxx_standard=cxx_standard,
        name=name,
    )
    target = Path(directory).resolve()

    try:
        defaults = load_user_defaults(config)
        result = generate(target, raw, defaults)
    except CmakeInitError as e:
        logger.debug("run.failed", error=type(e).__name__)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    render_success(result, Console())
