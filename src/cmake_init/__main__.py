"""Allow ``python -m cmake_init``."""

from cmake_init.cli.main import app

app(prog_name="cmake-init")
