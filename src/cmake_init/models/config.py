"""Configuration resolution for cmake-init.

Merges the options given on the command line with the user's defaults
file and the built-in defaults into one immutable ResolvedConfiguration.
Precedence per field: explicit option, then defaults file, then built-in.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import typer
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from cmake_init.errors import ConfigurationError
from cmake_init.models.options import (
    LATEST_C_STANDARD,
    LATEST_CXX_STANDARD,
    CStandard,
    CxxStandard,
    Vcs,
    to_cmake_feature_string,
    to_string,
)
from cmake_init.observability import get_logger

logger = get_logger("config")

CONFIG_ENV_VAR = "CMAKE_INIT_CONFIG"
APP_NAME = "cmake-init"


class RawOptions(BaseModel):
    """Options as supplied by the user. None means "not given"."""

    model_config = {"extra": "forbid", "frozen": True}

    vcs: Vcs | None = None
    bin: bool | None = None
    lib: bool | None = None
    c: bool | None = None
    cxx: bool | None = None
    c_standard: CStandard | None = None
    cxx_standard: CxxStandard | None = None
    name: str | None = None


class UserDefaults(BaseModel):
    """User-level defaults loaded from config.yaml."""

    model_config = {"extra": "forbid"}

    vcs: Vcs | None = None
    target: Literal["bin", "lib"] | None = None
    language: Literal["c", "cxx"] | None = None
    c_standard: CStandard | None = None
    cxx_standard: CxxStandard | None = None


class ResolvedConfiguration(BaseModel):
    """Fully resolved options for one scaffolding run.

    Exactly one of is_binary/is_library and exactly one of is_c/is_cxx is
    true. Both standard editions are always present; only the one matching
    the selected dialect ends up in the build.
    """

    model_config = {"extra": "forbid", "frozen": True}

    vcs: Vcs = Vcs.none
    is_binary: bool = True
    is_library: bool = False
    is_c: bool = False
    is_cxx: bool = True
    c_standard: CStandard = LATEST_C_STANDARD
    cxx_standard: CxxStandard = LATEST_CXX_STANDARD
    name: str = Field(min_length=1)

    @model_validator(mode="after")
    def _check_exclusive_pairs(self) -> ResolvedConfiguration:
        if self.is_binary == self.is_library:
            raise ValueError("exactly one of binary or library must be selected")
        if self.is_c == self.is_cxx:
            raise ValueError("exactly one of C or C++ must be selected")
        return self

    @property
    def language(self) -> str:
        """CMake LANGUAGES value for the selected dialect."""
        return "CXX" if self.is_cxx else "C"

    @property
    def source_extension(self) -> str:
        return "cpp" if self.is_cxx else "c"

    def template_data(self) -> dict[str, Any]:
        """Build the data mapping every template is rendered with."""
        return {
            "bin": self.is_binary,
            "lib": self.is_library,
            "c": self.is_c,
            "cxx": self.is_cxx,
            "name": self.name,
            "c_std": to_cmake_feature_string(self.c_standard),
            "cxx_std": to_cmake_feature_string(self.cxx_standard),
            "c_standard": to_string(self.c_standard),
            "cxx_standard": to_string(self.cxx_standard),
            "vcs": to_string(self.vcs),
            "language": self.language,
            "source_ext": self.source_extension,
        }


def _pick(selected: bool | None, other: bool | None, default: bool) -> bool:
    """Resolve one side of a paired flag."""
    if selected is not None:
        return selected
    if other is not None:
        return not other
    return default


def resolve_configuration(
    raw: RawOptions,
    directory: Path,
    defaults: UserDefaults | None = None,
) -> ResolvedConfiguration:
    """Merge raw options with defaults into a ResolvedConfiguration.

    Args:
        raw: Options given by the user. Paired options must already be
            exclusive; the command line enforces this before calling.
        directory: Target directory. Its base name is the default project name.
        defaults: User defaults from the config file, if any.

    Returns:
        The resolved, immutable configuration.

    Raises:
        ConfigurationError: If both sides of a paired option are set, or the
            project name is empty or contains a path separator.
    """
    defaults = defaults or UserDefaults()

    if raw.bin and raw.lib:
        raise ConfigurationError("--bin and --lib are mutually exclusive")
    if raw.c and raw.cxx:
        raise ConfigurationError("--c and --cxx are mutually exclusive")
    if raw.c_standard is not None and raw.cxx_standard is not None:
        raise ConfigurationError("--c-standard and --cxx-standard are mutually exclusive")

    is_library = _pick(raw.lib, raw.bin, defaults.target == "lib")
    is_c = _pick(raw.c, raw.cxx, defaults.language == "c")

    name = raw.name if raw.name is not None else directory.resolve().name
    if not name.strip():
        raise ConfigurationError(
            f"cannot derive a project name from {directory}; pass --name"
        )
    if "/" in name or "\\" in name:
        raise ConfigurationError(f"project name must not contain a path separator: {name!r}")

    try:
        config = ResolvedConfiguration(
            vcs=raw.vcs or defaults.vcs or Vcs.none,
            is_binary=not is_library,
            is_library=is_library,
            is_c=is_c,
            is_cxx=not is_c,
            c_standard=raw.c_standard or defaults.c_standard or LATEST_C_STANDARD,
            cxx_standard=raw.cxx_standard or defaults.cxx_standard or LATEST_CXX_STANDARD,
            name=name,
        )
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e

    logger.debug("config.resolved", **config.template_data())
    return config


def default_config_path() -> Path:
    """Return the defaults file location: $CMAKE_INIT_CONFIG or the app dir."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path(typer.get_app_dir(APP_NAME)) / "config.yaml"


def load_user_defaults(path: Path | None = None) -> UserDefaults:
    """Load UserDefaults from a YAML file. Returns defaults if not found.

    Args:
        path: Explicit file to read. If None, uses default_config_path().

    Returns:
        Validated UserDefaults instance.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            or contains unknown keys or values.
    """
    explicit = path is not None
    config_path = path if path is not None else default_config_path()
    if not config_path.exists():
        if explicit:
            raise ConfigurationError(f"config file not found: {config_path}")
        return UserDefaults()

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"cannot read {config_path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"{config_path}: not valid UTF-8") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{config_path}: invalid YAML: {e}") from e

    if raw is None:
        return UserDefaults()
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{config_path}: expected a mapping at the top level")

    try:
        defaults = UserDefaults.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"{config_path}: {e}") from e

    logger.debug("config.defaults_loaded", path=str(config_path))
    return defaults
