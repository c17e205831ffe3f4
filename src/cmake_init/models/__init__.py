"""cmake-init data models - re-exports all public model classes."""

from cmake_init.models.config import (
    RawOptions,
    ResolvedConfiguration,
    UserDefaults,
    load_user_defaults,
    resolve_configuration,
)
from cmake_init.models.options import CStandard, CxxStandard, Vcs

__all__ = [
    "CStandard",
    "CxxStandard",
    "RawOptions",
    "ResolvedConfiguration",
    "UserDefaults",
    "Vcs",
    "load_user_defaults",
    "resolve_configuration",
]
