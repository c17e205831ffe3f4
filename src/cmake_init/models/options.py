"""Enumerated option values and their external string forms.

Each option enum has a display form, used for CLI input, the defaults
file and template output. Standard editions also have a CMake
compile-feature token (``c17`` -> ``c_std_17``) that CMakeLists.txt uses
to request the language level.
"""

from __future__ import annotations

from enum import Enum

from cmake_init.errors import InvariantViolationError


class Vcs(str, Enum):
    """Version control system to initialize in the target directory."""

    none = "none"
    git = "git"

    def __str__(self) -> str:
        return to_string(self)

    @classmethod
    def parse(cls, text: str) -> Vcs:
        return _parse(_VCS_NAMES, text, "version control system")


class CStandard(str, Enum):
    """Editions of The C Standard."""

    c90 = "c90"
    c99 = "c99"
    c11 = "c11"
    c17 = "c17"
    c23 = "c23"

    def __str__(self) -> str:
        return to_string(self)

    @property
    def feature_token(self) -> str:
        return to_cmake_feature_string(self)

    @classmethod
    def parse(cls, text: str) -> CStandard:
        return _parse(_C_STANDARD_NAMES, text, "C standard")


class CxxStandard(str, Enum):
    """Editions of The C++ Standard."""

    cxx98 = "c++98"
    cxx11 = "c++11"
    cxx17 = "c++17"
    cxx20 = "c++20"
    cxx23 = "c++23"
    cxx26 = "c++26"

    def __str__(self) -> str:
        return to_string(self)

    @property
    def feature_token(self) -> str:
        return to_cmake_feature_string(self)

    @classmethod
    def parse(cls, text: str) -> CxxStandard:
        return _parse(_CXX_STANDARD_NAMES, text, "C++ standard")


LATEST_C_STANDARD = CStandard.c23
LATEST_CXX_STANDARD = CxxStandard.cxx23

_VCS_NAMES: dict[Vcs, str] = {
    Vcs.none: "none",
    Vcs.git: "git",
}

_C_STANDARD_NAMES: dict[CStandard, str] = {
    CStandard.c90: "c90",
    CStandard.c99: "c99",
    CStandard.c11: "c11",
    CStandard.c17: "c17",
    CStandard.c23: "c23",
}

_CXX_STANDARD_NAMES: dict[CxxStandard, str] = {
    CxxStandard.cxx98: "c++98",
    CxxStandard.cxx11: "c++11",
    CxxStandard.cxx17: "c++17",
    CxxStandard.cxx20: "c++20",
    CxxStandard.cxx23: "c++23",
    CxxStandard.cxx26: "c++26",
}

_STRING_TABLES: dict[type, dict] = {
    Vcs: _VCS_NAMES,
    CStandard: _C_STANDARD_NAMES,
    CxxStandard: _CXX_STANDARD_NAMES,
}

# CMake compile features, see cmake-compile-features(7)
_FEATURE_TOKENS: dict[CStandard | CxxStandard, str] = {
    CStandard.c90: "c_std_90",
    CStandard.c99: "c_std_99",
    CStandard.c11: "c_std_11",
    CStandard.c17: "c_std_17",
    CStandard.c23: "c_std_23",
    CxxStandard.cxx98: "cxx_std_98",
    CxxStandard.cxx11: "cxx_std_11",
    CxxStandard.cxx17: "cxx_std_17",
    CxxStandard.cxx20: "cxx_std_20",
    CxxStandard.cxx23: "cxx_std_23",
    CxxStandard.cxx26: "cxx_std_26",
}


def to_string(value: Vcs | CStandard | CxxStandard) -> str:
    """Return the display form of an option value.

    Raises:
        InvariantViolationError: If the value is missing from the string
            tables. This only happens when an enum gains a member without
            a matching table entry.
    """
    table = _STRING_TABLES.get(type(value))
    if table is not None and value in table:
        return table[value]
    raise InvariantViolationError(f"unknown option value: {value!r}")


def to_cmake_feature_string(value: CStandard | CxxStandard) -> str:
    """Return the CMake compile-feature token for a standard edition.

    Raises:
        InvariantViolationError: If the value is not a known standard edition.
    """
    if isinstance(value, (CStandard, CxxStandard)) and value in _FEATURE_TOKENS:
        return _FEATURE_TOKENS[value]
    raise InvariantViolationError(f"unknown standard edition: {value!r}")


def _parse(table, text, label):
    for member, name in table.items():
        if name == text:
            return member
    choices = ", ".join(table.values())
    raise ValueError(f"unknown {label} {text!r} (expected one of: {choices})")
