"""Tests for cmake_init.models.options - enums, display forms and feature tokens."""

from __future__ import annotations

import pytest

from cmake_init.errors import InvariantViolationError
from cmake_init.models.options import (
    LATEST_C_STANDARD,
    LATEST_CXX_STANDARD,
    CStandard,
    CxxStandard,
    Vcs,
    to_cmake_feature_string,
    to_string,
)


class TestDisplayForms:
    """Test to_string() and __str__ for every option enum."""

    def test_vcs_display_forms(self):
        assert to_string(Vcs.none) == "none"
        assert to_string(Vcs.git) == "git"
        assert str(Vcs.git) == "git"

    def test_c_standard_display_forms(self):
        assert [str(s) for s in CStandard] == ["c90", "c99", "c11", "c17", "c23"]

    def test_cxx_standard_display_forms(self):
        assert [str(s) for s in CxxStandard] == [
            "c++98",
            "c++11",
            "c++17",
            "c++20",
            "c++23",
            "c++26",
        ]

    def test_unknown_value_is_invariant_violation(self):
        """A value outside the tables is a programming defect, not a ValueError."""
        with pytest.raises(InvariantViolationError):
            to_string("c18")  # type: ignore[arg-type]

    def test_non_enum_object_is_invariant_violation(self):
        with pytest.raises(InvariantViolationError):
            to_string(object())  # type: ignore[arg-type]


class TestFeatureTokens:
    """Test CMake compile-feature tokens for standard editions."""

    def test_c17_token(self):
        assert to_cmake_feature_string(CStandard.c17) == "c_std_17"
        assert CStandard.c17.feature_token == "c_std_17"

    def test_cxx23_token(self):
        assert to_cmake_feature_string(CxxStandard.cxx23) == "cxx_std_23"
        assert CxxStandard.cxx26.feature_token == "cxx_std_26"

    @pytest.mark.parametrize("edition", [*CStandard, *CxxStandard])
    def test_token_distinct_from_display_form(self, edition):
        assert edition.feature_token != str(edition)

    @pytest.mark.parametrize("edition", [*CStandard, *CxxStandard])
    def test_token_stable(self, edition):
        assert edition.feature_token == to_cmake_feature_string(edition)

    def test_tokens_are_unique(self):
        tokens = [e.feature_token for e in [*CStandard, *CxxStandard]]
        assert len(tokens) == len(set(tokens))

    def test_vcs_has_no_feature_token(self):
        with pytest.raises(InvariantViolationError):
            to_cmake_feature_string(Vcs.git)  # type: ignore[arg-type]


class TestParse:
    """Test parsing external forms back into enum members."""

    @pytest.mark.parametrize("edition", list(CStandard))
    def test_c_standard_round_trip(self, edition):
        assert CStandard.parse(str(edition)) is edition

    @pytest.mark.parametrize("edition", list(CxxStandard))
    def test_cxx_standard_round_trip(self, edition):
        assert CxxStandard.parse(str(edition)) is edition

    def test_vcs_round_trip(self):
        assert Vcs.parse("git") is Vcs.git
        assert Vcs.parse("none") is Vcs.none

    def test_parse_unknown_raises_value_error(self):
        with pytest.raises(ValueError, match="expected one of"):
            CxxStandard.parse("c++14")

    def test_parse_does_not_cross_dialects(self):
        with pytest.raises(ValueError):
            CStandard.parse("c++17")


class TestLatest:
    def test_latest_editions(self):
        assert LATEST_C_STANDARD is CStandard.c23
        assert LATEST_CXX_STANDARD is CxxStandard.cxx23
