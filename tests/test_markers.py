"""Tests for region marker parsing."""

from __future__ import annotations

import pytest

from script_deploy.regions import NAME_OFFSET, CloseMarker, OpenMarker, parse_marker


class TestOpenMarker:
    def test_plain_open(self):
        assert parse_marker("#region Script") == OpenMarker(name="Script")

    def test_indented_open(self):
        """Leading and trailing whitespace is trimmed before matching."""
        assert parse_marker("\t    #region Script   ") == OpenMarker(name="Script")

    def test_name_taken_at_fixed_offset(self):
        """The name is not re-trimmed: extra separators stay in the name."""
        marker = parse_marker("#region  Script")
        assert marker == OpenMarker(name=" Script")
        assert not marker.is_script

    def test_separator_need_not_be_space(self):
        assert parse_marker("#region:Script") == OpenMarker(name="Script")

    def test_bare_region_has_empty_name(self):
        assert parse_marker("#region") == OpenMarker(name="")

    def test_prefix_match_only(self):
        """Anything starting with #region opens a region."""
        assert parse_marker("#regionalScript") == OpenMarker(name="lScript")

    def test_name_offset(self):
        assert NAME_OFFSET == 8

    def test_is_script_case_sensitive(self):
        assert OpenMarker(name="Script").is_script
        assert not OpenMarker(name="script").is_script
        assert not OpenMarker(name="Script ").is_script


class TestCloseMarker:
    @pytest.mark.parametrize("line", ["#endregion", "    #endregion", "#endregion // Script", "#endregionX"])
    def test_close_variants(self, line):
        assert parse_marker(line) == CloseMarker()


class TestOrdinaryLines:
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "var x = 1;",
            "// #region Script",
            "# region Script",
            "#Region Script",
            "#end region",
        ],
    )
    def test_not_a_marker(self, line):
        assert parse_marker(line) is None
