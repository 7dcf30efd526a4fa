"""Tests for license, language and description cleanup."""

from __future__ import annotations

import pytest

from badge_detective.detectives.normalize import (
    EXCLUDED_IMPLEMENTATION_LANGUAGES,
    LICENSE_CORRECT_CASE,
    cleanup_description,
    cleanup_languages,
    cleanup_license,
)

# ─── License ─────────────────────────────────────────────────


class TestCleanupLicense:
    @pytest.mark.parametrize("raw", ["mit", "MIT", "Mit"])
    def test_case_insensitive(self, raw: str) -> None:
        assert cleanup_license(raw) == "MIT"

    def test_table_entry_uses_display_case(self) -> None:
        assert cleanup_license("bsd-3-clause") == "BSD-3-Clause"

    def test_apache(self) -> None:
        assert cleanup_license("apache-2.0") == "Apache-2.0"

    def test_unknown_license_is_uppercased(self) -> None:
        assert cleanup_license("gpl-3.0") == "GPL-3.0"
        assert cleanup_license("other") == "OTHER"

    @pytest.mark.parametrize("raw", ["bsd-2-clause", "postgresql", "mit", "wxwindows"])
    def test_idempotent(self, raw: str) -> None:
        once = cleanup_license(raw)
        assert cleanup_license(once) == once

    def test_every_table_value_maps_to_itself(self) -> None:
        for display in LICENSE_CORRECT_CASE.values():
            assert cleanup_license(display) == display

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            LICENSE_CORRECT_CASE["MIT"] = "Mit"  # type: ignore[index]


# ─── Languages ───────────────────────────────────────────────


class TestCleanupLanguages:
    def test_sorted_by_weight_and_html_excluded(self) -> None:
        assert cleanup_languages({"Ruby": 500, "HTML": 300, "JavaScript": 100}) == (
            "Ruby, JavaScript"
        )

    def test_sorts_unordered_input(self) -> None:
        assert cleanup_languages({"C": 10, "Python": 900, "Shell": 50}) == "Python, Shell, C"

    @pytest.mark.parametrize("raw", [{}, None])
    def test_empty_input(self, raw: dict | None) -> None:
        assert cleanup_languages(raw) == ""

    def test_all_excluded(self) -> None:
        raw = {"HTML": 3, "CSS": 2, "Roff": 1, "DIGITAL Command Language": 1}
        assert cleanup_languages(raw) == ""

    def test_ties_keep_input_order(self) -> None:
        assert cleanup_languages({"Go": 10, "Rust": 10, "C": 20}) == "C, Go, Rust"

    def test_long_tail_retained(self) -> None:
        raw = {f"Lang{i}": 100 - i for i in range(20)}
        assert cleanup_languages(raw).count(", ") == 19

    def test_exclusion_set_contents(self) -> None:
        assert EXCLUDED_IMPLEMENTATION_LANGUAGES == {
            "HTML",
            "CSS",
            "Roff",
            "DIGITAL Command Language",
        }


# ─── Description ─────────────────────────────────────────────


class TestCleanupDescription:
    def test_leading_shortcode_removed(self) -> None:
        assert cleanup_description(" :rocket: Fast tool ") == "Fast tool"

    def test_trailing_shortcode_removed(self) -> None:
        assert cleanup_description("Fast tool :tada:") == "Fast tool"

    def test_standalone_shortcode_removed(self) -> None:
        assert cleanup_description("Fast :zap: tool") == "Fast tool"

    def test_embedded_colons_kept(self) -> None:
        assert cleanup_description("Parses key:value:pairs") == "Parses key:value:pairs"

    def test_plain_text_trimmed(self) -> None:
        assert cleanup_description("  A library  ") == "A library"
