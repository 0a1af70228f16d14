#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for Discord markdown escaping utilities."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatmd.utils.escape import escape_discord_markdown, strip_legacy_formatting


@pytest.mark.unit
class TestEscapeDiscordMarkdown:
    """Test character-level markdown escaping."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("plain", "plain"),
            ("2*3", "2\\*3"),
            ("~~", "\\~\\~"),
            ("snake_case", "snake\\_case"),
            ("`code`", "\\`code\\`"),
            ("a|b", "a\\|b"),
            ("", ""),
        ],
    )
    def test_escapes_special_characters(self, text: str, expected: str) -> None:
        """Test each special character gets one backslash."""
        assert escape_discord_markdown(text) == expected

    def test_already_escaped_is_kept(self) -> None:
        """Test a character behind an odd number of backslashes is left alone."""
        assert escape_discord_markdown("\\*") == "\\*"
        assert escape_discord_markdown("\\\\\\*") == "\\\\\\*"

    def test_escaped_backslash_does_not_escape(self) -> None:
        """Test a character behind an even number of backslashes is escaped."""
        assert escape_discord_markdown("\\\\*") == "\\\\\\*"

    def test_other_characters_untouched(self) -> None:
        """Test characters outside the special set are not escaped."""
        assert escape_discord_markdown("> #1 [link](url) <@123>") == "> #1 [link](url) <@123>"

    @given(st.text(alphabet="ab *_~`|\\", max_size=20))
    def test_escaping_twice_equals_once(self, text: str) -> None:
        """Test re-escaping escaped output changes nothing."""
        once = escape_discord_markdown(text)
        assert escape_discord_markdown(once) == once


@pytest.mark.unit
class TestStripLegacyFormatting:
    """Test removal of section-sign formatting codes."""

    def test_strips_color_and_format_codes(self) -> None:
        """Test color and format codes are removed."""
        assert strip_legacy_formatting("§cRed §lbold§r text") == "Red bold text"

    def test_uppercase_codes(self) -> None:
        """Test codes are matched case-insensitively."""
        assert strip_legacy_formatting("§AGreen") == "Green"

    def test_lone_section_sign_kept(self) -> None:
        """Test a section sign not followed by a code is kept."""
        assert strip_legacy_formatting("§ 5") == "§ 5"
