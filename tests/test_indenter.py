"""Tests for indentation decisions and formatting."""

import pytest

from jailfmt.config.schema import IndentConfig
from jailfmt.highlight.indenter import (
    FLUSH_LEFT,
    format_line,
    format_text,
    indent_for_line,
    leading_whitespace,
)


class TestIndentForLine:
    @pytest.mark.parametrize("line", ["include foo.inc", "blacklist /boot", "whitelist ${HOME}/x"])
    def test_flush_left(self, line):
        assert indent_for_line(line) == 0
        assert indent_for_line("    " + line) == 0

    def test_exception_set_is_exact(self):
        assert FLUSH_LEFT == {"include", "blacklist", "whitelist"}

    @pytest.mark.parametrize(
        "line",
        ["noblacklist /tmp", "nowhitelist /tmp", "mkdir ~/.x", "mkfile ~/.y", "ignore noroot"],
    )
    def test_sibling_directives_get_offset(self, line):
        assert indent_for_line(line) == 2

    def test_exact_match_only(self):
        assert indent_for_line("includes foo") == 2
        assert indent_for_line("Include foo") == 2
        assert indent_for_line("blacklist-nolog /x") == 2
        assert indent_for_line("whitelist-ro /x") == 2

    def test_flush_left_keyword_before_punctuation(self):
        assert indent_for_line("include,x") == 0

    def test_default_offset(self):
        assert indent_for_line("noroot") == 2
        assert indent_for_line("") == 2
        assert indent_for_line("# include foo") == 2

    def test_custom_offset(self):
        assert indent_for_line("noroot", 4) == 4
        assert indent_for_line("include x", 4) == 0

    def test_idempotent(self):
        line = "  private-bin sh"
        assert indent_for_line(line) == indent_for_line(line)


class TestLeadingWhitespace:
    def test_spaces(self):
        assert leading_whitespace(3) == "   "

    def test_tabs(self):
        assert leading_whitespace(8, use_tabs=True) == "\t"
        assert leading_whitespace(10, use_tabs=True, tab_width=8) == "\t  "
        assert leading_whitespace(2, use_tabs=True, tab_width=2) == "\t"


class TestFormat:
    def test_end_to_end(self):
        source = "noblacklist /tmp\ninclude whitelist-common.inc\n"
        assert format_text(source) == "  noblacklist /tmp\ninclude whitelist-common.inc\n"

    def test_sample(self, sample_profile, sample_profile_formatted):
        assert format_text(sample_profile) == sample_profile_formatted

    def test_idempotent(self, sample_profile, sample_profile_formatted):
        once = format_text(sample_profile)
        assert format_text(once) == once
        assert format_text(sample_profile_formatted) == sample_profile_formatted

    def test_existing_indent_replaced(self):
        assert format_text("\t\tinclude x\n        noroot\n") == "include x\n  noroot\n"

    def test_blank_lines_emptied(self):
        assert format_text("include a\n   \nnoroot\n") == "include a\n\n  noroot\n"

    def test_crlf_preserved(self):
        assert format_text("noroot\r\ninclude a\r\n") == "  noroot\r\ninclude a\r\n"

    def test_missing_final_newline(self):
        assert format_text("noroot") == "  noroot"

    def test_empty(self):
        assert format_text("") == ""

    def test_trailing_whitespace_untouched(self):
        assert format_text("noroot  \n") == "  noroot  \n"

    def test_custom_offset(self):
        assert format_text("noroot\n", IndentConfig(offset=4)) == "    noroot\n"

    def test_tabs(self):
        cfg = IndentConfig(offset=8, use_tabs=True)
        assert format_text("noroot\ninclude x\n", cfg) == "\tnoroot\ninclude x\n"

    def test_format_line(self):
        assert format_line("   whitelist /x") == "whitelist /x"
        assert format_line("\t") == ""
