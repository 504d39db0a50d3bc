"""Test normalize_indent() and its line helpers in isolation."""

from trimindent.strings import (
    common_indent,
    indent_width,
    is_blank,
    normalize_indent,
    split_lines,
)


class TestSplitLines:
    def test_empty(self):
        assert split_lines("") == [""]

    def test_lf(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_crlf_is_one_break(self):
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_bare_cr(self):
        assert split_lines("a\rb") == ["a", "b"]

    def test_lf_cr_is_two_breaks(self):
        assert split_lines("a\n\rb") == ["a", "", "b"]

    def test_trailing_break_gives_empty_line(self):
        assert split_lines("a\n") == ["a", ""]

    def test_other_separators_are_not_breaks(self):
        assert split_lines("a\x0bb\x0cc d") == ["a\x0bb\x0cc d"]


class TestBlankAndIndent:
    def test_empty_is_blank(self):
        assert is_blank("")

    def test_spaces_and_tabs_are_blank(self):
        assert is_blank(" \t  ")

    def test_text_is_not_blank(self):
        assert not is_blank("  x ")

    def test_indent_width_counts_tabs(self):
        assert indent_width("\t  x") == 3

    def test_indent_width_zero(self):
        assert indent_width("x  ") == 0

    def test_common_indent_ignores_blank_lines(self):
        assert common_indent(["    a", "", "  ", "      b"]) == 4

    def test_common_indent_all_blank(self):
        assert common_indent(["", "   "]) == 0


class TestNoStripping:
    def test_empty(self):
        assert normalize_indent("") == ""

    def test_single_line(self):
        assert normalize_indent("hello") == "hello"

    def test_multi_line_no_indent(self):
        assert normalize_indent("a\nb\nc") == "a\nb\nc"

    def test_zero_indent_line_among_indented(self):
        assert normalize_indent("    a\nb\n  c") == "    a\nb\n  c"


class TestIndentStripping:
    def test_common_indent(self):
        assert normalize_indent("    a\n    b") == "a\nb"

    def test_leading_and_trailing_blank(self):
        assert normalize_indent("\n    x\n    y\n") == "x\ny"

    def test_mixed_indent(self):
        assert normalize_indent("  a\n    b") == "a\n  b"

    def test_tab_indent(self):
        assert normalize_indent("\tone\n\ttwo") == "one\ntwo"

    def test_trailing_indented_blank_line(self):
        assert normalize_indent("\n    hello\n    ") == "hello"

    def test_interior_empty_line_kept(self):
        assert normalize_indent("    a\n\n    b") == "a\n\nb"

    def test_short_blank_line_becomes_empty(self):
        assert normalize_indent("    a\n  \n    b") == "a\n\nb"

    def test_wide_blank_line_keeps_remainder(self):
        assert normalize_indent("  a\n      \n  b") == "a\n    \nb"

    def test_trailing_whitespace_preserved(self):
        assert normalize_indent("  a  \n  b") == "a  \nb"


class TestBlankEdges:
    def test_only_one_leading_blank_dropped(self):
        assert normalize_indent("\n\n  x") == "\nx"

    def test_only_one_trailing_blank_dropped(self):
        assert normalize_indent("  x\n\n") == "x\n"

    def test_whitespace_only(self):
        assert normalize_indent("   \t ") == ""

    def test_interior_blank_survives_edge_drops(self):
        assert normalize_indent("\n  \n") == "  "

    def test_single_newline(self):
        assert normalize_indent("\n") == ""


class TestLineTerminators:
    def test_crlf_becomes_lf(self):
        assert normalize_indent("  a\r\n  b\r\n") == "a\nb"

    def test_cr_becomes_lf(self):
        assert normalize_indent("\r  a\r  b") == "a\nb"

    def test_mixed_terminators(self):
        assert normalize_indent("a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_no_cr_in_output(self):
        assert "\r" not in normalize_indent("\r\n    x\r\n\r\n    y\r\n")


class TestIdempotence:
    def test_reapplying_is_stable(self):
        samples = [
            "\n    def hello():\n        print('hi')\n    ",
            "  a\n    b\n\n  c",
            "x",
            "",
            "\t\tone\r\n\t\t\ttwo\r\n",
        ]
        for text in samples:
            once = normalize_indent(text)
            assert normalize_indent(once) == once


class TestMixedScenarios:
    def test_typical_code_block(self):
        content = "\n        def hello():\n            print('hi')\n        "
        assert normalize_indent(content) == "def hello():\n    print('hi')"
