"""Tests for the stylesheet rule scanner."""

import pytest

from mistcss.model.diagnostic import Severity
from mistcss.parser import ParseError, scan_rules, split_selector_list


# ---------------------------------------------------------------------------
# Rule splitting
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        rules, diagnostics = scan_rules(".button { color: red; }")
        assert len(rules) == 1
        assert rules[0].prelude == ".button"
        assert rules[0].body == "color: red;"
        assert rules[0].line == 1
        assert diagnostics == []

    def test_rules_in_source_order(self):
        source = """
        .a { }
        .b { }
        .a.c { }
        """
        rules, _ = scan_rules(source)
        assert [r.prelude for r in rules] == [".a", ".b", ".a.c"]

    def test_line_numbers(self):
        source = ".a {}\n\n.b {\n  color: red;\n}\n.c {}"
        rules, _ = scan_rules(source)
        assert [r.line for r in rules] == [1, 3, 6]

    def test_prelude_whitespace_collapsed(self):
        rules, _ = scan_rules(".a,\n   .b\t.c { }")
        assert rules[0].prelude == ".a, .b .c"

    def test_nested_braces_in_body_are_kept_raw(self):
        rules, _ = scan_rules(".a { &:hover { color: red; } }\n.b {}")
        assert [r.prelude for r in rules] == [".a", ".b"]
        assert "&:hover" in rules[0].body


class TestComments:
    def test_comments_are_ignored(self):
        source = "/* header */\n.a { /* inner */ color: red; }"
        rules, _ = scan_rules(source)
        assert len(rules) == 1
        assert rules[0].prelude == ".a"
        assert rules[0].line == 2

    def test_braces_inside_comment_are_ignored(self):
        rules, _ = scan_rules("/* .x { */ .a {}")
        assert [r.prelude for r in rules] == [".a"]

    def test_comment_markers_inside_strings(self):
        rules, _ = scan_rules('.a { content: "/* not a comment */"; }\n.b {}')
        assert [r.prelude for r in rules] == [".a", ".b"]


class TestStrings:
    def test_brace_inside_string(self):
        rules, _ = scan_rules('.a { content: "}"; }\n.b { content: \'{\'; }')
        assert [r.prelude for r in rules] == [".a", ".b"]

    def test_escaped_quote(self):
        rules, _ = scan_rules('.a { content: "\\"}"; }')
        assert len(rules) == 1


# ---------------------------------------------------------------------------
# At-rules and empty selectors (recoverable)
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_block_at_rule_skipped_with_warning(self):
        source = "@media (min-width: 40rem) { .a { color: red; } }\n.b {}"
        rules, diagnostics = scan_rules(source)
        assert [r.prelude for r in rules] == [".b"]
        assert len(diagnostics) == 1
        assert diagnostics[0].rule == "unsupported-at-rule"
        assert diagnostics[0].severity is Severity.WARNING
        assert "@media" in diagnostics[0].message
        assert diagnostics[0].line == 1

    def test_statement_at_rule_skipped_with_warning(self):
        source = '@import url("base.css");\n.a {}'
        rules, diagnostics = scan_rules(source)
        assert [r.prelude for r in rules] == [".a"]
        assert diagnostics[0].rule == "unsupported-at-rule"
        assert "@import" in diagnostics[0].message

    def test_empty_selector_block(self):
        rules, diagnostics = scan_rules("{ color: red; }\n.a {}")
        assert [r.prelude for r in rules] == [".a"]
        assert diagnostics[0].rule == "empty-selector"


# ---------------------------------------------------------------------------
# Structural errors (unrecoverable)
# ---------------------------------------------------------------------------


class TestStructuralErrors:
    def test_unterminated_block(self):
        with pytest.raises(ParseError) as exc_info:
            scan_rules(".a { color: red;\n.b { color: blue; }")
        assert exc_info.value.line == 1
        assert "Unterminated block" in str(exc_info.value)

    def test_unterminated_comment(self):
        with pytest.raises(ParseError) as exc_info:
            scan_rules(".a {}\n/* dangling")
        assert exc_info.value.line == 2

    def test_unterminated_string(self):
        with pytest.raises(ParseError, match="Unterminated string"):
            scan_rules('.a { content: "oops; }')

    def test_stray_closing_brace(self):
        with pytest.raises(ParseError, match="Unexpected '}'"):
            scan_rules(".a {}\n}")

    def test_selector_without_block(self):
        with pytest.raises(ParseError) as exc_info:
            scan_rules(".a {}\n.b")
        assert exc_info.value.line == 2

    def test_declaration_outside_block(self):
        with pytest.raises(ParseError):
            scan_rules("color: red;")


class TestEmptyInput:
    def test_empty_string(self):
        assert scan_rules("") == ([], [])

    def test_whitespace_and_comments_only(self):
        assert scan_rules("  \n/* nothing */\n\t") == ([], [])


# ---------------------------------------------------------------------------
# Selector lists
# ---------------------------------------------------------------------------


class TestSplitSelectorList:
    def test_simple_list(self):
        assert split_selector_list(".a, .b.c") == [".a", ".b.c"]

    def test_single_selector(self):
        assert split_selector_list(".a:hover") == [".a:hover"]

    def test_commas_inside_parentheses(self):
        assert split_selector_list(".a, .b:is(.c, .d)") == [".a", ".b:is(.c, .d)"]

    def test_commas_inside_attribute_strings(self):
        assert split_selector_list('.a[data-x="1,2"], .b') == ['.a[data-x="1,2"]', ".b"]

    def test_empty_branch_is_kept(self):
        assert split_selector_list(".a,") == [".a", ""]
