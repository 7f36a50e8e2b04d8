"""Tests for the CSS/SCSS stylesheet parser."""

from pathlib import Path

import pytest

from a11ylint.model.nodes import (
    AtRule,
    Color,
    Declaration,
    Dimension,
    FunctionCall,
    Ident,
    Number,
    Operator,
    Percentage,
    Position,
    PseudoClass,
    Ruleset,
    SimpleSelector,
    StringLiteral,
    Url,
    Value,
    Variable,
    children_of,
    find_all,
    render,
)
from a11ylint.parser import ParseError, parse_file, parse_stylesheet

FIXTURES = Path(__file__).parent.parent / "fixtures"


def _only_ruleset(source: str) -> Ruleset:
    rulesets = list(find_all(parse_stylesheet(source), Ruleset))
    assert len(rulesets) == 1
    return rulesets[0]


def _value_parts(value_source: str) -> tuple:
    ruleset = _only_ruleset(f"a {{ x: {value_source}; }}")
    decl = next(children_of(ruleset.block, Declaration))
    return decl.value.parts


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestRulesets:
    def test_single_ruleset(self):
        ruleset = _only_ruleset("a { color: red; }")
        decls = list(children_of(ruleset.block, Declaration))
        assert [d.property for d in decls] == ["color"]

    def test_last_declaration_without_semicolon(self):
        ruleset = _only_ruleset("a { color: red; display: none }")
        decls = list(children_of(ruleset.block, Declaration))
        assert [d.property for d in decls] == ["color", "display"]
        assert render(decls[1].value) == "none"

    def test_property_names_are_lower_cased(self):
        ruleset = _only_ruleset("a { COLOR: red; }")
        assert next(children_of(ruleset.block, Declaration)).property == "color"

    def test_selector_list(self):
        ruleset = _only_ruleset("a:hover, a:focus { color: red; }")
        assert [s.text for s in ruleset.selectors] == ["a:hover", "a:focus"]

    def test_empty_source(self):
        assert parse_stylesheet("").children == ()
        assert parse_stylesheet("  \n\t ").children == ()


class TestNesting:
    def test_nested_ruleset_is_separate(self):
        tree = parse_stylesheet(".card { padding: 1em; &:hover { color: red; } }")
        outer, inner = list(find_all(tree, Ruleset))
        assert [d.property for d in children_of(outer.block, Declaration)] == ["padding"]
        assert [d.property for d in children_of(inner.block, Declaration)] == ["color"]
        pseudo = next(find_all(inner.selectors[0], PseudoClass))
        assert pseudo.name == "hover"

    def test_media_query_contains_rulesets(self):
        tree = parse_stylesheet("@media (max-width: 10em) { a { color: red; } }")
        at_rule = tree.children[0]
        assert isinstance(at_rule, AtRule)
        assert at_rule.name == "media"
        assert at_rule.prelude == "(max-width: 10em)"
        assert len(list(find_all(tree, Ruleset))) == 1

    def test_blockless_at_rule(self):
        tree = parse_stylesheet("@import 'base';\na { color: red; }")
        assert isinstance(tree.children[0], AtRule)
        assert tree.children[0].block is None

    def test_top_level_variable(self):
        tree = parse_stylesheet("$link: #06c;")
        decl = tree.children[0]
        assert isinstance(decl, Declaration)
        assert decl.property == "$link"

    def test_nested_property_group_skipped(self):
        ruleset = _only_ruleset("a { font: { family: serif; } color: red; }")
        assert [d.property for d in children_of(ruleset.block, Declaration)] == ["color"]

    def test_keyframes(self):
        tree = parse_stylesheet("@keyframes pulse { from { opacity: 0; } 50% { opacity: 1; } }")
        kinds = [r.selectors[0].components[0].kind for r in find_all(tree, Ruleset)]
        assert kinds == ["type", "keyframe"]


class TestComments:
    def test_block_and_line_comments_ignored(self):
        source = "/* a { display: none; } */\n// b { color: red; }\nc { color: blue; }"
        ruleset = _only_ruleset(source)
        assert ruleset.start == Position(line=3, column=1)

    def test_url_with_double_slash_kept(self):
        parts = _value_parts("url(http://example.com/a.png)")
        assert parts == (Url(raw="url(http://example.com/a.png)", start=parts[0].start),)

    def test_semicolon_inside_url(self):
        ruleset = _only_ruleset('a { background: url("data:image/png;base64,xx"); color: red; }')
        assert len(list(children_of(ruleset.block, Declaration))) == 2


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_components(self):
        ruleset = _only_ruleset("ul > li.item#main[data-x] { color: red; }")
        kinds = [c.kind for c in ruleset.selectors[0].components]
        assert kinds == ["type", "combinator", "type", "class", "id", "attribute"]

    def test_pseudo_element_double_colon(self):
        ruleset = _only_ruleset("a::after { content: ''; }")
        pseudo = ruleset.selectors[0].components[1]
        assert pseudo == PseudoClass(name="after", is_element=True, start=pseudo.start)

    def test_functional_pseudo_keeps_commas(self):
        ruleset = _only_ruleset("a:not(.b, .c):hover { color: red; }")
        assert len(ruleset.selectors) == 1
        pseudos = list(children_of(ruleset.selectors[0], PseudoClass))
        assert [(p.name, p.argument) for p in pseudos] == [("not", ".b, .c"), ("hover", None)]

    def test_pseudo_names_are_lower_cased(self):
        ruleset = _only_ruleset("a:HOVER { color: red; }")
        assert ruleset.selectors[0].components[1].name == "hover"

    def test_parent_and_interpolation(self):
        tree = parse_stylesheet(".a { #{$sel} & { color: red; } }")
        inner = list(find_all(tree, Ruleset))[1]
        kinds = [c.kind for c in inner.selectors[0].components]
        assert kinds == ["interpolation", "parent"]


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class TestValues:
    def test_hex_color(self):
        (color,) = _value_parts("#AbC")
        assert isinstance(color, Color)
        assert color.hex == "AbC"

    def test_dimension(self):
        (dim,) = _value_parts("12PX")
        assert isinstance(dim, Dimension)
        assert (dim.number, dim.unit) == ("12", "px")

    def test_negative_and_fractional_dimensions(self):
        parts = _value_parts("-1.5em .5rem")
        assert [(p.number, p.unit) for p in parts] == [("-1.5", "em"), (".5", "rem")]

    def test_number_and_percentage(self):
        number, percentage = _value_parts("0 50%")
        assert isinstance(number, Number) and number.text == "0"
        assert isinstance(percentage, Percentage) and percentage.number == "50"

    def test_function_arguments(self):
        (call,) = _value_parts("rgba(10, 20, 30, 0.5)")
        assert isinstance(call, FunctionCall)
        assert call.name == "rgba"
        numbers = [a.text for a in call.arguments if isinstance(a, Number)]
        assert numbers == ["10", "20", "30", "0.5"]
        assert sum(isinstance(a, Operator) for a in call.arguments) == 3

    def test_nested_functions(self):
        (call,) = _value_parts("darken(rgb(1, 2, 3), 10%)")
        inner = call.arguments[0]
        assert isinstance(inner, FunctionCall) and inner.name == "rgb"

    def test_variable_string_and_important(self):
        parts = _value_parts("$gap 'x' !important")
        assert isinstance(parts[0], Variable) and parts[0].name == "gap"
        assert isinstance(parts[1], StringLiteral) and parts[1].raw == "'x'"
        assert isinstance(parts[2], Ident) and parts[2].name == "!important"

    def test_vendor_ident(self):
        (ident,) = _value_parts("-webkit-box")
        assert ident == Ident(name="-webkit-box", start=ident.start)

    def test_slash_operator(self):
        parts = _value_parts("12px/1.5 serif")
        assert render(Value(parts=parts)) == "12px / 1.5 serif"

    def test_empty_value(self):
        assert _value_parts("") == ()


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


class TestPositions:
    def test_ruleset_block_and_declaration_positions(self):
        source = "a:hover {\n  display: none;\n}\n"
        ruleset = _only_ruleset(source)
        decl = next(children_of(ruleset.block, Declaration))
        assert ruleset.start == Position(1, 1)
        assert ruleset.block.start == Position(1, 9)
        assert decl.start == Position(2, 3)
        assert decl.value.start == Position(2, 12)

    def test_dimension_position(self):
        ruleset = _only_ruleset("p { font-size: 12px; }")
        dim = next(find_all(ruleset, Dimension))
        assert dim.start == Position(1, 16)

    def test_second_selector_position(self):
        ruleset = _only_ruleset("a,\n  b:focus { color: red; }")
        assert ruleset.selectors[1].start == Position(2, 3)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("a {\n  color: red;\n")
        assert exc_info.value.line == 1
        assert exc_info.value.column == 3

    def test_unexpected_closing_brace(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("a { color: red; } }")
        assert exc_info.value.line == 1

    def test_declaration_without_colon(self):
        with pytest.raises(ParseError):
            parse_stylesheet("a { color red; }")

    def test_unterminated_string(self):
        with pytest.raises(ParseError):
            parse_stylesheet("a { content: 'oops; }")

    def test_invalid_selector_reports_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse_stylesheet("\n\na ) b { color: red; }")
        assert exc_info.value.line == 3


# ---------------------------------------------------------------------------
# Encodings and non-ASCII text
# ---------------------------------------------------------------------------


class TestEncoding:
    def test_leading_bom_ignored(self):
        ruleset = _only_ruleset("\ufeff.a { display: none; }")
        assert ruleset.selectors[0].text == ".a"
        assert ruleset.start == Position(1, 1)

    def test_bom_in_file(self, tmp_path):
        path = tmp_path / "bom.css"
        path.write_bytes(b"\xef\xbb\xbf.a { display: none; }")
        tree = parse_file(path)
        assert len(list(find_all(tree, Ruleset))) == 1

    def test_non_ascii_identifier_value(self):
        parts = _value_parts("Émoji, sans-serif")
        assert parts[0] == Ident(name="Émoji", start=parts[0].start)

    def test_non_ascii_function_name(self):
        (call,) = _value_parts("größe(1)")
        assert isinstance(call, FunctionCall) and call.name == "größe"

    def test_non_ascii_type_selector(self):
        ruleset = _only_ruleset("été > a { color: red; }")
        first = ruleset.selectors[0].components[0]
        assert (first.kind, first.text) == ("type", "été")

    def test_invalid_utf8_file(self, tmp_path):
        path = tmp_path / "latin1.css"
        path.write_bytes(b".a { color: red; }\n.b { content: '\xff'; }")
        with pytest.raises(ParseError) as exc_info:
            parse_file(path)
        assert "Invalid UTF-8" in str(exc_info.value)
        assert (exc_info.value.line, exc_info.value.column) == (2, 16)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


class TestFixtures:
    def test_parse_fixture_file(self):
        tree = parse_file(FIXTURES / "accessibility-issues.scss")
        assert len(list(find_all(tree, Ruleset))) == 14

    def test_selector_components_are_simple_or_pseudo(self):
        tree = parse_file(FIXTURES / "clean.scss")
        for ruleset in find_all(tree, Ruleset):
            for selector in ruleset.selectors:
                for component in selector.components:
                    assert isinstance(component, (SimpleSelector, PseudoClass))
