"""Tests for the Curly syntax model: lexer, parser, builders and the normalizer."""

from __future__ import annotations

import pytest

from syntax_quoter.syntax import SyntaxKind, SyntaxTrivia, normalize_whitespace, parse_text
from syntax_quoter.syntax import factory

# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------

SAMPLES = [
    "",
    "class C { }",
    "public static class Program\n{\n    int Main(string args)\n    {\n        return 0;\n    }\n}\n",
    "x = y + 2 * (z - 1);  // trailing\n",
    "if (a && !b) { f(a, b); } else g();\n",
    "while (i < 10) i++;\r\n",
    'var s = $"a {b} c{{d}}";\n',
    "var c = 'x'; var n = 0x1F; var f = 1.50; var t = true;\n",
    "/// <summary>Adds &amp; more</summary>\n/// second line\nint Add(int a, int b) { return a + b; }\n",
    "#region Setup\nx = 1;\n#endregion\n",
    "#if DEBUG\nlog();\n#else\nrun();\n#endif\n",
    "class Broken { void M( { } ",
    "x = @\"verbatim \"\"quoted\"\"\";\n",
    "/* block */ x = checked(a + b);\n",
    "? x = 1;\n",
]


def _trivia_kinds(tree) -> set[SyntaxKind]:
    """Kinds of every trivia attached to any token of ``tree``."""
    kinds: set[SyntaxKind] = set()
    for token in tree.descendant_tokens():
        for trivia in (*token.leading_trivia, *token.trailing_trivia):
            kinds.add(trivia.kind)
    return kinds


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestParser:
    @pytest.mark.parametrize("source", SAMPLES)
    def test_full_string_is_byte_identical(self, source):
        assert parse_text(source).to_full_string() == source

    def test_root_is_compilation_unit(self):
        tree = parse_text("class C { }")
        assert tree.type_name == "CompilationUnit"
        assert tree.get("Members")[0].type_name == "ClassDeclaration"
        assert tree.get("EndOfFileToken").kind is SyntaxKind.END_OF_FILE_TOKEN

    def test_missing_tokens_are_synthesised(self):
        tree = parse_text("return")
        statement = tree.get("Members")[0].get("Statement")
        assert statement.get("SemicolonToken").is_missing
        assert statement.get("SemicolonToken").text == ""

    def test_undefined_symbol_disables_branch(self):
        source = "#if DEBUG\nlog();\n#endif\n"
        assert SyntaxKind.DISABLED_TEXT_TRIVIA in _trivia_kinds(parse_text(source))
        assert SyntaxKind.DISABLED_TEXT_TRIVIA not in _trivia_kinds(parse_text(source, ["DEBUG"]))

    def test_defined_symbol_keeps_round_trip(self):
        source = "#if DEBUG || TRACE\nlog();\n#else\nrun();\n#endif\n"
        assert parse_text(source, ["TRACE"]).to_full_string() == source

    def test_numeric_literal_values(self):
        tree = parse_text("x = 0x1F + 1.50 + 1e999 + 99999999999999999999999;")
        numbers = [token for token in tree.descendant_tokens() if token.kind is SyntaxKind.NUMERIC_LITERAL_TOKEN]
        assert [token.text for token in numbers] == ["0x1F", "1.50", "1e999", "99999999999999999999999"]
        assert [token.value for token in numbers] == [31, 1.5, None, None]

    def test_documentation_comment_is_structured(self):
        tree = parse_text("/// hi\nx = 1;\n")
        first = next(tree.descendant_tokens())
        doc = first.leading_trivia[0]
        assert doc.kind is SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA
        assert doc.has_structure
        assert doc.structure.type_name == "DocumentationCommentTrivia"
        assert doc.text == "/// hi\n"


# ---------------------------------------------------------------------------
# Normalizer
# ---------------------------------------------------------------------------


class TestNormalizeWhitespace:
    def test_class_layout(self):
        assert normalize_whitespace(parse_text("class C { }")).to_full_string() == "class C\n{\n}"

    @pytest.mark.parametrize("source", SAMPLES)
    def test_idempotent(self, source):
        once = normalize_whitespace(parse_text(source))
        twice = normalize_whitespace(once)
        assert twice.to_full_string() == once.to_full_string()

    def test_ignores_original_spacing(self):
        compact = normalize_whitespace(parse_text("x=y+1;"))
        spread = normalize_whitespace(parse_text("x   =\n y +   1 ;"))
        assert compact.to_full_string() == spread.to_full_string()

    def test_keeps_comments(self):
        text = normalize_whitespace(parse_text("x = 1; // note\n")).to_full_string()
        assert "// note" in text


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


class TestFactory:
    def test_identifier_token_value(self):
        token = factory.identifier_token("name")
        assert token.kind is SyntaxKind.IDENTIFIER_TOKEN
        assert token.text == token.value == "name"

    def test_literal_uses_canonical_text(self):
        assert factory.literal(42).text == "42"
        assert factory.literal("a\"b").text == '"a\\"b"'
        assert factory.character_literal("\n").text == "'\\n'"

    def test_literal_rejects_booleans(self):
        with pytest.raises(TypeError):
            factory.literal(True)

    def test_whitespace_rejects_text(self):
        with pytest.raises(ValueError):
            factory.whitespace(" x ")

    def test_end_of_line_accepts_crlf(self):
        assert factory.end_of_line("\r\n").kind is SyntaxKind.END_OF_LINE_TRIVIA

    def test_comment_kind_follows_text(self):
        assert factory.comment("// a").kind is SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA
        assert factory.comment("/* a */").kind is SyntaxKind.MULTI_LINE_COMMENT_TRIVIA

    def test_structured_trivia_text_is_structure_rendering(self):
        structure = factory.region_directive_trivia_full(
            factory.token(SyntaxKind.HASH_TOKEN),
            factory.token(SyntaxKind.REGION_KEYWORD),
            factory.token(SyntaxKind.END_OF_DIRECTIVE_TOKEN),
            True,
        )
        trivia = factory.trivia(structure)
        assert trivia.has_structure
        assert trivia.text == structure.to_full_string() == "#region"

    def test_block_defaults_braces(self):
        assert factory.block().to_full_string() == "{}"

    def test_list_checks_element_type(self):
        with pytest.raises(TypeError):
            factory.list_of([factory.identifier_name("x")], element_type="StatementSyntax")

    def test_with_attribute_returns_updated_copy(self):
        node = factory.identifier_name("a")
        updated = node.with_attribute("Identifier", factory.identifier_token("b"))
        assert node.to_full_string() == "a"
        assert updated.to_full_string() == "b"

    def test_well_known_trivia(self):
        assert factory.WELL_KNOWN_TRIVIA["Space"] == SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, " ")
        assert factory.WELL_KNOWN_TRIVIA["CarriageReturnLineFeed"].text == "\r\n"
