"""Tests for quoting syntax trees into call trees and replaying them."""

from __future__ import annotations

import pytest

from syntax_quoter.config import QuoterConfig
from syntax_quoter.quoting import (
    BuilderRegistry,
    BuilderSpec,
    KindTag,
    MissingArgument,
    ParameterSpec,
    Quoter,
    UnsupportedModifier,
    UnsupportedNodeKind,
    modifier_count,
)
from syntax_quoter.quoting.calls import nested_calls
from syntax_quoter.quoting.lists import quote_list
from syntax_quoter.quoting.tokens import quote_token, quote_trivia
from syntax_quoter.syntax import (
    SeparatedSyntaxList,
    SyntaxKind,
    SyntaxList,
    SyntaxToken,
    SyntaxTrivia,
    SyntaxTriviaList,
    normalize_whitespace,
    parse_text,
)
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
    "var c = 'x'; var n = 0x1F; var f = 1.50; var t = true; var u = null;\n",
    "/// <summary>Adds &amp; more</summary>\n/// second line\nint Add(int a, int b) { return a + b; }\n",
    "#region Setup\nx = 1;\n#endregion\n",
    "#if DEBUG\nlog();\n#else\nrun();\n#endif\n",
    "class Broken { void M( { } ",
    "return",
    "/* block */ x = checked(a + b);\n",
    "obj.Method(1, \"two\", '3');\n",
]


def _exact_quoter(**overrides) -> Quoter:
    """Quoter that keeps every whitespace trivia."""
    return Quoter(QuoterConfig(use_default_formatting=False, **overrides))


def _first_statement(source: str):
    """First global statement of ``source``."""
    return parse_text(source).get("Members")[0].get("Statement")


def _calls_with_modifiers(call) -> list:
    """Every call in the tree rooted at ``call`` that carries modifiers."""
    found = [call] if call.modifier_calls else []
    for nested in nested_calls(call):
        found.extend(_calls_with_modifiers(nested))
    return found


def _single_spec_registry(spec: BuilderSpec) -> BuilderRegistry:
    """Registry whose only builder is ``spec``."""
    return BuilderRegistry([spec], {})


# ---------------------------------------------------------------------------
# Round trips
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize("source", SAMPLES)
    def test_keep_formatting_rebuilds_exact_text(self, source):
        quoter = _exact_quoter()
        assert quoter.rebuild(quoter.quote(source)).to_full_string() == source

    @pytest.mark.parametrize("source", SAMPLES)
    def test_keep_redundant_rebuilds_exact_text(self, source):
        quoter = _exact_quoter(remove_redundant_modifying_calls=False)
        assert quoter.rebuild(quoter.quote(source)).to_full_string() == source

    @pytest.mark.parametrize("source", SAMPLES)
    def test_default_formatting_rebuilds_normalized_text(self, source):
        quoter = Quoter()
        expected = normalize_whitespace(parse_text(source)).to_full_string()
        assert quoter.rebuild(quoter.quote(source)).to_full_string() == expected

    @pytest.mark.parametrize("source", SAMPLES)
    def test_quoting_is_deterministic(self, source):
        tree = parse_text(source)
        for quoter in (Quoter(), _exact_quoter()):
            assert quoter.quote(tree) == quoter.quote(tree)
        assert Quoter().quote(source) == Quoter().quote(source)

    def test_render_matches_tree(self):
        quoter = _exact_quoter()
        tree = parse_text("x = 1; // one\n")
        assert quoter.render(quoter.quote_call(tree)) == tree.to_full_string()

    def test_rebuild_without_normalizing(self):
        quoter = Quoter()
        assert quoter.rebuild(quoter.quote("class C { }"), normalize=False).to_full_string() == "classC{}"
        assert quoter.rebuild(quoter.quote("class C { }")).to_full_string() == "class C\n{\n}"

    def test_indent_pretty_prints(self):
        text = Quoter(QuoterConfig(indent=2)).quote("class C { }")
        assert text.startswith('{\n  "f:CompilationUnit": null')


class TestQuoteCall:
    def test_class_declaration_interchange(self):
        assert Quoter().quote("class C { }") == (
            '{"f:CompilationUnit":null,"b":[{"w:Members":['
            '{"f:SingletonList<MemberDeclarationSyntax>":[{"f:ClassDeclaration":["C"]}]}]}]}'
        )

    def test_accepts_parsed_tree(self):
        quoter = Quoter()
        tree = parse_text("x = 1;")
        assert quoter.quote(tree) == quoter.quote("x = 1;")

    def test_rejects_other_inputs(self):
        with pytest.raises(TypeError, match="Cannot quote int"):
            Quoter().quote_call(42)

    def test_preprocessor_symbols_reach_parser(self):
        source = "#if DEBUG\nlog();\n#endif\n"
        plain = Quoter().quote(source)
        defined = Quoter(QuoterConfig(preprocessor_symbols=["DEBUG"])).quote(source)
        assert "f:DisabledText" in plain
        assert "f:DisabledText" not in defined

    def test_identifier_name_uses_plain_string(self):
        call = Quoter().quote_node(factory.identifier_name("x"))
        assert call.builder_name == "f:IdentifierName"
        assert call.builder_call.arguments == ["x"]

    def test_block_statements_are_flattened(self):
        call = Quoter().quote_node(_first_statement("{ return; return; }"))
        assert call.builder_name == "f:Block"
        assert [arg.builder_name for arg in call.builder_call.arguments] == [
            "f:ReturnStatement",
            "f:ReturnStatement",
        ]
        assert call.modifier_calls == []

    def test_single_statement_block_keeps_singleton_list(self):
        call = Quoter().quote_node(_first_statement("{ return; }"))
        (argument,) = call.builder_call.arguments
        assert argument.builder_name == "f:SingletonList<StatementSyntax>"

    def test_numeric_literal_with_non_canonical_text(self):
        node = factory.literal_expression_with_token(
            SyntaxKind.NUMERIC_LITERAL_EXPRESSION, factory.literal_with_text("0x1F", 31)
        )
        call = Quoter().quote_node(node)
        kind, token = call.builder_call.arguments
        assert kind.builder_name == "k:NumericLiteralExpression"
        assert token.builder_name == "f:Literal"
        assert token.builder_call.arguments == ["0x1F", 31]

    def test_numeric_literal_with_canonical_text(self):
        node = factory.literal_expression_with_token(SyntaxKind.NUMERIC_LITERAL_EXPRESSION, factory.literal(7))
        _, token = Quoter().quote_node(node).builder_call.arguments
        assert token.builder_call.arguments == [7]

    def test_float_keeps_written_text(self):
        node = factory.literal_expression_with_token(
            SyntaxKind.NUMERIC_LITERAL_EXPRESSION, factory.literal_with_text("1.50", 1.5)
        )
        _, token = Quoter().quote_node(node).builder_call.arguments
        assert token.builder_call.arguments == ["1.50", 1.5]

    def test_keyword_literal_drops_token(self):
        call = Quoter().quote_node(factory.literal_expression(SyntaxKind.TRUE_LITERAL_EXPRESSION))
        (kind,) = call.builder_call.arguments
        assert kind.builder_name == "k:TrueLiteralExpression"
        assert call.modifier_calls == []


# ---------------------------------------------------------------------------
# Lists
# ---------------------------------------------------------------------------


class TestQuoteList:
    def test_empty_list_quotes_to_nothing(self):
        assert quote_list(Quoter(), SyntaxList(), "Statements", "StatementSyntax", "root") is None

    def test_single_element_uses_singleton(self):
        items = SyntaxList((factory.return_statement(),))
        call = quote_list(Quoter(), items, "Statements", "StatementSyntax", "root")
        assert call.builder_name == "f:SingletonList<StatementSyntax>"
        (element,) = call.builder_call.arguments
        assert element.builder_name == "f:ReturnStatement"

    def test_many_elements_use_array_argument(self):
        items = SyntaxList((factory.return_statement(), factory.return_statement()))
        call = quote_list(Quoter(), items, "Statements", "StatementSyntax", "root")
        assert call.builder_name == "f:List<StatementSyntax>"
        (array,) = call.builder_call.arguments
        assert array.builder_name == "n:StatementSyntax"
        assert len(array.builder_call.arguments) == 2

    def test_separated_list_interleaves_separators(self):
        items = SeparatedSyntaxList(
            (
                factory.argument(factory.identifier_name("a")),
                factory.token(SyntaxKind.COMMA_TOKEN),
                factory.argument(factory.identifier_name("b")),
            )
        )
        call = quote_list(Quoter(), items, "Arguments", "ArgumentSyntax", "root")
        assert call.builder_name == "f:SeparatedList<ArgumentSyntax>"
        (array,) = call.builder_call.arguments
        assert array.builder_name == "n:SyntaxNodeOrToken"
        names = [element.builder_name for element in array.builder_call.arguments]
        assert names == ["f:Argument", "f:Token", "f:Argument"]
        assert array.builder_call.arguments[1].builder_call.arguments == [KindTag(SyntaxKind.COMMA_TOKEN)]

    def test_dropped_trivia_do_not_count(self):
        trivia = SyntaxTriviaList((factory.SPACE, factory.LINE_FEED))
        assert quote_list(Quoter(), trivia, "LeadingTrivia", None, "root") is None


# ---------------------------------------------------------------------------
# Tokens and trivia
# ---------------------------------------------------------------------------


class TestQuoteToken:
    def test_identifier_without_trivia(self):
        token = SyntaxToken(SyntaxKind.IDENTIFIER_TOKEN, "x", "x", SyntaxTriviaList((factory.SPACE,)))
        call = quote_token(Quoter(), token, "Identifier", "root")
        assert call.builder_call.arguments == ["x"]

    def test_identifier_with_trivia_gets_both_sides(self):
        token = SyntaxToken(SyntaxKind.IDENTIFIER_TOKEN, "x", "x", SyntaxTriviaList((factory.SPACE,)))
        call = quote_token(_exact_quoter(), token, "Identifier", "root")
        leading, text, trailing = call.builder_call.arguments
        assert text == "x"
        assert leading.builder_name == "f:TriviaList"
        assert [arg.builder_name for arg in leading.builder_call.arguments] == ["f:Space"]
        assert trailing.builder_name == "f:TriviaList"
        assert trailing.builder_call.arguments == []

    def test_comments_survive_default_formatting(self):
        leading = SyntaxTriviaList((factory.comment("// c"), factory.LINE_FEED))
        token = SyntaxToken(SyntaxKind.IDENTIFIER_TOKEN, "x", "x", leading)
        call = quote_token(Quoter(), token, "Identifier", "root")
        quoted_leading = call.builder_call.arguments[0]
        (comment,) = quoted_leading.builder_call.arguments
        assert comment.builder_name == "f:Comment"
        assert comment.builder_call.arguments == ["// c"]

    def test_missing_token(self):
        call = quote_token(Quoter(), factory.missing_token(SyntaxKind.SEMICOLON_TOKEN), "SemicolonToken", "root")
        assert call.builder_name == "f:MissingToken"
        assert call.builder_call.arguments == [KindTag(SyntaxKind.SEMICOLON_TOKEN)]

    def test_bad_token_keeps_text(self):
        call = quote_token(Quoter(), SyntaxToken(SyntaxKind.BAD_TOKEN, "`"), "Token", "root")
        leading, text, trailing = call.builder_call.arguments
        assert call.builder_name == "f:BadToken"
        assert text == "`"
        assert leading.builder_name == trailing.builder_name == "f:TriviaList"

    def test_punctuation_uses_kind(self):
        call = quote_token(Quoter(), factory.token(SyntaxKind.SEMICOLON_TOKEN), "SemicolonToken", "root")
        assert call.builder_name == "f:Token"
        assert call.builder_call.arguments == [KindTag(SyntaxKind.SEMICOLON_TOKEN)]

    def test_number_without_value_keeps_text(self):
        token = SyntaxToken(SyntaxKind.NUMERIC_LITERAL_TOKEN, "1e999")
        call = quote_token(Quoter(), token, "Token", "root")
        leading, kind, text, value_text, trailing = call.builder_call.arguments
        assert call.builder_name == "f:Token"
        assert kind == KindTag(SyntaxKind.NUMERIC_LITERAL_TOKEN)
        assert text == value_text == "1e999"
        assert leading.builder_name == trailing.builder_name == "f:TriviaList"

    def test_none_token(self):
        assert quote_token(Quoter(), None, "SemicolonToken", "root") is None


class TestQuoteTrivia:
    def test_empty_trivia_is_dropped(self):
        assert quote_trivia(_exact_quoter(), SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, ""), "root") is None

    def test_well_known_trivia_uses_property(self):
        call = quote_trivia(_exact_quoter(), factory.CARRIAGE_RETURN_LINE_FEED, "root")
        assert call.builder_name == "f:CarriageReturnLineFeed"
        assert call.builder_call.arguments == []

    def test_other_whitespace_keeps_text(self):
        call = quote_trivia(_exact_quoter(), factory.whitespace("   "), "root")
        assert call.builder_name == "f:Whitespace"
        assert call.builder_call.arguments == ["   "]

    def test_structured_trivia_quotes_structure(self):
        tree = parse_text("#region A\nx = 1;\n")
        directive = next(tree.descendant_tokens()).leading_trivia[0]
        call = quote_trivia(Quoter(), directive, "root")
        assert call.builder_name == "f:Trivia"
        (structure,) = call.builder_call.arguments
        assert structure.builder_name == "f:RegionDirectiveTrivia"

    def test_unknown_trivia_kind(self):
        with pytest.raises(UnsupportedNodeKind):
            quote_trivia(Quoter(), SyntaxTrivia(SyntaxKind.SKIPPED_TOKENS_TRIVIA, "?"), "root")


# ---------------------------------------------------------------------------
# Modifier pruning
# ---------------------------------------------------------------------------


class TestRedundantModifiers:
    def test_pruned_tree_has_nothing_left_to_remove(self):
        quoter = Quoter()
        call = quoter.quote_call("class C { int M() { return 1; } }")
        assert quoter.remove_redundant_modifiers(call) == 0

    def test_unpruned_tree_loses_modifiers_but_not_text(self):
        keeper = Quoter(QuoterConfig(remove_redundant_modifying_calls=False))
        call = keeper.quote_call("class C { int M() { return 1; } }")
        before = keeper.render(call)
        total = modifier_count(call)

        removed = Quoter().remove_redundant_modifiers(call)
        assert removed > 0
        assert modifier_count(call) == total - removed
        assert keeper.render(call) == before

    @pytest.mark.parametrize("source", SAMPLES)
    def test_every_kept_modifier_changes_the_rendering(self, source):
        for quoter in (Quoter(), _exact_quoter()):
            for call in _calls_with_modifiers(quoter.quote_call(source)):
                kept = list(call.modifier_calls)
                for idx, modifier in enumerate(kept):
                    call.modifier_calls[:] = kept[:idx]
                    before = quoter.render(call)
                    call.add_modifier(modifier)
                    assert quoter.render(call) != before, f"{call.builder_name} {modifier.name}"
                call.modifier_calls[:] = kept

    def test_pruning_matches_quoting_with_pruning(self):
        source = "if (a) { b(); }"
        keeper = Quoter(QuoterConfig(remove_redundant_modifying_calls=False))
        call = keeper.quote_call(source)
        pruner = Quoter()
        pruner.remove_redundant_modifiers(call)
        assert modifier_count(call) == modifier_count(pruner.quote_call(source))


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestQuoterErrors:
    def test_missing_required_argument(self):
        spec = BuilderSpec(
            name="Block",
            returns="BlockSyntax",
            parameters=(ParameterSpec("label", "str"),),
            fn=lambda label: factory.block(),
            generic=False,
            signature="Block(label: str)",
        )
        quoter = Quoter(registry=_single_spec_registry(spec))
        with pytest.raises(MissingArgument) as excinfo:
            quoter.quote_node(factory.block())
        assert excinfo.value.name == "label"
        assert excinfo.value.builder == "Block(label: str)"
        assert str(excinfo.value).startswith("root: Block(label: str) needs argument 'label'")

    def test_unsupported_modifier(self):
        spec = BuilderSpec(
            name="Block",
            returns="BlockSyntax",
            parameters=(ParameterSpec("selector", "SyntaxKind", optional=True),),
            fn=lambda selector=None: factory.block(),
            generic=False,
            signature="Block(selector: SyntaxKind = None)",
        )
        config = QuoterConfig(remove_redundant_modifying_calls=False)
        quoter = Quoter(config, registry=_single_spec_registry(spec))
        with pytest.raises(UnsupportedModifier) as excinfo:
            quoter.quote_node(factory.block(), None, "root.Members[0]")
        assert excinfo.value.name == "Kind"
        assert str(excinfo.value) == "root.Members[0]: BlockSyntax has no modifier WithKind"

    def test_unsupported_node_reports_path(self):
        quoter = Quoter(registry=BuilderRegistry([], {}))
        with pytest.raises(UnsupportedNodeKind) as excinfo:
            quoter.quote_call("class C { }")
        assert excinfo.value.path == "root.Members[0]"
        assert excinfo.value.name == "ClassDeclaration"
