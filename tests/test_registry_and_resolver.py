"""Tests for the builder registry and overload resolution."""

from __future__ import annotations

import pytest

from syntax_quoter.quoting import BuilderRegistry, UnsupportedNodeKind, build_default_registry, pick_builder
from syntax_quoter.syntax import SyntaxKind, SyntaxTrivia, parse_text
from syntax_quoter.syntax import factory


def _registry() -> BuilderRegistry:
    """Default registry shared by the module."""
    return build_default_registry()


def _first_statement(source: str):
    """First global statement of ``source``."""
    return parse_text(source).get("Members")[0].get("Statement")


# ---------------------------------------------------------------------------
# Registry lookups
# ---------------------------------------------------------------------------


class TestBuilderRegistry:
    def test_default_registry_is_cached(self):
        assert build_default_registry() is build_default_registry()

    def test_candidates_in_signature_order(self):
        signatures = [spec.signature for spec in _registry().candidates("Block")]
        assert signatures == sorted(signatures)
        assert signatures[0] == "Block(*statements: StatementSyntax)"
        assert len(signatures) == 3

    def test_candidates_for_unknown_type_is_empty(self):
        assert _registry().candidates("Nope") == []

    def test_unknown_builder_raises_key_error(self):
        with pytest.raises(KeyError, match="Unknown builder"):
            _registry().overloads("Nope")

    def test_list_builders_is_sorted(self):
        names = _registry().list_builders()
        assert names == sorted(names)
        assert {"Token", "Identifier", "List", "TriviaList"} <= set(names)

    def test_kind_selector_types(self):
        registry = _registry()
        assert registry.takes_kind_selector("LiteralExpression")
        assert registry.takes_kind_selector("BinaryExpression")
        assert not registry.takes_kind_selector("Block")

    def test_structural_properties(self):
        registry = _registry()
        assert registry.is_structural("Members")
        assert not registry.is_structural("Kind")
        assert not registry.is_structural("FullSpan")

    def test_has_modifier_follows_schema(self):
        registry = _registry()
        assert registry.has_modifier("Block", "Statements")
        assert not registry.has_modifier("Block", "Identifier")
        assert not registry.has_modifier("Nope", "Statements")

    def test_well_known_trivia(self):
        registry = _registry()
        assert registry.property("Space").text == " "
        assert registry.well_known_trivia(SyntaxTrivia(SyntaxKind.END_OF_LINE_TRIVIA, "\n")) == "LineFeed"
        assert registry.well_known_trivia(SyntaxTrivia(SyntaxKind.WHITESPACE_TRIVIA, "  ")) is None
        assert registry.property("Nope") is None

    def test_invoke_picks_matching_overload(self):
        registry = _registry()
        assert registry.invoke("IdentifierName", ["x"]).to_full_string() == "x"
        token = factory.identifier_token("y")
        assert registry.invoke("IdentifierName", [token]).to_full_string() == "y"

    def test_invoke_expands_sequence_into_variadic(self):
        statement = factory.return_statement()
        block = _registry().invoke("Block", [[statement, statement]])
        assert len(block.get("Statements")) == 2

    def test_invoke_passes_generic_element_type(self):
        node = factory.identifier_name("x")
        with pytest.raises(TypeError):
            _registry().invoke("SingletonList", [node], "StatementSyntax")

    def test_invoke_without_matching_overload(self):
        with pytest.raises(TypeError, match="no overload of Identifier"):
            _registry().invoke("Identifier", [1, 2, 3, 4])

    def test_modify_takes_one_argument(self):
        node = factory.identifier_name("x")
        with pytest.raises(TypeError, match="exactly one argument"):
            BuilderRegistry.modify(node, "Identifier", [])
        with pytest.raises(TypeError, match="needs a node"):
            BuilderRegistry.modify("x", "Identifier", [factory.identifier_token("y")])


class TestBuilderSpec:
    def test_parameters_are_introspected(self):
        spec = _registry().candidates("Block")[0]
        assert spec.parameter_count == 1
        assert spec.first_parameter.variadic
        assert spec.first_parameter.type_tag == "StatementSyntax"

    def test_optional_parameter(self):
        (spec,) = [s for s in _registry().overloads("ReturnStatement") if s.parameter_count == 1]
        assert spec.first_parameter.optional
        assert spec.bind([]) == []
        assert spec.bind([None]) == [None]

    def test_bind_rejects_wrong_types(self):
        spec = next(s for s in _registry().overloads("Identifier") if s.parameter_count == 1)
        assert spec.bind([1]) is None
        assert spec.bind(["x"]) == ["x"]

    def test_match_key_ignores_underscores_and_case(self):
        spec = next(s for s in _registry().candidates("Block") if s.parameter_count == 3)
        assert spec.first_parameter.match_key == "openbracetoken"


# ---------------------------------------------------------------------------
# Overload resolution
# ---------------------------------------------------------------------------


class TestPickBuilder:
    def test_compilation_unit_uses_empty_overload(self):
        spec = pick_builder(_registry(), parse_text("x = 1;"))
        assert spec.parameter_count == 0

    def test_class_declaration_prefers_string(self):
        node = parse_text("class C { }").get("Members")[0]
        spec = pick_builder(_registry(), node)
        assert spec.first_parameter.type_tag == "str"

    def test_identifier_name_prefers_string(self):
        node = factory.identifier_name("x")
        assert pick_builder(_registry(), node).signature == "IdentifierName(name: str)"

    def test_block_prefers_variadic(self):
        spec = pick_builder(_registry(), _first_statement("{ }"))
        assert spec.first_parameter.variadic

    def test_numeric_literal_needs_token(self):
        node = factory.literal_expression_with_token(SyntaxKind.NUMERIC_LITERAL_EXPRESSION, factory.literal(1))
        assert pick_builder(_registry(), node).parameter_count == 2

    def test_keyword_literal_uses_kind_only(self):
        node = factory.literal_expression(SyntaxKind.TRUE_LITERAL_EXPRESSION)
        spec = pick_builder(_registry(), node)
        assert spec.parameter_count == 1
        assert spec.first_parameter.type_tag == "SyntaxKind"

    def test_return_prefers_optional_single_parameter(self):
        spec = pick_builder(_registry(), _first_statement("return;"))
        assert spec.parameter_count == 1
        assert spec.first_parameter.optional

    def test_no_candidates_raises(self):
        empty = BuilderRegistry([], {})
        with pytest.raises(UnsupportedNodeKind) as excinfo:
            pick_builder(empty, factory.block(), "root.Members[0]")
        assert excinfo.value.path == "root.Members[0]"
        assert excinfo.value.name == "Block"
        assert "BlockSyntax" in str(excinfo.value)
