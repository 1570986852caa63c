"""Tests for the JSON interchange codec and call replay."""

from __future__ import annotations

import json

import pytest

from syntax_quoter.quoting import (
    ApiCall,
    CallInterpreter,
    KindTag,
    MalformedInterchangeText,
    MethodCall,
    Quoter,
    ReplayError,
    build_default_registry,
    decode_call,
    encode_call,
)
from syntax_quoter.config import QuoterConfig
from syntax_quoter.quoting.calls import call_depth, call_size, is_array_call, modifier_count, split_generic
from syntax_quoter.syntax import SyntaxKind


def _call(name: str, *arguments, modifiers=()) -> ApiCall:
    """Unnamed call with positional arguments and modifiers."""
    return ApiCall(None, MethodCall(name, list(arguments)), list(modifiers))


def _no_constants(name: str):
    """``parse_constant`` hook that refuses NaN and Infinity."""
    raise ValueError(f"unexpected {name}")


def _replay(text: str):
    """Decode ``text`` and replay it against the default registry."""
    return CallInterpreter(build_default_registry()).replay(decode_call(text))


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


class TestEncode:
    def test_no_arguments_is_null(self):
        assert encode_call(_call("f:CompilationUnit")) == '{"f:CompilationUnit":null}'

    def test_modifiers_go_under_b(self):
        call = _call("f:Block", modifiers=[MethodCall("w:OpenBraceToken", [_call("f:MissingToken")])])
        assert encode_call(call) == '{"f:Block":null,"b":[{"w:OpenBraceToken":[{"f:MissingToken":null}]}]}'

    def test_kind_tags_and_literals(self):
        call = _call("f:Literal", "0x1F", 31, 1.5, True, KindTag(SyntaxKind.NUMERIC_LITERAL_TOKEN))
        payload = json.loads(encode_call(call))
        assert payload == {"f:Literal": ["0x1F", 31, 1.5, True, "k:NumericLiteralToken"]}

    def test_strings_that_look_like_tags_are_escaped(self):
        call = _call("f:Identifier", "k:Foo", "\\bar", "plain")
        assert json.loads(encode_call(call)) == {"f:Identifier": ["\\k:Foo", "\\\\bar", "plain"]}

    def test_non_ascii_is_kept(self):
        assert "é" in encode_call(_call("f:Identifier", "café"))

    def test_unsupported_argument_type(self):
        with pytest.raises(TypeError, match="Cannot encode argument"):
            encode_call(_call("f:Identifier", object()))

    def test_indent(self):
        assert encode_call(_call("f:CompilationUnit"), indent=2) == '{\n  "f:CompilationUnit": null\n}'

    def test_non_finite_float_is_rejected(self):
        with pytest.raises(ValueError, match="non-finite"):
            encode_call(_call("f:Literal", float("inf")))

    @pytest.mark.parametrize("source", ["x = 1e999;", "x = 99999999999999999999999;"])
    def test_out_of_range_numbers_stay_strict_json(self, source):
        quoter = Quoter(QuoterConfig(use_default_formatting=False))
        text = quoter.quote(source)
        json.loads(text, parse_constant=_no_constants)
        assert quoter.rebuild(text).to_full_string() == source


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecode:
    def test_escaped_strings_round_trip(self):
        call = _call("f:Identifier", "k:Foo", "\\bar", KindTag(SyntaxKind.IDENTIFIER_TOKEN))
        decoded = decode_call(encode_call(call))
        assert decoded.builder_call.arguments == ["k:Foo", "\\bar", KindTag(SyntaxKind.IDENTIFIER_TOKEN)]

    def test_modifiers_and_nested_calls(self):
        text = '{"f:Block":[{"f:ReturnStatement":null}],"b":[{"w:CloseBraceToken":[{"k:CloseBraceToken":null}]}]}'
        call = decode_call(text)
        assert call.builder_name == "f:Block"
        assert call.builder_call.arguments[0].builder_name == "f:ReturnStatement"
        (modifier,) = call.modifier_calls
        assert modifier.name == "w:CloseBraceToken"
        assert modifier.arguments[0].builder_name == "k:CloseBraceToken"

    def test_quoted_text_decodes_to_equal_call(self):
        quoter = Quoter()
        call = quoter.quote_call("class C { int M() { return 1; } }")
        assert encode_call(decode_call(encode_call(call))) == encode_call(call)

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("{", "invalid JSON"),
            ("[]", "non-empty object"),
            ("{}", "non-empty object"),
            ('{"Block":null}', "is not a builder, kind or array call"),
            ('{"f:Block":null,"x":[]}', "unexpected property 'x'"),
            ('{"f:Block":null,"f:Block":null}', "duplicate property"),
            ('{"f:Block":"oops"}', "arguments must be null or an array"),
            ('{"f:Block":null,"b":{}}', "'b' must be an array"),
            ('{"f:Block":null,"b":[{"f:Token":null}]}', "is not a modifier call"),
            ('{"f:Block":null,"b":[{"w:A":null,"w:B":null}]}', "one property"),
            ('{"f:Token":["k:NotAKind"]}', "unknown kind tag"),
            ('{"k:NotAKind":null}', "unknown kind tag"),
            ('{"f:Token":[null]}', "unsupported argument"),
            ('{"f:Literal":[Infinity]}', "Infinity is not a valid number"),
            ('{"f:Literal":[NaN]}', "NaN is not a valid number"),
        ],
    )
    def test_malformed_text(self, text, message):
        with pytest.raises(MalformedInterchangeText, match=message):
            decode_call(text)

    def test_deep_nesting_is_malformed(self):
        with pytest.raises(MalformedInterchangeText, match="nested too deeply") as excinfo:
            decode_call('{"f:Block":[' * 100000)
        assert excinfo.value.path == "root"

    def test_error_path_points_at_argument(self):
        with pytest.raises(MalformedInterchangeText) as excinfo:
            decode_call('{"f:Block":[{"f:ReturnStatement":[null]}]}')
        assert excinfo.value.path == "root.args[0].args[0]"


# ---------------------------------------------------------------------------
# Replay
# ---------------------------------------------------------------------------


class TestReplay:
    def test_builds_node(self):
        node = _replay('{"f:IdentifierName":["x"]}')
        assert node.type_name == "IdentifierName"
        assert node.to_full_string() == "x"

    def test_kind_call_evaluates_to_kind(self):
        assert _replay('{"k:PlusToken":null}') is SyntaxKind.PLUS_TOKEN

    def test_well_known_trivia_property(self):
        assert _replay('{"f:Space":null}').text == " "

    def test_generic_list(self):
        items = _replay('{"f:List<StatementSyntax>":[{"n:StatementSyntax":[{"f:ReturnStatement":null}]}]}')
        assert len(items) == 1

    def test_modifier_applies_in_order(self):
        node = _replay('{"f:IdentifierName":["x"],"b":[{"w:Identifier":[{"f:Identifier":["y"]}]}]}')
        assert node.to_full_string() == "y"

    def test_unknown_builder(self):
        with pytest.raises(ReplayError, match="Unknown builder"):
            _replay('{"f:Nope":null}')

    def test_modifier_value_is_checked(self):
        with pytest.raises(ReplayError) as excinfo:
            _replay('{"f:Block":[{"f:ReturnStatement":null}],"b":[{"w:Statements":["x"]}]}')
        assert excinfo.value.path == "root.b[0]"

    def test_array_element_type_is_checked(self):
        with pytest.raises(ReplayError) as excinfo:
            _replay('{"f:List<StatementSyntax>":[{"n:StatementSyntax":[{"f:IdentifierName":["x"]}]}]}')
        assert excinfo.value.path == "root.args[0].args[0]"

    def test_kind_call_takes_no_arguments(self):
        with pytest.raises(ReplayError, match="takes no arguments"):
            CallInterpreter(build_default_registry()).replay(_call("k:PlusToken", 1))

    def test_modifier_prefix_is_required(self):
        call = _call("f:IdentifierName", "x", modifiers=[MethodCall("f:Identifier", ["y"])])
        with pytest.raises(ReplayError, match="is not a modifier call"):
            CallInterpreter(build_default_registry()).replay(call)

    def test_deep_call_tree_is_a_replay_error(self):
        call = _call("f:IdentifierName", "x")
        for _ in range(5000):
            call = _call("f:ParenthesizedExpression", call)
        with pytest.raises(ReplayError, match="nested too deeply"):
            Quoter().rebuild(call)

    def test_builder_errors_are_wrapped(self):
        with pytest.raises(ReplayError, match="Whitespace failed") as excinfo:
            _replay('{"f:Whitespace":["x"]}')
        assert isinstance(excinfo.value.__cause__, ValueError)


# ---------------------------------------------------------------------------
# Call tree helpers
# ---------------------------------------------------------------------------


class TestCallHelpers:
    def test_split_generic(self):
        assert split_generic("f:List<StatementSyntax>") == ("f:List", "StatementSyntax")
        assert split_generic("f:Block") == ("f:Block", None)

    def test_is_array_call(self):
        assert is_array_call(_call("n:StatementSyntax"))
        assert not is_array_call(_call("f:List<StatementSyntax>"))

    def test_counts_include_modifier_arguments(self):
        call = decode_call(
            '{"f:CompilationUnit":null,"b":[{"w:Members":'
            '[{"f:SingletonList<MemberDeclarationSyntax>":[{"f:ClassDeclaration":["C"]}]}]}]}'
        )
        assert call_size(call) == 3
        assert call_depth(call) == 3
        assert modifier_count(call) == 1

    def test_remove_modifier_by_identity(self):
        first = MethodCall("w:Identifier", ["a"])
        twin = MethodCall("w:Identifier", ["a"])
        call = _call("f:IdentifierName", "x", modifiers=[first])
        with pytest.raises(ValueError):
            call.remove_modifier(twin)
        call.remove_modifier(first)
        assert call.modifier_calls == []
