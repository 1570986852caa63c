from __future__ import annotations

import logging
from typing import Any

from ..config import QuoterConfig
from ..syntax.formatting import normalize_whitespace
from ..syntax.nodes import (
    SeparatedSyntaxList,
    SyntaxList,
    SyntaxNode,
    SyntaxToken,
    SyntaxTokenList,
    SyntaxTrivia,
    SyntaxTriviaList,
)
from ..syntax.parser import parse_text
from ..syntax.schema import AttributeSpec
from .calls import (
    BUILDER_PREFIX,
    MODIFIER_PREFIX,
    ApiCall,
    KindTag,
    MethodCall,
    QuotedLiteral,
    call_size,
    is_array_call,
    modifier_count,
    nested_calls,
)
from .codec import decode_call, encode_call
from .errors import MissingArgument, ReplayError, UnsupportedModifier, UnsupportedNodeKind
from .interpreter import CallInterpreter
from .lists import quote_list
from .registry import BuilderRegistry, BuilderSpec, build_default_registry, match_key
from .resolver import pick_builder
from .tokens import quote_token, quote_trivia

logger = logging.getLogger(__name__)

IDENTIFIER_BUILDER = BUILDER_PREFIX + "Identifier"

QuotedValue = ApiCall | QuotedLiteral


def proper_case(name: str) -> str:
    return name[:1].upper() + name[1:]


def _find_value(values: list[QuotedValue], key: str) -> QuotedValue | None:
    for value in values:
        if value.name is not None and match_key(value.name) == key:
            return value
    return None


def _as_argument(value: QuotedValue) -> Any:
    if isinstance(value, QuotedLiteral):
        return value.value
    return value


def _array_elements(value: QuotedValue) -> list[Any] | None:
    """Elements of ``List(n:T(...))``-shaped values, else ``None``."""

    if not isinstance(value, ApiCall) or "List" not in value.builder_name:
        return None
    arguments = value.builder_call.arguments
    if len(arguments) != 1 or not isinstance(arguments[0], ApiCall):
        return None
    if not is_array_call(arguments[0]):
        return None
    return list(arguments[0].builder_call.arguments)


def _identifier_text(value: QuotedValue | None) -> ApiCall | None:
    if isinstance(value, ApiCall) and value.builder_name == IDENTIFIER_BUILDER:
        return value
    return None


class Quoter:
    """Turns syntax trees into builder call trees and back.

    Typical usage::

        quoter = Quoter()
        text = quoter.quote("class C { }")        # interchange text
        tree = quoter.rebuild(text)               # live tree again
        assert tree.to_full_string() == "class C\\n{\\n}"

    Attributes:
        config: Formatting and pruning options.
        registry: Builder overloads used for resolution and replay.
        interpreter: Replays call trees; also used to verify modifiers.
    """

    def __init__(self, config: QuoterConfig | None = None, registry: BuilderRegistry | None = None):
        self.config = config if config is not None else QuoterConfig()
        self.registry = registry if registry is not None else build_default_registry()
        self.interpreter = CallInterpreter(self.registry)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, text: str) -> SyntaxNode:
        return parse_text(text, self.config.preprocessor_symbols)

    def quote(self, source: str | SyntaxNode, indent: int | None = None) -> str:
        """Quote source text or a tree straight to interchange text."""

        call = self.quote_call(source)
        return encode_call(call, indent=indent if indent is not None else self.config.indent)

    def quote_call(self, source: str | SyntaxNode) -> ApiCall:
        if isinstance(source, str):
            tree = self.parse(source)
        elif isinstance(source, SyntaxNode):
            tree = source
        else:
            raise TypeError(f"Cannot quote {type(source).__name__}; expected source text or a SyntaxNode")

        call = self.quote_node(tree, None, "root")
        logger.debug(
            "Quoted %s into %d call(s) with %d modifier(s)",
            tree.type_name,
            call_size(call),
            modifier_count(call),
        )
        return call

    def rebuild(self, source: str | ApiCall, normalize: bool | None = None) -> Any:
        """Replay interchange text or a call tree into a live tree.

        Nodes are passed through :func:`normalize_whitespace` unless
        ``normalize`` is ``False``; by default this follows
        ``config.use_default_formatting``.
        """

        call = decode_call(source) if isinstance(source, str) else source
        try:
            result = self.interpreter.replay(call)
        except RecursionError:
            raise ReplayError("root", "call tree is nested too deeply") from None
        if normalize is None:
            normalize = self.config.use_default_formatting
        if normalize and isinstance(result, SyntaxNode):
            result = normalize_whitespace(result)
        return result

    def render(self, call: ApiCall, path: str = "root") -> str:
        return self.interpreter.replay(call, path).to_full_string()

    def remove_redundant_modifiers(self, call: ApiCall, path: str = "root") -> int:
        """Drop modifiers that do not change the rendering; return how many were dropped.

        Nested calls are cleaned first. Modifiers are re-applied one at a
        time in their original order, so a tree produced with pruning
        enabled comes back unchanged.
        """

        removed = 0
        for idx, nested in enumerate(nested_calls(call)):
            removed += self.remove_redundant_modifiers(nested, f"{path}.args[{idx}]")

        pending = list(call.modifier_calls)
        call.modifier_calls.clear()
        for modifier in pending:
            if not self._keep_if_effective(call, modifier, path):
                removed += 1
        return removed

    # ------------------------------------------------------------------
    # Tree walking
    # ------------------------------------------------------------------

    def quote_element(self, value: Any, name: str | None, path: str) -> ApiCall | None:
        if isinstance(value, SyntaxNode):
            return self.quote_node(value, name, path)
        if isinstance(value, SyntaxToken):
            return quote_token(self, value, name, path)
        if isinstance(value, SyntaxTrivia):
            return quote_trivia(self, value, path)
        raise UnsupportedNodeKind(path, type(value).__name__)

    def quote_node(self, node: SyntaxNode, name: str | None = None, path: str = "root") -> ApiCall:
        values = self._quote_properties(node, path)
        spec = pick_builder(self.registry, node, path)
        call = ApiCall(name, MethodCall(BUILDER_PREFIX + spec.name))
        self._bind_arguments(call, spec, values, path)
        for value in values:
            self._add_modifier(call, node, value, path)
        return call

    def _quote_properties(self, node: SyntaxNode, path: str) -> list[QuotedValue]:
        values: list[QuotedValue] = []
        for attribute, value in node.properties():
            if not self.registry.is_structural(attribute.name):
                continue
            quoted = self._quote_property(attribute, value, f"{path}.{attribute.name}")
            if quoted is not None:
                values.append(quoted)
        if self.registry.takes_kind_selector(node.type_name):
            values.append(ApiCall("Kind", MethodCall(KindTag(node.kind).tag)))
        return values

    def _quote_property(self, attribute: AttributeSpec, value: Any, path: str) -> QuotedValue | None:
        name = attribute.name
        if value is None:
            return None
        if isinstance(value, SyntaxToken):
            return quote_token(self, value, name, path)
        if isinstance(value, (SyntaxList, SeparatedSyntaxList, SyntaxTokenList, SyntaxTriviaList)):
            return quote_list(self, value, name, attribute.element_type, path)
        if isinstance(value, SyntaxNode):
            return self.quote_node(value, name, path)
        if isinstance(value, (str, bool)):
            return QuotedLiteral(name, value)
        return None

    # ------------------------------------------------------------------
    # Call assembly
    # ------------------------------------------------------------------

    def _bind_arguments(self, call: ApiCall, spec: BuilderSpec, values: list[QuotedValue], path: str) -> None:
        arguments = call.builder_call.arguments
        for param in spec.parameters:
            value = _find_value(values, param.match_key)

            if value is not None and spec.parameter_count == 1 and param.variadic:
                elements = _array_elements(value)
                if elements is not None:
                    # Block(List(n:T(a, b))) is written Block(a, b)
                    arguments.extend(elements)
                    values.remove(value)
                    return
            elif param.match_key == "name" and param.type_tag == "str":
                value = _find_value(values, "identifier")
                identifier = _identifier_text(value)
                if identifier is not None:
                    inner = identifier.builder_call.arguments
                    arguments.append(inner[0] if len(inner) == 1 else identifier)
                    values.remove(identifier)
                    continue
            elif param.match_key == "identifier" and param.type_tag == "str":
                identifier = _identifier_text(value)
                if identifier is not None and len(identifier.builder_call.arguments) == 1:
                    arguments.append(identifier.builder_call.arguments[0])
                    values.remove(identifier)
                    continue

            if value is not None:
                arguments.append(_as_argument(value))
                values.remove(value)
            elif not param.optional:
                if param.variadic:
                    continue
                raise MissingArgument(path, param.name, spec.signature)

    def _add_modifier(self, call: ApiCall, node: SyntaxNode, value: QuotedValue, path: str) -> None:
        attribute = proper_case(value.name or "")
        if not self.registry.has_modifier(node.type_name, attribute):
            raise UnsupportedModifier(path, attribute, node.type_name)
        modifier = MethodCall(MODIFIER_PREFIX + attribute, [_as_argument(value)])
        if not self.config.remove_redundant_modifying_calls:
            call.add_modifier(modifier)
            return
        self._keep_if_effective(call, modifier, path)

    def _keep_if_effective(self, call: ApiCall, modifier: MethodCall, path: str) -> bool:
        before = self.render(call, path)
        call.add_modifier(modifier)
        if self.render(call, path) != before:
            return True
        call.remove_modifier(modifier)
        logger.debug("%s: dropped redundant %s on %s", path, modifier.name, call.builder_name)
        return False

