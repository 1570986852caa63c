from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..syntax.nodes import SeparatedSyntaxList, SyntaxList, SyntaxTokenList, SyntaxTriviaList
from .calls import ARRAY_PREFIX, BUILDER_PREFIX, ApiCall, MethodCall

if TYPE_CHECKING:
    from .quoter import Quoter

AnyList = SyntaxList | SeparatedSyntaxList | SyntaxTokenList | SyntaxTriviaList


def _list_builders(value: AnyList, element_type: str | None) -> tuple[str, str, str, tuple[Any, ...]]:
    """Return ``(plural builder, singleton builder, array type, items)`` for a list value."""

    if isinstance(value, SyntaxTokenList):
        return "TokenList", "TokenList", "SyntaxToken", value.items
    if isinstance(value, SyntaxTriviaList):
        return "TriviaList", "TriviaList", "SyntaxTrivia", value.items
    element = element_type or "SyntaxNode"
    if isinstance(value, SeparatedSyntaxList):
        return (
            f"SeparatedList<{element}>",
            f"SingletonSeparatedList<{element}>",
            "SyntaxNodeOrToken",
            value.with_separators(),
        )
    return f"List<{element}>", f"SingletonList<{element}>", element, value.items


def quote_list(
    engine: Quoter,
    value: AnyList,
    name: str,
    element_type: str | None,
    path: str,
) -> ApiCall | None:
    """Quote a list value as a singleton or plural list builder call.

    Elements that quote to nothing are dropped first. No remaining element
    yields ``None``; one element uses the singleton builder with the element
    as its argument; more elements are wrapped in one ``n:<T>`` array
    argument of the plural builder. Separated lists quote their nodes and
    separators interleaved.
    """

    plural, singleton, array_type, items = _list_builders(value, element_type)
    elements: list[ApiCall] = []
    for idx, item in enumerate(items):
        quoted = engine.quote_element(item, name, f"{path}[{idx}]")
        if quoted is not None:
            elements.append(quoted)
    if not elements:
        return None
    if len(elements) == 1:
        return ApiCall(name, MethodCall(BUILDER_PREFIX + singleton, elements))
    array = ApiCall(name, MethodCall(ARRAY_PREFIX + array_type, elements))
    return ApiCall(name, MethodCall(BUILDER_PREFIX + plural, [array]))
