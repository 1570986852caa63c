"""Quoting of tokens and the trivia attached to them."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from ..syntax.factory import canonical_character_text, canonical_literal_text
from ..syntax.kinds import SyntaxKind
from ..syntax.nodes import SyntaxToken, SyntaxTrivia
from .calls import BUILDER_PREFIX, ApiCall, KindTag, MethodCall
from .errors import UnsupportedNodeKind
from .lists import quote_list

if TYPE_CHECKING:
    from .quoter import Quoter

_XML_BUILDERS = {
    SyntaxKind.XML_TEXT_LITERAL_TOKEN: "XmlTextLiteral",
    SyntaxKind.XML_TEXT_LITERAL_NEW_LINE_TOKEN: "XmlTextNewLine",
    SyntaxKind.XML_ENTITY_LITERAL_TOKEN: "XmlEntity",
}

_LITERAL_BUILDERS = {
    SyntaxKind.STRING_LITERAL_TOKEN: "Literal",
    SyntaxKind.NUMERIC_LITERAL_TOKEN: "Literal",
    SyntaxKind.CHARACTER_LITERAL_TOKEN: "CharacterLiteral",
}

_TEXT_TRIVIA_BUILDERS = {
    SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA: "Comment",
    SyntaxKind.MULTI_LINE_COMMENT_TRIVIA: "Comment",
    SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA: "DocumentComment",
    SyntaxKind.MULTI_LINE_DOCUMENTATION_COMMENT_TRIVIA: "DocumentComment",
    SyntaxKind.PREPROCESSING_MESSAGE_TRIVIA: "PreprocessingMessage",
    SyntaxKind.DISABLED_TEXT_TRIVIA: "DisabledText",
    SyntaxKind.DOCUMENTATION_COMMENT_EXTERIOR_TRIVIA: "DocumentationCommentExterior",
}

_FORMATTING_TRIVIA_BUILDERS = {
    SyntaxKind.WHITESPACE_TRIVIA: "Whitespace",
    SyntaxKind.END_OF_LINE_TRIVIA: "EndOfLine",
}


def builder_call(name: str | None, builder: str, arguments: list[Any] | None = None) -> ApiCall:
    return ApiCall(name, MethodCall(BUILDER_PREFIX + builder, list(arguments or [])))


def empty_trivia_list() -> ApiCall:
    return builder_call("TriviaList", "TriviaList")


def _canonical_text(token: SyntaxToken) -> str | None:
    try:
        if token.kind is SyntaxKind.CHARACTER_LITERAL_TOKEN:
            return canonical_character_text(token.value)
        return canonical_literal_text(token.value)
    except (TypeError, AttributeError):
        return None


def _has_literal_value(token: SyntaxToken) -> bool:
    value = token.value
    if token.kind is SyntaxKind.NUMERIC_LITERAL_TOKEN:
        if isinstance(value, bool):
            return False
        return isinstance(value, int) or (isinstance(value, float) and math.isfinite(value))
    return isinstance(value, str)


def quote_token(engine: Quoter, token: SyntaxToken | None, name: str, path: str) -> ApiCall | None:
    """Describe ``token`` as the shortest builder call that recreates it.

    Trivia is emitted on both sides as soon as one side has any quoted
    trivia; the empty side becomes ``TriviaList()``.
    """

    if token is None or token.kind is SyntaxKind.NONE:
        return None

    leading = quote_list(engine, token.leading_trivia, "LeadingTrivia", None, f"{path}.LeadingTrivia")
    trailing = quote_list(engine, token.trailing_trivia, "TrailingTrivia", None, f"{path}.TrailingTrivia")
    has_trivia = leading is not None or trailing is not None
    leading = leading or empty_trivia_list()
    trailing = trailing or empty_trivia_list()

    def with_trivia(*arguments: Any) -> list[Any]:
        if has_trivia:
            return [leading, *arguments, trailing]
        return list(arguments)

    kind = token.kind
    if token.is_missing:
        return builder_call(name, "MissingToken", with_trivia(KindTag(kind)))

    if kind is SyntaxKind.IDENTIFIER_TOKEN:
        return builder_call(name, "Identifier", with_trivia(token.text))

    # literals such as 1e999 have no JSON value; only their text is kept
    if kind is SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN or (
        kind in _LITERAL_BUILDERS and not _has_literal_value(token)
    ):
        return builder_call(name, "Token", [leading, KindTag(kind), token.text, token.value_text, trailing])

    if kind in _XML_BUILDERS:
        return builder_call(name, _XML_BUILDERS[kind], [leading, token.text, token.value_text, trailing])

    if kind in _LITERAL_BUILDERS:
        builder = _LITERAL_BUILDERS[kind]
        if has_trivia:
            return builder_call(name, builder, [leading, token.text, token.value, trailing])
        if _canonical_text(token) != token.text:
            return builder_call(name, builder, [token.text, token.value])
        return builder_call(name, builder, [token.value])

    if kind is SyntaxKind.BAD_TOKEN:
        return builder_call(name, "BadToken", [leading, token.text, trailing])

    return builder_call(name, "Token", with_trivia(KindTag(kind)))


def quote_trivia(engine: Quoter, trivia: SyntaxTrivia, path: str) -> ApiCall | None:
    """Describe one trivia item; ``None`` when it can be left out."""

    if trivia.full_width == 0:
        return None

    if trivia.has_structure:
        structure = engine.quote_node(trivia.structure, "Structure", f"{path}.Structure")
        return builder_call("Trivia", "Trivia", [structure])

    default_formatting = engine.config.use_default_formatting
    known = engine.registry.well_known_trivia(trivia)
    if known is not None:
        return None if default_formatting else builder_call(known, known)

    if trivia.kind in _FORMATTING_TRIVIA_BUILDERS:
        if default_formatting:
            return None
        builder = _FORMATTING_TRIVIA_BUILDERS[trivia.kind]
        return builder_call(builder, builder, [trivia.text])

    if trivia.kind in _TEXT_TRIVIA_BUILDERS:
        builder = _TEXT_TRIVIA_BUILDERS[trivia.kind]
        return builder_call(builder, builder, [trivia.text])

    raise UnsupportedNodeKind(path, trivia.kind.value)
