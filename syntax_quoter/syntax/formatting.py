"""Canonical whitespace layout for Curly syntax trees.

:func:`normalize_whitespace` discards every whitespace and end-of-line trivia
in a tree, including the ones inside directives and skipped tokens, and lays
the tokens out again with single spaces, one statement per line and four-space
indentation per brace level. Comments, directives, disabled text and
documentation comments are kept; line-oriented trivia always start on a fresh
line. Only non-whitespace content influences the result, so the function is
idempotent.
"""

from __future__ import annotations

from . import factory
from .kinds import DIRECTIVE_TRIVIA_KINDS, DOCUMENTATION_COMMENT_KINDS, SyntaxKind
from .nodes import EMPTY_TRIVIA, SyntaxNode, SyntaxToken, SyntaxTokenList, SyntaxTrivia, SyntaxTriviaList

INDENT = "    "

_TIGHT = "tight"
_SPACED = "spaced"
_NEWLINE = "newline"

_LAYOUT_BRACE_OWNERS = frozenset({"Block", "ClassDeclaration"})
_TIGHT_PAREN_OWNERS = frozenset({"ArgumentList", "ParameterList", "CheckedExpression"})
_WHITESPACE_KINDS = frozenset({SyntaxKind.WHITESPACE_TRIVIA, SyntaxKind.END_OF_LINE_TRIVIA})
_LINE_ORIENTED_KINDS = DIRECTIVE_TRIVIA_KINDS | DOCUMENTATION_COMMENT_KINDS | {SyntaxKind.DISABLED_TEXT_TRIVIA}
_COMMENT_KINDS = frozenset({SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA, SyntaxKind.MULTI_LINE_COMMENT_TRIVIA})
_SIGN_OPERATORS = frozenset({SyntaxKind.MINUS_TOKEN, SyntaxKind.MINUS_MINUS_TOKEN, SyntaxKind.PLUS_PLUS_TOKEN})


def _is_layout_brace(token: SyntaxToken, parent: SyntaxNode) -> bool:
    return (
        token.kind in (SyntaxKind.OPEN_BRACE_TOKEN, SyntaxKind.CLOSE_BRACE_TOKEN)
        and parent.type_name in _LAYOUT_BRACE_OWNERS
    )


def _is_operator_of(token: SyntaxToken, parent: SyntaxNode, type_name: str) -> bool:
    return parent.type_name == type_name and token is parent.get("OperatorToken")


def _inside_interpolated_string(
    prev: SyntaxToken, prev_parent: SyntaxNode, token: SyntaxToken, parent: SyntaxNode
) -> bool:
    if prev.kind in (SyntaxKind.INTERPOLATED_STRING_START_TOKEN, SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN):
        return True
    if token.kind in (SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN, SyntaxKind.INTERPOLATED_STRING_END_TOKEN):
        return True
    braces = (SyntaxKind.OPEN_BRACE_TOKEN, SyntaxKind.CLOSE_BRACE_TOKEN)
    return (parent.type_name == "Interpolation" and token.kind in braces) or (
        prev_parent.type_name == "Interpolation" and prev.kind in braces
    )


def _separator(prev: SyntaxToken, prev_parent: SyntaxNode, token: SyntaxToken, parent: SyntaxNode) -> str:
    if token.kind is SyntaxKind.END_OF_FILE_TOKEN:
        return _TIGHT
    if _is_layout_brace(token, parent) or _is_layout_brace(prev, prev_parent):
        return _TIGHT if token.kind is SyntaxKind.SEMICOLON_TOKEN else _NEWLINE
    if prev.kind is SyntaxKind.SEMICOLON_TOKEN:
        return _NEWLINE
    if _inside_interpolated_string(prev, prev_parent, token, parent):
        return _TIGHT
    if token.kind in (
        SyntaxKind.CLOSE_PAREN_TOKEN,
        SyntaxKind.COMMA_TOKEN,
        SyntaxKind.SEMICOLON_TOKEN,
        SyntaxKind.DOT_TOKEN,
        SyntaxKind.END_OF_DIRECTIVE_TOKEN,
    ):
        return _TIGHT
    if prev.kind in (SyntaxKind.OPEN_PAREN_TOKEN, SyntaxKind.DOT_TOKEN, SyntaxKind.HASH_TOKEN):
        return _TIGHT
    if token.kind is SyntaxKind.OPEN_PAREN_TOKEN and parent.type_name in _TIGHT_PAREN_OWNERS:
        return _TIGHT
    if _is_operator_of(token, parent, "PostfixUnaryExpression"):
        return _TIGHT
    if _is_operator_of(prev, prev_parent, "PrefixUnaryExpression") and token.kind not in _SIGN_OPERATORS:
        return _TIGHT
    return _SPACED


def _indentation(indent: str) -> list[SyntaxTrivia]:
    return [factory.whitespace(indent)] if indent else []


# ---------------------------------------------------------------------------
# Trivia
# ---------------------------------------------------------------------------


def _normalize_trivia(trivia: SyntaxTrivia) -> SyntaxTrivia | None:
    if trivia.kind in _WHITESPACE_KINDS or not trivia.text and trivia.structure is None:
        return None
    if trivia.structure is not None and trivia.kind in DIRECTIVE_TRIVIA_KINDS:
        return factory.trivia(_normalize_directive(trivia.structure))
    if trivia.kind is SyntaxKind.SKIPPED_TOKENS_TRIVIA and trivia.structure is not None:
        return factory.trivia(_normalize_skipped_tokens(trivia.structure))
    return trivia


def _kept_trivia(trivia_list: SyntaxTriviaList) -> list[SyntaxTrivia]:
    kept: list[SyntaxTrivia] = []
    for trivia in trivia_list:
        normalized = _normalize_trivia(trivia)
        if normalized is None:
            continue
        kept.append(normalized)
        if normalized.kind is SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA:
            kept.append(factory.LINE_FEED)
    return kept


def _normalize_directive(structure: SyntaxNode) -> SyntaxNode:
    tokens = list(structure.tokens_with_parents())
    replacements: list[SyntaxToken] = []
    for index, (token, parent) in enumerate(tokens):
        if token.kind is SyntaxKind.END_OF_DIRECTIVE_TOKEN:
            messages = []
            comments = []
            for trivia in (*token.leading_trivia, *token.trailing_trivia):
                if trivia.kind is SyntaxKind.PREPROCESSING_MESSAGE_TRIVIA and trivia.text.strip():
                    messages.append(factory.preprocessing_message(trivia.text.strip()))
                elif trivia.kind in _COMMENT_KINDS:
                    comments.extend((factory.SPACE, trivia))
            replacements.append(
                token.with_leading_trivia(tuple(messages)).with_trailing_trivia((*comments, factory.LINE_FEED))
            )
            continue

        trailing = _kept_trivia(token.trailing_trivia)
        if index + 1 < len(tokens):
            following, following_parent = tokens[index + 1]
            message_follows = following.kind is SyntaxKind.END_OF_DIRECTIVE_TOKEN and any(
                trivia.kind is SyntaxKind.PREPROCESSING_MESSAGE_TRIVIA and trivia.text.strip()
                for trivia in following.leading_trivia
            )
            if message_follows or _separator(token, parent, following, following_parent) != _TIGHT:
                trailing.append(factory.SPACE)
        replacements.append(
            token.with_leading_trivia(tuple(_kept_trivia(token.leading_trivia))).with_trailing_trivia(
                tuple(trailing)
            )
        )

    remaining = iter(replacements)
    return structure.replace_tokens(lambda token, parent: next(remaining))


def _normalize_skipped_tokens(structure: SyntaxNode) -> SyntaxNode:
    tokens = list(structure.get("Tokens"))
    rewritten: list[SyntaxToken] = []
    for index, token in enumerate(tokens):
        trailing = _kept_trivia(token.trailing_trivia)
        ends_line = bool(trailing) and trailing[-1].kind is SyntaxKind.END_OF_LINE_TRIVIA
        if index + 1 < len(tokens) and not ends_line:
            trailing.append(factory.SPACE)
        rewritten.append(
            token.with_leading_trivia(tuple(_kept_trivia(token.leading_trivia))).with_trailing_trivia(
                tuple(trailing)
            )
        )
    return factory.skipped_tokens_trivia(SyntaxTokenList(tuple(rewritten)))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _ends_line(trivia: SyntaxTrivia) -> bool:
    return trivia.text.endswith(("\n", "\r"))


def _render_gap(
    items: list[tuple[SyntaxTrivia, bool]], separator: str, indent: str, *, first: bool, last: bool
) -> list[SyntaxTrivia]:
    """Lay out the trivia between two tokens.

    ``items`` pairs each original trivia with whether it came from the
    following token's leading trivia.
    """

    out: list[SyntaxTrivia] = []
    at_line_start = first

    def new_line() -> None:
        nonlocal at_line_start
        out.append(factory.LINE_FEED)
        at_line_start = True

    for original, from_leading in items:
        trivia = _normalize_trivia(original)
        if trivia is None:
            continue
        if trivia.kind in _LINE_ORIENTED_KINDS:
            if not at_line_start:
                new_line()
            if trivia.kind in DOCUMENTATION_COMMENT_KINDS:
                out.extend(_indentation(indent))
            out.append(trivia)
            at_line_start = _ends_line(trivia)
            continue

        if from_leading and separator == _NEWLINE and not at_line_start:
            new_line()
        out.extend(_indentation(indent) if at_line_start else [factory.SPACE])
        out.append(trivia)
        at_line_start = _ends_line(trivia)
        if trivia.kind is SyntaxKind.SINGLE_LINE_COMMENT_TRIVIA:
            new_line()

    if last:
        return out
    if at_line_start:
        out.extend(_indentation(indent))
    elif separator == _NEWLINE:
        new_line()
        out.extend(_indentation(indent))
    elif separator == _SPACED or out:
        out.append(factory.SPACE)
    return out


def _split_at_line_end(gap: list[SyntaxTrivia]) -> int:
    for index, trivia in enumerate(gap):
        if trivia.kind is SyntaxKind.END_OF_LINE_TRIVIA:
            return index + 1
    return len(gap)


def normalize_whitespace(node: SyntaxNode) -> SyntaxNode:
    """Return a copy of ``node`` laid out with canonical whitespace."""

    tokens = list(node.tokens_with_parents())
    if not tokens:
        return node

    leading: list[SyntaxTriviaList] = [EMPTY_TRIVIA] * len(tokens)
    trailing: list[SyntaxTriviaList] = [EMPTY_TRIVIA] * len(tokens)
    depth = 0
    for index, (token, parent) in enumerate(tokens):
        if token.kind is SyntaxKind.CLOSE_BRACE_TOKEN and _is_layout_brace(token, parent):
            depth = max(depth - 1, 0)

        items = [(trivia, True) for trivia in token.leading_trivia]
        if index:
            previous, previous_parent = tokens[index - 1]
            items = [(trivia, False) for trivia in previous.trailing_trivia] + items
            separator = _separator(previous, previous_parent, token, parent)
        else:
            separator = _TIGHT
        gap = _render_gap(
            items,
            separator,
            INDENT * depth,
            first=index == 0,
            last=token.kind is SyntaxKind.END_OF_FILE_TOKEN,
        )
        if index:
            cut = _split_at_line_end(gap)
            trailing[index - 1] = SyntaxTriviaList(tuple(gap[:cut]))
            gap = gap[cut:]
        leading[index] = SyntaxTriviaList(tuple(gap))

        if token.kind is SyntaxKind.OPEN_BRACE_TOKEN and _is_layout_brace(token, parent):
            depth += 1

    last_token = tokens[-1][0]
    tail = _render_gap([(trivia, False) for trivia in last_token.trailing_trivia], _TIGHT, "", first=False, last=True)
    trailing[-1] = SyntaxTriviaList(tuple(tail))

    remaining = iter(zip(leading, trailing))

    def relayout(token: SyntaxToken, parent: SyntaxNode) -> SyntaxToken:
        new_leading, new_trailing = next(remaining)
        return token.with_leading_trivia(new_leading).with_trailing_trivia(new_trailing)

    return node.replace_tokens(relayout)
