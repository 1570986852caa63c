"""Recursive-descent parser producing full-fidelity Curly syntax trees.

Parsing never fails: absent tokens are synthesised as missing tokens and
tokens that fit nowhere are attached, as skipped-token trivia, to the next
token that is consumed. ``parse_text(text).to_full_string() == text`` holds
for every input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from . import factory
from .kinds import (
    ASSIGNMENT_OPERATORS,
    BINARY_OPERATORS,
    CHECKED_KEYWORDS,
    LITERAL_TOKENS,
    MODIFIER_KEYWORDS,
    POSTFIX_OPERATORS,
    PREDEFINED_TYPE_KEYWORDS,
    PREFIX_OPERATORS,
    SyntaxKind,
)
from .lexer import tokenize
from .nodes import SeparatedSyntaxList, SyntaxList, SyntaxNode, SyntaxToken, SyntaxTokenList, SyntaxTriviaList

logger = logging.getLogger(__name__)

_PRECEDENCE: dict[SyntaxKind, int] = {
    SyntaxKind.BAR_BAR_TOKEN: 1,
    SyntaxKind.AMPERSAND_AMPERSAND_TOKEN: 2,
    SyntaxKind.EQUALS_EQUALS_TOKEN: 3,
    SyntaxKind.EXCLAMATION_EQUALS_TOKEN: 3,
    SyntaxKind.LESS_THAN_TOKEN: 4,
    SyntaxKind.GREATER_THAN_TOKEN: 4,
    SyntaxKind.PLUS_TOKEN: 5,
    SyntaxKind.MINUS_TOKEN: 5,
    SyntaxKind.ASTERISK_TOKEN: 6,
    SyntaxKind.SLASH_TOKEN: 6,
}


def _invert(table: dict[SyntaxKind, SyntaxKind]) -> dict[SyntaxKind, SyntaxKind]:
    return {token_kind: node_kind for node_kind, token_kind in table.items()}


_BINARY_BY_TOKEN = _invert(BINARY_OPERATORS)
_ASSIGNMENT_BY_TOKEN = _invert(ASSIGNMENT_OPERATORS)
_PREFIX_BY_TOKEN = _invert(PREFIX_OPERATORS)
_POSTFIX_BY_TOKEN = _invert(POSTFIX_OPERATORS)
_CHECKED_BY_KEYWORD = _invert(CHECKED_KEYWORDS)

_LITERAL_BY_TOKEN = _invert(LITERAL_TOKENS)


class Parser:
    def __init__(self, tokens: list[SyntaxToken]):
        self.tokens = tokens
        self.index = 0
        self._skipped: list[SyntaxToken] = []

    # ------------------------------------------------------------------
    # Token stream
    # ------------------------------------------------------------------

    @property
    def current(self) -> SyntaxToken:
        return self.tokens[min(self.index, len(self.tokens) - 1)]

    def _peek_kind(self, offset: int) -> SyntaxKind:
        return self.tokens[min(self.index + offset, len(self.tokens) - 1)].kind

    def _at(self, *kinds: SyntaxKind) -> bool:
        return self.current.kind in kinds

    def _at_end(self) -> bool:
        return self.current.kind is SyntaxKind.END_OF_FILE_TOKEN

    def _advance(self) -> SyntaxToken:
        token = self.current
        if not self._at_end():
            self.index += 1
        if self._skipped:
            skipped = factory.trivia(factory.skipped_tokens_trivia(SyntaxTokenList(tuple(self._skipped))))
            self._skipped = []
            token = token.with_leading_trivia(SyntaxTriviaList((skipped, *token.leading_trivia)))
        return token

    def _skip(self) -> None:
        logger.debug("Skipping unexpected %s %r", self.current.kind.value, self.current.text)
        self._skipped.append(self.current)
        self.index += 1

    def _expect(self, kind: SyntaxKind) -> SyntaxToken:
        if self._at(kind):
            return self._advance()
        return factory.missing_token(kind)

    def _optional(self, kind: SyntaxKind) -> SyntaxToken | None:
        return self._advance() if self._at(kind) else None

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def parse_compilation_unit(self) -> SyntaxNode:
        members = self._parse_members(stop=())
        end_of_file = self._advance()
        return factory.compilation_unit_full(SyntaxList(tuple(members)), end_of_file)

    def _parse_members(self, stop: tuple[SyntaxKind, ...]) -> list[SyntaxNode]:
        members: list[SyntaxNode] = []
        while not self._at_end() and not self._at(*stop):
            start = self.index
            member = self._parse_member()
            if self.index == start:
                self._skip()
                continue
            members.append(member)
        return members

    def _member_shape(self) -> str | None:
        offset = 0
        while self._peek_kind(offset) in MODIFIER_KEYWORDS:
            offset += 1
        head = self._peek_kind(offset)
        if head is SyntaxKind.CLASS_KEYWORD:
            return "class"
        if (
            (head in PREDEFINED_TYPE_KEYWORDS or head is SyntaxKind.IDENTIFIER_TOKEN)
            and self._peek_kind(offset + 1) is SyntaxKind.IDENTIFIER_TOKEN
            and self._peek_kind(offset + 2) is SyntaxKind.OPEN_PAREN_TOKEN
        ):
            return "method"
        return None

    def _parse_member(self) -> SyntaxNode:
        shape = self._member_shape()
        if shape == "class":
            return self._parse_class_declaration()
        if shape == "method":
            return self._parse_method_declaration()
        return factory.global_statement(self._parse_statement())

    def _parse_modifiers(self) -> SyntaxTokenList:
        modifiers: list[SyntaxToken] = []
        while self._at(*MODIFIER_KEYWORDS):
            modifiers.append(self._advance())
        return SyntaxTokenList(tuple(modifiers))

    def _parse_class_declaration(self) -> SyntaxNode:
        modifiers = self._parse_modifiers()
        keyword = self._expect(SyntaxKind.CLASS_KEYWORD)
        identifier = self._expect(SyntaxKind.IDENTIFIER_TOKEN)
        open_brace = self._expect(SyntaxKind.OPEN_BRACE_TOKEN)
        members = self._parse_members(stop=(SyntaxKind.CLOSE_BRACE_TOKEN,))
        close_brace = self._expect(SyntaxKind.CLOSE_BRACE_TOKEN)
        semicolon = self._optional(SyntaxKind.SEMICOLON_TOKEN)
        return factory.class_declaration_full(
            modifiers, keyword, identifier, open_brace, SyntaxList(tuple(members)), close_brace, semicolon
        )

    def _parse_type(self) -> SyntaxNode:
        if self._at(*PREDEFINED_TYPE_KEYWORDS):
            return factory.predefined_type(self._advance())
        return factory.identifier_name_from_token(self._expect(SyntaxKind.IDENTIFIER_TOKEN))

    def _parse_method_declaration(self) -> SyntaxNode:
        modifiers = self._parse_modifiers()
        return_type = self._parse_type()
        identifier = self._expect(SyntaxKind.IDENTIFIER_TOKEN)
        parameters = self._parse_parameter_list()
        body = self._parse_block() if self._at(SyntaxKind.OPEN_BRACE_TOKEN) else None
        semicolon = None if body is not None else self._expect(SyntaxKind.SEMICOLON_TOKEN)
        return factory.method_declaration_full(modifiers, return_type, identifier, parameters, body, semicolon)

    def _parse_parameter_list(self) -> SyntaxNode:
        open_paren = self._expect(SyntaxKind.OPEN_PAREN_TOKEN)
        items = self._parse_separated(self._parse_parameter, SyntaxKind.CLOSE_PAREN_TOKEN)
        close_paren = self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
        return factory.parameter_list_full(open_paren, items, close_paren)

    def _parse_parameter(self) -> SyntaxNode:
        type_node = None
        if (
            self._at(*PREDEFINED_TYPE_KEYWORDS, SyntaxKind.IDENTIFIER_TOKEN)
            and self._peek_kind(1) is SyntaxKind.IDENTIFIER_TOKEN
        ):
            type_node = self._parse_type()
        return factory.parameter_full(type_node, self._expect(SyntaxKind.IDENTIFIER_TOKEN))

    def _parse_separated(self, parse_item, close: SyntaxKind) -> SeparatedSyntaxList:
        if self._at(close):
            return SeparatedSyntaxList()
        items: list[SyntaxNode | SyntaxToken] = [parse_item()]
        while self._at(SyntaxKind.COMMA_TOKEN):
            items.append(self._advance())
            items.append(parse_item())
        return SeparatedSyntaxList(tuple(items))

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def _parse_statement(self) -> SyntaxNode:
        if self._at(SyntaxKind.OPEN_BRACE_TOKEN):
            return self._parse_block()
        if self._at(SyntaxKind.RETURN_KEYWORD):
            keyword = self._advance()
            expression = None if self._at(SyntaxKind.SEMICOLON_TOKEN) else self._parse_expression()
            return factory.return_statement_full(keyword, expression, self._expect(SyntaxKind.SEMICOLON_TOKEN))
        if self._at(SyntaxKind.IF_KEYWORD):
            return self._parse_if_statement()
        if self._at(SyntaxKind.WHILE_KEYWORD):
            keyword = self._advance()
            open_paren = self._expect(SyntaxKind.OPEN_PAREN_TOKEN)
            condition = self._parse_expression()
            close_paren = self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
            return factory.while_statement_full(
                keyword, open_paren, condition, close_paren, self._parse_embedded_statement()
            )
        if self._at(SyntaxKind.VAR_KEYWORD):
            keyword = self._advance()
            identifier = self._expect(SyntaxKind.IDENTIFIER_TOKEN)
            equals = self._expect(SyntaxKind.EQUALS_TOKEN)
            value = self._parse_expression()
            return factory.local_declaration_statement_full(
                keyword, identifier, equals, value, self._expect(SyntaxKind.SEMICOLON_TOKEN)
            )
        expression = self._parse_expression()
        return factory.expression_statement_full(expression, self._expect(SyntaxKind.SEMICOLON_TOKEN))

    def _parse_embedded_statement(self) -> SyntaxNode:
        # Guarantees progress for `if (x) }` style input.
        start = self.index
        statement = self._parse_statement()
        while self.index == start and not self._at_end() and not self._at(SyntaxKind.CLOSE_BRACE_TOKEN):
            self._skip()
            start = self.index
            statement = self._parse_statement()
        return statement

    def _parse_if_statement(self) -> SyntaxNode:
        keyword = self._advance()
        open_paren = self._expect(SyntaxKind.OPEN_PAREN_TOKEN)
        condition = self._parse_expression()
        close_paren = self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
        statement = self._parse_embedded_statement()
        else_clause = None
        if self._at(SyntaxKind.ELSE_KEYWORD):
            else_keyword = self._advance()
            else_clause = factory.else_clause_full(else_keyword, self._parse_embedded_statement())
        return factory.if_statement_full(keyword, open_paren, condition, close_paren, statement, else_clause)

    def _parse_block(self) -> SyntaxNode:
        open_brace = self._expect(SyntaxKind.OPEN_BRACE_TOKEN)
        statements: list[SyntaxNode] = []
        while not self._at_end() and not self._at(SyntaxKind.CLOSE_BRACE_TOKEN):
            start = self.index
            statement = self._parse_statement()
            if self.index == start:
                self._skip()
                continue
            statements.append(statement)
        close_brace = self._expect(SyntaxKind.CLOSE_BRACE_TOKEN)
        return factory.block_full(open_brace, SyntaxList(tuple(statements)), close_brace)

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def _parse_expression(self) -> SyntaxNode:
        left = self._parse_binary(1)
        if self._at(*_ASSIGNMENT_BY_TOKEN):
            operator = self._advance()
            right = self._parse_expression()
            return factory.assignment_expression_full(_ASSIGNMENT_BY_TOKEN[operator.kind], left, operator, right)
        return left

    def _parse_binary(self, min_precedence: int) -> SyntaxNode:
        left = self._parse_unary()
        while _PRECEDENCE.get(self.current.kind, 0) >= min_precedence:
            operator = self._advance()
            right = self._parse_binary(_PRECEDENCE[operator.kind] + 1)
            left = factory.binary_expression_full(_BINARY_BY_TOKEN[operator.kind], left, operator, right)
        return left

    def _parse_unary(self) -> SyntaxNode:
        if self._at(*_PREFIX_BY_TOKEN):
            operator = self._advance()
            return factory.prefix_unary_expression_full(
                _PREFIX_BY_TOKEN[operator.kind], operator, self._parse_unary()
            )
        return self._parse_postfix(self._parse_primary())

    def _parse_postfix(self, expression: SyntaxNode) -> SyntaxNode:
        while True:
            if self._at(SyntaxKind.DOT_TOKEN):
                operator = self._advance()
                name = factory.identifier_name_from_token(self._expect(SyntaxKind.IDENTIFIER_TOKEN))
                expression = factory.member_access_expression_full(
                    SyntaxKind.SIMPLE_MEMBER_ACCESS_EXPRESSION, expression, operator, name
                )
            elif self._at(SyntaxKind.OPEN_PAREN_TOKEN):
                expression = factory.invocation_expression_with_arguments(expression, self._parse_argument_list())
            elif self._at(*_POSTFIX_BY_TOKEN):
                operator = self._advance()
                expression = factory.postfix_unary_expression_full(
                    _POSTFIX_BY_TOKEN[operator.kind], expression, operator
                )
            else:
                return expression

    def _parse_argument_list(self) -> SyntaxNode:
        open_paren = self._expect(SyntaxKind.OPEN_PAREN_TOKEN)
        items = self._parse_separated(
            lambda: factory.argument(self._parse_expression()), SyntaxKind.CLOSE_PAREN_TOKEN
        )
        close_paren = self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
        return factory.argument_list_full(open_paren, items, close_paren)

    def _parse_primary(self) -> SyntaxNode:
        kind = self.current.kind
        if kind is SyntaxKind.IDENTIFIER_TOKEN:
            return factory.identifier_name_from_token(self._advance())
        if kind in _LITERAL_BY_TOKEN:
            return factory.literal_expression_with_token(_LITERAL_BY_TOKEN[kind], self._advance())
        if kind in PREDEFINED_TYPE_KEYWORDS:
            return factory.predefined_type(self._advance())
        if kind is SyntaxKind.OPEN_PAREN_TOKEN:
            open_paren = self._advance()
            inner = self._parse_expression()
            return factory.parenthesized_expression_full(
                open_paren, inner, self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
            )
        if kind in _CHECKED_BY_KEYWORD:
            keyword = self._advance()
            open_paren = self._expect(SyntaxKind.OPEN_PAREN_TOKEN)
            inner = self._parse_expression()
            return factory.checked_expression_full(
                _CHECKED_BY_KEYWORD[kind], keyword, open_paren, inner, self._expect(SyntaxKind.CLOSE_PAREN_TOKEN)
            )
        if kind is SyntaxKind.INTERPOLATED_STRING_START_TOKEN:
            return self._parse_interpolated_string()
        return factory.identifier_name_from_token(factory.missing_token(SyntaxKind.IDENTIFIER_TOKEN))

    def _parse_interpolated_string(self) -> SyntaxNode:
        start = self._advance()
        contents: list[SyntaxNode] = []
        while True:
            if self._at(SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN):
                contents.append(factory.interpolated_string_text_with_token(self._advance()))
            elif self._at(SyntaxKind.OPEN_BRACE_TOKEN):
                open_brace = self._advance()
                inner = self._parse_expression()
                contents.append(
                    factory.interpolation_full(open_brace, inner, self._expect(SyntaxKind.CLOSE_BRACE_TOKEN))
                )
            else:
                break
        end = self._expect(SyntaxKind.INTERPOLATED_STRING_END_TOKEN)
        return factory.interpolated_string_expression_full(start, SyntaxList(tuple(contents)), end)


def parse_tokens(tokens: list[SyntaxToken]) -> SyntaxNode:
    return Parser(tokens).parse_compilation_unit()


def parse_text(text: str, preprocessor_symbols: Iterable[str] = ()) -> SyntaxNode:
    """Parse ``text`` into a ``CompilationUnit`` that renders back to ``text`` exactly."""

    root = parse_tokens(tokenize(text, preprocessor_symbols))
    logger.debug("Parsed %d characters into %s", len(text), root.kind.value)
    return root
