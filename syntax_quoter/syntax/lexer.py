"""Full-fidelity lexer for Curly source text.

Every character of the input ends up in exactly one token or trivia, so
concatenating the full strings of the produced tokens gives back the input.
Trailing trivia runs up to and including the first end of line; everything
after belongs to the leading trivia of the next token. Preprocessor
directives, documentation comments and disabled regions are produced as
trivia here, with directives and documentation comments carrying their
parsed structure.
"""

from __future__ import annotations

import html
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from . import factory
from .kinds import DIRECTIVE_KEYWORDS, KEYWORDS, TOKEN_TEXT, SyntaxKind
from .nodes import EMPTY_TRIVIA, SyntaxList, SyntaxNode, SyntaxToken, SyntaxTrivia, SyntaxTriviaList

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_HEX_NUMBER = re.compile(r"0[xX][0-9A-Fa-f]+")
_NUMBER = re.compile(r"\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")
_ENTITY = re.compile(r"&(?:#\d+|#[xX][0-9A-Fa-f]+|[A-Za-z]+);")
_INLINE_SPACE = " \t\f\v"
_NEWLINE = "\r\n"
_MAX_INTEGER_BITS = 64

_PUNCTUATION: list[tuple[str, SyntaxKind]] = sorted(
    (
        (text, kind)
        for kind, text in TOKEN_TEXT.items()
        if text
        and not text[0].isalpha()
        and kind
        not in (
            SyntaxKind.HASH_TOKEN,
            SyntaxKind.INTERPOLATED_STRING_START_TOKEN,
            SyntaxKind.INTERPOLATED_STRING_END_TOKEN,
        )
    ),
    key=lambda item: -len(item[0]),
)

_STRING_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

_STRING = "string"


def _numeric_value(text: str) -> int | float | None:
    """Value of a numeric literal; ``None`` when it has no finite 64-bit value."""

    if text[:2] in ("0x", "0X"):
        value: int | float = int(text[2:], 16)
    elif any(c in text for c in ".eE"):
        value = float(text)
    else:
        try:
            value = int(text)
        except ValueError:
            # longer than the interpreter's integer string limit
            return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    return value if value.bit_length() <= _MAX_INTEGER_BITS else None


@dataclass(slots=True)
class _Interpolation:
    depth: int = 0


@dataclass(slots=True)
class _ConditionalFrame:
    parent_active: bool
    taken: bool


class Lexer:
    """Turn source text into a list of tokens ending with ``EndOfFileToken``."""

    def __init__(self, text: str, preprocessor_symbols: Iterable[str] = ()):
        self.text = text
        self.pos = 0
        self.symbols = frozenset(preprocessor_symbols)
        self._modes: list[str | _Interpolation] = []
        self._frames: list[_ConditionalFrame] = []
        self._active = True

    def tokenize(self) -> list[SyntaxToken]:
        tokens: list[SyntaxToken] = []
        while True:
            token = self._next_token()
            tokens.append(token)
            if token.kind is SyntaxKind.END_OF_FILE_TOKEN:
                return tokens

    # ------------------------------------------------------------------
    # Character helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        index = self.pos + offset
        return self.text[index] if index < len(self.text) else ""

    def _starts(self, prefix: str, at: int | None = None) -> bool:
        return self.text.startswith(prefix, self.pos if at is None else at)

    def _at_line_start(self) -> bool:
        index = self.pos - 1
        while index >= 0 and self.text[index] in _INLINE_SPACE:
            index -= 1
        return index < 0 or self.text[index] in _NEWLINE

    def _take_while(self, chars: str) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in chars:
            self.pos += 1
        return self.text[start : self.pos]

    def _take_until_newline(self) -> str:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in _NEWLINE:
            self.pos += 1
        return self.text[start : self.pos]

    def _take_newline(self) -> str:
        if self._starts("\r\n"):
            self.pos += 2
            return "\r\n"
        if self._peek() and self._peek() in _NEWLINE:
            self.pos += 1
            return self.text[self.pos - 1]
        return ""

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def _next_token(self) -> SyntaxToken:
        if self._modes and self._modes[-1] == _STRING:
            token = self._next_string_part()
            if token is not None:
                return token

        leading = self._lex_leading_trivia()
        kind, text, value = self._scan_token()
        if self._suppresses_trailing_trivia(kind):
            trailing = EMPTY_TRIVIA
        else:
            trailing = self._lex_trailing_trivia()
        return SyntaxToken(
            kind=kind,
            text=text,
            value=value,
            leading_trivia=SyntaxTriviaList(tuple(leading)),
            trailing_trivia=trailing,
        )

    def _suppresses_trailing_trivia(self, kind: SyntaxKind) -> bool:
        if kind is SyntaxKind.END_OF_FILE_TOKEN:
            return True
        if kind in (SyntaxKind.INTERPOLATED_STRING_START_TOKEN, SyntaxKind.CLOSE_BRACE_TOKEN):
            return bool(self._modes) and self._modes[-1] == _STRING
        return False

    def _scan_token(self) -> tuple[SyntaxKind, str, object]:
        start = self.pos
        char = self._peek()
        if not char:
            return SyntaxKind.END_OF_FILE_TOKEN, "", None

        match = _IDENTIFIER.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            word = match.group()
            if word in KEYWORDS:
                return KEYWORDS[word], word, None
            return SyntaxKind.IDENTIFIER_TOKEN, word, word

        if self._starts('$"'):
            self.pos += 2
            self._modes.append(_STRING)
            return SyntaxKind.INTERPOLATED_STRING_START_TOKEN, '$"', None
        if self._starts('@"'):
            return self._scan_verbatim_string()
        if char == '"':
            value = self._scan_quoted('"')
            return SyntaxKind.STRING_LITERAL_TOKEN, self.text[start : self.pos], value
        if char == "'":
            value = self._scan_quoted("'")
            return SyntaxKind.CHARACTER_LITERAL_TOKEN, self.text[start : self.pos], value
        if char.isdigit():
            return self._scan_number()

        for text, kind in _PUNCTUATION:
            if self._starts(text):
                self.pos += len(text)
                self._track_braces(kind)
                return kind, text, None

        self.pos += 1
        return SyntaxKind.BAD_TOKEN, char, None

    def _track_braces(self, kind: SyntaxKind) -> None:
        if not self._modes or not isinstance(self._modes[-1], _Interpolation):
            return
        frame = self._modes[-1]
        if kind is SyntaxKind.OPEN_BRACE_TOKEN:
            frame.depth += 1
        elif kind is SyntaxKind.CLOSE_BRACE_TOKEN:
            if frame.depth == 0:
                self._modes.pop()
            else:
                frame.depth -= 1

    def _scan_number(self) -> tuple[SyntaxKind, str, object]:
        match = _HEX_NUMBER.match(self.text, self.pos) or _NUMBER.match(self.text, self.pos)
        self.pos = match.end()
        return SyntaxKind.NUMERIC_LITERAL_TOKEN, match.group(), _numeric_value(match.group())

    def _scan_quoted(self, quote: str) -> str:
        self.pos += 1
        value: list[str] = []
        while True:
            char = self._peek()
            if not char or char in _NEWLINE:
                break
            self.pos += 1
            if char == quote:
                break
            if char == "\\" and self._peek():
                escaped = self._peek()
                if escaped in _NEWLINE:
                    value.append(char)
                    continue
                self.pos += 1
                if escaped == "u" and re.fullmatch(r"[0-9A-Fa-f]{4}", self.text[self.pos : self.pos + 4]):
                    value.append(chr(int(self.text[self.pos : self.pos + 4], 16)))
                    self.pos += 4
                else:
                    value.append(_STRING_ESCAPES.get(escaped, escaped))
                continue
            value.append(char)
        return "".join(value)

    def _scan_verbatim_string(self) -> tuple[SyntaxKind, str, object]:
        start = self.pos
        self.pos += 2
        value: list[str] = []
        while self.pos < len(self.text):
            char = self.text[self.pos]
            self.pos += 1
            if char == '"':
                if self._peek() == '"':
                    self.pos += 1
                    value.append('"')
                    continue
                break
            value.append(char)
        return SyntaxKind.STRING_LITERAL_TOKEN, self.text[start : self.pos], "".join(value)

    def _next_string_part(self) -> SyntaxToken | None:
        char = self._peek()
        if not char or char in _NEWLINE:
            self._modes.pop()
            return None
        if char == '"':
            self.pos += 1
            self._modes.pop()
            return SyntaxToken(
                kind=SyntaxKind.INTERPOLATED_STRING_END_TOKEN,
                text='"',
                trailing_trivia=self._lex_trailing_trivia(),
            )
        if char == "{" and self._peek(1) != "{":
            self.pos += 1
            self._modes.append(_Interpolation())
            return SyntaxToken(
                kind=SyntaxKind.OPEN_BRACE_TOKEN,
                text="{",
                trailing_trivia=self._lex_trailing_trivia(),
            )

        start = self.pos
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char in _NEWLINE or char == '"':
                break
            if char == "{":
                if self._peek(1) != "{":
                    break
                self.pos += 2
                continue
            if char == "}" and self._peek(1) == "}":
                self.pos += 2
                continue
            if char == "\\" and self._peek(1) and self._peek(1) not in _NEWLINE:
                self.pos += 2
                continue
            self.pos += 1
        text = self.text[start : self.pos]
        return SyntaxToken(kind=SyntaxKind.INTERPOLATED_STRING_TEXT_TOKEN, text=text, value=text)

    # ------------------------------------------------------------------
    # Trivia
    # ------------------------------------------------------------------

    def _lex_leading_trivia(self) -> list[SyntaxTrivia]:
        trivia: list[SyntaxTrivia] = []
        while self.pos < len(self.text):
            char = self._peek()
            if char in _INLINE_SPACE:
                trivia.append(factory.whitespace(self._take_while(_INLINE_SPACE)))
            elif char in _NEWLINE:
                trivia.append(factory.end_of_line(self._take_newline()))
            elif self._is_documentation_comment():
                trivia.append(self._lex_documentation_comment())
            elif self._starts("//") or self._starts("/*"):
                trivia.append(self._lex_comment())
            elif char == "#" and not self._modes and self._at_line_start():
                trivia.append(self._lex_directive())
                if not self._active:
                    disabled = self._lex_disabled_text()
                    if disabled:
                        trivia.append(factory.disabled_text(disabled))
            else:
                break
        return trivia

    def _lex_trailing_trivia(self) -> SyntaxTriviaList:
        trivia: list[SyntaxTrivia] = []
        while self.pos < len(self.text):
            char = self._peek()
            if char in _INLINE_SPACE:
                trivia.append(factory.whitespace(self._take_while(_INLINE_SPACE)))
            elif char in _NEWLINE:
                trivia.append(factory.end_of_line(self._take_newline()))
                break
            elif self._starts("//") or self._starts("/*"):
                trivia.append(self._lex_comment())
            else:
                break
        return SyntaxTriviaList(tuple(trivia))

    def _lex_comment(self) -> SyntaxTrivia:
        start = self.pos
        if self._starts("//"):
            self._take_until_newline()
        else:
            end = self.text.find("*/", self.pos + 2)
            self.pos = len(self.text) if end < 0 else end + 2
        return factory.comment(self.text[start : self.pos])

    def _is_documentation_comment(self) -> bool:
        return (
            not self._modes
            and self._starts("///")
            and not self._starts("////")
            and self._at_line_start()
        )

    def _lex_documentation_comment(self) -> SyntaxTrivia:
        lines: list[SyntaxNode] = []
        while True:
            exterior_start = self.pos
            self._take_while(_INLINE_SPACE)
            self.pos += 3
            exterior = factory.documentation_comment_exterior(self.text[exterior_start : self.pos])
            tokens = self._xml_text_tokens(self._take_until_newline())
            newline = self._take_newline()
            if newline:
                tokens.append(factory.xml_text_new_line(EMPTY_TRIVIA, newline, newline, EMPTY_TRIVIA))
            if not tokens:
                tokens.append(factory.xml_text_literal(EMPTY_TRIVIA, "", "", EMPTY_TRIVIA))
            tokens[0] = tokens[0].with_leading_trivia((exterior,))
            lines.append(factory.xml_text_with_tokens(factory.token_list(*tokens)))

            probe = self.pos
            while probe < len(self.text) and self.text[probe] in _INLINE_SPACE:
                probe += 1
            if not newline or not self._starts("///", probe) or self._starts("////", probe):
                break

        structure = factory.documentation_comment_trivia_full(
            SyntaxKind.SINGLE_LINE_DOCUMENTATION_COMMENT_TRIVIA,
            SyntaxList(tuple(lines)),
            factory.token(SyntaxKind.END_OF_DOCUMENTATION_COMMENT_TOKEN),
        )
        return factory.trivia(structure)

    @staticmethod
    def _xml_text_tokens(line: str) -> list[SyntaxToken]:
        tokens: list[SyntaxToken] = []
        cursor = 0
        for match in _ENTITY.finditer(line):
            if match.start() > cursor:
                text = line[cursor : match.start()]
                tokens.append(factory.xml_text_literal(EMPTY_TRIVIA, text, text, EMPTY_TRIVIA))
            tokens.append(
                factory.xml_entity(EMPTY_TRIVIA, match.group(), html.unescape(match.group()), EMPTY_TRIVIA)
            )
            cursor = match.end()
        if cursor < len(line):
            text = line[cursor:]
            tokens.append(factory.xml_text_literal(EMPTY_TRIVIA, text, text, EMPTY_TRIVIA))
        return tokens

    def _lex_disabled_text(self) -> str:
        start = self.pos
        while self.pos < len(self.text):
            line_start = self.pos
            self._take_while(_INLINE_SPACE)
            if self._peek() == "#":
                self.pos = line_start
                break
            self._take_until_newline()
            self._take_newline()
        return self.text[start : self.pos]

    # ------------------------------------------------------------------
    # Directives
    # ------------------------------------------------------------------

    def _inline_trivia(self) -> SyntaxTriviaList:
        space = self._take_while(_INLINE_SPACE)
        return SyntaxTriviaList((factory.whitespace(space),)) if space else EMPTY_TRIVIA

    def _directive_token(self, kind: SyntaxKind, text: str, value: object = None) -> SyntaxToken:
        self.pos += len(text)
        return SyntaxToken(kind=kind, text=text, value=value, trailing_trivia=self._inline_trivia())

    def _lex_directive(self) -> SyntaxTrivia:
        hash_token = self._directive_token(SyntaxKind.HASH_TOKEN, "#")
        match = _IDENTIFIER.match(self.text, self.pos)
        word = match.group() if match else ""
        keyword = None
        if word in DIRECTIVE_KEYWORDS:
            keyword = self._directive_token(DIRECTIVE_KEYWORDS[word], word)

        if word == "if":
            condition = self._directive_or()
            value = self._evaluate(condition)
            parent_active = self._active
            branch_taken = parent_active and value
            self._frames.append(_ConditionalFrame(parent_active, branch_taken))
            self._active = branch_taken
            structure = factory.if_directive_trivia_full(
                hash_token,
                keyword,
                condition,
                self._end_of_directive(message_allowed=False),
                parent_active,
                branch_taken,
                value,
            )
        elif word == "else":
            if self._frames:
                frame = self._frames[-1]
                is_active = frame.parent_active
                branch_taken = frame.parent_active and not frame.taken
                frame.taken = frame.taken or branch_taken
            else:
                is_active = branch_taken = self._active
            self._active = branch_taken
            structure = factory.else_directive_trivia_full(
                hash_token, keyword, self._end_of_directive(message_allowed=False), is_active, branch_taken
            )
        elif word == "endif":
            if self._frames:
                self._active = self._frames.pop().parent_active
            structure = factory.end_if_directive_trivia_full(
                hash_token, keyword, self._end_of_directive(message_allowed=False), self._active
            )
        elif word == "region":
            structure = factory.region_directive_trivia_full(
                hash_token, keyword, self._end_of_directive(message_allowed=True), self._active
            )
        elif word == "endregion":
            structure = factory.end_region_directive_trivia_full(
                hash_token, keyword, self._end_of_directive(message_allowed=True), self._active
            )
        else:
            if word:
                name = self._directive_token(SyntaxKind.IDENTIFIER_TOKEN, word, word)
            else:
                name = factory.missing_token(SyntaxKind.IDENTIFIER_TOKEN)
            structure = factory.bad_directive_trivia_full(
                hash_token, name, self._end_of_directive(message_allowed=True), self._active
            )
        return factory.trivia(structure)

    def _end_of_directive(self, message_allowed: bool) -> SyntaxToken:
        leading: list[SyntaxTrivia] = []
        trailing: list[SyntaxTrivia] = []
        rest = self._take_until_newline()
        if rest.startswith("//") and not message_allowed:
            trailing.append(factory.comment(rest))
        elif rest:
            leading.append(factory.preprocessing_message(rest))
        newline = self._take_newline()
        if newline:
            trailing.append(factory.end_of_line(newline))
        return factory.token_with_trivia(
            SyntaxTriviaList(tuple(leading)),
            SyntaxKind.END_OF_DIRECTIVE_TOKEN,
            SyntaxTriviaList(tuple(trailing)),
        )

    def _directive_or(self) -> SyntaxNode:
        left = self._directive_and()
        while self._starts("||"):
            operator = self._directive_token(SyntaxKind.BAR_BAR_TOKEN, "||")
            right = self._directive_and()
            left = factory.binary_expression_full(SyntaxKind.LOGICAL_OR_EXPRESSION, left, operator, right)
        return left

    def _directive_and(self) -> SyntaxNode:
        left = self._directive_unary()
        while self._starts("&&"):
            operator = self._directive_token(SyntaxKind.AMPERSAND_AMPERSAND_TOKEN, "&&")
            right = self._directive_unary()
            left = factory.binary_expression_full(SyntaxKind.LOGICAL_AND_EXPRESSION, left, operator, right)
        return left

    def _directive_unary(self) -> SyntaxNode:
        if self._peek() == "!":
            operator = self._directive_token(SyntaxKind.EXCLAMATION_TOKEN, "!")
            return factory.prefix_unary_expression_full(
                SyntaxKind.LOGICAL_NOT_EXPRESSION, operator, self._directive_unary()
            )
        if self._peek() == "(":
            open_paren = self._directive_token(SyntaxKind.OPEN_PAREN_TOKEN, "(")
            inner = self._directive_or()
            if self._peek() == ")":
                close_paren = self._directive_token(SyntaxKind.CLOSE_PAREN_TOKEN, ")")
            else:
                close_paren = factory.missing_token(SyntaxKind.CLOSE_PAREN_TOKEN)
            return factory.parenthesized_expression_full(open_paren, inner, close_paren)

        match = _IDENTIFIER.match(self.text, self.pos)
        if match is None:
            return factory.identifier_name_from_token(factory.missing_token(SyntaxKind.IDENTIFIER_TOKEN))
        word = match.group()
        if word in ("true", "false"):
            kind = SyntaxKind.TRUE_KEYWORD if word == "true" else SyntaxKind.FALSE_KEYWORD
            literal_kind = (
                SyntaxKind.TRUE_LITERAL_EXPRESSION if word == "true" else SyntaxKind.FALSE_LITERAL_EXPRESSION
            )
            return factory.literal_expression_with_token(literal_kind, self._directive_token(kind, word))
        return factory.identifier_name_from_token(
            self._directive_token(SyntaxKind.IDENTIFIER_TOKEN, word, word)
        )

    def _evaluate(self, condition: SyntaxNode) -> bool:
        if condition.type_name == "IdentifierName":
            token = condition.get("Identifier")
            return not token.is_missing and token.text in self.symbols
        if condition.type_name == "LiteralExpression":
            return condition.kind is SyntaxKind.TRUE_LITERAL_EXPRESSION
        if condition.type_name == "ParenthesizedExpression":
            return self._evaluate(condition.get("Expression"))
        if condition.type_name == "PrefixUnaryExpression":
            return not self._evaluate(condition.get("Operand"))
        left = self._evaluate(condition.get("Left"))
        right = self._evaluate(condition.get("Right"))
        if condition.kind is SyntaxKind.LOGICAL_AND_EXPRESSION:
            return left and right
        return left or right


def tokenize(text: str, preprocessor_symbols: Iterable[str] = ()) -> list[SyntaxToken]:
    return Lexer(text, preprocessor_symbols).tokenize()
