"""Curly syntax model: kinds, immutable nodes, builders, parser and formatter."""

from .formatting import normalize_whitespace
from .kinds import SyntaxKind
from .nodes import (
    SeparatedSyntaxList,
    SyntaxList,
    SyntaxNode,
    SyntaxToken,
    SyntaxTokenList,
    SyntaxTrivia,
    SyntaxTriviaList,
)
from .parser import parse_text

__all__ = [
    "SeparatedSyntaxList",
    "SyntaxKind",
    "SyntaxList",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTokenList",
    "SyntaxTrivia",
    "SyntaxTriviaList",
    "normalize_whitespace",
    "parse_text",
]
