"""Pydantic schemas for runner input and quoting reports."""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from .config import QuoterConfig

_SYMBOL = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class QuoteRequest(BaseModel):
    """One source text to quote, with its quoting options.

    Attributes:
        source: Curly source text.
        use_default_formatting: Drop whitespace trivia while quoting.
        remove_redundant_modifying_calls: Prune modifiers that do not change
            the rendering.
        indent: Interchange text indentation; ``None`` for compact output.
        preprocessor_symbols: Symbols defined for ``#if`` conditions.

    Invariants:
        - Symbols are identifiers; duplicates are dropped, order is kept.

    Example:
        >>> QuoteRequest(source="x = 1;", preprocessor_symbols=["DEBUG"]).to_config().indent is None
        True
    """

    source: str
    use_default_formatting: bool = True
    remove_redundant_modifying_calls: bool = True
    indent: int | None = Field(default=None, ge=0, le=16)
    preprocessor_symbols: list[str] = Field(default_factory=list)

    @field_validator("preprocessor_symbols")
    @classmethod
    def validate_symbols(cls, value: list[str]) -> list[str]:
        """Strip symbols, reject non-identifiers and drop duplicates."""

        cleaned: list[str] = []
        for symbol in value:
            symbol = symbol.strip()
            if not _SYMBOL.match(symbol):
                raise ValueError(f"Invalid preprocessor symbol: {symbol!r}")
            if symbol not in cleaned:
                cleaned.append(symbol)
        return cleaned

    def to_config(self) -> QuoterConfig:
        return QuoterConfig(
            use_default_formatting=self.use_default_formatting,
            remove_redundant_modifying_calls=self.remove_redundant_modifying_calls,
            indent=self.indent,
            preprocessor_symbols=list(self.preprocessor_symbols),
        )


class QuoteReport(BaseModel):
    """Summary of one quoting pass.

    Attributes:
        root_type: Node type of the quoted tree (``"CompilationUnit"``).
        interchange: The interchange text.
        call_count: Number of calls in the call tree, nested calls included.
        modifier_count: Number of modifier calls left after pruning.
        depth: Nesting depth of the call tree.
        round_trip: ``True`` when rebuilding the interchange text renders the
            same text as the (normalized, under default formatting) source tree.
    """

    root_type: str
    interchange: str
    call_count: int = Field(ge=1)
    modifier_count: int = Field(ge=0)
    depth: int = Field(ge=1)
    round_trip: bool
