"""Configuration objects for quoting and rebuilding syntax trees."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class QuoterConfig:
    """Options for one quoting pass.

    Attributes:
        use_default_formatting: Drop whitespace and end-of-line trivia while
            quoting; rebuilt trees are re-formatted by the normalizer.
        remove_redundant_modifying_calls: Keep a modifier call only when it
            changes the rendered text of the node it is applied to.
        indent: Indentation of the interchange text; ``None`` writes it
            compactly on one line.
        preprocessor_symbols: Symbols defined for ``#if`` conditions when
            source text is parsed.
    """

    use_default_formatting: bool = True
    remove_redundant_modifying_calls: bool = True
    indent: int | None = None
    preprocessor_symbols: list[str] = field(default_factory=list)
