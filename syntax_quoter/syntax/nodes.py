from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any

from .kinds import DIRECTIVE_TRIVIA_KINDS, SyntaxKind
from .schema import (
    BOOL,
    LIST,
    NODE,
    NODE_SCHEMAS,
    SEPARATED,
    STRING,
    TOKEN,
    TOKENS,
    AttributeSpec,
    NodeSchema,
)

LANGUAGE = "Curly"


@dataclass(frozen=True, slots=True)
class TextSpan:
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class SyntaxTrivia:
    """Whitespace, comment or directive material attached to a token.

    Structured trivia (directives, documentation comments, skipped tokens)
    carry the parsed node in ``structure``; their ``text`` is always the
    structure's full rendering.
    """

    kind: SyntaxKind
    text: str
    structure: SyntaxNode | None = None

    @property
    def has_structure(self) -> bool:
        return self.structure is not None

    @property
    def full_width(self) -> int:
        return len(self.text)

    def to_full_string(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class _ElementList:
    items: tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Any:
        return self.items[index]

    def to_full_string(self) -> str:
        return "".join(item.to_full_string() for item in self.items)


@dataclass(frozen=True, slots=True)
class SyntaxTriviaList(_ElementList):
    pass


@dataclass(frozen=True, slots=True)
class SyntaxTokenList(_ElementList):
    pass


@dataclass(frozen=True, slots=True)
class SyntaxList(_ElementList):
    pass


@dataclass(frozen=True, slots=True)
class SeparatedSyntaxList(_ElementList):
    """Nodes interleaved with separator tokens (``a , b , c``)."""

    @property
    def nodes(self) -> tuple[SyntaxNode, ...]:
        return self.items[::2]

    @property
    def separators(self) -> tuple[SyntaxToken, ...]:
        return self.items[1::2]

    def with_separators(self) -> tuple[SyntaxNode | SyntaxToken, ...]:
        return self.items


EMPTY_TRIVIA = SyntaxTriviaList()


@dataclass(frozen=True, slots=True)
class SyntaxToken:
    kind: SyntaxKind
    text: str
    value: Any = None
    leading_trivia: SyntaxTriviaList = EMPTY_TRIVIA
    trailing_trivia: SyntaxTriviaList = EMPTY_TRIVIA
    is_missing: bool = False

    @property
    def value_text(self) -> str:
        if self.value is None:
            return self.text
        return str(self.value)

    @property
    def full_width(self) -> int:
        return len(self.to_full_string())

    def with_leading_trivia(self, trivia: SyntaxTriviaList | tuple[SyntaxTrivia, ...]) -> SyntaxToken:
        return replace(self, leading_trivia=_as_trivia_list(trivia))

    def with_trailing_trivia(self, trivia: SyntaxTriviaList | tuple[SyntaxTrivia, ...]) -> SyntaxToken:
        return replace(self, trailing_trivia=_as_trivia_list(trivia))

    def to_full_string(self) -> str:
        return (
            self.leading_trivia.to_full_string()
            + self.text
            + self.trailing_trivia.to_full_string()
        )

    def __str__(self) -> str:
        return self.text


def _as_trivia_list(trivia: SyntaxTriviaList | tuple[SyntaxTrivia, ...]) -> SyntaxTriviaList:
    if isinstance(trivia, SyntaxTriviaList):
        return trivia
    return SyntaxTriviaList(tuple(trivia))


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Immutable syntax node: a kind, its type name and one value per schema slot.

    Slot values follow the schema order of ``type_name``. Use :meth:`get` to
    read a slot by attribute name and :meth:`with_attribute` to obtain an
    updated copy.
    """

    kind: SyntaxKind
    type_name: str
    slots: tuple[Any, ...]

    @property
    def schema(self) -> NodeSchema:
        return NODE_SCHEMAS[self.type_name]

    def get(self, name: str) -> Any:
        return self.slots[self.schema.index(name)]

    def with_attribute(self, name: str, value: Any) -> SyntaxNode:
        spec = self.schema.attribute(name)
        _check_slot_value(self.type_name, spec, value)
        slots = list(self.slots)
        slots[self.schema.index(name)] = value
        return replace(self, slots=tuple(slots))

    def properties(self) -> Iterator[tuple[AttributeSpec, Any]]:
        """Yield ``(attribute, value)`` pairs: schema slots first, derived values after."""

        yield from zip(self.schema.attributes, self.slots)
        yield from self._derived_properties()

    def _derived_properties(self) -> Iterator[tuple[AttributeSpec, Any]]:
        tokens = list(self.descendant_tokens())
        leading = tokens[0].leading_trivia if tokens else EMPTY_TRIVIA
        trailing = tokens[-1].trailing_trivia if tokens else EMPTY_TRIVIA
        full_width = sum(token.full_width for token in tokens)
        leading_width = len(leading.to_full_string())
        trailing_width = len(trailing.to_full_string())

        yield _derived("Kind"), self.kind
        yield _derived("Span"), TextSpan(leading_width, full_width - leading_width - trailing_width)
        yield _derived("FullSpan"), TextSpan(0, full_width)
        yield _derived("ContainsDiagnostics"), any(
            token.is_missing or token.kind is SyntaxKind.BAD_TOKEN or _has_skipped(token)
            for token in tokens
        )
        yield _derived("ContainsDirectives"), any(_has_directive(token) for token in tokens)
        yield _derived("HasLeadingTrivia"), len(leading) > 0
        yield _derived("HasTrailingTrivia"), len(trailing) > 0
        yield _derived("IsMissing"), bool(tokens) and all(token.is_missing for token in tokens)
        yield _derived("IsStructuredTrivia"), "StructuredTriviaSyntax" in self.schema.bases
        yield _derived("Language"), LANGUAGE
        if self.type_name == "IdentifierName":
            identifier = self.get("Identifier")
            yield _derived("Arity"), 0
            yield _derived("IsVar"), identifier.text == "var"
            yield _derived("PlainName"), identifier.value_text
        elif self.type_name == "ClassDeclaration":
            yield _derived("Arity"), 0
        if "DirectiveTriviaSyntax" in self.schema.bases:
            yield _derived("DirectiveNameToken"), self.slots[1]

    def child_nodes_and_tokens(self) -> Iterator[SyntaxNode | SyntaxToken]:
        for value in self.slots:
            if isinstance(value, (SyntaxNode, SyntaxToken)):
                yield value
            elif isinstance(value, _ElementList) and not isinstance(value, SyntaxTriviaList):
                yield from value.items

    def descendant_tokens(self) -> Iterator[SyntaxToken]:
        for child in self.child_nodes_and_tokens():
            if isinstance(child, SyntaxToken):
                yield child
            else:
                yield from child.descendant_tokens()

    def tokens_with_parents(self) -> Iterator[tuple[SyntaxToken, SyntaxNode]]:
        for child in self.child_nodes_and_tokens():
            if isinstance(child, SyntaxToken):
                yield child, self
            else:
                yield from child.tokens_with_parents()

    def replace_tokens(self, fn: Callable[[SyntaxToken, SyntaxNode], SyntaxToken]) -> SyntaxNode:
        """Return a copy with every descendant token passed through ``fn``.

        Tokens are visited in document order, the same order as
        :meth:`tokens_with_parents`.
        """

        def rewrite(value: Any) -> Any:
            if isinstance(value, SyntaxToken):
                return fn(value, self)
            if isinstance(value, SyntaxNode):
                return value.replace_tokens(fn)
            if isinstance(value, (SyntaxList, SeparatedSyntaxList, SyntaxTokenList)):
                return type(value)(tuple(rewrite(item) for item in value.items))
            return value

        return replace(self, slots=tuple(rewrite(value) for value in self.slots))

    def to_full_string(self) -> str:
        parts: list[str] = []
        for value in self.slots:
            if value is None or isinstance(value, (bool, str)):
                continue
            parts.append(value.to_full_string())
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_full_string()


def _derived(name: str) -> AttributeSpec:
    return AttributeSpec(name, "derived", derived=True)


def _has_skipped(token: SyntaxToken) -> bool:
    return any(
        trivia.kind is SyntaxKind.SKIPPED_TOKENS_TRIVIA
        for trivia in (*token.leading_trivia, *token.trailing_trivia)
    )


def _has_directive(token: SyntaxToken) -> bool:
    return any(
        trivia.kind in DIRECTIVE_TRIVIA_KINDS
        for trivia in (*token.leading_trivia, *token.trailing_trivia)
    )


_SHAPE_TYPES: dict[str, type | tuple[type, ...]] = {
    TOKEN: SyntaxToken,
    NODE: SyntaxNode,
    LIST: SyntaxList,
    SEPARATED: SeparatedSyntaxList,
    TOKENS: SyntaxTokenList,
    BOOL: bool,
    STRING: str,
}


def _check_slot_value(type_name: str, spec: AttributeSpec, value: Any) -> None:
    if spec.derived:
        raise AttributeError(f"{type_name}.{spec.name} is derived and cannot be set")
    if value is None and spec.optional:
        return
    expected = _SHAPE_TYPES[spec.shape]
    if not isinstance(value, expected):
        raise TypeError(
            f"{type_name}.{spec.name} expects {spec.shape}, got {type(value).__name__}"
        )
    if spec.element_type and isinstance(value, (SyntaxList, SeparatedSyntaxList)):
        elements = value.nodes if isinstance(value, SeparatedSyntaxList) else value.items
        for element in elements:
            if not satisfies(element, spec.element_type):
                raise TypeError(
                    f"{type_name}.{spec.name} expects {spec.element_type} elements, "
                    f"got {describe(element)}"
                )


def make_node(type_name: str, kind: SyntaxKind, values: Mapping[str, Any]) -> SyntaxNode:
    """Build a node from attribute values, validating shapes against the schema.

    Missing list slots default to empty lists, missing flags to ``False`` and
    missing optional slots to ``None``. Required tokens and nodes must be given.
    """

    schema = NODE_SCHEMAS[type_name]
    if kind not in schema.kinds:
        raise ValueError(f"{kind.value} is not a valid kind for {type_name}")
    unknown = set(values) - {spec.name for spec in schema.attributes}
    if unknown:
        raise TypeError(f"{type_name} has no attributes {sorted(unknown)}")

    slots: list[Any] = []
    for spec in schema.attributes:
        if spec.name in values:
            value = values[spec.name]
        elif spec.shape in _EMPTY_DEFAULTS:
            value = _EMPTY_DEFAULTS[spec.shape]
        elif spec.optional:
            value = None
        else:
            raise TypeError(f"{type_name} requires attribute {spec.name!r}")
        _check_slot_value(type_name, spec, value)
        slots.append(value)
    return SyntaxNode(kind=kind, type_name=type_name, slots=tuple(slots))


_EMPTY_DEFAULTS: dict[str, Any] = {
    LIST: SyntaxList(),
    SEPARATED: SeparatedSyntaxList(),
    TOKENS: SyntaxTokenList(),
    BOOL: False,
}

_LIST_TAGS: dict[str, type] = {
    "SyntaxList": SyntaxList,
    "SeparatedSyntaxList": SeparatedSyntaxList,
    "SyntaxTokenList": SyntaxTokenList,
    "SyntaxTriviaList": SyntaxTriviaList,
}


def satisfies(value: Any, type_tag: str) -> bool:
    """Return ``True`` when ``value`` can be passed where ``type_tag`` is declared."""

    if type_tag in ("Any", "object"):
        return True
    if type_tag == "str":
        return isinstance(value, str)
    if type_tag == "bool":
        return isinstance(value, bool)
    if type_tag == "LiteralValue":
        return isinstance(value, (str, int, float)) and not isinstance(value, bool)
    if type_tag == "list":
        return isinstance(value, list)
    if type_tag == "SyntaxKind":
        return isinstance(value, SyntaxKind)
    if type_tag == "SyntaxToken":
        return isinstance(value, SyntaxToken)
    if type_tag == "SyntaxTrivia":
        return isinstance(value, SyntaxTrivia)
    if type_tag == "SyntaxNodeOrToken":
        return isinstance(value, (SyntaxNode, SyntaxToken))
    if type_tag == "SyntaxNode":
        return isinstance(value, SyntaxNode)
    if type_tag in _LIST_TAGS:
        return isinstance(value, _LIST_TAGS[type_tag])
    return isinstance(value, SyntaxNode) and type_tag in value.schema.bases


def describe(value: Any) -> str:
    if isinstance(value, SyntaxNode):
        return f"{value.type_name}Syntax"
    if isinstance(value, SyntaxKind):
        return "SyntaxKind"
    return type(value).__name__


# Category names used in builder annotations; every node shares one runtime type.
ExpressionSyntax = SyntaxNode
StatementSyntax = SyntaxNode
MemberDeclarationSyntax = SyntaxNode
TypeSyntax = SyntaxNode
SimpleNameSyntax = SyntaxNode
StructuredTriviaSyntax = SyntaxNode
ParameterListSyntax = SyntaxNode
ParameterSyntax = SyntaxNode
BlockSyntax = SyntaxNode
ElseClauseSyntax = SyntaxNode
ArgumentListSyntax = SyntaxNode
ArgumentSyntax = SyntaxNode
InterpolatedStringContentSyntax = SyntaxNode
XmlNodeSyntax = SyntaxNode
LiteralValue = str | int | float
