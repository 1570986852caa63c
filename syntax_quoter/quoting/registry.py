from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from ..syntax import factory
from ..syntax.nodes import (
    SeparatedSyntaxList,
    SyntaxList,
    SyntaxNode,
    SyntaxTokenList,
    SyntaxTrivia,
    SyntaxTriviaList,
    satisfies,
)
from ..syntax.schema import NODE_SCHEMAS

logger = logging.getLogger(__name__)

# Attributes that do not change the rendered text of a node.
NON_STRUCTURAL_PROPERTIES = frozenset(
    {
        "AllowsAnyExpression",
        "Arity",
        "ContainsAnnotations",
        "ContainsDiagnostics",
        "ContainsDirectives",
        "ContainsSkippedText",
        "DirectiveNameToken",
        "FullSpan",
        "HasLeadingTrivia",
        "HasTrailingTrivia",
        "HasStructuredTrivia",
        "HasStructure",
        "IsConst",
        "IsDirective",
        "IsElastic",
        "IsFixed",
        "IsMissing",
        "IsStructuredTrivia",
        "IsUnboundGenericName",
        "IsVar",
        "Kind",
        "Language",
        "Parent",
        "ParentTrivia",
        "PlainName",
        "Span",
        "SyntaxTree",
    }
)

# Node families whose string-taking builder is preferred over the token one.
STRING_PREFERRING_BASES = frozenset({"BaseTypeDeclarationSyntax", "IdentifierNameSyntax"})

KIND_TAG = "SyntaxKind"

_SEQUENCE_TYPES = (list, tuple, SyntaxList, SeparatedSyntaxList, SyntaxTokenList, SyntaxTriviaList)


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """One positional parameter of a builder overload.

    Attributes:
        name: Python parameter name (``open_brace_token``).
        type_tag: Annotation reduced to a plain tag (``"SyntaxToken"``,
            ``"ExpressionSyntax"``, ``"str"``...); ``| None`` and subscripts
            are dropped.
        optional: ``True`` when the parameter has a default value.
        variadic: ``True`` for ``*args`` parameters.
    """

    name: str
    type_tag: str
    optional: bool = False
    variadic: bool = False

    @property
    def match_key(self) -> str:
        return match_key(self.name)

    def render(self) -> str:
        star = "*" if self.variadic else ""
        default = " = None" if self.optional else ""
        return f"{star}{self.name}: {self.type_tag}{default}"


@dataclass(frozen=True, slots=True)
class BuilderSpec:
    """Immutable descriptor for one builder overload.

    Instances are created by :func:`build_default_registry` by introspecting
    the functions registered in :data:`syntax_quoter.syntax.factory.BUILDERS`.

    Attributes:
        name: Public builder name shared by all overloads (``"Block"``).
        returns: Type tag of the built value (``"BlockSyntax"``,
            ``"SyntaxToken"``...).
        parameters: Positional parameters in declaration order.
        fn: The construction function.
        generic: ``True`` when the builder takes an element type (``List<T>``).
        signature: ``Block(*statements: StatementSyntax)``; overloads are
            ordered by this string.
    """

    name: str
    returns: str
    parameters: tuple[ParameterSpec, ...]
    fn: Callable[..., Any]
    generic: bool
    signature: str

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    @property
    def first_parameter(self) -> ParameterSpec | None:
        return self.parameters[0] if self.parameters else None

    def bind(self, args: Sequence[Any]) -> list[Any] | None:
        """Return the positional arguments for a call, or ``None`` when ``args`` do not fit."""

        fixed = [param for param in self.parameters if not param.variadic]
        variadic = next((param for param in self.parameters if param.variadic), None)
        if variadic is None:
            required = sum(1 for param in fixed if not param.optional)
            if not required <= len(args) <= len(fixed):
                return None
            if all(_accepts(param, arg) for param, arg in zip(fixed, args)):
                return list(args)
            return None

        if len(args) < len(fixed):
            return None
        head, rest = list(args[: len(fixed)]), list(args[len(fixed) :])
        if not all(_accepts(param, arg) for param, arg in zip(fixed, head)):
            return None
        if len(rest) == 1 and isinstance(rest[0], _SEQUENCE_TYPES) and not satisfies(rest[0], variadic.type_tag):
            rest = list(rest[0])
        if all(satisfies(item, variadic.type_tag) for item in rest):
            return head + rest
        return None


def _accepts(param: ParameterSpec, value: Any) -> bool:
    if value is None:
        return param.optional
    return satisfies(value, param.type_tag)


def match_key(name: str) -> str:
    return name.replace("_", "").lower()


def _type_tag(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "Any"
    text = annotation if isinstance(annotation, str) else getattr(annotation, "__name__", str(annotation))
    parts = [part.strip() for part in text.split("|") if part.strip() != "None"]
    if not parts:
        return "Any"
    return parts[0].split("[", 1)[0]


def _introspect_parameters(fn: Callable[..., Any]) -> tuple[ParameterSpec, ...]:
    parameters: list[ParameterSpec] = []
    for param in inspect.signature(fn).parameters.values():
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            parameters.append(
                ParameterSpec(
                    name=param.name,
                    type_tag=_type_tag(param.annotation),
                    optional=param.default is not inspect.Parameter.empty,
                )
            )
        elif param.kind == inspect.Parameter.VAR_POSITIONAL:
            parameters.append(ParameterSpec(name=param.name, type_tag=_type_tag(param.annotation), variadic=True))
    return tuple(parameters)


class BuilderRegistry:
    """Registry of builder overloads, well-known trivia and modifier availability.

    Typical usage::

        registry = build_default_registry()
        candidates = registry.candidates("Block")   # overloads building BlockSyntax
        node = registry.invoke("IdentifierName", ["x"])

    Attributes:
        _overloads: Builder name to overloads in signature order.
        _by_return: Return type tag to overloads in signature order.
        _properties: Named ready-made values (``Space``, ``LineFeed``...).
    """

    def __init__(self, specs: list[BuilderSpec], properties: dict[str, SyntaxTrivia]):
        ordered = sorted(specs, key=lambda spec: spec.signature)
        self._overloads: dict[str, list[BuilderSpec]] = {}
        self._by_return: dict[str, list[BuilderSpec]] = {}
        for spec in ordered:
            self._overloads.setdefault(spec.name, []).append(spec)
            self._by_return.setdefault(spec.returns, []).append(spec)
        self._properties = dict(properties)
        self._kind_selector_types = frozenset(
            type_name
            for type_name in NODE_SCHEMAS
            if self.candidates(type_name)
            and all(
                spec.first_parameter is not None and spec.first_parameter.type_tag == KIND_TAG
                for spec in self.candidates(type_name)
            )
        )

    def list_builders(self) -> list[str]:
        return sorted(self._overloads)

    def overloads(self, name: str) -> list[BuilderSpec]:
        try:
            return list(self._overloads[name])
        except KeyError:
            raise KeyError(f"Unknown builder: {name!r}") from None

    def candidates(self, type_name: str) -> list[BuilderSpec]:
        """Overloads that build ``<type_name>Syntax``, in lexical signature order."""

        return list(self._by_return.get(f"{type_name}Syntax", ()))

    def takes_kind_selector(self, type_name: str) -> bool:
        return type_name in self._kind_selector_types

    @staticmethod
    def is_structural(name: str) -> bool:
        return name not in NON_STRUCTURAL_PROPERTIES

    @staticmethod
    def has_modifier(type_name: str, attribute: str) -> bool:
        schema = NODE_SCHEMAS.get(type_name)
        return schema is not None and schema.has_attribute(attribute)

    def property(self, name: str) -> SyntaxTrivia | None:
        return self._properties.get(name)

    def well_known_trivia(self, trivia: SyntaxTrivia) -> str | None:
        """Name of the ready-made trivia equal to ``trivia`` (same text and kind), if any."""

        for name, known in self._properties.items():
            if known.text == trivia.text and known.kind is trivia.kind:
                return name
        return None

    def invoke(self, name: str, args: Sequence[Any], generic: str | None = None) -> Any:
        for spec in self.overloads(name):
            bound = spec.bind(args)
            if bound is None:
                continue
            if spec.generic and generic:
                return spec.fn(*bound, element_type=generic)
            return spec.fn(*bound)
        raise TypeError(f"no overload of {name} accepts {len(args)} argument(s) of the given types")

    @staticmethod
    def modify(target: Any, attribute: str, args: Sequence[Any]) -> SyntaxNode:
        if not isinstance(target, SyntaxNode):
            raise TypeError(f"With{attribute} needs a node, got {type(target).__name__}")
        if len(args) != 1:
            raise TypeError(f"With{attribute} takes exactly one argument, got {len(args)}")
        return target.with_attribute(attribute, args[0])


def _build_specs() -> list[BuilderSpec]:
    specs: list[BuilderSpec] = []
    for fn in factory.BUILDERS:
        parameters = _introspect_parameters(fn)
        name = fn.builder_name
        signature = f"{name}({', '.join(param.render() for param in parameters)})"
        specs.append(
            BuilderSpec(
                name=name,
                returns=fn.builder_returns,
                parameters=parameters,
                fn=fn,
                generic=fn.builder_generic,
                signature=signature,
            )
        )
    return specs


@lru_cache(maxsize=1)
def build_default_registry() -> BuilderRegistry:
    specs = _build_specs()
    registry = BuilderRegistry(specs, factory.WELL_KNOWN_TRIVIA)
    logger.debug(
        "Built builder registry: %d overloads across %d builders",
        len(specs),
        len(registry.list_builders()),
    )
    return registry
