from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..syntax.kinds import SyntaxKind

BUILDER_PREFIX = "f:"
MODIFIER_PREFIX = "w:"
KIND_PREFIX = "k:"
ARRAY_PREFIX = "n:"


@dataclass(frozen=True, slots=True)
class KindTag:
    """A syntax kind passed as a builder argument (``k:IdentifierToken``)."""

    kind: SyntaxKind

    @property
    def tag(self) -> str:
        return f"{KIND_PREFIX}{self.kind.value}"


@dataclass(slots=True)
class MethodCall:
    """One builder or modifier invocation: a tagged name and its arguments.

    Arguments are raw literals (``str``, ``bool``, ``int``, ``float``),
    :class:`KindTag` values or nested :class:`ApiCall` trees.
    """

    name: str
    arguments: list[Any] = field(default_factory=list)


@dataclass(slots=True)
class ApiCall:
    """A builder call plus the ordered modifier calls applied to its result.

    ``name`` is the attribute name the call was produced for (``"Body"``,
    ``"Kind"``...); it is informational and not part of the interchange text.
    """

    name: str | None
    builder_call: MethodCall
    modifier_calls: list[MethodCall] = field(default_factory=list)

    @property
    def builder_name(self) -> str:
        return self.builder_call.name

    def add_modifier(self, call: MethodCall) -> None:
        self.modifier_calls.append(call)

    def remove_modifier(self, call: MethodCall) -> None:
        for idx, existing in enumerate(self.modifier_calls):
            if existing is call:
                del self.modifier_calls[idx]
                return
        raise ValueError(f"{call.name} is not a modifier of {self.builder_name}")


@dataclass(frozen=True, slots=True)
class QuotedLiteral:
    """A raw value produced while quoting a property (string, bool or number)."""

    name: str
    value: Any


def is_array_call(call: ApiCall) -> bool:
    return call.builder_name.startswith(ARRAY_PREFIX)


def split_generic(name: str) -> tuple[str, str | None]:
    """Split ``"f:List<StatementSyntax>"`` into ``("f:List", "StatementSyntax")``."""

    if name.endswith(">") and "<" in name:
        base, _, rest = name.partition("<")
        return base, rest[:-1]
    return name, None


def nested_calls(call: ApiCall) -> list[ApiCall]:
    children: list[ApiCall] = []
    for method in (call.builder_call, *call.modifier_calls):
        children.extend(arg for arg in method.arguments if isinstance(arg, ApiCall))
    return children


def call_size(call: ApiCall) -> int:
    return 1 + sum(call_size(child) for child in nested_calls(call))


def call_depth(call: ApiCall) -> int:
    children = nested_calls(call)
    if children:
        return 1 + max(call_depth(child) for child in children)
    return 1


def modifier_count(call: ApiCall) -> int:
    return len(call.modifier_calls) + sum(modifier_count(child) for child in nested_calls(call))
