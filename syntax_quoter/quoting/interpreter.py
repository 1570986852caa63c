from __future__ import annotations

from typing import Any

from ..syntax.kinds import SyntaxKind
from ..syntax.nodes import describe, satisfies
from .calls import (
    ARRAY_PREFIX,
    BUILDER_PREFIX,
    KIND_PREFIX,
    MODIFIER_PREFIX,
    ApiCall,
    KindTag,
    MethodCall,
    split_generic,
)
from .errors import ReplayError
from .registry import BuilderRegistry


class CallInterpreter:
    """Replays call trees against a :class:`BuilderRegistry`.

    Builder calls are evaluated bottom-up: nested calls first, then the
    builder overload that accepts the evaluated arguments, then each
    modifier in order on the result.
    """

    def __init__(self, registry: BuilderRegistry):
        self.registry = registry

    def replay(self, call: ApiCall, path: str = "root") -> Any:
        target = self._evaluate_builder(call.builder_call, path)
        for idx, modifier in enumerate(call.modifier_calls):
            target = self._apply_modifier(target, modifier, f"{path}.b[{idx}]")
        return target

    def _argument(self, arg: Any, path: str) -> Any:
        if isinstance(arg, ApiCall):
            return self.replay(arg, path)
        if isinstance(arg, KindTag):
            return arg.kind
        return arg

    def _arguments(self, call: MethodCall, path: str) -> list[Any]:
        return [self._argument(arg, f"{path}.args[{idx}]") for idx, arg in enumerate(call.arguments)]

    def _evaluate_builder(self, call: MethodCall, path: str) -> Any:
        name = call.name
        if name.startswith(KIND_PREFIX):
            if call.arguments:
                raise ReplayError(path, f"kind literal {name} takes no arguments")
            try:
                return SyntaxKind(name[len(KIND_PREFIX) :])
            except ValueError:
                raise ReplayError(path, f"unknown kind {name!r}") from None

        values = self._arguments(call, path)
        if name.startswith(ARRAY_PREFIX):
            element_type = name[len(ARRAY_PREFIX) :]
            for idx, value in enumerate(values):
                if not satisfies(value, element_type):
                    raise ReplayError(f"{path}.args[{idx}]", f"expected {element_type}, got {describe(value)}")
            return values

        if not name.startswith(BUILDER_PREFIX):
            raise ReplayError(path, f"{name!r} is not a builder call")
        builder, element_type = split_generic(name[len(BUILDER_PREFIX) :])
        if not values:
            known = self.registry.property(builder)
            if known is not None:
                return known

        try:
            return self.registry.invoke(builder, values, element_type)
        except Exception as exc:
            raise ReplayError(path, f"{builder} failed: {exc}") from exc

    def _apply_modifier(self, target: Any, call: MethodCall, path: str) -> Any:
        if not call.name.startswith(MODIFIER_PREFIX):
            raise ReplayError(path, f"{call.name!r} is not a modifier call")
        attribute = call.name[len(MODIFIER_PREFIX) :]
        values = self._arguments(call, path)
        try:
            return self.registry.modify(target, attribute, values)
        except Exception as exc:
            raise ReplayError(path, f"With{attribute} failed: {exc}") from exc
