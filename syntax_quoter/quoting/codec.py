"""JSON interchange text for call trees.

Every :class:`ApiCall` is one object. Its first property is the tagged
builder name, mapped to ``null`` (no arguments) or to the argument array; an
optional ``"b"`` property holds the modifier calls as single-property
objects::

    {"f:Block":[{"f:ReturnStatement":null}],"b":[{"w:OpenBraceToken":[...]}]}

Arguments are raw JSON literals, ``k:``-prefixed kind tags or nested call
objects. Raw strings that begin with ``k:`` or a backslash are written with
one extra leading backslash.
"""

from __future__ import annotations

import json
import math
from typing import Any

from ..syntax.kinds import SyntaxKind
from .calls import (
    ARRAY_PREFIX,
    BUILDER_PREFIX,
    KIND_PREFIX,
    MODIFIER_PREFIX,
    ApiCall,
    KindTag,
    MethodCall,
)
from .errors import MalformedInterchangeText

MODIFIERS_KEY = "b"
_ESCAPE = "\\"
_CALL_PREFIXES = (BUILDER_PREFIX, KIND_PREFIX, ARRAY_PREFIX)
_TOO_DEEP = "interchange text is nested too deeply"


def _encode_argument(arg: Any) -> Any:
    if isinstance(arg, ApiCall):
        return call_to_dict(arg)
    if isinstance(arg, KindTag):
        return arg.tag
    if isinstance(arg, str):
        if arg.startswith((KIND_PREFIX, _ESCAPE)):
            return _ESCAPE + arg
        return arg
    if isinstance(arg, float) and not math.isfinite(arg):
        raise ValueError(f"Cannot encode non-finite number {arg!r}")
    if isinstance(arg, (bool, int, float)):
        return arg
    raise TypeError(f"Cannot encode argument of type {type(arg).__name__}")


def _encode_arguments(arguments: list[Any]) -> list[Any] | None:
    if not arguments:
        return None
    return [_encode_argument(arg) for arg in arguments]


def call_to_dict(call: ApiCall) -> dict[str, Any]:
    payload: dict[str, Any] = {call.builder_name: _encode_arguments(call.builder_call.arguments)}
    if call.modifier_calls:
        payload[MODIFIERS_KEY] = [
            {modifier.name: _encode_arguments(modifier.arguments)} for modifier in call.modifier_calls
        ]
    return payload


def encode_call(call: ApiCall, indent: int | None = None) -> str:
    """Serialize ``call``; compact unless ``indent`` is given."""

    if indent is None:
        return json.dumps(call_to_dict(call), ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    return json.dumps(call_to_dict(call), ensure_ascii=False, allow_nan=False, indent=indent)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid number")


def _unique_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for key, value in pairs:
        if key in payload:
            raise ValueError(f"duplicate property {key!r}")
        payload[key] = value
    return payload


def _decode_kind(tag: str, path: str) -> SyntaxKind:
    try:
        return SyntaxKind(tag[len(KIND_PREFIX) :])
    except ValueError:
        raise MalformedInterchangeText(path, f"unknown kind tag {tag!r}") from None


def _decode_argument(value: Any, path: str) -> Any:
    if isinstance(value, dict):
        return call_from_dict(value, path)
    if isinstance(value, str):
        if value.startswith(_ESCAPE):
            return value[len(_ESCAPE) :]
        if value.startswith(KIND_PREFIX):
            return KindTag(_decode_kind(value, path))
        return value
    if isinstance(value, (bool, int, float)):
        return value
    raise MalformedInterchangeText(path, f"unsupported argument {value!r}")


def _decode_arguments(value: Any, path: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedInterchangeText(path, "arguments must be null or an array")
    return [_decode_argument(arg, f"{path}.args[{idx}]") for idx, arg in enumerate(value)]


def _decode_modifiers(value: Any, path: str) -> list[MethodCall]:
    if not isinstance(value, list):
        raise MalformedInterchangeText(path, f"{MODIFIERS_KEY!r} must be an array")
    modifiers: list[MethodCall] = []
    for idx, item in enumerate(value):
        item_path = f"{path}[{idx}]"
        if not isinstance(item, dict) or len(item) != 1:
            raise MalformedInterchangeText(item_path, "a modifier call must be an object with one property")
        ((name, arguments),) = item.items()
        if not name.startswith(MODIFIER_PREFIX):
            raise MalformedInterchangeText(item_path, f"{name!r} is not a modifier call")
        modifiers.append(MethodCall(name, _decode_arguments(arguments, item_path)))
    return modifiers


def call_from_dict(payload: Any, path: str = "root") -> ApiCall:
    if not isinstance(payload, dict) or not payload:
        raise MalformedInterchangeText(path, "a call must be a non-empty object")

    (name, arguments), *rest = payload.items()
    if not name.startswith(_CALL_PREFIXES):
        raise MalformedInterchangeText(path, f"{name!r} is not a builder, kind or array call")
    if name.startswith(KIND_PREFIX):
        _decode_kind(name, path)
    builder = MethodCall(name, _decode_arguments(arguments, path))

    modifiers: list[MethodCall] = []
    for key, value in rest:
        if key != MODIFIERS_KEY:
            raise MalformedInterchangeText(path, f"unexpected property {key!r}")
        modifiers = _decode_modifiers(value, f"{path}.{MODIFIERS_KEY}")
    return ApiCall(None, builder, modifiers)


def decode_call(text: str) -> ApiCall:
    """Parse interchange text back into a call tree."""

    try:
        payload = json.loads(text, object_pairs_hook=_unique_keys, parse_constant=_reject_constant)
    except RecursionError:
        raise MalformedInterchangeText("root", _TOO_DEEP) from None
    except ValueError as exc:
        raise MalformedInterchangeText("root", f"invalid JSON: {exc}") from exc
    try:
        return call_from_dict(payload)
    except RecursionError:
        raise MalformedInterchangeText("root", _TOO_DEEP) from None
