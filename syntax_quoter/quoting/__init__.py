"""Quoting engine: syntax trees to builder call trees, interchange text and back."""

from .calls import ApiCall, KindTag, MethodCall, QuotedLiteral, call_depth, call_size, modifier_count
from .codec import decode_call, encode_call
from .errors import (
    MalformedInterchangeText,
    MissingArgument,
    QuoterError,
    ReplayError,
    UnsupportedModifier,
    UnsupportedNodeKind,
)
from .interpreter import CallInterpreter
from .quoter import Quoter
from .registry import BuilderRegistry, BuilderSpec, ParameterSpec, build_default_registry
from .resolver import pick_builder

__all__ = [
    "ApiCall",
    "BuilderRegistry",
    "BuilderSpec",
    "CallInterpreter",
    "KindTag",
    "MalformedInterchangeText",
    "MethodCall",
    "MissingArgument",
    "ParameterSpec",
    "QuotedLiteral",
    "Quoter",
    "QuoterError",
    "ReplayError",
    "UnsupportedModifier",
    "UnsupportedNodeKind",
    "build_default_registry",
    "call_depth",
    "call_size",
    "decode_call",
    "encode_call",
    "modifier_count",
    "pick_builder",
]
