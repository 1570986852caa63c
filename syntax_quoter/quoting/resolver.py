from __future__ import annotations

import logging

from ..syntax.kinds import SyntaxKind
from ..syntax.nodes import SyntaxNode
from .errors import UnsupportedNodeKind
from .registry import STRING_PREFERRING_BASES, BuilderRegistry, BuilderSpec

logger = logging.getLogger(__name__)

# Literal kinds whose one-parameter builder can build the token by itself.
KIND_ONLY_LITERALS = frozenset(
    {
        SyntaxKind.TRUE_LITERAL_EXPRESSION,
        SyntaxKind.FALSE_LITERAL_EXPRESSION,
        SyntaxKind.NULL_LITERAL_EXPRESSION,
    }
)


def _prefers_string(node: SyntaxNode) -> bool:
    return any(base in STRING_PREFERRING_BASES for base in node.schema.bases)


def pick_builder(registry: BuilderRegistry, node: SyntaxNode, path: str = "root") -> BuilderSpec:
    """Select the builder overload used to recreate ``node``.

    Candidates are the overloads returning the node's type, in lexical
    signature order. The shortest declared signature wins, with these
    adjustments:

    - non-keyword literal expressions need the ``(kind, token)`` form;
    - class declarations and identifier names take the first overload whose
      first parameter is a plain ``str``;
    - among several shortest overloads a variadic one wins, then (for
      one-parameter overloads) an optional one, then the first.
    """

    candidates = registry.candidates(node.type_name)
    if not candidates:
        raise UnsupportedNodeKind(path, node.type_name)

    if _prefers_string(node):
        for spec in candidates:
            first = spec.first_parameter
            if first is not None and first.type_tag == "str":
                logger.debug("%s: %s picked for its string parameter", path, spec.signature)
                return spec

    minimum = min(spec.parameter_count for spec in candidates)
    if node.type_name == "LiteralExpression" and node.kind not in KIND_ONLY_LITERALS:
        minimum = 2

    shortest = [spec for spec in candidates if spec.parameter_count == minimum]
    if not shortest:
        raise UnsupportedNodeKind(path, node.type_name)

    picked = shortest[0]
    if len(shortest) > 1:
        variadic = [spec for spec in shortest if spec.first_parameter and spec.first_parameter.variadic]
        optional = [spec for spec in shortest if minimum == 1 and spec.first_parameter.optional]
        if variadic:
            picked = variadic[0]
        elif optional:
            picked = optional[0]

    logger.debug("%s: %s picked from %d candidate(s)", path, picked.signature, len(candidates))
    return picked
