from __future__ import annotations

from dataclasses import dataclass


class QuoterError(Exception):
    """Base class for every error raised while quoting, decoding or replaying."""


@dataclass(slots=True)
class UnsupportedNodeKind(QuoterError):
    """No builder in the registry produces the node's type.

    Attributes:
        path: Location of the node in the quoted tree (``"root.Members[0]"``).
        name: The node type name that has no builder (``"ClassDeclaration"``).
    """

    path: str
    name: str

    def __str__(self) -> str:
        return f"{self.path}: no builder produces {self.name}Syntax"


@dataclass(slots=True)
class MissingArgument(QuoterError):
    """A required, non-list builder parameter has no matching attribute value."""

    path: str
    name: str
    builder: str

    def __str__(self) -> str:
        return f"{self.path}: {self.builder} needs argument {self.name!r} but the node has no such value"


@dataclass(slots=True)
class UnsupportedModifier(QuoterError):
    """A remaining attribute has no ``With<Name>`` modifier on the node's type."""

    path: str
    name: str
    type_name: str

    def __str__(self) -> str:
        return f"{self.path}: {self.type_name}Syntax has no modifier With{self.name}"


@dataclass(slots=True)
class MalformedInterchangeText(QuoterError):
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(slots=True)
class ReplayError(QuoterError):
    """Replaying a call tree failed (unknown builder, no matching overload, builder raised)."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"
