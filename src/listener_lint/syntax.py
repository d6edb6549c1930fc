"""
listener_lint — Syntax nodes.

The closed set of expression shapes the listener rule understands.
The front end (analysis.py) lowers every other shape to Opaque, so the
classifiers only ever see these variants.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Location:
    """Source position of a node. Line is 1-based, column 0-based."""
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Identifier:
    """A bare name: `handler`, `window`."""
    name: str


@dataclass(frozen=True)
class SelfRef:
    """`this`"""


@dataclass(frozen=True)
class MemberAccess:
    """Non-computed property access: `object.property`."""
    object: "Node"
    property: str


@dataclass(frozen=True)
class FunctionLiteral:
    """An inline `function () {}` expression, named or not."""


@dataclass(frozen=True)
class ArrowLiteral:
    """An inline `() => {}` expression."""


@dataclass(frozen=True)
class Literal:
    """A primitive literal. `value` is the string form (strings unquoted)."""
    value: str


@dataclass(frozen=True)
class Call:
    """A call expression."""
    callee: "Node"
    arguments: tuple["Node", ...] = ()
    location: Location = field(default=Location(1, 0), compare=False)


@dataclass(frozen=True)
class Opaque:
    """Any expression outside the modeled set. `kind` is the parser's node type."""
    kind: str


Node = Union[
    Identifier,
    SelfRef,
    MemberAccess,
    FunctionLiteral,
    ArrowLiteral,
    Literal,
    Call,
    Opaque,
]
