"""
listener_lint — Listener call classification.

Handles:
- Call classification (addEventListener / removeEventListener)
- Target resolution (canonical key of the receiver)
- Handler classification (shape of the callback argument)

Nothing here raises on unexpected input: unknown shapes degrade to
UNRESOLVED / Unresolved so a scan always completes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .patterns import (
    ADD_EVENT_LISTENER,
    ARROW_FUNCTION,
    PLAIN_FUNCTION,
    REMOVE_EVENT_LISTENER,
    UNRESOLVED_TEXT,
)
from .syntax import (
    ArrowLiteral,
    Call,
    FunctionLiteral,
    Identifier,
    Literal,
    Location,
    MemberAccess,
    Node,
    SelfRef,
)


class ListenerKind(Enum):
    """Which side of the listener pair a call is on."""
    REGISTRATION = ADD_EVENT_LISTENER
    REMOVAL = REMOVE_EVENT_LISTENER


class Unresolvable(Enum):
    """Sentinel for target keys and event names that cannot be determined."""
    UNRESOLVED = UNRESOLVED_TEXT

    def __str__(self) -> str:
        return self.value


UNRESOLVED = Unresolvable.UNRESOLVED

TargetKey = Union[str, Unresolvable]
EventName = Union[str, Unresolvable]


# =============================================================================
# Handler descriptors
# =============================================================================

@dataclass(frozen=True)
class NamedReference:
    """Handler passed as a bare identifier."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class QualifiedPath:
    """Handler passed as a member chain rooted at `this`."""
    path: str

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class AnonymousFunction:
    shape = PLAIN_FUNCTION

    def __str__(self) -> str:
        return self.shape


@dataclass(frozen=True)
class AnonymousArrow:
    shape = ARROW_FUNCTION

    def __str__(self) -> str:
        return self.shape


@dataclass(frozen=True)
class Unresolved:
    def __str__(self) -> str:
        return UNRESOLVED_TEXT


HandlerDescriptor = Union[
    NamedReference,
    QualifiedPath,
    AnonymousFunction,
    AnonymousArrow,
    Unresolved,
]

PROHIBITED_HANDLERS = (AnonymousFunction, AnonymousArrow)


def is_prohibited(handler: HandlerDescriptor) -> bool:
    """Inline literals can never be removed by reference."""
    return isinstance(handler, PROHIBITED_HANDLERS)


@dataclass(frozen=True)
class CallObservation:
    """One observed listener call."""
    kind: ListenerKind
    target_key: TargetKey
    event_name: EventName
    handler: HandlerDescriptor
    location: Location


# =============================================================================
# Target resolution
# =============================================================================

def _instance_path(node: Node) -> Optional[str]:
    """
    Render a member chain rooted at `this` as a dotted path.

    `this.a.b` -> "this.a.b", `this` -> "this". Returns None when the
    chain bottoms out anywhere other than `this`.
    """
    parts: list[str] = []
    cur = node
    while isinstance(cur, MemberAccess):
        parts.append(cur.property)
        cur = cur.object
    if not isinstance(cur, SelfRef):
        return None
    parts.append("this")
    return ".".join(reversed(parts))


def resolve_target(receiver: Node) -> TargetKey:
    """Canonical key for the receiver of a listener call.

    Only receivers rooted at the enclosing instance resolve; bare names
    (`window`, `document`), call results and computed access do not.
    """
    path = _instance_path(receiver)
    if path is None:
        return UNRESOLVED
    return path


# =============================================================================
# Handler classification
# =============================================================================

def classify_handler(arg: Optional[Node]) -> HandlerDescriptor:
    """Classify the handler argument of a listener call. First match wins."""
    if isinstance(arg, FunctionLiteral):
        return AnonymousFunction()
    if isinstance(arg, ArrowLiteral):
        return AnonymousArrow()
    if isinstance(arg, Identifier):
        return NamedReference(arg.name)
    if isinstance(arg, MemberAccess):
        path = _instance_path(arg)
        if path is not None:
            return QualifiedPath(path)
    return Unresolved()


# =============================================================================
# Call classification
# =============================================================================

_KINDS_BY_METHOD = {kind.value: kind for kind in ListenerKind}


def _arg(arguments: Sequence[Node], index: int) -> Optional[Node]:
    if index < len(arguments):
        return arguments[index]
    return None


def event_name_of(arg: Optional[Node]) -> EventName:
    """Event name from the first argument; only literals are understood."""
    if isinstance(arg, Literal):
        return arg.value
    return UNRESOLVED


def classify_call(node: Node) -> Optional[CallObservation]:
    """
    Decompose a call expression into a CallObservation.

    Returns None for anything that is not `<receiver>.addEventListener(...)`
    or `<receiver>.removeEventListener(...)`.
    """
    if not isinstance(node, Call):
        return None
    callee = node.callee
    if not isinstance(callee, MemberAccess):
        return None
    kind = _KINDS_BY_METHOD.get(callee.property)
    if kind is None:
        return None

    return CallObservation(
        kind=kind,
        target_key=resolve_target(callee.object),
        event_name=event_name_of(_arg(node.arguments, 0)),
        handler=classify_handler(_arg(node.arguments, 1)),
        location=node.location,
    )
