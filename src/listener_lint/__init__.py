"""
listener_lint v1.0 — addEventListener/removeEventListener balance linter.

Detects, per JavaScript/JSX source file:
- Registrations with no corresponding removeEventListener
- Registration/removal pairs that reference different handlers
- Inline function/arrow literals used as event handlers

Usage:
    listener-lint [root]
    listener-lint --json
    listener-lint --files a.js b.jsx
    listener-lint --watch
"""

__version__ = "1.0.0"

from .listeners import (
    UNRESOLVED,
    AnonymousArrow,
    AnonymousFunction,
    CallObservation,
    ListenerKind,
    NamedReference,
    QualifiedPath,
    Unresolved,
    classify_call,
    classify_handler,
    resolve_target,
)
from .registry import ListenerRegistry
from .rules import RemoveEventListenerRule, RuleStateError, reconcile

__all__ = [
    "__version__",
    # Classification
    "UNRESOLVED",
    "ListenerKind",
    "CallObservation",
    "NamedReference",
    "QualifiedPath",
    "AnonymousFunction",
    "AnonymousArrow",
    "Unresolved",
    "classify_call",
    "classify_handler",
    "resolve_target",
    # Registry / reconciliation
    "ListenerRegistry",
    "RemoveEventListenerRule",
    "RuleStateError",
    "reconcile",
]
