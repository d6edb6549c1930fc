"""
listener_lint — Rule implementations.

REMOVE_EVENT_LISTENER: every addEventListener on a target must be paired
with a removeEventListener for the same target, event and handler, and
handlers must be named references rather than inline literals.

The rule is driven through two hooks, on_call_expression() and
on_scope_exit(). Defects are only reported from on_scope_exit().
"""

from __future__ import annotations

import logging
from typing import Callable

from .analysis import ParsedSource, scan_scope
from .config import LintConfig, relpath_str
from .listeners import (
    ListenerKind,
    classify_call,
    is_prohibited,
)
from .patterns import (
    MSG_HANDLER_MISMATCH,
    MSG_MISSING_REMOVAL,
    MSG_PROHIBITED_HANDLER,
    RULE_ID,
    WAIVER_TAG,
)
from .registry import ListenerRegistry
from .reporting import Finding
from .scanner import SourceFile, get_line
from .syntax import Location, Node

logger = logging.getLogger(__name__)

ReportFn = Callable[[Location, str], None]


class RuleStateError(RuntimeError):
    """A rule hook was called after the scope was already closed."""


# =============================================================================
# Reconciliation
# =============================================================================

def reconcile(registry: ListenerRegistry, report: ReportFn) -> int:
    """
    Check every registration against its removal and report defects.

    Order: registration targets in first-seen order, then events in
    first-seen order within each target. Returns the number of reports.
    """
    reported = 0
    add, remove = ListenerKind.REGISTRATION, ListenerKind.REMOVAL

    for target in registry.targets(add):
        for event, added in registry.events(add, target):
            removed = registry.lookup(remove, target, event)

            if removed is None:
                # 1. No removals on this target at all
                # 2. Removals on this target, but not for this event
                message = MSG_MISSING_REMOVAL.format(event=event, target=target)
            elif is_prohibited(added.handler):
                # Registration side only
                message = MSG_PROHIBITED_HANDLER.format(
                    event=event,
                    target=target,
                    shape=added.handler.shape,
                )
            elif added.handler != removed.handler:
                message = MSG_HANDLER_MISMATCH.format(
                    add=added.handler,
                    remove=removed.handler,
                    target=target,
                    event=event,
                )
            else:
                continue

            report(added.location, message)
            reported += 1

    return reported


class RemoveEventListenerRule:
    """One scan of one syntactic scope. Not reusable."""

    def __init__(self, report: ReportFn) -> None:
        self._report = report
        self._registry: ListenerRegistry | None = ListenerRegistry()

    @property
    def closed(self) -> bool:
        return self._registry is None

    def on_call_expression(self, node: Node) -> None:
        if self._registry is None:
            raise RuleStateError("on_call_expression() after on_scope_exit()")
        obs = classify_call(node)
        if obs is not None:
            self._registry.record(obs)

    def on_scope_exit(self) -> int:
        if self._registry is None:
            raise RuleStateError("on_scope_exit() called twice")
        registry, self._registry = self._registry, None
        logger.debug("reconciling %d listener entries", len(registry))
        return reconcile(registry, self._report)


# =============================================================================
# Rule Functions
# =============================================================================

def check_event_listeners(
    cfg: LintConfig,
    src: SourceFile,
    parsed: ParsedSource,
) -> list[Finding]:
    """Run REMOVE_EVENT_LISTENER over one source file (one scope)."""
    findings: list[Finding] = []
    rel = relpath_str(cfg.root, src.path)

    def report(loc: Location, message: str) -> None:
        line_text = get_line(src.lines, loc.line)
        if cfg.honor_waivers and WAIVER_TAG in line_text:
            logger.debug("%s:%s waived", rel, loc)
            return
        findings.append(Finding(
            rule_id=RULE_ID,
            severity="ERROR",
            path=rel,
            line=loc.line,
            col=loc.column,
            message=message,
            evidence=line_text.strip()[:240],
        ))

    scan_scope(parsed, RemoveEventListenerRule(report))
    return findings
