"""
listener_lint — Pattern definitions.

This module contains PURE DATA: method names, handler shape labels,
message templates and tags used by the rule.
No logic here — just definitions.

Organization:
1. LISTENER METHODS - Callee property names that are observed
2. HANDLER SHAPES - Labels for inline handler literals
3. MESSAGES - Report templates
4. RENDERING - Placeholder for unresolved values
5. WAIVER TAG - Inline suppression
"""

from __future__ import annotations

# =============================================================================
# 1. LISTENER METHODS
# =============================================================================

ADD_EVENT_LISTENER = "addEventListener"
REMOVE_EVENT_LISTENER = "removeEventListener"

RULE_ID = "REMOVE_EVENT_LISTENER"


# =============================================================================
# 2. HANDLER SHAPES
# =============================================================================

PLAIN_FUNCTION = "plain function"
ARROW_FUNCTION = "arrow function"


# =============================================================================
# 3. MESSAGES
# =============================================================================
# Keys: event, target, add, remove, shape

MSG_MISSING_REMOVAL = (
    "{event} on {target} does not have a corresponding removeEventListener"
)
MSG_HANDLER_MISMATCH = "{add} and {remove} on {target} for {event} do not match"
MSG_PROHIBITED_HANDLER = (
    "event handler for {event} on {target} is {shape} "
    "{shape}s are prohibited as event handlers"
)


# =============================================================================
# 4. RENDERING
# =============================================================================

UNRESOLVED_TEXT = "undefined"


# =============================================================================
# 5. WAIVER TAG
# =============================================================================
# Inline waiver to suppress findings reported on the same line

WAIVER_TAG = "LISTENER_LINT_OK"
