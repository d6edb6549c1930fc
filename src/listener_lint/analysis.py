"""
listener_lint — JavaScript parsing and traversal.

Handles:
- Parsing JavaScript/JSX with tree-sitter
- Lowering tree-sitter nodes to the closed syntax set in syntax.py
- Driving a rule over every call expression of a scope
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol

import tree_sitter_javascript as tsjs
from tree_sitter import Language, Parser, Tree

from .syntax import (
    ArrowLiteral,
    Call,
    FunctionLiteral,
    Identifier,
    Literal,
    Location,
    MemberAccess,
    Node,
    Opaque,
    SelfRef,
)

logger = logging.getLogger(__name__)

JS_LANGUAGE = Language(tsjs.language())

# Older grammar releases name function expressions "function"
_FUNCTION_TYPES = frozenset({"function_expression", "function", "generator_function"})
_PROPERTY_TYPES = frozenset({"property_identifier", "private_property_identifier"})
_KEYWORD_LITERALS = frozenset({"number", "true", "false", "null"})

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


@dataclass(frozen=True)
class ParsedSource:
    """A parsed JavaScript source."""
    data: bytes
    tree: Tree

    @property
    def root(self) -> Any:
        return self.tree.root_node

    @property
    def error_count(self) -> int:
        """Number of ERROR / missing nodes in the tree."""
        count = 0
        for node in _walk(self.root):
            if node.type == "ERROR" or node.is_missing:
                count += 1
        return count

    def text_of(self, node: Any) -> str:
        return self.data[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def location_of(self, node: Any) -> Location:
        row, byte_col = node.start_point
        line_start = node.start_byte - byte_col
        prefix = self.data[line_start:node.start_byte].decode("utf-8", errors="replace")
        return Location(line=row + 1, column=len(prefix))


def parse_source(text: str) -> ParsedSource:
    """Parse JavaScript/JSX text. Syntax errors are kept in the tree, not raised."""
    data = text.encode("utf-8")
    tree = Parser(JS_LANGUAGE).parse(data)
    parsed = ParsedSource(data=data, tree=tree)
    if parsed.root.has_error:
        logger.warning("source has %d syntax error node(s); scanning anyway", parsed.error_count)
    return parsed


def _walk(node: Any) -> Iterator[Any]:
    """Pre-order walk (document order)."""
    stack = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(cur.children))


# =============================================================================
# Lowering
# =============================================================================

def _unescape(seq: str) -> str:
    body = seq[1:]
    try:
        if body.startswith("u{") and body.endswith("}"):
            return chr(int(body[2:-1], 16))
        if body[:1] in ("x", "u") and len(body) > 1:
            return chr(int(body[1:], 16))
    except ValueError:
        return body
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if not body.strip("\r\n"):
        # line continuation
        return ""
    return body


def _string_value(node: Any, parsed: ParsedSource) -> str:
    parts: list[str] = []
    for child in node.named_children:
        text = parsed.text_of(child)
        if child.type == "escape_sequence":
            parts.append(_unescape(text))
        else:
            parts.append(text)
    return "".join(parts)


def _unwrap_parens(node: Any) -> Optional[Any]:
    """Strip parentheses. None when a group holds other than one expression."""
    while node.type == "parenthesized_expression":
        inner = [c for c in node.named_children if c.type != "comment"]
        if len(inner) != 1:
            return None
        node = inner[0]
    return node


def _lower_member(node: Any, parsed: ParsedSource) -> Node:
    """Lower a member chain without recursing once per link."""
    props: list[str] = []
    cur: Optional[Any] = node
    base: Node
    while True:
        if cur is None:
            base = Opaque("parenthesized_expression")
            break
        if cur.type != "member_expression":
            base = lower(cur, parsed)
            break
        obj = cur.child_by_field_name("object")
        prop = cur.child_by_field_name("property")
        if obj is None or prop is None or prop.type not in _PROPERTY_TYPES:
            base = Opaque(cur.type)
            break
        props.append(parsed.text_of(prop))
        cur = _unwrap_parens(obj)

    for name in reversed(props):
        base = MemberAccess(base, name)
    return base


def lower(node: Any, parsed: ParsedSource, *, top: bool = False) -> Node:
    """Map a tree-sitter expression node onto the closed syntax set.

    Only the `top` call is lowered with its callee and arguments; calls
    nested inside it become Opaque, as the classifiers never look into them.
    """
    unwrapped = _unwrap_parens(node)
    if unwrapped is None:
        return Opaque(node.type)
    node = unwrapped
    kind = node.type

    if kind == "this":
        return SelfRef()

    if kind in ("identifier", "undefined"):
        return Identifier(parsed.text_of(node))

    if kind == "member_expression":
        return _lower_member(node, parsed)

    if kind in _FUNCTION_TYPES:
        return FunctionLiteral()

    if kind == "arrow_function":
        return ArrowLiteral()

    if kind == "string":
        return Literal(_string_value(node, parsed))

    if kind in _KEYWORD_LITERALS:
        return Literal(parsed.text_of(node))

    if kind == "call_expression" and top:
        fn = node.child_by_field_name("function")
        args = node.child_by_field_name("arguments")
        # Tagged templates carry a template_string here
        if fn is None or args is None or args.type != "arguments":
            return Opaque(kind)
        return Call(
            callee=lower(fn, parsed),
            arguments=tuple(
                lower(a, parsed) for a in args.named_children if a.type != "comment"
            ),
            location=parsed.location_of(node),
        )

    return Opaque(kind)


# =============================================================================
# Traversal
# =============================================================================

class ScopeRule(Protocol):
    def on_call_expression(self, node: Node) -> None: ...

    def on_scope_exit(self) -> int: ...


def iter_calls(parsed: ParsedSource) -> Iterator[Call]:
    """Every call expression in the source, lowered, in document order.

    An outer call is yielded before the calls nested in its arguments.
    """
    for node in _walk(parsed.root):
        if node.type != "call_expression":
            continue
        lowered = lower(node, parsed, top=True)
        if isinstance(lowered, Call):
            yield lowered


def scan_scope(parsed: ParsedSource, rule: ScopeRule) -> int:
    """Feed all calls of one scope to `rule`, then close the scope."""
    seen = 0
    for call in iter_calls(parsed):
        rule.on_call_expression(call)
        seen += 1
    logger.debug("visited %d call expression(s)", seen)
    return rule.on_scope_exit()
