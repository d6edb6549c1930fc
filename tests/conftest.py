"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from listener_lint.config import LintConfig
from listener_lint.runner import lint_source
from listener_lint.scanner import source_from_text
from listener_lint.syntax import (
    Call,
    Literal,
    Location,
    MemberAccess,
    SelfRef,
)


# =============================================================================
# SYNTAX BUILDERS
# =============================================================================

def this_path(*names: str):
    """this.a.b -> MemberAccess(MemberAccess(SelfRef, 'a'), 'b')"""
    node = SelfRef()
    for name in names:
        node = MemberAccess(node, name)
    return node


def listener_call(method, receiver, event, handler=None, line=1):
    """Build `<receiver>.<method>('<event>', <handler>)`."""
    args = [Literal(event) if isinstance(event, str) else event]
    if handler is not None:
        args.append(handler)
    return Call(
        callee=MemberAccess(receiver, method),
        arguments=tuple(args),
        location=Location(line, 0),
    )


def add(receiver, event, handler=None, line=1):
    return listener_call("addEventListener", receiver, event, handler, line)


def remove(receiver, event, handler=None, line=1):
    return listener_call("removeEventListener", receiver, event, handler, line)


# =============================================================================
# LINT FIXTURES
# =============================================================================

@pytest.fixture
def cfg(tmp_path):
    """Config rooted at a temporary directory."""
    return LintConfig(root=tmp_path, log_dir=tmp_path / "logs")


@pytest.fixture
def lint(cfg):
    """Lint JavaScript text, return the list of finding messages."""
    def _lint(code: str) -> list:
        src = source_from_text(code, cfg.root / "component.jsx")
        return [f.message for f in lint_source(cfg, src)]
    return _lint


@pytest.fixture
def lint_findings(cfg):
    """Lint JavaScript text, return Finding objects."""
    def _lint(code: str) -> list:
        src = source_from_text(code, cfg.root / "component.jsx")
        return lint_source(cfg, src)
    return _lint
