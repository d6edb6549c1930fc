"""
listener_lint — Reporting and output formatting.

Handles:
- Finding dataclass
- Human-readable output
- JSON output
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from . import __version__


@dataclass
class Finding:
    """A single lint finding."""
    rule_id: str
    severity: str  # "ERROR", "WARN"
    path: str
    line: int
    col: int
    message: str
    evidence: str = ""

    def __str__(self) -> str:
        loc = f"{self.path}:{self.line}:{self.col}"
        return f"{self.severity} {self.rule_id} {loc} — {self.message}"


class Reporter:
    """Collects and formats findings."""

    def __init__(self) -> None:
        self.findings: list[Finding] = []
        self.files_scanned = 0

    def add(self, finding: Finding) -> None:
        self.findings.append(finding)

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == "ERROR"]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == "WARN"]

    def render_human(self) -> str:
        """Render findings as human-readable text."""
        if not self.findings:
            return f"listener_lint v{__version__}: OK — no findings"

        # Sort by path/line; same-line findings keep report order
        sorted_findings = sorted(
            self.findings,
            key=lambda f: (f.path, f.line, f.col),
        )

        lines = [
            f"listener_lint v{__version__}",
            f"Errors: {len(self.errors)}  Warnings: {len(self.warnings)}",
            "",
        ]

        for f in sorted_findings:
            lines.append(str(f))
            if f.evidence:
                lines.append(f"    {f.evidence}")

        return "\n".join(lines)

    def render_json(self) -> str:
        """Render findings as JSON."""
        return json.dumps(
            [asdict(f) for f in self.findings],
            indent=2,
            default=str,
        )
