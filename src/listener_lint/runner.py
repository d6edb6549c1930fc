"""
listener_lint — Main runner and CLI.

Orchestrates scanning and handles CLI arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .analysis import parse_source
from .config import LintConfig, relpath_str
from .reporting import Finding, Reporter
from .rules import check_event_listeners
from .scanner import SourceFile, iter_files, load_source

logger = logging.getLogger(__name__)


def lint_source(cfg: LintConfig, src: SourceFile) -> list[Finding]:
    """Lint one loaded source file. Scan failures become a SCAN_FAIL warning."""
    try:
        parsed = parse_source(src.text)
        findings = check_event_listeners(cfg, src, parsed)
    except Exception as e:
        logger.warning("could not scan %s: %r", src.path, e)
        return [Finding(
            rule_id="SCAN_FAIL",
            severity="WARN",
            path=relpath_str(cfg.root, src.path),
            line=1,
            col=0,
            message=f"Could not scan file: {e!r}",
        )]
    logger.debug("%s: %d finding(s)", src.path, len(findings))
    return findings


def lint_path(cfg: LintConfig, path: Path) -> list[Finding]:
    """Load and lint one file. Unreadable files become a READ_FAIL warning."""
    try:
        src = load_source(path)
    except OSError as e:
        logger.warning("could not read %s: %s", path, e)
        return [Finding(
            rule_id="READ_FAIL",
            severity="WARN",
            path=relpath_str(cfg.root, path),
            line=1,
            col=0,
            message=f"Could not read file: {e}",
        )]
    return lint_source(cfg, src)


def run(root: Path, cfg: LintConfig | None = None) -> Reporter:
    """Run the listener check over every file and return a Reporter."""
    cfg = cfg or LintConfig(root=root)
    reporter = Reporter()

    for path in iter_files(cfg):
        for finding in lint_path(cfg, path):
            reporter.add(finding)
        reporter.files_scanned += 1

    if cfg.errors_only:
        reporter.findings = [f for f in reporter.findings if f.severity == "ERROR"]

    return reporter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listener-lint",
        description=f"listener_lint v{__version__} — addEventListener/removeEventListener balance checker",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Root directory to scan (default: current directory)",
    )
    parser.add_argument(
        "--files",
        nargs="*",
        metavar="FILE",
        help="Lint only these specific files (disables directory scan)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "--errors-only",
        action="store_true",
        help="Only show ERROR severity",
    )
    parser.add_argument(
        "--no-waivers",
        action="store_true",
        help="Ignore inline LISTENER_LINT_OK waivers",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch root and lint files as they change",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=0.75,
        help="Watch poll interval in seconds (default: 0.75)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    root = Path(args.root).resolve()

    explicit_files = None
    if args.files:
        explicit_files = tuple(Path(f).resolve() for f in args.files)

    cfg = LintConfig(
        root=root,
        explicit_files=explicit_files,
        honor_waivers=not args.no_waivers,
        json_output=args.json,
        errors_only=args.errors_only,
    )

    if args.watch:
        from .daemon import run_daemon
        return run_daemon(cfg, interval=max(0.1, args.interval), debounce_seconds=2.0)

    reporter = run(root, cfg)

    if args.json:
        print(reporter.render_json())
    else:
        print(f"Scanned: {reporter.files_scanned} files under {root}")
        print(reporter.render_human())

    # Return non-zero if any errors
    return 1 if reporter.errors else 0


if __name__ == "__main__":
    sys.exit(main())
