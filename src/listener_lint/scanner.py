"""
listener_lint — File scanning and source loading.

Handles:
- Directory walking with exclusions
- Source file loading
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .config import LintConfig, should_exclude_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A loaded source file with content."""
    path: Path
    text: str
    lines: list[str]


def load_source(path: Path) -> SourceFile:
    """Load a single source file."""
    text = path.read_text(encoding="utf-8", errors="replace")
    return SourceFile(path=path, text=text, lines=text.splitlines())


def source_from_text(text: str, path: Path = Path("<string>")) -> SourceFile:
    """Wrap in-memory text as a SourceFile."""
    return SourceFile(path=path, text=text, lines=text.splitlines())


def is_js_file(cfg: LintConfig, path: Path) -> bool:
    return path.suffix.lower() in cfg.js_exts


def iter_files(cfg: LintConfig) -> Iterator[Path]:
    """Iterate over all JavaScript files under root (or explicit list)."""
    if cfg.explicit_files is not None:
        for path in cfg.explicit_files:
            if path.is_file():
                yield path
            else:
                logger.warning("not a file, skipping: %s", path)
        return

    for path in sorted(cfg.root.rglob("*")):
        if not path.is_file():
            continue
        if should_exclude_path(cfg, path.relative_to(cfg.root)):
            continue
        if is_js_file(cfg, path):
            yield path


def get_line(lines: list[str], line_no: int) -> str:
    """Get line by 1-based line number."""
    if line_no <= 0 or line_no > len(lines):
        return ""
    return lines[line_no - 1]
