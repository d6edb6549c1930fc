"""
listener_lint — Configuration.

Runtime configuration and CLI-derived settings.
The rule itself takes no options; for message templates and tags,
see patterns.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _default_log_dir() -> Path:
    return Path.home() / ".listener_lint" / "logs"


@dataclass
class LintConfig:
    """Runtime configuration for listener_lint."""

    root: Path

    # File extensions
    js_exts: tuple[str, ...] = (".js", ".jsx", ".mjs", ".cjs")

    # Directory exclusions
    exclude_dirs: tuple[str, ...] = (
        ".git",
        ".hg",
        ".venv",
        "venv",
        "__pycache__",
        "node_modules",
        "bower_components",
        "dist",
        "build",
        "coverage",
    )

    # Explicit file list (disables directory scan)
    explicit_files: Optional[tuple[Path, ...]] = None

    # Inline waiver suppression
    honor_waivers: bool = True

    # Output settings
    json_output: bool = False
    errors_only: bool = False

    # Watch mode JSON logs
    log_dir: Path = field(default_factory=_default_log_dir)


def should_exclude_path(cfg: LintConfig, path: Path) -> bool:
    """Check if path should be excluded from scanning."""
    return any(d in path.parts for d in cfg.exclude_dirs)


def relpath_str(root: Path, p: Path) -> str:
    """Get relative path as posix string."""
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return p.as_posix()
