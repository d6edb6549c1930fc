"""
listener_lint — File watch daemon.

Lints JavaScript files as they are edited, most recent first.
Writes findings to timestamped JSON log files under LintConfig.log_dir.

Usage:
    listener-lint --watch
    listener-lint src/ --watch --interval 1.0
"""

from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from . import __version__
from .config import LintConfig, should_exclude_path
from .reporting import Finding
from .runner import lint_path
from .scanner import is_js_file

logger = logging.getLogger(__name__)


def _get_log_path(log_dir: Path) -> Path:
    """Get timestamped log file path, creating the directory if needed."""
    log_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return log_dir / f"listener_lint_{ts}.json"


class RecentQueue:
    """Thread-safe queue that pops the most recently touched path first."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[str, float] = {}  # path -> last_ts

    def push(self, path: Path, ts: float) -> None:
        p = str(path)
        with self._lock:
            prev = self._items.get(p)
            if prev is None or ts > prev:
                self._items[p] = ts

    def pop_most_recent(self) -> Optional[tuple[Path, float]]:
        with self._lock:
            if not self._items:
                return None
            p, ts = max(self._items.items(), key=lambda kv: kv[1])
            del self._items[p]
            return Path(p), ts

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class JsChangeHandler(FileSystemEventHandler):
    """Queues modified/created JavaScript files."""

    def __init__(self, cfg: LintConfig, queue: RecentQueue) -> None:
        super().__init__()
        self.cfg = cfg
        self.queue = queue

    def _accept(self, path: Path) -> bool:
        if not is_js_file(self.cfg, path):
            return False
        try:
            rel = path.relative_to(self.cfg.root)
        except ValueError:
            return False
        return not should_exclude_path(self.cfg, rel)

    def on_modified(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        p = Path(str(event.src_path))
        if self._accept(p):
            self.queue.push(p, time.time())

    def on_created(self, event: FileSystemEvent) -> None:
        self.on_modified(event)


class JsonLogger:
    """Appends lint results to a JSON log file."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self._lock = threading.Lock()
        self._entries: list[dict[str, Any]] = []
        self._append({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "version": __version__,
        })

    def log_findings(self, path: str, findings: list[Finding]) -> None:
        self._append({
            "type": "lint_result",
            "timestamp": datetime.now().isoformat(),
            "file": path,
            "error_count": sum(1 for f in findings if f.severity == "ERROR"),
            "findings": [asdict(f) for f in findings],
        })

    def _append(self, entry: dict[str, Any]) -> None:
        with self._lock:
            self._entries.append(entry)
            self.log_path.write_text(json.dumps(self._entries, indent=2, default=str))


def run_daemon(cfg: LintConfig, interval: float, debounce_seconds: float) -> int:
    """Run the watch loop until interrupted."""
    log_path = _get_log_path(cfg.log_dir)
    json_log = JsonLogger(log_path)

    queue = RecentQueue()
    observer = Observer()
    observer.schedule(JsChangeHandler(cfg, queue), str(cfg.root), recursive=True)
    observer.start()

    print(f"[listener_lint] watching {cfg.root}")
    print(f"[listener_lint] interval={interval}s debounce={debounce_seconds}s")
    print(f"[listener_lint] logging to: {log_path}")

    last_linted: dict[str, float] = {}

    try:
        while True:
            item = queue.pop_most_recent()
            if item is None:
                time.sleep(interval)
                continue

            path, ts = item
            p = str(path)
            now = time.time()

            # Debounce: requeue so the latest save is still linted
            prev = last_linted.get(p)
            if prev is not None and (now - prev) < debounce_seconds:
                queue.push(path, ts)
                time.sleep(interval)
                continue
            last_linted[p] = now

            findings = lint_path(cfg, path)
            if cfg.errors_only:
                findings = [f for f in findings if f.severity == "ERROR"]
            logger.debug("linted %s (queue=%d)", path, len(queue))
            if findings:
                print(f"\n[listener_lint] {path}")
                for f in findings:
                    print(f"  {f}")
            json_log.log_findings(p, findings)

    except KeyboardInterrupt:
        print("\n[listener_lint] stopping...")
        print(f"[listener_lint] log written to: {log_path}")
    finally:
        observer.stop()
        observer.join()

    return 0
