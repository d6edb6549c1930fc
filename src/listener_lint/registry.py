"""
listener_lint — Listener registry.

Accumulates CallObservations for one scan. Keys are
(kind, target_key, event_name); a later observation for the same key
replaces the earlier one but keeps its original position, so iteration
follows first-seen order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .listeners import (
    CallObservation,
    EventName,
    HandlerDescriptor,
    ListenerKind,
    TargetKey,
)
from .syntax import Location


@dataclass(frozen=True)
class ListenerKey:
    kind: ListenerKind
    target_key: TargetKey
    event_name: EventName


@dataclass(frozen=True)
class ListenerEntry:
    handler: HandlerDescriptor
    location: Location


class ListenerRegistry:
    """Table of the last observed handler per (kind, target, event)."""

    def __init__(self) -> None:
        self._entries: dict[ListenerKey, ListenerEntry] = {}

    def record(self, obs: CallObservation) -> None:
        """Fold one observation in. Last write wins for a repeated key."""
        key = ListenerKey(obs.kind, obs.target_key, obs.event_name)
        self._entries[key] = ListenerEntry(obs.handler, obs.location)

    def lookup(
        self,
        kind: ListenerKind,
        target_key: TargetKey,
        event_name: EventName,
    ) -> Optional[ListenerEntry]:
        return self._entries.get(ListenerKey(kind, target_key, event_name))

    def targets(self, kind: ListenerKind) -> list[TargetKey]:
        """Target keys of one kind, in first-seen order."""
        seen: dict[TargetKey, None] = {}
        for key in self._entries:
            if key.kind is kind:
                seen.setdefault(key.target_key, None)
        return list(seen)

    def events(
        self,
        kind: ListenerKind,
        target_key: TargetKey,
    ) -> Iterator[tuple[EventName, ListenerEntry]]:
        """(event_name, entry) pairs for one target, in first-seen order."""
        for key, entry in self._entries.items():
            if key.kind is kind and key.target_key == target_key:
                yield key.event_name, entry

    def __len__(self) -> int:
        return len(self._entries)
