"""Event bus for loose-coupled change notification.

Provides a lightweight, synchronous publish/subscribe system that lets the
store tell its readers about changes without knowing who they are.

Usage::

    from memories.core.events import EventBus, Event, MEMORIES_CHANGED

    bus = EventBus()

    def refresh(event: Event) -> None:
        print(f"{event.payload['action']}: {event.payload['count']} memories")

    bus.on(MEMORIES_CHANGED, refresh)
    bus.emit(Event(name=MEMORIES_CHANGED, payload={"action": "add", "count": 1}, source="store"))
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time
from typing import Any

from loguru import logger

# ---------------------------------------------------------------------------
# Well-known event names
# ---------------------------------------------------------------------------

MEMORIES_LOADED = "memories.loaded"
MEMORIES_CHANGED = "memories.changed"


# ---------------------------------------------------------------------------
# Event model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Event:
    """An immutable event that flows through the bus."""

    name: str
    payload: dict[str, Any] = field(default_factory=dict)
    timestamp: float = field(default_factory=time)
    source: str = ""


Hook = Callable[[Event], None]


# ---------------------------------------------------------------------------
# EventBus
# ---------------------------------------------------------------------------


class EventBus:
    """Simple synchronous pub/sub event bus."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[Hook]] = defaultdict(list)

    def on(self, event_name: str, hook: Hook) -> None:
        """Register *hook* for a specific event name."""
        self._hooks[event_name].append(hook)

    def off(self, event_name: str, hook: Hook) -> None:
        """Unregister *hook* from a specific event name."""
        try:
            self._hooks[event_name].remove(hook)
        except ValueError:
            pass

    def emit(self, event: Event) -> None:
        """Run every hook registered for *event* before returning.

        A failing hook is logged and skipped; the remaining hooks still run.
        """
        hooks = list(self._hooks.get(event.name, []))
        for hook in hooks:
            try:
                hook(event)
            except Exception as exc:
                logger.warning(f"Event hook failed for {event.name}: {exc}")
