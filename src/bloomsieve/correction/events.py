"""Events reported by the correction engine to an optional observer.

An observer is any callable ``observer(event, details)`` where ``event`` is
one of the :class:`CorrectionEvents` names and ``details`` a dict.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

Observer = Callable[[str, Dict[str, Any]], None]


class CorrectionEvents:
    """Canonical event names to avoid typos."""

    MANUAL_THRESHOLD = "manual_threshold"
    CACHE_HIT = "cache_hit"
    CACHE_MISS = "cache_miss"
    COMPUTED = "computed"
    STORED = "stored"
    STORE_SKIPPED = "store_skipped"
    STORE_FAILED = "store_failed"
    UNDERFLOW = "underflow"
    NO_TOLERANCE = "no_tolerance"


def notify(observer: Optional[Observer], event: str, **details: Any) -> None:
    if observer is not None:
        observer(event, details)


class EventRecorder:
    """Observer that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Dict[str, Any]]] = []

    def __call__(self, event: str, details: Dict[str, Any]) -> None:
        self.events.append((event, details))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def count(self, event: str) -> int:
        return self.names.count(event)
