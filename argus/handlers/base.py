from __future__ import annotations

from typing import Protocol, runtime_checkable

from argus.core.events import MotionEvent


@runtime_checkable
class MotionHandler(Protocol):
    """Capability every motion handler provides.

    ``handle`` is called from a dispatcher thread, possibly at the same time
    as other handlers for the same or another event. It must not mutate the
    event and raises ``HandlerError`` on failure.
    """

    name: str

    def handle(self, event: MotionEvent) -> None:
        ...
