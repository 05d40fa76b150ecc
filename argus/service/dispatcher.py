from __future__ import annotations

import threading
from typing import List, Sequence

from argus.core.events import MotionEvent, format_timestamp
from argus.core.errors import HandlerError
from argus.handlers.base import MotionHandler
from argus.utils.logger import get_logger


def handler_name(handler: MotionHandler) -> str:
    return getattr(handler, "name", type(handler).__name__)


class Dispatcher:
    """Fire-and-forget fan-out of one event to every handler.

    Each handler runs on its own daemon thread. Threads are never joined by
    the control loop and are abandoned at process exit, so delivery is
    best-effort.
    """

    def __init__(self) -> None:
        self.log = get_logger("dispatch")

    def dispatch(self, event: MotionEvent, handlers: Sequence[MotionHandler]) -> List[threading.Thread]:
        threads: List[threading.Thread] = []
        for h in handlers:
            t = threading.Thread(
                target=self._invoke,
                args=(h, event),
                name=f"argus-{handler_name(h)}",
                daemon=True,
            )
            t.start()
            threads.append(t)
        return threads

    def _invoke(self, handler: MotionHandler, event: MotionEvent) -> None:
        name = handler_name(handler)
        try:
            handler.handle(event)
        except HandlerError as e:
            self.log.error(f"Handler {name} failed for event at {format_timestamp(event)}: {e}")
        except Exception:
            self.log.exception(f"Handler {name} crashed for event at {format_timestamp(event)}")
