from __future__ import annotations

from argus.core.events import MotionEvent, format_timestamp
from argus.utils.logger import get_logger


class ConsoleHandler:
    name = "console"

    def __init__(self) -> None:
        self.log = get_logger("handlers.console")

    def handle(self, event: MotionEvent) -> None:
        self.log.info(f"Motion detected at {format_timestamp(event)}")
