from __future__ import annotations

import threading
import time
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from argus.core.config import ArgusConfig
from argus.core.errors import DeviceError
from argus.handlers.base import MotionHandler
from argus.handlers.registry import build_handlers
from argus.motion.detector import MotionDetectionPipeline
from argus.motion.gate import EventGate
from argus.service.dispatcher import Dispatcher
from argus.utils.logger import get_logger


class Runner:
    """Drives detection, debounce and dispatch from a single control thread.

    ``gate`` is read and written only here. Dispatched handlers run on their
    own threads and never touch it; the running event count is logged right
    after admission instead of from handler threads.
    """

    def __init__(
        self,
        cfg: ArgusConfig,
        pipeline: MotionDetectionPipeline,
        dispatcher: Optional[Dispatcher] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.cfg = cfg
        self.pipeline = pipeline
        self.dispatcher = dispatcher or Dispatcher()
        self.clock = clock
        self.log = get_logger("runner")

        self.handlers: List[MotionHandler] = []
        self.gate = EventGate(timedelta(seconds=cfg.min_interval), clock())

    @property
    def event_count(self) -> int:
        return self.gate.event_count

    def init(self) -> None:
        self.pipeline.open(self.cfg.device_id)
        try:
            self.handlers = build_handlers(self.cfg.handlers, self.cfg)
        except Exception:
            self.pipeline.close()
            raise
        self.gate.reset(self.clock())

    def run_once(self) -> bool:
        event = self.pipeline.process(self.cfg.show_video, self.cfg.min_area)
        if event is None:
            return False
        if not self.gate.admit(event.timestamp):
            return False

        self.log.info(f"{self.gate.event_count} motion events handled")
        self.dispatcher.dispatch(event, self.handlers)
        return True

    def run(self, stop: threading.Event) -> None:
        period = self.cfg.tick_seconds
        next_tick = time.monotonic()
        while not stop.wait(max(0.0, next_tick - time.monotonic())):
            try:
                self.run_once()
            except DeviceError as e:
                self.log.error(f"Run error: {e}")
            except Exception:
                self.log.exception("Unexpected error in polling tick")

            next_tick += period
            now = time.monotonic()
            if next_tick < now:
                # fell behind: skip missed ticks rather than bursting
                next_tick = now

    def close(self) -> None:
        self.pipeline.close()
