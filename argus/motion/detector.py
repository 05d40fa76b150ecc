from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

import cv2
import numpy as np

from argus.core.errors import DeviceError
from argus.core.events import MotionEvent, snapshot
from argus.ingest.cam_reader import FrameSource
from argus.motion.bg_subtractor import BGSubResult, BGSubtractor
from argus.utils.image_ops import draw_regions, put_status, to_bgr
from argus.utils.logger import get_logger

WINDOW_NAME = "Motion Detector"


class MotionDetectionPipeline:
    """Turns raw frames from a capture device into motion events.

    The background model lives from ``open`` to ``close``; re-opening the
    device starts a fresh model. Only device read failures raise
    ``DeviceError``. Image processing problems count as "no motion".
    """

    def __init__(
        self,
        source_factory: Callable[[], FrameSource] = FrameSource,
        subtractor_factory: Callable[[], BGSubtractor] = BGSubtractor,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.source_factory = source_factory
        self.subtractor_factory = subtractor_factory
        self.clock = clock
        self.log = get_logger("detector")

        self.source: Optional[FrameSource] = None
        self.bgsub: Optional[BGSubtractor] = None
        self._window_open = False

    def open(self, device_id: str) -> None:
        if self.source is not None:
            self.close()
        source = self.source_factory()
        source.open(device_id)
        self.source = source
        self.bgsub = self.subtractor_factory()
        self.log.info(f"Opened capture device {device_id}")

    def process(self, show_video: bool, min_area: float) -> Optional[MotionEvent]:
        if self.source is None or self.bgsub is None:
            raise DeviceError("video capture device is not open")

        frame = self.source.read()
        if frame is None:
            return None

        try:
            res = self.bgsub.compute(frame, min_area)
        except (cv2.error, ValueError) as e:
            self.log.debug(f"Frame skipped, processing failed: {e}")
            return None

        if show_video:
            self._show(frame, res)

        if not res.motion:
            return None
        return MotionEvent(frame=snapshot(frame), timestamp=self.clock())

    def _show(self, frame: np.ndarray, res: BGSubResult) -> None:
        try:
            vis = to_bgr(frame).copy()
            draw_regions(vis, res.boxes)
            put_status(vis, res.motion)
            cv2.imshow(WINDOW_NAME, vis)
            cv2.waitKey(1)
            self._window_open = True
        except cv2.error as e:
            self.log.debug(f"Preview unavailable: {e}")

    def close(self) -> None:
        source, self.source = self.source, None
        bgsub, self.bgsub = self.bgsub, None

        if source is not None:
            source.close()
        if bgsub is not None:
            bgsub.release()
        if self._window_open:
            self._window_open = False
            try:
                cv2.destroyWindow(WINDOW_NAME)
            except cv2.error as e:
                self.log.warning(f"Error closing preview window: {e}")
