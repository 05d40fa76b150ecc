from __future__ import annotations

from typing import Optional

import cv2
import numpy as np

from argus.core.errors import DeviceError
from argus.utils.logger import get_logger

log = get_logger("ingest")


def _capture_arg(device_id: str):
    s = str(device_id).strip()
    return int(s) if s.isdigit() else s


class FrameSource:
    def __init__(self) -> None:
        self._cap: Optional[cv2.VideoCapture] = None

    @property
    def is_open(self) -> bool:
        return self._cap is not None

    def open(self, device_id: str) -> None:
        cap = cv2.VideoCapture(_capture_arg(device_id))
        if not cap.isOpened():
            cap.release()
            raise DeviceError(f"Cannot open video capture device: {device_id}")
        self._cap = cap

    def read(self) -> Optional[np.ndarray]:
        if self._cap is None:
            raise DeviceError("video capture device is not open")
        ok, frame = self._cap.read()
        if not ok:
            raise DeviceError("video capture device is closed")
        if frame is None or frame.size == 0:
            return None
        return frame

    def close(self) -> None:
        cap, self._cap = self._cap, None
        if cap is None:
            return
        try:
            cap.release()
        except cv2.error as e:
            log.warning(f"Error releasing capture device: {e}")
