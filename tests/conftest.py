from __future__ import annotations

from datetime import datetime
from typing import List, Optional

import numpy as np
import pytest

from argus.core.errors import DeviceError
from argus.core.events import MotionEvent


class FakeSource:
    """Frame source fed from a script; an exception in the script is raised by read()."""

    def __init__(self, frames: Optional[List] = None) -> None:
        self.frames = list(frames or [])
        self.opened_with: Optional[str] = None
        self.closed = 0

    def open(self, device_id: str) -> None:
        self.opened_with = device_id

    def read(self):
        if not self.frames:
            raise DeviceError("video capture device is closed")
        item = self.frames.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed += 1


class FakeModel:
    """Stands in for MOG2: returns scripted foreground masks."""

    def __init__(self, masks: List[np.ndarray]) -> None:
        self.masks = list(masks)
        self.applied = 0

    def apply(self, frame):
        self.applied += 1
        return self.masks.pop(0)


def blank_mask(h: int = 120, w: int = 160) -> np.ndarray:
    return np.zeros((h, w), dtype=np.uint8)


def mask_with_block(x: int, y: int, size: int, h: int = 120, w: int = 160) -> np.ndarray:
    m = blank_mask(h, w)
    m[y:y + size, x:x + size] = 255
    return m


def make_frame(h: int = 120, w: int = 160) -> np.ndarray:
    f = np.zeros((h, w, 3), dtype=np.uint8)
    f[10:20, 10:20] = (0, 128, 255)
    return f


@pytest.fixture
def frame() -> np.ndarray:
    return make_frame()


@pytest.fixture
def event(frame) -> MotionEvent:
    return MotionEvent(frame=frame, timestamp=datetime(2024, 3, 9, 14, 5, 7))
