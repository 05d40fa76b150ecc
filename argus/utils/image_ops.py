from __future__ import annotations

from typing import Iterable, Tuple

import cv2
import numpy as np

RED = (0, 0, 255)
GREEN = (0, 255, 0)


def to_bgr(frame: np.ndarray) -> np.ndarray:
    if frame.ndim == 2:
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
    return frame


def draw_regions(frame: np.ndarray, boxes: Iterable[Tuple[int, int, int, int]]) -> np.ndarray:
    for x, y, w, h in boxes:
        cv2.rectangle(frame, (x, y), (x + w, y + h), RED, 2)
    return frame


def put_status(frame: np.ndarray, motion: bool) -> np.ndarray:
    status, color = ("Motion detected", RED) if motion else ("Ready", GREEN)
    cv2.putText(frame, status, (10, 20), cv2.FONT_HERSHEY_PLAIN, 1.2, color, 2)
    return frame
