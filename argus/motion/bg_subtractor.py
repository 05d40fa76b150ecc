from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Tuple

import cv2
import numpy as np

# Foreground intensity cut applied to the model's mask (MOG2 marks shadows as 127).
BINARY_THRESHOLD = 25
DILATE_KSIZE = 3

Box = Tuple[int, int, int, int]


@dataclass(slots=True)
class BGSubResult:
    fgmask: np.ndarray
    boxes: List[Box] = field(default_factory=list)
    areas: List[float] = field(default_factory=list)

    @property
    def motion(self) -> bool:
        return len(self.boxes) > 0


def find_motion_regions(mask: np.ndarray, min_area: float) -> Tuple[List[Box], List[float]]:
    """Outer contours of ``mask`` whose area is strictly greater than ``min_area``."""
    found = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    contours = found[0] if len(found) == 2 else found[1]

    boxes: List[Box] = []
    areas: List[float] = []
    for c in contours:
        area = cv2.contourArea(c)
        if area <= min_area:
            continue
        x, y, w, h = cv2.boundingRect(c)
        boxes.append((int(x), int(y), int(w), int(h)))
        areas.append(float(area))
    return boxes, areas


class BGSubtractor:
    """Adaptive background model plus the mask cleanup that feeds contour search.

    The model is updated by every frame passed to ``compute`` whether or not
    motion is reported.
    """

    def __init__(
        self,
        model_factory: Callable[[], object] = cv2.createBackgroundSubtractorMOG2,
    ) -> None:
        self.sub = model_factory()
        self.kernel = cv2.getStructuringElement(cv2.MORPH_RECT, (DILATE_KSIZE, DILATE_KSIZE))

    def compute(self, frame: np.ndarray, min_area: float) -> BGSubResult:
        fg = self.sub.apply(frame)

        _, fg = cv2.threshold(fg, BINARY_THRESHOLD, 255, cv2.THRESH_BINARY)
        fg = cv2.dilate(fg, self.kernel)

        boxes, areas = find_motion_regions(fg, min_area)
        return BGSubResult(fgmask=fg, boxes=boxes, areas=areas)

    def release(self) -> None:
        self.sub = None
        self.kernel = None
