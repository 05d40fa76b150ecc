from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import numpy as np

FILE_PATTERN = "%Y-%m-%d-%H-%M-%S"
FILE_EXT = ".png"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, eq=False)
class MotionEvent:
    frame: np.ndarray
    timestamp: datetime

    def __post_init__(self) -> None:
        if self.frame is None or self.frame.size == 0:
            raise ValueError("MotionEvent requires a non-empty frame")


def snapshot(frame: np.ndarray) -> np.ndarray:
    """Copy a frame out of pipeline-owned memory and make it read-only."""
    out = np.array(frame, copy=True)
    out.flags.writeable = False
    return out


def image_name_for(event: MotionEvent) -> str:
    return event.timestamp.strftime(FILE_PATTERN) + FILE_EXT


def image_path_for(event: MotionEvent, data_dir: str | Path) -> Path:
    return Path(data_dir) / image_name_for(event)


def format_timestamp(event: MotionEvent) -> str:
    return event.timestamp.strftime(DATE_FORMAT)
