from __future__ import annotations

from pathlib import Path

import cv2

from argus.core.errors import HandlerError
from argus.core.events import MotionEvent, image_path_for
from argus.utils.logger import get_logger


class ArchiveHandler:
    """Saves the event frame as a PNG named after the event timestamp."""

    name = "archive"

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.log = get_logger("handlers.archive")

    def handle(self, event: MotionEvent) -> None:
        path = image_path_for(event, self.data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            ok = cv2.imwrite(str(path), event.frame)
        except (OSError, cv2.error) as e:
            raise HandlerError(f"cannot save motion capture to {path}: {e}") from e
        if not ok:
            raise HandlerError(f"cannot save motion capture to {path}")
        self.log.info(f"Motion capture saved to {path}")
