from __future__ import annotations

from datetime import datetime, timedelta


class EventGate:
    """Leading-edge debounce over event timestamps.

    A candidate is admitted only when it is strictly later than ``threshold``;
    admission moves ``threshold`` to ``candidate + min_interval``. Only the
    control loop may call ``admit``.
    """

    def __init__(self, min_interval: timedelta, start: datetime) -> None:
        self.min_interval = min_interval
        self._threshold = start
        self._event_count = 0

    @property
    def threshold(self) -> datetime:
        return self._threshold

    @property
    def event_count(self) -> int:
        return self._event_count

    def reset(self, start: datetime) -> None:
        self._threshold = start
        self._event_count = 0

    def admit(self, ts: datetime) -> bool:
        if ts <= self._threshold:
            return False
        self._threshold = ts + self.min_interval
        self._event_count += 1
        return True
