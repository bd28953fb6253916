"""Time intervals expressed in seconds, with an optional local offset."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeInterval:
    """A half-open span of time ``[time_start, time_end)`` in local seconds.

    ``seconds_offset`` is the local offset from UTC, in seconds.
    """

    time_start: int
    time_end: int
    seconds_offset: int = 0

    def break_down(self, per_duration: int) -> list[TimeInterval]:
        """Split the interval into consecutive slots of ``per_duration`` seconds.

        The last slot may be shorter. A non-positive duration yields no slots.
        """
        if per_duration <= 0:
            return []

        slots = []
        start = self.time_start
        while start < self.time_end:
            end = min(start + per_duration, self.time_end)
            slots.append(TimeInterval(start, end))
            start = end
        return slots

    def utc_start(self) -> int:
        """Start of the interval expressed in UTC seconds."""
        return self.time_start - self.seconds_offset

    def utc_end(self) -> int:
        """End of the interval expressed in UTC seconds."""
        return self.time_end - self.seconds_offset