"""Precipitation time-series models for the rain graph."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class PrecipitationSeries:
    """Fixed-width precipitation slots in mm.

    Slot i covers [start + i*slot_width, start + (i+1)*slot_width).
    """

    start: datetime
    slot_width: timedelta
    values: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    def slots(self) -> Iterator[tuple[datetime, datetime, float]]:
        """Yield (slot_start, slot_end, mm) in order."""
        for i, mm in enumerate(self.values):
            slot_start = self.start + i * self.slot_width
            yield slot_start, slot_start + self.slot_width, mm

    @property
    def end(self) -> datetime:
        return self.start + len(self.values) * self.slot_width


@dataclass(frozen=True)
class TwoResolutionGraph:
    """A 10-minute track for the near term followed by a 60-minute track.

    The low-resolution start is normally at or after the end of the
    high-resolution coverage, but nothing enforces that.
    """

    high_res: PrecipitationSeries | None = None
    low_res: PrecipitationSeries | None = None

    def series(self) -> Iterator[PrecipitationSeries]:
        """Present series in scan order, high resolution first."""
        for s in (self.high_res, self.low_res):
            if s is not None:
                yield s

    @property
    def has_high_res(self) -> bool:
        return self.high_res is not None and len(self.high_res) > 0
