# Project: weather-or-not
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
models.py — Immutable records passed through the range pipeline.

Everything here is created fresh for one range fetch and handed to the
caller once the fetch returns. Nothing is shared between requests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, timedelta


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Place:
    """A named location, as resolved from a place-name search."""

    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class HourlyPayload:
    """Decoded NASA POWER hourly grid for one day.

    Both mappings are keyed by ``YYYYMMDDHH``. Values of -999 mean
    "no data" and are filtered out later, not here.
    """

    temperature: Mapping[str, float] = field(default_factory=dict)
    precipitation: Mapping[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class HourlySample:
    hour: int
    temperature_c: float
    precipitation_mm: float
    is_prediction: bool = False


@dataclass(frozen=True)
class HistoricalSample:
    """One year's reading for a single hour of the target calendar day."""

    year: int
    temperature_c: float
    precipitation_mm: float


@dataclass(frozen=True)
class Prediction:
    temperature_c: float
    precipitation_mm: float


@dataclass(frozen=True)
class DailyRecord:
    """One day of hourly samples plus its daily aggregates.

    Build with from_hours() so the hour ordering and the non-empty
    invariant are enforced.
    """

    date: date
    hours: tuple[HourlySample, ...]
    is_prediction: bool

    @classmethod
    def from_hours(
        cls,
        day: date,
        hours: Sequence[HourlySample],
        is_prediction: bool,
    ) -> DailyRecord:
        """Create a record with hours sorted ascending.

        Raises:
            ValueError: If hours is empty. An empty day has no record.
        """
        if not hours:
            raise ValueError(f"No hourly samples for {day.isoformat()}")
        ordered = tuple(sorted(hours, key=lambda h: h.hour))
        return cls(date=day, hours=ordered, is_prediction=is_prediction)

    @property
    def avg_temperature_c(self) -> float:
        return sum(h.temperature_c for h in self.hours) / len(self.hours)

    @property
    def total_precipitation_mm(self) -> float:
        return sum(h.precipitation_mm for h in self.hours)


@dataclass(frozen=True)
class RangeResult:
    """Days resolved for a range request, ascending by date.

    May hold fewer days than requested when some days had no data.
    """

    coordinate: Coordinate
    start_date: date
    requested_days: int
    days: tuple[DailyRecord, ...]

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DailyRecord]:
        return iter(self.days)

    def __getitem__(self, index: int) -> DailyRecord:
        return self.days[index]

    @property
    def requested_dates(self) -> list[date]:
        return [self.start_date + timedelta(days=i) for i in range(self.requested_days)]

    @property
    def missing_dates(self) -> list[date]:
        present = {d.date for d in self.days}
        return [d for d in self.requested_dates if d not in present]
