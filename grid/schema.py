"""Tagesraster als austauschbares Schema-Objekt + Uhrzeit-Klassifikation.

Ein PeriodSchema legt fest, welche Abschnitte ein Tag hat (und damit
PeriodsPerDay) und welches halboffene Zeitintervall [start, end) zu jedem
Abschnitt gehört. Index-Arithmetik und Notation hängen nur vom Schema ab,
nicht von einem fest verdrahteten Raster.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from config.schema import TimeGridConfig, minutes_to_clock
from models.period import PeriodOfDay
from models.ranged import Hour, Minute, MinuteOfDay

logger = logging.getLogger(__name__)


def minutes_since_midnight(time) -> Optional[MinuteOfDay]:
    """Minuten seit Mitternacht für ein Objekt mit hour/minute.

    Sekunden werden ignoriert (08:49:59 → 529). None bei ungültigen Werten.
    """
    hour = Hour.new(getattr(time, "hour", None))
    minute = Minute.new(getattr(time, "minute", None))
    if hour is None or minute is None:
        return None
    return MinuteOfDay(hour.get() * 60 + minute.get())


@dataclass(frozen=True)
class PeriodInterval:
    """Halboffenes Intervall [start, end) in Minuten seit Mitternacht."""

    period: PeriodOfDay
    start: int
    end: int

    def contains(self, minutes: int) -> bool:
        return self.start <= minutes < self.end

    @property
    def start_time(self) -> str:
        return minutes_to_clock(self.start)

    @property
    def end_time(self) -> str:
        return minutes_to_clock(self.end)

    def __str__(self) -> str:
        return f"{self.start_time}–{self.end_time}"


@dataclass(frozen=True)
class PeriodSchema:
    """Geordnete Abschnitte eines Tages mit ihren Zeitintervallen.

    Die Intervalle sind sortiert und überschneidungsfrei (geprüft durch
    TimeGridConfig). to_ordinal/from_ordinal sind die einzige Stelle, an der
    die Index-Arithmetik die Abschnitte berührt.
    """

    name: str
    intervals: tuple[PeriodInterval, ...]

    @classmethod
    def from_config(cls, config: TimeGridConfig) -> "PeriodSchema":
        intervals = tuple(
            PeriodInterval(p.period, p.start_minutes, p.end_minutes)
            for p in config.periods
        )
        logger.debug(
            f"Schema '{config.name}': {len(intervals)} Abschnitte "
            f"({', '.join(i.period.value for i in intervals)})"
        )
        return cls(name=config.name, intervals=intervals)

    @property
    def periods(self) -> tuple[PeriodOfDay, ...]:
        return tuple(i.period for i in self.intervals)

    @property
    def periods_per_day(self) -> int:
        return len(self.intervals)

    def __contains__(self, period: PeriodOfDay) -> bool:
        return period in self.periods

    def to_ordinal(self, period: PeriodOfDay) -> int:
        """Position des Abschnitts im Schema.

        ValueError wenn der Abschnitt in diesem Schema nicht vorkommt.
        """
        for ordinal, interval in enumerate(self.intervals):
            if interval.period is period:
                return ordinal
        raise ValueError(
            f"Abschnitt {period.value} gehört nicht zum Raster '{self.name}'")

    def from_ordinal(self, n: int) -> Optional[PeriodOfDay]:
        if isinstance(n, bool) or not isinstance(n, int):
            return None
        if not 0 <= n < len(self.intervals):
            return None
        return self.intervals[n].period

    def interval(self, period: PeriodOfDay) -> Optional[PeriodInterval]:
        for interval in self.intervals:
            if interval.period is period:
                return interval
        return None

    def classify_minutes(self, minutes: int) -> Optional[PeriodOfDay]:
        """Abschnitt, dessen Intervall die Minute enthält, sonst None."""
        # Letztes Intervall mit start <= minutes; das Ende ist exklusiv
        pos = bisect_right([i.start for i in self.intervals], int(minutes)) - 1
        if pos < 0:
            return None
        interval = self.intervals[pos]
        if not interval.contains(int(minutes)):
            return None
        return interval.period

    def classify(self, time) -> Optional[PeriodOfDay]:
        """Abschnitt zu einer Uhrzeit (Objekt mit hour/minute), sonst None."""
        minutes = minutes_since_midnight(time)
        if minutes is None:
            return None
        return self.classify_minutes(minutes.get())


@lru_cache(maxsize=None)
def canonical_schema() -> PeriodSchema:
    """Vollständiges Raster mit acht Abschnitten (Tutor bis 5. Stunde)."""
    from config.defaults import default_time_grid
    return PeriodSchema.from_config(default_time_grid())


@lru_cache(maxsize=None)
def reduced_schema() -> PeriodSchema:
    """Raster mit den fünf Unterrichtsstunden."""
    from config.defaults import reduced_time_grid
    return PeriodSchema.from_config(reduced_time_grid())
