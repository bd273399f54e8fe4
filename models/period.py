"""Abschnitte eines Unterrichtstages (Tutor, Stunden, Pausen)."""

from enum import Enum
from typing import Optional


class PeriodOfDay(Enum):
    """Geordnete Abschnitte eines aktiven Tages.

    Die Reihenfolge der Definition ist die chronologische Reihenfolge.
    Welche Abschnitte es tatsächlich gibt und wann sie liegen, legt das
    Zeitraster fest (grid.schema.PeriodSchema).
    """

    TUTOR = "tutor"
    FIRST = "first"
    SECOND = "second"
    BREAK = "break"
    THIRD = "third"
    FOURTH = "fourth"
    LUNCH = "lunch"
    FIFTH = "fifth"

    @classmethod
    def from_ordinal(cls, n: int) -> Optional["PeriodOfDay"]:
        """Abschnitt an Position n im vollständigen (8er-)Raster."""
        if isinstance(n, bool) or not isinstance(n, int):
            return None
        if not 0 <= n < len(_ORDER):
            return None
        return _ORDER[n]

    def to_ordinal(self) -> int:
        """Position im vollständigen (8er-)Raster."""
        return _ORDER.index(self)

    @classmethod
    def from_code(cls, code: str) -> Optional["PeriodOfDay"]:
        return _PERIODS_BY_CODE.get(code)

    @property
    def code(self) -> str:
        """Kürzel in der Notation: 1-5 für Unterrichtsstunden, T/B/L sonst."""
        return _CODES[self]

    @property
    def is_academic(self) -> bool:
        """True für die fünf Unterrichtsstunden."""
        return self.code.isdigit()

    def __str__(self) -> str:
        return self.value.capitalize()


_ORDER = tuple(PeriodOfDay)

_CODES = {
    PeriodOfDay.TUTOR: "T",
    PeriodOfDay.FIRST: "1",
    PeriodOfDay.SECOND: "2",
    PeriodOfDay.BREAK: "B",
    PeriodOfDay.THIRD: "3",
    PeriodOfDay.FOURTH: "4",
    PeriodOfDay.LUNCH: "L",
    PeriodOfDay.FIFTH: "5",
}
_PERIODS_BY_CODE = {code: p for p, code in _CODES.items()}
