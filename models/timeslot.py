"""Datenmodell für einen Zeitslot im zweiwöchigen Raster."""

from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Optional, Union

from models.period import PeriodOfDay
from models.ranged import BoundedInt
from models.week import ActiveDay, Week

if TYPE_CHECKING:
    from grid.indexer import SlotIndexer


@total_ordering
@dataclass(frozen=True)
class TimeSlot:
    """Repräsentiert einen adressierbaren Abschnitt im Zweiwochenraster.

    Kombination aus Woche, Wochentag und Tagesabschnitt. Unabhängig vom
    konkreten Durchlauf (I5W1MP1 und I1W1MP1 sind derselbe TimeSlot).
    Immutable (frozen=True) damit es als Dict-Key / Set-Element nutzbar ist.
    """

    week: Week
    day: ActiveDay
    period: PeriodOfDay

    def __post_init__(self):
        for name, expected in (("week", Week), ("day", ActiveDay),
                               ("period", PeriodOfDay)):
            value = getattr(self, name)
            if not isinstance(value, expected):
                raise TypeError(
                    f"TimeSlot.{name} muss {expected.__name__} sein, "
                    f"nicht {value!r}")

    def _sort_key(self) -> tuple[int, int, int]:
        return (self.week.to_ordinal(), self.day.to_ordinal(),
                self.period.to_ordinal())

    def __lt__(self, other: "TimeSlot") -> bool:
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    @property
    def token(self) -> str:
        """Notation, z.B. "W2RP3" für Woche 2, Donnerstag, 3. Stunde."""
        return f"W{self.week.digit}{self.day.letter}P{self.period.code}"

    def index(self, indexer: Optional["SlotIndexer"] = None) -> BoundedInt:
        """Laufender Index im Durchlauf (Standard: 8er-Raster)."""
        from grid.indexer import canonical_indexer
        return (indexer or canonical_indexer()).encode(self)

    @classmethod
    def with_index(
        cls,
        index: Union[BoundedInt, int],
        indexer: Optional["SlotIndexer"] = None,
    ) -> Optional["TimeSlot"]:
        """TimeSlot zu einem Index, None außerhalb des Bereichs."""
        from grid.indexer import canonical_indexer
        return (indexer or canonical_indexer()).decode(index)

    def __repr__(self) -> str:
        return f"TimeSlot({self.token})"

    def __str__(self) -> str:
        return self.token

    @property
    def label(self) -> str:
        """Lesbare Bezeichnung, z.B. "W2 Do 3."."""
        if self.period.is_academic:
            return f"W{self.week.digit} {self.day.short_name} {self.period.code}."
        return f"W{self.week.digit} {self.day.short_name} {self.period}"
