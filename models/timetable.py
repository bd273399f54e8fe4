"""Stundenplan als Liste von Aktivitäten, adressiert über den Slot-Index."""

from datetime import datetime
from typing import TYPE_CHECKING, Iterator, Optional, Union

from models.activity import Activity, ActivityKind
from models.period import PeriodOfDay
from models.timeslot import TimeSlot
from models.week import ActiveDay, Week

if TYPE_CHECKING:
    from grid.indexer import SlotIndexer

# Abschnitte, die unabhängig vom Stundenplan immer gleich belegt sind
_FIXED_ACTIVITIES = {
    PeriodOfDay.TUTOR: ActivityKind.REGISTRATION,
    PeriodOfDay.BREAK: ActivityKind.BREAK,
    PeriodOfDay.LUNCH: ActivityKind.BREAK,
}


class Timetable:
    """Ein Durchlauf des Zweiwochenplans.

    Jeder Slot-Index des Rasters hat genau einen Platz (leer = None).
    Slots können als TimeSlot oder als Token ("W1MP2") angegeben werden.
    """

    def __init__(self, indexer: Optional["SlotIndexer"] = None):
        from grid.indexer import canonical_indexer
        self.indexer = indexer or canonical_indexer()
        self._entries: list[Optional[Activity]] = [None] * len(self.indexer)

    @classmethod
    def with_fixed_slots(cls, indexer: Optional["SlotIndexer"] = None) -> "Timetable":
        """Plan mit vorbelegtem Tutor (Registration), Break und Lunch."""
        timetable = cls(indexer)
        for slot in timetable.indexer.slots():
            kind = _FIXED_ACTIVITIES.get(slot.period)
            if kind is not None:
                timetable.set(slot, Activity(kind=kind))
        return timetable

    def _slot(self, key: Union[TimeSlot, str]) -> TimeSlot:
        if isinstance(key, TimeSlot):
            return key
        from grid.notation import codec_for
        slot = codec_for(self.indexer).decode(key)
        if slot is None:
            raise KeyError(f"Ungültiges Token: {key!r}")
        return slot

    def get(self, key: Union[TimeSlot, str]) -> Optional[Activity]:
        return self._entries[self.indexer.encode(self._slot(key))]

    def set(self, key: Union[TimeSlot, str], activity: Activity) -> None:
        """Belegt einen Slot; zum Leeren clear() verwenden."""
        if not isinstance(activity, Activity):
            raise TypeError(
                f"Erwartet Activity, nicht {activity!r} (zum Leeren: clear())")
        self._entries[self.indexer.encode(self._slot(key))] = activity

    def clear(self, key: Union[TimeSlot, str]) -> None:
        self._entries[self.indexer.encode(self._slot(key))] = None

    def __getitem__(self, key: Union[TimeSlot, str]) -> Optional[Activity]:
        return self.get(key)

    def __setitem__(self, key: Union[TimeSlot, str], activity: Activity) -> None:
        self.set(key, activity)

    def at(self, week: Week, moment: datetime) -> Optional[Activity]:
        """Aktivität zu einem Zeitpunkt, None außerhalb der Abschnitte."""
        from grid.clock import resolve_datetime
        slot = resolve_datetime(week, moment, self.indexer.schema)
        if slot is None:
            return None
        return self.get(slot)

    def day(self, week: Week, day: ActiveDay) -> list[tuple[TimeSlot, Optional[Activity]]]:
        """Alle Abschnitte eines Tages in chronologischer Reihenfolge."""
        return [
            (slot, activity) for slot, activity in self.items()
            if slot.week is week and slot.day is day
        ]

    def items(self) -> Iterator[tuple[TimeSlot, Optional[Activity]]]:
        """(TimeSlot, Aktivität) in Index-Reihenfolge."""
        for slot, activity in zip(self.indexer.slots(), self._entries):
            yield slot, activity

    def filled_count(self) -> int:
        return sum(1 for a in self._entries if a is not None)

    def __len__(self) -> int:
        return len(self._entries)
