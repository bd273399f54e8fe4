"""Umrechnung TimeSlot ⇄ laufender Index innerhalb eines Durchlaufs.

Gemischt-radixe Stellenwertdarstellung mit den Basen
(2 Wochen, 5 Tage, PeriodsPerDay):

    index = week × PeriodsPerWeek + day × PeriodsPerDay + period
"""

import logging
from functools import lru_cache
from typing import Iterator, Optional, Union

from grid.schema import PeriodSchema, canonical_schema, reduced_schema
from models.ranged import BoundedInt
from models.timeslot import TimeSlot
from models.week import ActiveDay, Week

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = len(ActiveDay)
WEEKS_PER_ITERATION = len(Week)


class SlotIndexer:
    """Bijektion zwischen TimeSlot und Index für ein bestimmtes Raster."""

    def __init__(self, schema: PeriodSchema):
        self.schema = schema
        self.periods_per_day = schema.periods_per_day
        self.periods_per_week = self.periods_per_day * DAYS_PER_WEEK
        self.periods_per_iteration = self.periods_per_week * WEEKS_PER_ITERATION
        # Eigener Wertebereich pro Raster: 0..=PeriodsPerIteration-1
        self.index_type = BoundedInt.range(
            0, self.periods_per_iteration - 1, "SlotIndex")

    def encode(self, slot: TimeSlot) -> BoundedInt:
        """Index eines TimeSlots.

        ValueError wenn der Abschnitt nicht zum Raster gehört.
        """
        return self.index_type(
            slot.week.to_ordinal() * self.periods_per_week
            + slot.day.to_ordinal() * self.periods_per_day
            + self.schema.to_ordinal(slot.period)
        )

    def decode(self, index: Union[BoundedInt, int]) -> Optional[TimeSlot]:
        """TimeSlot zu einem Index.

        Für einen index_type-Wert immer erfolgreich. Eine einfache Ganzzahl
        wird über index_type.new geprüft; außerhalb des Bereichs → None.
        """
        if not isinstance(index, self.index_type):
            checked = self.index_type.new(
                index.get() if isinstance(index, BoundedInt) else index)
            if checked is None:
                logger.debug(
                    f"Index {index!r} außerhalb 0..{self.periods_per_iteration - 1}")
                return None
            index = checked

        value = index.get()
        rem = value % self.periods_per_week
        return TimeSlot(
            week=Week.from_ordinal(value // self.periods_per_week),
            day=ActiveDay.from_ordinal(rem // self.periods_per_day),
            period=self.schema.from_ordinal(rem % self.periods_per_day),
        )

    def slots(self) -> Iterator[TimeSlot]:
        """Alle TimeSlots in Index-Reihenfolge."""
        for value in range(self.periods_per_iteration):
            yield self.decode(self.index_type(value))

    def __len__(self) -> int:
        return self.periods_per_iteration

    def __repr__(self) -> str:
        return (f"SlotIndexer({self.schema.name!r}, "
                f"{self.periods_per_iteration} Slots)")


@lru_cache(maxsize=None)
def indexer_for(schema: PeriodSchema) -> SlotIndexer:
    return SlotIndexer(schema)


def canonical_indexer() -> SlotIndexer:
    return indexer_for(canonical_schema())


def reduced_indexer() -> SlotIndexer:
    return indexer_for(reduced_schema())
