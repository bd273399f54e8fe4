"""Zuordnung eines realen Zeitpunkts zu einem TimeSlot."""

from datetime import date, datetime
from typing import Optional, Union

from grid.schema import PeriodSchema, canonical_schema
from models.timeslot import TimeSlot
from models.week import ActiveDay, Week


def resolve(
    week: Week,
    weekday: Union[int, date],
    time,
    schema: Optional[PeriodSchema] = None,
) -> Optional[TimeSlot]:
    """TimeSlot für Woche, Wochentag (0=Montag) und Uhrzeit.

    None wenn der Tag ein Wochenende ist oder die Uhrzeit in keinen
    Abschnitt fällt. Die Woche muss der Aufrufer liefern: welche Woche
    gerade läuft, lässt sich aus dem Datum allein nicht bestimmen.
    """
    day = ActiveDay.from_weekday(weekday)
    if day is None:
        return None
    period = (schema or canonical_schema()).classify(time)
    if period is None:
        return None
    return TimeSlot(week=week, day=day, period=period)


def resolve_datetime(
    week: Week,
    moment: datetime,
    schema: Optional[PeriodSchema] = None,
) -> Optional[TimeSlot]:
    """Wie resolve, mit Wochentag und Uhrzeit aus einem datetime.

    Zeitzonen werden nicht umgerechnet: maßgeblich ist die Uhrzeit, die
    das datetime selbst trägt.
    """
    return resolve(week, moment.weekday(), moment.time(), schema)
