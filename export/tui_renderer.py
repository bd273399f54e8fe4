"""Gemeinsamer Renderer für die Terminal-Anzeige des Rasters.

Wird von den CLI-Befehlen grid und config show (Rich) verwendet.
"""

from typing import TYPE_CHECKING, Optional

from rich import box
from rich.table import Table

from models.timeslot import TimeSlot
from models.week import ActiveDay, Week

if TYPE_CHECKING:
    from grid.indexer import SlotIndexer
    from grid.schema import PeriodSchema
    from models.timetable import Timetable


def render_grid_rows(
    indexer: "SlotIndexer",
    week: Week,
    timetable: Optional["Timetable"] = None,
) -> list[list[str]]:
    """Gibt Tabellenzeilen für eine Woche zurück.

    Jede Zeile: [abschnitt, zeit, Mo, Di, Mi, Do, Fr]
    Ohne timetable enthalten die Zellen "Token (#Index)", sonst die
    Aktivität oder '—'.
    """
    rows: list[list[str]] = []
    for interval in indexer.schema.intervals:
        cells = [str(interval.period), str(interval)]
        for day in ActiveDay:
            slot = TimeSlot(week=week, day=day, period=interval.period)
            if timetable is None:
                cells.append(f"{slot.token} (#{indexer.encode(slot)})")
            else:
                activity = timetable.get(slot)
                cells.append("—" if activity is None else str(activity))
        rows.append(cells)
    return rows


def build_grid_table(
    indexer: "SlotIndexer",
    week: Week,
    timetable: Optional["Timetable"] = None,
) -> Table:
    """Rich-Tabelle für eine Woche des Rasters."""
    table = Table(title=f"{week} — Raster '{indexer.schema.name}'",
                  box=box.ROUNDED)
    table.add_column("Abschnitt", style="bold")
    table.add_column("Zeit")
    for day in ActiveDay:
        table.add_column(day.short_name, justify="center")
    for row in render_grid_rows(indexer, week, timetable):
        table.add_row(*row)
    return table


def build_schema_table(schema: "PeriodSchema") -> Table:
    """Rich-Tabelle der Abschnitte mit Zeiten und Notationskürzel."""
    table = Table(title=f"Tagesraster '{schema.name}'", box=box.ROUNDED)
    table.add_column("Nr.")
    table.add_column("Abschnitt", style="bold")
    table.add_column("Kürzel")
    table.add_column("Beginn")
    table.add_column("Ende")
    for ordinal, interval in enumerate(schema.intervals):
        table.add_row(str(ordinal), str(interval.period), interval.period.code,
                      interval.start_time, interval.end_time)
    return table
