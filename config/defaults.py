from config.schema import (
    PeriodSlot,
    TimeGridConfig,
    ZeitrasterConfig,
)
from models.period import PeriodOfDay


def default_time_grid() -> TimeGridConfig:
    """Standard-Tagesraster mit acht Abschnitten.

    Tagesraster:
    Tutor      08:25 - 08:50
    1. Stunde  08:50 - 09:50
    2. Stunde  09:50 - 10:50
       ── Break ──
    3. Stunde  11:10 - 12:10
    4. Stunde  12:10 - 13:10
       ── Lunch ──
    5. Stunde  13:55 - 14:55

    Das Ende gehört nicht zum Abschnitt: 09:50 ist bereits 2. Stunde.
    """
    return TimeGridConfig(
        name="standard",
        periods=[
            PeriodSlot(period=PeriodOfDay.TUTOR, start_time="08:25", end_time="08:50"),
            PeriodSlot(period=PeriodOfDay.FIRST, start_time="08:50", end_time="09:50"),
            PeriodSlot(period=PeriodOfDay.SECOND, start_time="09:50", end_time="10:50"),
            PeriodSlot(period=PeriodOfDay.BREAK, start_time="10:50", end_time="11:10"),
            PeriodSlot(period=PeriodOfDay.THIRD, start_time="11:10", end_time="12:10"),
            PeriodSlot(period=PeriodOfDay.FOURTH, start_time="12:10", end_time="13:10"),
            PeriodSlot(period=PeriodOfDay.LUNCH, start_time="13:10", end_time="13:55"),
            PeriodSlot(period=PeriodOfDay.FIFTH, start_time="13:55", end_time="14:55"),
        ],
    )


def reduced_time_grid() -> TimeGridConfig:
    """Reduziertes Raster: nur die fünf Unterrichtsstunden.

    Tutor, Break und Lunch sind Lücken ohne Abschnitt.
    """
    return TimeGridConfig(
        name="reduziert",
        periods=[
            PeriodSlot(period=PeriodOfDay.FIRST, start_time="08:50", end_time="09:50"),
            PeriodSlot(period=PeriodOfDay.SECOND, start_time="09:50", end_time="10:50"),
            PeriodSlot(period=PeriodOfDay.THIRD, start_time="11:10", end_time="12:10"),
            PeriodSlot(period=PeriodOfDay.FOURTH, start_time="12:10", end_time="13:10"),
            PeriodSlot(period=PeriodOfDay.FIFTH, start_time="13:55", end_time="14:55"),
        ],
    )


def default_config(reduced: bool = False) -> ZeitrasterConfig:
    """Komplette Default-Konfiguration."""
    return ZeitrasterConfig(
        school_name="Highfield School",
        time_grid=reduced_time_grid() if reduced else default_time_grid(),
    )
