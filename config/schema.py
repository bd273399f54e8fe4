from pydantic import BaseModel, Field, field_validator, model_validator

from models.period import PeriodOfDay


def clock_to_minutes(text: str) -> int:
    """Wandelt "HH:MM" in Minuten seit Mitternacht um."""
    parts = text.split(":")
    if len(parts) != 2 or not all(p.isdigit() and len(p) == 2 for p in parts):
        raise ValueError(f"Uhrzeit '{text}' nicht im Format HH:MM")
    hour, minute = int(parts[0]), int(parts[1])
    if hour > 23 or minute > 59:
        raise ValueError(f"Uhrzeit '{text}' außerhalb 00:00–23:59")
    return hour * 60 + minute


def minutes_to_clock(minutes: int) -> str:
    """Wandelt Minuten seit Mitternacht in "HH:MM" um."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


# ─── ZEITRASTER ───

class PeriodSlot(BaseModel):
    """Ein Abschnitt im Tagesraster mit halboffenem Zeitintervall."""
    # Welcher Abschnitt (tutor, first, ..., fifth)
    period: PeriodOfDay
    # Beginn im Format "HH:MM" (gehört zum Abschnitt)
    start_time: str
    # Ende im Format "HH:MM" (gehört NICHT mehr zum Abschnitt)
    end_time: str

    @field_validator("start_time", "end_time")
    @classmethod
    def validate_clock(cls, v: str) -> str:
        clock_to_minutes(v)
        return v

    @property
    def start_minutes(self) -> int:
        return clock_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return clock_to_minutes(self.end_time)


class TimeGridConfig(BaseModel):
    """Konfigurierbares Tagesraster.

    Gilt identisch für alle fünf Unterrichtstage beider Wochen. Die Anzahl
    der Abschnitte bestimmt die Anzahl der Zeitslots pro Durchlauf
    (2 Wochen × 5 Tage × Abschnitte).
    """
    # Bezeichnung des Rasters, z.B. "standard" oder "reduziert"
    name: str = Field("standard", min_length=1,
        description="Bezeichnung des Rasters")
    # Alle Abschnitte des Tages in chronologischer Reihenfolge
    periods: list[PeriodSlot] = Field(
        description="Abschnitte des Tages mit Uhrzeiten")

    @model_validator(mode='after')
    def validate_periods(self):
        """Prüfe dass die Abschnitte eindeutig, sortiert und
        überschneidungsfrei sind."""
        if not self.periods:
            raise ValueError("Zeitraster enthält keine Abschnitte")
        seen: set[PeriodOfDay] = set()
        previous = None
        for slot in self.periods:
            if slot.start_minutes >= slot.end_minutes:
                raise ValueError(
                    f"{slot.period.value}: Beginn {slot.start_time} liegt nicht "
                    f"vor Ende {slot.end_time}")
            if slot.period in seen:
                raise ValueError(f"Abschnitt {slot.period.value} ist doppelt")
            seen.add(slot.period)
            if previous is not None:
                if slot.period.to_ordinal() < previous.period.to_ordinal():
                    raise ValueError(
                        f"Abschnitt {slot.period.value} steht vor "
                        f"{previous.period.value} (Reihenfolge verletzt)")
                if slot.start_minutes < previous.end_minutes:
                    raise ValueError(
                        f"{slot.period.value} ({slot.start_time}) überschneidet "
                        f"sich mit {previous.period.value} (bis {previous.end_time})")
            previous = slot
        return self

    @property
    def periods_per_day(self) -> int:
        return len(self.periods)


# ─── GESAMT-CONFIG ───

class ZeitrasterConfig(BaseModel):
    """Gesamtkonfiguration."""
    # Name der Schule
    school_name: str = Field("Highfield School",
        description="Name der Schule")
    # Tagesraster mit allen Abschnitten
    time_grid: TimeGridConfig
