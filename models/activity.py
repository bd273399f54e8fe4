"""Datenmodell für eine Aktivität in einem Zeitslot (Pydantic v2)."""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, model_validator

from models.location import Location
from models.school_class import SchoolClass
from models.subject import Subject


class ActivityKind(str, Enum):
    LESSON = "lesson"
    REGISTRATION = "registration"
    BREAK = "break"
    SCHOOL_STUDY = "school_study"
    HOME_STUDY = "home_study"
    MISC = "misc"


_LABELS = {
    ActivityKind.REGISTRATION: "Registration",
    ActivityKind.BREAK: "Break",
    ActivityKind.SCHOOL_STUDY: "Independent Study",
    ActivityKind.HOME_STUDY: "Home Study",
}


class Activity(BaseModel):
    """Regelmäßig wiederkehrende Aktivität (keine Einzeltermine).

    Unterrichtsstunden brauchen Fach, Lerngruppe und Raum; MISC braucht
    eine Beschreibung. Alle anderen Arten tragen keine Zusatzdaten.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ActivityKind
    subject: Optional[Subject] = None
    school_class: Optional[SchoolClass] = None
    room: Optional[Location] = None
    description: Optional[str] = None

    @model_validator(mode='after')
    def check_fields_for_kind(self):
        lesson_fields = (self.subject, self.school_class, self.room)
        if self.kind == ActivityKind.LESSON:
            if any(f is None for f in lesson_fields):
                raise ValueError(
                    "Unterrichtsstunde braucht subject, school_class und room")
        elif any(f is not None for f in lesson_fields):
            raise ValueError(
                f"{self.kind.value}: subject/school_class/room nur bei 'lesson'")

        if self.kind == ActivityKind.MISC:
            if not self.description:
                raise ValueError("MISC braucht eine Beschreibung")
        elif self.description is not None:
            raise ValueError(f"{self.kind.value}: description nur bei 'misc'")
        return self

    @classmethod
    def lesson(cls, subject: str, school_class: str,
               room: Union[Location, str]) -> "Activity":
        """Unterrichtsstunde; der Raum darf als Anzeige ("HG01") kommen."""
        if isinstance(room, str):
            parsed = Location.parse(room)
            if parsed is None:
                raise ValueError(f"Unbekannter Raum: {room!r}")
            room = parsed
        return cls(
            kind=ActivityKind.LESSON,
            subject=Subject(name=subject),
            school_class=SchoolClass(reference=school_class),
            room=room,
        )

    @classmethod
    def misc(cls, description: str) -> "Activity":
        return cls(kind=ActivityKind.MISC, description=description)

    @property
    def is_lesson(self) -> bool:
        return self.kind == ActivityKind.LESSON

    def __str__(self) -> str:
        if self.kind == ActivityKind.LESSON:
            return f"{self.subject} {self.school_class} {self.room}"
        if self.kind == ActivityKind.MISC:
            return self.description
        return _LABELS[self.kind]
