"""Räume an den beiden Schulstandorten Highfield und Fearnhill.

Highfield-Klassenräume setzen sich aus Block, Etage und zweistelliger
Raumnummer zusammen ("HG01" = Howard, Erdgeschoss, Raum 1; "P212" =
Parker, 2. Etage, Raum 12). Fearnhill-Klassenräume bestehen aus dem
Bereichskürzel und der Raumnummer ohne Auffüllen ("S13", "Mu2").
Alle Fearnhill-Räume werden mit "FH " angezeigt, damit z.B. die beiden
Sporthallen unterscheidbar bleiben.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.ranged import BoundedInt

FloorLevel = BoundedInt.range(1, 9, "FloorLevel")      # Erdgeschoss = None
RoomNumber = BoundedInt.range(1, 99, "RoomNumber")

FEARNHILL_PREFIX = "FH "


class School(str, Enum):
    HIGHFIELD = "highfield"
    FEARNHILL = "fearnhill"


class Location:
    """Gemeinsame Basis aller Räume; str() liefert die Raumbezeichnung."""

    @property
    def school(self) -> School:
        raise NotImplementedError

    @property
    def identifier(self) -> str:
        """Bezeichnung ohne Standort-Präfix."""
        raise NotImplementedError

    def __str__(self) -> str:
        if self.school is School.FEARNHILL:
            return f"{FEARNHILL_PREFIX}{self.identifier}"
        return self.identifier

    @staticmethod
    def parse(text: str) -> Optional["Location"]:
        """Raum aus seiner Anzeige ("HG01", "FH Gym", ...), None wenn ungültig."""
        if not isinstance(text, str):
            return None
        if text.startswith(FEARNHILL_PREFIX):
            return _parse_fearnhill(text[len(FEARNHILL_PREFIX):])
        return _parse_highfield(text)


# ─── HIGHFIELD ────────────────────────────────────────────────────────────────

class HighfieldBlock(Enum):
    HOWARD = "H"
    PARKER = "P"
    UNWIN = "U"


class HighfieldRoom(Location, Enum):
    """Benannte Räume in Highfield."""

    HALL = "Hall"
    SPORTS_HALL = "Sports Hall"

    @property
    def school(self) -> School:
        return School.HIGHFIELD

    @property
    def identifier(self) -> str:
        return self.value


@dataclass(frozen=True)
class HighfieldClassroom(Location):
    block: HighfieldBlock
    floor: Optional[FloorLevel]
    number: RoomNumber

    def __post_init__(self):
        if not isinstance(self.block, HighfieldBlock):
            raise TypeError(f"Ungültiger Block: {self.block!r}")
        if self.floor is not None and not isinstance(self.floor, FloorLevel):
            raise TypeError(f"Etage muss FloorLevel oder None sein: {self.floor!r}")
        if not isinstance(self.number, RoomNumber):
            raise TypeError(f"Raumnummer muss RoomNumber sein: {self.number!r}")

    @property
    def school(self) -> School:
        return School.HIGHFIELD

    @property
    def identifier(self) -> str:
        floor = "G" if self.floor is None else str(self.floor.get())
        return f"{self.block.value}{floor}{self.number.get():02d}"


# ─── FEARNHILL ────────────────────────────────────────────────────────────────

class FearnhillSection(Enum):
    SCIENCE = "S"
    BUSINESS = "B"
    PSHE = "P"
    LANGUAGES = "L"
    TECHNOLOGY = "T"
    MATHEMATICS = "M"
    ENGLISH = "E"
    MUSIC = "Mu"
    HUMANITIES = "H"
    IT = "I"


class FearnhillRoom(Location, Enum):
    """Benannte Räume in Fearnhill."""

    SPORTS_HALL = "Sports Hall"
    GYM = "Gym"
    DANCE_STUDIO = "Dance Studio"
    DRAMA_STUDIO = "Drama Studio"

    @property
    def school(self) -> School:
        return School.FEARNHILL

    @property
    def identifier(self) -> str:
        return self.value


@dataclass(frozen=True)
class FearnhillClassroom(Location):
    section: FearnhillSection
    number: RoomNumber

    def __post_init__(self):
        if not isinstance(self.section, FearnhillSection):
            raise TypeError(f"Ungültiger Bereich: {self.section!r}")
        if not isinstance(self.number, RoomNumber):
            raise TypeError(f"Raumnummer muss RoomNumber sein: {self.number!r}")

    @property
    def school(self) -> School:
        return School.FEARNHILL

    @property
    def identifier(self) -> str:
        return f"{self.section.value}{self.number.get()}"


# ─── PARSER ───────────────────────────────────────────────────────────────────

_HIGHFIELD_RE = re.compile(r"(?P<block>[HPU])(?P<floor>G|[1-9])(?P<number>[0-9]{2})")
# "Mu" vor "M", sonst würde "Mu2" nie erkannt
_FEARNHILL_RE = re.compile(r"(?P<section>Mu|[SBPLTMEHI])(?P<number>[1-9][0-9]?)")


def _parse_highfield(text: str) -> Optional[Location]:
    for room in HighfieldRoom:
        if text == room.value:
            return room
    match = _HIGHFIELD_RE.fullmatch(text)
    if match is None:
        return None
    number = RoomNumber.new(int(match["number"]))
    if number is None:
        return None
    floor = None if match["floor"] == "G" else FloorLevel(int(match["floor"]))
    return HighfieldClassroom(HighfieldBlock(match["block"]), floor, number)


def _parse_fearnhill(text: str) -> Optional[Location]:
    for room in FearnhillRoom:
        if text == room.value:
            return room
    match = _FEARNHILL_RE.fullmatch(text)
    if match is None:
        return None
    return FearnhillClassroom(FearnhillSection(match["section"]),
                              RoomNumber(int(match["number"])))
