"""Woche (A/B-Rhythmus) und aktive Unterrichtstage."""

from datetime import date
from enum import Enum
from typing import Optional, Union


class Week(Enum):
    """Hälfte des zweiwöchigen Wechselrhythmus."""

    ONE = 0
    TWO = 1

    @classmethod
    def from_ordinal(cls, n: int) -> Optional["Week"]:
        return _WEEKS_BY_ORDINAL.get(n)

    def to_ordinal(self) -> int:
        return self.value

    @classmethod
    def from_digit(cls, digit: str) -> Optional["Week"]:
        """"1" → ONE, "2" → TWO, sonst None."""
        return _WEEKS_BY_DIGIT.get(digit)

    @property
    def digit(self) -> str:
        """Ziffer in der Notation (W1 / W2)."""
        return str(self.value + 1)

    def other(self) -> "Week":
        """Die jeweils andere Woche (auf W2 folgt W1 und umgekehrt)."""
        return Week.TWO if self is Week.ONE else Week.ONE

    def __str__(self) -> str:
        return f"Woche {self.digit}"


_WEEKS_BY_ORDINAL = {w.value: w for w in Week}
_WEEKS_BY_DIGIT = {w.digit: w for w in Week}


class ActiveDay(Enum):
    """Wochentag, an dem Unterricht stattfinden kann (Mo–Fr).

    Samstag und Sonntag sind nicht darstellbar.
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4

    @classmethod
    def from_ordinal(cls, n: int) -> Optional["ActiveDay"]:
        return _DAYS_BY_ORDINAL.get(n)

    def to_ordinal(self) -> int:
        return self.value

    @classmethod
    def from_weekday(cls, weekday: Union[int, date]) -> Optional["ActiveDay"]:
        """Wandelt einen Wochentag (0=Montag ... 6=Sonntag) um.

        Akzeptiert auch date/datetime. Samstag, Sonntag und Werte außerhalb
        0..6 ergeben None.
        """
        if isinstance(weekday, date):
            weekday = weekday.weekday()
        if isinstance(weekday, bool) or not isinstance(weekday, int):
            return None
        if not 0 <= weekday <= 6:
            return None
        return _DAYS_BY_ORDINAL.get(weekday)

    def to_weekday(self) -> int:
        """Wochentag im Format von date.weekday() (0=Montag)."""
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> Optional["ActiveDay"]:
        return _DAYS_BY_LETTER.get(letter)

    @property
    def letter(self) -> str:
        """Buchstabe in der Notation (R = Donnerstag, zur Abgrenzung von T)."""
        return _LETTERS[self]

    @property
    def short_name(self) -> str:
        """Abgekürzter Tagesname."""
        return ["Mo", "Di", "Mi", "Do", "Fr"][self.value]

    def __str__(self) -> str:
        return self.name.capitalize()


_LETTERS = {
    ActiveDay.MONDAY: "M",
    ActiveDay.TUESDAY: "T",
    ActiveDay.WEDNESDAY: "W",
    ActiveDay.THURSDAY: "R",
    ActiveDay.FRIDAY: "F",
}
_DAYS_BY_ORDINAL = {d.value: d for d in ActiveDay}
_DAYS_BY_LETTER = {letter: d for d, letter in _LETTERS.items()}
