"""Ganzzahl mit festem, bei der Konstruktion geprüftem Wertebereich."""

from functools import total_ordering
from typing import ClassVar, Optional


@total_ordering
class BoundedInt:
    """Ganzzahl im Bereich MIN..=MAX.

    Jeder Wertebereich ist eine eigene Unterklasse mit den Klassenkonstanten
    MIN und MAX (siehe `BoundedInt.range`). Der Wert ist nach der Konstruktion
    unveränderlich.

    Zwei Wege zur Instanz:
      - `Cls.new(v)` gibt None zurück, wenn v außerhalb des Bereichs liegt
      - `Cls(v)` wirft ValueError für Aufrufer, die einen harten Fehler wollen
    """

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if not self.contains(value):
            raise ValueError(
                f"{type(self).__name__}: {value!r} liegt nicht in "
                f"{self.MIN}..={self.MAX}"
            )
        object.__setattr__(self, "_value", int(value))

    @classmethod
    def contains(cls, value) -> bool:
        """True wenn value eine Ganzzahl (kein bool) im Bereich ist."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return cls.MIN <= value <= cls.MAX

    @classmethod
    def new(cls, value) -> Optional["BoundedInt"]:
        """Validierender Konstruktor: Instanz oder None bei ungültigem Wert."""
        if not cls.contains(value):
            return None
        return cls(value)

    @classmethod
    def range(cls, minimum: int, maximum: int,
              name: Optional[str] = None) -> type["BoundedInt"]:
        """Erzeugt eine Unterklasse für den Bereich minimum..=maximum."""
        if minimum > maximum:
            raise ValueError(f"Leerer Bereich: {minimum}..={maximum}")
        cls_name = name or f"BoundedInt_{minimum}_{maximum}"
        return type(cls_name, (cls,), {
            "MIN": minimum,
            "MAX": maximum,
            "__slots__": (),
        })

    def get(self) -> int:
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} ist unveränderlich")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} ist unveränderlich")

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    @staticmethod
    def _other_value(other) -> Optional[int]:
        if isinstance(other, BoundedInt):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other) -> bool:
        value = self._other_value(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __reduce__(self):
        return (type(self), (self._value,))


# Wertebereiche der Uhrzeit-Klassifikation
Hour = BoundedInt.range(0, 23, "Hour")
Minute = BoundedInt.range(0, 59, "Minute")
MinuteOfDay = BoundedInt.range(0, 24 * 60 - 1, "MinuteOfDay")

# Laufende Nummer eines Durchlaufs (I1, I2, ...) in der Notation
Iteration = BoundedInt.range(1, 9999, "Iteration")
