"""Datenmodell für eine Lerngruppe (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SchoolClass(BaseModel):
    """Lerngruppe einer Unterrichtsstunde.

    Unterscheidet Stunden desselben Fachs, meist über das Kürzel der
    Lehrkraft oder der Gruppe (z.B. "12B/Ph1").
    """

    model_config = ConfigDict(frozen=True)

    reference: str = Field(min_length=1, max_length=32)  # nur ASCII

    @field_validator("reference")
    @classmethod
    def check_ascii(cls, v: str) -> str:
        if not v.isascii():
            raise ValueError(f"Klassenbezeichnung '{v}' enthält Nicht-ASCII-Zeichen")
        return v

    def __str__(self) -> str:
        return self.reference
