"""Datenmodell für ein Unterrichtsfach (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Subject(BaseModel):
    """Repräsentiert ein Unterrichtsfach, z.B. "Physics"."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=16)  # nur ASCII

    @field_validator("name")
    @classmethod
    def check_ascii(cls, v: str) -> str:
        if not v.isascii():
            raise ValueError(f"Fachname '{v}' enthält Nicht-ASCII-Zeichen")
        return v

    def __str__(self) -> str:
        return self.name
