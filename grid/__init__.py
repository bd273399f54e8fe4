"""Raster-Modul: Index-Umrechnung, Uhrzeit-Zuordnung und Kurznotation."""

from .schema import PeriodSchema, PeriodInterval, canonical_schema, reduced_schema
from .indexer import SlotIndexer, canonical_indexer, reduced_indexer
from .clock import resolve, resolve_datetime
from .notation import Notation, NotationCodec, decode_token, encode_token

__all__ = [
    "PeriodSchema",
    "PeriodInterval",
    "canonical_schema",
    "reduced_schema",
    "SlotIndexer",
    "canonical_indexer",
    "reduced_indexer",
    "resolve",
    "resolve_datetime",
    "Notation",
    "NotationCodec",
    "decode_token",
    "encode_token",
]
