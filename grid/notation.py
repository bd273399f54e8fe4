"""Kurznotation für Zeitslots: "W2RP3", optional mit Durchlauf "I5W2RP3".

Grammatik (nur Großbuchstaben):

    ["I" n] "W" {1|2} {M|T|W|R|F} "P" {1-5 | T | B | L}

Der Tagesbuchstabe folgt direkt auf die Wochenziffer; die Langform mit
eingeschobenem "D" ("W2DRP3") wird nicht akzeptiert, damit jeder Slot
genau ein Token hat.

R steht für Donnerstag (Abgrenzung zu T = Dienstag). T/B/L (Tutor, Break,
Lunch) gibt es nur, wenn das Raster diese Abschnitte enthält. Der Durchlauf
n gehört nicht zum TimeSlot.

Die Tabellen Token ⇄ Index werden einmalig aus SlotIndexer.slots()
erzeugt; ein anderes Raster braucht nur einen anderen SlotIndexer.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from grid.indexer import SlotIndexer, canonical_indexer, indexer_for
from grid.schema import PeriodSchema
from models.ranged import BoundedInt, Iteration
from models.timeslot import TimeSlot

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(?:I(?P<iteration>[1-9][0-9]*))?(?P<slot>W[0-9A-Z]+P[0-9A-Z])")


@dataclass(frozen=True)
class Notation:
    """Geparste Notation: TimeSlot plus optionaler Durchlauf."""

    slot: TimeSlot
    iteration: Optional[Iteration] = None

    def __str__(self) -> str:
        if self.iteration is None:
            return self.slot.token
        return f"I{self.iteration.get()}{self.slot.token}"


class NotationCodec:
    """Token ⇄ TimeSlot/Index für ein bestimmtes Raster."""

    def __init__(self, indexer: SlotIndexer):
        self.indexer = indexer
        self._index_by_token: dict[str, BoundedInt] = {}
        self._token_by_index: list[str] = []
        for slot in indexer.slots():
            index = indexer.encode(slot)
            self._index_by_token[slot.token] = index
            self._token_by_index.append(slot.token)
        logger.debug(
            f"Notationstabelle für '{indexer.schema.name}' erzeugt: "
            f"{len(self._token_by_index)} Tokens")

    def parse(self, token: str) -> Optional[Notation]:
        """Token mit optionalem Durchlauf parsen, None wenn ungültig."""
        if not isinstance(token, str):
            return None
        match = _TOKEN_RE.fullmatch(token)
        if match is None:
            logger.debug(f"Ungültiges Token: {token!r}")
            return None
        index = self._index_by_token.get(match["slot"])
        if index is None:
            logger.debug(f"Unbekannter Slot im Token: {token!r}")
            return None
        iteration = None
        if match["iteration"] is not None:
            iteration = Iteration.new(int(match["iteration"]))
            if iteration is None:
                logger.debug(f"Durchlauf außerhalb des Bereichs: {token!r}")
                return None
        return Notation(slot=self.indexer.decode(index), iteration=iteration)

    def decode(self, token: str) -> Optional[TimeSlot]:
        """TimeSlot zu einem Token; der Durchlauf wird ignoriert."""
        notation = self.parse(token)
        return notation.slot if notation is not None else None

    def decode_index(self, token: str) -> Optional[BoundedInt]:
        notation = self.parse(token)
        if notation is None:
            return None
        return self.indexer.encode(notation.slot)

    def encode(self, slot: TimeSlot) -> str:
        """Kanonisches Token eines TimeSlots dieses Rasters."""
        return self._token_by_index[self.indexer.encode(slot).get()]

    def encode_index(self, index: Union[BoundedInt, int]) -> Optional[str]:
        """Token zu einem Index, None außerhalb des Bereichs."""
        slot = self.indexer.decode(index)
        if slot is None:
            return None
        return self.encode(slot)

    def format(self, notation: Notation) -> str:
        """Token inklusive Durchlauf-Präfix."""
        token = self.encode(notation.slot)
        if notation.iteration is None:
            return token
        return f"I{notation.iteration.get()}{token}"

    @property
    def tokens(self) -> list[str]:
        """Alle Tokens in Index-Reihenfolge."""
        return list(self._token_by_index)


def codec_for(indexer: SlotIndexer) -> NotationCodec:
    """Codec zum Raster des Indexers; pro Raster genau einmal erzeugt."""
    return _codec_for_schema(indexer.schema)


@lru_cache(maxsize=None)
def _codec_for_schema(schema: PeriodSchema) -> NotationCodec:
    return NotationCodec(indexer_for(schema))


def canonical_codec() -> NotationCodec:
    return codec_for(canonical_indexer())


def decode_token(token: str) -> Optional[TimeSlot]:
    """decode mit dem 8er-Raster."""
    return canonical_codec().decode(token)


def encode_token(slot: TimeSlot) -> str:
    """encode mit dem 8er-Raster."""
    return canonical_codec().encode(slot)
