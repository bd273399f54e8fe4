"""Tests für die Kurznotation (W2RP3)."""

import pytest

from grid.indexer import SlotIndexer, canonical_indexer, reduced_indexer
from grid.notation import (
    Notation,
    NotationCodec,
    canonical_codec,
    codec_for,
    decode_token,
    encode_token,
)
from grid.schema import reduced_schema
from models.period import PeriodOfDay
from models.ranged import Iteration
from models.timeslot import TimeSlot
from models.timetable import Timetable
from models.week import ActiveDay, Week


class TestDecode:
    def test_thursday_third(self):
        """W2RP3 → Woche 2, Donnerstag, 3. Stunde."""
        assert decode_token("W2RP3") == TimeSlot(
            Week.TWO, ActiveDay.THURSDAY, PeriodOfDay.THIRD)

    def test_non_academic_codes(self):
        assert decode_token("W1MPT").period is PeriodOfDay.TUTOR
        assert decode_token("W1WPB").period is PeriodOfDay.BREAK
        assert decode_token("W2FPL").period is PeriodOfDay.LUNCH

    @pytest.mark.parametrize("token", [
        "w1dmp2",
        "w1mp2",
        "W1mP2",
        "W1MP2 ",
        " W1MP2",
        "W1MP2\n",
        "W3MP1",
        "W0MP1",
        "W1SP1",
        "W1MP6",
        "W1MP0",
        "W1MPX",
        "W1MP",
        "W1DMP2",
        "WMP1",
        "",
    ])
    def test_invalid_tokens(self, token):
        assert decode_token(token) is None

    def test_day_letter_follows_week_digit(self):
        """Nur die Kurzform ohne "D" ist gültig."""
        assert decode_token("W2RP3") is not None
        assert decode_token("W2DRP3") is None
        assert canonical_codec().parse("I3W2DRP3") is None

    def test_non_string(self):
        assert canonical_codec().decode(None) is None
        assert canonical_codec().decode(17) is None

    def test_decode_index(self):
        assert canonical_codec().decode_index("W1TP1") == 9
        assert canonical_codec().decode_index("W9TP1") is None


class TestIteration:
    def test_prefix_is_ignored_by_decode(self):
        """I5W1MP1 und W1MP1 sind derselbe TimeSlot."""
        assert decode_token("I5W1MP1") == decode_token("W1MP1")

    def test_parse_keeps_iteration(self):
        notation = canonical_codec().parse("I12W2RP3")
        assert notation.iteration == 12
        assert notation.slot == decode_token("W2RP3")

    def test_parse_without_iteration(self):
        assert canonical_codec().parse("W2RP3").iteration is None

    @pytest.mark.parametrize("token", ["I0W1MP1", "I05W1MP1", "IW1MP1",
                                       "i5W1MP1", "I99999W1MP1"])
    def test_invalid_iteration(self, token):
        assert canonical_codec().parse(token) is None

    def test_format_with_iteration(self):
        slot = decode_token("W2RP3")
        notation = Notation(slot=slot, iteration=Iteration(3))
        assert canonical_codec().format(notation) == "I3W2RP3"
        assert str(notation) == "I3W2RP3"
        assert canonical_codec().format(Notation(slot=slot)) == "W2RP3"


class TestEncode:
    def test_canonical_ends(self):
        codec = canonical_codec()
        assert codec.encode_index(0) == "W1MPT"
        assert codec.encode_index(79) == "W2FP5"
        assert codec.encode_index(80) is None

    def test_encode_slot(self):
        slot = TimeSlot(Week.ONE, ActiveDay.THURSDAY, PeriodOfDay.SECOND)
        assert encode_token(slot) == "W1RP2"
        assert str(slot) == "W1RP2"

    def test_roundtrip_slots(self):
        """decode(encode(x)) == x für alle TimeSlots."""
        codec = canonical_codec()
        for slot in canonical_indexer().slots():
            assert codec.decode(codec.encode(slot)) == slot

    def test_roundtrip_tokens(self):
        """encode(decode(t)) == t für alle gültigen Tokens."""
        codec = canonical_codec()
        assert len(codec.tokens) == 80
        assert len(set(codec.tokens)) == 80
        for token in codec.tokens:
            assert codec.encode(codec.decode(token)) == token


class TestReducedSchema:
    def test_table_size(self):
        codec = codec_for(reduced_indexer())
        assert len(codec.tokens) == 50
        assert codec.encode_index(0) == "W1MP1"
        assert codec.encode_index(49) == "W2FP5"

    def test_non_academic_codes_rejected(self):
        """T/B/L gibt es im 5er-Raster nicht."""
        codec = codec_for(reduced_indexer())
        assert codec.decode("W1MPT") is None
        assert codec.decode("W1MPB") is None
        assert codec.decode("W1MPL") is None
        assert codec.decode("W2RP3") == decode_token("W2RP3")

    def test_same_token_different_index(self):
        """Token ist rasterunabhängig, der Index nicht."""
        assert codec_for(reduced_indexer()).decode_index("W1TP1") == 5
        assert canonical_codec().decode_index("W1TP1") == 9

    def test_codec_is_cached(self):
        assert codec_for(reduced_indexer()) is codec_for(reduced_indexer())
        assert isinstance(canonical_codec(), NotationCodec)

    def test_codec_shared_per_schema(self):
        """Neue Indexer desselben Rasters teilen sich einen Codec."""
        codecs = {id(codec_for(SlotIndexer(reduced_schema()))) for _ in range(20)}
        assert codecs == {id(codec_for(reduced_indexer()))}

    def test_timetables_share_codec(self):
        for _ in range(20):
            Timetable(SlotIndexer(reduced_schema())).get("W1MP1")
        assert codec_for(SlotIndexer(reduced_schema())) is codec_for(reduced_indexer())
