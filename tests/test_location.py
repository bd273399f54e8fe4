"""Tests für die Raumbezeichnungen in Highfield und Fearnhill."""

import pytest

from models.location import (
    FearnhillClassroom,
    FearnhillRoom,
    FearnhillSection,
    FloorLevel,
    HighfieldBlock,
    HighfieldClassroom,
    HighfieldRoom,
    Location,
    RoomNumber,
    School,
)


# ─── HIGHFIELD ────────────────────────────────────────────────────────────────

class TestHighfield:
    def test_ground_floor_is_padded(self):
        room = HighfieldClassroom(HighfieldBlock.HOWARD, None, RoomNumber(1))
        assert str(room) == "HG01"
        assert room.school is School.HIGHFIELD

    def test_upper_floor(self):
        room = HighfieldClassroom(HighfieldBlock.PARKER, FloorLevel(2), RoomNumber(12))
        assert str(room) == "P212"

    def test_two_digit_number(self):
        room = HighfieldClassroom(HighfieldBlock.UNWIN, FloorLevel(9), RoomNumber(99))
        assert str(room) == "U999"

    def test_named_rooms(self):
        assert str(HighfieldRoom.HALL) == "Hall"
        assert str(HighfieldRoom.SPORTS_HALL) == "Sports Hall"
        assert f"{HighfieldRoom.HALL}" == "Hall"

    def test_ranges(self):
        """Etage 1..9, Raumnummer 1..99."""
        assert FloorLevel.new(0) is None
        assert FloorLevel.new(10) is None
        assert RoomNumber.new(0) is None
        assert RoomNumber.new(100) is None

    @pytest.mark.parametrize("block, floor, number", [
        ("H", None, RoomNumber(1)),
        (HighfieldBlock.HOWARD, 2, RoomNumber(1)),
        (HighfieldBlock.HOWARD, None, 1),
        (HighfieldBlock.HOWARD, None, FloorLevel(1)),
    ])
    def test_invalid_fields_raise(self, block, floor, number):
        with pytest.raises(TypeError):
            HighfieldClassroom(block, floor, number)


# ─── FEARNHILL ────────────────────────────────────────────────────────────────

class TestFearnhill:
    def test_classroom_has_prefix_and_no_padding(self):
        room = FearnhillClassroom(FearnhillSection.SCIENCE, RoomNumber(3))
        assert str(room) == "FH S3"
        assert room.identifier == "S3"
        assert room.school is School.FEARNHILL

    def test_section_codes(self):
        codes = [section.value for section in FearnhillSection]
        assert codes == ["S", "B", "P", "L", "T", "M", "E", "Mu", "H", "I"]

    def test_music_section(self):
        room = FearnhillClassroom(FearnhillSection.MUSIC, RoomNumber(12))
        assert str(room) == "FH Mu12"

    def test_named_rooms(self):
        assert [str(room) for room in FearnhillRoom] == [
            "FH Sports Hall", "FH Gym", "FH Dance Studio", "FH Drama Studio"]

    def test_sports_halls_differ(self):
        """Beide Standorte haben eine Sporthalle, die Anzeige unterscheidet sie."""
        assert str(FearnhillRoom.SPORTS_HALL) != str(HighfieldRoom.SPORTS_HALL)
        assert FearnhillRoom.SPORTS_HALL != HighfieldRoom.SPORTS_HALL

    def test_invalid_fields_raise(self):
        with pytest.raises(TypeError):
            FearnhillClassroom("S", RoomNumber(1))
        with pytest.raises(TypeError):
            FearnhillClassroom(FearnhillSection.SCIENCE, 1)


# ─── PARSER ───────────────────────────────────────────────────────────────────

class TestParse:
    @pytest.mark.parametrize("text", [
        "HG01", "P212", "U999", "Hall", "Sports Hall",
        "FH S3", "FH Mu12", "FH M5", "FH I99", "FH Gym", "FH Sports Hall",
    ])
    def test_display_roundtrip(self, text):
        assert str(Location.parse(text)) == text

    def test_parse_types(self):
        assert Location.parse("Hall") is HighfieldRoom.HALL
        assert Location.parse("FH Drama Studio") is FearnhillRoom.DRAMA_STUDIO
        assert Location.parse("HG01") == HighfieldClassroom(
            HighfieldBlock.HOWARD, None, RoomNumber(1))
        assert Location.parse("FH Mu2") == FearnhillClassroom(
            FearnhillSection.MUSIC, RoomNumber(2))

    @pytest.mark.parametrize("text", [
        "", "HG00", "HG1", "HG100", "H001", "XG01", "hg01", " HG01",
        "FH S0", "FH S03", "FH S100", "FH X1", "FH Hall", "FHS3", "Gym", None,
    ])
    def test_invalid(self, text):
        assert Location.parse(text) is None

    def test_hashable(self):
        rooms = {Location.parse("HG01"), Location.parse("HG01"), HighfieldRoom.HALL}
        assert len(rooms) == 2
