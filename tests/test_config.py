"""Tests für das Konfigurationssystem und austauschbare Raster."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config.defaults import default_config, default_time_grid, reduced_time_grid
from config.manager import ConfigManager
from config.schema import (
    PeriodSlot,
    TimeGridConfig,
    ZeitrasterConfig,
    clock_to_minutes,
    minutes_to_clock,
)
from grid.indexer import SlotIndexer, indexer_for
from grid.notation import NotationCodec
from grid.schema import PeriodSchema, canonical_schema, reduced_schema
from models.period import PeriodOfDay


def _slot(period: PeriodOfDay, start: str, end: str) -> PeriodSlot:
    return PeriodSlot(period=period, start_time=start, end_time=end)


def _manager(tmp_path: Path) -> ConfigManager:
    mgr = ConfigManager()
    mgr.CONFIG_DIR = tmp_path
    mgr.DEFAULT_CONFIG = tmp_path / "zeitraster.yaml"
    return mgr


# ─── DEFAULT-KONFIGURATION ────────────────────────────────────────────────────

class TestDefaultConfig:
    def test_default_time_grid_valid(self):
        """Default-Raster hat acht Abschnitte."""
        tg = default_time_grid()
        assert tg.periods_per_day == 8
        assert tg.periods[0].period is PeriodOfDay.TUTOR
        assert tg.periods[-1].period is PeriodOfDay.FIFTH

    def test_reduced_time_grid_valid(self):
        """Reduziertes Raster hat nur die Unterrichtsstunden."""
        tg = reduced_time_grid()
        assert tg.periods_per_day == 5
        assert all(p.period.is_academic for p in tg.periods)

    def test_default_config(self):
        config = default_config()
        assert config.school_name == "Highfield School"
        assert config.time_grid.periods_per_day == 8
        assert default_config(reduced=True).time_grid.periods_per_day == 5

    def test_schema_from_defaults(self):
        assert PeriodSchema.from_config(default_time_grid()) == canonical_schema()
        assert PeriodSchema.from_config(reduced_time_grid()) == reduced_schema()


# ─── PYDANTIC-VALIDIERUNG ─────────────────────────────────────────────────────

class TestPydanticValidation:
    def test_clock_helpers(self):
        assert clock_to_minutes("08:25") == 505
        assert minutes_to_clock(895) == "14:55"

    @pytest.mark.parametrize("value", ["8:25", "24:00", "12:60", "1225", "ab:cd", ""])
    def test_invalid_clock_raises(self, value):
        with pytest.raises(ValidationError):
            _slot(PeriodOfDay.FIRST, value, "23:00")

    def test_unknown_period_raises(self):
        with pytest.raises(ValidationError):
            PeriodSlot.model_validate(
                {"period": "sixth", "start_time": "15:00", "end_time": "16:00"})

    def test_empty_grid_raises(self):
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[])

    def test_start_after_end_raises(self):
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[_slot(PeriodOfDay.FIRST, "09:50", "08:50")])

    def test_zero_length_raises(self):
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[_slot(PeriodOfDay.FIRST, "08:50", "08:50")])

    def test_overlap_raises(self):
        """Überschneidende Abschnitte → Validierungsfehler."""
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[
                _slot(PeriodOfDay.FIRST, "08:50", "09:50"),
                _slot(PeriodOfDay.SECOND, "09:40", "10:40"),
            ])

    def test_duplicate_raises(self):
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[
                _slot(PeriodOfDay.FIRST, "08:50", "09:50"),
                _slot(PeriodOfDay.FIRST, "09:50", "10:50"),
            ])

    def test_order_violation_raises(self):
        """Abschnitte müssen in der Reihenfolge von PeriodOfDay stehen."""
        with pytest.raises(ValidationError):
            TimeGridConfig(periods=[
                _slot(PeriodOfDay.SECOND, "08:50", "09:50"),
                _slot(PeriodOfDay.FIRST, "09:50", "10:50"),
            ])

    def test_touching_intervals_allowed(self):
        tg = TimeGridConfig(periods=[
            _slot(PeriodOfDay.FIRST, "08:50", "09:50"),
            _slot(PeriodOfDay.SECOND, "09:50", "10:50"),
        ])
        assert tg.periods_per_day == 2


# ─── EIGENES RASTER ───────────────────────────────────────────────────────────

class TestCustomSchema:
    def test_six_period_grid(self):
        """Ein Raster mit sechs Abschnitten ergibt 60 Slots."""
        tg = TimeGridConfig(name="mit-tutor", periods=[
            _slot(PeriodOfDay.TUTOR, "08:25", "08:50"),
            _slot(PeriodOfDay.FIRST, "08:50", "09:50"),
            _slot(PeriodOfDay.SECOND, "09:50", "10:50"),
            _slot(PeriodOfDay.THIRD, "11:10", "12:10"),
            _slot(PeriodOfDay.FOURTH, "12:10", "13:10"),
            _slot(PeriodOfDay.FIFTH, "13:55", "14:55"),
        ])
        indexer = SlotIndexer(PeriodSchema.from_config(tg))
        assert indexer.periods_per_iteration == 60
        for i in range(60):
            assert indexer.encode(indexer.decode(i)) == i

        codec = NotationCodec(indexer)
        assert codec.encode_index(6) == "W1TPT"
        assert codec.decode("W1MPB") is None

    def test_indexer_cache(self):
        schema = PeriodSchema.from_config(default_time_grid())
        assert indexer_for(schema) is indexer_for(canonical_schema())


# ─── YAML SPEICHERN / LADEN ───────────────────────────────────────────────────

class TestConfigManager:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Config speichern, laden und validieren — vollständiger Roundtrip."""
        config = default_config()
        mgr = _manager(tmp_path)

        mgr.save(config)
        assert mgr.DEFAULT_CONFIG.exists()

        loaded = mgr.load(mgr.DEFAULT_CONFIG)
        assert loaded == config
        assert PeriodSchema.from_config(loaded.time_grid) == canonical_schema()

    def test_saved_file_has_header(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.save(default_config(reduced=True))
        text = mgr.DEFAULT_CONFIG.read_text(encoding="utf-8")
        assert text.startswith("# ====")
        assert "Tagesraster" in text
        assert "period: first" in text

    def test_reduced_roundtrip(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.save(default_config(reduced=True))
        loaded = mgr.load()
        assert PeriodSchema.from_config(loaded.time_grid) == reduced_schema()

    def test_first_run_check_no_file(self, tmp_path: Path):
        """first_run_check gibt True zurück wenn keine Config existiert."""
        mgr = _manager(tmp_path)
        assert mgr.first_run_check() is True

    def test_first_run_check_with_file(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        mgr.save(default_config())
        assert mgr.first_run_check() is False

    def test_load_nonexistent_raises(self, tmp_path: Path):
        """Laden einer nicht-existenten Datei → FileNotFoundError."""
        mgr = ConfigManager()
        with pytest.raises(FileNotFoundError):
            mgr.load(tmp_path / "not_there.yaml")

    def test_load_invalid_raises(self, tmp_path: Path):
        """Ungültiger Inhalt → ValueError mit Pydantic-Meldung."""
        path = tmp_path / "kaputt.yaml"
        path.write_text(
            "school_name: Test\n"
            "time_grid:\n"
            "  periods:\n"
            "    - period: first\n"
            "      start_time: '09:50'\n"
            "      end_time: '08:50'\n",
            encoding="utf-8",
        )
        with pytest.raises(ValueError, match="ungültig"):
            ConfigManager().load(path)

    def test_load_or_default(self, tmp_path: Path):
        mgr = _manager(tmp_path)
        assert mgr.load_or_default() == default_config()

    def test_hand_written_yaml(self, tmp_path: Path):
        path = tmp_path / "eigen.yaml"
        path.write_text(
            "school_name: Fearnhill\n"
            "time_grid:\n"
            "  name: kurz\n"
            "  periods:\n"
            "    - {period: first, start_time: '09:00', end_time: '10:00'}\n"
            "    - {period: second, start_time: '10:00', end_time: '11:00'}\n",
            encoding="utf-8",
        )
        config = ConfigManager().load(path)
        assert isinstance(config, ZeitrasterConfig)
        assert config.time_grid.name == "kurz"
        assert config.time_grid.periods[1].start_minutes == 600
