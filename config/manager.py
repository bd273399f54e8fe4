"""Konfigurationsmanager: Laden, Speichern und Validieren.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_config
from config.schema import ZeitrasterConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

def _yaml_header() -> str:
    return (
        "# ============================================\n"
        "# Zeitraster — Konfiguration\n"
        f"# Erstellt: {date.today().isoformat()}\n"
        "# ============================================\n"
    )


_SECTION_COMMENTS = {
    "time_grid": (
        "Tagesraster",
        "Abschnitte in chronologischer Reihenfolge, Ende jeweils exklusiv.\n"
        "Gültige Abschnitte: tutor, first, second, break, third, fourth, lunch, fifth.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "zeitraster.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> ZeitrasterConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            config = ZeitrasterConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e
        logger.info(
            f"Konfiguration geladen: {target} "
            f"({config.time_grid.periods_per_day} Abschnitte/Tag)")
        return config

    def load_or_default(self, path: Optional[Path] = None) -> ZeitrasterConfig:
        """Wie load, aber Default-Config wenn keine Datei existiert."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            logger.debug(f"Keine Konfiguration unter {target}, nutze Defaults")
            return default_config()
        return self.load(target)

    # ─── Speichern ───

    def save(self, config: ZeitrasterConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_yaml_header() + "\n")
            yaml.dump(data, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: ZeitrasterConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm
