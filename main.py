"""Zeitraster — Haupt-CLI.

Verwendung:
  python main.py config init              Default-Konfiguration anlegen
  python main.py config show              Tagesraster anzeigen
  python main.py decode W2RP3             Token → Slot, Index, Uhrzeit
  python main.py encode 42                Index → Token
  python main.py classify 12:40           Uhrzeit → Abschnitt
  python main.py resolve --week 1         Aktueller Slot (Woche angeben!)
  python main.py grid --week 2            Alle Tokens einer Woche

Globale Optionen: --reduced (5er-Raster), --config PFAD, --verbose
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

console = Console()
logger = logging.getLogger(__name__)

_DATETIME_FORMATS = [
    "%Y-%m-%d %H:%M",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
]


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_schema(ctx: click.Context):
    """Raster aus --reduced oder der Konfigurationsdatei (sonst Default)."""
    from grid.schema import PeriodSchema, reduced_schema
    from config.manager import ConfigManager

    if ctx.obj["reduced"]:
        return reduced_schema()
    mgr = ConfigManager()
    config_path = ctx.obj["config_path"]
    try:
        # Ein explizit angegebener Pfad muss existieren
        if config_path is not None:
            config = mgr.load(config_path)
        else:
            config = mgr.load_or_default()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    return PeriodSchema.from_config(config.time_grid)


def _indexer(ctx: click.Context):
    from grid.indexer import indexer_for
    return indexer_for(_load_schema(ctx))


def _codec(ctx: click.Context):
    from grid.notation import codec_for
    return codec_for(_indexer(ctx))


def _week_option(required: bool):
    return click.option(
        "--week", "-w", "week_digit", type=click.Choice(["1", "2"]),
        required=required, help="Woche im Zweiwochenrhythmus (1 oder 2).")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
@click.option("--reduced", is_flag=True, default=False,
              help="Reduziertes Raster (nur 5 Unterrichtsstunden) speichern.")
@click.pass_context
def config_init(ctx: click.Context, force: bool, reduced: bool):
    """Legt die Default-Konfiguration an."""
    from config.defaults import default_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    target = ctx.obj["config_path"] or mgr.DEFAULT_CONFIG
    if target.exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        sys.exit(1)
    mgr.save(default_config(reduced=reduced or ctx.obj["reduced"]), target)
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt das aktive Tagesraster an."""
    from export.tui_renderer import build_schema_table

    indexer = _indexer(ctx)
    console.print(build_schema_table(indexer.schema))
    console.print(
        f"[bold]Abschnitte/Tag:[/bold] {indexer.periods_per_day} | "
        f"[bold]Slots/Woche:[/bold] {indexer.periods_per_week} | "
        f"[bold]Slots/Durchlauf:[/bold] {indexer.periods_per_iteration}"
    )


# ─── DECODE / ENCODE ──────────────────────────────────────────────────────────

@click.command("decode")
@click.argument("token")
@click.pass_context
def cmd_decode(ctx: click.Context, token: str):
    """Zerlegt ein Token (z.B. W2RP3) in Woche, Tag und Abschnitt."""
    codec = _codec(ctx)
    notation = codec.parse(token)
    if notation is None:
        console.print(f"[red]Ungültiges Token: {token}[/red]")
        sys.exit(1)

    slot = notation.slot
    interval = codec.indexer.schema.interval(slot.period)
    lines = [
        f"[bold]Woche:[/bold]     {slot.week.digit}",
        f"[bold]Tag:[/bold]       {slot.day}",
        f"[bold]Abschnitt:[/bold] {slot.period} ({interval})",
        f"[bold]Index:[/bold]     {codec.indexer.encode(slot)}",
    ]
    if notation.iteration is not None:
        lines.append(f"[bold]Durchlauf:[/bold] {notation.iteration}")
    console.print(Panel("\n".join(lines), title=codec.format(notation),
                        border_style="cyan"))


@click.command("encode")
@click.argument("index", type=int)
@click.pass_context
def cmd_encode(ctx: click.Context, index: int):
    """Gibt das Token zu einem Slot-Index aus."""
    codec = _codec(ctx)
    token = codec.encode_index(index)
    if token is None:
        console.print(
            f"[red]Index {index} außerhalb 0..{len(codec.indexer) - 1}[/red]")
        sys.exit(1)
    console.print(token)


# ─── CLASSIFY / RESOLVE ───────────────────────────────────────────────────────

@click.command("classify")
@click.argument("time", type=click.DateTime(formats=["%H:%M"]))
@click.pass_context
def cmd_classify(ctx: click.Context, time: datetime):
    """Ordnet eine Uhrzeit (HH:MM) einem Abschnitt zu."""
    schema = _load_schema(ctx)
    period = schema.classify(time.time())
    if period is None:
        console.print(f"[yellow]{time:%H:%M} liegt in keinem Abschnitt.[/yellow]")
        sys.exit(1)
    console.print(f"{period} ({schema.interval(period)})")


@click.command("resolve")
@_week_option(required=True)
@click.option("--at", "moment", type=click.DateTime(formats=_DATETIME_FORMATS),
              default=None, help="Zeitpunkt (Standard: jetzt, lokale Uhrzeit).")
@click.pass_context
def cmd_resolve(ctx: click.Context, week_digit: str, moment: Optional[datetime]):
    """Bestimmt den Slot zu einem Zeitpunkt in der angegebenen Woche."""
    from grid.clock import resolve_datetime
    from models.week import Week

    moment = moment or datetime.now()
    week = Week.from_digit(week_digit)
    slot = resolve_datetime(week, moment, _load_schema(ctx))
    if slot is None:
        console.print(
            f"[yellow]{moment:%a %d.%m.%Y %H:%M} liegt in keinem Slot.[/yellow]")
        sys.exit(1)
    logger.debug(f"{moment.isoformat()} → {slot.token}")
    console.print(f"{slot.token}  {slot.label}")


# ─── GRID ─────────────────────────────────────────────────────────────────────

@click.command("grid")
@_week_option(required=False)
@click.pass_context
def cmd_grid(ctx: click.Context, week_digit: Optional[str]):
    """Zeigt alle Tokens mit Index, Woche für Woche."""
    from export.tui_renderer import build_grid_table
    from models.week import Week

    indexer = _indexer(ctx)
    weeks = [Week.from_digit(week_digit)] if week_digit else list(Week)
    for week in weeks:
        console.print(build_grid_table(indexer, week))


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--reduced", is_flag=True, default=False,
              help="Reduziertes Raster (nur 5 Unterrichtsstunden).")
@click.option("--config", "config_path", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Pfad zur YAML-Konfiguration.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Debug-Ausgaben aktivieren.")
@click.pass_context
def cli(ctx: click.Context, reduced: bool, config_path: Optional[Path],
        verbose: bool):
    """Zeitraster für den zweiwöchigen Stundenplan.

    Woche, Tag und Abschnitt ⇄ Index ⇄ Kurznotation (z.B. W2RP3).
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["reduced"] = reduced
    ctx.obj["config_path"] = config_path


def main():
    """Einstiegspunkt."""
    cli(obj={})


# Befehle registrieren
cli.add_command(cmd_config)
cli.add_command(cmd_decode)
cli.add_command(cmd_encode)
cli.add_command(cmd_classify)
cli.add_command(cmd_resolve)
cli.add_command(cmd_grid)


if __name__ == "__main__":
    main()
