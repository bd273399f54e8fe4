"""Export-Modul: Terminal-Darstellung (Rich) des Rasters."""

from export.tui_renderer import build_grid_table, build_schema_table, render_grid_rows

__all__ = ["build_grid_table", "build_schema_table", "render_grid_rows"]
