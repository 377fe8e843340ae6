"""Output writers for extracted rows."""

from .exporter import export_rows, render_rows, write_rows_csv, write_rows_json

__all__ = ["export_rows", "render_rows", "write_rows_csv", "write_rows_json"]
