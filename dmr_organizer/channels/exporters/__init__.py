"""File codecs for channel catalogs."""

from . import csv_exporter, json_exporter, xlsx_exporter

__all__ = ["csv_exporter", "json_exporter", "xlsx_exporter"]
