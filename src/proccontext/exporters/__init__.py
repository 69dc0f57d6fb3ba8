"""Exporters module initialization."""

from .json_exporter import JSONExporter
from .csv_exporter import CSVExporter

__all__ = ["JSONExporter", "CSVExporter"]
