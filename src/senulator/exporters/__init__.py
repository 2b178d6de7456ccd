"""Exporters for generated records and generation diagnostics."""

from .console_exporter import create_console_log_exporter
from .file_exporter import FileLogExporter
from .otlp_exporter import create_otlp_log_exporter
from .senml_exporter import SenMLFileExporter, encode, encode_json, encode_jsonl

__all__ = [
    "SenMLFileExporter",
    "encode",
    "encode_json",
    "encode_jsonl",
    "FileLogExporter",
    "create_console_log_exporter",
    "create_otlp_log_exporter",
]
