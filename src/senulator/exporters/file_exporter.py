"""
File-based exporter for generation diagnostics.

Writes OTEL log records to a JSON lines file for:
- Offline inspection of generation runs
- Test assertions
"""

import json
from collections.abc import Sequence
from pathlib import Path

from opentelemetry.sdk._logs.export import LogExportResult, LogRecordExporter


class FileLogExporter(LogRecordExporter):
    """Export logs to a JSON file."""

    def __init__(self, output_path: str | Path, append: bool = True):
        """Initialize file exporter."""
        self.output_path = Path(output_path)
        self.append = append
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        if not append and self.output_path.exists():
            self.output_path.unlink()

    def export(self, batch: Sequence) -> LogExportResult:  # type: ignore[override]
        """Export logs to file."""
        try:
            log_dicts = []
            for item in batch:
                # Batches hold wrappers that carry the record in .log_record
                log_record = getattr(item, "log_record", item)
                severity = getattr(log_record, "severity_number", None)
                body = getattr(log_record, "body", None)
                log_dicts.append(
                    {
                        "timestamp": getattr(log_record, "timestamp", None),
                        "severity_number": severity.value if severity else None,
                        "severity_text": getattr(log_record, "severity_text", None),
                        "body": str(body) if body else None,
                        "attributes": dict(getattr(log_record, "attributes", None) or {}),
                    }
                )

            with open(self.output_path, "a", encoding="utf-8") as f:
                for log_dict in log_dicts:
                    f.write(json.dumps(log_dict, default=str) + "\n")

            return LogExportResult.SUCCESS
        except (OSError, TypeError, ValueError):
            return LogExportResult.FAILURE

    def shutdown(self) -> None:
        """Shutdown exporter."""
        pass
