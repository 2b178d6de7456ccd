"""
SenML (RFC 8428) encoding of generated records.

Writes records as a JSON array or as JSON lines for:
- Test fixtures for sensor-data pipelines
- Replay into ingestion endpoints
- Offline inspection
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..generators.record import Record

BASE_FIELDS = ("bn", "bt", "bver")
FORMATS = ("json", "jsonl")


def to_senml_pack(records: Sequence[Record], compact: bool = False) -> list[dict[str, Any]]:
    """
    Convert records to a SenML pack (list of label/value mappings).

    With compact=True, base fields are only written when they differ from the
    previous record, which is how SenML resolves repeated base values.
    """
    pack: list[dict[str, Any]] = []
    previous: dict[str, Any] = {}
    for record in records:
        entry = record.to_senml()
        if compact:
            current = {k: entry[k] for k in BASE_FIELDS}
            for k in BASE_FIELDS:
                if previous.get(k) == current[k]:
                    del entry[k]
            previous = current
        pack.append(entry)
    return pack


def encode_json(records: Sequence[Record], compact: bool = False) -> str:
    """Encode records as a SenML JSON array."""
    return json.dumps(to_senml_pack(records, compact=compact))


def encode_jsonl(records: Sequence[Record]) -> str:
    """Encode records as one full SenML record per line."""
    return "".join(json.dumps(record.to_senml()) + "\n" for record in records)


def encode(records: Sequence[Record], fmt: str = "json", compact: bool = False) -> str:
    """Encode records in the given format (json or jsonl)."""
    if fmt == "json":
        return encode_json(records, compact=compact)
    if fmt == "jsonl":
        return encode_jsonl(records)
    raise ValueError(f"Unknown SenML format: {fmt}")


class SenMLFileExporter:
    """Export records to a SenML file."""

    def __init__(self, output_path: str | Path, fmt: str = "json", compact: bool = False):
        """Initialize file exporter."""
        if fmt not in FORMATS:
            raise ValueError(f"Unknown SenML format: {fmt}")
        self.output_path = Path(output_path)
        self.fmt = fmt
        self.compact = compact
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def export(self, records: Sequence[Record]) -> int:
        """Write records to the file, replacing its content. Returns the record count."""
        with open(self.output_path, "w", encoding="utf-8") as f:
            f.write(encode(records, fmt=self.fmt, compact=self.compact))
        return len(records)
