"""
Load and parse YAML-based request definitions.

A definition names the window, base metadata and the units to generate:

    name: urn:dev:ow:10e2073a01080063
    version: 10
    start: 0
    end: 86400
    units:
      - name: volume
        symbol: m3
        interval: 900
        floor: 0
        categories:
          - {weight: 0.7, range: [0, 0]}
          - {weight: 0.2, range: [0.1, 19]}

Instead of start/end a definition may give ``days``: the window then starts
now (whole seconds) and spans that many days. Units may also use the
``probability`` list plus ``categories`` index map form.
"""

import math
import time
from pathlib import Path
from typing import Any

import yaml

from ..config import REQUESTS_DIR
from ..errors import ConfigurationError
from ..generators.request import DEFAULT_VERSION, GenerationRequest
from ..generators.unit import Category, Unit

SECONDS_PER_DAY = 86400

# Reference definition excluded from listings of the bundled folder.
EXAMPLE_REQUEST_NAME = "example_request"


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{what} must be a number, got {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigurationError(f"{what} must be finite, got {value!r}")
    return float(value)


def _integer(value: Any, what: str) -> int:
    if (
        isinstance(value, bool)
        or not isinstance(value, (int, float))
        or (isinstance(value, float) and not math.isfinite(value))
        or int(value) != value
    ):
        raise ConfigurationError(f"{what} must be an integer, got {value!r}")
    return int(value)


def _parse_range(raw: Any, what: str) -> tuple[float, float]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ConfigurationError(f"{what} must be [lower, upper]")
    return _number(raw[0], what), _number(raw[1], what)


def _parse_categories(name: str, data: dict[str, Any]) -> list[Category]:
    """Parse either a list of {weight, range} or probability + index map."""
    raw = data.get("categories")
    probability = data.get("probability")

    if probability is not None:
        if not isinstance(probability, list) or not isinstance(raw, dict):
            raise ConfigurationError(
                f"unit '{name}': probability must be a list and categories an index map"
            )
        ranges = {}
        for key, bounds in raw.items():
            try:
                ranges[int(key)] = bounds
            except (TypeError, ValueError):
                raise ConfigurationError(
                    f"unit '{name}': category index must be an integer, got {key!r}"
                ) from None
        categories = []
        for index, weight in enumerate(probability):
            if index not in ranges:
                raise ConfigurationError(f"unit '{name}': category {index} has no range")
            lower, upper = _parse_range(ranges[index], f"unit '{name}' category {index} range")
            categories.append(
                Category(weight=_number(weight, f"unit '{name}' weight"), lower=lower, upper=upper)
            )
        return categories

    if not isinstance(raw, list) or not raw:
        raise ConfigurationError(f"unit '{name}': categories must be a non-empty list")
    categories = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ConfigurationError(f"unit '{name}': category {index} must be a mapping")
        lower, upper = _parse_range(entry.get("range"), f"unit '{name}' category {index} range")
        categories.append(
            Category(
                weight=_number(entry.get("weight", 1.0), f"unit '{name}' weight"),
                lower=lower,
                upper=upper,
            )
        )
    return categories


def _parse_unit(data: Any) -> Unit:
    if not isinstance(data, dict):
        raise ConfigurationError("each unit must be a mapping")
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError("unit name is required")
    symbol = data.get("symbol", "")
    if not isinstance(symbol, str):
        raise ConfigurationError(f"unit '{name}': symbol must be a string")
    if "interval" not in data:
        raise ConfigurationError(f"unit '{name}': interval is required")

    # A configured floor or ceiling enables the matching check
    floor = data.get("floor")
    ceiling = data.get("ceiling")
    return Unit(
        name=name,
        symbol=symbol,
        categories=_parse_categories(name, data),
        interval=_integer(data["interval"], f"unit '{name}' interval"),
        reading=_number(data.get("reading", 0.0), f"unit '{name}' reading"),
        use_floor=floor is not None,
        floor=_number(floor, f"unit '{name}' floor") if floor is not None else 0.0,
        use_ceiling=ceiling is not None,
        ceiling=_number(ceiling, f"unit '{name}' ceiling") if ceiling is not None else 0.0,
    )


def _parse_window(data: dict[str, Any]) -> tuple[int, int]:
    if "days" in data:
        days = _number(data["days"], "days")
        start = int(time.time())
        return start, start + int(days * SECONDS_PER_DAY)
    if "start" not in data or "end" not in data:
        raise ConfigurationError("request needs start and end, or days")
    return _integer(data["start"], "start"), _integer(data["end"], "end")


class RequestLoader:
    """Load generation requests from YAML files."""

    def __init__(self, requests_dir: Path | str | None = None):
        """Initialize loader with requests directory.

        If requests_dir is None, uses the bundled sample definitions (REQUESTS_DIR).
        """
        if requests_dir is None:
            self.requests_dir = REQUESTS_DIR
        else:
            self.requests_dir = Path(requests_dir)

    def _is_sample_dir(self) -> bool:
        try:
            return self.requests_dir.resolve() == REQUESTS_DIR.resolve()
        except (OSError, RuntimeError):
            return False

    def load(self, request_name: str) -> GenerationRequest:
        """Load a request definition by name (file stem)."""
        request_file = self.requests_dir / f"{request_name}.yaml"
        if not request_file.exists():
            raise FileNotFoundError(f"Request not found: {request_name}")
        return self.load_file(request_file)

    def load_file(self, path: Path | str) -> GenerationRequest:
        """Load a request definition from an explicit path."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"{path.name}: invalid YAML: {e}") from e
        data = data if isinstance(data, dict) else {}
        data.setdefault("name", path.stem)
        return self.from_dict(data)

    def load_all(self) -> list[GenerationRequest]:
        """Load every request definition in the directory."""
        return [self.load(name) for name in self.list_requests()]

    def list_requests(self) -> list[str]:
        """List available request names."""
        if not self.requests_dir.exists():
            return []
        exclude_example = self._is_sample_dir()
        return sorted(
            f.stem
            for f in self.requests_dir.glob("*.yaml")
            if not (exclude_example and f.stem == EXAMPLE_REQUEST_NAME)
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GenerationRequest:
        """Build a validated request from parsed YAML data."""
        if not isinstance(data, dict):
            raise ConfigurationError("request definition must be a mapping")
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigurationError("request name is required")
        units_raw = data.get("units") or []
        if not isinstance(units_raw, list):
            raise ConfigurationError("units must be a list")
        start, end = _parse_window(data)
        return GenerationRequest.create(
            name=name,
            start=start,
            end=end,
            units=[_parse_unit(u) for u in units_raw],
            version=_integer(data.get("version", DEFAULT_VERSION), "version"),
            debug=bool(data.get("debug", False)),
        )
