"""
Configuration for senulator.

Request definition files live outside src/ under resource/ (resource/requests/).
When running from source, resource/ at project root is used. When the package
is installed, set SENULATOR_ROOT to a directory containing requests/.

Environment:
    SENULATOR_ROOT       Resources root (must contain requests/)
    SENULATOR_SEED       Default seed for the CLI when --seed is not given
    SENULATOR_LOG_LEVEL  Level for the senulator logger namespace (default INFO)
"""

import logging
import os
from pathlib import Path
LOGGER_NAMESPACE = "senulator"


def get_resources_root() -> Path:
    """Return the root directory for request definition resources.

    Resolution order:
    1. SENULATOR_ROOT env var (must be a directory)
    2. resource/ under directory containing pyproject.toml (when running from source)
    3. senulator/resources/ next to this package (when installed)
    """
    env_root = os.environ.get("SENULATOR_ROOT")
    if env_root:
        p = Path(env_root).resolve()
        if p.is_dir():
            return p
    here = Path(__file__).resolve().parent
    for candidate in [here, *here.parents]:
        if (candidate / "pyproject.toml").is_file():
            return candidate / "resource"
    return Path(__file__).resolve().parent / "resources"


def get_default_seed() -> int | None:
    """Seed from SENULATOR_SEED, or None for a time-seeded run."""
    raw = os.environ.get("SENULATOR_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise SystemExit("SENULATOR_SEED must be an integer.") from None


def get_log_level() -> int:
    """Log level from SENULATOR_LOG_LEVEL (name or number). Default: INFO."""
    raw = os.environ.get("SENULATOR_LOG_LEVEL", "").strip().upper()
    if not raw:
        return logging.INFO
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


REQUESTS_DIR = get_resources_root() / "requests"
