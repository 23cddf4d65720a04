"""TOML configuration loader for the pantry module."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .expiry import DEFAULT_EXPIRY_DAYS
from .receipt.models import DEFAULT_UNIT

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class ReceiptConfig:
    default_expiry_days: int = DEFAULT_EXPIRY_DAYS
    max_input_chars: int = 65536
    unit: str = DEFAULT_UNIT


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class PantryConfig:
    receipt: ReceiptConfig = field(default_factory=ReceiptConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> PantryConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Values left unset in the file can come from WASTEWISE_* environment
    variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    rcp = raw.get("receipt", {})
    log = raw.get("logging", {})

    # Resolve overridable values: config file → environment variable → default
    expiry_days = rcp.get("default_expiry_days")
    if expiry_days is None:
        expiry_days = _env_int("WASTEWISE_EXPIRY_DAYS", DEFAULT_EXPIRY_DAYS)
    log_level = log.get("level") or os.environ.get("WASTEWISE_LOG_LEVEL", "WARNING")

    return PantryConfig(
        receipt=ReceiptConfig(
            default_expiry_days=expiry_days,
            max_input_chars=rcp.get("max_input_chars", 65536),
            unit=rcp.get("unit", DEFAULT_UNIT),
        ),
        logging=LoggingConfig(
            level=log_level.upper(),
        ),
    )


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
