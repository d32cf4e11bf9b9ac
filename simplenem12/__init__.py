from . import (
    canon,
    exceptions,
    types,
    config,
    utils,
    validate,
    parser,
    ingest,
    formats,
    summary,
)
from .ingest import from_nem12, parse_lines, parse_simple_nem12
from .types import EnergyUnit, MeterRead, MeterVolume, ParseResult, Quality

__all__ = [
    "canon",
    "exceptions",
    "types",
    "config",
    "utils",
    "validate",
    "parser",
    "ingest",
    "formats",
    "summary",
    "from_nem12",
    "parse_lines",
    "parse_simple_nem12",
    "EnergyUnit",
    "MeterRead",
    "MeterVolume",
    "ParseResult",
    "Quality",
]
