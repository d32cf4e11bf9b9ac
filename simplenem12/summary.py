from __future__ import annotations
from typing import Iterable

from .types import MeterRead, MeterSummary, Quality


def summarise_read(read: MeterRead) -> MeterSummary:
    qualities = [v.quality for v in read.volumes.values()]
    start, end = read.start_date, read.end_date
    return {
        "nmi": read.nmi,
        "uom": read.energy_unit.value,
        "days": len(read.volumes),
        "start": start.isoformat() if start else None,
        "end": end.isoformat() if end else None,
        # exact decimal as text so the payload stays JSON-safe
        "total_kwh": str(read.total_volume),
        "actual_days": qualities.count(Quality.A),
        "estimated_days": qualities.count(Quality.E),
    }


def summarise(reads: Iterable[MeterRead]) -> list[MeterSummary]:
    """One summary per MeterRead, in parse order."""
    return [summarise_read(r) for r in reads]
