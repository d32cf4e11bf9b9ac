from __future__ import annotations

from typing import Any, Iterable, Optional
from zoneinfo import ZoneInfo

import pandas as pd

from . import canon
from .types import MeterRead


def empty_frame(tz: str = canon.DEFAULT_TZ) -> pd.DataFrame:
    """Empty volume frame with the tz-aware 't_start' index and frame columns."""
    idx = pd.DatetimeIndex([], tz=ZoneInfo(tz), name=canon.INDEX_NAME)
    return pd.DataFrame(columns=canon.FRAME_COLS, index=idx)


def to_dataframe(
    reads: Iterable[MeterRead], *, tz: Optional[str] = None
) -> pd.DataFrame:
    """
    Flatten parsed reads into a tidy frame, one row per volume.

    Index: tz-aware 't_start' at local midnight of the read date
    Columns: nmi, uom, kwh (float), quality ('A' | 'E')

    Rows keep parse order; use to_records() where exact decimals matter.
    """
    tz = tz or canon.DEFAULT_TZ
    rows = [
        {
            canon.INDEX_NAME: pd.Timestamp(day),
            "nmi": read.nmi,
            "uom": read.energy_unit.value,
            "kwh": float(vol.volume),
            "quality": vol.quality.value,
        }
        for read in reads
        for day, vol in read.volumes.items()
    ]
    if not rows:
        return empty_frame(tz)

    df = pd.DataFrame.from_records(rows)
    df[canon.INDEX_NAME] = df[canon.INDEX_NAME].dt.tz_localize(ZoneInfo(tz))
    df = df.set_index(canon.INDEX_NAME)
    return df[canon.FRAME_COLS]


def to_records(reads: Iterable[MeterRead]) -> list[dict[str, Any]]:
    """JSON-friendly records; volumes stay as decimal strings."""
    return [
        {
            "nmi": read.nmi,
            "uom": read.energy_unit.value,
            "volumes": [
                {
                    "date": day.isoformat(),
                    "volume": str(vol.volume),
                    "quality": vol.quality.value,
                }
                for day, vol in read.volumes.items()
            ],
        }
        for read in reads
    ]
