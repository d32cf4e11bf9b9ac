from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Optional, TypedDict

from . import canon
from .exceptions import FieldValidationError, SimpleNem12Error, require


class EnergyUnit(str, Enum):
    KWH = "KWH"


class Quality(str, Enum):
    A = "A"
    E = "E"

    @property
    def label(self) -> str:
        return "Active" if self is Quality.A else "Estimate"


class RecordType(str, Enum):
    HEADER = canon.HEADER_RECORD
    METER_READ = canon.METER_READ_RECORD
    VOLUME = canon.VOLUME_RECORD
    TRAILER = canon.TRAILER_RECORD


@dataclass(frozen=True)
class MeterVolume:
    """One dated volume observation; the date lives on the owning MeterRead."""

    volume: Decimal
    quality: Quality

    def __post_init__(self):
        require(
            isinstance(self.volume, Decimal) and self.volume.is_finite(),
            f"Volume must be a finite Decimal, got {self.volume!r}",
            FieldValidationError,
        )
        require(
            isinstance(self.quality, Quality),
            f"Quality must be one of {[q.value for q in Quality]}, got {self.quality!r}",
            FieldValidationError,
        )


@dataclass
class MeterRead:
    """
    A single meter (NMI) and its volumes keyed by read date.

    Volumes keep parse order. A repeated date replaces the earlier
    observation but keeps its original position.
    """

    nmi: str
    energy_unit: EnergyUnit
    volumes: Dict[date, MeterVolume] = field(default_factory=dict)

    def __post_init__(self):
        require(
            isinstance(self.nmi, str) and len(self.nmi) == canon.NMI_LENGTH,
            f"NMI must be exactly {canon.NMI_LENGTH} characters, got {self.nmi!r}",
            FieldValidationError,
        )
        require(
            isinstance(self.energy_unit, EnergyUnit),
            f"Energy unit must be one of {[u.value for u in EnergyUnit]}, got {self.energy_unit!r}",
            FieldValidationError,
        )

    def append_volume(self, day: date, volume: MeterVolume) -> None:
        self.volumes[day] = volume

    @property
    def total_volume(self) -> Decimal:
        return sum((v.volume for v in self.volumes.values()), Decimal("0"))

    @property
    def start_date(self) -> Optional[date]:
        return min(self.volumes) if self.volumes else None

    @property
    def end_date(self) -> Optional[date]:
        return max(self.volumes) if self.volumes else None


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of one parse run.

    `error` is None for a clean parse (including an empty file). On failure
    `reads` holds whatever was collected before the failing line.
    """

    reads: List[MeterRead] = field(default_factory=list)
    error: Optional[SimpleNem12Error] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> List[MeterRead]:
        if self.error is not None:
            raise self.error
        return self.reads


class MeterSummary(TypedDict):
    nmi: str
    uom: str
    days: int
    start: Optional[str]
    end: Optional[str]
    total_kwh: str
    actual_days: int
    estimated_days: int
