from __future__ import annotations
import logging
from typing import Optional, Sequence

from . import canon, exceptions, utils, validate
from .config import ParserConfig, default_config
from .types import EnergyUnit, MeterRead, MeterVolume, Quality, RecordType

_logger = logging.getLogger(__name__)


def classify(fields: Sequence[str]) -> Optional[RecordType]:
    """Map the leading field to a RecordType; unknown identifiers give None."""
    try:
        return RecordType(fields[0])
    except ValueError:
        return None


class ReadAggregator:
    """
    Append-only collection of MeterRead built from a single file.

    `current` is the MeterRead that receives 300 volumes; it moves on
    every 200 record and is None until the first one.
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config or default_config()
        self.logger = logger or _logger
        self.reads: list[MeterRead] = []
        self.current: Optional[MeterRead] = None

    def feed(self, line: str) -> None:
        if utils.is_blank(line):
            return
        fields = utils.split_record(line)
        kind = classify(fields)
        if kind is RecordType.METER_READ:
            self.handle_meter_read(fields)
        elif kind is RecordType.VOLUME:
            self.handle_meter_volume(fields)
        # 100/900 are covered by the envelope check; anything else passes through

    def handle_meter_read(self, fields: Sequence[str]) -> MeterRead:
        validate.validate_meter_read(fields)
        read = MeterRead(
            fields[canon.NMI_FIELD], EnergyUnit(fields[canon.ENERGY_UNIT_FIELD])
        )
        self.reads.append(read)
        self.current = read
        return read

    def handle_meter_volume(self, fields: Sequence[str]) -> Optional[MeterVolume]:
        if self.current is None:
            raise exceptions.MissingCurrentRecordError(
                f"Validation failure: {canon.VOLUME_RECORD} record found before any "
                f"{canon.METER_READ_RECORD} record"
            )
        validate.validate_meter_volume(fields)
        volume = MeterVolume(
            utils.parse_volume(fields[canon.VOLUME_FIELD]),
            Quality(fields[canon.QUALITY_FIELD]),
        )
        raw_date = fields[canon.DATE_FIELD]
        day = utils.parse_date(raw_date, logger=self.logger)
        if day is None:
            if self.config.on_bad_date == "skip":
                self.logger.warning(
                    "Skipping %s record for NMI %s with unparseable date %r",
                    canon.VOLUME_RECORD,
                    self.current.nmi,
                    raw_date,
                )
                return None
            raise exceptions.DateParseError(
                f"Validation failure: {canon.VOLUME_RECORD} record date {raw_date!r} is not yyyyMMdd"
            )
        self.current.append_volume(day, volume)
        return volume
