from __future__ import annotations
from typing import Sequence

from . import canon, exceptions, utils
from .types import EnergyUnit, Quality


def validate_envelope(lines: Sequence[str]) -> None:
    """A non-empty file must open with a 100 record and close with a 900 record."""
    rows = [line for line in lines if not utils.is_blank(line)]
    if not rows:
        return
    if utils.record_identifier(rows[0]) != canon.HEADER_RECORD:
        raise exceptions.EnvelopeError(
            f"Validation failure: Expected {canon.HEADER_RECORD} as the beginning record of meter reading"
        )
    if utils.record_identifier(rows[-1]) != canon.TRAILER_RECORD:
        raise exceptions.EnvelopeError(
            f"Validation failure: Expected {canon.TRAILER_RECORD} as the end record of meter reading"
        )


def validate_field_count(fields: Sequence[str], minimum: int) -> None:
    exceptions.require(
        len(fields) >= minimum,
        f"Validation failure: {fields[0]} record needs at least {minimum} fields, got {len(fields)}",
        exceptions.FieldValidationError,
    )


def validate_meter_read(fields: Sequence[str]) -> None:
    """NMI must be exactly 10 characters and the unit must be KWH."""
    validate_field_count(fields, canon.ENERGY_UNIT_FIELD + 1)
    nmi = fields[canon.NMI_FIELD]
    unit = fields[canon.ENERGY_UNIT_FIELD]
    exceptions.require(
        utils.field_validator(nmi, lambda s: len(s) == canon.NMI_LENGTH),
        f"Validation failure: NMI {nmi!r} is not {canon.NMI_LENGTH} characters",
        exceptions.FieldValidationError,
    )
    exceptions.require(
        utils.field_validator(unit, lambda s: s in {u.value for u in EnergyUnit}),
        f"Validation failure: EnergyUnit {unit!r} is not one of {[u.value for u in EnergyUnit]}",
        exceptions.FieldValidationError,
    )


def validate_meter_volume(fields: Sequence[str]) -> None:
    """Quality must be Active (A) or Estimate (E)."""
    validate_field_count(fields, canon.QUALITY_FIELD + 1)
    quality = fields[canon.QUALITY_FIELD]
    exceptions.require(
        utils.field_validator(quality, lambda s: s in {q.value for q in Quality}),
        f"Validation failure: Meter Read Quality {quality!r} does not represent either Active(A) or Estimate(E)",
        exceptions.FieldValidationError,
    )
