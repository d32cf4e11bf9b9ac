# simplenem12/utils.py
from __future__ import annotations
import logging
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from . import canon
from .exceptions import FieldValidationError

_logger = logging.getLogger(__name__)

_DATE_RE = re.compile(canon.DATE_PATTERN)
_VOLUME_RE = re.compile(canon.VOLUME_PATTERN)
_LINE_BREAK_RE = re.compile(canon.LINE_BREAK_PATTERN)


def field_validator(value: str, predicate: Callable[[str], bool]) -> bool:
    return predicate(value)


def split_record(line: str) -> list[str]:
    """Split one raw line into fields. No quoting or escaping is recognised."""
    return line.rstrip("\r\n").split(canon.DELIMITER)


def record_identifier(line: str) -> str:
    return split_record(line)[0]


def split_lines(text: str) -> list[str]:
    """Split on CR, LF or CRLF only; a trailing break adds no empty line."""
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def is_blank(line: str) -> bool:
    return not line.strip()


def parse_date(
    text: str, *, logger: Optional[logging.Logger] = None
) -> Optional[date]:
    """
    Parse a 'yyyyMMdd' string into a date.

    Returns None when the value is empty, not eight digits, or not a real
    calendar date. Never raises; callers decide how loud the failure is.
    Impossible dates such as 20160230 are rejected, not clamped to the
    month end as lenient NEM12 readers do.
    """
    logger = logger or _logger
    if text and _DATE_RE.fullmatch(text):
        try:
            return datetime.strptime(text, canon.DATE_FORMAT).date()
        except ValueError:
            pass
    logger.debug("Date Parser failure: Input date %r cannot be parsed", text)
    return None


def parse_volume(text: str) -> Decimal:
    """Exact decimal parse of a volume field; plain ASCII decimal literals only."""
    if not _VOLUME_RE.fullmatch(text):
        raise FieldValidationError(
            f"Validation failure: volume {text!r} is not a decimal number"
        )
    try:
        return Decimal(text)
    except InvalidOperation:
        raise FieldValidationError(
            f"Validation failure: volume {text!r} is not a decimal number"
        ) from None
