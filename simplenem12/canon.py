from __future__ import annotations
from typing import Final

DELIMITER: Final[str] = ","

# Record identifiers (leading field of every line)
HEADER_RECORD: Final[str] = "100"
METER_READ_RECORD: Final[str] = "200"
VOLUME_RECORD: Final[str] = "300"
TRAILER_RECORD: Final[str] = "900"

NMI_LENGTH: Final[int] = 10
DATE_FORMAT: Final[str] = "%Y%m%d"
DATE_PATTERN: Final[str] = r"[0-9]{8}"
VOLUME_PATTERN: Final[str] = r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?"
LINE_BREAK_PATTERN: Final[str] = r"\r\n|\r|\n"

# Field positions as laid out in the file
NMI_FIELD: Final[int] = 1
ENERGY_UNIT_FIELD: Final[int] = 2
DATE_FIELD: Final[int] = 1
VOLUME_FIELD: Final[int] = 2
QUALITY_FIELD: Final[int] = 3

DEFAULT_TZ: Final[str] = "Australia/Brisbane"
DEFAULT_ENCODING: Final[str] = "utf-8"
INDEX_NAME: Final[str] = "t_start"
FRAME_COLS: Final[list[str]] = ["nmi", "uom", "kwh", "quality"]
