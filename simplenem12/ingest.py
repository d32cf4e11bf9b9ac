from __future__ import annotations
import logging
import os
from typing import IO, Iterable, Optional, Union

from . import exceptions, utils, validate
from .config import ParserConfig, default_config
from .parser import ReadAggregator
from .types import MeterRead, ParseResult

_logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", IO[str], IO[bytes]]


def parse_lines(
    lines: Iterable[str],
    *,
    config: Optional[ParserConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> ParseResult:
    """
    Parse an ordered sequence of raw NEM12 lines.

    The envelope (100 first, 900 last) is checked before any row is
    dispatched. Failures are logged and returned on the result together
    with the reads collected up to the failing line; they are not raised.
    """
    config = config or default_config()
    logger = logger or _logger
    rows = [line for line in lines if not utils.is_blank(line)]
    if not rows:
        return ParseResult(reads=[])

    state = ReadAggregator(config, logger)
    try:
        validate.validate_envelope(rows)
        for row in rows:
            state.feed(row)
    except exceptions.SimpleNem12Error as e:
        logger.error("%s", e)
        return ParseResult(reads=state.reads, error=e)

    logger.debug("Parsed %d meter reads from %d lines", len(state.reads), len(rows))
    return ParseResult(reads=state.reads)


def from_nem12(
    source: Source,
    *,
    config: Optional[ParserConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> ParseResult:
    """
    Parse a NEM12 file given as a path or an open text stream.

    A missing path is reported as InputFileNotFoundError on the result.
    """
    config = config or default_config()
    logger = logger or _logger

    if hasattr(source, "read"):
        text = source.read()  # type: ignore[union-attr]
        if isinstance(text, bytes):
            try:
                text = text.decode(config.encoding)
            except (UnicodeDecodeError, LookupError) as e:
                err = exceptions.InputReadError(f"Could not decode input stream: {e}")
                logger.error("%s", err)
                return ParseResult(reads=[], error=err)
        return parse_lines(utils.split_lines(text), config=config, logger=logger)

    path = os.fspath(source)  # type: ignore[arg-type]
    if not os.path.isfile(path):
        err = exceptions.InputFileNotFoundError(
            f"Input File does not exist in the path: {path}"
        )
        logger.error("%s", err)
        return ParseResult(reads=[], error=err)

    try:
        with open(path, encoding=config.encoding, newline="") as fh:
            lines = utils.split_lines(fh.read())
    except (OSError, UnicodeDecodeError, LookupError) as e:
        err = exceptions.InputReadError(f"Could not read {path}: {e}")
        logger.error("%s", err)
        return ParseResult(reads=[], error=err)
    logger.debug("Read %d lines from %s", len(lines), path)
    return parse_lines(lines, config=config, logger=logger)


def parse_simple_nem12(
    source: Source,
    *,
    config: Optional[ParserConfig] = None,
    logger: Optional[logging.Logger] = None,
) -> list[MeterRead]:
    """Return the parsed reads only; failures leave an empty or partial list."""
    return from_nem12(source, config=config, logger=logger).reads
