from __future__ import annotations
import codecs
from typing import Literal
from pydantic import BaseModel, field_validator

from . import canon


class ParserConfig(BaseModel):
    encoding: str = canon.DEFAULT_ENCODING
    # What a 300 record with an unparseable date does: abort the run or drop the row
    on_bad_date: Literal["raise", "skip"] = "raise"

    @field_validator("encoding")
    @classmethod
    def encoding_known(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v!r}") from None
        return v


def default_config() -> ParserConfig:
    return ParserConfig()
