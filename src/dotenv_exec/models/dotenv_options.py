"""Dotenv loading options model for dotenv_exec."""

import codecs

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_ENCODING = "utf-8"

TRUE_VALUES = {"true", "1"}
FALSE_VALUES = {"false", "0"}


def parse_bool(value: str) -> bool | None:
    """Return the boolean spelled by value, or None if it spells neither."""
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return None


class DotenvOptions(BaseModel):
    """How the dotenv file is read and applied."""

    model_config = ConfigDict(frozen=True)

    override: bool = False
    strict: bool = True
    debug: bool = False
    encoding: str = DEFAULT_ENCODING

    @field_validator("override", "strict", "debug", mode="before")
    @classmethod
    def _check_bool(cls, value: object) -> object:
        if isinstance(value, str):
            parsed = parse_bool(value)
            if parsed is None:
                raise ValueError("expected one of true, false, 1, 0")
            return parsed
        return value

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
