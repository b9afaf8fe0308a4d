"""Record model, strict age parsing, and the ordered record collection."""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, Field, field_validator

from menagerie.domain.errors import ParseFailure

AGE_MAX = 255

# Whole-string match; ASCII digits only so "٣" or "1_0" never reach int().
_AGE_RE = re.compile(r"\+?[0-9]+")


def parse_age(text: str) -> int:
    """Parse *text* as an unsigned 8-bit integer.

    Surrounding whitespace is trimmed; the rest must be consumed entirely.

    Raises:
        ParseFailure: if the text is not an integer in ``0..255``.
    """
    raw = text.strip()
    if not raw:
        raise ParseFailure("expected a whole number", field="age", value=raw)
    if not _AGE_RE.fullmatch(raw):
        if raw.startswith("-") and raw[1:].isdigit():
            raise ParseFailure("age cannot be negative", field="age", value=raw)
        raise ParseFailure("expected a whole number", field="age", value=raw)
    value = int(raw)
    if value > AGE_MAX:
        raise ParseFailure(f"must be between 0 and {AGE_MAX}", field="age", value=raw)
    return value


class Record(BaseModel):
    """One collected name/species/age triple."""

    model_config = {"frozen": True}

    name: str
    species: str
    age: int = Field(ge=0, le=AGE_MAX, strict=True)

    @field_validator("name", "species")
    @classmethod
    def _trim(cls, value: str) -> str:
        return value.strip()

    def describe(self) -> str:
        """Return the report line for this record."""
        return f"{self.name} is a {self.species} and is {self.age} years old"


class RecordCollection:
    """Insertion-ordered records for a single run.

    Only fully constructed :class:`Record` instances can be appended.
    """

    def __init__(self) -> None:
        self._records: list[Record] = []

    def append(self, record: Record) -> None:
        if not isinstance(record, Record):
            msg = f"expected Record, got {type(record).__name__}"
            raise TypeError(msg)
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]

    def __repr__(self) -> str:
        return f"RecordCollection({self._records!r})"

    def report_lines(self) -> list[str]:
        """One report line per record, in insertion order."""
        return [record.describe() for record in self._records]

    def to_list(self) -> list[dict[str, Any]]:
        return [record.model_dump() for record in self._records]
