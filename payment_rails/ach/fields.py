"""
Typed fixed-width fields and record layouts.

A record layout is an ordered list of fields whose widths add up to the
record length. The same layout renders a record from a dict of values and
parses a line back into one, so encoder and decoder cannot drift apart.

  - NumericField: digits only, right-justified, zero-padded. A value with
    more digits than the field raises FieldOverflowError.
  - TextField: left-justified, space-padded, truncated to width. Anything
    outside printable ASCII becomes a space.
  - ConstantField: fixed content (record type code, format code, ...).
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from payment_rails.errors import FieldOverflowError

RECORD_LENGTH = 94

_NON_DIGITS = re.compile(r"\D")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")


@dataclass(frozen=True)
class Field:
    name: str
    width: int

    def format(self, value: Any) -> str:
        raise NotImplementedError

    def parse(self, raw: str) -> Any:
        return raw


@dataclass(frozen=True)
class NumericField(Field):
    def format(self, value: Any) -> str:
        digits = _NON_DIGITS.sub("", "" if value is None else str(value))
        if len(digits) > self.width:
            raise FieldOverflowError(self.name, self.width, digits)
        return digits.rjust(self.width, "0")


@dataclass(frozen=True)
class TextField(Field):
    def format(self, value: Any) -> str:
        text = _NON_PRINTABLE.sub(" ", "" if value is None else str(value))
        return text[:self.width].ljust(self.width)

    def parse(self, raw: str) -> str:
        return raw.strip()


@dataclass(frozen=True)
class ConstantField(Field):
    value: str = ""

    def format(self, value: Any = None) -> str:
        return self.value.ljust(self.width)[:self.width]


class RecordLayout:
    """Ordered fields of one record type."""

    def __init__(self, record_type: str, fields: Sequence[Field]):
        self.record_type = record_type
        self.fields = tuple(fields)

        offsets = {}
        position = 0
        for f in self.fields:
            offsets[f.name] = (position, position + f.width)
            position += f.width
        if position != RECORD_LENGTH:
            raise ValueError(f"Layout {record_type!r} is {position} characters, expected {RECORD_LENGTH}")
        self._offsets = offsets

    def render(self, values: Mapping[str, Any]) -> str:
        return "".join(f.format(values.get(f.name)) for f in self.fields)

    def parse(self, line: str) -> dict[str, Any]:
        """Slice a line into named raw values (text fields stripped)."""
        line = line.ljust(RECORD_LENGTH)
        parsed = {}
        for f in self.fields:
            if isinstance(f, ConstantField):
                continue
            start, end = self._offsets[f.name]
            parsed[f.name] = f.parse(line[start:end])
        return parsed

    def span(self, name: str) -> tuple[int, int]:
        return self._offsets[name]

    def __repr__(self) -> str:
        return f"RecordLayout({self.record_type!r}, {len(self.fields)} fields)"
