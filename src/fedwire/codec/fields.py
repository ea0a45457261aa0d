"""Width-aware encode/decode primitives for Fedwire record fields.

Two element shapes exist on the wire:
- fixed elements occupy exactly ``width`` columns and never carry a delimiter
- delimited elements end with ``*``; in fixed-width output they are still
  padded to ``width`` before the delimiter, in variable-length output only the
  content is written

Decoding does not need to know which mode produced the text.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fedwire.errors import ErrorKind, FieldError

DELIMITER = "*"
PAD = " "


class FieldKind(Enum):
    ALPHANUMERIC = "alphanumeric"
    NUMERIC = "numeric"
    AMOUNT = "amount"
    AMOUNT_COMMA = "amount_comma"
    IMPLIED_AMOUNT = "implied_amount"
    CURRENCY = "currency"
    ENUMERATION = "enumeration"


@dataclass(frozen=True)
class FieldSpec:
    width: int
    kind: FieldKind = FieldKind.ALPHANUMERIC
    required: bool = False
    delimited: bool = False
    choices: frozenset[str] | None = None
    # sibling field that makes this one required when it is non-empty
    required_with: str | None = None
    name: str = ""

    @property
    def zero_fill(self) -> bool:
        return self.kind is FieldKind.IMPLIED_AMOUNT


@dataclass(frozen=True)
class FormatOptions:
    variable_length_fields: bool = False
    newline: bool = False


FIXED = FormatOptions()
VARIABLE = FormatOptions(variable_length_fields=True)


def wire_field(
    width: int,
    kind: FieldKind = FieldKind.ALPHANUMERIC,
    *,
    required: bool = False,
    delimited: bool = False,
    choices: Collection[str] | None = None,
    required_with: str | None = None,
) -> Any:
    """Declare a record attribute as a wire field (dataclass field with a FieldSpec)."""
    spec = FieldSpec(
        width=width,
        kind=kind,
        required=required,
        delimited=delimited,
        choices=frozenset(choices) if choices is not None else None,
        required_with=required_with,
    )
    return dataclasses.field(default="", metadata={"wire": spec})


def decode_fixed(text: str, pos: int, spec: FieldSpec) -> tuple[str, int]:
    """Read exactly ``width`` characters (fewer if input ends) and trim trailing pad."""
    raw = text[pos : pos + spec.width]
    return raw.rstrip(PAD), len(raw)


def decode_delimited(text: str, pos: int, spec: FieldSpec) -> tuple[str, int]:
    """Read up to the next delimiter, bounded by ``width``, and step past it."""
    if pos >= len(text):
        return "", 0
    idx = text.find(DELIMITER, pos)
    if idx == -1:
        raise FieldError(spec.name, ErrorKind.REQUIRE_DELIMITER)
    content = text[pos:idx]
    if len(content) > spec.width:
        if content[spec.width :].strip(PAD):
            raise FieldError(
                spec.name,
                ErrorKind.MAX_LENGTH,
                content.rstrip(PAD),
                detail=f"maximum {spec.width}, found {len(content.rstrip(PAD))}",
            )
        content = content[: spec.width]
    return content.rstrip(PAD), idx - pos + 1


def decode_field(text: str, pos: int, spec: FieldSpec) -> tuple[str, int]:
    if spec.delimited:
        return decode_delimited(text, pos, spec)
    return decode_fixed(text, pos, spec)


def pad_value(value: str, spec: FieldSpec) -> str:
    if spec.zero_fill and value:
        return value.rjust(spec.width, "0")[: spec.width]
    return value.ljust(spec.width, PAD)[: spec.width]


def encode_field(value: str, spec: FieldSpec, options: FormatOptions = FIXED) -> str:
    if not spec.delimited:
        return pad_value(value, spec)
    if options.variable_length_fields:
        return value + DELIMITER
    return pad_value(value, spec) + DELIMITER
