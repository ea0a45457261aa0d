"""Record base class shared by every tagged Fedwire record."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import cache
from typing import Any, ClassVar

from fedwire.codec.fields import FIXED, FieldSpec, FormatOptions, decode_field, encode_field
from fedwire.codec.validate import collect_errors, validate_record
from fedwire.errors import ErrorKind, FieldError, min_length_error

TAG_LENGTH = 6


@cache
def _layout(cls: type[Record]) -> tuple[FieldSpec, ...]:
    specs: list[FieldSpec] = []
    for f in dataclasses.fields(cls):
        spec = f.metadata.get("wire")
        if spec is not None:
            specs.append(dataclasses.replace(spec, name=f.name))
    return tuple(specs)


@dataclass
class Record:
    TAG: ClassVar[str] = ""
    NAME: ClassVar[str] = ""
    MIN_LENGTH: ClassVar[int] = TAG_LENGTH

    tag: str = ""

    def __post_init__(self) -> None:
        if not self.tag:
            self.tag = self.TAG

    @classmethod
    def layout(cls) -> tuple[FieldSpec, ...]:
        return _layout(cls)

    @classmethod
    def parse(cls, text: str) -> Record:
        """Decode one record, tag included. Does not validate."""
        if len(text) < cls.MIN_LENGTH:
            raise min_length_error(cls.MIN_LENGTH, len(text))
        record = cls(tag=text[:TAG_LENGTH])
        pos = TAG_LENGTH
        for spec in cls.layout():
            value, consumed = decode_field(text, pos, spec)
            setattr(record, spec.name, value)
            pos += consumed
        if pos < len(text):
            raise FieldError(
                None,
                ErrorKind.MAX_LENGTH,
                text[pos:],
                detail=f"{len(text) - pos} unread characters",
            )
        return record

    def format(self, options: FormatOptions = FIXED) -> str:
        layout = self.layout()
        values = [getattr(self, spec.name) for spec in layout]
        end = len(layout)
        if options.variable_length_fields:
            first_delimited = next((i for i, s in enumerate(layout) if s.delimited), None)
            while (
                end > 0
                and layout[end - 1].delimited
                and not values[end - 1]
                and end - 1 != first_delimited
            ):
                end -= 1
        body = "".join(encode_field(values[i], layout[i], options) for i in range(end))
        return self.tag + body

    def __str__(self) -> str:
        return self.format()

    def validate(self) -> None:
        validate_record(self)

    def errors(self) -> list[FieldError]:
        return collect_errors(self)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"tag": self.tag}
        payload.update({spec.name: getattr(self, spec.name) for spec in self.layout()})
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Record:
        names = {spec.name for spec in cls.layout()} | {"tag"}
        values = {k: "" if v is None else str(v) for k, v in payload.items() if k in names}
        return cls(**values)
