"""In-memory aggregate of the records that make up one Fedwire message."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from fedwire.codec.fields import FIXED, FormatOptions
from fedwire.errors import ErrorKind, FieldError
from fedwire.records.base import Record
from fedwire.records.registry import CANONICAL_ORDER, MANDATORY_TAGS, ORDER_INDEX, REGISTRY

logger = logging.getLogger(__name__)


def _canonical_tag(key: str | type[Record]) -> str:
    if isinstance(key, type):
        return key.TAG
    return key


class Message:
    """At most one record per known tag, always rendered in canonical tag order."""

    def __init__(self, records: list[Record] | None = None) -> None:
        self._records: dict[str, Record] = {}
        for record in records or []:
            self.add(record)

    def add(self, record: Record) -> None:
        tag = type(record).TAG
        if tag not in REGISTRY:
            raise FieldError("tag", ErrorKind.UNRECOGNIZED_TAG, tag)
        if tag in self._records:
            logger.warning("replacing existing %s record", type(record).NAME)
        self._records[tag] = record

    def get(self, key: str | type[Record]) -> Record | None:
        return self._records.get(_canonical_tag(key))

    def remove(self, key: str | type[Record]) -> Record | None:
        return self._records.pop(_canonical_tag(key), None)

    def __getitem__(self, key: str | type[Record]) -> Record:
        return self._records[_canonical_tag(key)]

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (str, type)):
            return _canonical_tag(key) in self._records
        return False

    def __len__(self) -> int:
        return len(self._records)

    @property
    def tags(self) -> list[str]:
        return sorted(self._records, key=ORDER_INDEX.__getitem__)

    def __iter__(self) -> Iterator[Record]:
        for tag in self.tags:
            yield self._records[tag]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"Message(tags={self.tags})"

    def format(self, options: FormatOptions = FIXED) -> str:
        sep = "\n" if options.newline else ""
        return "".join(record.format(options) + sep for record in self)

    def __str__(self) -> str:
        return self.format()

    def missing_mandatory(self) -> list[str]:
        return [tag for tag in MANDATORY_TAGS if tag not in self._records]

    def validate(self, require_mandatory: bool = False) -> None:
        """Validate every record in canonical order; raise the first FieldError."""
        if require_mandatory:
            missing = self.missing_mandatory()
            if missing:
                raise FieldError(REGISTRY[missing[0]].NAME, ErrorKind.FIELD_REQUIRED)
        for record in self:
            record.validate()

    def validation_report(self, require_mandatory: bool = False) -> list[dict[str, Any]]:
        """Every field error across the message, indexed by tag and record name."""
        report: list[dict[str, Any]] = []
        if require_mandatory:
            for tag in self.missing_mandatory():
                err = FieldError(REGISTRY[tag].NAME, ErrorKind.FIELD_REQUIRED)
                report.append({"tag": tag, "record": REGISTRY[tag].NAME, **err.to_dict()})
        for record in self:
            for err in record.errors():
                report.append({"tag": record.TAG, "record": record.NAME, **err.to_dict()})
        report.sort(key=lambda row: ORDER_INDEX[row["tag"]])
        return report

    def to_dict(self) -> dict[str, Any]:
        return {record.NAME: record.to_dict() for record in self}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Message:
        by_name = {REGISTRY[tag].NAME: REGISTRY[tag] for tag in CANONICAL_ORDER}
        message = cls()
        for name, fields in payload.items():
            record_type = by_name.get(name)
            if record_type is None:
                raise FieldError(name, ErrorKind.UNRECOGNIZED_TAG, name)
            message.add(record_type.from_dict(fields))
        return message
