"""Structured errors shared by the codec, the validation engine and the reader.

Every failure is a ``FieldError``: a field name (``None`` for structural
problems such as a short record), an ``ErrorKind`` and the offending raw value.
The reader wraps these in ``ParseError`` to add line/column/record context.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fedwire.message import Message


class ErrorKind(Enum):
    FIELD_REQUIRED = "is a required field"
    NON_ALPHANUMERIC = "has non alphanumeric characters"
    NON_NUMERIC = "has non numeric characters"
    NON_AMOUNT = "is not a valid amount"
    NON_CURRENCY_CODE = "is not a recognized currency code"
    INVALID_ENUMERATION = "is not a permitted value"
    INVALID_TAG_FOR_TYPE = "is not valid for this record type"
    UNRECOGNIZED_TAG = "is an unrecognized tag"
    MIN_LENGTH = "is shorter than the minimum record length"
    MAX_LENGTH = "exceeds the maximum length"
    REQUIRE_DELIMITER = "requires a '*' delimiter"

    @property
    def message(self) -> str:
        return self.value


class WireError(Exception):
    """Base class for all codec errors."""


class FieldError(WireError):
    def __init__(
        self,
        field_name: str | None,
        kind: ErrorKind,
        value: str | None = None,
        detail: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.kind = kind
        self.value = value
        self.detail = detail
        super().__init__(self._render())

    def _render(self) -> str:
        parts = [self.field_name or "record"]
        if self.value is not None:
            parts.append(self.value)
        parts.append(self.kind.message)
        text = " ".join(parts)
        if self.detail:
            text = f"{text} ({self.detail})"
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return (self.field_name, self.kind, self.value) == (
            other.field_name,
            other.kind,
            other.value,
        )

    def __hash__(self) -> int:
        return hash((self.field_name, self.kind, self.value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field_name,
            "kind": self.kind.name,
            "value": self.value,
            "message": str(self),
        }


def min_length_error(required: int, actual: int) -> FieldError:
    return FieldError(
        None, ErrorKind.MIN_LENGTH, detail=f"required {required}, found {actual}"
    )


class ParseError(WireError):
    """A FieldError annotated with where the reader was when it happened."""

    def __init__(
        self,
        error: FieldError,
        line: int,
        column: int = 0,
        record: str | None = None,
        message: Message | None = None,
    ) -> None:
        self.error = error
        self.line = line
        self.column = column
        self.record = record
        # partially assembled message at the time of failure
        self.message = message
        super().__init__(f"line:{line} column:{column} record:{record or '-'} {error}")

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def field_name(self) -> str | None:
        return self.error.field_name

    @property
    def value(self) -> str | None:
        return self.error.value

    def to_dict(self) -> dict[str, Any]:
        payload = self.error.to_dict()
        payload.update({"line": self.line, "column": self.column, "record": self.record})
        return payload
