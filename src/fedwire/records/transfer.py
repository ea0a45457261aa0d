"""Optional transfer-level records."""

from __future__ import annotations

from dataclasses import dataclass

from fedwire.codec.fields import FieldKind, wire_field
from fedwire.records.base import Record

TAG_SENDER_REFERENCE = "{3320}"
TAG_INSTRUCTED_AMOUNT = "{3710}"


@dataclass
class SenderReference(Record):
    TAG = TAG_SENDER_REFERENCE
    NAME = "SenderReference"

    sender_reference: str = wire_field(16, required=True, delimited=True)


@dataclass
class InstructedAmount(Record):
    """Instructed amount; the decimal marker is a comma (1234,56)."""

    TAG = TAG_INSTRUCTED_AMOUNT
    NAME = "InstructedAmount"
    MIN_LENGTH = 9

    currency_code: str = wire_field(3, FieldKind.CURRENCY, required=True)
    amount: str = wire_field(15, FieldKind.AMOUNT_COMMA, required=True, delimited=True)
