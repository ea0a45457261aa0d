"""Structured remittance records: {8250} Related Remittance and {8600} Adjustment."""

from __future__ import annotations

from dataclasses import dataclass

from fedwire.codec.fields import FieldKind, wire_field
from fedwire.codes import (
    ADDRESS_TYPES,
    ADJUSTMENT_REASON_CODES,
    CREDIT_DEBIT_INDICATORS,
    REMITTANCE_LOCATION_METHODS,
)
from fedwire.records.base import Record

ENUM = FieldKind.ENUMERATION

TAG_RELATED_REMITTANCE = "{8250}"
TAG_ADJUSTMENT = "{8600}"


@dataclass
class RelatedRemittance(Record):
    """Pointer to remittance information sent outside the transfer."""

    TAG = TAG_RELATED_REMITTANCE
    NAME = "RelatedRemittance"

    remittance_identification: str = wire_field(35, delimited=True)
    remittance_location_method: str = wire_field(
        4, ENUM, delimited=True, choices=REMITTANCE_LOCATION_METHODS
    )
    remittance_location_electronic_address: str = wire_field(2048, delimited=True)
    name: str = wire_field(140, required=True, delimited=True)
    address_type: str = wire_field(4, ENUM, delimited=True, choices=ADDRESS_TYPES)
    department: str = wire_field(70, delimited=True)
    sub_department: str = wire_field(70, delimited=True)
    street_name: str = wire_field(70, delimited=True)
    building_number: str = wire_field(16, delimited=True)
    post_code: str = wire_field(16, delimited=True)
    town_name: str = wire_field(35, delimited=True)
    country_sub_division_state: str = wire_field(35, delimited=True)
    country: str = wire_field(2, delimited=True)
    address_line_one: str = wire_field(70, delimited=True)
    address_line_two: str = wire_field(70, delimited=True)
    address_line_three: str = wire_field(70, delimited=True)
    address_line_four: str = wire_field(70, delimited=True)
    address_line_five: str = wire_field(70, delimited=True)
    address_line_six: str = wire_field(70, delimited=True)
    address_line_seven: str = wire_field(70, delimited=True)


@dataclass
class Adjustment(Record):
    TAG = TAG_ADJUSTMENT
    NAME = "Adjustment"
    MIN_LENGTH = 10

    adjustment_reason_code: str = wire_field(
        2, ENUM, required=True, choices=ADJUSTMENT_REASON_CODES
    )
    credit_debit_indicator: str = wire_field(
        4, ENUM, required=True, choices=CREDIT_DEBIT_INDICATORS
    )
    currency_code: str = wire_field(3, FieldKind.CURRENCY, required=True)
    amount: str = wire_field(19, FieldKind.AMOUNT, required=True, delimited=True)
    additional_info: str = wire_field(140, delimited=True)
