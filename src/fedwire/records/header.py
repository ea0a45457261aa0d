"""Mandatory message header records ({1500} through {3600})."""

from __future__ import annotations

from dataclasses import dataclass

from fedwire.codec.fields import FieldKind, wire_field
from fedwire.codes import (
    BUSINESS_FUNCTION_CODES,
    FORMAT_VERSIONS,
    MESSAGE_DUPLICATION_CODES,
    SUBTYPE_CODES,
    TEST_PRODUCTION_CODES,
    TYPE_CODES,
)
from fedwire.records.base import Record

ENUM = FieldKind.ENUMERATION
NUMERIC = FieldKind.NUMERIC

TAG_SENDER_SUPPLIED = "{1500}"
TAG_TYPE_SUBTYPE = "{1510}"
TAG_IMAD = "{1520}"
TAG_AMOUNT = "{2000}"
TAG_SENDER_DI = "{3100}"
TAG_RECEIVER_DI = "{3400}"
TAG_BUSINESS_FUNCTION_CODE = "{3600}"


@dataclass
class SenderSupplied(Record):
    TAG = TAG_SENDER_SUPPLIED
    NAME = "SenderSupplied"
    # a stripped trailing blank duplication code is still accepted
    MIN_LENGTH = 17

    format_version: str = wire_field(2, ENUM, required=True, choices=FORMAT_VERSIONS)
    user_request_correlation: str = wire_field(8, required=True)
    test_production_code: str = wire_field(1, ENUM, required=True, choices=TEST_PRODUCTION_CODES)
    message_duplication_code: str = wire_field(1, ENUM, choices=MESSAGE_DUPLICATION_CODES)


@dataclass
class TypeSubType(Record):
    TAG = TAG_TYPE_SUBTYPE
    NAME = "TypeSubType"
    MIN_LENGTH = 10

    type_code: str = wire_field(2, ENUM, required=True, choices=TYPE_CODES)
    sub_type_code: str = wire_field(2, ENUM, required=True, choices=SUBTYPE_CODES)


@dataclass
class InputMessageAccountabilityData(Record):
    """IMAD: cycle date (CCYYMMDD), input source and sequence number."""

    TAG = TAG_IMAD
    NAME = "InputMessageAccountabilityData"
    MIN_LENGTH = 28

    input_cycle_date: str = wire_field(8, NUMERIC, required=True)
    input_source: str = wire_field(8, required=True)
    input_sequence_number: str = wire_field(6, NUMERIC, required=True)


@dataclass
class Amount(Record):
    """Transfer amount in cents, zero-filled to twelve digits."""

    TAG = TAG_AMOUNT
    NAME = "Amount"
    MIN_LENGTH = 18

    amount: str = wire_field(12, FieldKind.IMPLIED_AMOUNT, required=True)


@dataclass
class SenderDepositoryInstitution(Record):
    TAG = TAG_SENDER_DI
    NAME = "SenderDepositoryInstitution"
    MIN_LENGTH = 15

    sender_aba_number: str = wire_field(9, NUMERIC, required=True)
    sender_short_name: str = wire_field(18, delimited=True)


@dataclass
class ReceiverDepositoryInstitution(Record):
    TAG = TAG_RECEIVER_DI
    NAME = "ReceiverDepositoryInstitution"
    MIN_LENGTH = 15

    receiver_aba_number: str = wire_field(9, NUMERIC, required=True)
    receiver_short_name: str = wire_field(18, delimited=True)


@dataclass
class BusinessFunctionCode(Record):
    TAG = TAG_BUSINESS_FUNCTION_CODE
    NAME = "BusinessFunctionCode"
    MIN_LENGTH = 9

    business_function_code: str = wire_field(
        3, ENUM, required=True, choices=BUSINESS_FUNCTION_CODES
    )
    transaction_type_code: str = wire_field(3, delimited=True)
