"""Financial institution records: {5200} Instructing FI and {6400} FI to FI Beneficiary."""

from __future__ import annotations

from dataclasses import dataclass

from fedwire.codec.fields import FieldKind, wire_field
from fedwire.codes import FI_IDENTIFICATION_CODES
from fedwire.records.base import Record

TAG_INSTRUCTING_FI = "{5200}"
TAG_FI_BENEFICIARY = "{6400}"


@dataclass
class InstructingFI(Record):
    """Instructing financial institution.

    The identification code and identifier travel together: either both are
    present or both are blank.
    """

    TAG = TAG_INSTRUCTING_FI
    NAME = "InstructingFI"
    MIN_LENGTH = 7

    identification_code: str = wire_field(
        1, FieldKind.ENUMERATION, choices=FI_IDENTIFICATION_CODES, required_with="identifier"
    )
    identifier: str = wire_field(34, delimited=True, required_with="identification_code")
    name: str = wire_field(35, delimited=True)
    address_line_one: str = wire_field(35, delimited=True)
    address_line_two: str = wire_field(35, delimited=True)
    address_line_three: str = wire_field(35, delimited=True)


@dataclass
class FIBeneficiary(Record):
    """Free-form FI to FI information for the beneficiary's bank."""

    TAG = TAG_FI_BENEFICIARY
    NAME = "FIBeneficiary"

    line_one: str = wire_field(30, delimited=True)
    line_two: str = wire_field(33, delimited=True)
    line_three: str = wire_field(33, delimited=True)
    line_four: str = wire_field(33, delimited=True)
    line_five: str = wire_field(33, delimited=True)
    line_six: str = wire_field(33, delimited=True)
