"""Sample records and messages for fixtures, the CLI and benchmarks.

Every builder returns a record that validates; the full message carries all
mandatory tags plus one of each optional record type.
"""

from __future__ import annotations

from fedwire.codes import CREDIT_INDICATOR, DEMAND_DEPOSIT_ACCOUNT_NUMBER, PRICING_ERROR
from fedwire.message import Message
from fedwire.records.financial_institution import FIBeneficiary, InstructingFI
from fedwire.records.header import (
    Amount,
    BusinessFunctionCode,
    InputMessageAccountabilityData,
    ReceiverDepositoryInstitution,
    SenderDepositoryInstitution,
    SenderSupplied,
    TypeSubType,
)
from fedwire.records.remittance import Adjustment, RelatedRemittance
from fedwire.records.transfer import InstructedAmount, SenderReference


def sample_adjustment() -> Adjustment:
    return Adjustment(
        adjustment_reason_code=PRICING_ERROR,
        credit_debit_indicator=CREDIT_INDICATOR,
        currency_code="USD",
        amount="1234.56",
        additional_info=" Adjustment Additional Information",
    )


def sample_fi_beneficiary() -> FIBeneficiary:
    return FIBeneficiary(
        line_one="Line One",
        line_two="Line Two",
        line_three="Line Three",
        line_four="Line Four",
        line_five="Line Five",
        line_six="Line Six",
    )


def sample_instructing_fi() -> InstructingFI:
    return InstructingFI(
        identification_code=DEMAND_DEPOSIT_ACCOUNT_NUMBER,
        identifier="123456789",
        name="FI Name",
        address_line_one="Address One",
        address_line_two="Address Two",
        address_line_three="Address Three",
    )


def sample_related_remittance() -> RelatedRemittance:
    return RelatedRemittance(
        remittance_identification="Remittance Identification",
        remittance_location_method="EDIC",
        remittance_location_electronic_address="https://example.com/remittance",
        name="Name",
        address_type="ADDR",
        department="Department",
        sub_department="Sub-Department",
        street_name="Street Name",
        building_number="16",
        post_code="19405",
        town_name="AnyTown",
        country_sub_division_state="PA",
        country="US",
        address_line_one="Address Line One",
    )


def sample_message(seq: int = 1) -> Message:
    """Build a complete customer transfer (CTR) message."""
    return Message(
        [
            SenderSupplied(
                format_version="30",
                user_request_correlation=f"USR{seq:05d}",
                test_production_code="T",
            ),
            TypeSubType(type_code="10", sub_type_code="00"),
            InputMessageAccountabilityData(
                input_cycle_date="20260105",
                input_source="Source08",
                input_sequence_number=f"{seq:06d}",
            ),
            Amount(amount=f"{123456 + seq:012d}"),
            SenderDepositoryInstitution(
                sender_aba_number="121042882", sender_short_name="Wells Fargo NA"
            ),
            SenderReference(sender_reference=f"REF{seq:013d}"),
            ReceiverDepositoryInstitution(
                receiver_aba_number="231380104", receiver_short_name="Citadel"
            ),
            BusinessFunctionCode(business_function_code="CTR"),
            InstructedAmount(currency_code="USD", amount="1234,56"),
            sample_instructing_fi(),
            sample_fi_beneficiary(),
            sample_related_remittance(),
            sample_adjustment(),
        ]
    )


def sample_messages(count: int = 8) -> list[Message]:
    return [sample_message(seq=i + 1) for i in range(count)]
