"""Tag -> record type lookup and the canonical tag order."""

from __future__ import annotations

import re
from types import MappingProxyType

from fedwire.records.base import Record
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

TAG_RE = re.compile(r"\{[0-9]{4}\}")

# Canonical output order.
RECORD_TYPES: tuple[type[Record], ...] = (
    SenderSupplied,
    TypeSubType,
    InputMessageAccountabilityData,
    Amount,
    SenderDepositoryInstitution,
    SenderReference,
    ReceiverDepositoryInstitution,
    BusinessFunctionCode,
    InstructedAmount,
    InstructingFI,
    FIBeneficiary,
    RelatedRemittance,
    Adjustment,
)

REGISTRY: MappingProxyType[str, type[Record]] = MappingProxyType(
    {record_type.TAG: record_type for record_type in RECORD_TYPES}
)
CANONICAL_ORDER: tuple[str, ...] = tuple(record_type.TAG for record_type in RECORD_TYPES)
ORDER_INDEX: MappingProxyType[str, int] = MappingProxyType(
    {tag: i for i, tag in enumerate(CANONICAL_ORDER)}
)

MANDATORY_TAGS: tuple[str, ...] = (
    SenderSupplied.TAG,
    TypeSubType.TAG,
    InputMessageAccountabilityData.TAG,
    Amount.TAG,
    SenderDepositoryInstitution.TAG,
    ReceiverDepositoryInstitution.TAG,
    BusinessFunctionCode.TAG,
)


def is_tag(token: str) -> bool:
    return TAG_RE.fullmatch(token) is not None


def lookup(tag: str) -> type[Record] | None:
    return REGISTRY.get(tag)
