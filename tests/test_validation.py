import pytest

from fedwire.codec.fields import FieldKind, FieldSpec
from fedwire.codec.validate import check_value, collect_errors, is_alphanumeric, validate_record
from fedwire.codes import (
    ADJUSTMENT_REASON_CODES,
    CREDIT_DEBIT_INDICATORS,
    CURRENCY_CODES,
    FI_IDENTIFICATION_CODES,
)
from fedwire.errors import ErrorKind, FieldError
from fedwire.records.financial_institution import InstructingFI
from fedwire.records.remittance import Adjustment
from fedwire.sample import sample_adjustment, sample_instructing_fi

AMOUNT = FieldSpec(width=19, kind=FieldKind.AMOUNT, name="amount")
AMOUNT_COMMA = FieldSpec(width=15, kind=FieldKind.AMOUNT_COMMA, name="amount")
IMPLIED = FieldSpec(width=12, kind=FieldKind.IMPLIED_AMOUNT, name="amount")
LINE = FieldSpec(width=30, delimited=True, name="line_one")


@pytest.mark.parametrize("value", ["0", "1234", "1234.56", "0.99", "9" * 19])
def test_amount_grammar_accepts(value: str) -> None:
    check_value(AMOUNT, value)


@pytest.mark.parametrize("value", ["1234.56Z", "X,", "12.34.56", "1234.", ".99", "12a4", "-5"])
def test_amount_grammar_rejects_with_offending_value(value: str) -> None:
    with pytest.raises(FieldError) as exc:
        check_value(AMOUNT, value)
    assert exc.value.kind is ErrorKind.NON_AMOUNT
    assert exc.value.value == value


def test_amount_wider_than_field_is_max_length() -> None:
    with pytest.raises(FieldError) as exc:
        check_value(AMOUNT, "1" * 20)
    assert exc.value.kind is ErrorKind.MAX_LENGTH


def test_comma_amount_grammar() -> None:
    check_value(AMOUNT_COMMA, "1234,56")
    with pytest.raises(FieldError) as exc:
        check_value(AMOUNT_COMMA, "1234.56")
    assert exc.value.kind is ErrorKind.NON_AMOUNT


def test_alphanumeric_is_printable_ascii() -> None:
    assert is_alphanumeric(" Line One ~!@#$%^&()")
    assert not is_alphanumeric("®")
    assert not is_alphanumeric("tab\there")


def test_enumerations_accept_members_and_reject_others() -> None:
    cases = [
        ("adjustment_reason_code", ADJUSTMENT_REASON_CODES, "ZZ"),
        ("credit_debit_indicator", CREDIT_DEBIT_INDICATORS, "ZZZZ"),
    ]
    for field, members, bad in cases:
        for member in members:
            adj = sample_adjustment()
            setattr(adj, field, member)
            adj.validate()
        adj = sample_adjustment()
        setattr(adj, field, bad)
        with pytest.raises(FieldError) as exc:
            adj.validate()
        assert exc.value == FieldError(field, ErrorKind.INVALID_ENUMERATION, bad)


def test_identification_code_membership() -> None:
    for code in FI_IDENTIFICATION_CODES:
        ifi = sample_instructing_fi()
        ifi.identification_code = code
        ifi.validate()
    for bad in ("1", "Football Card ID"):
        ifi = sample_instructing_fi()
        ifi.identification_code = bad
        with pytest.raises(FieldError) as exc:
            ifi.validate()
        assert exc.value.kind is ErrorKind.INVALID_ENUMERATION
        assert exc.value.value == bad


def test_currency_codes() -> None:
    assert "USD" in CURRENCY_CODES
    adj = sample_adjustment()
    adj.currency_code = "XZP"
    with pytest.raises(FieldError) as exc:
        adj.validate()
    assert exc.value == FieldError("currency_code", ErrorKind.NON_CURRENCY_CODE, "XZP")


def test_required_field_regardless_of_other_fields() -> None:
    adj = Adjustment(adjustment_reason_code="01", credit_debit_indicator="", amount="bad")
    with pytest.raises(FieldError) as exc:
        adj.validate()
    assert exc.value == FieldError("credit_debit_indicator", ErrorKind.FIELD_REQUIRED)


def test_tag_mismatch_checked_first() -> None:
    adj = sample_adjustment()
    adj.tag = "{9999}"
    adj.amount = "bad"
    with pytest.raises(FieldError) as exc:
        validate_record(adj)
    assert exc.value == FieldError("tag", ErrorKind.INVALID_TAG_FOR_TYPE, "{9999}")


def test_validation_does_not_mutate_record() -> None:
    adj = sample_adjustment()
    adj.amount = "1234.56Z"
    before = adj.to_dict()
    with pytest.raises(FieldError):
        adj.validate()
    assert adj.to_dict() == before


def test_collect_errors_reports_every_field() -> None:
    ifi = InstructingFI(tag="{9999}", identification_code="Z", identifier="®", name="®")
    kinds = [(err.field_name, err.kind) for err in collect_errors(ifi)]
    assert kinds == [
        ("tag", ErrorKind.INVALID_TAG_FOR_TYPE),
        ("identification_code", ErrorKind.INVALID_ENUMERATION),
        ("identifier", ErrorKind.NON_ALPHANUMERIC),
        ("name", ErrorKind.NON_ALPHANUMERIC),
    ]


def test_overlong_coded_values_fail_membership_not_length() -> None:
    adj = sample_adjustment()
    adj.currency_code = "DOLLARS"
    with pytest.raises(FieldError) as exc:
        adj.validate()
    assert exc.value == FieldError("currency_code", ErrorKind.NON_CURRENCY_CODE, "DOLLARS")


def test_implied_amount_must_fill_the_width() -> None:
    check_value(IMPLIED, "000001234567")
    for bad in ("1234567", "0000012345.6"):
        with pytest.raises(FieldError) as exc:
            check_value(IMPLIED, bad)
        assert exc.value == FieldError("amount", ErrorKind.NON_AMOUNT, bad)


def test_delimiter_is_not_alphanumeric_in_delimited_text() -> None:
    with pytest.raises(FieldError) as exc:
        check_value(LINE, "A*B")
    assert exc.value == FieldError("line_one", ErrorKind.NON_ALPHANUMERIC, "A*B")
    check_value(FieldSpec(width=8, name="input_source"), "Src*08")
