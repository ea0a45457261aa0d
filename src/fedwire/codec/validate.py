"""Per-field rule checks.

``validate_record`` is fail-fast: the tag check runs first, then every field in
declaration order, and the first failure is raised. ``collect_errors`` walks the
same rules but keeps going, returning the first failure of each field.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from fedwire.codec.fields import DELIMITER, FieldKind, FieldSpec
from fedwire.codes import CURRENCY_CODES
from fedwire.errors import ErrorKind, FieldError

if TYPE_CHECKING:
    from fedwire.records.base import Record

AMOUNT_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
AMOUNT_COMMA_RE = re.compile(r"[0-9]+(,[0-9]+)?")
DIGITS_RE = re.compile(r"[0-9]+")


def is_alphanumeric(value: str) -> bool:
    """Printable ASCII only (space through tilde)."""
    return all(" " <= ch <= "~" for ch in value)


def check_value(spec: FieldSpec, value: str) -> None:
    """Apply the kind rule for a non-empty value."""
    kind = spec.kind
    # membership bounds the length of coded values
    if kind is FieldKind.CURRENCY:
        if value not in CURRENCY_CODES:
            raise FieldError(spec.name, ErrorKind.NON_CURRENCY_CODE, value)
        return
    if kind is FieldKind.ENUMERATION:
        if spec.choices is None or value not in spec.choices:
            raise FieldError(spec.name, ErrorKind.INVALID_ENUMERATION, value)
        return
    if len(value) > spec.width:
        raise FieldError(
            spec.name,
            ErrorKind.MAX_LENGTH,
            value,
            detail=f"maximum {spec.width}, found {len(value)}",
        )
    if kind is FieldKind.ALPHANUMERIC:
        if not is_alphanumeric(value) or (spec.delimited and DELIMITER in value):
            raise FieldError(spec.name, ErrorKind.NON_ALPHANUMERIC, value)
    elif kind is FieldKind.NUMERIC:
        if not DIGITS_RE.fullmatch(value):
            raise FieldError(spec.name, ErrorKind.NON_NUMERIC, value)
    elif kind is FieldKind.AMOUNT:
        if not AMOUNT_RE.fullmatch(value):
            raise FieldError(spec.name, ErrorKind.NON_AMOUNT, value)
    elif kind is FieldKind.AMOUNT_COMMA:
        if not AMOUNT_COMMA_RE.fullmatch(value):
            raise FieldError(spec.name, ErrorKind.NON_AMOUNT, value)
    elif kind is FieldKind.IMPLIED_AMOUNT:
        # exactly width digits, already zero-filled
        if len(value) != spec.width or not DIGITS_RE.fullmatch(value):
            raise FieldError(spec.name, ErrorKind.NON_AMOUNT, value)


def is_required(spec: FieldSpec, record: Record) -> bool:
    if spec.required:
        return True
    if spec.required_with:
        return bool(getattr(record, spec.required_with))
    return False


def check_field(spec: FieldSpec, record: Record) -> None:
    value = getattr(record, spec.name)
    if not value:
        if is_required(spec, record):
            raise FieldError(spec.name, ErrorKind.FIELD_REQUIRED)
        return
    check_value(spec, value)


def check_tag(record: Record) -> None:
    if record.tag != record.TAG:
        raise FieldError("tag", ErrorKind.INVALID_TAG_FOR_TYPE, record.tag)


def validate_record(record: Record) -> None:
    check_tag(record)
    for spec in record.layout():
        check_field(spec, record)


def collect_errors(record: Record) -> list[FieldError]:
    errors: list[FieldError] = []
    try:
        check_tag(record)
    except FieldError as err:
        errors.append(err)
    for spec in record.layout():
        try:
            check_field(spec, record)
        except FieldError as err:
            errors.append(err)
    return errors
