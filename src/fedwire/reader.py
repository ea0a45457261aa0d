"""Tag dispatcher: splits message text into records and decodes each one.

Records may be newline-separated or concatenated on one line; a record runs
from its ``{dddd}`` tag to the next tag or the end of the line. The first
failure aborts the read. Records decoded before the failure stay on
``Reader.message`` and on the raised ``ParseError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TextIO

from fedwire.config import CodecConfig
from fedwire.errors import ErrorKind, FieldError, ParseError
from fedwire.message import Message
from fedwire.records.base import TAG_LENGTH, Record
from fedwire.records.registry import TAG_RE, is_tag, lookup

logger = logging.getLogger(__name__)


def iter_segments(text: str) -> Iterator[tuple[int, int, str]]:
    """Yield (line number, column, record text) for every record in ``text``.

    Only ``\\n`` (optionally preceded by ``\\r``) ends a line; other control
    characters stay in the record and fail validation there.
    """
    for line_number, line in enumerate(text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip(" \t"):
            continue
        starts = [m.start() for m in TAG_RE.finditer(line)]
        if not starts or starts[0] != 0:
            starts.insert(0, 0)
        for i, start in enumerate(starts):
            end = starts[i + 1] if i + 1 < len(starts) else len(line)
            yield line_number, start, line[start:end]


class Reader:
    def __init__(self, source: str | TextIO, config: CodecConfig | None = None) -> None:
        self.source = source
        self.config = config or CodecConfig()
        self.message = Message()
        self.line_number = 0
        self.column = 0
        self.record_name: str | None = None

    def _text(self) -> str:
        if isinstance(self.source, str):
            return self.source
        return self.source.read()

    def parse_error(self, err: FieldError) -> ParseError:
        return ParseError(
            err,
            line=self.line_number,
            column=self.column,
            record=self.record_name,
            message=self.message,
        )

    def decode_record(self, segment: str) -> Record:
        """Recognize the tag and decode the segment with the matching record type."""
        tag = segment[:TAG_LENGTH]
        record_type = lookup(tag) if is_tag(tag) else None
        if record_type is None:
            self.record_name = None
            raise FieldError(None, ErrorKind.UNRECOGNIZED_TAG, tag)
        self.record_name = record_type.NAME
        logger.debug("line %d: dispatching %s to %s", self.line_number, tag, record_type.NAME)
        return record_type.parse(segment)

    def parse_record(self, segment: str) -> Record:
        """Decode, validate and store one record, wrapping failures with position."""
        try:
            record = self.decode_record(segment)
            if self.config.validate_on_read:
                record.validate()
        except FieldError as err:
            raise self.parse_error(err) from err
        self.message.add(record)
        return record

    def read(self) -> Message:
        text = self._text()
        for line_number, column, segment in iter_segments(text):
            self.line_number = line_number
            self.column = column
            self.parse_record(segment)
        if self.config.require_mandatory_tags:
            try:
                self.message.validate(require_mandatory=True)
            except FieldError as err:
                self.record_name = None
                raise self.parse_error(err) from err
        logger.debug("read %d records", len(self.message))
        return self.message


def parse_message(text: str, config: CodecConfig | None = None) -> Message:
    return Reader(text, config=config).read()
