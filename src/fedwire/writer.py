"""Render a Message back to wire text."""

from __future__ import annotations

import logging
from typing import TextIO

from fedwire.codec.fields import FIXED, FormatOptions
from fedwire.message import Message

logger = logging.getLogger(__name__)


def write_message(message: Message, options: FormatOptions = FIXED) -> str:
    """Concatenate record encodings in canonical tag order."""
    return message.format(options)


class Writer:
    """Writes one record per line after validating each record."""

    def __init__(
        self,
        stream: TextIO,
        options: FormatOptions | None = None,
        validate: bool = True,
    ) -> None:
        self.stream = stream
        self.options = options or FormatOptions(newline=True)
        self.validate = validate

    def write(self, message: Message) -> None:
        if self.validate:
            message.validate()
        count = 0
        for record in message:
            self.stream.write(record.format(self.options))
            if self.options.newline:
                self.stream.write("\n")
            count += 1
        logger.debug("wrote %d records", count)

    def flush(self) -> None:
        self.stream.flush()
