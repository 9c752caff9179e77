#!/usr/bin/env python3
"""
Errors raised while turning log lines into measurement records
"""

from typing import Optional


class RecordError(ValueError):
    """A log line could not be turned into a measurement record"""

    def __init__(
        self,
        message: str,
        line: Optional[str] = None,
        line_number: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.line_number = line_number

    def with_context(self, line: str, line_number: int) -> 'RecordError':
        """Attach the source line and its 1-based position in the log"""
        self.line = line
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedRecordError(RecordError):
    """Field count does not match the arity required by the record type"""


class NumericParseError(RecordError):
    """A token expected to be numeric is not"""
