"""Exceptions raised while reading and parsing the two climbing records."""


class CragSyncError(ValueError):
    """Base class for every failure reported to the user."""


class FileReadError(CragSyncError):
    """An input file is missing, is a directory, or cannot be decoded."""


class ParseError(CragSyncError):
    """An input source does not have the expected structure."""


class MissingFieldError(ParseError):
    """A required column is absent from the header or empty in a row."""

    def __init__(self, field, row):
        self.field = field
        self.row = row
        if row == 1:
            message = f'Missing required column "{field}" in header'
        else:
            message = f'Missing field "{field}" in row {row}'
        super().__init__(message)


class DateParseError(ParseError):
    """A timestamp or calendar date could not be parsed."""


class MalformedRowError(ParseError):
    """A row of the CSV export is structurally broken."""
