"""Unified exception hierarchy for people-records."""


class PeopleRecordsError(Exception):
    """Base exception for all people-records errors."""


# Reading
class PeopleReadError(PeopleRecordsError):
    """Failed to read a people file."""


class PeopleFileNotFoundError(PeopleReadError, FileNotFoundError):
    """The people file is missing or cannot be opened."""


class MalformedRowError(PeopleReadError):
    """A data row does not have exactly the expected number of fields."""

    def __init__(self, message: str, line_number: int, field_count: int):
        super().__init__(message)
        self.line_number = line_number
        self.field_count = field_count
