"""Map split CSV rows onto Person records."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from people_records.exceptions import MalformedRowError
from people_records.people.models import Person

logger = logging.getLogger(__name__)

FIELDS = ("first_name", "last_name", "phone_number")


def parse_row(fields: Sequence[str], line_number: int) -> Person:
    """Build a Person from one row of exactly three fields.

    Args:
        fields: Raw field values in file column order.
        line_number: 1-based line in the source file, used in errors.

    Raises:
        MalformedRowError: If the row does not have exactly three fields.
    """
    if len(fields) != len(FIELDS):
        raise MalformedRowError(
            f"Line {line_number}: expected {len(FIELDS)} fields "
            f"({', '.join(FIELDS)}), got {len(fields)}",
            line_number=line_number,
            field_count=len(fields),
        )

    first_name, last_name, phone_number = (value.strip() for value in fields)
    return Person(
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
    )


def filter_by_area_code(people: Iterable[Person], code: str) -> list[Person]:
    """Keep people whose phone number starts with `code`, in input order."""
    matches = [person for person in people if person.has_area_code(code)]
    logger.debug("%d people match area code %s", len(matches), code)
    return matches
