"""Data models for the people module."""

from __future__ import annotations

from dataclasses import dataclass

AREA_CODE_LENGTH = 3


def area_code(phone_number: str) -> str:
    """Return the three-character prefix of a phone number.

    No digit or separator handling is applied, so "4195550100" and
    "419-555-0100" both yield "419". Numbers shorter than three
    characters have no area code and yield "".
    """
    if len(phone_number) < AREA_CODE_LENGTH:
        return ""
    return phone_number[:AREA_CODE_LENGTH]


@dataclass(frozen=True)
class Person:
    """One parsed row of a people file."""

    first_name: str
    last_name: str
    phone_number: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def area_code(self) -> str:
        return area_code(self.phone_number)

    def has_area_code(self, code: str) -> bool:
        """Exact string match against the area code; never numeric."""
        if len(code) != AREA_CODE_LENGTH:
            return False
        return self.area_code == code
