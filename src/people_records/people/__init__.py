"""People records read from CSV files, with area-code lookup."""

from people_records.people.models import Person, area_code
from people_records.people.parser import parse_row, filter_by_area_code
from people_records.people.reader import PersonParser, parse

__all__ = [
    "Person",
    "area_code",
    "parse_row",
    "filter_by_area_code",
    "PersonParser",
    "parse",
]
