"""Read people records from a comma-delimited file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from people_records.exceptions import (
    MalformedRowError,
    PeopleFileNotFoundError,
    PeopleReadError,
)
from people_records.people.models import Person
from people_records.people.parser import parse_row

logger = logging.getLogger(__name__)

DEFAULT_PATH = Path("people.csv")
DELIMITER = ","


class PersonParser:
    """Parse a people CSV into Person records.

    The first line is a header and is skipped. Every following non-blank
    line must hold exactly `first_name,last_name,phone_number`; the first
    row that does not aborts the parse with MalformedRowError.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self.people: list[Person] = []

    def parse(self) -> list[Person]:
        """Read the file and return its people in row order."""
        try:
            with self.path.open("r", encoding="utf-8", newline="") as f:
                people = self._parse_lines(f)
        except FileNotFoundError as e:
            logger.error("People file not found: %s", self.path)
            raise PeopleFileNotFoundError(f"People file not found: {self.path}") from e
        except OSError as e:
            logger.error("Cannot open people file %s: %s", self.path, e)
            raise PeopleFileNotFoundError(f"Cannot open people file: {self.path}") from e
        except UnicodeDecodeError as e:
            logger.error("People file %s is not valid UTF-8: %s", self.path, e)
            raise PeopleReadError(f"People file is not valid UTF-8: {self.path}") from e
        except MalformedRowError as e:
            logger.error("Malformed row in %s: %s", self.path, e)
            raise

        self.people = people
        logger.info(f"Parsed {len(people)} people from {self.path.name}")
        return people

    def _parse_lines(self, lines: Iterable[str]) -> list[Person]:
        people: list[Person] = []
        for line_number, line in enumerate(lines, start=1):
            if line_number == 1:
                continue
            raw = line.rstrip("\r\n")
            if not raw.strip():
                logger.debug("Skipping blank line %d in %s", line_number, self.path.name)
                continue
            people.append(parse_row(raw.split(DELIMITER), line_number))
        return people


def parse(path: str | Path = DEFAULT_PATH) -> list[Person]:
    """Parse `path` and return its people; see PersonParser."""
    return PersonParser(path).parse()
