"""CLI entry point for people-records."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from people_records.exceptions import MalformedRowError, PeopleReadError
from people_records.people import PersonParser, filter_by_area_code
from people_records.people.reader import DEFAULT_PATH

DEFAULT_AREA_CODE = "419"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send package logs to stderr; DEBUG when verbose.

    Otherwise only CRITICAL records pass; read errors reach the user
    through the ClickException message.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.CRITICAL,
        format=LOG_FORMAT,
    )


def summary_line(count: int, path: Path) -> str:
    noun = "person" if count == 1 else "people"
    return f"Parsed {count} {noun} from {path.name}."


@click.command()
@click.argument(
    "path",
    type=click.Path(path_type=Path),
    default=DEFAULT_PATH,
)
@click.option(
    "--area-code",
    default=DEFAULT_AREA_CODE,
    show_default=True,
    help="Three-character area code to filter by.",
)
@click.option("--summary", is_flag=True, help="Print only the number of people parsed.")
@click.option("-v", "--verbose", is_flag=True, help="Log parsing details to stderr.")
def main(path: Path, area_code: str, summary: bool, verbose: bool) -> None:
    """List the people in PATH whose phone numbers are from an area code.

    PATH is a CSV file with a header row followed by
    first_name,last_name,phone_number rows. Defaults to people.csv.
    """
    configure_logging(verbose)

    parser = PersonParser(path)
    try:
        people = parser.parse()
    except MalformedRowError as e:
        raise click.ClickException(f"{parser.path}: {e}") from e
    except PeopleReadError as e:
        raise click.ClickException(str(e)) from e

    if summary:
        click.echo(summary_line(len(people), parser.path))
        return

    click.echo(f"The following people have phone numbers from area code {area_code}.")
    for person in filter_by_area_code(people, area_code):
        click.echo(person.full_name)


if __name__ == "__main__":
    main()
