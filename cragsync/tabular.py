"""
theCrag CSV export parsing.

The export holds one row per ascent. Only three columns matter here:

- Ascent Label: route name, kept for logging
- Crag Path (or Crag Name in older exports): location of the ascent
- Ascent Date: UTC timestamp, YYYY-MM-DDTHH:MM:SSZ

Row numbers in error messages are file line numbers, the header being row 1.
"""

import csv
import io
import logging
from datetime import datetime

import pandas as pd

from cragsync.constants import (
    ASCENT_DATE_COLUMN,
    ASCENT_DATE_FORMAT,
    ASCENT_LABEL_COLUMN,
    CRAG_COLUMNS,
)
from cragsync.crag_path import resolve_crag_name
from cragsync.errors import DateParseError, MalformedRowError, MissingFieldError
from cragsync.logbook import AscentRecord

logger = logging.getLogger(__name__)

HEADER_ROW = 1


def parse_ascent_date(date_str, row=None):
    """
    Convert an export timestamp to a calendar date.

    Args:
        date_str (str): Timestamp such as "2023-05-01T09:30:00Z"
        row (int, optional): Row number for the error message

    Returns:
        datetime.date: Date of the ascent, time of day discarded

    Raises:
        DateParseError: If the timestamp does not match ASCENT_DATE_FORMAT
    """
    try:
        return datetime.strptime(date_str, ASCENT_DATE_FORMAT).date()
    except ValueError as e:
        location = f" in row {row}" if row is not None else ""
        raise DateParseError(f'Cannot parse date field "{date_str}"{location}: {e}') from e


def check_row_lengths(csv_text):
    """Reject rows with more cells than the header.

    pandas would otherwise take a long first row as an index column and
    shift every value one column to the left.

    Raises:
        MalformedRowError: Naming the first offending row
    """
    reader = csv.reader(io.StringIO(csv_text))
    header_cols = next(reader, None)
    if header_cols is None:
        return
    for row in reader:
        if len(row) > len(header_cols):
            raise MalformedRowError(
                f"Malformed row {reader.line_num}: expected {len(header_cols)} cells, "
                f"got {len(row)}: {row}"
            )


def read_export(csv_text):
    """Load export text into a DataFrame of strings.

    Empty cells become NaN, every other value is kept verbatim.

    Raises:
        MalformedRowError: If a row is too long or pandas cannot tokenize the text
    """
    check_row_lengths(csv_text)
    try:
        df = pd.read_csv(
            io.StringIO(csv_text),
            header=0,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            na_values=[''],
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except pd.errors.ParserError as e:
        raise MalformedRowError(f"Malformed row in CSV export: {e}") from e

    df.columns = df.columns.str.strip()
    logger.info(f"Read export with {len(df)} rows")
    logger.debug(f"Export columns: {df.columns.tolist()}")
    return df


def identify_crag_column(df):
    """Pick the column holding the crag location.

    Raises:
        MissingFieldError: If none of CRAG_COLUMNS is present
    """
    for column in CRAG_COLUMNS:
        if column in df.columns:
            logger.debug(f"Using crag column: {column}")
            return column
    raise MissingFieldError(CRAG_COLUMNS[0], HEADER_ROW)


def required_value(row, column, row_number):
    value = row[column]
    if pd.isna(value):
        raise MissingFieldError(column, row_number)
    return value


def parse_tabular_source(csv_text):
    """Parse a theCrag CSV export into ascent records.

    Args:
        csv_text (str): Full contents of the export

    Returns:
        list: AscentRecord per data row, in input order

    Raises:
        MissingFieldError: If a required column or cell is missing
        DateParseError: If an Ascent Date is malformed
        MalformedRowError: If a row has more cells than the header
    """
    df = read_export(csv_text)
    if df.empty and len(df.columns) == 0:
        return []

    for column in [ASCENT_LABEL_COLUMN, ASCENT_DATE_COLUMN]:
        if column not in df.columns:
            raise MissingFieldError(column, HEADER_ROW)
    crag_column = identify_crag_column(df)

    records = []
    for position, (_, row) in enumerate(df.iterrows()):
        row_number = position + HEADER_ROW + 1
        route_name = required_value(row, ASCENT_LABEL_COLUMN, row_number)
        crag_path = required_value(row, crag_column, row_number)
        date_str = required_value(row, ASCENT_DATE_COLUMN, row_number)

        record = AscentRecord(
            route_name=route_name,
            crag_name=resolve_crag_name(crag_path),
            date=parse_ascent_date(date_str, row_number),
        )
        logger.debug(f"Row {row_number}: {record}")
        records.append(record)

    logger.info(f"Parsed {len(records)} ascents from export")
    return records
