"""
Manual logbook parsing.

The manual log is free text. Only the part after the sync sentinel line is
read, and within it only lines of the form

    2023-05-01: Felsklettern (Crag A, Crag B)

Anything else in that part is prose and skipped without complaint.
"""

import logging
import re
from datetime import datetime

from cragsync.constants import ACTIVITY_LABEL, LOG_DATE_FORMAT, SYNC_SENTINEL
from cragsync.errors import DateParseError
from cragsync.logbook import DayRecord

logger = logging.getLogger(__name__)

DAY_LINE_PATTERN = re.compile(
    r'^(\d{4}-\d{2}-\d{2}): ' + re.escape(ACTIVITY_LABEL) + r' \(([^()]+)\)'
)
CRAG_SEPARATOR = ', '


def synced_lines(log_text):
    """Return the non-empty lines following the sync sentinel."""
    lines = [line for line in log_text.splitlines() if line]
    try:
        start = lines.index(SYNC_SENTINEL) + 1
    except ValueError:
        logger.warning(f"Sync sentinel {SYNC_SENTINEL!r} not found in logbook")
        return []
    return lines[start:]


def parse_day_line(line):
    """
    Parse one logbook line.

    Args:
        line (str): Line from the synced part of the logbook

    Returns:
        DayRecord or None: None if the line is not a day entry

    Raises:
        DateParseError: If the line has the day entry shape but its date
            is not a valid calendar date
    """
    match = DAY_LINE_PATTERN.match(line)
    if not match:
        return None

    date_str, crag_list = match.groups()
    try:
        day = datetime.strptime(date_str, LOG_DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(f'Cannot parse logbook date "{date_str}": {e}') from e

    return DayRecord(date=day, crags=frozenset(crag_list.split(CRAG_SEPARATOR)))


def parse_freeform_source(log_text):
    """Parse the synced part of the manual logbook into day records.

    Returns:
        list: DayRecord per matching line, in input order
    """
    records = []
    skipped = 0
    for line in synced_lines(log_text):
        record = parse_day_line(line)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    logger.info(f"Parsed {len(records)} logbook days, skipped {skipped} other lines")
    return records
