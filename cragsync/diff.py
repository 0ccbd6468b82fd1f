"""
Discrepancy detection between the export and the manual logbook.

The export is the reference. For every date in either logbook, oldest first:

- day only in the export: "- <logbook line>", the day is missing from the log
- day only in the log: "+ <logbook line>", the day is extraneous in the log
- day in both with different crags: "<date>: -Missing, +Extraneous"
- day in both with the same crags: nothing

Crag names within a line are sorted, missing crags come before extraneous ones.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet

from cragsync.constants import LOG_DATE_FORMAT
from cragsync.logbook import format_day
from cragsync.normalize import normalize_logbook

logger = logging.getLogger(__name__)

MISSING_DAY = 'missing_day'
EXTRANEOUS_DAY = 'extraneous_day'
CRAG_MISMATCH = 'crags'

MISSING_TAG = '-'
EXTRANEOUS_TAG = '+'


@dataclass(frozen=True)
class DiffEntry:
    """Discrepancy for one date."""
    date: date
    missing: FrozenSet[str]
    extraneous: FrozenSet[str]
    kind: str


def diff_logbooks(external, manual):
    """
    Compare the export logbook against the manual logbook.

    Args:
        external (Logbook): Logbook built from the CSV export
        manual (Logbook): Logbook built from the manual log

    Returns:
        list: DiffEntry per discrepant date, ascending by date
    """
    external = normalize_logbook(external)
    manual = normalize_logbook(manual)

    entries = []
    for day in sorted(set(external.dates()) | set(manual.dates())):
        if day not in manual:
            entries.append(DiffEntry(day, frozenset(external[day]), frozenset(), MISSING_DAY))
        elif day not in external:
            entries.append(DiffEntry(day, frozenset(), frozenset(manual[day]), EXTRANEOUS_DAY))
        else:
            missing = frozenset(external[day] - manual[day])
            extraneous = frozenset(manual[day] - external[day])
            if missing or extraneous:
                entries.append(DiffEntry(day, missing, extraneous, CRAG_MISMATCH))

    logger.info(f"Found {len(entries)} discrepant days")
    return entries


def render_entry(entry):
    if entry.kind == MISSING_DAY:
        return f"{MISSING_TAG} {format_day(entry.date, entry.missing)}"
    if entry.kind == EXTRANEOUS_DAY:
        return f"{EXTRANEOUS_TAG} {format_day(entry.date, entry.extraneous)}"

    crags = [MISSING_TAG + crag for crag in sorted(entry.missing)]
    crags += [EXTRANEOUS_TAG + crag for crag in sorted(entry.extraneous)]
    return f"{entry.date.strftime(LOG_DATE_FORMAT)}: {', '.join(crags)}"


def render_diff(entries):
    """Render diff entries as a report, one line per entry; "" if none."""
    return '\n'.join(render_entry(entry) for entry in entries)


def generate_diff_report(external, manual):
    """Diff two logbooks and render the report in one step."""
    return render_diff(diff_logbooks(external, manual))
