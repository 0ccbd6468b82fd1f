"""
Records produced by the two source parsers and the Logbook they fold into.

A Logbook is the canonical form both sources converge to: a mapping from
calendar date to the set of crags visited that day. Dates are unique keys,
each set holds a crag at most once, and iteration is always date-ascending.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import FrozenSet

from cragsync.constants import ACTIVITY_LABEL, LOG_DATE_FORMAT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AscentRecord:
    """One row of the CSV export."""
    route_name: str
    crag_name: str
    date: date


@dataclass(frozen=True)
class DayRecord:
    """One structured line of the manual logbook."""
    date: date
    crags: FrozenSet[str]


class Logbook:
    def __init__(self, days=None):
        self._days = {}
        for day, crags in (days or {}).items():
            self._days[day] = set(crags)

    def add_ascent(self, record: AscentRecord):
        self._days.setdefault(record.date, set()).add(record.crag_name)

    def set_day(self, record: DayRecord):
        # A log line lists the whole day, it replaces any earlier line
        if record.date in self._days:
            logger.debug(f"Replacing crags of {record.date} with later log line")
        self._days[record.date] = set(record.crags)

    def dates(self):
        return sorted(self._days)

    def items(self):
        return [(day, self._days[day]) for day in self.dates()]

    def __iter__(self):
        return iter(self.dates())

    def __getitem__(self, day):
        return self._days[day]

    def __contains__(self, day):
        return day in self._days

    def __len__(self):
        return len(self._days)

    def __eq__(self, other):
        if not isinstance(other, Logbook):
            return NotImplemented
        return self._days == other._days

    def __repr__(self):
        days = ', '.join(f"{day}: {sorted(crags)}" for day, crags in self.items())
        return f"Logbook({{{days}}})"


def aggregate(records):
    """Fold AscentRecords and DayRecords into a Logbook.

    Args:
        records (iterable): AscentRecord or DayRecord instances

    Returns:
        Logbook: Ascents are unioned into their day, day records replace it
    """
    logbook = Logbook()
    count = 0
    for record in records:
        if isinstance(record, DayRecord):
            logbook.set_day(record)
        else:
            logbook.add_ascent(record)
        count += 1
    logger.info(f"Aggregated {count} records into {len(logbook)} days")
    return logbook


def format_day(day, crags):
    """Render one day in the manual logbook line format."""
    return f"{day.strftime(LOG_DATE_FORMAT)}: {ACTIVITY_LABEL} ({', '.join(sorted(crags))})"


def format_logbook(logbook):
    """
    Render a Logbook as manual logbook lines, one per date, oldest first.

    The output can be pasted below the sync sentinel of the manual log and
    parses back to the same Logbook.
    """
    return '\n'.join(format_day(day, crags) for day, crags in logbook.items())
