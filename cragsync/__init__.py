"""
cragsync - keep a manual climbing logbook in sync with a theCrag export.

This package provides functionality to:
- Read ascents from a theCrag CSV export and resolve each crag name from its location path
- Read day entries from the synced part of a free-form manual logbook
- Fold both into a canonical logbook (date -> set of crags)
- Normalize crag names to ASCII and report per-day discrepancies

Manual logbook lines look like:
- 2023-05-01: Felsklettern (Crag A, Crag B)

Diff report lines:
- "- <logbook line>": day missing from the manual logbook
- "+ <logbook line>": day extraneous in the manual logbook
- "<date>: -A, +C": crag A missing, crag C extraneous on that day
"""

from .crag_path import resolve_crag_name
from .diff import DiffEntry, diff_logbooks, generate_diff_report, render_diff
from .errors import (
    CragSyncError,
    DateParseError,
    FileReadError,
    MalformedRowError,
    MissingFieldError,
    ParseError
)
from .freeform import parse_freeform_source
from .logbook import AscentRecord, DayRecord, Logbook, aggregate, format_logbook
from .normalize import normalize_crag_name, normalize_logbook
from .tabular import parse_tabular_source

__all__ = [
    'resolve_crag_name',
    'normalize_crag_name',
    'normalize_logbook',
    'parse_tabular_source',
    'parse_freeform_source',
    'aggregate',
    'format_logbook',
    'diff_logbooks',
    'render_diff',
    'generate_diff_report',
    'AscentRecord',
    'DayRecord',
    'Logbook',
    'DiffEntry',
    'CragSyncError',
    'FileReadError',
    'ParseError',
    'MissingFieldError',
    'DateParseError',
    'MalformedRowError'
]
