"""
Static configuration for crag name resolution and log parsing.

Everything here is built once at import time and never mutated. The lookup
tables are exposed read-only and handed to the resolver as parameters.
"""

from types import MappingProxyType

# Location paths in the export run from broad to specific, e.g.
# "Frankenjura - Trubachtal - Wolfsberg - Upper part"
PATH_DELIMITER = ' - '

# Generic sector labels that name a part of a crag, never a crag itself
SECTOR_STOPLIST = frozenset([
    'Upper part',
    'Lower part',
    'Left',
    'Right',
    'Middle',
    'Centre',
    'Center',
    'East',
    'West',
    'North',
    'South',
])

# Areas whose crag name sits at a fixed depth of the path (1 = first node)
CRAG_DEPTH_OVERRIDES = MappingProxyType({
    'Geyikbayırı': 1,
})

# Applied before generic transliteration, which would turn "ü" into "u"
UMLAUT_TABLE = MappingProxyType({
    'ä': 'ae',
    'ö': 'oe',
    'ü': 'ue',
    'Ä': 'Ae',
    'Ö': 'Oe',
    'Ü': 'Ue',
})

# Manual logbook
SYNC_SENTINEL = '### BEGIN theCrag sync'
ACTIVITY_LABEL = 'Felsklettern'
LOG_DATE_FORMAT = '%Y-%m-%d'

# theCrag CSV export
ASCENT_LABEL_COLUMN = 'Ascent Label'
ASCENT_DATE_COLUMN = 'Ascent Date'
CRAG_COLUMNS = ['Crag Path', 'Crag Name']  # first present wins
ASCENT_DATE_FORMAT = '%Y-%m-%dT%H:%M:%SZ'

# utf-8-sig drops a byte order mark and also reads plain UTF-8
FILE_ENCODINGS = ['utf-8-sig', 'cp1252']
