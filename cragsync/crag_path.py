"""
Crag name resolution from theCrag location paths.

A location path lists nested areas from broad to specific, joined by
PATH_DELIMITER. Its last node is often a sector label ("Upper part",
"Left") rather than the crag, and some areas keep their crag name higher up
in the hierarchy than the last non-sector node. Resolution is therefore a
short decision table, evaluated in order:

1. empty path        -> ""
2. override hit      -> node at the override depth
3. otherwise         -> last node that is not a sector label
"""

import logging

from cragsync.constants import CRAG_DEPTH_OVERRIDES, PATH_DELIMITER, SECTOR_STOPLIST

logger = logging.getLogger(__name__)


def split_path(path):
    """Split a location path into its node names."""
    if not path:
        return []
    return path.split(PATH_DELIMITER)


def strip_sectors(nodes, stoplist=SECTOR_STOPLIST):
    """Drop trailing sector labels; return the remaining nodes."""
    end = len(nodes)
    while end > 0 and nodes[end - 1] in stoplist:
        end -= 1
    return nodes[:end]


def override_for(nodes, overrides=CRAG_DEPTH_OVERRIDES):
    """
    Look up the crag name forced by the override table.

    Args:
        nodes (list): Node names of the full, unstripped path
        overrides (Mapping): Node name -> 1-based depth of the crag node

    Returns:
        str or None: Overriding crag name, or None if no override applies
    """
    for node in reversed(nodes):
        if node not in overrides:
            continue
        depth = overrides[node]
        if 1 <= depth <= len(nodes):
            return nodes[depth - 1]
        logger.warning(f"Override depth {depth} for {node!r} is outside path {nodes}")
        return None
    return None


def resolve_crag_name(path, overrides=CRAG_DEPTH_OVERRIDES, stoplist=SECTOR_STOPLIST):
    """
    Resolve the crag name of a location path.

    Args:
        path (str): Location path, e.g. "Frankenjura - Sektor A - Upper part"
        overrides (Mapping): Node name -> 1-based depth of the crag node
        stoplist (Container): Sector labels that are never a crag

    Returns:
        str: Crag name; "" for an empty path or a path of sector labels only

    Examples:
        >>> resolve_crag_name("Frankenjura - Sektor A - Upper part")
        'Sektor A'
        >>> resolve_crag_name("Geyikbayırı - Sector X - Upper part")
        'Geyikbayırı'
    """
    nodes = split_path(path)

    rules = [
        lambda: '' if not nodes else None,
        lambda: override_for(nodes, overrides),
        lambda: (strip_sectors(nodes, stoplist) or [''])[-1],
    ]
    for rule in rules:
        crag_name = rule()
        if crag_name is not None:
            logger.debug(f"Resolved {path!r} to {crag_name!r}")
            return crag_name
