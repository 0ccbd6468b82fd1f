"""Transliteration of crag names into a stable ASCII spelling."""

import logging
import unicodedata

from unidecode import unidecode

from cragsync.constants import UMLAUT_TABLE
from cragsync.logbook import Logbook

logger = logging.getLogger(__name__)

_UMLAUT_TRANSLATION = str.maketrans(dict(UMLAUT_TABLE))


def normalize_crag_name(name: str) -> str:
    """
    Convert a crag name to its ASCII canonical form.

    Args:
        name (str): Crag display name, possibly with non-ASCII letters

    Returns:
        str: ASCII-only name

    Notes:
        - German umlauts are expanded first (ü -> ue), the generic
          transliteration would only strip the diaeresis
        - Everything else non-ASCII goes through unidecode (ß -> ss)
        - Input is composed to NFC first, so decomposed umlauts hit the table
        - ASCII input is returned unchanged, so the function is idempotent
    """
    name = unicodedata.normalize("NFC", name)
    if name.isascii():
        return name
    result = unidecode(name.translate(_UMLAUT_TRANSLATION))
    logger.debug(f"Normalized crag name {name!r} to {result!r}")
    return result


def normalize_logbook(logbook):
    """Return a copy of a Logbook with every crag name normalized."""
    return Logbook({
        day: {normalize_crag_name(crag) for crag in crags}
        for day, crags in logbook.items()
    })
