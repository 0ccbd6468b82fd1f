import pytest
import logging
from datetime import date

from cragsync.logbook import Logbook

# Sample theCrag export, rows in export order (newest first)
export_sample_csv = (
    "Ascent ID,Ascent Label,Crag Path,Ascent Date\n"
    "4,Sonnenuhr,Frankenjura - Fruehstueckstal - Left,2023-05-02T10:15:00Z\n"
    "3,Orange Sunshine,Geyikbayırı - Sector X - Upper part,2023-05-01T16:00:00Z\n"
    "2,Zeitlupe,Frankenjura - Weißenstein,2023-05-01T12:30:00Z\n"
    "1,Ekel,Frankenjura - Weißenstein - Upper part,2023-05-01T09:00:00Z\n"
)

manual_sample_log = (
    "Climbing diary\n"
    "\n"
    "2023-04-01: Felsklettern (Before Sentinel)\n"
    "### BEGIN theCrag sync\n"
    "2023-05-01: Felsklettern (Geyikbayiri, Weissenstein)\n"
    "Rainy afternoon, went bouldering instead.\n"
    "\n"
    "2023-05-03: Felsklettern (Rotwand)\n"
)

@pytest.fixture
def export_csv():
    """Sample theCrag CSV export text."""
    return export_sample_csv

@pytest.fixture
def manual_log():
    """Sample manual logbook text with prose around the synced entries."""
    return manual_sample_log

@pytest.fixture
def create_logbook():
    """Helper fixture to build a Logbook from ISO date strings."""
    def _create_logbook(days):
        return Logbook({
            date.fromisoformat(day): set(crags) for day, crags in days.items()
        })
    return _create_logbook

@pytest.fixture
def write_file(tmp_path):
    """Helper fixture to write text files into a temporary directory."""
    def _write_file(name, text, encoding='utf-8'):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write_file

@pytest.fixture(autouse=True)
def reset_package_logging():
    """Drop handlers installed by setup_logging after each test."""
    yield
    package_logger = logging.getLogger('cragsync')
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
