import pytest
from datetime import date

from cragsync.freeform import parse_freeform_source
from cragsync.logbook import (
    AscentRecord,
    DayRecord,
    Logbook,
    aggregate,
    format_day,
    format_logbook
)
from cragsync.normalize import normalize_logbook
from cragsync.tabular import parse_tabular_source

class TestLogbook:
    """Test suite for the Logbook container."""

    def test_dates_ascending(self, create_logbook):
        logbook = create_logbook({
            "2023-05-03": {"C"},
            "2023-05-01": {"A"},
            "2023-05-02": {"B"},
        })
        assert list(logbook) == [date(2023, 5, 1), date(2023, 5, 2), date(2023, 5, 3)]
        assert [day for day, _ in logbook.items()] == logbook.dates()

    def test_equality(self, create_logbook):
        first = create_logbook({"2023-05-01": {"A", "B"}})
        assert first == create_logbook({"2023-05-01": {"B", "A"}})
        assert first != create_logbook({"2023-05-01": {"A"}})
        assert first != {"2023-05-01": {"A", "B"}}

    def test_copies_input_sets(self):
        crags = {"A"}
        logbook = Logbook({date(2023, 5, 1): crags})
        crags.add("B")
        assert logbook[date(2023, 5, 1)] == {"A"}

class TestAggregate:
    """Test suite for folding records into a Logbook."""

    def test_ascents_unioned(self):
        """Test folding of ascents.

        Verifies:
        - Ascents of one day are combined
        - Repeated crags are kept once
        """
        records = [
            AscentRecord("R1", "A", date(2023, 5, 1)),
            AscentRecord("R2", "B", date(2023, 5, 1)),
            AscentRecord("R3", "A", date(2023, 5, 1)),
            AscentRecord("R4", "C", date(2023, 5, 2)),
        ]
        logbook = aggregate(records)
        assert logbook[date(2023, 5, 1)] == {"A", "B"}
        assert logbook[date(2023, 5, 2)] == {"C"}
        assert len(logbook) == 2

    def test_day_records_replace(self):
        """Later lines for the same date replace earlier ones."""
        records = [
            DayRecord(date(2023, 5, 1), frozenset({"A", "B"})),
            DayRecord(date(2023, 5, 1), frozenset({"C"})),
        ]
        assert aggregate(records)[date(2023, 5, 1)] == {"C"}

    def test_empty(self):
        assert aggregate([]) == Logbook()
        assert len(aggregate(iter([]))) == 0

class TestFormatLogbook:
    """Test suite for print mode rendering."""

    def test_format_day(self):
        assert format_day(date(2023, 5, 1), {"B", "A"}) == "2023-05-01: Felsklettern (A, B)"

    def test_format_sorted_by_date(self, create_logbook):
        logbook = create_logbook({
            "2023-05-02": {"Rotwand"},
            "2023-05-01": {"Wolfsberg", "Ankatal"},
        })
        assert format_logbook(logbook) == (
            "2023-05-01: Felsklettern (Ankatal, Wolfsberg)\n"
            "2023-05-02: Felsklettern (Rotwand)"
        )

    def test_format_empty(self):
        assert format_logbook(Logbook()) == ""

    def test_dates_unique_and_ascending(self, export_csv):
        output = format_logbook(normalize_logbook(aggregate(parse_tabular_source(export_csv))))
        dates = [line.split(":")[0] for line in output.splitlines()]
        assert dates == sorted(set(dates))

    def test_round_trip(self, export_csv):
        """Print output below the sentinel parses back to the same Logbook."""
        external = normalize_logbook(aggregate(parse_tabular_source(export_csv)))
        log_text = "### BEGIN theCrag sync\n" + format_logbook(external) + "\n"
        assert aggregate(parse_freeform_source(log_text)) == external
