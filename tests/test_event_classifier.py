"""Unit tests for EventClassifier."""
import logging
from datetime import date

import pytest

from processor.event_classifier import EventClassifier, SortDirection
from processor.models import TimedEntry

REFERENCE = date(2025, 5, 10)


def make_entry(entry_id, dates=None, legacy_date=None, category='Workshop'):
    """Create a TimedEntry with the given dates."""
    return TimedEntry(
        id=entry_id,
        title=f"Entry {entry_id}",
        category=category,
        dates=dates,
        date=legacy_date
    )


@pytest.fixture
def classifier():
    """Classifier whose "today" is the reference date."""
    return EventClassifier(clock=lambda: REFERENCE)


class TestClassify:
    """Test cases for upcoming/past partitioning."""

    def test_partition_is_complete_and_disjoint(self, classifier):
        """Every entry lands in exactly one of the two listings."""
        entries = [
            make_entry(1, ['2025-05-09']),
            make_entry(2, ['2025-05-10']),
            make_entry(3, ['2026-01-01']),
            make_entry(4, []),
            make_entry(5, ['not-a-date']),
            make_entry(6, legacy_date='2024-02-02'),
        ]

        result = classifier.classify(entries, REFERENCE)

        upcoming_ids = {id(e) for e in result.upcoming}
        past_ids = {id(e) for e in result.past}
        assert upcoming_ids.isdisjoint(past_ids)
        assert upcoming_ids | past_ids == {id(e) for e in entries}

    def test_entry_without_dates_is_past(self, classifier):
        """An entry with no dates is past regardless of reference date."""
        entry = make_entry(1, [])

        for reference in (date(1990, 1, 1), REFERENCE, date(2100, 1, 1)):
            result = classifier.classify([entry], reference)
            assert result.past == [entry]
            assert result.upcoming == []

    def test_reference_date_is_inclusive(self, classifier):
        """An entry dated on the reference date is upcoming."""
        entry = make_entry(1, ['2025-05-10'])

        result = classifier.classify([entry], REFERENCE)

        assert result.upcoming == [entry]

    def test_multi_day_entry_spanning_today_is_upcoming(self, classifier):
        """Any date on or after the reference date makes the entry upcoming."""
        entry = make_entry(1, ['2025-05-09', '2025-05-11'])

        result = classifier.classify([entry], REFERENCE)

        assert result.upcoming == [entry]
        assert result.past == []

    def test_legacy_date_field_is_used(self, classifier):
        """The singular date field is used when dates is absent."""
        upcoming = make_entry(1, legacy_date='2025-06-01')
        past = make_entry(2, legacy_date='2025-04-01')

        result = classifier.classify([upcoming, past], REFERENCE)

        assert result.upcoming == [upcoming]
        assert result.past == [past]

    def test_dates_field_wins_over_legacy_date(self, classifier):
        """The plural dates field takes precedence over date."""
        entry = make_entry(1, ['2024-01-01'], legacy_date='2030-01-01')

        result = classifier.classify([entry], REFERENCE)

        assert result.past == [entry]

    def test_upcoming_sorted_descending_by_default(self, classifier):
        """Upcoming entries are ordered furthest future first."""
        entries = [
            make_entry('jan', ['2026-01-01']),
            make_entry('jun', ['2026-06-01']),
            make_entry('mar', ['2026-03-01']),
        ]

        result = classifier.classify(entries, date(2025, 12, 1))

        assert [e.id for e in result.upcoming] == ['jun', 'mar', 'jan']

    def test_upcoming_sorted_ascending_when_requested(self, classifier):
        """Projects listing orders upcoming entries soonest first."""
        entries = [
            make_entry('jan', ['2026-01-01']),
            make_entry('jun', ['2026-06-01']),
            make_entry('mar', ['2026-03-01']),
        ]

        result = classifier.classify(
            entries,
            date(2025, 12, 1),
            upcoming_direction=SortDirection.ASCENDING
        )

        assert [e.id for e in result.upcoming] == ['jan', 'mar', 'jun']

    def test_past_sorted_most_recent_first(self, classifier):
        """Past entries are ordered most recent first."""
        entries = [
            make_entry('jan', ['2024-01-01']),
            make_entry('jun', ['2024-06-01']),
        ]

        result = classifier.classify(entries, REFERENCE)

        assert [e.id for e in result.past] == ['jun', 'jan']

    def test_input_is_not_mutated(self, classifier):
        """Classification leaves the input list and entries untouched."""
        entries = [
            make_entry(1, ['2025-06-01', '2025-05-20']),
            make_entry(2, ['2024-01-01']),
        ]
        snapshot = [e.to_dict() for e in entries]

        classifier.classify(entries, REFERENCE)

        assert [e.id for e in entries] == [1, 2]
        assert [e.to_dict() for e in entries] == snapshot

    def test_defaults_to_clock_date(self):
        """Without a reference date the clock supplies today."""
        classifier = EventClassifier(clock=lambda: date(2030, 1, 1))
        entry = make_entry(1, ['2029-12-31'])

        result = classifier.classify([entry])

        assert result.past == [entry]


class TestMalformedDates:
    """Test cases for unparsable dates."""

    def test_all_malformed_dates_classified_past(self, classifier, caplog):
        """An entry whose only date is malformed is past and logged."""
        entry = make_entry('bad', ['2025-13-45'])

        with caplog.at_level(logging.WARNING):
            result = classifier.classify([entry], REFERENCE)

        assert result.past == [entry]
        assert "malformed date" in caplog.text
        assert "bad" in caplog.text

    def test_malformed_date_ignored_alongside_valid_dates(self, classifier):
        """Valid dates still classify the entry when others are malformed."""
        entry = make_entry(1, ['garbage', '2025-07-01'])

        result = classifier.classify([entry], REFERENCE)

        assert result.upcoming == [entry]
        assert classifier.anchor_date(entry) == date(2025, 7, 1)

    def test_non_string_dates_are_malformed(self, classifier):
        """Numbers and nulls in the date list are ignored."""
        entry = make_entry(1, [20250601, None])

        assert classifier.resolve_dates(entry) == []
        assert classifier.classify([entry], REFERENCE).past == [entry]

    def test_scalar_dates_field_is_malformed(self, classifier, caplog):
        """A non-list dates value is logged and the entry is past."""
        entry = TimedEntry.from_dict({'id': 1, 'dates': 20250601})

        with caplog.at_level(logging.WARNING):
            result = classifier.classify([entry], REFERENCE)

        assert result.past == [entry]
        assert "malformed dates" in caplog.text
        assert entry.to_dict()['dates'] == 20250601

    def test_scalar_dates_field_falls_back_to_legacy_date(self, classifier):
        entry = TimedEntry.from_dict({'id': 1, 'dates': 5, 'date': '2025-06-01'})

        assert classifier.resolve_dates(entry) == [date(2025, 6, 1)]
        assert classifier.classify([entry], REFERENCE).upcoming == [entry]

    def test_string_dates_field_is_single_date(self, classifier):
        """A lone date string in dates counts as a one-date list."""
        entry = TimedEntry.from_dict({'id': 1, 'dates': '2025-06-01'})

        result = classifier.classify([entry], REFERENCE)

        assert result.upcoming == [entry]
        assert classifier.format_date_range(entry) == 'June 1, 2025'
        assert entry.to_dict()['dates'] == '2025-06-01'

    def test_unanchored_entries_sort_last(self, classifier):
        """Entries without a parsable date follow the dated ones."""
        entries = [
            make_entry('none', []),
            make_entry('old', ['2020-01-01']),
            make_entry('bad', ['nope']),
            make_entry('new', ['2024-01-01']),
        ]

        ordered = classifier.order(entries, SortDirection.DESCENDING)
        assert [e.id for e in ordered] == ['new', 'old', 'none', 'bad']

        ordered = classifier.order(entries, SortDirection.ASCENDING)
        assert [e.id for e in ordered] == ['old', 'new', 'none', 'bad']


class TestOrder:
    """Test cases for anchor-date ordering."""

    def test_anchor_is_earliest_date(self, classifier):
        """The anchor date is the earliest of the entry's dates."""
        entry = make_entry(1, ['2025-08-03', '2025-08-01', '2025-08-02'])

        assert classifier.anchor_date(entry) == date(2025, 8, 1)

    def test_sort_uses_anchor_date(self, classifier):
        """Entries are sorted by their earliest date, not their latest."""
        long_running = make_entry('long', ['2025-01-01', '2025-12-31'])
        short = make_entry('short', ['2025-06-01'])

        ordered = classifier.order([long_running, short], SortDirection.DESCENDING)

        assert [e.id for e in ordered] == ['short', 'long']

    @pytest.mark.parametrize('direction', list(SortDirection))
    def test_equal_anchors_keep_input_order(self, classifier, direction):
        """Sorting is stable for identical anchor dates."""
        first = make_entry('first', ['2025-06-01'])
        second = make_entry('second', ['2025-06-01', '2025-06-05'])

        ordered = classifier.order([first, second], direction)

        assert [e.id for e in ordered] == ['first', 'second']


class TestIsToday:
    """Test cases for is_today and has_events_today."""

    def test_matching_date_is_today(self, classifier):
        """An entry dated on the reference day is active today."""
        assert classifier.is_today(make_entry(1, ['2025-05-10']), REFERENCE)

    def test_previous_day_is_not_today(self, classifier):
        """An entry dated the day before is not active today."""
        assert not classifier.is_today(make_entry(1, ['2025-05-09']), REFERENCE)

    def test_any_date_matching_is_today(self, classifier):
        """One matching date among several is enough."""
        entry = make_entry(1, ['2025-05-08', '2025-05-10', '2025-05-12'])

        assert classifier.is_today(entry)

    def test_entry_without_dates_is_not_today(self, classifier):
        assert not classifier.is_today(make_entry(1, []))

    def test_has_events_today(self, classifier):
        entries = [make_entry(1, ['2025-05-01']), make_entry(2, ['2025-05-10'])]

        assert classifier.has_events_today(entries)
        assert not classifier.has_events_today(entries[:1])


class TestCategoriesAndFormatting:
    """Test cases for category filtering and date display."""

    def test_categories_start_with_all(self, classifier):
        entries = [
            make_entry(1, category='Workshop'),
            make_entry(2, category='Exhibition'),
            make_entry(3, category='Workshop'),
            make_entry(4, category=''),
        ]

        assert classifier.categories(entries) == ['All', 'Workshop', 'Exhibition']

    def test_filter_by_category(self, classifier):
        entries = [
            make_entry(1, category='Workshop'),
            make_entry(2, category='Exhibition'),
            make_entry(3, category='Workshop'),
        ]

        filtered = classifier.filter_by_category(entries, 'Workshop')

        assert [e.id for e in filtered] == [1, 3]
        assert classifier.filter_by_category(entries, 'All') == entries
        assert classifier.filter_by_category(entries, None) == entries

    def test_format_single_date(self, classifier):
        entry = make_entry(1, ['2025-05-10'])

        assert classifier.format_date_range(entry) == 'May 10, 2025'

    def test_format_date_range(self, classifier):
        entry = make_entry(1, ['2025-05-12', '2025-05-10', '2025-05-11'])

        assert classifier.format_date_range(entry) == 'May 10, 2025 - May 12, 2025'

    def test_format_without_dates(self, classifier):
        assert classifier.format_date_range(make_entry(1, [])) == 'Date not available'
