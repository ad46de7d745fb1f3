"""Temporal classification of events and projects into upcoming and past."""
import logging
from datetime import date
from enum import Enum
from typing import Callable, Iterable, List, Optional

from processor.dates import DATE_NOT_AVAILABLE, format_date, parse_date
from processor.models import ClassifiedEntries, TimedEntry

logger = logging.getLogger(__name__)

ALL_CATEGORIES = 'All'


class SortDirection(Enum):
    """Anchor-date ordering for a listing."""
    ASCENDING = 'ascending'
    DESCENDING = 'descending'


# Upcoming ordering per listing; past listings are always most recent first.
EVENTS_UPCOMING_ORDER = SortDirection.DESCENDING
PROJECTS_UPCOMING_ORDER = SortDirection.ASCENDING


class EventClassifier:
    """Partitions timed entries into upcoming and past listings."""

    def __init__(self, clock: Callable[[], date] = date.today):
        """
        Initialize the classifier.

        Args:
            clock: Returns the local calendar date used as "today"
        """
        self.clock = clock

    def resolve_dates(self, entry: TimedEntry) -> List[date]:
        """
        Resolve the calendar dates of an entry.

        The plural ``dates`` field wins; the legacy ``date`` field is used
        when ``dates`` is missing, empty or not a list. A single string in
        ``dates`` counts as one date. Malformed values are logged and
        dropped.

        Args:
            entry: Entry to resolve

        Returns:
            Parsed dates in source order, possibly empty
        """
        dates = entry.dates
        if isinstance(dates, str):
            dates = [dates]
        elif dates and not isinstance(dates, (list, tuple)):
            logger.warning(
                f"Ignoring malformed dates for entry '{entry.id}': {dates!r}"
            )
            dates = None

        if dates:
            raw_dates = list(dates)
        elif entry.date:
            raw_dates = [entry.date]
        else:
            raw_dates = []

        resolved = []
        for raw in raw_dates:
            parsed = parse_date(raw)
            if parsed is None:
                logger.warning(
                    f"Ignoring malformed date for entry '{entry.id}': {raw!r}"
                )
                continue
            resolved.append(parsed)
        return resolved

    def anchor_date(self, entry: TimedEntry) -> Optional[date]:
        """Earliest resolved date of an entry, or None."""
        dates = self.resolve_dates(entry)
        return min(dates) if dates else None

    def is_today(
        self,
        entry: TimedEntry,
        reference_date: Optional[date] = None
    ) -> bool:
        """
        Check whether any of the entry's dates falls on the reference date.

        Args:
            entry: Entry to check
            reference_date: Day to compare against (default: today)

        Returns:
            True if the entry is active on the reference date
        """
        today = reference_date or self.clock()
        return any(d == today for d in self.resolve_dates(entry))

    def has_events_today(
        self,
        entries: Iterable[TimedEntry],
        reference_date: Optional[date] = None
    ) -> bool:
        today = reference_date or self.clock()
        return any(self.is_today(entry, today) for entry in entries)

    def classify(
        self,
        entries: Iterable[TimedEntry],
        reference_date: Optional[date] = None,
        upcoming_direction: SortDirection = EVENTS_UPCOMING_ORDER
    ) -> ClassifiedEntries:
        """
        Partition entries into upcoming and past.

        An entry is upcoming if any of its dates is on or after the
        reference date. Entries without a parsable date are past.

        Args:
            entries: Entries to classify, left unmodified
            reference_date: Day treated as "today" (default: today)
            upcoming_direction: Anchor-date ordering for upcoming entries

        Returns:
            ClassifiedEntries holding the original entry objects
        """
        today = reference_date or self.clock()
        upcoming = []
        past = []

        for entry in entries:
            dates = self.resolve_dates(entry)
            if dates and any(d >= today for d in dates):
                upcoming.append(entry)
            else:
                past.append(entry)

        logger.debug(
            f"Classified {len(upcoming)} upcoming and {len(past)} past "
            f"entries against {today.isoformat()}"
        )
        return ClassifiedEntries(
            upcoming=self.order(upcoming, upcoming_direction),
            past=self.order(past, SortDirection.DESCENDING)
        )

    def order(
        self,
        entries: Iterable[TimedEntry],
        direction: SortDirection
    ) -> List[TimedEntry]:
        """
        Sort entries by anchor date.

        The sort is stable. Entries without an anchor date go last in
        either direction.

        Args:
            entries: Entries to sort
            direction: ASCENDING (soonest first) or DESCENDING

        Returns:
            New list in display order
        """
        keyed = [(self.anchor_date(entry), entry) for entry in entries]
        anchored = [item for item in keyed if item[0] is not None]
        unanchored = [entry for anchor, entry in keyed if anchor is None]

        anchored.sort(
            key=lambda item: item[0],
            reverse=direction is SortDirection.DESCENDING
        )
        return [entry for _, entry in anchored] + unanchored

    def categories(self, entries: Iterable[TimedEntry]) -> List[str]:
        """Return "All" followed by distinct categories in first-seen order."""
        seen = [ALL_CATEGORIES]
        for entry in entries:
            if entry.category and entry.category not in seen:
                seen.append(entry.category)
        return seen

    def filter_by_category(
        self,
        entries: Iterable[TimedEntry],
        category: Optional[str]
    ) -> List[TimedEntry]:
        if not category or category == ALL_CATEGORIES:
            return list(entries)
        return [entry for entry in entries if entry.category == category]

    def format_date_range(self, entry: TimedEntry) -> str:
        """
        Format an entry's dates for display.

        Args:
            entry: Entry to format

        Returns:
            "May 10, 2025" for one date, "May 10, 2025 - May 12, 2025" for
            several, "Date not available" for none
        """
        dates = self.resolve_dates(entry)
        if not dates:
            return DATE_NOT_AVAILABLE

        first, last = min(dates), max(dates)
        if first == last:
            return format_date(first)
        return f"{format_date(first)} - {format_date(last)}"
