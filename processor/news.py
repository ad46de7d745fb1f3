"""News listing helpers."""
import logging
from datetime import date
from typing import Any, Iterable, List, Optional

from processor.dates import parse_date
from processor.models import NewsItem

logger = logging.getLogger(__name__)


class NewsProcessor:
    """Ordering and lookup over the news document."""

    def parse_items(self, payload: Iterable[dict]) -> List[NewsItem]:
        """
        Build NewsItem objects from the news document.

        Args:
            payload: Flat list of news records

        Returns:
            List of NewsItem objects; non-object records are skipped
        """
        items = []
        for record in payload:
            if not isinstance(record, dict):
                logger.warning(f"Skipping malformed news record: {record!r}")
                continue
            items.append(NewsItem.from_dict(record))
        return items

    def sort_by_date(self, items: Iterable[NewsItem]) -> List[NewsItem]:
        """
        Order news newest first.

        Items with a malformed date keep their relative order at the end.
        """
        keyed = [(parse_date(item.date), item) for item in items]
        dated = [pair for pair in keyed if pair[0] is not None]
        undated = [item for parsed, item in keyed if parsed is None]
        dated.sort(key=lambda pair: pair[0], reverse=True)
        return [item for _, item in dated] + undated

    def latest_date(self, items: Iterable[NewsItem]) -> Optional[date]:
        dates = [parse_date(item.date) for item in items]
        valid = [d for d in dates if d is not None]
        return max(valid) if valid else None

    def is_latest(self, item: NewsItem, items: Iterable[NewsItem]) -> bool:
        """Check whether an item carries the most recent news date."""
        latest = self.latest_date(items)
        if latest is None:
            return False
        return parse_date(item.date) == latest

    def find(self, items: Iterable[NewsItem], key: Any) -> Optional[NewsItem]:
        """
        Look up a news item by numeric id or by its newsId slug.

        Args:
            items: News items to search
            key: Integer id, numeric string, or slug

        Returns:
            Matching NewsItem or None
        """
        numeric_id = None
        if isinstance(key, int):
            numeric_id = key
        elif isinstance(key, str) and key.strip().isdigit():
            numeric_id = int(key.strip())

        for item in items:
            if numeric_id is not None and item.id == numeric_id:
                return item
            if isinstance(key, str) and key and item.news_id == key:
                return item
        return None

    def categories(self, items: Iterable[NewsItem]) -> List[str]:
        seen = []
        for item in items:
            if item.category and item.category not in seen:
                seen.append(item.category)
        return seen

    def paragraphs(self, item: NewsItem) -> List[str]:
        """Split article content into paragraphs on blank lines."""
        if not item.content:
            return []
        return [p.strip() for p in item.content.split('\n\n') if p.strip()]
