"""WPOTY winners gallery and competition round status."""
import logging
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from processor.dates import parse_date
from processor.models import CompetitionConfig, Winner

logger = logging.getLogger(__name__)


class WinnersGallery:
    """Winners indexed by year and competition category."""

    def __init__(self, winners: Dict[int, Dict[str, List[Winner]]]):
        self.winners = winners

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> 'WinnersGallery':
        """
        Build a gallery from the winners document.

        Args:
            data: Mapping of year -> category -> ordered winner records.
                JSON object keys are strings, so years are converted to int.

        Returns:
            WinnersGallery; years that are not integers are skipped
        """
        winners = {}
        for raw_year, categories in data.items():
            try:
                year = int(raw_year)
            except (TypeError, ValueError):
                logger.warning(f"Skipping winners for invalid year: {raw_year!r}")
                continue
            if not isinstance(categories, dict):
                logger.warning(f"Skipping malformed winners for year {year}")
                continue
            winners[year] = {
                category: [
                    Winner.from_dict(record)
                    for record in records or []
                    if isinstance(record, dict)
                ]
                for category, records in categories.items()
            }
        return cls(winners)

    def available_years(self) -> List[int]:
        """Years with winners, most recent first."""
        return sorted(self.winners, reverse=True)

    def default_year(self) -> Optional[int]:
        years = self.available_years()
        return years[0] if years else None

    def year_range(self) -> Optional[Tuple[int, int]]:
        if not self.winners:
            return None
        return min(self.winners), max(self.winners)

    def categories_for(self, year: int) -> List[str]:
        return list(self.winners.get(year, {}))

    def winners_for(self, year: int, category: str) -> List[Winner]:
        return list(self.winners.get(year, {}).get(category) or [])

    def resolve_category(self, year: int, category: str) -> str:
        """
        Pick the category to display for a year.

        Keeps the selected category unless it has no winners for the year
        while another category does; then the first such category is used.

        Args:
            year: Selected year
            category: Selected competition category

        Returns:
            Category name to display
        """
        if self.winners_for(year, category):
            return category
        for candidate, records in self.winners.get(year, {}).items():
            if records:
                return candidate
        return category

    def to_dict(self) -> Dict[str, Dict[str, List[dict]]]:
        return {
            str(year): {
                category: [winner.to_dict() for winner in records]
                for category, records in categories.items()
            }
            for year, categories in self.winners.items()
        }


def is_submission_closed(
    config: Optional[CompetitionConfig],
    reference_date: Optional[date] = None
) -> bool:
    """
    Check whether the submission deadline of an announced round has passed.

    Submissions stay open through the deadline day itself.

    Args:
        config: Competition configuration, or None when unavailable
        reference_date: Day to compare against (default: today)

    Returns:
        True if the round is announced and its deadline is before the
        reference date
    """
    if config is None or not config.is_announced:
        return False
    if not config.submission_deadline:
        return False

    deadline = parse_date(config.submission_deadline)
    if deadline is None:
        logger.warning(
            f"Malformed submission deadline: {config.submission_deadline!r}"
        )
        return False

    today = reference_date or date.today()
    return today > deadline
