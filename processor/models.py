"""Data models for the site's JSON documents."""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional


@dataclass
class TimedEntry:
    """Time-bound listing item (event or project)."""
    id: Any
    title: str = ''
    description: str = ''
    image: str = ''
    location: str = ''
    category: str = ''
    dates: Optional[List[Any]] = None
    date: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    KNOWN_FIELDS = (
        'id', 'title', 'description', 'image', 'location', 'category',
        'dates', 'date'
    )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TimedEntry':
        """
        Build an entry from a JSON object.

        Args:
            data: Raw entry from events.json or projects.json

        Returns:
            TimedEntry with unknown keys kept in ``extra``
        """
        extra = {k: v for k, v in data.items() if k not in cls.KNOWN_FIELDS}
        return cls(
            id=data.get('id'),
            title=data.get('title') or '',
            description=data.get('description') or '',
            image=data.get('image') or '',
            location=data.get('location') or '',
            category=data.get('category') or '',
            dates=data.get('dates'),
            date=data.get('date'),
            extra=extra
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'image': self.image,
            'location': self.location,
            'category': self.category,
        }
        if isinstance(self.dates, (list, tuple)):
            data['dates'] = list(self.dates)
        elif self.dates is not None:
            data['dates'] = self.dates
        if self.date is not None:
            data['date'] = self.date
        data.update(self.extra)
        return data


@dataclass
class ClassifiedEntries:
    """Entries partitioned into upcoming and past, each in display order."""
    upcoming: List[TimedEntry]
    past: List[TimedEntry]


@dataclass
class NewsItem:
    """News article."""
    id: int
    news_id: str
    title: str
    description: str
    image: str
    date: str
    author: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    content: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NewsItem':
        return cls(
            id=data.get('id'),
            news_id=data.get('newsId') or '',
            title=data.get('title') or '',
            description=data.get('description') or '',
            image=data.get('image') or '',
            date=data.get('date') or '',
            author=data.get('author'),
            category=data.get('category'),
            tags=list(data.get('tags') or []),
            content=data.get('content')
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'newsId': self.news_id,
            'title': self.title,
            'description': self.description,
            'image': self.image,
            'date': self.date,
            'tags': list(self.tags),
        }
        for key, value in (
            ('author', self.author),
            ('category', self.category),
            ('content', self.content),
        ):
            if value is not None:
                data[key] = value
        return data


@dataclass
class Winner:
    """WPOTY winning photograph."""
    name: str
    category: str
    image: str
    competition_category: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Winner':
        return cls(
            name=data.get('name') or '',
            category=data.get('category') or '',
            image=data.get('image') or '',
            competition_category=data.get('competitionCategory') or ''
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'category': self.category,
            'image': self.image,
            'competitionCategory': self.competition_category
        }


@dataclass
class CompetitionConfig:
    """WPOTY round configuration from wpoty-config.json."""
    is_announced: bool = False
    current_year: Optional[int] = None
    google_sheet_link: str = ''
    announcement_date: str = ''
    submission_deadline: str = ''
    results_date: str = ''

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CompetitionConfig':
        return cls(
            is_announced=bool(data.get('isAnnounced', False)),
            current_year=data.get('currentYear'),
            google_sheet_link=data.get('googleSheetLink') or '',
            announcement_date=data.get('announcementDate') or '',
            submission_deadline=data.get('submissionDeadline') or '',
            results_date=data.get('resultsDate') or ''
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'isAnnounced': self.is_announced,
            'currentYear': self.current_year,
            'googleSheetLink': self.google_sheet_link,
            'announcementDate': self.announcement_date,
            'submissionDeadline': self.submission_deadline,
            'resultsDate': self.results_date
        }


@dataclass
class TeamMember:
    """Board official or moderator."""
    id: str
    name: str
    email: str = ''
    image: str = ''
    position: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TeamMember':
        return cls(
            id=data.get('id') or '',
            name=data.get('name') or '',
            email=data.get('email') or '',
            image=data.get('image') or '',
            position=data.get('position')
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'image': self.image
        }
        if self.position is not None:
            data['position'] = self.position
        return data


@dataclass(frozen=True)
class SiteStatus:
    """Read-only snapshot of the site-wide indicators."""
    has_events_today: bool
    is_competition_announced: bool
    is_submission_closed: bool
    competition: Optional[CompetitionConfig]
    checked_on: Optional[date]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hasEventsToday': self.has_events_today,
            'isCompetitionAnnounced': self.is_competition_announced,
            'isSubmissionClosed': self.is_submission_closed,
            'competition': (
                self.competition.to_dict() if self.competition else None
            ),
            'checkedOn': (
                self.checked_on.isoformat() if self.checked_on else None
            )
        }
