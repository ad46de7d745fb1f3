"""AWS Lambda handler serving page data for the Wild Sri Lanka site."""
import json
import logging
import os
import time
from typing import Any, Callable, Dict, List, Optional

from fetcher.site_data import LoadResult, SiteDataClient
from processor.competition import WinnersGallery
from processor.dates import format_date
from processor.event_classifier import (
    EVENTS_UPCOMING_ORDER,
    PROJECTS_UPCOMING_ORDER,
    EventClassifier,
    SortDirection,
)
from processor.models import CompetitionConfig, TimedEntry
from processor.news import NewsProcessor
from processor.team import TeamDirectory
from status.site_status import StatusMonitor
from storage.s3_assets import S3AssetStore

# Attributes every LogRecord carries; anything else came in through `extra`.
_RESERVED_LOG_ATTRS = set(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}

DEFAULT_WINNERS_CATEGORY = 'Open'


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """JSON formatter that also emits fields passed through ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        for key, value in vars(record).items():
            if key not in _RESERVED_LOG_ATTRS and key not in log_data:
                log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure the root logger with the JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


class PageNotFound(LookupError):
    """Requested page or item does not exist."""


class SitePages:
    """Builds the JSON body of each page from the site documents."""

    def __init__(self, client: SiteDataClient, classifier: EventClassifier):
        self.client = client
        self.classifier = classifier
        self.news = NewsProcessor()
        self.fallback_documents: List[str] = []

    def build(self, page: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Build the body for a page.

        Args:
            page: Page name
            params: Request parameters (id, category, year)

        Returns:
            JSON-serializable page body

        Raises:
            PageNotFound: If the page or requested item does not exist
            ValueError: If a parameter is invalid
        """
        builders: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
            'home': self.home,
            'events': self.events,
            'projects': self.projects,
            'project': self.project,
            'news': self.news_list,
            'news_item': self.news_item,
            'team': self.team,
            'team_member': self.team_member,
            'wpoty': self.wpoty,
            'status': self.status,
        }
        if page not in builders:
            raise ValueError(f"Unknown page: {page}")
        return builders[page](params)

    def _load(self, loader: Callable[[], LoadResult]) -> Any:
        result = loader()
        if result.from_fallback:
            self._record_fallback(result.document)
        return result.payload

    def _record_fallback(self, document: str) -> None:
        if document not in self.fallback_documents:
            self.fallback_documents.append(document)

    def _entries(self, loader: Callable[[], LoadResult]) -> List[TimedEntry]:
        payload = self._load(loader)
        return [
            TimedEntry.from_dict(record)
            for record in payload.get('events', [])
            if isinstance(record, dict)
        ]

    def _entry_view(self, entry: TimedEntry) -> Dict[str, Any]:
        view = entry.to_dict()
        view['isToday'] = self.classifier.is_today(entry)
        view['displayDate'] = self.classifier.format_date_range(entry)
        return view

    def _listing(
        self,
        loader: Callable[[], LoadResult],
        upcoming_direction: SortDirection,
        params: Dict[str, Any]
    ) -> Dict[str, Any]:
        entries = self._entries(loader)
        classified = self.classifier.classify(
            entries, upcoming_direction=upcoming_direction
        )
        category = params.get('category') or 'All'
        categories = self.classifier.categories(entries)
        if category not in categories:
            raise ValueError(f"Unknown category: {category}")

        upcoming = self.classifier.filter_by_category(classified.upcoming, category)
        past = self.classifier.filter_by_category(classified.past, category)
        return {
            'categories': categories,
            'selectedCategory': category,
            'hasEventsToday': self.classifier.has_events_today(entries),
            'upcoming': [self._entry_view(e) for e in upcoming],
            'past': [self._entry_view(e) for e in past],
        }

    def events(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._listing(self.client.load_events, EVENTS_UPCOMING_ORDER, params)

    def projects(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return self._listing(
            self.client.load_projects, PROJECTS_UPCOMING_ORDER, params
        )

    def project(self, params: Dict[str, Any]) -> Dict[str, Any]:
        project_id = str(params.get('id', ''))
        for entry in self._entries(self.client.load_projects):
            if str(entry.id) == project_id:
                return {'project': self._entry_view(entry)}
        raise PageNotFound(f"Project not found: {project_id}")

    def _news_view(self, item, items) -> Dict[str, Any]:
        view = item.to_dict()
        view['displayDate'] = format_date(item.date)
        view['isLatest'] = self.news.is_latest(item, items)
        return view

    def news_list(self, params: Dict[str, Any]) -> Dict[str, Any]:
        items = self.news.sort_by_date(
            self.news.parse_items(self._load(self.client.load_news))
        )
        return {
            'categories': self.news.categories(items),
            'news': [self._news_view(item, items) for item in items],
        }

    def news_item(self, params: Dict[str, Any]) -> Dict[str, Any]:
        items = self.news.parse_items(self._load(self.client.load_news))
        item = self.news.find(items, params.get('id'))
        if item is None:
            raise PageNotFound(f"News item not found: {params.get('id')}")

        view = self._news_view(item, items)
        view['paragraphs'] = self.news.paragraphs(item)
        return {'newsItem': view}

    def team(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return TeamDirectory.from_dict(self._load(self.client.load_team)).to_dict()

    def team_member(self, params: Dict[str, Any]) -> Dict[str, Any]:
        directory = TeamDirectory.from_dict(self._load(self.client.load_team))
        member = directory.find(str(params.get('id', '')))
        if member is None:
            raise PageNotFound(f"Team member not found: {params.get('id')}")
        return {'member': member.to_dict()}

    def _winners(self, params: Dict[str, Any]) -> Dict[str, Any]:
        gallery = WinnersGallery.from_dict(self._load(self.client.load_winners))

        raw_year = params.get('year')
        year = int(raw_year) if raw_year not in (None, '') else gallery.default_year()
        category = gallery.resolve_category(
            year, params.get('category') or DEFAULT_WINNERS_CATEGORY
        )
        year_range = gallery.year_range()
        return {
            'availableYears': gallery.available_years(),
            'yearRange': list(year_range) if year_range else None,
            'selectedYear': year,
            'categories': gallery.categories_for(year) if year else [],
            'selectedCategory': category,
            'winners': [w.to_dict() for w in gallery.winners_for(year, category)],
        }

    def _competition(self) -> Optional[CompetitionConfig]:
        result = self.client.load_wpoty_config()
        if result.from_fallback:
            self._record_fallback(result.document)
            return None
        return CompetitionConfig.from_dict(result.payload)

    def wpoty(self, params: Dict[str, Any]) -> Dict[str, Any]:
        body = self._winners(params)
        competition = self._competition()
        body['competition'] = competition.to_dict() if competition else None
        return body

    def status(self, params: Dict[str, Any]) -> Dict[str, Any]:
        monitor = StatusMonitor(self.client, clock=self.classifier.clock)
        status = monitor.refresh()
        for document in monitor.last_fallbacks:
            self._record_fallback(document)
        return status.to_dict()

    def home(self, params: Dict[str, Any]) -> Dict[str, Any]:
        # Every item, in document order, for the home page carousel
        items = self.news.parse_items(self._load(self.client.load_news))
        return {
            'news': [self._news_view(item, items) for item in items],
            'winners': self._winners({'year': params.get('year')}),
            'status': self.status(params),
        }


def _request_params(event: Dict[str, Any]) -> Dict[str, Any]:
    """Merge API Gateway query parameters over direct invocation keys."""
    params = {k: v for k, v in event.items() if k in ('page', 'id', 'category', 'year')}
    params.update(event.get('queryStringParameters') or {})
    params.update(event.get('pathParameters') or {})
    return params


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body)
    }


def build_client(
    base_url: str,
    bucket: Optional[str],
    prefix: str,
    timeout: int
) -> SiteDataClient:
    """Create the site data client for the configured source."""
    asset_store = S3AssetStore(bucket, prefix=prefix) if bucket else None
    return SiteDataClient(base_url=base_url, timeout=timeout, asset_store=asset_store)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler returning page data for the site.

    Args:
        event: Direct invocation payload or API Gateway proxy event
        context: Lambda context object

    Returns:
        Response dict with statusCode, headers and JSON body
    """
    # Read configuration from environment variables
    log_level = os.environ.get('LOG_LEVEL', 'INFO')
    base_url = os.environ.get('DATA_BASE_URL', SiteDataClient.DEFAULT_BASE_URL)
    bucket = os.environ.get('DATA_BUCKET') or None
    prefix = os.environ.get('DATA_PREFIX', '')
    timeout_seconds = int(os.environ.get('TIMEOUT_SECONDS', '10'))

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    params = _request_params(event or {})
    page = params.get('page') or 'home'
    logger.info(
        f"Building page data",
        extra={'page': page, 'source': f"s3://{bucket}" if bucket else base_url}
    )

    try:
        client = build_client(base_url, bucket, prefix, timeout_seconds)
        pages = SitePages(client, EventClassifier())
        body = pages.build(page, params)
    except PageNotFound as e:
        logger.warning(f"Not found: {e}", extra={'page': page})
        return _response(404, {'message': str(e), 'page': page})
    except ValueError as e:
        logger.warning(f"Bad request: {e}", extra={'page': page})
        return _response(400, {'message': str(e), 'page': page})
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"Page build failed: {str(e)}",
            extra={
                'page': page,
                'duration_seconds': round(duration, 2),
                'error_type': type(e).__name__
            },
            exc_info=True
        )
        return _response(500, {
            'message': 'Failed to build page data',
            'error': str(e),
            'error_type': type(e).__name__,
            'duration_seconds': round(duration, 2)
        })

    duration = time.time() - start_time
    if pages.fallback_documents:
        logger.warning(
            f"Served fallback data",
            extra={'page': page, 'documents': pages.fallback_documents}
        )
    logger.info(
        f"Page data built",
        extra={'page': page, 'duration_seconds': round(duration, 2)}
    )

    body['page'] = page
    body['fallbackDocuments'] = pages.fallback_documents
    body['duration_seconds'] = round(duration, 2)
    return _response(200, body)
