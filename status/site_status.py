"""Site-wide status snapshot and its scheduled refresh."""
import logging
import threading
from datetime import date
from typing import Callable, List, Optional

from fetcher.site_data import SiteDataClient
from processor.competition import is_submission_closed
from processor.event_classifier import EventClassifier
from processor.models import CompetitionConfig, SiteStatus, TimedEntry

logger = logging.getLogger(__name__)

EMPTY_STATUS = SiteStatus(
    has_events_today=False,
    is_competition_announced=False,
    is_submission_closed=False,
    competition=None,
    checked_on=None
)


class StatusMonitor:
    """Holds the current SiteStatus and rebuilds it on refresh."""

    def __init__(
        self,
        client: SiteDataClient,
        clock: Callable[[], date] = date.today
    ):
        """
        Initialize the monitor with an empty snapshot.

        Args:
            client: Loader for projects.json and wpoty-config.json
            clock: Returns the local calendar date used as "today"
        """
        self.client = client
        self.clock = clock
        self.classifier = EventClassifier(clock=clock)
        self._status = EMPTY_STATUS
        self._lock = threading.Lock()
        self.last_fallbacks: List[str] = []

    @property
    def status(self) -> SiteStatus:
        with self._lock:
            return self._status

    def refresh(self) -> SiteStatus:
        """
        Reload the source documents and replace the snapshot.

        Returns:
            The new SiteStatus
        """
        today = self.clock()

        projects_result = self.client.load_projects()
        projects = projects_result.payload
        entries = [
            TimedEntry.from_dict(record)
            for record in projects.get('events', [])
            if isinstance(record, dict)
        ]
        has_today = self.classifier.has_events_today(entries, today)

        config_result = self.client.load_wpoty_config()
        competition = None
        if not config_result.from_fallback:
            competition = CompetitionConfig.from_dict(config_result.payload)

        status = SiteStatus(
            has_events_today=has_today,
            is_competition_announced=bool(
                competition and competition.is_announced
            ),
            is_submission_closed=is_submission_closed(competition, today),
            competition=competition,
            checked_on=today
        )

        with self._lock:
            self._status = status
        self.last_fallbacks = [
            result.document
            for result in (projects_result, config_result)
            if result.from_fallback
        ]

        logger.info(
            f"Site status refreshed",
            extra={
                'has_events_today': status.has_events_today,
                'is_competition_announced': status.is_competition_announced,
                'is_submission_closed': status.is_submission_closed
            }
        )
        return status


class RefreshScheduler:
    """Runs a refresh function on a fixed interval between start and stop."""

    def __init__(
        self,
        refresh: Callable[[], object],
        interval_seconds: float = 60 * 60
    ):
        """
        Initialize the scheduler.

        Args:
            refresh: Function to run on every tick
            interval_seconds: Delay between runs (default: one hour)
        """
        self.refresh = refresh
        self.interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Run the refresh now and then once per interval until stopped."""
        if self.is_running:
            logger.warning("Refresh scheduler already running")
            return

        # Each run owns its event so a lingering thread never sees a clear()
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), daemon=True
        )
        self._thread.start()
        logger.info(
            f"Refresh scheduler started (every {self.interval_seconds}s)"
        )

    def stop(self, timeout: float = 5.0) -> None:
        """
        Signal the loop to stop and wait for it.

        If the thread is still busy after ``timeout`` it is kept, so
        ``is_running`` stays True and ``start`` refuses until it exits.
        """
        if self._thread is None:
            return

        self._stop_event.set()
        self._thread.join(timeout=timeout)
        if self._thread.is_alive():
            logger.warning(
                f"Refresh scheduler did not stop within {timeout}s"
            )
            return

        self._thread = None
        logger.info("Refresh scheduler stopped")

    def __enter__(self) -> 'RefreshScheduler':
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                self.refresh()
            except Exception as e:
                logger.error(f"Scheduled refresh failed: {e}", exc_info=True)
            stop_event.wait(self.interval_seconds)
