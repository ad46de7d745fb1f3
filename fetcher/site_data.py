"""Loader for the site's static JSON documents."""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from botocore.exceptions import BotoCoreError, ClientError

from fetcher.fallbacks import (
    EVENTS_DOCUMENT,
    NEWS_DOCUMENT,
    PROJECTS_DOCUMENT,
    TEAM_DOCUMENT,
    WINNERS_DOCUMENT,
    WPOTY_CONFIG_DOCUMENT,
    get_fallback,
)
from storage.s3_assets import S3AssetStore

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """A loaded document and whether it came from the fallback payload."""
    document: str
    payload: Any
    from_fallback: bool


class SiteDataClient:
    """Loads site documents over HTTP or from S3, substituting fallbacks."""

    DEFAULT_BASE_URL = "https://wildsrilanka.lk/"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 10,
        asset_store: Optional[S3AssetStore] = None
    ):
        """
        Initialize the site data client.

        Args:
            base_url: URL the JSON documents are served under
            timeout: HTTP request timeout in seconds (default: 10)
            asset_store: Read from this S3 store instead of HTTP when given
        """
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'
        self.timeout = timeout
        self.asset_store = asset_store

    def load(self, document: str) -> LoadResult:
        """
        Load a document, falling back to its hard-coded payload on failure.

        A single attempt is made. Any network, storage or decoding error, or
        a payload of the wrong shape, replaces the whole document with its
        fallback.

        Args:
            document: Document name, e.g. "events.json"

        Returns:
            LoadResult with the payload and its origin
        """
        try:
            payload = self._fetch(document)
            self._check_shape(document, payload)
        except (requests.RequestException, ClientError, BotoCoreError,
                ValueError) as e:
            logger.error(
                f"Failed to load {document}, using fallback payload: {e}",
                extra={'error_type': type(e).__name__}
            )
            return LoadResult(document, get_fallback(document), True)

        logger.info(f"Loaded {document}")
        return LoadResult(document, payload, False)

    def load_events(self) -> LoadResult:
        return self.load(EVENTS_DOCUMENT)

    def load_projects(self) -> LoadResult:
        return self.load(PROJECTS_DOCUMENT)

    def load_news(self) -> LoadResult:
        return self.load(NEWS_DOCUMENT)

    def load_team(self) -> LoadResult:
        return self.load(TEAM_DOCUMENT)

    def load_winners(self) -> LoadResult:
        return self.load(WINNERS_DOCUMENT)

    def load_wpoty_config(self) -> LoadResult:
        return self.load(WPOTY_CONFIG_DOCUMENT)

    def _fetch(self, document: str) -> Any:
        """
        Fetch and decode a document from the configured source.

        Raises:
            requests.RequestException: On network errors or non-2xx status
            ClientError: On S3 errors
            ValueError: If the body is not valid JSON
        """
        if self.asset_store is not None:
            return self.asset_store.get_json(document)

        url = self.base_url + document
        logger.info(f"Fetching {url}")
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _check_shape(self, document: str, payload: Any) -> None:
        """
        Validate the top-level shape of a document.

        Raises:
            ValueError: If the payload does not match the document's shape
        """
        if document in (EVENTS_DOCUMENT, PROJECTS_DOCUMENT):
            if not isinstance(payload, dict) or not isinstance(
                payload.get('events'), list
            ):
                raise ValueError(f"{document} must contain an 'events' list")
        elif document == NEWS_DOCUMENT:
            if not isinstance(payload, list):
                raise ValueError(f"{document} must be a list")
        elif not isinstance(payload, dict):
            raise ValueError(f"{document} must be an object")
