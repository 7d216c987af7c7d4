"""Draft API data fetching using requests."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .constants import DEFAULT_BASE_URL, DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT_SEC
from .schemas import (
    BootstrapStatic,
    DraftChoicesResponse,
    ElementStatusResponse,
    EntryPicksResponse,
    LeagueConfig,
    LeagueDetails,
    LiveEventResponse,
    TransactionsResponse,
)

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('fpldraft.data_fetcher')


class UpstreamError(RuntimeError):
    """An upstream payload could not be fetched or did not match its schema."""

    def __init__(self, path: str, message: str):
        super().__init__(f'{path}: {message}')
        self.path = path


def build_session() -> requests.Session:
    """Session with retries and backoff for transient upstream errors (GET only)."""
    session = requests.Session()
    session.headers.update({
        'User-Agent': 'fpldraft-dashboard/1.0',
        'Cache-Control': 'no-cache',
    })
    retry = Retry(
        total=5,
        connect=3,
        read=3,
        backoff_factor=0.5,
        status_forcelist=(408, 429, 500, 502, 503, 504),
        allowed_methods=('GET',),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount('http://', adapter)
    session.mount('https://', adapter)
    return session


class DraftDataFetcher:
    """Fetches and caches one league's payloads from the draft API."""

    def __init__(
        self,
        league_id: int,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        max_workers: int = DEFAULT_MAX_WORKERS,
        session: Optional[requests.Session] = None,
    ):
        self.league_id = league_id
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_workers = max_workers
        self.session = session or build_session()
        self._league_details: Optional[LeagueDetails] = None
        self._element_status: Optional[ElementStatusResponse] = None
        self._bootstrap: Optional[BootstrapStatic] = None
        self._transactions: Optional[TransactionsResponse] = None

    @classmethod
    def from_config(cls, config: LeagueConfig, session: Optional[requests.Session] = None) -> 'DraftDataFetcher':
        return cls(
            league_id=config.league_id,
            base_url=config.api_base_url,
            timeout=config.request_timeout,
            max_workers=config.max_workers,
            session=session,
        )

    def get_json(self, path: str) -> Any:
        """
        GET ``base_url + path`` and decode JSON.

        Raises:
            UpstreamError: On connection errors, non-2xx responses (after
                retries) or an undecodable body
        """
        url = self.base_url + path
        logger.debug(f'GET {url}')
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f'Request failed for {path}: {e}')
            raise UpstreamError(path, str(e)) from e
        except ValueError as e:
            logger.error(f'Invalid JSON from {path}: {e}')
            raise UpstreamError(path, f'invalid JSON: {e}') from e

    def get_model(self, path: str, schema: type[T]) -> T:
        """Fetch ``path`` and validate it against ``schema``."""
        data = self.get_json(path)
        try:
            return schema.model_validate(data)
        except ValidationError as e:
            logger.error(f'Unexpected payload shape from {path}: {e}')
            raise UpstreamError(path, f'unexpected payload shape: {e}') from e

    @property
    def league_details(self) -> LeagueDetails:
        """Lazy load league entries, matches and standings."""
        if self._league_details is None:
            self._league_details = self.get_model(f'/league/{self.league_id}/details', LeagueDetails)
        return self._league_details

    @property
    def element_status(self) -> ElementStatusResponse:
        """Lazy load player ownership."""
        if self._element_status is None:
            self._element_status = self.get_model(
                f'/league/{self.league_id}/element-status', ElementStatusResponse
            )
        return self._element_status

    @property
    def bootstrap(self) -> BootstrapStatic:
        """Lazy load the player/team/event catalog."""
        if self._bootstrap is None:
            self._bootstrap = self.get_model('/bootstrap-static', BootstrapStatic)
        return self._bootstrap

    @property
    def transactions(self) -> TransactionsResponse:
        """Lazy load the league's transactions."""
        if self._transactions is None:
            self._transactions = self.get_model(
                f'/draft/league/{self.league_id}/transactions', TransactionsResponse
            )
        return self._transactions

    def fetch_draft_choices(self) -> DraftChoicesResponse:
        return self.get_model(f'/draft/{self.league_id}/choices', DraftChoicesResponse)

    def fetch_entry_picks(self, entry_id: int, event: int) -> EntryPicksResponse:
        return self.get_model(f'/entry/{entry_id}/event/{event}', EntryPicksResponse)

    def fetch_live_event(self, event: int) -> LiveEventResponse:
        return self.get_model(f'/event/{event}/live', LiveEventResponse)

    def fetch_all_picks(self, entry_ids: Iterable[int], event: int) -> dict[int, EntryPicksResponse]:
        """
        Fetch every entry's picks for a gameweek concurrently.

        The batch succeeds or fails as a unit: the first failure is re-raised.

        Args:
            entry_ids: External entry ids
            event: Gameweek

        Returns:
            Dict mapping external entry id to picks
        """
        entry_ids = list(entry_ids)
        if not entry_ids:
            return {}
        workers = min(self.max_workers, len(entry_ids))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {
                entry_id: pool.submit(self.fetch_entry_picks, entry_id, event)
                for entry_id in entry_ids
            }
            return {entry_id: future.result() for entry_id, future in futures.items()}

    def load_primary(self) -> None:
        """
        Fetch the four payloads every view depends on, concurrently.

        Raises:
            UpstreamError: If any of them fails
        """
        names = ('league_details', 'element_status', 'bootstrap', 'transactions')
        with ThreadPoolExecutor(max_workers=len(names)) as pool:
            futures = [pool.submit(getattr, self, name) for name in names]
            for future in futures:
                future.result()
