import logging
from collections.abc import Callable
from typing import Any, TypeVar

import requests

from ._types import ResultsPageJson
from .config import SongKickOpts
from .constants import REQUEST_TIMEOUT_SECONDS, SONGKICK_BASE_URL
from .decorators import log_errors, log_inputs
from .endpoints import (
    artist_calendar_url,
    artist_gigography_url,
    artist_search_url,
    event_details_url,
    event_search_url,
    metro_area_calendar_url,
    venue_calendar_url,
    venue_details_url,
)
from .exceptions import UnexpectedResponse
from .models import Artist, Event, ResultsPage, Venue
from .options import Options
from .util import redact_api_key
from .validators import songkick_results_page

T = TypeVar('T')

logger = logging.getLogger('songkick-client')


def _map(
    mapper: Callable[[Any], T],
    item: Any,
    result_key: str,
    url: str,
) -> T:
    try:
        return mapper(item)
    except (KeyError, TypeError, AttributeError) as e:
        raise UnexpectedResponse(
            f'Malformed {result_key} in {redact_api_key(url)}: {e!r}'
        ) from e


class SongKick:
    """Songkick api client.

    Every call makes exactly one GET request.

    :param str api_key: Songkick api key.
    :param str base_path: Api root. Default is the public api.
    :param Session | None session: Http session to use.
        A new one is created by default.
    """

    def __init__(
        self,
        api_key: str,
        base_path: str = SONGKICK_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.opts = SongKickOpts(api_key, base_path)
        self.session = session or requests.Session()

    def __repr__(self) -> str:
        return f'SongKick({self.opts.base_path()!r})'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str) -> ResultsPageJson:
        logger.debug(f'GET {redact_api_key(url)}')
        response = self.session.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
        return songkick_results_page(response)

    @log_errors(logger=logger)
    def _get_page(
        self,
        url: str,
        result_key: str,
        mapper: Callable[[Any], T],
    ) -> ResultsPage[T]:
        page = self._get(url)
        items = page['results'].get(result_key, [])
        if not isinstance(items, list):
            raise UnexpectedResponse(
                f'Expected list of {result_key} in {redact_api_key(url)}'
            )
        return ResultsPage(
            results=[_map(mapper, item, result_key, url) for item in items],
            page=page.get('page', 1),
            per_page=page.get('perPage', len(items)),
            total_entries=page.get('totalEntries', len(items)),
        )

    @log_errors(logger=logger)
    def _get_one(
        self,
        url: str,
        result_key: str,
        mapper: Callable[[Any], T],
    ) -> T:
        page = self._get(url)
        if not isinstance(item := page['results'].get(result_key), dict):
            raise UnexpectedResponse(
                f'No {result_key} found in {redact_api_key(url)}'
            )
        return _map(mapper, item, result_key, url)

    @log_inputs(logger=logger)
    def artist_calendar(
        self, artist_id: int, options: Options | None = None
    ) -> ResultsPage[Event]:
        """Get artist's upcoming events.

        :param int artist_id: Songkick artist id.
        :param Options | None options: Filtering, paging and sorting.
        """
        url = artist_calendar_url(self.opts, artist_id, options)
        return self._get_page(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def artist_gigography(
        self, artist_id: int, options: Options | None = None
    ) -> ResultsPage[Event]:
        """Get artist's past events.

        :param int artist_id: Songkick artist id.
        :param Options | None options: Filtering, paging and sorting.
        """
        url = artist_gigography_url(self.opts, artist_id, options)
        return self._get_page(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def search_events(
        self, options: Options | None = None
    ) -> ResultsPage[Event]:
        """Search upcoming events.

        Without filter options the api returns events near the caller's ip.
        """
        url = event_search_url(self.opts, options)
        return self._get_page(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def get_event(self, event_id: int) -> Event:
        url = event_details_url(self.opts, event_id)
        return self._get_one(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def get_venue(self, venue_id: int) -> Venue:
        url = venue_details_url(self.opts, venue_id)
        return self._get_one(url, 'venue', Venue.from_json)

    @log_inputs(logger=logger)
    def venue_calendar(
        self, venue_id: int, options: Options | None = None
    ) -> ResultsPage[Event]:
        url = venue_calendar_url(self.opts, venue_id, options)
        return self._get_page(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def metro_area_calendar(
        self, metro_area_id: int, options: Options | None = None
    ) -> ResultsPage[Event]:
        url = metro_area_calendar_url(self.opts, metro_area_id, options)
        return self._get_page(url, 'event', Event.from_json)

    @log_inputs(logger=logger)
    def search_artists(
        self, query: str, options: Options | None = None
    ) -> ResultsPage[Artist]:
        """Search artists by name.

        :param str query: Artist name or part of it.
        :param Options | None options: Only paging is meaningful here.
        """
        url = artist_search_url(self.opts, query, options)
        return self._get_page(url, 'artist', Artist.from_json)
