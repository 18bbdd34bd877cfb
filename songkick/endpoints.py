"""Request urls for songkick api endpoints."""

from .config import SongKickOpts
from .constants import API_KEY_PARAM
from .options import Options, format_with_options
from .util import encode


def endpoint_url(
    opts: SongKickOpts,
    path: str,
    options: Options | None = None,
) -> str:
    """Build full request url for api path.

    :param SongKickOpts opts: Api key and base path.
    :param str path: Endpoint path without leading slash and ``.json``.
    :param Options | None options: Filtering, paging and sorting.
    :return str: Request url.
    """
    url = (
        f'{opts.base_path()}/{path}.json'
        f'?{API_KEY_PARAM}={opts.api_key()}'
    )
    return format_with_options(url, options)


def artist_calendar_url(
    opts: SongKickOpts, artist_id: int, options: Options | None = None
) -> str:
    return endpoint_url(opts, f'artists/{artist_id}/calendar', options)


def artist_gigography_url(
    opts: SongKickOpts, artist_id: int, options: Options | None = None
) -> str:
    return endpoint_url(opts, f'artists/{artist_id}/gigography', options)


def event_search_url(opts: SongKickOpts, options: Options | None = None) -> str:
    return endpoint_url(opts, 'events', options)


def event_details_url(opts: SongKickOpts, event_id: int) -> str:
    return endpoint_url(opts, f'events/{event_id}')


def venue_details_url(opts: SongKickOpts, venue_id: int) -> str:
    return endpoint_url(opts, f'venues/{venue_id}')


def venue_calendar_url(
    opts: SongKickOpts, venue_id: int, options: Options | None = None
) -> str:
    return endpoint_url(opts, f'venues/{venue_id}/calendar', options)


def metro_area_calendar_url(
    opts: SongKickOpts, metro_area_id: int, options: Options | None = None
) -> str:
    return endpoint_url(opts, f'metro_areas/{metro_area_id}/calendar', options)


def artist_search_url(
    opts: SongKickOpts, query: str, options: Options | None = None
) -> str:
    """Artist search url. Query goes right after the api key."""
    url = endpoint_url(opts, 'search/artists')
    return format_with_options(f'{url}&query={encode(query)}', options)
