"""Songkick api client.

Builds request urls with filtering, paging and sorting options
and fetches events, artists and venues from api.songkick.com.
"""

from .client import SongKick
from .config import SongKickOpts
from .constants import (
    SONGKICK_API_KEY_ENV,
    SONGKICK_BASE_URL,
)
from .endpoints import (
    artist_calendar_url,
    artist_gigography_url,
    artist_search_url,
    endpoint_url,
    event_details_url,
    event_search_url,
    metro_area_calendar_url,
    venue_calendar_url,
    venue_details_url,
)
from .enums import Sort
from .exceptions import (
    ApiError,
    BuilderConsumed,
    MissingApiKey,
    SongKickError,
    UnexpectedResponse,
)
from .models import (
    Artist,
    Event,
    ResultsPage,
    Venue,
)
from .options import (
    FilterBuilder,
    Options,
    OptionsBuilder,
    format_with_options,
)
from .util import encode

__all__ = [
    'SONGKICK_API_KEY_ENV',
    'SONGKICK_BASE_URL',
    'ApiError',
    'Artist',
    'BuilderConsumed',
    'Event',
    'FilterBuilder',
    'MissingApiKey',
    'Options',
    'OptionsBuilder',
    'ResultsPage',
    'SongKick',
    'SongKickError',
    'SongKickOpts',
    'Sort',
    'UnexpectedResponse',
    'Venue',
    'artist_calendar_url',
    'artist_gigography_url',
    'artist_search_url',
    'encode',
    'endpoint_url',
    'event_details_url',
    'event_search_url',
    'format_with_options',
    'metro_area_calendar_url',
    'venue_calendar_url',
    'venue_details_url',
]
