SONGKICK_BASE_URL = 'http://api.songkick.com/api/3.0'
"""Songkick api root with protocol and without trailing slash."""

SONGKICK_API_KEY_ENV = 'SONGKICK_API_KEY'
"""Environment variable holding the api key."""

REQUEST_TIMEOUT_SECONDS = 10
"""Timeout for a single api request."""

DEFAULT_PER_PAGE = 50
"""Page size used by the cli when only a page number is given."""

API_KEY_PARAM = 'apikey'
"""Query parameter under which the api key is sent."""
