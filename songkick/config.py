from __future__ import annotations

import os

from .constants import SONGKICK_API_KEY_ENV, SONGKICK_BASE_URL
from .exceptions import MissingApiKey


class SongKickOpts:
    """Api key and base path used to build request urls.

    :param str api_key: Songkick api key.
    :param str base_path: Api root. Trailing slashes are stripped.
    :raises MissingApiKey: Api key is empty.
    """

    def __init__(
        self,
        api_key: str,
        base_path: str = SONGKICK_BASE_URL,
    ) -> None:
        if not api_key:
            raise MissingApiKey('Songkick api key is empty')
        self.__api_key = api_key
        self.__base_path = base_path.rstrip('/')

    def __repr__(self) -> str:
        return f'SongKickOpts(api_key=***, base_path={self.__base_path!r})'

    @classmethod
    def from_env(cls, base_path: str = SONGKICK_BASE_URL) -> SongKickOpts:
        """Read api key from the ``SONGKICK_API_KEY`` environment variable.

        :raises MissingApiKey: Variable is unset or empty.
        """
        api_key = os.environ.get(SONGKICK_API_KEY_ENV)
        if not api_key:
            raise MissingApiKey(f'{SONGKICK_API_KEY_ENV} is not set')
        return cls(api_key, base_path)

    def api_key(self) -> str:
        return self.__api_key

    def base_path(self) -> str:
        return self.__base_path
