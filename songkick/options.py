"""Filtering, paging and sorting options for api requests.

Sorting::

    options = OptionsBuilder().sort(Sort.DESC).build()
    events = sk.artist_gigography(253846, options)

Paging::

    options = OptionsBuilder().paging(2, 25).build()

Filtering::

    options = (
        OptionsBuilder()
        .filter(lambda f: f.artist_name('Radiohead').location('clientip'))
        .build()
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from .enums import Sort
from .exceptions import BuilderConsumed
from .util import encode


@dataclass(frozen=True)
class Filter:
    artist_name: str | None = None
    min_date: str | None = None
    max_date: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class Paging:
    page: int
    per_page: int


@dataclass(frozen=True)
class Options:
    """Filtering, paging and sorting options for a single request.

    Instantiated with :class:`OptionsBuilder`. Missing parts are
    left out of the request url.
    """

    paging: Paging | None = None
    filter: Filter | None = None
    sort: Sort | None = None


class FilterBuilder:
    """Builder for request filters.

    Handed to the callback of :meth:`OptionsBuilder.filter`.
    Every setter overwrites the previous value of its field.
    """

    def __init__(self) -> None:
        self._empty = True
        self._built = False
        self._artist_name: str | None = None
        self._min_date: str | None = None
        self._max_date: str | None = None
        self._location: str | None = None

    def _touch(self) -> None:
        if self._built:
            raise BuilderConsumed('Filter builder was already built')
        self._empty = False

    def artist_name(self, name: Any) -> Self:
        """Only return events by this artist.

        :param name: Artist name.
        """
        self._touch()
        self._artist_name = str(name)
        return self

    def min_date(self, min_date: Any) -> Self:
        """Only return events on or after this date.

        :param min_date: Date as ``YYYY-MM-DD``.
        """
        self._touch()
        self._min_date = str(min_date)
        return self

    def max_date(self, max_date: Any) -> Self:
        """Only return events on or before this date.

        :param max_date: Date as ``YYYY-MM-DD``.
        """
        self._touch()
        self._max_date = str(max_date)
        return self

    def location(self, location: Any) -> Self:
        """Only return events near this location.

        :param location: ``clientip``, ``ip:<addr>``, ``geo:<lat>,<lng>``
            or ``sk:<metro area id>``.
        """
        self._touch()
        self._location = str(location)
        return self

    def _build(self) -> Filter | None:
        self._built = True
        if self._empty:
            return None
        return Filter(
            artist_name=self._artist_name,
            min_date=self._min_date,
            max_date=self._max_date,
            location=self._location,
        )


class OptionsBuilder:
    """Builder for :class:`Options`.

    Can be built only once.
    """

    def __init__(self) -> None:
        self._filter = FilterBuilder()
        self._paging: Paging | None = None
        self._sort: Sort | None = None
        self._built = False

    def _check_not_built(self) -> None:
        if self._built:
            raise BuilderConsumed('Options builder was already built')

    def paging(self, page: int, per_page: int) -> Self:
        """Request a specific results page.

        :param int page: Page number.
        :param int per_page: Results per page.
        """
        self._check_not_built()
        self._paging = Paging(page=page, per_page=per_page)
        return self

    def sort(self, sort: Sort) -> Self:
        """Set results order.

        :param Sort sort: Ascending or descending.
        :raises ValueError: Not one of ``asc`` or ``desc``.
        """
        self._check_not_built()
        self._sort = Sort(sort)
        return self

    def filter(self, filter_: Callable[[FilterBuilder], Any]) -> Self:
        """Set filter fields.

        :param filter_: Callback receiving the :class:`FilterBuilder`.
            Its return value is ignored.
        """
        self._check_not_built()
        filter_(self._filter)
        return self

    def build(self) -> Options:
        """Build options.

        :return Options: Immutable options.
        """
        self._check_not_built()
        self._built = True
        return Options(
            paging=self._paging,
            filter=self._filter._build(),
            sort=self._sort,
        )


def format_with_options(url: str, options: Options | None = None) -> str:
    """Append options to request url.

    Parameters are always appended with ``&``, so ``url`` must already
    have a query (normally the api key).

    :param str url: Request url.
    :param Options | None options: Options to append.
    :return str: Url with options.
    """
    if options is None:
        return url

    params: list[tuple[str, str]] = []

    if filter_ := options.filter:
        params.extend(
            (name, encode(value))
            for name, value in (
                ('min_date', filter_.min_date),
                ('max_date', filter_.max_date),
                ('artist_name', filter_.artist_name),
                ('location', filter_.location),
            )
            if value is not None
        )

    if paging := options.paging:
        params.append(('page', str(paging.page)))
        params.append(('per_page', str(paging.per_page)))

    if options.sort is not None:
        params.append(('order', str(options.sort)))

    return url + ''.join(f'&{name}={value}' for name, value in params)
