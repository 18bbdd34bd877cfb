from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ._types import ArtistJson, EventJson, VenueJson

T = TypeVar('T')


@dataclass
class Artist:
    """Some artist listed on songkick."""

    id: int
    name: str
    uri: str | None = field(default=None, repr=False)
    on_tour_until: str | None = None

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_json(cls, artist_json: ArtistJson) -> Artist:
        return cls(
            id=artist_json['id'],
            name=artist_json['displayName'],
            uri=artist_json.get('uri'),
            on_tour_until=artist_json.get('onTourUntil'),
        )


@dataclass
class Venue:
    """Place where events happen."""

    id: int | None
    name: str
    uri: str | None = field(default=None, repr=False)
    lat: float | None = None
    lng: float | None = None
    metro_area: str | None = None

    def __str__(self) -> str:
        if self.metro_area:
            return f'{self.name}, {self.metro_area}'
        return self.name

    @classmethod
    def from_json(cls, venue_json: VenueJson) -> Venue:
        metro_area = venue_json.get('metroArea')
        return cls(
            id=venue_json.get('id'),
            name=venue_json['displayName'],
            uri=venue_json.get('uri'),
            lat=venue_json.get('lat'),
            lng=venue_json.get('lng'),
            metro_area=metro_area['displayName'] if metro_area else None,
        )


@dataclass
class Event:
    """Concert or festival."""

    id: int
    name: str
    type: str | None = None
    status: str | None = None
    date: str | None = None
    uri: str | None = field(default=None, repr=False)
    venue: Venue | None = None
    artists: Sequence[Artist] = field(default_factory=list)

    def __str__(self) -> str:
        return f'{self.date or "????-??-??"} {self.name}'

    @classmethod
    def from_json(cls, event_json: EventJson) -> Event:
        venue = event_json.get('venue')
        return cls(
            id=event_json['id'],
            name=event_json['displayName'],
            type=event_json.get('type'),
            status=event_json.get('status'),
            date=(event_json.get('start') or {}).get('date'),
            uri=event_json.get('uri'),
            venue=Venue.from_json(venue) if venue else None,
            artists=[
                Artist.from_json(performance['artist'])
                for performance in event_json.get('performance') or []
            ],
        )


@dataclass
class ResultsPage(Generic[T]):
    """One page of api results."""

    results: list[T]
    page: int
    per_page: int
    total_entries: int

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def has_next(self) -> bool:
        """There are more results after this page."""
        return self.page * self.per_page < self.total_entries
