from __future__ import annotations

from typing import Any, NotRequired, TypedDict


class ArtistJson(TypedDict):
    id: int
    displayName: str
    uri: NotRequired[str]
    onTourUntil: NotRequired[str | None]


class MetroAreaJson(TypedDict):
    id: int
    displayName: str
    country: NotRequired[dict[str, str]]


class VenueJson(TypedDict):
    id: int | None
    displayName: str
    uri: NotRequired[str]
    lat: NotRequired[float | None]
    lng: NotRequired[float | None]
    metroArea: NotRequired[MetroAreaJson]


class PerformanceJson(TypedDict):
    id: int
    displayName: str
    billing: NotRequired[str]
    artist: ArtistJson


class EventJson(TypedDict):
    id: int
    displayName: str
    type: NotRequired[str]
    uri: NotRequired[str]
    status: NotRequired[str]
    start: NotRequired[dict[str, str | None]]
    venue: NotRequired[VenueJson]
    performance: NotRequired[list[PerformanceJson]]


class ResultsPageJson(TypedDict):
    status: str
    results: dict[str, Any]
    page: NotRequired[int]
    perPage: NotRequired[int]
    totalEntries: NotRequired[int]
    error: NotRequired[dict[str, str]]
