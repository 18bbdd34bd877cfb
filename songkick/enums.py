from enum import StrEnum


class Sort(StrEnum):
    """Result orderings accepted by the Songkick api."""

    ASC = 'asc'
    """Oldest events first."""
    DESC = 'desc'
    """Newest events first. Mostly useful for gigographies."""
