"""Domain records indexed by tracker-search."""

from tracker_search.domain.model import Asset, Entity, Episode, Person, Record, Sequence, Shot, Task


__all__ = [
    "Asset",
    "Entity",
    "Episode",
    "Person",
    "Record",
    "Sequence",
    "Shot",
    "Task",
]
