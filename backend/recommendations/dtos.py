"""
Data Transfer Objects (DTOs) for the trail discovery pipeline.
"""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from trails.services import ElevationBand


def _as_string_set(value) -> FrozenSet[str]:
    if not value:
        return frozenset()
    if isinstance(value, str):
        value = [value]
    return frozenset(str(item) for item in value)


@dataclass(frozen=True)
class TrailPreferences:
    """
    A user's stored scoring defaults. Missing fields stay unset and simply
    skip their scoring branch.
    """
    difficulty: FrozenSet[str] = field(default_factory=frozenset)
    max_distance: Optional[float] = None
    elevation: Optional[ElevationBand] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'TrailPreferences':
        """Parses the JSON document stored on the profile (client field names)."""
        data = data or {}

        max_distance = data.get('maxDistance')
        try:
            max_distance = float(max_distance) if max_distance is not None else None
        except (TypeError, ValueError):
            max_distance = None

        return cls(
            difficulty=_as_string_set(data.get('difficulty')),
            max_distance=max_distance,
            elevation=ElevationBand.parse(data.get('elevation')),
            tags=_as_string_set(data.get('tags')),
        )


@dataclass
class ScoredTrail:
    """A trail paired with its relevance score for one user."""
    trail: object
    score: Optional[int] = None
