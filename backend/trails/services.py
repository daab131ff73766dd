"""
Domain services for the trails app: great-circle distance and the trail
filter used by the discovery feed.
"""
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Haversine distance between two coordinates in kilometers.

    Malformed coordinates are not validated here; they come out as NaN.
    """
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    a = math.sin(dlat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(
        dlon / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


@dataclass(frozen=True)
class GeoPoint:
    """A geographic point (latitude, longitude)"""
    latitude: float
    longitude: float

    @classmethod
    def from_geojson(cls, data: dict) -> 'GeoPoint':
        """Builds a point from ``{"type": "Point", "coordinates": [lon, lat]}``."""
        longitude, latitude = data['coordinates']
        return cls(latitude=float(latitude), longitude=float(longitude))

    def to_geojson(self) -> dict:
        return {'type': 'Point', 'coordinates': [self.longitude, self.latitude]}


class ElevationBand(str, Enum):
    """Elevation bands shared by the trail filter and the scorer."""
    LOW = 'low'        # below 500 m
    MEDIUM = 'medium'  # 500 m up to 1500 m
    HIGH = 'high'      # 1500 m and above

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional['ElevationBand']:
        """Returns the band for a stored preference; ``any`` and unknown values mean no band."""
        if not value:
            return None
        try:
            return cls(str(value).lower())
        except ValueError:
            return None

    def contains(self, elevation: float) -> bool:
        if self is ElevationBand.LOW:
            return elevation < 500
        if self is ElevationBand.MEDIUM:
            return 500 <= elevation < 1500
        return elevation >= 1500


@dataclass(frozen=True)
class FilterCriteria:
    """
    Optional trail filters for a discovery request. ``None`` (or an empty set)
    means the criterion is not applied.
    """
    max_distance: Optional[float] = None  # 0 also means unset
    difficulty: Optional[FrozenSet[str]] = None
    tags: Optional[FrozenSet[str]] = None
    elevation: Optional[ElevationBand] = None


class TrailFilter:
    """
    Applies distance, difficulty, tag and elevation predicates to a trail set.
    All active criteria are ANDed; the input order is preserved.
    """

    def __init__(self, criteria: FilterCriteria):
        self.criteria = criteria

    def apply(self, trails: Iterable, user_location: Optional[GeoPoint]) -> List:
        kept = [trail for trail in trails if self.matches(trail, user_location)]
        logger.debug(f"Trail filter kept {len(kept)} trails with {self.criteria}")
        return kept

    def matches(self, trail, user_location: Optional[GeoPoint]) -> bool:
        return (
            self._within_distance(trail, user_location)
            and self._matches_difficulty(trail)
            and self._matches_tags(trail)
            and self._matches_elevation(trail)
        )

    def _within_distance(self, trail, user_location: Optional[GeoPoint]) -> bool:
        max_distance = self.criteria.max_distance
        # Zero means no limit, as in the scorer
        if not max_distance:
            return True

        # Proximity to the user and the trail's own length are checked
        # independently against the same limit.
        if user_location is not None and trail.latitude is not None and trail.longitude is not None:
            away = distance_km(user_location.latitude, user_location.longitude, trail.latitude, trail.longitude)
            if away > max_distance:
                return False

        if trail.distance is not None and trail.distance > max_distance:
            return False

        return True

    def _matches_difficulty(self, trail) -> bool:
        if not self.criteria.difficulty:
            return True
        return trail.difficulty in self.criteria.difficulty

    def _matches_tags(self, trail) -> bool:
        if not self.criteria.tags:
            return True
        return any(tag in self.criteria.tags for tag in (trail.tags or []))

    def _matches_elevation(self, trail) -> bool:
        if self.criteria.elevation is None or trail.elevation is None:
            return True
        return self.criteria.elevation.contains(trail.elevation)


def filter_trails(trails: Iterable, criteria: FilterCriteria, user_location: Optional[GeoPoint]) -> List:
    return TrailFilter(criteria).apply(trails, user_location)
