"""
TrailScorer: the relevance engine behind the discovery feed.
TrailCardService: orchestrates profile lookup, filtering, scoring, ranking and pagination.
"""
import logging
import math
from typing import List, Optional

from django.conf import settings

from core.exceptions import RequestValidationError
from recommendations.dtos import ScoredTrail, TrailPreferences
from recommendations.ranking import PageResult, paginate, rank
from trails.models import Trail
from trails.services import FilterCriteria, GeoPoint, TrailFilter
from user.models import UserProfile

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class TrailScorer:
    """
    Additive scoring of a trail against a user's preferences:

    1. Base score for every trail
    2. Difficulty match
    3. Length relative to the preferred max distance (shorter scores higher)
    4. Shared tags, per distinct tag
    5. Elevation band match
    6. Popularity bonus

    The result is rounded half-up. Scoring reads nothing but its arguments.
    """

    BASE_SCORE = 10
    DIFFICULTY_SCORE = 20
    DISTANCE_SCORE = 30
    TAG_SCORE = 10
    ELEVATION_SCORE = 15
    POPULARITY_BONUS = 5

    def __init__(self, default_max_distance: Optional[float] = None):
        if default_max_distance is None:
            default_max_distance = getattr(settings, 'TRAIL_SCORING_DEFAULT_MAX_DISTANCE_KM', 50.0)
        self.default_max_distance = default_max_distance

    def score(self, trail, preferences: TrailPreferences, user_location: Optional[GeoPoint]) -> int:
        total = float(self.BASE_SCORE)

        if trail.difficulty in preferences.difficulty:
            total += self.DIFFICULTY_SCORE

        total += self._distance_score(trail, preferences, user_location)

        trail_tags = set(trail.tags or [])
        total += self.TAG_SCORE * len(trail_tags & preferences.tags)

        if preferences.elevation is not None and trail.elevation is not None:
            if preferences.elevation.contains(trail.elevation):
                total += self.ELEVATION_SCORE

        total += self.POPULARITY_BONUS

        return round_half_up(total)

    def _distance_score(self, trail, preferences: TrailPreferences, user_location: Optional[GeoPoint]) -> float:
        if user_location is None or trail.distance is None:
            return 0.0

        # Zero counts as unset, otherwise the ratio below divides by zero
        max_distance = preferences.max_distance or self.default_max_distance
        if trail.distance > max_distance:
            return 0.0

        return max(0.0, self.DISTANCE_SCORE - trail.distance / max_distance * self.DISTANCE_SCORE)


class TrailCardService:
    """
    Builds the paginated, scored trail feed for one user.
    """

    def __init__(self, scorer: Optional[TrailScorer] = None):
        self.scorer = scorer or TrailScorer()

    def get_cards(self, user, criteria: FilterCriteria, page: int, limit: int) -> PageResult:
        """
        Steps:
        1. Load the user's profile and location
        2. Drop trails the user rejected (left swipes)
        3. Filter with the request criteria
        4. Score with the stored preferences
        5. Rank and paginate

        Raises:
            RequestValidationError: no profile, no location, or bad page/limit
        """
        profile = UserProfile.objects.for_user(user.id)
        if profile is None:
            raise RequestValidationError('User profile not found. Please set your location.')

        user_location = profile.get_location()
        if user_location is None:
            raise RequestValidationError('User location not set. Please set your location to discover trails.')

        # Imported here, swipes depends on trails and friendships
        from swipes.models import Direction

        candidates = Trail.objects.excluding_swiped(user, Direction.LEFT).prefetch_related('photos')
        filtered = TrailFilter(criteria).apply(candidates, user_location)

        preferences = TrailPreferences.from_dict(profile.preferences)
        scored: List[ScoredTrail] = [
            ScoredTrail(trail=trail, score=self.scorer.score(trail, preferences, user_location))
            for trail in filtered
        ]

        result = paginate(rank(scored), page, limit)
        logger.debug(
            f"Trail cards for user {user.id}: {len(filtered)} candidates, "
            f"page {page} returned {len(result.items)}"
        )
        return result
