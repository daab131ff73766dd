"""
Business logic for the swipe deck: recording a decision on a trail and
detecting matches between friends who both liked it.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from django.db import IntegrityError, transaction

from community.models import Friendship
from core.exceptions import Conflict, RequestValidationError, ResourceNotFound
from swipes.models import Direction, Match, Swipe
from trails.models import Trail

logger = logging.getLogger(__name__)


@dataclass
class SwipeOutcome:
    swipe: Swipe
    match: Optional[Match] = None


class MatchDetector:
    """
    Looks for an accepted friend who already swiped right on the same trail.
    The first eligible friend (earliest swipe, then lowest user id) gets a match.
    """

    def detect(self, swipe: Swipe) -> Optional[Match]:
        actor = swipe.user

        for candidate in Swipe.objects.right_swipes_on(swipe.trail, excluding_user=actor):
            if not Friendship.objects.are_friends(actor, candidate.user):
                continue

            if Match.objects.between(actor, candidate.user, swipe.trail) is not None:
                continue

            try:
                with transaction.atomic():
                    match = Match.objects.create_for_pair(actor, candidate.user, swipe.trail)
            except IntegrityError:
                # Created concurrently for the same pair and trail
                logger.info(f"Match for users {actor.pk}/{candidate.user_id} on trail {swipe.trail_id} already exists")
                continue

            logger.info(f"Match {match.id} created for users {match.user1_id}/{match.user2_id} on trail {match.trail_id}")
            return match

        return None


class SwipeRecorder:
    """
    Records swipes. Each user decides on a trail exactly once.
    """

    def __init__(self, match_detector: Optional[MatchDetector] = None):
        self.match_detector = match_detector or MatchDetector()

    def record(self, user, trail_id, direction: str) -> SwipeOutcome:
        """
        Validates and stores a swipe; a right swipe may also produce a match.

        Raises:
            RequestValidationError: unknown direction
            ResourceNotFound: the trail does not exist
            Conflict: the user already swiped on this trail
        """
        if direction not in Direction.values:
            raise RequestValidationError('Direction must be left, right, or up')

        with transaction.atomic():
            # Serialises concurrent swipes on the same trail
            trail = Trail.objects.select_for_update().find_by_id(trail_id)
            if trail is None:
                raise ResourceNotFound('Trail not found')

            if Swipe.objects.exists_for(user, trail):
                raise Conflict('Already swiped on this trail')

            try:
                with transaction.atomic():
                    swipe = Swipe.objects.create(user=user, trail=trail, direction=direction)
            except IntegrityError:
                raise Conflict('Already swiped on this trail')

            logger.info(f"User {user.pk} swiped {direction} on trail {trail.id}")

            match = None
            if direction == Direction.RIGHT:
                match = self.match_detector.detect(swipe)

        return SwipeOutcome(swipe=swipe, match=match)

    def swipes_for(self, user):
        return Swipe.objects.for_user(user)

    def clear(self, user) -> Tuple[int, int]:
        """
        Deletes every swipe of ``user``. Returns the number removed and the
        number of swipes left in the store.
        """
        cleared, _ = Swipe.objects.filter(user=user).delete()
        remaining = Swipe.objects.count()
        logger.info(f"Cleared {cleared} swipes for user {user.pk}")
        return cleared, remaining
