import uuid
from typing import Optional, Tuple

from django.conf import settings
from django.db import models
from django.db.models import Q

from trails.models import Trail


class Direction(models.TextChoices):
    LEFT = 'left', 'Left'      # reject
    RIGHT = 'right', 'Right'   # like
    UP = 'up', 'Up'            # bucket list


class SwipeQuerySet(models.QuerySet):

    def for_user(self, user) -> 'SwipeQuerySet':
        return self.filter(user=user).order_by('-created_at')

    def exists_for(self, user, trail) -> bool:
        return self.filter(user=user, trail=trail).exists()

    def right_swipes_on(self, trail, excluding_user) -> 'SwipeQuerySet':
        """
        Other users' right swipes on ``trail``, earliest first.
        Equal timestamps fall back to the lowest user id.
        """
        return (
            self.filter(trail=trail, direction=Direction.RIGHT)
            .exclude(user=excluding_user)
            .select_related('user')
            .order_by('created_at', 'user_id')
        )


class Swipe(models.Model):
    """
    A user's one-time decision on a trail. At most one per (user, trail).
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='swipes'
    )
    trail = models.ForeignKey(Trail, on_delete=models.CASCADE, related_name='swipes')
    direction = models.CharField(max_length=10, choices=Direction.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = SwipeQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['user', 'trail'], name='unique_swipe_per_user_trail'),
        ]

    def __str__(self):
        return f"{self.user_id} swiped {self.direction} on {self.trail_id}"


def ordered_pair(user_a, user_b) -> Tuple:
    """Orders two users by id so a pair has a single stored form."""
    return (user_a, user_b) if user_a.pk < user_b.pk else (user_b, user_a)


class MatchQuerySet(models.QuerySet):

    def between(self, user_a, user_b, trail) -> Optional['Match']:
        first, second = ordered_pair(user_a, user_b)
        return self.filter(user1=first, user2=second, trail=trail).first()

    def for_user(self, user) -> 'MatchQuerySet':
        return self.filter(Q(user1=user) | Q(user2=user)).order_by('-created_at')

    def create_for_pair(self, user_a, user_b, trail) -> 'Match':
        first, second = ordered_pair(user_a, user_b)
        return self.create(user1=first, user2=second, trail=trail)


class Match(models.Model):
    """
    Two accepted friends who both swiped right on the same trail.
    The pair is stored with ``user1`` holding the lower user id.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user1 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='matches_as_first'
    )
    user2 = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='matches_as_second'
    )
    trail = models.ForeignKey(Trail, on_delete=models.CASCADE, related_name='matches')
    created_at = models.DateTimeField(auto_now_add=True)

    objects = MatchQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'matches'
        constraints = [
            models.UniqueConstraint(fields=['user1', 'user2', 'trail'], name='unique_match_per_pair_trail'),
        ]

    def __str__(self):
        return f"Match {self.user1_id} & {self.user2_id} on {self.trail_id}"

    def other_user_id(self, user):
        return self.user2_id if self.user1_id == user.pk else self.user1_id
