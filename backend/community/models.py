"""
Friendship graph between users. A friendship gates match eligibility.
"""
import uuid
from typing import Optional

from django.conf import settings
from django.db import models
from django.db.models import Q
from django.db.models.functions import Greatest, Least


class FriendshipStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'


class FriendshipQuerySet(models.QuerySet):

    def _pair(self, user_a, user_b) -> 'FriendshipQuerySet':
        return self.filter(Q(user=user_a, friend=user_b) | Q(user=user_b, friend=user_a))

    def between(self, user_a, user_b) -> Optional['Friendship']:
        """The friendship between two users, whichever of them sent the request."""
        return self._pair(user_a, user_b).first()

    def are_friends(self, user_a, user_b) -> bool:
        return self._pair(user_a, user_b).filter(status=FriendshipStatus.ACCEPTED).exists()

    def accepted_for(self, user) -> 'FriendshipQuerySet':
        return self.filter(Q(user=user) | Q(friend=user), status=FriendshipStatus.ACCEPTED)

    def incoming_pending(self, user) -> 'FriendshipQuerySet':
        return self.filter(friend=user, status=FriendshipStatus.PENDING)

    def find_by_id(self, friendship_id) -> Optional['Friendship']:
        return self.filter(pk=friendship_id).first()


class Friendship(models.Model):
    """
    A friend request from ``user`` (requester) to ``friend`` (recipient).
    Only the recipient may accept or decline it.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_friend_requests'
    )
    friend = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_friend_requests'
    )
    status = models.CharField(
        max_length=10,
        choices=FriendshipStatus.choices,
        default=FriendshipStatus.PENDING
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = FriendshipQuerySet.as_manager()

    class Meta:
        ordering = ['-created_at']
        constraints = [
            # One row per unordered pair, whoever sent the request
            models.UniqueConstraint(Least('user', 'friend'), Greatest('user', 'friend'), name='unique_friendship_per_pair'),
        ]

    def __str__(self):
        return f"{self.user_id} -> {self.friend_id} ({self.status})"

    def other_user_id(self, user):
        return self.friend_id if self.user_id == user.pk else self.user_id
