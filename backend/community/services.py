"""
Domain service for the friendship state machine.

    (none) --invite--> pending --accept--> accepted
    pending/accepted --decline--> (row deleted)
"""
import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from core.exceptions import Conflict, Forbidden, RequestValidationError, ResourceNotFound
from .models import Friendship, FriendshipStatus

logger = logging.getLogger(__name__)

User = get_user_model()


class FriendshipService:
    """
    Sends, accepts and declines friend requests, and lists a user's friends.
    """

    def invite(self, requester, friend_email: str) -> Friendship:
        """
        Creates a pending request from ``requester`` to the user owning ``friend_email``.

        Raises:
            ResourceNotFound: no user with that email
            RequestValidationError: the requester invited themselves
            Conflict: a friendship already exists in either direction
        """
        friend = User.objects.filter(email__iexact=friend_email.strip()).first()
        if friend is None:
            raise ResourceNotFound('User not found')

        if friend.pk == requester.pk:
            raise RequestValidationError('Cannot send friend request to yourself')

        existing = Friendship.objects.between(requester, friend)
        if existing is not None:
            if existing.status == FriendshipStatus.ACCEPTED:
                raise Conflict('Already friends with this user')
            raise Conflict('Friend request already sent')

        try:
            with transaction.atomic():
                friendship = Friendship.objects.create(user=requester, friend=friend)
        except IntegrityError:
            raise Conflict('Friend request already sent')

        logger.info(f"Friend request {friendship.id} sent from user {requester.pk} to user {friend.pk}")
        return friendship

    @transaction.atomic
    def accept(self, friendship_id, actor) -> Friendship:
        friendship = Friendship.objects.select_for_update().find_by_id(friendship_id)
        if friendship is None:
            raise ResourceNotFound('Friend request not found')

        if friendship.friend_id != actor.pk:
            raise Forbidden('Not authorized to accept this request')

        if friendship.status == FriendshipStatus.ACCEPTED:
            raise Conflict('Friend request already accepted')

        friendship.status = FriendshipStatus.ACCEPTED
        friendship.save(update_fields=['status', 'updated_at'])

        logger.info(f"Friend request {friendship.id} accepted by user {actor.pk}")
        return friendship

    @transaction.atomic
    def decline(self, friendship_id, actor) -> None:
        """Deletes the request; the pair may invite each other again afterwards."""
        friendship = Friendship.objects.select_for_update().find_by_id(friendship_id)
        if friendship is None:
            raise ResourceNotFound('Friend request not found')

        if friendship.friend_id != actor.pk:
            raise Forbidden('Not authorized to decline this request')

        friendship.delete()
        logger.info(f"Friend request {friendship_id} declined by user {actor.pk}")

    def friends_of(self, user):
        return Friendship.objects.accepted_for(user)

    def incoming_requests(self, user):
        return Friendship.objects.incoming_pending(user)
