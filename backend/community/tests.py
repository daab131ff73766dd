"""
Tests for the friendship state machine and its endpoints.
"""
import uuid
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from core.exceptions import Conflict, Forbidden, RequestValidationError, ResourceNotFound
from .models import Friendship, FriendshipStatus
from .services import FriendshipService

User = get_user_model()


def make_user(name):
    email = f'{name}@example.com'
    return User.objects.create_user(username=email, email=email, password='password123')


class FriendshipServiceTests(TestCase):
    """Test cases for FriendshipService"""

    def setUp(self):
        self.alice = make_user('alice')
        self.bob = make_user('bob')
        self.service = FriendshipService()

    def test_invite_creates_pending_request(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')

        self.assertEqual(friendship.user, self.alice)
        self.assertEqual(friendship.friend, self.bob)
        self.assertEqual(friendship.status, FriendshipStatus.PENDING)

    def test_invite_email_is_case_insensitive(self):
        friendship = self.service.invite(self.alice, 'BOB@Example.com')
        self.assertEqual(friendship.friend, self.bob)

    def test_invite_unknown_email(self):
        with self.assertRaises(ResourceNotFound):
            self.service.invite(self.alice, 'nobody@example.com')

    def test_invite_self(self):
        with self.assertRaises(RequestValidationError):
            self.service.invite(self.alice, 'alice@example.com')

    def test_duplicate_invite_in_either_direction(self):
        self.service.invite(self.alice, 'bob@example.com')

        with self.assertRaises(Conflict) as ctx:
            self.service.invite(self.bob, 'alice@example.com')
        self.assertEqual(str(ctx.exception.detail), 'Friend request already sent')

    def test_invite_existing_friend(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')
        self.service.accept(friendship.id, self.bob)

        with self.assertRaises(Conflict) as ctx:
            self.service.invite(self.alice, 'bob@example.com')
        self.assertEqual(str(ctx.exception.detail), 'Already friends with this user')

    def test_one_row_per_pair_even_past_the_lookup(self):
        self.service.invite(self.alice, 'bob@example.com')

        # A reverse request racing the first one
        with patch('community.models.FriendshipQuerySet.between', return_value=None):
            with self.assertRaises(Conflict) as ctx:
                self.service.invite(self.bob, 'alice@example.com')
        self.assertEqual(str(ctx.exception.detail), 'Friend request already sent')
        self.assertEqual(Friendship.objects.count(), 1)

    def test_existence_is_symmetric(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')

        self.assertEqual(Friendship.objects.between(self.alice, self.bob), friendship)
        self.assertEqual(Friendship.objects.between(self.bob, self.alice), friendship)

    def test_only_recipient_can_accept(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')

        with self.assertRaises(Forbidden):
            self.service.accept(friendship.id, self.alice)

        accepted = self.service.accept(friendship.id, self.bob)
        self.assertEqual(accepted.status, FriendshipStatus.ACCEPTED)
        self.assertTrue(Friendship.objects.are_friends(self.alice, self.bob))
        self.assertTrue(Friendship.objects.are_friends(self.bob, self.alice))

    def test_accept_twice(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')
        self.service.accept(friendship.id, self.bob)

        with self.assertRaises(Conflict):
            self.service.accept(friendship.id, self.bob)

    def test_accept_unknown_request(self):
        with self.assertRaises(ResourceNotFound):
            self.service.accept(uuid.uuid4(), self.bob)

    def test_only_recipient_can_decline(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')

        with self.assertRaises(Forbidden):
            self.service.decline(friendship.id, self.alice)
        self.assertTrue(Friendship.objects.filter(pk=friendship.pk).exists())

    def test_decline_deletes_and_allows_new_invite(self):
        friendship = self.service.invite(self.alice, 'bob@example.com')
        self.service.decline(friendship.id, self.bob)

        self.assertFalse(Friendship.objects.filter(pk=friendship.pk).exists())
        again = self.service.invite(self.alice, 'bob@example.com')
        self.assertEqual(again.status, FriendshipStatus.PENDING)

    def test_friends_and_incoming_requests(self):
        carol = make_user('carol')
        accepted = self.service.invite(self.alice, 'bob@example.com')
        self.service.accept(accepted.id, self.bob)
        incoming = self.service.invite(carol, 'alice@example.com')

        self.assertEqual(list(self.service.friends_of(self.alice)), [accepted])
        self.assertEqual(list(self.service.friends_of(self.bob)), [accepted])
        self.assertEqual(list(self.service.incoming_requests(self.alice)), [incoming])
        self.assertEqual(list(self.service.incoming_requests(carol)), [])


class FriendshipAPITests(APITestCase):

    def setUp(self):
        self.alice = make_user('alice')
        self.bob = make_user('bob')

    def invite(self):
        self.client.force_authenticate(user=self.alice)
        return self.client.post(reverse('community:friendship-invite'), {'friendEmail': 'bob@example.com'}, format='json')

    def test_invite(self):
        response = self.invite()

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['userId'], self.alice.pk)
        self.assertEqual(response.data['friendId'], self.bob.pk)
        self.assertEqual(response.data['status'], 'pending')

    def test_invite_unknown_user(self):
        self.client.force_authenticate(user=self.alice)
        response = self.client.post(reverse('community:friendship-invite'), {'friendEmail': 'nobody@example.com'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'User not found', 'kind': 'not_found'})

    def test_accept_flow(self):
        friendship_id = self.invite().data['id']

        self.client.force_authenticate(user=self.bob)
        requests = self.client.get(reverse('community:friendship-requests'))
        self.assertEqual(requests.data['requests'][0]['userId'], self.alice.pk)

        response = self.client.post(reverse('community:friendship-accept'), {'friendshipId': friendship_id}, format='json')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['status'], 'accepted')

        friends = self.client.get(reverse('community:friendship-list'))
        self.assertEqual(friends.data['friends'][0]['friendId'], self.alice.pk)
        self.assertEqual(friends.data['pendingRequests'], [])

    def test_requester_cannot_accept(self):
        friendship_id = self.invite().data['id']

        response = self.client.post(reverse('community:friendship-accept'), {'friendshipId': friendship_id}, format='json')

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data, {'error': 'Not authorized to accept this request', 'kind': 'forbidden'})

    def test_decline(self):
        friendship_id = self.invite().data['id']

        self.client.force_authenticate(user=self.bob)
        response = self.client.post(reverse('community:friendship-decline'), {'friendshipId': friendship_id}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'message': 'Friend request declined'})
        self.assertEqual(Friendship.objects.count(), 0)

    def test_pending_requests_listed_for_recipient_only(self):
        self.invite()

        alice_view = self.client.get(reverse('community:friendship-list'))
        self.assertEqual(alice_view.data['pendingRequests'], [])

        self.client.force_authenticate(user=self.bob)
        bob_view = self.client.get(reverse('community:friendship-list'))
        self.assertEqual(bob_view.data['pendingRequests'][0]['friendId'], self.alice.pk)

    def test_malformed_friendship_id(self):
        self.client.force_authenticate(user=self.bob)
        response = self.client.post(reverse('community:friendship-accept'), {'friendshipId': 'nope'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'validation_error')
