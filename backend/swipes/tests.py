from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from community.models import Friendship, FriendshipStatus
from core.exceptions import Conflict, RequestValidationError, ResourceNotFound
from trails.models import Trail
from .models import Direction, Match, Swipe
from .services import MatchDetector, SwipeRecorder

User = get_user_model()


def make_user(name):
    email = f'{name}@example.com'
    return User.objects.create_user(username=email, email=email, password='password123')


def befriend(user_a, user_b):
    return Friendship.objects.create(user=user_a, friend=user_b, status=FriendshipStatus.ACCEPTED)


class SwipeRecorderTests(TestCase):
    """Test cases for SwipeRecorder"""

    def setUp(self):
        self.alice = make_user('alice')
        self.bob = make_user('bob')
        self.trail = Trail.objects.create(name='Lands End', difficulty='easy')
        self.recorder = SwipeRecorder()

    def test_record_swipe(self):
        outcome = self.recorder.record(self.alice, str(self.trail.id), 'left')

        self.assertEqual(outcome.swipe.direction, Direction.LEFT)
        self.assertIsNone(outcome.match)
        self.assertTrue(Swipe.objects.filter(user=self.alice, trail=self.trail).exists())

    def test_invalid_direction(self):
        with self.assertRaises(RequestValidationError) as ctx:
            self.recorder.record(self.alice, str(self.trail.id), 'down')
        self.assertEqual(str(ctx.exception.detail), 'Direction must be left, right, or up')

    def test_invalid_direction_wins_over_missing_trail(self):
        with self.assertRaises(RequestValidationError):
            self.recorder.record(self.alice, 'missing', 'sideways')

    def test_missing_trail(self):
        with self.assertRaises(ResourceNotFound):
            self.recorder.record(self.alice, '5b1f3c1e-0000-4000-8000-000000000000', 'right')
        with self.assertRaises(ResourceNotFound):
            self.recorder.record(self.alice, 'not-a-uuid', 'right')

    def test_second_swipe_conflicts_regardless_of_direction(self):
        self.recorder.record(self.alice, self.trail.id, 'right')

        for direction in ('left', 'right', 'up'):
            with self.assertRaises(Conflict):
                self.recorder.record(self.alice, self.trail.id, direction)
        self.assertEqual(Swipe.objects.filter(user=self.alice).count(), 1)

    def test_unique_constraint_backs_the_duplicate_check(self):
        self.recorder.record(self.alice, self.trail.id, 'right')

        # A concurrent swipe that got past the existence check
        with patch('swipes.models.SwipeQuerySet.exists_for', return_value=False):
            with self.assertRaises(Conflict) as ctx:
                self.recorder.record(self.alice, self.trail.id, 'left')
        self.assertEqual(str(ctx.exception.detail), 'Already swiped on this trail')
        self.assertEqual(Swipe.objects.filter(user=self.alice).count(), 1)

    def test_swipes_are_per_user(self):
        self.recorder.record(self.alice, self.trail.id, 'right')
        outcome = self.recorder.record(self.bob, self.trail.id, 'left')
        self.assertEqual(outcome.swipe.user, self.bob)

    def test_clear(self):
        other = Trail.objects.create(name='Mount Davidson', difficulty='easy')
        self.recorder.record(self.alice, self.trail.id, 'left')
        self.recorder.record(self.alice, other.id, 'up')
        self.recorder.record(self.bob, self.trail.id, 'right')

        cleared, remaining = self.recorder.clear(self.alice)

        self.assertEqual(cleared, 2)
        self.assertEqual(remaining, 1)
        # Cleared trails can be swiped again
        self.recorder.record(self.alice, self.trail.id, 'right')


class MatchDetectorTests(TestCase):
    """Test cases for match detection between friends"""

    def setUp(self):
        self.alice = make_user('alice')
        self.bob = make_user('bob')
        self.carol = make_user('carol')
        self.trail = Trail.objects.create(name='Lands End', difficulty='easy')
        self.recorder = SwipeRecorder()

    def test_friends_both_swiping_right_match(self):
        befriend(self.alice, self.bob)

        first = self.recorder.record(self.alice, self.trail.id, 'right')
        second = self.recorder.record(self.bob, self.trail.id, 'right')

        self.assertIsNone(first.match)
        self.assertIsNotNone(second.match)
        self.assertEqual(Match.objects.count(), 1)
        match = Match.objects.get()
        self.assertEqual((match.user1, match.user2), (self.alice, self.bob))
        self.assertEqual(match.trail, self.trail)

    def test_match_regardless_of_swipe_order(self):
        befriend(self.alice, self.bob)

        self.recorder.record(self.bob, self.trail.id, 'right')
        outcome = self.recorder.record(self.alice, self.trail.id, 'right')

        self.assertIsNotNone(outcome.match)
        self.assertEqual(Match.objects.count(), 1)
        self.assertEqual(Match.objects.get().user1, self.alice)

    def test_no_match_without_friendship(self):
        self.recorder.record(self.alice, self.trail.id, 'right')
        outcome = self.recorder.record(self.bob, self.trail.id, 'right')

        self.assertIsNone(outcome.match)
        self.assertEqual(Match.objects.count(), 0)

    def test_no_match_with_pending_request(self):
        Friendship.objects.create(user=self.alice, friend=self.bob)

        self.recorder.record(self.alice, self.trail.id, 'right')
        self.recorder.record(self.bob, self.trail.id, 'right')

        self.assertEqual(Match.objects.count(), 0)

    def test_no_match_on_left_or_up(self):
        befriend(self.alice, self.bob)
        befriend(self.alice, self.carol)

        self.recorder.record(self.bob, self.trail.id, 'left')
        self.recorder.record(self.carol, self.trail.id, 'up')
        outcome = self.recorder.record(self.alice, self.trail.id, 'right')

        self.assertIsNone(outcome.match)
        self.assertEqual(Match.objects.count(), 0)

    def test_up_swipe_never_triggers_detection(self):
        befriend(self.alice, self.bob)

        self.recorder.record(self.bob, self.trail.id, 'right')
        outcome = self.recorder.record(self.alice, self.trail.id, 'up')

        self.assertIsNone(outcome.match)

    def test_earliest_friend_swipe_wins(self):
        befriend(self.alice, self.bob)
        befriend(self.carol, self.alice)

        self.recorder.record(self.bob, self.trail.id, 'right')
        self.recorder.record(self.carol, self.trail.id, 'right')
        outcome = self.recorder.record(self.alice, self.trail.id, 'right')

        self.assertEqual(outcome.match.other_user_id(self.alice), self.bob.pk)
        self.assertEqual(Match.objects.count(), 1)

    def test_friend_with_existing_match_is_skipped(self):
        befriend(self.alice, self.bob)
        befriend(self.alice, self.carol)
        Match.objects.create_for_pair(self.alice, self.bob, self.trail)

        self.recorder.record(self.bob, self.trail.id, 'right')
        self.recorder.record(self.carol, self.trail.id, 'right')
        outcome = self.recorder.record(self.alice, self.trail.id, 'right')

        self.assertEqual(outcome.match.other_user_id(self.alice), self.carol.pk)
        self.assertEqual(Match.objects.between(self.alice, self.bob, self.trail).user1, self.alice)
        self.assertEqual(Match.objects.count(), 2)

    def test_detect_returns_none_when_every_friend_matched(self):
        befriend(self.alice, self.bob)
        Match.objects.create_for_pair(self.bob, self.alice, self.trail)

        Swipe.objects.create(user=self.bob, trail=self.trail, direction=Direction.RIGHT)
        swipe = Swipe.objects.create(user=self.alice, trail=self.trail, direction=Direction.RIGHT)

        self.assertIsNone(MatchDetector().detect(swipe))
        self.assertEqual(Match.objects.count(), 1)

    def test_match_created_concurrently_is_skipped(self):
        befriend(self.alice, self.bob)
        Match.objects.create_for_pair(self.alice, self.bob, self.trail)
        self.recorder.record(self.bob, self.trail.id, 'right')

        with patch('swipes.models.MatchQuerySet.between', return_value=None):
            with self.assertLogs('swipes.services', level='INFO'):
                outcome = self.recorder.record(self.alice, self.trail.id, 'right')

        self.assertIsNone(outcome.match)
        self.assertEqual(Match.objects.count(), 1)
        self.assertTrue(Swipe.objects.filter(user=self.alice, trail=self.trail).exists())

    def test_matches_for_user(self):
        befriend(self.alice, self.bob)
        match = Match.objects.create_for_pair(self.bob, self.alice, self.trail)

        self.assertEqual(list(Match.objects.for_user(self.alice)), [match])
        self.assertEqual(list(Match.objects.for_user(self.bob)), [match])
        self.assertEqual(list(Match.objects.for_user(self.carol)), [])


class SwipeAPITests(APITestCase):

    def setUp(self):
        self.alice = make_user('alice')
        self.bob = make_user('bob')
        befriend(self.alice, self.bob)
        self.trail = Trail.objects.create(name='Lands End', difficulty='easy')
        self.url = reverse('swipes:swipes')

    def test_swipe_created(self):
        self.client.force_authenticate(user=self.alice)
        response = self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'left'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['trailId'], str(self.trail.id))
        self.assertEqual(response.data['direction'], 'left')
        self.assertNotIn('match', response.data)

    def test_swipe_with_match(self):
        self.client.force_authenticate(user=self.bob)
        self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'right'}, format='json')

        self.client.force_authenticate(user=self.alice)
        response = self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'right'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['match']['trailId'], str(self.trail.id))

        matches = self.client.get(reverse('swipes:matches'))
        self.assertEqual(len(matches.data['matches']), 1)
        self.assertEqual(matches.data['matches'][0]['otherUserId'], self.bob.pk)

    def test_duplicate_swipe(self):
        self.client.force_authenticate(user=self.alice)
        self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'right'}, format='json')
        response = self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'up'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': 'Already swiped on this trail', 'kind': 'conflict'})

    def test_unknown_trail(self):
        self.client.force_authenticate(user=self.alice)
        response = self.client.post(self.url, {'trailId': 'missing', 'direction': 'right'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'Trail not found')

    def test_bad_direction(self):
        self.client.force_authenticate(user=self.alice)
        response = self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'down'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'validation_error')

    def test_missing_fields(self):
        self.client.force_authenticate(user=self.alice)
        response = self.client.post(self.url, {}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid input data')
        self.assertIn('trailId', response.data['details'])

    def test_history_and_clear(self):
        self.client.force_authenticate(user=self.alice)
        self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'up'}, format='json')

        history = self.client.get(self.url)
        self.assertEqual([s['direction'] for s in history.data['swipes']], ['up'])

        response = self.client.post(reverse('swipes:clear_swipes'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['cleared'], 1)
        self.assertEqual(self.client.get(self.url).data['swipes'], [])

    def test_requires_authentication(self):
        response = self.client.post(self.url, {'trailId': str(self.trail.id), 'direction': 'left'}, format='json')
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
