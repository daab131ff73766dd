"""
Tests for the recommendations module.
"""
import unittest
from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from core.exceptions import RequestValidationError
from recommendations.dtos import ScoredTrail, TrailPreferences
from recommendations.ranking import paginate, rank
from recommendations.scoring_service import TrailCardService, TrailScorer
from swipes.models import Direction, Swipe
from trails.models import Trail
from trails.services import ElevationBand, FilterCriteria, GeoPoint
from user.models import UserProfile

User = get_user_model()

HOME = GeoPoint(latitude=37.7749, longitude=-122.4194)

SCENARIO_PREFERENCES = {
    'difficulty': ['easy'],
    'maxDistance': 3,
    'elevation': 'low',
    'tags': ['scenic'],
}


def make_trail(**kwargs):
    values = {'difficulty': 'easy', 'distance': None, 'elevation': None, 'tags': []}
    values.update(kwargs)
    return SimpleNamespace(**values)


class TrailPreferencesTests(unittest.TestCase):

    def test_from_dict(self):
        prefs = TrailPreferences.from_dict(SCENARIO_PREFERENCES)
        self.assertEqual(prefs.difficulty, frozenset({'easy'}))
        self.assertEqual(prefs.max_distance, 3.0)
        self.assertIs(prefs.elevation, ElevationBand.LOW)
        self.assertEqual(prefs.tags, frozenset({'scenic'}))

    def test_missing_and_unknown_keys_are_unset(self):
        prefs = TrailPreferences.from_dict({'elevation': 'any', 'color': 'blue'})
        self.assertEqual(prefs, TrailPreferences())
        self.assertEqual(TrailPreferences.from_dict(None), TrailPreferences())


class TrailScorerTests(unittest.TestCase):
    """Test cases for TrailScorer"""

    def setUp(self):
        self.scorer = TrailScorer(default_max_distance=50)
        self.preferences = TrailPreferences.from_dict(SCENARIO_PREFERENCES)

    def test_matching_trail(self):
        """Difficulty, length, tag, elevation and popularity all contribute"""
        trail = make_trail(difficulty='easy', distance=1, elevation=100, tags=['scenic', 'paved'])
        # 10 + 20 + (30 - 1/3 * 30) + 10 + 15 + 5
        self.assertEqual(self.scorer.score(trail, self.preferences, HOME), 80)

    def test_non_matching_trail(self):
        trail = make_trail(difficulty='hard', distance=10, elevation=2000, tags=[])
        self.assertEqual(self.scorer.score(trail, self.preferences, HOME), 15)

    def test_scoring_is_pure(self):
        trail = make_trail(difficulty='easy', distance=2.2, elevation=300, tags=['scenic'])
        first = self.scorer.score(trail, self.preferences, HOME)
        second = self.scorer.score(trail, self.preferences, HOME)
        self.assertEqual(first, second)

    def test_distance_needs_user_location(self):
        trail = make_trail(difficulty='hard', distance=1)
        self.assertEqual(self.scorer.score(trail, self.preferences, None), 15)

    def test_zero_max_distance_falls_back_to_default(self):
        prefs = TrailPreferences(max_distance=0)
        trail = make_trail(difficulty='hard', distance=25)
        # 10 + (30 - 25/50 * 30) + 5
        self.assertEqual(self.scorer.score(trail, prefs, HOME), 30)

    def test_each_shared_tag_counts_once(self):
        prefs = TrailPreferences(tags=frozenset({'scenic', 'forest', 'coastal'}))
        trail = make_trail(difficulty='hard', tags=['scenic', 'forest', 'scenic'])
        self.assertEqual(self.scorer.score(trail, prefs, None), 10 + 2 * 10 + 5)

    def test_any_elevation_never_matches(self):
        prefs = TrailPreferences.from_dict({'elevation': 'any'})
        trail = make_trail(difficulty='hard', elevation=100)
        self.assertEqual(self.scorer.score(trail, prefs, None), 15)

    def test_rounds_half_up(self):
        prefs = TrailPreferences(max_distance=4, elevation=ElevationBand.LOW)
        trail = make_trail(difficulty='hard', distance=1, elevation=100)
        # 10 + 22.5 + 15 + 5 = 52.5
        self.assertEqual(self.scorer.score(trail, prefs, HOME), 53)

    @override_settings(TRAIL_SCORING_DEFAULT_MAX_DISTANCE_KM=10)
    def test_default_max_distance_from_settings(self):
        scorer = TrailScorer()
        trail = make_trail(difficulty='hard', distance=5)
        # 10 + (30 - 5/10 * 30) + 5
        self.assertEqual(scorer.score(trail, TrailPreferences(), HOME), 30)


class RankingTests(unittest.TestCase):

    def test_rank_descending_and_stable(self):
        items = [
            ScoredTrail(trail='a', score=10),
            ScoredTrail(trail='b', score=30),
            ScoredTrail(trail='c', score=10),
            ScoredTrail(trail='d', score=None),
        ]
        self.assertEqual([item.trail for item in rank(items)], ['b', 'a', 'c', 'd'])

    def test_first_page(self):
        result = paginate(list(range(12)), page=1, limit=5)
        self.assertEqual(result.items, [0, 1, 2, 3, 4])
        self.assertEqual(result.pagination.total, 12)
        self.assertEqual(result.pagination.total_pages, 3)
        self.assertTrue(result.pagination.has_next)
        self.assertFalse(result.pagination.has_prev)

    def test_last_partial_page(self):
        result = paginate(list(range(12)), page=3, limit=5)
        self.assertEqual(result.items, [10, 11])
        self.assertFalse(result.pagination.has_next)
        self.assertTrue(result.pagination.has_prev)

    def test_page_length_matches_remaining_items(self):
        items = list(range(7))
        for limit in range(1, 9):
            for page in range(1, 10):
                result = paginate(items, page, limit)
                expected = min(limit, max(0, len(items) - (page - 1) * limit))
                self.assertEqual(len(result.items), expected)
                self.assertEqual(result.pagination.total_pages, -(-len(items) // limit))

    def test_page_past_the_end_is_empty(self):
        result = paginate(list(range(3)), page=5, limit=2)
        self.assertEqual(result.items, [])
        self.assertEqual(result.pagination.total_pages, 2)

    def test_empty_input(self):
        result = paginate([], page=1, limit=20)
        self.assertEqual(result.items, [])
        self.assertEqual(result.pagination.total_pages, 0)
        self.assertFalse(result.pagination.has_next)

    def test_invalid_page_or_limit(self):
        with self.assertRaises(RequestValidationError):
            paginate([1, 2], page=0, limit=5)
        with self.assertRaises(RequestValidationError):
            paginate([1, 2], page=1, limit=0)


class TrailCardServiceTestCase(TestCase):
    """Test cases for the trail card pipeline"""

    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        self.profile = UserProfile.objects.create(
            user=self.user,
            preferences=SCENARIO_PREFERENCES,
            latitude=HOME.latitude,
            longitude=HOME.longitude,
        )
        self.good = Trail.objects.create(
            name='Lands End', difficulty='easy', distance=1, elevation=100,
            tags=['scenic', 'paved'], latitude=37.7880, longitude=-122.5050,
        )
        self.poor = Trail.objects.create(
            name='Mission Peak', difficulty='hard', distance=10, elevation=2000,
            tags=[], latitude=37.5124, longitude=-121.8806,
        )
        self.service = TrailCardService()

    def test_ranks_better_match_first(self):
        result = self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)

        self.assertEqual([item.trail for item in result.items], [self.good, self.poor])
        self.assertEqual([item.score for item in result.items], [80, 15])

    def test_query_filters_apply(self):
        result = self.service.get_cards(self.user, FilterCriteria(difficulty=frozenset({'hard'})), page=1, limit=20)
        self.assertEqual([item.trail for item in result.items], [self.poor])

    def test_left_swipe_excludes_trail(self):
        Swipe.objects.create(user=self.user, trail=self.good, direction=Direction.LEFT)

        result = self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)
        self.assertEqual([item.trail for item in result.items], [self.poor])

    def test_right_and_up_swipes_keep_trail(self):
        Swipe.objects.create(user=self.user, trail=self.good, direction=Direction.RIGHT)
        Swipe.objects.create(user=self.user, trail=self.poor, direction=Direction.UP)

        result = self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)
        self.assertEqual(len(result.items), 2)

    def test_other_users_swipes_do_not_matter(self):
        other = User.objects.create_user(username='other@example.com', email='other@example.com', password='password123')
        Swipe.objects.create(user=other, trail=self.good, direction=Direction.LEFT)

        result = self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)
        self.assertEqual(len(result.items), 2)

    def test_missing_location(self):
        self.profile.latitude = None
        self.profile.longitude = None
        self.profile.save()

        with self.assertRaises(RequestValidationError) as ctx:
            self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)
        self.assertEqual(str(ctx.exception.detail), 'User location not set. Please set your location to discover trails.')

    def test_missing_profile(self):
        self.profile.delete()
        with self.assertRaises(RequestValidationError):
            self.service.get_cards(self.user, FilterCriteria(), page=1, limit=20)


class TrailCardsAPITests(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        UserProfile.objects.create(user=self.user, latitude=HOME.latitude, longitude=HOME.longitude)
        self.client.force_authenticate(user=self.user)

        for index in range(12):
            Trail.objects.create(
                name=f'Trail {index:02d}',
                difficulty='easy' if index % 2 else 'moderate',
                distance=1 + index,
                tags=['scenic'] if index % 3 == 0 else ['forest'],
                latitude=37.77 + index * 0.001,
                longitude=-122.42,
            )
        self.url = reverse('recommendations:trail_cards')

    def test_pagination_payload(self):
        response = self.client.get(self.url, {'page': 1, 'limit': 5})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['trails']), 5)
        self.assertEqual(response.data['pagination'], {
            'page': 1,
            'limit': 5,
            'total': 12,
            'totalPages': 3,
            'hasNext': True,
            'hasPrev': False,
        })

    def test_card_contains_trail_and_score(self):
        response = self.client.get(self.url, {'limit': 1})

        card = response.data['trails'][0]
        self.assertIn('score', card)
        self.assertIn('photos', card)
        self.assertEqual(card['location']['type'], 'Point')

    def test_default_limit(self):
        response = self.client.get(self.url)
        self.assertEqual(response.data['pagination']['limit'], 20)
        self.assertEqual(len(response.data['trails']), 12)

    def test_comma_separated_filters(self):
        response = self.client.get(self.url, {'difficulty': 'easy', 'tags': 'scenic,coastal'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        names = {card['name'] for card in response.data['trails']}
        # Odd index and divisible by three
        self.assertEqual(names, {'Trail 03', 'Trail 09'})

    def test_max_distance_filter(self):
        response = self.client.get(self.url, {'maxDistance': 3})
        self.assertEqual(response.data['pagination']['total'], 3)

    def test_zero_max_distance_is_no_limit(self):
        response = self.client.get(self.url, {'maxDistance': 0})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['pagination']['total'], 12)

    def test_swipe_left_then_cards_exclude_trail(self):
        trail = Trail.objects.get(name='Trail 00')
        Swipe.objects.create(user=self.user, trail=trail, direction=Direction.LEFT)

        response = self.client.get(self.url)
        self.assertNotIn(str(trail.id), [card['id'] for card in response.data['trails']])

    def test_invalid_params(self):
        for params in ({'page': 0}, {'limit': 0}, {'elevation': 'steep'}, {'difficulty': 'extreme'}):
            response = self.client.get(self.url, params)
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, params)
            self.assertEqual(response.data['kind'], 'validation_error')

    def test_missing_location_is_400(self):
        UserProfile.objects.filter(user=self.user).update(latitude=None, longitude=None)

        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'User location not set. Please set your location to discover trails.')
