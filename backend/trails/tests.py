import unittest
from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from swipes.models import Direction, Swipe
from .models import Trail, TrailPhoto
from .sample_trails import SAMPLE_TRAILS
from .serializers import GeoPointField
from .services import ElevationBand, FilterCriteria, GeoPoint, TrailFilter, distance_km, filter_trails

User = get_user_model()

SAN_FRANCISCO = GeoPoint(latitude=37.7749, longitude=-122.4194)
LOS_ANGELES = GeoPoint(latitude=34.0522, longitude=-118.2437)


def make_trail(**kwargs):
    """In-memory stand-in for a Trail row."""
    values = {
        'name': 'Trail',
        'distance': None,
        'elevation': None,
        'difficulty': 'easy',
        'tags': [],
        'latitude': None,
        'longitude': None,
    }
    values.update(kwargs)
    return SimpleNamespace(**values)


class DistanceTests(unittest.TestCase):

    def test_same_point_is_zero(self):
        self.assertEqual(distance_km(37.7749, -122.4194, 37.7749, -122.4194), 0)

    def test_san_francisco_to_los_angeles(self):
        """Test the great-circle distance between two known cities"""
        away = distance_km(SAN_FRANCISCO.latitude, SAN_FRANCISCO.longitude, LOS_ANGELES.latitude, LOS_ANGELES.longitude)
        self.assertAlmostEqual(away, 559, delta=5)

    def test_symmetric(self):
        there = distance_km(37.0, -122.0, 38.0, -121.0)
        back = distance_km(38.0, -121.0, 37.0, -122.0)
        self.assertAlmostEqual(there, back)


class ElevationBandTests(unittest.TestCase):

    def test_band_boundaries(self):
        self.assertTrue(ElevationBand.LOW.contains(0))
        self.assertTrue(ElevationBand.LOW.contains(499))
        self.assertFalse(ElevationBand.LOW.contains(500))
        self.assertTrue(ElevationBand.MEDIUM.contains(500))
        self.assertTrue(ElevationBand.MEDIUM.contains(1499))
        self.assertFalse(ElevationBand.MEDIUM.contains(1500))
        self.assertTrue(ElevationBand.HIGH.contains(1500))

    def test_parse_any_means_no_band(self):
        self.assertIsNone(ElevationBand.parse('any'))
        self.assertIsNone(ElevationBand.parse(None))
        self.assertIsNone(ElevationBand.parse('steep'))
        self.assertIs(ElevationBand.parse('HIGH'), ElevationBand.HIGH)


class TrailFilterTests(unittest.TestCase):

    def test_no_criteria_keeps_everything_in_order(self):
        trails = [make_trail(name='a'), make_trail(name='b'), make_trail(name='c')]
        kept = TrailFilter(FilterCriteria()).apply(trails, SAN_FRANCISCO)
        self.assertEqual([t.name for t in kept], ['a', 'b', 'c'])

    def test_stored_distance_excludes_even_when_nearby(self):
        long_trail = make_trail(distance=20, latitude=SAN_FRANCISCO.latitude, longitude=SAN_FRANCISCO.longitude)
        kept = TrailFilter(FilterCriteria(max_distance=10)).apply([long_trail], SAN_FRANCISCO)
        self.assertEqual(kept, [])

    def test_geodesic_distance_excludes_even_when_short(self):
        far_trail = make_trail(distance=2, latitude=LOS_ANGELES.latitude, longitude=LOS_ANGELES.longitude)
        kept = TrailFilter(FilterCriteria(max_distance=10)).apply([far_trail], SAN_FRANCISCO)
        self.assertEqual(kept, [])

    def test_short_and_nearby_is_kept(self):
        trail = make_trail(distance=2, latitude=37.78, longitude=-122.42)
        self.assertEqual(TrailFilter(FilterCriteria(max_distance=10)).apply([trail], SAN_FRANCISCO), [trail])

    def test_missing_location_skips_geodesic_check(self):
        trail = make_trail(distance=2, latitude=LOS_ANGELES.latitude, longitude=LOS_ANGELES.longitude)
        self.assertEqual(TrailFilter(FilterCriteria(max_distance=10)).apply([trail], None), [trail])

    def test_zero_max_distance_means_no_limit(self):
        far_and_long = make_trail(distance=40, latitude=LOS_ANGELES.latitude, longitude=LOS_ANGELES.longitude)
        kept = TrailFilter(FilterCriteria(max_distance=0)).apply([far_and_long], SAN_FRANCISCO)
        self.assertEqual(kept, [far_and_long])

    def test_difficulty_and_tags(self):
        easy_scenic = make_trail(name='easy', difficulty='easy', tags=['scenic'])
        hard_scenic = make_trail(name='hard', difficulty='hard', tags=['scenic'])
        easy_paved = make_trail(name='paved', difficulty='easy', tags=['paved'])

        criteria = FilterCriteria(difficulty=frozenset({'easy'}), tags=frozenset({'scenic', 'forest'}))
        kept = TrailFilter(criteria).apply([easy_scenic, hard_scenic, easy_paved], None)
        self.assertEqual([t.name for t in kept], ['easy'])

    def test_empty_sets_mean_no_constraint(self):
        trail = make_trail(difficulty='hard', tags=[])
        criteria = FilterCriteria(difficulty=frozenset(), tags=frozenset())
        self.assertEqual(TrailFilter(criteria).apply([trail], None), [trail])

    def test_elevation_band(self):
        low = make_trail(name='low', elevation=100)
        high = make_trail(name='high', elevation=2000)
        unknown = make_trail(name='unknown', elevation=None)

        kept = TrailFilter(FilterCriteria(elevation=ElevationBand.LOW)).apply([low, high, unknown], None)
        self.assertEqual([t.name for t in kept], ['low', 'unknown'])

    def test_filter_trails_helper(self):
        trails = [make_trail(name='easy'), make_trail(name='hard', difficulty='hard')]
        kept = filter_trails(trails, FilterCriteria(difficulty=frozenset({'hard'})), None)
        self.assertEqual([t.name for t in kept], ['hard'])


class GeoPointFieldTests(unittest.TestCase):

    def test_reads_geojson(self):
        field = GeoPointField()
        value = field.to_internal_value({'type': 'Point', 'coordinates': [-122.4194, 37.7749]})
        self.assertEqual(value, {'latitude': 37.7749, 'longitude': -122.4194})

    def test_rejects_out_of_range(self):
        from rest_framework.exceptions import ValidationError
        field = GeoPointField()
        with self.assertRaises(ValidationError):
            field.to_internal_value({'type': 'Point', 'coordinates': [-200, 37.7]})

    def test_geo_point_round_trip_shape(self):
        point = GeoPoint.from_geojson({'type': 'Point', 'coordinates': [-122.4194, 37.7749]})
        self.assertEqual(point, SAN_FRANCISCO)
        self.assertEqual(point.to_geojson(), {'type': 'Point', 'coordinates': [-122.4194, 37.7749]})

    def test_rejects_non_numeric_coordinates(self):
        from rest_framework.exceptions import ValidationError
        with self.assertRaises(ValidationError):
            GeoPointField().to_internal_value({'type': 'Point', 'coordinates': ['east', 37.7]})

    def test_writes_geojson_for_instance(self):
        field = GeoPointField()
        self.assertEqual(field.to_representation(make_trail(latitude=37.7749, longitude=-122.4194)), SAN_FRANCISCO.to_geojson())
        self.assertIsNone(field.to_representation(make_trail()))


class TrailModelTests(TestCase):

    def test_invalid_coordinates_rejected(self):
        with self.assertRaises(ValueError):
            Trail.objects.create(name='Bad', difficulty='easy', latitude=120, longitude=0)

    def test_find_by_id_handles_malformed_ids(self):
        trail = Trail.objects.create(name='Lands End', difficulty='easy')
        self.assertEqual(Trail.objects.find_by_id(str(trail.id)), trail)
        self.assertIsNone(Trail.objects.find_by_id('not-a-uuid'))

    def test_seed_command_is_idempotent(self):
        call_command('seed_trails', verbosity=0)
        call_command('seed_trails', verbosity=0)
        self.assertEqual(Trail.objects.count(), len(SAMPLE_TRAILS))

    def test_seed_command_clear(self):
        Trail.objects.create(name='Custom trail', difficulty='hard')
        call_command('seed_trails', '--clear', verbosity=0)
        self.assertFalse(Trail.objects.filter(name='Custom trail').exists())
        self.assertEqual(Trail.objects.count(), len(SAMPLE_TRAILS))


class TrailAPITests(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        self.client.force_authenticate(user=self.user)

        self.trail = Trail.objects.create(
            name='Mount Tamalpais',
            difficulty='moderate',
            distance=7.5,
            elevation=784,
            tags=['views'],
            latitude=37.9235,
            longitude=-122.5965,
        )
        TrailPhoto.objects.create(trail=self.trail, url='https://example.com/tam.jpg', alt='Summit', is_primary=True)

    def test_trail_detail(self):
        url = reverse('trails:detail', args=[self.trail.id])
        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['name'], 'Mount Tamalpais')
        self.assertEqual(response.data['location'], {'type': 'Point', 'coordinates': [-122.5965, 37.9235]})
        self.assertEqual(len(response.data['photos']), 1)
        self.assertTrue(response.data['photos'][0]['isPrimary'])

    def test_trail_detail_not_found(self):
        response = self.client.get(reverse('trails:detail', args=['missing']))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Trail not found', 'kind': 'not_found'})

    def test_saved_trails_lists_right_swipes_only(self):
        other = Trail.objects.create(name='Lands End', difficulty='easy')
        Swipe.objects.create(user=self.user, trail=self.trail, direction=Direction.RIGHT)
        Swipe.objects.create(user=self.user, trail=other, direction=Direction.LEFT)

        response = self.client.get(reverse('trails:saved'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([t['name'] for t in response.data['trails']], ['Mount Tamalpais'])

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.get(reverse('trails:saved'))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data['kind'], 'unauthenticated')
