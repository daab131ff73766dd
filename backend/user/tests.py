from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.test import APITestCase
from .models import UserProfile, default_preferences

User = get_user_model()


class UserProfileTests(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        self.profile = UserProfile.objects.create(user=self.user, name='Hiker')

    def test_default_preferences(self):
        """A new profile starts with the default discovery preferences."""
        self.assertEqual(self.profile.preferences, default_preferences())
        self.assertIsNone(self.profile.get_location())

    def test_update_preferences_merges_keys(self):
        self.profile.update_preferences({'maxDistance': 25, 'tags': ['scenic']})
        self.profile.save()
        self.profile.refresh_from_db()

        self.assertEqual(self.profile.preferences['maxDistance'], 25)
        self.assertEqual(self.profile.preferences['tags'], ['scenic'])
        # Untouched keys survive
        self.assertEqual(self.profile.preferences['difficulty'], ['easy', 'moderate'])

    def test_set_location(self):
        self.profile.set_location(37.7749, -122.4194)
        location = self.profile.get_location()

        self.assertEqual(location.latitude, 37.7749)
        self.assertEqual(location.longitude, -122.4194)

    def test_for_user(self):
        self.assertEqual(UserProfile.objects.for_user(self.user.id), self.profile)
        self.assertIsNone(UserProfile.objects.for_user(self.user.id + 1000))


class AuthAPITests(APITestCase):

    def test_register(self):
        response = self.client.post(reverse('register'), {
            'email': 'New.Hiker@Example.com',
            'password': 'password123',
            'name': 'New Hiker',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertIn('token', response.data)
        self.assertEqual(response.data['user']['email'], 'new.hiker@example.com')
        self.assertEqual(response.data['user']['profile']['name'], 'New Hiker')
        self.assertTrue(UserProfile.objects.filter(user__email='new.hiker@example.com').exists())

    def test_register_duplicate_email(self):
        User.objects.create_user(username='taken@example.com', email='taken@example.com', password='password123')

        response = self.client.post(reverse('register'), {
            'email': 'TAKEN@example.com',
            'password': 'password123',
            'name': 'Someone',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'validation_error')
        self.assertIn('email', response.data['details'])

    def test_register_short_password(self):
        response = self.client.post(reverse('register'), {
            'email': 'short@example.com',
            'password': 'short',
            'name': 'Short',
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('password', response.data['details'])

    def test_login(self):
        user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')

        response = self.client.post(reverse('login'), {'email': 'Hiker@example.com', 'password': 'password123'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['token'], Token.objects.get(user=user).key)

    def test_login_bad_credentials(self):
        User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')

        response = self.client.post(reverse('login'), {'email': 'hiker@example.com', 'password': 'wrong-password'}, format='json')

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data, {'error': 'Invalid email or password', 'kind': 'unauthenticated'})

    def test_token_authenticates_requests(self):
        register = self.client.post(reverse('register'), {
            'email': 'token@example.com',
            'password': 'password123',
            'name': 'Token',
        }, format='json')

        self.client.credentials(HTTP_AUTHORIZATION=f"Token {register.data['token']}")
        response = self.client.get(reverse('me'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['email'], 'token@example.com')


class MeAPITests(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        self.profile = UserProfile.objects.create(user=self.user, name='Hiker')
        self.client.force_authenticate(user=self.user)

    def test_get_me(self):
        response = self.client.get(reverse('me'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['profile']['preferences'], default_preferences())
        self.assertIsNone(response.data['profile']['location'])

    def test_update_preferences_and_location(self):
        response = self.client.put(reverse('me'), {
            'preferences': {'maxDistance': 5, 'elevation': 'low'},
            'location': {'type': 'Point', 'coordinates': [-122.4194, 37.7749]},
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        profile = response.data['profile']
        self.assertEqual(profile['preferences']['maxDistance'], 5)
        self.assertEqual(profile['preferences']['elevation'], 'low')
        self.assertEqual(profile['preferences']['difficulty'], ['easy', 'moderate'])
        self.assertEqual(profile['location'], {'type': 'Point', 'coordinates': [-122.4194, 37.7749]})

    def test_invalid_preferences(self):
        response = self.client.put(reverse('me'), {'preferences': {'elevation': 'sky-high'}}, format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['kind'], 'validation_error')

    def test_invalid_location(self):
        response = self.client.put(reverse('me'), {'location': {'type': 'Point', 'coordinates': [0, 95]}}, format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_without_profile(self):
        self.profile.delete()

        response = self.client.put(reverse('me'), {'preferences': {'maxDistance': 5}}, format='json')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'User not found')
