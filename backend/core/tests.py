from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

User = get_user_model()


class HealthCheckTests(APITestCase):

    def test_health_is_public(self):
        response = self.client.get(reverse('health'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {'status': 'OK'})


class ExceptionHandlerTests(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='hiker@example.com', email='hiker@example.com', password='password123')
        self.client.force_authenticate(user=self.user)

    def test_unhandled_error_is_generic_500(self):
        with patch('swipes.views.SwipeRecorder.swipes_for', side_effect=RuntimeError('database exploded')):
            with self.assertLogs('core.exceptions', level='ERROR'):
                response = self.client.get(reverse('swipes:swipes'))

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {'error': 'Internal server error', 'kind': 'internal_failure'})

    def test_method_not_allowed_keeps_error_shape(self):
        response = self.client.delete(reverse('swipes:matches'))

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)
        self.assertIn('error', response.data)
        self.assertIn('kind', response.data)
