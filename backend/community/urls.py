"""
URL routing for friendship endpoints.
"""
from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import FriendshipViewSet

router = SimpleRouter()
router.register(r'', FriendshipViewSet, basename='friendship')

app_name = 'community'

urlpatterns = [
    path('', include(router.urls)),
]
