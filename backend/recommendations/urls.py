"""
URL configuration for the trail discovery feed.
"""
from django.urls import path

from recommendations.views import TrailCardsView

app_name = 'recommendations'

urlpatterns = [
    path('cards/', TrailCardsView.as_view(), name='trail_cards'),
]
