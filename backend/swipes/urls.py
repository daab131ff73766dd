from django.urls import path

from .views import ClearSwipesView, MatchListView, SwipeView

app_name = 'swipes'

urlpatterns = [
    path('swipes/', SwipeView.as_view(), name='swipes'),
    path('swipes/clear/', ClearSwipesView.as_view(), name='clear_swipes'),
    path('matches/', MatchListView.as_view(), name='matches'),
]
