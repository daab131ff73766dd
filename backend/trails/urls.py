"""
URL routing for trails app.
"""
from django.urls import path
from .views import SavedTrailsView, TrailDetailView

app_name = 'trails'

urlpatterns = [
    path('saved/', SavedTrailsView.as_view(), name='saved'),
    path('<str:trail_id>/', TrailDetailView.as_view(), name='detail'),
]
