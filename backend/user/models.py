import uuid
from typing import Optional

from django.conf import settings
from django.db import models

from trails.services import GeoPoint


def default_preferences():
    return {
        'difficulty': ['easy', 'moderate'],
        'maxDistance': 10,
        'elevation': 'any',
        'tags': [],
    }


class UserProfileQuerySet(models.QuerySet):

    def for_user(self, user_id) -> Optional['UserProfile']:
        return self.filter(user_id=user_id).first()


class UserProfile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="profile"
    )
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150, blank=True, default="")
    # Stored in the client's shape: difficulty, maxDistance, elevation, tags
    preferences = models.JSONField(default=default_preferences, blank=True)
    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserProfileQuerySet.as_manager()

    def __str__(self):
        return f"Profile of {self.user.email or self.user.username}"

    def get_location(self) -> Optional[GeoPoint]:
        if self.latitude is None or self.longitude is None:
            return None
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)

    def update_preferences(self, changes: dict) -> None:
        """Merges ``changes`` into the stored preferences key by key."""
        merged = dict(self.preferences or {})
        merged.update(changes)
        self.preferences = merged

    def set_location(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
