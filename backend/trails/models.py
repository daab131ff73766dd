import uuid
from typing import Optional

from django.core.validators import MinValueValidator
from django.db import models


class Difficulty(models.TextChoices):
    EASY = 'easy', 'Easy'
    MODERATE = 'moderate', 'Moderate'
    HARD = 'hard', 'Hard'


class TrailQuerySet(models.QuerySet):

    def find_by_id(self, trail_id) -> Optional['Trail']:
        """
        Looks a trail up by id. Malformed ids are treated like missing trails.
        """
        try:
            pk = trail_id if isinstance(trail_id, uuid.UUID) else uuid.UUID(str(trail_id))
        except (TypeError, ValueError):
            return None
        return self.filter(pk=pk).first()

    def excluding_swiped(self, user, direction: str) -> 'TrailQuerySet':
        """Trails the user has not swiped on in the given direction."""
        from swipes.models import Swipe

        swiped = Swipe.objects.filter(user=user, direction=direction).values('trail_id')
        return self.exclude(pk__in=swiped)

    def swiped_by(self, user, direction: str) -> 'TrailQuerySet':
        from swipes.models import Swipe

        swiped = Swipe.objects.filter(user=user, direction=direction).values('trail_id')
        return self.filter(pk__in=swiped)


class Trail(models.Model):
    """
    Reference entity for a hiking trail. Seeded by an import process and
    read-only to the discovery and swipe logic.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, help_text="The official name of the trail")
    description = models.TextField(blank=True, default="")

    # Length of the trail itself, not the distance from the user
    distance = models.FloatField(
        null=True,
        blank=True,
        validators=[MinValueValidator(0)],
        help_text="Trail length in kilometers"
    )
    elevation = models.FloatField(
        null=True,
        blank=True,
        help_text="Elevation gain in meters"
    )
    difficulty = models.CharField(max_length=20, choices=Difficulty.choices)
    tags = models.JSONField(default=list, blank=True)

    latitude = models.FloatField(null=True, blank=True)
    longitude = models.FloatField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = TrailQuerySet.as_manager()

    class Meta:
        ordering = ['created_at', 'name']
        indexes = [
            models.Index(fields=['difficulty'], name='trails_difficulty_idx'),
        ]

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if self.latitude is not None and self.longitude is not None:
            if not (-90 <= self.latitude <= 90 and -180 <= self.longitude <= 180):
                raise ValueError("Invalid coordinates: latitude must be -90 to 90, longitude must be -180 to 180")
        super().save(*args, **kwargs)


class TrailPhoto(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    trail = models.ForeignKey(Trail, on_delete=models.CASCADE, related_name='photos')
    url = models.URLField(max_length=500)
    alt = models.CharField(max_length=255, blank=True, default="")
    is_primary = models.BooleanField(default=False)
    position = models.PositiveIntegerField(default=0, help_text="Display order within the trail's gallery")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['trail', 'position']

    def __str__(self):
        return f"{self.trail.name} - photo {self.position}"
