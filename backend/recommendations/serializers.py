"""
Serializers for the trail discovery feed.
"""
from rest_framework import serializers

from recommendations.dtos import ScoredTrail
from trails.models import Difficulty
from trails.serializers import TrailSerializer
from trails.services import ElevationBand, FilterCriteria


class CommaSeparatedListField(serializers.Field):
    """Query parameter holding a comma separated list, e.g. ``?tags=scenic,paved``."""

    def __init__(self, child=None, **kwargs):
        self.child = child
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if isinstance(data, (list, tuple)):
            data = ','.join(str(item) for item in data)
        if not isinstance(data, str):
            self.fail('invalid')
        values = [item.strip() for item in data.split(',') if item.strip()]
        if self.child is not None:
            values = [self.child.run_validation(item) for item in values]
        return values

    def to_representation(self, value):
        return ','.join(value)

    default_error_messages = {
        'invalid': 'Expected a comma separated list.',
    }


class TrailCardsQuerySerializer(serializers.Serializer):
    """Query string of GET /api/trails/cards/."""
    page = serializers.IntegerField(required=False, default=1, min_value=1)
    limit = serializers.IntegerField(required=False, min_value=1)
    maxDistance = serializers.FloatField(required=False, min_value=0)
    difficulty = CommaSeparatedListField(
        child=serializers.ChoiceField(choices=Difficulty.values),
        required=False
    )
    tags = CommaSeparatedListField(required=False)
    elevation = serializers.ChoiceField(
        choices=[band.value for band in ElevationBand] + ['any'],
        required=False
    )

    def to_criteria(self) -> FilterCriteria:
        data = self.validated_data
        difficulty = data.get('difficulty')
        tags = data.get('tags')
        return FilterCriteria(
            max_distance=data.get('maxDistance'),
            difficulty=frozenset(difficulty) if difficulty else None,
            tags=frozenset(tags) if tags else None,
            elevation=ElevationBand.parse(data.get('elevation')),
        )


class PaginationSerializer(serializers.Serializer):
    page = serializers.IntegerField()
    limit = serializers.IntegerField()
    total = serializers.IntegerField()
    totalPages = serializers.IntegerField(source='total_pages')
    hasNext = serializers.BooleanField(source='has_next')
    hasPrev = serializers.BooleanField(source='has_prev')


class TrailCardSerializer(serializers.Serializer):
    """A trail with its relevance score flattened into the trail payload."""

    def to_representation(self, instance: ScoredTrail):
        data = TrailSerializer(instance.trail, context=self.context).data
        data['score'] = instance.score
        return data
