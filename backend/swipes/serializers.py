from rest_framework import serializers

from .models import Direction, Match, Swipe


class SwipeCreateSerializer(serializers.Serializer):
    trailId = serializers.CharField()
    # Checked by the recorder so an unknown direction gets its own message
    direction = serializers.CharField()


class MatchSummarySerializer(serializers.ModelSerializer):
    trailId = serializers.UUIDField(source='trail_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Match
        fields = ['id', 'trailId', 'createdAt']


class SwipeSerializer(serializers.ModelSerializer):
    trailId = serializers.UUIDField(source='trail_id', read_only=True)
    direction = serializers.ChoiceField(choices=Direction.choices, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Swipe
        fields = ['id', 'trailId', 'direction', 'createdAt']


class MatchSerializer(serializers.ModelSerializer):
    """A match as seen by one participant."""
    trailId = serializers.UUIDField(source='trail_id', read_only=True)
    otherUserId = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Match
        fields = ['id', 'trailId', 'otherUserId', 'createdAt']

    def get_otherUserId(self, obj):
        return obj.other_user_id(self.context['request'].user)
