"""
Serializers for friendship endpoints.
"""
from rest_framework import serializers

from .models import Friendship


class InviteSerializer(serializers.Serializer):
    friendEmail = serializers.EmailField()


class FriendshipActionSerializer(serializers.Serializer):
    friendshipId = serializers.UUIDField()


class FriendshipSerializer(serializers.ModelSerializer):
    """A friend request as created: both ends exposed."""
    userId = serializers.IntegerField(source='user_id', read_only=True)
    friendId = serializers.IntegerField(source='friend_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'userId', 'friendId', 'status', 'createdAt']


class FriendshipStatusSerializer(serializers.ModelSerializer):
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'status', 'updatedAt']


class FriendSerializer(serializers.ModelSerializer):
    """A friendship seen from one side; ``friendId`` is the other user."""
    friendId = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'friendId', 'status', 'createdAt']

    def get_friendId(self, obj):
        return obj.other_user_id(self.context['request'].user)


class FriendRequestSerializer(serializers.ModelSerializer):
    """An incoming request; ``userId`` is the requester."""
    userId = serializers.IntegerField(source='user_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = Friendship
        fields = ['id', 'userId', 'status', 'createdAt']
