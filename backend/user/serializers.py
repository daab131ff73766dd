from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.db import transaction
from rest_framework import serializers

from trails.models import Difficulty
from trails.serializers import GeoPointField
from .models import UserProfile

User = get_user_model()

ELEVATION_PREFERENCES = ['low', 'medium', 'high', 'any']


class UserProfileSerializer(serializers.ModelSerializer):
    userId = serializers.IntegerField(source="user.id", read_only=True)
    location = GeoPointField(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = UserProfile
        fields = [
            "id",
            "userId",
            "name",
            "preferences",
            "location",
            "createdAt",
            "updatedAt",
        ]


class UserSerializer(serializers.ModelSerializer):
    profile = UserProfileSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="date_joined", read_only=True)

    class Meta:
        model = User
        fields = ["id", "email", "createdAt", "profile"]


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, min_length=8)
    name = serializers.CharField(max_length=150)

    def validate_email(self, value):
        email = value.strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("User with this email already exists")
        return email

    def validate_password(self, value):
        validate_password(value)
        return value

    def create(self, validated_data):
        with transaction.atomic():
            user = User.objects.create_user(
                username=validated_data['email'],
                email=validated_data['email'],
                password=validated_data['password'],
            )
            UserProfile.objects.create(user=user, name=validated_data['name'])
        return user


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)


class PreferencesSerializer(serializers.Serializer):
    difficulty = serializers.ListField(
        child=serializers.ChoiceField(choices=Difficulty.values),
        required=False
    )
    maxDistance = serializers.FloatField(required=False, min_value=0)
    elevation = serializers.ChoiceField(choices=ELEVATION_PREFERENCES, required=False)
    tags = serializers.ListField(child=serializers.CharField(), required=False)


class ProfileUpdateSerializer(serializers.Serializer):
    """Body of PUT /api/user/me/. Both keys are optional."""
    preferences = PreferencesSerializer(required=False)
    location = GeoPointField(required=False)
    name = serializers.CharField(max_length=150, required=False)

    def update(self, instance: UserProfile, validated_data):
        if 'preferences' in validated_data:
            instance.update_preferences(validated_data['preferences'])
        if 'latitude' in validated_data:
            instance.set_location(validated_data['latitude'], validated_data['longitude'])
        if 'name' in validated_data:
            instance.name = validated_data['name']
        instance.save()
        return instance
