"""
DRF Serializers for Trail and TrailPhoto.
Field names follow the mobile client's camelCase contract.
"""
from rest_framework import serializers

from .models import Trail, TrailPhoto
from .services import GeoPoint


class GeoPointField(serializers.Field):
    """
    Reads and writes a GeoJSON point: ``{"type": "Point", "coordinates": [lon, lat]}``.
    The attribute it is bound to is the model instance itself, which exposes
    ``latitude`` and ``longitude``.
    """

    default_error_messages = {
        'invalid': 'Location must be a GeoJSON Point with [longitude, latitude] coordinates.',
        'out_of_range': 'Invalid coordinates: latitude must be -90 to 90, longitude must be -180 to 180.',
    }

    def __init__(self, **kwargs):
        kwargs.setdefault('source', '*')
        super().__init__(**kwargs)

    def to_representation(self, instance):
        if instance.latitude is None or instance.longitude is None:
            return None
        return GeoPoint(latitude=instance.latitude, longitude=instance.longitude).to_geojson()

    def to_internal_value(self, data):
        if not isinstance(data, dict) or data.get('type') != 'Point':
            self.fail('invalid')
        coordinates = data.get('coordinates')
        if not isinstance(coordinates, (list, tuple)) or len(coordinates) != 2:
            self.fail('invalid')
        try:
            point = GeoPoint.from_geojson(data)
        except (TypeError, ValueError):
            self.fail('invalid')
        if not (-90 <= point.latitude <= 90 and -180 <= point.longitude <= 180):
            self.fail('out_of_range')
        return {'latitude': point.latitude, 'longitude': point.longitude}


class TrailPhotoSerializer(serializers.ModelSerializer):
    isPrimary = serializers.BooleanField(source='is_primary')

    class Meta:
        model = TrailPhoto
        fields = ['id', 'url', 'alt', 'isPrimary']


class TrailSerializer(serializers.ModelSerializer):
    """Full trail representation used by cards, detail and saved lists."""
    location = GeoPointField(read_only=True)
    photos = TrailPhotoSerializer(many=True, read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = Trail
        fields = [
            'id',
            'name',
            'description',
            'distance',
            'elevation',
            'difficulty',
            'tags',
            'location',
            'photos',
            'createdAt',
            'updatedAt',
        ]
        read_only_fields = fields
