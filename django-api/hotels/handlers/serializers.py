"""Serializers for transforming domain models to API responses."""

from datetime import datetime, timezone

from rest_framework import serializers


class IsoTimestampField(serializers.Field):
    """UTC ISO-8601 timestamp with millisecond precision, e.g. ``2024-01-31T12:00:00.000Z``."""

    def to_representation(self, value: datetime) -> str:
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RoomSerializer(serializers.Serializer):
    """Serializer for Room domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    capacity = serializers.IntegerField(source="capacity.value")
    hotelId = serializers.IntegerField(source="hotel_id.value")
    createdAt = IsoTimestampField(source="created_at")
    updatedAt = IsoTimestampField(source="updated_at")


class HotelSerializer(serializers.Serializer):
    """Serializer for Hotel domain model, without rooms."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    image = serializers.CharField()
    createdAt = IsoTimestampField(source="created_at")
    updatedAt = IsoTimestampField(source="updated_at")


class HotelWithRoomsSerializer(HotelSerializer):
    """Serializer for a Hotel together with its rooms."""

    Rooms = RoomSerializer(source="rooms", many=True)
