"""
Booking serializers
"""
from rest_framework import serializers
from .models import Booking


class BookingListSerializer(serializers.ModelSerializer):
    """Row serializer for the clinic bookings table"""
    type_display = serializers.CharField(source='get_type_display', read_only=True)
    status_display = serializers.CharField(source='get_status_display', read_only=True)
    
    class Meta:
        model = Booking
        fields = [
            'id', 'first_name', 'last_name', 'email', 'phone',
            'type', 'type_display', 'date', 'time', 'slot',
            'status', 'status_display', 'created_at'
        ]
        read_only_fields = fields


class ClinicBookingsPageSerializer(serializers.Serializer):
    """Output serializer for one page of clinic bookings"""
    data = BookingListSerializer(many=True)
    page_count = serializers.IntegerField()
    count = serializers.IntegerField()
    clinic_id = serializers.UUIDField()
