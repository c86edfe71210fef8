"""
Authentication serializers
"""
from typing import Optional

from rest_framework import serializers
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """
    User serializer for API responses
    """
    full_name = serializers.CharField(read_only=True)
    clinic_id = serializers.SerializerMethodField()
    
    def get_clinic_id(self, obj) -> Optional[str]:
        clinic = getattr(obj, 'clinic', None)
        return str(clinic.id) if clinic else None
    
    class Meta:
        model = User
        fields = [
            'clerk_user_id',
            'email',
            'first_name',
            'last_name',
            'full_name',
            'role',
            'clinic_id',
            'is_active',
            'email_verified',
            'created_at',
        ]
        read_only_fields = fields


class HealthCheckSerializer(serializers.Serializer):
    """Serializer for health check response"""
    status = serializers.CharField()
    timestamp = serializers.DateTimeField()
    database = serializers.CharField()
