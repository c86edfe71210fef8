"""
Authentication views
"""
import logging
from datetime import datetime

from django.db import connection, DatabaseError
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated, AllowAny
from drf_spectacular.utils import extend_schema, OpenApiResponse
from .serializers import UserSerializer, HealthCheckSerializer

logger = logging.getLogger(__name__)


@extend_schema(
    summary="Get current user",
    description="Retrieve the currently authenticated user's profile",
    responses={
        200: UserSerializer,
        401: OpenApiResponse(description="Unauthorized")
    },
    tags=['Authentication']
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """
    Get current authenticated user
    """
    serializer = UserSerializer(request.user)
    return Response(serializer.data)


@extend_schema(
    summary="Health check",
    description="Check API health status including database connectivity",
    responses={200: HealthCheckSerializer},
    tags=['System']
)
@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """
    Health check endpoint
    """
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        db_status = "healthy"
    except DatabaseError as e:
        logger.error(f"Health check database failure: {str(e)}")
        db_status = f"unhealthy: {str(e)}"
    
    return Response({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'database': db_status,
    })
