"""
Custom authentication classes for Clerk
"""
from rest_framework import authentication

from .middleware import resolve_clerk_user
from .models import User
from .services.token_service import token_service


class ClerkJWTAuthentication(authentication.BaseAuthentication):
    """
    Authentication class for Clerk JWT tokens (Bearer token)
    """
    
    def authenticate(self, request):
        auth_header = request.META.get('HTTP_AUTHORIZATION', '')
        
        if not auth_header.startswith('Bearer '):
            return None
        
        token_payload = token_service.validate_bearer_token(auth_header)
        
        # Clerk session tokens always carry the authorized party claim
        if not token_payload or 'azp' not in token_payload:
            return None
        
        clerk_user_id = token_service.extract_user_id(token_payload)
        if not clerk_user_id:
            return None
        
        user = resolve_clerk_user(clerk_user_id)
        if user is None or not user.is_active:
            return None
        
        return (user, None)
    
    def authenticate_header(self, request):
        return 'Bearer realm="api"'


class ClerkUserIdAuthentication(authentication.BaseAuthentication):
    """
    Development-only authentication using X-Clerk-User-ID header.
    For Swagger testing convenience.
    """
    
    def authenticate(self, request):
        clerk_user_id = request.META.get('HTTP_X_CLERK_USER_ID')
        
        if not clerk_user_id:
            return None
        
        try:
            user = User.objects.get(clerk_user_id=clerk_user_id)
            return (user, None)
        except User.DoesNotExist:
            return None
    
    def authenticate_header(self, request):
        return 'X-Clerk-User-ID'
