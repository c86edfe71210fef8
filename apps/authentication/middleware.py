"""
Clerk authentication middleware
"""
from django.utils.functional import SimpleLazyObject
from .services.token_service import token_service, SESSION_COOKIE_NAME
from .services.clerk_service import clerk_service
from .models import User
import logging

logger = logging.getLogger(__name__)


def sync_user_role_from_clerk(user, clerk_user_data):
    """
    Sync user role from Clerk metadata.
    Prevents role mismatches when user is deleted/recreated in Clerk.
    """
    if not clerk_user_data:
        return
    
    clerk_role = clerk_service.sync_user_data(clerk_user_data)['role']
    
    if clerk_role != user.role:
        old_role = user.role
        user.role = clerk_role
        user.save(update_fields=['role'])
        logger.info(f"Auto-synced role for {user.email}: {old_role} -> {clerk_role}")


def resolve_clerk_user(clerk_user_id):
    """
    Return the local user for a Clerk user id, creating it from Clerk on first sight.
    Returns None when Clerk does not know the id.
    """
    try:
        user = User.objects.get(clerk_user_id=clerk_user_id)
    except User.DoesNotExist:
        user = None
    
    clerk_user_data = clerk_service.get_user(clerk_user_id)
    
    if user is not None:
        sync_user_role_from_clerk(user, clerk_user_data)
        return user
    
    if not clerk_user_data:
        logger.warning(f"Could not fetch user data from Clerk for ID: {clerk_user_id}")
        return None
    
    user = User.objects.create(**clerk_service.sync_user_data(clerk_user_data))
    logger.info(f"Created new user from Clerk: {user.email}")
    return user


def get_user_from_token(request, fallback):
    """
    Resolve the Clerk user from the Authorization header or the session cookie.
    Falls back to the session-authenticated user when no valid token is present.
    """
    auth_header = request.META.get('HTTP_AUTHORIZATION', '')
    if auth_header:
        token_payload = token_service.validate_bearer_token(auth_header)
    else:
        token_payload = token_service.validate_session_cookie(request.COOKIES)
    
    if not token_payload:
        return fallback
    
    clerk_user_id = token_service.extract_user_id(token_payload)
    if not clerk_user_id:
        return fallback
    
    user = resolve_clerk_user(clerk_user_id)
    if user is None or not user.is_active:
        return fallback
    return user


class ClerkAuthenticationMiddleware:
    """
    Middleware to authenticate users via Clerk JWT tokens.
    Must run after django.contrib.auth's AuthenticationMiddleware.
    """
    
    def __init__(self, get_response):
        self.get_response = get_response
    
    def __call__(self, request):
        if request.META.get('HTTP_AUTHORIZATION') or request.COOKIES.get(SESSION_COOKIE_NAME):
            fallback = request.user
            request.user = SimpleLazyObject(lambda: get_user_from_token(request, fallback))
        
        return self.get_response(request)
