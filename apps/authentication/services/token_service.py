"""
Token validation service
"""
from typing import Optional
from .clerk_service import clerk_service
import logging

logger = logging.getLogger(__name__)

# Cookie Clerk's frontend SDK stores the session JWT in
SESSION_COOKIE_NAME = '__session'


class TokenService:
    """
    Service for validating authentication tokens
    """
    
    @staticmethod
    def validate_bearer_token(auth_header: str) -> Optional[dict]:
        """
        Validate Bearer token from Authorization header
        
        Args:
            auth_header: Authorization header value
            
        Returns:
            Decoded token payload if valid, None otherwise
        """
        if not auth_header:
            return None
        
        parts = auth_header.split()
        
        if len(parts) != 2 or parts[0].lower() != 'bearer':
            logger.warning("Invalid authorization header format")
            return None
        
        return clerk_service.verify_token(parts[1])
    
    @staticmethod
    def validate_session_cookie(cookies) -> Optional[dict]:
        """
        Validate the Clerk session cookie sent by browsers on page requests
        """
        token = cookies.get(SESSION_COOKIE_NAME)
        if not token:
            return None
        return clerk_service.verify_token(token)
    
    @staticmethod
    def extract_user_id(token_payload: dict) -> Optional[str]:
        """
        Extract user ID from token payload
        """
        # Clerk uses 'sub' claim for user ID
        return token_payload.get('sub')


# Singleton instance
token_service = TokenService()
