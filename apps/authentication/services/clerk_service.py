"""
Clerk API service for authentication
"""
import requests
import jwt
from django.conf import settings
from typing import Optional, Dict, Any
import logging
from apps.core.utils.constants import USER_ROLE_CLINIC_OWNER, USER_ROLE_PATIENT

logger = logging.getLogger(__name__)


class ClerkService:
    """
    Service for interacting with Clerk API
    """
    
    def __init__(self):
        self.secret_key = settings.CLERK_SECRET_KEY
        self.api_url = settings.CLERK_API_URL
        self.jwt_key = settings.CLERK_JWT_KEY
        self.allow_unverified = settings.CLERK_ALLOW_UNVERIFIED_TOKENS
        self.headers = {
            'Authorization': f'Bearer {self.secret_key}',
            'Content-Type': 'application/json',
        }
    
    def verify_token(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Verify JWT token from Clerk
        
        Args:
            token: session JWT from the Authorization header or __session cookie
            
        Returns:
            Decoded token payload if valid, None otherwise
        """
        try:
            if self.jwt_key:
                return jwt.decode(
                    token,
                    self.jwt_key,
                    algorithms=['RS256'],
                    options={'verify_aud': False},
                )
            
            if not self.allow_unverified:
                logger.error("CLERK_JWT_KEY is not configured; rejecting token")
                return None

            # Local development only: trust the claims
            return jwt.decode(token, options={'verify_signature': False})
            
        except jwt.ExpiredSignatureError:
            logger.warning("Token has expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid token: {str(e)}")
            return None
    
    def get_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get user details from Clerk
        
        Args:
            user_id: Clerk user ID
            
        Returns:
            User data if found, None otherwise
        """
        try:
            url = f"{self.api_url}/users/{user_id}"
            response = requests.get(url, headers=self.headers, timeout=10)
            
            if response.status_code == 200:
                return response.json()
            else:
                logger.warning(f"Failed to get user from Clerk: {response.status_code}")
                return None
                
        except requests.RequestException as e:
            logger.error(f"Error fetching user from Clerk: {str(e)}")
            return None
    
    def sync_user_data(self, clerk_user_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Extract and format user data from Clerk response
        
        Args:
            clerk_user_data: User data from Clerk API
            
        Returns:
            Formatted user data for Django model
        """
        email_addresses = clerk_user_data.get('email_addresses', [])
        primary_email = next(
            (email['email_address'] for email in email_addresses if email.get('id') == clerk_user_data.get('primary_email_address_id')),
            email_addresses[0]['email_address'] if email_addresses else ''
        )
        
        # Role lives in public_metadata, falling back to unsafe_metadata
        public_metadata = clerk_user_data.get('public_metadata') or {}
        unsafe_metadata = clerk_user_data.get('unsafe_metadata') or {}
        clerk_role = public_metadata.get('role') or unsafe_metadata.get('role', '')
        
        role = USER_ROLE_CLINIC_OWNER if clerk_role == USER_ROLE_CLINIC_OWNER else USER_ROLE_PATIENT
        
        return {
            'clerk_user_id': clerk_user_data.get('id'),
            'email': primary_email,
            'first_name': clerk_user_data.get('first_name') or '',
            'last_name': clerk_user_data.get('last_name') or '',
            'email_verified': any(email.get('verification', {}).get('status') == 'verified' for email in email_addresses),
            'role': role,
        }


# Singleton instance
clerk_service = ClerkService()
