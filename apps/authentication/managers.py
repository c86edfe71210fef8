"""
Custom user manager for Clerk authentication
"""
import uuid

from django.contrib.auth.base_user import BaseUserManager


class UserManager(BaseUserManager):
    """
    Custom user manager for Clerk-authenticated users.
    Passwords are only set for local admin accounts.
    """
    
    def create_user(self, email, clerk_user_id=None, password=None, **extra_fields):
        """
        Create and save a user. 
        If clerk_user_id is not provided, generates a local one (for admins).
        """
        if not email:
            raise ValueError('The Email field must be set')
            
        if not clerk_user_id:
            clerk_user_id = f"local_{uuid.uuid4()}"

        extra_fields.setdefault('is_active', True)
        
        user = self.model(
            clerk_user_id=clerk_user_id,
            email=self.normalize_email(email),
            **extra_fields
        )
        
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
            
        user.save(using=self._db)
        return user
    
    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create and save a superuser with email and password.
        """
        extra_fields.setdefault('email_verified', True)
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        
        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')
        
        return self.create_user(email, password=password, **extra_fields)
