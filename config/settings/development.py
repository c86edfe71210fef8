"""
Development settings
"""
from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '*']

# Disable HTTPS redirect in development
SECURE_SSL_REDIRECT = False

# CORS - Allow all origins in development
CORS_ALLOW_ALL_ORIGINS = True

# Accept unsigned Clerk tokens when no CLERK_JWT_KEY is set locally
CLERK_ALLOW_UNVERIFIED_TOKENS = env.bool('CLERK_ALLOW_UNVERIFIED_TOKENS', default=True)

# Swagger testing with X-Clerk-User-ID header
REST_FRAMEWORK['DEFAULT_AUTHENTICATION_CLASSES'] = [
    *REST_FRAMEWORK['DEFAULT_AUTHENTICATION_CLASSES'],
    'apps.authentication.auth_backends.ClerkUserIdAuthentication',
]

# Logging - More verbose in development
LOGGING['loggers']['apps']['level'] = 'DEBUG'
