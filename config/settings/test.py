"""
Test settings
"""
import os

# Required by base settings; tests never talk to Postgres or Clerk
os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('DB_NAME', 'test')
os.environ.setdefault('DB_USER', 'test')
os.environ.setdefault('DB_PASSWORD', 'test')
os.environ.setdefault('DB_HOST', 'localhost')
os.environ.setdefault('DB_PORT', '5432')
os.environ.setdefault('CLERK_SECRET_KEY', 'sk_test_dummy')
os.environ.setdefault('CLERK_PUBLISHABLE_KEY', 'pk_test_dummy')

from .base import *  # noqa: E402

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CLERK_API_URL = 'https://clerk.test/v1'
CLERK_JWT_KEY = ''
CLERK_ALLOW_UNVERIFIED_TOKENS = True

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['apps']['level'] = 'WARNING'
