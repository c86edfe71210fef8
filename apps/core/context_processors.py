"""
Template context processors
"""
from django.conf import settings


def site(request):
    """Site name and canonical base URL for page metadata"""
    return {
        'app_name': settings.APP_NAME,
        'app_url': settings.APP_URL.rstrip('/'),
    }
