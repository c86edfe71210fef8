"""
Custom exceptions and exception handler
"""
from rest_framework.views import exception_handler
from rest_framework.exceptions import NotFound


class ClinicNotFound(NotFound):
    default_detail = 'No clinic is registered for this account.'
    default_code = 'clinic_not_found'


def custom_exception_handler(exc, context):
    """
    Wrap DRF error responses in the {error, message, status_code} envelope
    """
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data.get('detail', str(exc)) if isinstance(response.data, dict) else str(exc)
        custom_response_data = {
            'error': True,
            'message': detail,
            'status_code': response.status_code,
        }
        
        # Add field errors if present
        if isinstance(response.data, dict) and 'detail' not in response.data:
            custom_response_data['errors'] = response.data
        
        response.data = custom_response_data

    return response
