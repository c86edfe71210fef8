"""
Template helpers for the bookings table shell
"""
from django import template

register = template.Library()


@register.simple_tag(takes_context=True)
def query_replace(context, **kwargs):
    """
    Current query string with `kwargs` replaced; a value of None drops the key.
    Changing anything other than the page resets to page 1.
    """
    params = context['request'].GET.copy()
    if 'page' not in kwargs:
        params.pop('page', None)
    for key, value in kwargs.items():
        if value is None:
            params.pop(key, None)
        else:
            params[key] = value
    return params.urlencode()
