"""
Clinic bookings views: the dashboard page and its JSON counterpart
"""
import logging

from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404
from django.views.generic import TemplateView
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.clinics.services import get_clinic_for_user
from apps.core.exceptions import ClinicNotFound
from apps.core.utils.constants import BOOKING_TYPES
from .query import BookingListQuery, SORTABLE_COLUMNS
from .serializers import ClinicBookingsPageSerializer
from .services import get_clinic_bookings_page

logger = logging.getLogger(__name__)

# (query column, header label) in display order
TABLE_COLUMNS = [
    ('lastName', 'Last name'),
    ('firstName', 'First name'),
    ('email', 'Email'),
    ('type', 'Type'),
    ('date', 'Date'),
    ('time', 'Time'),
    ('status', 'Status'),
    ('createdAt', 'Created'),
]


def build_table_columns(query: BookingListQuery):
    """
    Header descriptors for the table shell.
    Clicking the active column flips its direction; others start ascending.
    """
    columns = []
    for key, label in TABLE_COLUMNS:
        active = SORTABLE_COLUMNS[key] == query.sort_field
        if active:
            next_direction = 'asc' if query.sort_descending else 'desc'
        else:
            next_direction = 'asc'
        columns.append({
            'key': key,
            'label': label,
            'active': active,
            'descending': active and query.sort_descending,
            'sort': f'{key}.{next_direction}',
        })
    return columns


class ClinicBookingsView(LoginRequiredMixin, TemplateView):
    """
    Dashboard page listing the signed-in owner's clinic bookings.
    Anonymous visitors are redirected to LOGIN_URL.
    """
    template_name = 'bookings/clinic_bookings.html'
    page_title = 'Bookings'
    page_description = 'Manage your bookings'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        clinic = get_clinic_for_user(self.request.user)
        if clinic is None:
            logger.warning(f"Bookings page requested without a clinic: user {self.request.user.pk}")
            raise Http404("No clinic is registered for this account")

        query = BookingListQuery.from_query_params(self.request.GET)
        page = get_clinic_bookings_page(clinic, query)

        context.update({
            'page_title': self.page_title,
            'page_description': self.page_description,
            'clinic_id': clinic.id,
            'bookings': page.items,
            'page_count': page.page_count,
            'page': page,
            'query': query,
            'columns': build_table_columns(query),
            'booking_types': BOOKING_TYPES,
        })
        return context


class ClinicBookingListAPIView(APIView):
    """
    JSON page of the signed-in owner's clinic bookings
    """
    permission_classes = [IsAuthenticated]

    @extend_schema(
        summary="Clinic bookings",
        description="Paginated, filterable bookings of the clinic owned by the current user",
        parameters=[
            OpenApiParameter('page', int, description='1-based page number (default 1)'),
            OpenApiParameter('per_page', int, description='Rows per page (default 10)'),
            OpenApiParameter('sort', str, description='column.direction, e.g. lastName.asc'),
            OpenApiParameter('lastName', str, description='Last name contains'),
            OpenApiParameter('email', str, description='Email contains'),
            OpenApiParameter('type', str, description='Dot-separated booking types, e.g. consultation.checkup'),
            OpenApiParameter('from', str, description='Created on or after (YYYY-MM-DD), requires `to`'),
            OpenApiParameter('to', str, description='Created on or before (YYYY-MM-DD), requires `from`'),
        ],
        responses={
            200: ClinicBookingsPageSerializer,
            401: OpenApiResponse(description="Unauthorized"),
            404: OpenApiResponse(description="No clinic registered for this account"),
        },
        tags=['Bookings - Clinic']
    )
    def get(self, request):
        clinic = get_clinic_for_user(request.user)
        if clinic is None:
            logger.warning(f"Bookings API requested without a clinic: user {request.user.pk}")
            raise ClinicNotFound()

        query = BookingListQuery.from_query_params(request.query_params)
        page = get_clinic_bookings_page(clinic, query)

        serializer = ClinicBookingsPageSerializer({
            'data': page.items,
            'page_count': page.page_count,
            'count': page.count,
            'clinic_id': clinic.id,
        })
        return Response(serializer.data)
