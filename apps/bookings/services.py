"""
Data retrieval for the clinic bookings list
"""
import logging
import math
from dataclasses import dataclass
from typing import List

from django.db import transaction
from django.db.models import Q

from .models import Booking
from .query import BookingListQuery

logger = logging.getLogger(__name__)


@dataclass
class BookingPage:
    items: List[Booking]
    count: int
    page_count: int
    per_page: int
    page: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.page_count


def build_booking_filter(clinic_id, query: BookingListQuery) -> Q:
    """
    Filter predicate shared by the page slice and the total count.
    Always scoped to `clinic_id`.
    """
    predicate = Q(clinic_id=clinic_id)
    
    if query.last_name:
        predicate &= Q(last_name__icontains=query.last_name)
    
    if query.types:
        predicate &= Q(type__in=query.types)
    
    if query.email:
        predicate &= Q(email__icontains=query.email)
    
    # Inclusive on both whole days
    if query.has_date_range:
        predicate &= Q(
            created_at__date__gte=query.created_from,
            created_at__date__lte=query.created_to,
        )
    
    return predicate


def calculate_page_count(count: int, per_page: int) -> int:
    return math.ceil(count / per_page)


def get_clinic_bookings_page(clinic, query: BookingListQuery) -> BookingPage:
    """
    Fetch one page of a clinic's bookings together with the matching total.
    Both reads run in the same transaction.
    """
    predicate = build_booking_filter(clinic.id, query)
    
    with transaction.atomic():
        items = list(
            Booking.objects
            .filter(predicate)
            .order_by(query.ordering, 'id')[query.offset:query.offset + query.limit]
        )
        count = Booking.objects.filter(predicate).count()
    
    page_count = calculate_page_count(count, query.limit)
    logger.debug(
        f"Clinic {clinic.id} bookings: page {query.page}/{page_count}, "
        f"{len(items)} of {count} rows"
    )
    
    return BookingPage(
        items=items,
        count=count,
        page_count=page_count,
        per_page=query.per_page,
        page=query.page,
    )
