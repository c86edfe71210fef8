"""Shared fixtures for booking tests."""

from __future__ import annotations

from datetime import date, datetime, time, timezone as dt_timezone
from typing import Optional

from apps.authentication.models import User
from apps.bookings.models import Booking
from apps.clinics.models import Clinic
from apps.core.utils.constants import BOOKING_TYPE_CONSULTATION, USER_ROLE_CLINIC_OWNER


def create_owner(email: str, **extra) -> User:
    extra.setdefault("role", USER_ROLE_CLINIC_OWNER)
    return User.objects.create_user(email=email, **extra)


def create_clinic(owner: User, name: str = "Przychodnia Centrum") -> Clinic:
    return Clinic.objects.create(user=owner, name=name)


def create_booking(
    clinic: Clinic,
    last_name: str,
    *,
    email: Optional[str] = None,
    type: str = BOOKING_TYPE_CONSULTATION,
    created_at: Optional[datetime] = None,
    first_name: str = "Anna",
) -> Booking:
    booking = Booking.objects.create(
        clinic=clinic,
        first_name=first_name,
        last_name=last_name,
        email=email or f"{last_name.lower()}@example.com",
        type=type,
        date=date(2024, 6, 1),
        time=time(10, 30),
    )
    if created_at is not None:
        # auto_now_add ignores explicit values on create
        Booking.objects.filter(pk=booking.pk).update(created_at=created_at)
        booking.refresh_from_db()
    return booking


def utc(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=dt_timezone.utc)
