"""
Booking model
"""
from django.db import models
from apps.core.models import BaseModel
from apps.core.utils.constants import (
    BOOKING_TYPES,
    BOOKING_TYPE_CONSULTATION,
    BOOKING_STATUSES,
    BOOKING_STATUS_PENDING,
)


class Booking(BaseModel):
    """
    Reservation made with a clinic
    """
    clinic = models.ForeignKey(
        'clinics.Clinic',
        on_delete=models.CASCADE,
        related_name='bookings'
    )
    
    # Contact details
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150, db_index=True)
    email = models.EmailField(db_index=True)
    phone = models.CharField(max_length=20, blank=True)
    
    # Appointment
    type = models.CharField(
        max_length=20,
        choices=BOOKING_TYPES,
        default=BOOKING_TYPE_CONSULTATION,
        db_index=True
    )
    date = models.DateField()
    time = models.TimeField()
    slot = models.CharField(max_length=50, blank=True)
    status = models.CharField(
        max_length=20,
        choices=BOOKING_STATUSES,
        default=BOOKING_STATUS_PENDING,
        db_index=True
    )
    notes = models.TextField(blank=True)
    
    class Meta:
        db_table = 'bookings'
        verbose_name = 'Booking'
        verbose_name_plural = 'Bookings'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['clinic', 'created_at'], name='bookings_clinic_created_idx'),
        ]
    
    def __str__(self):
        return f"{self.first_name} {self.last_name} - {self.get_type_display()} - {self.date}"
