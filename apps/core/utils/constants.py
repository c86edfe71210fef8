"""
Application-wide constants
"""

# User roles
USER_ROLE_CLINIC_OWNER = 'clinic_owner'
USER_ROLE_PATIENT = 'patient'

USER_ROLES = [
    (USER_ROLE_CLINIC_OWNER, 'Clinic owner'),
    (USER_ROLE_PATIENT, 'Patient'),
]

# Booking types
BOOKING_TYPE_CONSULTATION = 'consultation'
BOOKING_TYPE_CHECKUP = 'checkup'
BOOKING_TYPE_VACCINATION = 'vaccination'
BOOKING_TYPE_SURGERY = 'surgery'
BOOKING_TYPE_GROOMING = 'grooming'
BOOKING_TYPE_OTHER = 'other'

BOOKING_TYPES = [
    (BOOKING_TYPE_CONSULTATION, 'Consultation'),
    (BOOKING_TYPE_CHECKUP, 'Checkup'),
    (BOOKING_TYPE_VACCINATION, 'Vaccination'),
    (BOOKING_TYPE_SURGERY, 'Surgery'),
    (BOOKING_TYPE_GROOMING, 'Grooming'),
    (BOOKING_TYPE_OTHER, 'Other'),
]

# Booking statuses
BOOKING_STATUS_PENDING = 'pending'
BOOKING_STATUS_CONFIRMED = 'confirmed'
BOOKING_STATUS_CANCELLED = 'cancelled'
BOOKING_STATUS_COMPLETED = 'completed'

BOOKING_STATUSES = [
    (BOOKING_STATUS_PENDING, 'Pending'),
    (BOOKING_STATUS_CONFIRMED, 'Confirmed'),
    (BOOKING_STATUS_CANCELLED, 'Cancelled'),
    (BOOKING_STATUS_COMPLETED, 'Completed'),
]

# Bookings dashboard paging
BOOKINGS_DEFAULT_PER_PAGE = 10
