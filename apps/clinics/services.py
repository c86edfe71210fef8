"""
Clinic lookups
"""
import logging
from typing import Optional

from .models import Clinic

logger = logging.getLogger(__name__)


def get_clinic_for_user(user) -> Optional[Clinic]:
    """
    Return the clinic owned by `user`, loading only the columns needed for scoping
    """
    if not user or not user.is_authenticated:
        return None
    
    clinic = Clinic.objects.only('id', 'user').filter(user_id=user.pk).first()
    if clinic is None:
        logger.info(f"No clinic registered for user {user.pk}")
    return clinic
