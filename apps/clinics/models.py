"""
Clinic model (tenant)
"""
from django.db import models
from apps.core.models import BaseModel
from apps.core.validators import validate_phone_number


class Clinic(BaseModel):
    """
    Clinic account owned by a single user; scopes every booking it holds
    """
    user = models.OneToOneField(
        'authentication.User',
        on_delete=models.CASCADE,
        related_name='clinic'
    )
    
    name = models.CharField(max_length=255)
    phone = models.CharField(max_length=20, blank=True, validators=[validate_phone_number])
    email = models.EmailField(blank=True)
    address = models.TextField(blank=True)
    
    is_active = models.BooleanField(default=True)
    
    class Meta:
        db_table = 'clinics'
        verbose_name = 'Clinic'
        verbose_name_plural = 'Clinics'
        ordering = ['-created_at']
    
    def __str__(self):
        return f"{self.name} - {self.user.email}"
