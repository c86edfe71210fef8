"""
API URL configuration for clinic bookings.
"""
from django.urls import path
from . import views

urlpatterns = [
    path('bookings/', views.ClinicBookingListAPIView.as_view(), name='clinic-bookings-api'),
]
