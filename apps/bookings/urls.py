"""
URL configuration for the clinic bookings dashboard page.
"""
from django.urls import path
from . import views

app_name = 'bookings'

urlpatterns = [
    path('bookings/', views.ClinicBookingsView.as_view(), name='clinic-bookings'),
]
