from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['last_name', 'first_name', 'email', 'type', 'date', 'time', 'status', 'clinic']
    search_fields = ['last_name', 'email', 'clinic__name']
    list_filter = ['type', 'status', 'date', 'created_at']
