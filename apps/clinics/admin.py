from django.contrib import admin
from .models import Clinic


@admin.register(Clinic)
class ClinicAdmin(admin.ModelAdmin):
    list_display = ['name', 'user', 'is_active', 'created_at']
    search_fields = ['name', 'user__email']
    list_filter = ['is_active', 'created_at']
