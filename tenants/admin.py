from django.contrib import admin
from .models import Tenant


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'phone', 'email', 'national_id', 'created_at']
    list_filter = ['created_at']
    search_fields = ['first_name', 'last_name', 'phone', 'email', 'national_id']
    readonly_fields = ['version', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('first_name', 'last_name', 'email', 'phone', 'alternate_phone')
        }),
        ('Identity', {
            'fields': ('national_id', 'date_of_birth')
        }),
        ('Employment', {
            'fields': ('occupation', 'company', 'monthly_income')
        }),
        ('Additional Information', {
            'fields': ('address', 'emergency_contact')
        }),
        ('Record', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
