from django.contrib import admin
from .models import Owner


@admin.register(Owner)
class OwnerAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'email', 'phone', 'property_count', 'created_at']
    search_fields = ['first_name', 'last_name', 'email', 'phone', 'national_id']
    readonly_fields = ['version', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('first_name', 'last_name', 'email', 'phone')
        }),
        ('Additional Information', {
            'fields': ('address', 'national_id')
        }),
        ('Record', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='Properties')
    def property_count(self, obj):
        return obj.properties.count()
