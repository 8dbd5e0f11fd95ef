from django.contrib import admin
from .models import MaintenanceRequest, MaintenanceImage


class MaintenanceImageInline(admin.TabularInline):
    model = MaintenanceImage
    extra = 0
    fields = ['file_name', 'file_path', 'image_type', 'caption']


@admin.register(MaintenanceRequest)
class MaintenanceRequestAdmin(admin.ModelAdmin):
    list_display = ['request_number', 'title', 'property', 'category', 'priority', 'status', 'request_date']
    list_filter = ['status', 'priority', 'category']
    search_fields = ['request_number', 'title', 'property__title', 'assigned_to']
    readonly_fields = ['request_number', 'request_date', 'completed_date', 'version', 'created_at', 'updated_at']
    inlines = [MaintenanceImageInline]

    fieldsets = (
        ('Request', {
            'fields': ('request_number', 'property', 'tenant', 'title', 'description', 'category', 'priority', 'status')
        }),
        ('Assignment', {
            'fields': ('assigned_to', 'assigned_to_phone', 'scheduled_date')
        }),
        ('Cost', {
            'fields': ('estimated_cost', 'actual_cost', 'currency')
        }),
        ('Completion', {
            'fields': ('completed_date', 'completion_notes', 'internal_notes')
        }),
        ('Record', {
            'fields': ('request_date', 'version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        # Request numbers are assigned by MaintenanceService
        return False
