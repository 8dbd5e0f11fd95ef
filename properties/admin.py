from django.contrib import admin
from .models import Property, PropertyImage


class PropertyImageInline(admin.TabularInline):
    model = PropertyImage
    extra = 0
    fields = ['file_name', 'file_path', 'caption', 'display_order', 'is_primary']


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ['title', 'property_type', 'city', 'monthly_rent', 'status', 'owner', 'created_at']
    list_filter = ['status', 'property_type', 'city']
    search_fields = ['title', 'address', 'city', 'owner__first_name', 'owner__last_name']
    readonly_fields = ['version', 'created_at', 'updated_at']
    inlines = [PropertyImageInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('owner', 'title', 'description', 'property_type', 'status')
        }),
        ('Location', {
            'fields': ('address', 'city', 'floor')
        }),
        ('Details', {
            'fields': ('area', 'bedrooms', 'bathrooms', 'has_parking', 'has_elevator', 'has_balcony')
        }),
        ('Pricing', {
            'fields': ('monthly_rent', 'security_deposit')
        }),
        ('Record', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
