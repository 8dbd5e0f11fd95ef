from django.contrib import admin
from .models import Contract


@admin.register(Contract)
class ContractAdmin(admin.ModelAdmin):
    list_display = ['contract_number', 'property', 'tenant', 'start_date', 'end_date', 'monthly_rent', 'status']
    list_filter = ['status', 'is_active', 'start_date']
    search_fields = ['contract_number', 'property__title', 'tenant__first_name', 'tenant__last_name']
    readonly_fields = ['contract_number', 'status', 'is_active', 'version', 'created_at', 'updated_at']

    fieldsets = (
        ('Parties', {
            'fields': ('contract_number', 'property', 'tenant')
        }),
        ('Term', {
            'fields': ('start_date', 'end_date', 'status', 'is_active')
        }),
        ('Money', {
            'fields': ('monthly_rent', 'security_deposit')
        }),
        ('Notes', {
            'fields': ('terms', 'notes')
        }),
        ('Record', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_delete_permission(self, request, obj=None):
        return False

    def has_add_permission(self, request):
        # Contract numbers and property status are assigned by ContractService
        return False
