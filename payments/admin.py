from django.contrib import admin
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['receipt_number', 'contract', 'payment_type', 'amount', 'due_date', 'status', 'payment_date']
    list_filter = ['status', 'payment_type', 'payment_method', 'due_date']
    search_fields = ['receipt_number', 'transaction_reference', 'contract__contract_number']
    readonly_fields = ['receipt_number', 'status', 'payment_date', 'version', 'created_at', 'updated_at']
    date_hierarchy = 'due_date'

    fieldsets = (
        ('Payment', {
            'fields': ('receipt_number', 'contract', 'payment_type', 'amount', 'due_date')
        }),
        ('Settlement', {
            'fields': ('status', 'payment_date', 'payment_method', 'transaction_reference')
        }),
        ('Notes', {
            'fields': ('notes',)
        }),
        ('Record', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        # Receipt numbers are assigned by PaymentLedgerService
        return False
