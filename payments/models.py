from django.db import models
from django.core.validators import MinValueValidator
from core.constants import PaymentStatus, PaymentType, PaymentMethod
from contracts.models import Contract


class Payment(models.Model):
    """Payment ledger entry - one expected or received amount on a contract"""
    receipt_number = models.CharField(max_length=50, unique=True, editable=False)
    payment_type = models.CharField(max_length=20, choices=PaymentType.CHOICES, default=PaymentType.RENT)
    status = models.CharField(max_length=20, choices=PaymentStatus.CHOICES, default=PaymentStatus.PENDING)
    amount = models.DecimalField(max_digits=18, decimal_places=2, validators=[MinValueValidator(0)])
    due_date = models.DateField()
    payment_date = models.DateTimeField(null=True, blank=True)
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.CHOICES, blank=True)
    transaction_reference = models.CharField(max_length=100, blank=True)
    notes = models.CharField(max_length=500, blank=True)
    contract = models.ForeignKey(Contract, on_delete=models.PROTECT, related_name='payments')
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['due_date', 'id']
        verbose_name = "Payment"
        verbose_name_plural = "Payments"
        indexes = [
            models.Index(fields=['contract', 'due_date'], name='payment_contract_due_idx'),
            models.Index(fields=['status', 'due_date'], name='payment_status_due_idx'),
            models.Index(fields=['status', 'payment_date'], name='payment_status_paid_idx'),
        ]

    def __str__(self):
        return f"{self.receipt_number} - {self.amount} ({self.get_status_display()})"

    @property
    def is_paid(self):
        return self.status == PaymentStatus.PAID
