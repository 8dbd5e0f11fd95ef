import builtins

from django.db import models
from django.db.models import F, Q
from django.core.validators import MinValueValidator
from core.constants import ContractStatus
from properties.models import Property
from tenants.models import Tenant


class Contract(models.Model):
    """Rental agreement between one property and one tenant"""
    contract_number = models.CharField(max_length=50, unique=True, editable=False)
    start_date = models.DateField()
    end_date = models.DateField()
    monthly_rent = models.DecimalField(max_digits=18, decimal_places=2, validators=[MinValueValidator(0)])
    security_deposit = models.DecimalField(max_digits=18, decimal_places=2, default=0,
                                           validators=[MinValueValidator(0)])
    # Mirrors status for indexing; kept in sync by ContractService
    is_active = models.BooleanField(default=True)
    status = models.CharField(max_length=20, choices=ContractStatus.CHOICES, default=ContractStatus.ACTIVE)
    terms = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name='contracts')
    tenant = models.ForeignKey(Tenant, on_delete=models.PROTECT, related_name='contracts')
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Contract"
        verbose_name_plural = "Contracts"
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gte=F('start_date')),
                name='contract_end_after_start',
            ),
        ]
        indexes = [
            models.Index(fields=['property', 'is_active'], name='contract_property_active_idx'),
            models.Index(fields=['tenant', 'status'], name='contract_tenant_status_idx'),
            models.Index(fields=['status'], name='contract_status_idx'),
        ]

    def __str__(self):
        return f"{self.contract_number} - {self.property.title} / {self.tenant.full_name}"

    @builtins.property
    def is_terminated(self):
        return self.status == ContractStatus.TERMINATED
