from django.db import models
from django.db.models import Q
from django.core.validators import MinValueValidator
from core.constants import ContractStatus


class Tenant(models.Model):
    """Tenant - party to one or more rental contracts"""
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(max_length=255, unique=True)
    phone = models.CharField(max_length=20)
    alternate_phone = models.CharField(max_length=20, blank=True)
    address = models.CharField(max_length=500, blank=True)
    national_id = models.CharField(max_length=50, blank=True,
                                   help_text="Unique when present")
    occupation = models.CharField(max_length=100, blank=True)
    company = models.CharField(max_length=200, blank=True)
    monthly_income = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True,
                                         validators=[MinValueValidator(0)])
    emergency_contact = models.CharField(max_length=100, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['last_name', 'first_name']
        verbose_name = "Tenant"
        verbose_name_plural = "Tenants"
        constraints = [
            models.UniqueConstraint(
                fields=['national_id'],
                condition=~Q(national_id=''),
                name='tenant_national_id_unique',
            ),
        ]
        indexes = [
            models.Index(fields=['last_name', 'first_name'], name='tenant_name_idx'),
        ]

    def __str__(self):
        return f"{self.full_name} ({self.phone})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def current_contract(self):
        """Get current active contract"""
        return self.contracts.filter(status=ContractStatus.ACTIVE).first()
