"""
Contract repository - Data access layer for Contract domain.
"""
from django.db.models import QuerySet, Q
from core.repositories import BaseRepository
from .models import Contract


class ContractRepository(BaseRepository[Contract]):
    """Repository for Contract model"""

    def get_queryset(self) -> QuerySet[Contract]:
        return self.model.objects.select_related('property', 'property__owner', 'tenant')

    def filter_listing(self, status=None, property_id=None, tenant_id=None,
                       active=None, search=None) -> QuerySet[Contract]:
        queryset = self.get_queryset()
        if status:
            queryset = queryset.filter(status=status)
        if property_id is not None:
            queryset = queryset.filter(property_id=property_id)
        if tenant_id is not None:
            queryset = queryset.filter(tenant_id=tenant_id)
        if active is not None:
            queryset = queryset.filter(is_active=active)
        if search:
            queryset = queryset.filter(
                Q(contract_number__icontains=search) |
                Q(property__title__icontains=search) |
                Q(tenant__first_name__icontains=search) |
                Q(tenant__last_name__icontains=search)
            )
        return queryset

    def active(self) -> QuerySet[Contract]:
        return self.get_queryset().filter(is_active=True)

    def without_payments(self) -> QuerySet[Contract]:
        return self.active().filter(payments__isnull=True)
