"""
Tenant repository - Data access layer for Tenant domain.
"""
from django.db.models import QuerySet, Q
from core.constants import ContractStatus
from core.repositories import BaseRepository
from .models import Tenant


class TenantRepository(BaseRepository[Tenant]):
    """Repository for Tenant model"""

    def _taken(self, exclude_id=None, **filters) -> bool:
        queryset = self.get_all(**filters)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def email_taken(self, email: str, exclude_id: int = None) -> bool:
        return self._taken(exclude_id=exclude_id, email__iexact=email)

    def national_id_taken(self, national_id: str, exclude_id: int = None) -> bool:
        if not national_id:
            return False
        return self._taken(exclude_id=exclude_id, national_id=national_id)

    def has_active_contract(self, tenant_id: int) -> bool:
        return self.exists(id=tenant_id, contracts__status=ContractStatus.ACTIVE)

    def search(self, term: str = None) -> QuerySet[Tenant]:
        queryset = self.get_queryset()
        if term:
            queryset = queryset.filter(
                Q(first_name__icontains=term) |
                Q(last_name__icontains=term) |
                Q(email__icontains=term) |
                Q(phone__icontains=term) |
                Q(national_id__icontains=term)
            )
        return queryset
