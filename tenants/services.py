"""
Tenant service - Business logic layer for Tenant domain.
"""
from django.db import transaction, IntegrityError
from core.services import BaseService
from core.exceptions import ConflictError, ValidationError
from .repositories import TenantRepository
from .models import Tenant


class TenantService(BaseService):
    """Service for tenant records, uniqueness checks and the delete guard"""

    def __init__(self):
        super().__init__()
        self.tenant_repo = TenantRepository(Tenant)

    def _check_unique(self, data: dict, exclude_id: int = None):
        email = data.get('email')
        if email and self.tenant_repo.email_taken(email, exclude_id=exclude_id):
            raise ValidationError(
                message=f"A tenant with email {email} already exists",
                code="DUPLICATE_EMAIL",
                details={'field': 'email'}
            )

        national_id = data.get('national_id')
        if self.tenant_repo.national_id_taken(national_id, exclude_id=exclude_id):
            raise ValidationError(
                message=f"A tenant with national ID {national_id} already exists",
                code="DUPLICATE_NATIONAL_ID",
                details={'field': 'national_id'}
            )

    def create_tenant(self, data: dict) -> Tenant:
        self._check_unique(data)
        try:
            with transaction.atomic():
                tenant = self.tenant_repo.create(**data)
        except IntegrityError:
            # Lost a race against a concurrent insert of the same email or national ID
            self._check_unique(data)
            raise

        self.log_info(f"Tenant created: {tenant.full_name}", tenant_id=tenant.id)
        return tenant

    def update_tenant(self, tenant_id: int, data: dict, expected_version: int = None) -> Tenant:
        tenant = self.tenant_repo.get_or_raise(tenant_id)
        self._check_unique(data, exclude_id=tenant.id)
        try:
            with transaction.atomic():
                tenant = self.tenant_repo.update(tenant, expected_version=expected_version, **data)
        except IntegrityError:
            self._check_unique(data, exclude_id=tenant_id)
            raise

        self.log_info(f"Tenant updated: {tenant.full_name}", tenant_id=tenant.id)
        return tenant

    @transaction.atomic
    def delete_tenant(self, tenant_id: int) -> None:
        """Delete a tenant with no active contract"""
        tenant = self.tenant_repo.lock(tenant_id)
        if self.tenant_repo.has_active_contract(tenant.id):
            raise ConflictError(
                message="Cannot delete tenant with an active contract",
                code="TENANT_HAS_ACTIVE_CONTRACT",
                details={'tenant_id': tenant.id}
            )

        self.tenant_repo.delete(tenant)
        self.log_info(f"Tenant deleted: {tenant.full_name}", tenant_id=tenant_id)

    def get_contracts(self, tenant_id: int):
        from contracts.models import Contract

        self.tenant_repo.get_or_raise(tenant_id)
        return (
            Contract.objects.filter(tenant_id=tenant_id)
            .select_related('property', 'tenant')
            .order_by('-start_date', '-id')
        )

    def get_payments(self, tenant_id: int):
        from payments.models import Payment

        self.tenant_repo.get_or_raise(tenant_id)
        return (
            Payment.objects.filter(contract__tenant_id=tenant_id)
            .select_related('contract', 'contract__property')
            .order_by('due_date', 'id')
        )
