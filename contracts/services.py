"""
Contract service - contract lifecycle and payment schedule generation.

A contract is created Active and can be terminated once. Creating a contract
marks its property Rented; terminating it makes the property Available again.
"""
from typing import List
from dateutil.relativedelta import relativedelta
from django.db import transaction, IntegrityError
from django.utils import timezone

from core.constants import ContractStatus, PaymentStatus, PaymentType, PropertyStatus
from core.dto import ContractDTO
from core.exceptions import ConflictError
from core.numbering import contract_numbers, schedule_receipt_number
from core.services import BaseService
from core.validators import ContractValidator
from payments.models import Payment
from properties.models import Property
from properties.repositories import PropertyRepository
from tenants.models import Tenant
from tenants.repositories import TenantRepository
from .models import Contract
from .repositories import ContractRepository

EDITABLE_FIELDS = ('start_date', 'end_date', 'monthly_rent', 'security_deposit', 'terms', 'notes')


class ContractService(BaseService):
    """Service for the contract lifecycle"""

    def __init__(self):
        super().__init__()
        self.contract_repo = ContractRepository(Contract)
        self.property_repo = PropertyRepository(Property)
        self.tenant_repo = TenantRepository(Tenant)
        self.numbers = contract_numbers(Contract)

    @transaction.atomic
    def create_contract(self, data: ContractDTO) -> Contract:
        """
        Create an Active contract and mark its property Rented.

        Raises:
            ValidationError: invalid dates or amounts
            NotFoundError: property or tenant does not exist
            ConflictError: property is not available or already leased
        """
        ContractValidator.validate_dates(data.start_date, data.end_date)
        ContractValidator.validate_amounts(data.monthly_rent, data.security_deposit)

        tenant = self.tenant_repo.get_or_raise(data.tenant_id)
        prop = self.property_repo.lock(data.property_id)

        if self.property_repo.has_active_contract(prop.id):
            raise ConflictError(
                message=f"Property {prop.id} already has an active contract",
                code="PROPERTY_ALREADY_LEASED",
                details={'property_id': prop.id}
            )
        if prop.status != PropertyStatus.AVAILABLE:
            raise ConflictError(
                message=f"Property {prop.id} is not available (status: {prop.status})",
                code="PROPERTY_NOT_AVAILABLE",
                details={'property_id': prop.id, 'status': prop.status}
            )

        contract = self.numbers.create_unique(
            lambda number: self.contract_repo.create(
                contract_number=number,
                property=prop,
                tenant=tenant,
                start_date=data.start_date,
                end_date=data.end_date,
                monthly_rent=data.monthly_rent,
                security_deposit=data.security_deposit or 0,
                terms=data.terms or '',
                notes=data.notes or '',
                status=ContractStatus.ACTIVE,
                is_active=True,
            )
        )

        self.property_repo.update(prop, status=PropertyStatus.RENTED)

        self.log_info(
            f"Contract created: {contract.contract_number}",
            contract_id=contract.id, property_id=prop.id, tenant_id=tenant.id
        )
        return contract

    @transaction.atomic
    def update_contract(self, contract_id: int, data: dict, expected_version: int = None) -> Contract:
        """Update the editable terms of a contract; the number never changes"""
        contract = self.contract_repo.get_or_raise(contract_id)
        changes = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}

        ContractValidator.validate_dates(
            changes.get('start_date', contract.start_date),
            changes.get('end_date', contract.end_date),
        )
        ContractValidator.validate_amounts(
            changes.get('monthly_rent', contract.monthly_rent),
            changes.get('security_deposit', contract.security_deposit),
        )

        contract = self.contract_repo.update(contract, expected_version=expected_version, **changes)
        self.log_info(f"Contract updated: {contract.contract_number}", contract_id=contract.id)
        return contract

    @transaction.atomic
    def terminate_contract(self, contract_id: int, reason: str = '') -> Contract:
        """
        Terminate an active contract and release its property.

        Raises:
            NotFoundError: contract does not exist
            ConflictError: contract is already terminated
        """
        contract = self.contract_repo.lock(contract_id)
        if contract.is_terminated or not contract.is_active:
            raise ConflictError(
                message=f"Contract {contract.contract_number} is already terminated",
                code="CONTRACT_ALREADY_TERMINATED",
                details={'contract_id': contract.id}
            )

        today = timezone.localdate()
        note = f"\nTerminated on {today:%Y-%m-%d}: {reason or ''}"
        contract = self.contract_repo.update(
            contract,
            status=ContractStatus.TERMINATED,
            is_active=False,
            notes=(contract.notes or '') + note,
        )

        prop = self.property_repo.lock(contract.property_id)
        self.property_repo.update(prop, status=PropertyStatus.AVAILABLE)

        self.log_info(
            f"Contract terminated: {contract.contract_number}",
            contract_id=contract.id, property_id=prop.id, reason=reason
        )
        return contract

    def build_schedule(self, contract: Contract) -> List[Payment]:
        """
        One Pending rent payment per month from start_date while the due date
        is on or before end_date. Each due date is one calendar month after
        the previous one, so a day clamped at a short month stays clamped.
        """
        payments = []
        cursor = contract.start_date
        sequence = 1
        while cursor <= contract.end_date:
            payments.append(Payment(
                contract=contract,
                receipt_number=schedule_receipt_number(contract.contract_number, sequence),
                payment_type=PaymentType.RENT,
                status=PaymentStatus.PENDING,
                amount=contract.monthly_rent,
                due_date=cursor,
                notes=f"Monthly rent for {cursor:%B %Y}",
            ))
            cursor = cursor + relativedelta(months=1)
            sequence += 1
        return payments

    @transaction.atomic
    def generate_payment_schedule(self, contract_id: int) -> List[Payment]:
        """
        Expand a contract into its monthly payment schedule.

        Runs at most once per contract: the contract row is locked for the
        check and the insert, and the unique receipt numbers reject a
        duplicate schedule from a concurrent writer.

        Raises:
            NotFoundError: contract does not exist
            ConflictError: payments already exist for the contract
        """
        contract = self.contract_repo.lock(contract_id)
        if contract.payments.exists():
            raise ConflictError(
                message="Payments already generated for this contract",
                code="PAYMENTS_ALREADY_GENERATED",
                details={'contract_id': contract.id}
            )

        payments = self.build_schedule(contract)
        try:
            with transaction.atomic():
                created = Payment.objects.bulk_create(payments)
        except IntegrityError as e:
            raise ConflictError(
                message="Payments already generated for this contract",
                code="PAYMENTS_ALREADY_GENERATED",
                details={'contract_id': contract.id}
            ) from e

        self.log_info(
            f"Payment schedule generated: {contract.contract_number}",
            contract_id=contract.id, payments=len(created)
        )
        return created
