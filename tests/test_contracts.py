"""
Tests for the contract lifecycle and payment schedule generation.
"""
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest
from django.utils import timezone

from core.constants import ContractStatus, PaymentStatus, PaymentType, PropertyStatus
from core.exceptions import ConflictError, NotFoundError, ValidationError
from payments.models import Payment


# =============================================================================
# Create
# =============================================================================

@pytest.mark.django_db
class TestCreateContract:

    def test_creates_active_contract_and_rents_property(self, contract, prop):
        prop.refresh_from_db()
        assert contract.status == ContractStatus.ACTIVE
        assert contract.is_active is True
        assert contract.contract_number.startswith(f"CON-{timezone.now():%Y}-")
        assert prop.status == PropertyStatus.RENTED

    def test_rejects_end_before_start(self, contract_service, contract_dto, prop):
        dto = replace(contract_dto, start_date=date(2024, 5, 1), end_date=date(2024, 4, 30))
        with pytest.raises(ValidationError) as exc_info:
            contract_service.create_contract(dto)

        assert exc_info.value.code == "INVALID_END_DATE"
        prop.refresh_from_db()
        assert prop.status == PropertyStatus.AVAILABLE

    def test_single_day_contract_is_allowed(self, contract_service, contract_dto):
        dto = replace(contract_dto, start_date=date(2024, 5, 1), end_date=date(2024, 5, 1))
        contract = contract_service.create_contract(dto)
        assert contract.start_date == contract.end_date

    def test_rejects_negative_rent(self, contract_service, contract_dto):
        with pytest.raises(ValidationError) as exc_info:
            contract_service.create_contract(replace(contract_dto, monthly_rent=Decimal("-1")))
        assert exc_info.value.code == "NEGATIVE_AMOUNT"

    def test_rejects_leased_property(self, contract, contract_service, contract_dto, make_tenant):
        with pytest.raises(ConflictError) as exc_info:
            contract_service.create_contract(replace(contract_dto, tenant_id=make_tenant().id))
        assert exc_info.value.code == "PROPERTY_ALREADY_LEASED"

    def test_rejects_property_under_maintenance(self, contract_service, contract_dto, make_property):
        prop = make_property(title="Closed for repairs", status=PropertyStatus.MAINTENANCE)
        with pytest.raises(ConflictError) as exc_info:
            contract_service.create_contract(replace(contract_dto, property_id=prop.id))
        assert exc_info.value.code == "PROPERTY_NOT_AVAILABLE"

    def test_unknown_tenant(self, contract_service, contract_dto):
        with pytest.raises(NotFoundError):
            contract_service.create_contract(replace(contract_dto, tenant_id=999999))

    def test_unknown_property(self, contract_service, contract_dto):
        with pytest.raises(NotFoundError):
            contract_service.create_contract(replace(contract_dto, property_id=999999))


# =============================================================================
# Terminate
# =============================================================================

@pytest.mark.django_db
class TestTerminateContract:

    def test_terminate_releases_property(self, contract, contract_service, prop):
        terminated = contract_service.terminate_contract(contract.id, "Tenant relocated")

        prop.refresh_from_db()
        assert terminated.status == ContractStatus.TERMINATED
        assert terminated.is_active is False
        assert prop.status == PropertyStatus.AVAILABLE
        assert f"Terminated on {timezone.localdate():%Y-%m-%d}: Tenant relocated" in terminated.notes

    def test_terminate_twice_conflicts(self, contract, contract_service):
        contract_service.terminate_contract(contract.id, "first")
        with pytest.raises(ConflictError) as exc_info:
            contract_service.terminate_contract(contract.id, "second")
        assert exc_info.value.code == "CONTRACT_ALREADY_TERMINATED"

    def test_property_can_be_leased_again(self, contract, contract_service, contract_dto, make_tenant):
        contract_service.terminate_contract(contract.id)
        again = contract_service.create_contract(replace(contract_dto, tenant_id=make_tenant().id))
        assert again.contract_number != contract.contract_number

    def test_terminate_unknown_contract(self, contract_service):
        with pytest.raises(NotFoundError):
            contract_service.terminate_contract(999999)

    def test_model_flags_follow_status(self, contract, contract_service, prop):
        assert contract.is_terminated is False
        assert contract.property == prop
        terminated = contract_service.terminate_contract(contract.id)
        assert terminated.is_terminated is True


# =============================================================================
# Payment schedule
# =============================================================================

@pytest.mark.django_db
class TestPaymentSchedule:

    def test_monthly_schedule(self, contract, contract_service):
        payments = contract_service.generate_payment_schedule(contract.id)

        assert [p.due_date for p in payments] == [
            date(2024, 1, 15), date(2024, 2, 15), date(2024, 3, 15), date(2024, 4, 15),
        ]
        assert all(p.amount == Decimal("1000.00") for p in payments)
        assert all(p.status == PaymentStatus.PENDING for p in payments)
        assert all(p.payment_type == PaymentType.RENT for p in payments)
        assert [p.receipt_number for p in payments] == [
            f"{contract.contract_number}-P00{n}" for n in range(1, 5)
        ]
        assert Payment.objects.filter(contract=contract).count() == 4

    def test_month_end_start_stays_clamped(self, contract_service, contract_dto):
        contract = contract_service.create_contract(
            replace(contract_dto, start_date=date(2024, 1, 31), end_date=date(2024, 4, 30))
        )
        payments = contract_service.generate_payment_schedule(contract.id)

        assert [p.due_date for p in payments] == [
            date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 29), date(2024, 4, 29),
        ]

    def test_end_date_before_next_month_yields_single_payment(self, contract_service, contract_dto):
        contract = contract_service.create_contract(
            replace(contract_dto, start_date=date(2024, 1, 15), end_date=date(2024, 2, 14))
        )
        payments = contract_service.generate_payment_schedule(contract.id)
        assert [p.due_date for p in payments] == [date(2024, 1, 15)]

    def test_second_generation_conflicts(self, contract, contract_service):
        contract_service.generate_payment_schedule(contract.id)

        with pytest.raises(ConflictError) as exc_info:
            contract_service.generate_payment_schedule(contract.id)

        assert exc_info.value.code == "PAYMENTS_ALREADY_GENERATED"
        assert Payment.objects.filter(contract=contract).count() == 4

    def test_build_schedule_does_not_write(self, contract, contract_service):
        assert len(contract_service.build_schedule(contract)) == 4
        assert Payment.objects.count() == 0

    def test_contracts_without_payments(self, contract, contract_service):
        assert list(contract_service.contract_repo.without_payments()) == [contract]
        contract_service.generate_payment_schedule(contract.id)
        assert not contract_service.contract_repo.without_payments().exists()


# =============================================================================
# Update
# =============================================================================

@pytest.mark.django_db
class TestUpdateContract:

    def test_update_bumps_version(self, contract, contract_service):
        updated = contract_service.update_contract(contract.id, {'terms': "No pets"})
        assert updated.terms == "No pets"
        assert updated.version == contract.version + 1

    def test_stale_version_conflicts(self, contract, contract_service):
        contract_service.update_contract(contract.id, {'terms': "v2"})
        with pytest.raises(ConflictError) as exc_info:
            contract_service.update_contract(contract.id, {'terms': "v3"}, expected_version=1)
        assert exc_info.value.code == "CONCURRENCY_CONFLICT"
