"""
Shared test fixtures: one owner, an available property, a tenant and an
active contract built through the services.
"""
from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from core.dto import ContractDTO
from owners.models import Owner
from properties.models import Property
from tenants.models import Tenant
from contracts.services import ContractService
from payments.services import PaymentLedgerService
from maintenance.services import MaintenanceService


# =============================================================================
# Entity Fixtures
# =============================================================================

@pytest.fixture
def owner(db):
    return Owner.objects.create(
        first_name="Mona",
        last_name="Hassan",
        email="mona.hassan@example.com",
        phone="01000000001",
    )


@pytest.fixture
def make_property(owner):
    """Factory for available properties owned by ``owner``"""
    def _make(title="Nile View Apartment", city="Cairo", monthly_rent=Decimal("1000.00"), **extra):
        return Property.objects.create(
            owner=owner,
            title=title,
            address="12 Corniche St",
            city=city,
            area=Decimal("120.00"),
            monthly_rent=monthly_rent,
            **extra,
        )
    return _make


@pytest.fixture
def prop(make_property):
    return make_property()


@pytest.fixture
def make_tenant(db):
    """Factory for tenants with distinct emails"""
    counter = {'n': 0}

    def _make(**extra):
        counter['n'] += 1
        fields = {
            'first_name': "Omar",
            'last_name': f"Tenant{counter['n']}",
            'email': f"tenant{counter['n']}@example.com",
            'phone': "01100000000",
        }
        fields.update(extra)
        return Tenant.objects.create(**fields)
    return _make


@pytest.fixture
def tenant(make_tenant):
    return make_tenant()


@pytest.fixture
def contract_dto(prop, tenant):
    return ContractDTO(
        property_id=prop.id,
        tenant_id=tenant.id,
        start_date=date(2024, 1, 15),
        end_date=date(2024, 4, 15),
        monthly_rent=Decimal("1000.00"),
        security_deposit=Decimal("2000.00"),
    )


@pytest.fixture
def contract(contract_service, contract_dto):
    return contract_service.create_contract(contract_dto)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def contract_service():
    return ContractService()


@pytest.fixture
def payment_service():
    return PaymentLedgerService()


@pytest.fixture
def maintenance_service():
    return MaintenanceService()


@pytest.fixture
def api_client():
    return APIClient()
