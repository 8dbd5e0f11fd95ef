"""
Tests for the delete guards and uniqueness rules on owners, properties and tenants.
"""
from decimal import Decimal

import pytest
from django.db import IntegrityError

from core.constants import PropertyStatus
from core.exceptions import ConflictError, NotFoundError, ValidationError
from owners.models import Owner
from owners.services import OwnerService
from properties.models import Property, PropertyImage
from properties.services import PropertyService
from tenants.models import Tenant
from tenants.services import TenantService


# =============================================================================
# Owners
# =============================================================================

@pytest.mark.django_db
class TestOwnerGuards:

    def test_delete_owner_without_properties(self, db):
        owner = OwnerService().create_owner({
            'first_name': "Sara", 'last_name': "Adel", 'email': "sara@example.com", 'phone': "1",
        })
        OwnerService().delete_owner(owner.id)
        assert not Owner.objects.filter(id=owner.id).exists()

    def test_delete_owner_with_properties_conflicts(self, owner, prop):
        with pytest.raises(ConflictError) as exc_info:
            OwnerService().delete_owner(owner.id)
        assert exc_info.value.code == "OWNER_HAS_PROPERTIES"

    def test_duplicate_email_is_case_insensitive(self, owner):
        with pytest.raises(ValidationError) as exc_info:
            OwnerService().create_owner({
                'first_name': "Other", 'last_name': "Owner",
                'email': owner.email.upper(), 'phone': "2",
            })
        assert exc_info.value.code == "DUPLICATE_EMAIL"

    def test_update_keeps_own_email(self, owner):
        updated = OwnerService().update_owner(owner.id, {'email': owner.email, 'phone': "999"})
        assert updated.phone == "999"

    def test_delete_unknown_owner(self, db):
        with pytest.raises(NotFoundError):
            OwnerService().delete_owner(999999)

    def test_email_race_maps_to_duplicate_email(self, owner, monkeypatch):
        service = OwnerService()
        monkeypatch.setattr(service, '_check_email', lambda *args, **kwargs: None)
        with pytest.raises(ValidationError) as exc_info:
            service.create_owner({
                'first_name': "Late", 'last_name': "Writer", 'email': owner.email, 'phone': "3",
            })
        assert exc_info.value.code == "DUPLICATE_EMAIL"

    def test_unrelated_integrity_error_propagates(self, db, monkeypatch):
        service = OwnerService()

        def failing_create(**kwargs):
            raise IntegrityError("NOT NULL constraint failed: owners_owner.phone")

        monkeypatch.setattr(service.owner_repo, 'create', failing_create)
        with pytest.raises(IntegrityError):
            service.create_owner({
                'first_name': "Sara", 'last_name': "Adel", 'email': "fresh@example.com", 'phone': "1",
            })

    def test_unrelated_integrity_error_on_update_propagates(self, owner, monkeypatch):
        service = OwnerService()

        def failing_update(instance, expected_version=None, **kwargs):
            raise IntegrityError("CHECK constraint failed")

        monkeypatch.setattr(service.owner_repo, 'update', failing_update)
        with pytest.raises(IntegrityError):
            service.update_owner(owner.id, {'email': "changed@example.com"})


# =============================================================================
# Properties
# =============================================================================

@pytest.mark.django_db
class TestPropertyGuards:

    def test_create_requires_existing_owner(self, db):
        with pytest.raises(NotFoundError):
            PropertyService().create_property({
                'owner_id': 999999, 'title': "Flat", 'address': "A", 'city': "Giza",
                'area': Decimal("50"), 'monthly_rent': Decimal("500"),
            })

    def test_create_with_owner_id(self, owner):
        prop = PropertyService().create_property({
            'owner_id': owner.id, 'title': "Flat", 'address': "A", 'city': "Giza",
            'area': Decimal("50"), 'monthly_rent': Decimal("500"),
        })
        assert prop.owner == owner
        assert prop.is_available

    def test_delete_with_active_contract_conflicts(self, contract, prop):
        with pytest.raises(ConflictError) as exc_info:
            PropertyService().delete_property(prop.id)
        assert exc_info.value.code == "PROPERTY_HAS_ACTIVE_CONTRACT"

    def test_delete_with_terminated_contract_is_restricted(self, contract, contract_service, prop):
        contract_service.terminate_contract(contract.id)
        with pytest.raises(ConflictError) as exc_info:
            PropertyService().delete_property(prop.id)
        assert exc_info.value.code == "REFERENCED_RECORD"

    def test_delete_with_images_is_restricted(self, prop):
        PropertyImage.objects.create(
            property=prop, file_name="front.jpg", file_path="properties/front.jpg",
            content_type="image/jpeg", file_size=1024,
        )
        with pytest.raises(ConflictError) as exc_info:
            PropertyService().delete_property(prop.id)
        assert exc_info.value.code == "REFERENCED_RECORD"

    def test_delete_free_property(self, prop):
        PropertyService().delete_property(prop.id)
        assert not Property.objects.filter(id=prop.id).exists()

    def test_search_requires_query(self, db):
        with pytest.raises(ValidationError):
            PropertyService().search("   ")

    def test_search_matches_city(self, make_property):
        alex = make_property(title="Sea flat", city="Alexandria")
        make_property(title="Desert villa", city="Aswan")
        assert list(PropertyService().search("alexandria")) == [alex]

    def test_available_and_maintenance_are_interchangeable(self, prop):
        prop = PropertyService().update_property(prop.id, {'status': PropertyStatus.MAINTENANCE})
        assert prop.status == PropertyStatus.MAINTENANCE
        prop = PropertyService().update_property(prop.id, {'status': PropertyStatus.AVAILABLE})
        assert prop.status == PropertyStatus.AVAILABLE

    def test_status_cannot_be_set_to_rented(self, prop):
        with pytest.raises(ConflictError) as exc_info:
            PropertyService().update_property(prop.id, {'status': PropertyStatus.RENTED})
        assert exc_info.value.code == "INVALID_STATUS_TRANSITION"
        prop.refresh_from_db()
        assert prop.status == PropertyStatus.AVAILABLE

    def test_leased_property_keeps_rented_status(self, contract, prop):
        with pytest.raises(ConflictError) as exc_info:
            PropertyService().update_property(prop.id, {'status': PropertyStatus.AVAILABLE})
        assert exc_info.value.code == "PROPERTY_HAS_ACTIVE_CONTRACT"
        prop.refresh_from_db()
        assert prop.status == PropertyStatus.RENTED

    def test_leased_property_other_fields_still_editable(self, contract, prop):
        updated = PropertyService().update_property(
            prop.id, {'status': PropertyStatus.RENTED, 'title': "Renamed"})
        assert updated.title == "Renamed"
        assert updated.status == PropertyStatus.RENTED

    def test_create_as_rented_conflicts(self, owner):
        with pytest.raises(ConflictError):
            PropertyService().create_property({
                'owner_id': owner.id, 'title': "Flat", 'address': "A", 'city': "Giza",
                'area': Decimal("50"), 'monthly_rent': Decimal("500"), 'status': PropertyStatus.RENTED,
            })


# =============================================================================
# Tenants
# =============================================================================

@pytest.mark.django_db
class TestTenantGuards:

    def test_duplicate_email(self, tenant):
        with pytest.raises(ValidationError) as exc_info:
            TenantService().create_tenant({
                'first_name': "X", 'last_name': "Y", 'email': tenant.email, 'phone': "1",
            })
        assert exc_info.value.code == "DUPLICATE_EMAIL"

    def test_duplicate_national_id(self, make_tenant):
        make_tenant(national_id="29001011234567")
        with pytest.raises(ValidationError) as exc_info:
            TenantService().create_tenant({
                'first_name': "X", 'last_name': "Y", 'email': "x@example.com",
                'phone': "1", 'national_id': "29001011234567",
            })
        assert exc_info.value.code == "DUPLICATE_NATIONAL_ID"

    def test_blank_national_ids_do_not_collide(self, make_tenant):
        make_tenant(national_id="")
        make_tenant(national_id="")
        assert Tenant.objects.filter(national_id="").count() == 2

    def test_unrelated_integrity_error_propagates(self, db, monkeypatch):
        service = TenantService()

        def failing_create(**kwargs):
            raise IntegrityError("NOT NULL constraint failed: tenants_tenant.phone")

        monkeypatch.setattr(service.tenant_repo, 'create', failing_create)
        with pytest.raises(IntegrityError):
            service.create_tenant({
                'first_name': "Omar", 'last_name': "Fresh", 'email': "omar.fresh@example.com", 'phone': "1",
            })

    def test_delete_with_active_contract_conflicts(self, contract, tenant):
        with pytest.raises(ConflictError) as exc_info:
            TenantService().delete_tenant(tenant.id)
        assert exc_info.value.code == "TENANT_HAS_ACTIVE_CONTRACT"

    def test_delete_free_tenant(self, tenant):
        TenantService().delete_tenant(tenant.id)
        assert not Tenant.objects.filter(id=tenant.id).exists()

    def test_contract_history(self, contract, tenant):
        assert list(TenantService().get_contracts(tenant.id)) == [contract]

    def test_payment_history(self, contract, contract_service, tenant):
        contract_service.generate_payment_schedule(contract.id)
        assert TenantService().get_payments(tenant.id).count() == 4
