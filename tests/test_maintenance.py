"""
Tests for maintenance requests: lifecycle, delete guard and urgent listing.
"""
from decimal import Decimal

import pytest

from core.constants import MaintenancePriority, MaintenanceStatus
from core.dto import MaintenanceRequestDTO
from core.exceptions import ConflictError, NotFoundError, ValidationError
from maintenance.models import MaintenanceRequest


@pytest.fixture
def raise_request(maintenance_service, prop):
    def _raise(title="Leaking sink", priority=MaintenancePriority.MEDIUM, **extra):
        return maintenance_service.create_request(MaintenanceRequestDTO(
            property_id=extra.pop('property_id', prop.id),
            title=title,
            description="Water under the kitchen sink",
            priority=priority,
            **extra,
        ))
    return _raise


# =============================================================================
# Create
# =============================================================================

@pytest.mark.django_db
class TestCreateRequest:

    def test_defaults(self, raise_request, settings):
        request = raise_request()

        assert request.status == MaintenanceStatus.SUBMITTED
        assert request.request_number.startswith("MR")
        assert request.currency == settings.RENTAL_DEFAULT_CURRENCY
        assert request.tenant is None

    def test_with_tenant(self, raise_request, tenant):
        request = raise_request(tenant_id=tenant.id)
        assert request.tenant == tenant

    def test_invalid_priority(self, raise_request):
        with pytest.raises(ValidationError):
            raise_request(priority=9)

    def test_invalid_category(self, raise_request):
        with pytest.raises(ValidationError):
            raise_request(category="Gardening")

    def test_missing_title(self, raise_request):
        with pytest.raises(ValidationError) as exc_info:
            raise_request(title="")
        assert exc_info.value.code == "REQUIRED_FIELD"

    def test_unknown_property(self, raise_request):
        with pytest.raises(NotFoundError):
            raise_request(property_id=999999)


# =============================================================================
# Lifecycle
# =============================================================================

@pytest.mark.django_db
class TestRequestLifecycle:

    def test_assign_then_complete(self, raise_request, maintenance_service):
        request = raise_request()

        assigned = maintenance_service.assign(request.id, "Plumber Ali", "0120000000")
        assert assigned.status == MaintenanceStatus.IN_PROGRESS
        assert assigned.assigned_to == "Plumber Ali"

        completed = maintenance_service.complete(request.id, Decimal("350.00"), "Replaced trap")
        assert completed.status == MaintenanceStatus.COMPLETED
        assert completed.completed_date is not None
        assert completed.actual_cost == Decimal("350.00")

    def test_assign_requires_assignee(self, raise_request, maintenance_service):
        with pytest.raises(ValidationError):
            maintenance_service.assign(raise_request().id, "")

    def test_completed_is_terminal(self, raise_request, maintenance_service):
        request = raise_request()
        maintenance_service.complete(request.id)

        with pytest.raises(ConflictError) as exc_info:
            maintenance_service.assign(request.id, "Late worker")
        assert exc_info.value.code == "INVALID_STATUS_TRANSITION"

        with pytest.raises(ConflictError):
            maintenance_service.update_status(request.id, MaintenanceStatus.SUBMITTED)

    def test_on_hold_can_resume(self, raise_request, maintenance_service):
        request = raise_request()
        maintenance_service.update_status(request.id, MaintenanceStatus.ON_HOLD)
        resumed = maintenance_service.update_status(request.id, MaintenanceStatus.IN_PROGRESS)
        assert resumed.status == MaintenanceStatus.IN_PROGRESS

    def test_on_hold_cannot_complete_directly(self, raise_request, maintenance_service):
        request = raise_request()
        maintenance_service.update_status(request.id, MaintenanceStatus.ON_HOLD)
        with pytest.raises(ConflictError):
            maintenance_service.complete(request.id)

    def test_unknown_status(self, raise_request, maintenance_service):
        with pytest.raises(ValidationError) as exc_info:
            maintenance_service.update_status(raise_request().id, "Done")
        assert exc_info.value.code == "INVALID_STATUS"

    def test_status_completed_sets_completed_date(self, raise_request, maintenance_service):
        request = maintenance_service.update_status(raise_request().id, MaintenanceStatus.COMPLETED)
        assert request.completed_date is not None

    def test_urgent_and_closed_flags(self, raise_request, maintenance_service, prop):
        request = raise_request(priority=MaintenancePriority.HIGH)
        assert request.is_urgent is True
        assert request.is_closed is False
        assert request.property == prop
        assert request.days_since_request == 0

        cancelled = maintenance_service.update_status(request.id, MaintenanceStatus.CANCELLED)
        assert cancelled.is_closed is True
        assert raise_request(priority=MaintenancePriority.LOW).is_urgent is False


# =============================================================================
# Delete guard
# =============================================================================

@pytest.mark.django_db
class TestDeleteRequest:

    def test_delete_submitted(self, raise_request, maintenance_service):
        request = raise_request()
        maintenance_service.delete_request(request.id)
        assert not MaintenanceRequest.objects.filter(id=request.id).exists()

    def test_delete_cancelled(self, raise_request, maintenance_service):
        request = raise_request()
        maintenance_service.update_status(request.id, MaintenanceStatus.CANCELLED)
        maintenance_service.delete_request(request.id)
        assert not MaintenanceRequest.objects.filter(id=request.id).exists()

    @pytest.mark.parametrize("status", [
        MaintenanceStatus.IN_PROGRESS, MaintenanceStatus.ON_HOLD, MaintenanceStatus.COMPLETED,
    ])
    def test_delete_other_states_conflicts(self, raise_request, maintenance_service, status):
        request = raise_request()
        maintenance_service.update_status(request.id, status)

        with pytest.raises(ConflictError) as exc_info:
            maintenance_service.delete_request(request.id)
        assert exc_info.value.code == "MAINTENANCE_NOT_DELETABLE"

    def test_tenant_delete_keeps_request(self, raise_request, tenant):
        from tenants.services import TenantService

        request = raise_request(tenant_id=tenant.id)
        TenantService().delete_tenant(tenant.id)

        request.refresh_from_db()
        assert request.tenant is None


# =============================================================================
# Urgent
# =============================================================================

@pytest.mark.django_db
class TestUrgentRequests:

    def test_urgent_open_ordering(self, raise_request, maintenance_service):
        raise_request("Low", MaintenancePriority.LOW)
        high = raise_request("High", MaintenancePriority.HIGH)
        emergency = raise_request("Emergency", MaintenancePriority.EMERGENCY)
        second_high = raise_request("Second high", MaintenancePriority.HIGH)
        closed = raise_request("Closed emergency", MaintenancePriority.EMERGENCY)
        maintenance_service.complete(closed.id)

        assert list(maintenance_service.list_urgent()) == [emergency, high, second_high]
