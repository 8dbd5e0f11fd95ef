"""
Maintenance service - lifecycle of maintenance requests.

Requests start Submitted. Assigning moves them InProgress, completing moves
them Completed. OnHold parks a request until it is resubmitted, resumed or
cancelled. Completed and Cancelled are terminal.
"""
from django.conf import settings
from django.db import transaction
from django.utils import timezone

from core.constants import MaintenanceCategory, MaintenancePriority, MaintenanceStatus
from core.dto import MaintenanceRequestDTO
from core.exceptions import ConflictError, ValidationError
from core.numbering import request_numbers
from core.services import BaseService
from core.validators import AmountValidator, StatusValidator
from properties.models import Property
from properties.repositories import PropertyRepository
from tenants.models import Tenant
from tenants.repositories import TenantRepository
from .models import MaintenanceRequest
from .repositories import MaintenanceRequestRepository

EDITABLE_FIELDS = (
    'title', 'description', 'category', 'priority', 'estimated_cost',
    'currency', 'scheduled_date', 'internal_notes',
)


class MaintenanceService(BaseService):
    """Service for the maintenance request lifecycle"""

    def __init__(self):
        super().__init__()
        self.request_repo = MaintenanceRequestRepository(MaintenanceRequest)
        self.property_repo = PropertyRepository(Property)
        self.tenant_repo = TenantRepository(Tenant)
        self.numbers = request_numbers(MaintenanceRequest)

    def _transition(self, request: MaintenanceRequest, target: str):
        if not StatusValidator.can_transition(MaintenanceStatus.TRANSITIONS, request.status, target):
            raise ConflictError(
                message=f"Maintenance request {request.request_number} cannot move from {request.status} to {target}",
                code="INVALID_STATUS_TRANSITION",
                details={'from': request.status, 'to': target}
            )

    @transaction.atomic
    def create_request(self, data: MaintenanceRequestDTO) -> MaintenanceRequest:
        StatusValidator.validate_choice(data.category, MaintenanceCategory.CHOICES, 'category')
        StatusValidator.validate_choice(data.priority, MaintenancePriority.CHOICES, 'priority')
        AmountValidator.validate_amount(data.estimated_cost, 'estimated_cost', allow_none=True)
        if not data.title or not data.description:
            raise ValidationError(
                message="Title and description are required",
                code="REQUIRED_FIELD",
                details={'fields': ['title', 'description']}
            )

        prop = self.property_repo.get_or_raise(data.property_id)
        tenant = self.tenant_repo.get_or_raise(data.tenant_id) if data.tenant_id else None

        now = timezone.now()
        request = self.numbers.create_unique(
            lambda number: self.request_repo.create(
                request_number=number,
                property=prop,
                tenant=tenant,
                title=data.title,
                description=data.description,
                category=data.category,
                priority=data.priority,
                estimated_cost=data.estimated_cost,
                currency=data.currency or settings.RENTAL_DEFAULT_CURRENCY,
                internal_notes=data.internal_notes or '',
                status=MaintenanceStatus.SUBMITTED,
                request_date=now,
            ),
            now=now,
        )

        self.log_info(f"Maintenance request created: {request.request_number}",
                      request_id=request.id, property_id=prop.id, priority=request.priority)
        return request

    @transaction.atomic
    def update_request(self, request_id: int, data: dict, expected_version: int = None) -> MaintenanceRequest:
        """Edit descriptive fields; status changes go through the lifecycle methods"""
        request = self.request_repo.get_or_raise(request_id)
        changes = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}
        if 'estimated_cost' in changes:
            AmountValidator.validate_amount(changes['estimated_cost'], 'estimated_cost', allow_none=True)

        request = self.request_repo.update(request, expected_version=expected_version, **changes)
        self.log_info(f"Maintenance request updated: {request.request_number}", request_id=request.id)
        return request

    @transaction.atomic
    def assign(self, request_id: int, assigned_to: str, assigned_to_phone: str = '',
               scheduled_date=None) -> MaintenanceRequest:
        """Assign a worker and move the request InProgress"""
        if not assigned_to:
            raise ValidationError(message="assigned_to is required", code="REQUIRED_FIELD",
                                  details={'field': 'assigned_to'})

        request = self.request_repo.lock(request_id)
        self._transition(request, MaintenanceStatus.IN_PROGRESS)

        request = self.request_repo.update(
            request,
            status=MaintenanceStatus.IN_PROGRESS,
            assigned_to=assigned_to,
            assigned_to_phone=assigned_to_phone or '',
            scheduled_date=scheduled_date,
        )
        self.log_info(f"Maintenance request assigned: {request.request_number}",
                      request_id=request.id, assigned_to=assigned_to)
        return request

    @transaction.atomic
    def complete(self, request_id: int, actual_cost=None, completion_notes: str = '') -> MaintenanceRequest:
        AmountValidator.validate_amount(actual_cost, 'actual_cost', allow_none=True)

        request = self.request_repo.lock(request_id)
        self._transition(request, MaintenanceStatus.COMPLETED)

        request = self.request_repo.update(
            request,
            status=MaintenanceStatus.COMPLETED,
            completed_date=timezone.now(),
            actual_cost=actual_cost,
            completion_notes=completion_notes or '',
        )
        self.log_info(f"Maintenance request completed: {request.request_number}",
                      request_id=request.id, actual_cost=str(actual_cost))
        return request

    @transaction.atomic
    def update_status(self, request_id: int, new_status: str) -> MaintenanceRequest:
        """
        Move a request to ``new_status``.

        Raises:
            ValidationError: ``new_status`` is not a known status
            ConflictError: the transition is not allowed from the current status
        """
        StatusValidator.validate_choice(new_status, MaintenanceStatus.CHOICES)

        request = self.request_repo.lock(request_id)
        self._transition(request, new_status)

        changes = {'status': new_status}
        if new_status == MaintenanceStatus.COMPLETED:
            changes['completed_date'] = timezone.now()
        request = self.request_repo.update(request, **changes)

        self.log_info(f"Maintenance request status changed: {request.request_number}",
                      request_id=request.id, status=new_status)
        return request

    @transaction.atomic
    def delete_request(self, request_id: int) -> None:
        """Delete a request that is still Submitted or was Cancelled"""
        request = self.request_repo.lock(request_id)
        if request.status not in MaintenanceStatus.DELETABLE:
            raise ConflictError(
                message=f"Cannot delete maintenance request in status {request.status}",
                code="MAINTENANCE_NOT_DELETABLE",
                details={'status': request.status}
            )

        self.request_repo.delete(request)
        self.log_info(f"Maintenance request deleted: {request.request_number}", request_id=request_id)

    def list_urgent(self):
        return self.request_repo.urgent_open()
