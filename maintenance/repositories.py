"""
Maintenance repository - Data access layer for maintenance requests.
"""
from django.db.models import QuerySet
from core.constants import MaintenancePriority, MaintenanceStatus
from core.repositories import BaseRepository
from .models import MaintenanceRequest


class MaintenanceRequestRepository(BaseRepository[MaintenanceRequest]):
    """Repository for MaintenanceRequest model"""

    def get_queryset(self) -> QuerySet[MaintenanceRequest]:
        return self.model.objects.select_related('property', 'tenant')

    def filter_listing(self, status=None, priority=None, category=None,
                       property_id=None, tenant_id=None) -> QuerySet[MaintenanceRequest]:
        queryset = self.get_queryset()
        if status:
            queryset = queryset.filter(status=status)
        if priority is not None:
            queryset = queryset.filter(priority=priority)
        if category:
            queryset = queryset.filter(category=category)
        if property_id is not None:
            queryset = queryset.filter(property_id=property_id)
        if tenant_id is not None:
            queryset = queryset.filter(tenant_id=tenant_id)
        return queryset

    def urgent_open(self) -> QuerySet[MaintenanceRequest]:
        """High/Emergency requests still open, most urgent and oldest first"""
        return (
            self.get_queryset()
            .filter(priority__in=MaintenancePriority.URGENT)
            .exclude(status__in=MaintenanceStatus.CLOSED)
            .order_by('-priority', 'request_date', 'id')
        )
