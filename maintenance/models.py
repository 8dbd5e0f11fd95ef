import builtins

from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from core.constants import (
    MaintenanceStatus, MaintenancePriority, MaintenanceCategory, ImageType,
)
from properties.models import Property
from tenants.models import Tenant


class MaintenanceRequest(models.Model):
    """Maintenance/repair request raised against a property"""
    request_number = models.CharField(max_length=50, unique=True, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField()
    category = models.CharField(max_length=20, choices=MaintenanceCategory.CHOICES,
                                default=MaintenanceCategory.OTHER)
    priority = models.PositiveSmallIntegerField(choices=MaintenancePriority.CHOICES,
                                                default=MaintenancePriority.MEDIUM)
    status = models.CharField(max_length=20, choices=MaintenanceStatus.CHOICES,
                              default=MaintenanceStatus.SUBMITTED)
    estimated_cost = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True,
                                         validators=[MinValueValidator(0)])
    actual_cost = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True,
                                      validators=[MinValueValidator(0)])
    currency = models.CharField(max_length=3, default='EGP')
    request_date = models.DateTimeField(default=timezone.now)
    scheduled_date = models.DateTimeField(null=True, blank=True)
    completed_date = models.DateTimeField(null=True, blank=True)
    assigned_to = models.CharField(max_length=200, blank=True,
                                   help_text="e.g., 'Plumber', 'Electrician', contractor name")
    assigned_to_phone = models.CharField(max_length=20, blank=True)
    completion_notes = models.TextField(blank=True)
    internal_notes = models.TextField(blank=True)
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name='maintenance_requests')
    tenant = models.ForeignKey(Tenant, on_delete=models.SET_NULL, related_name='maintenance_requests',
                               null=True, blank=True)
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-request_date']
        verbose_name = "Maintenance Request"
        verbose_name_plural = "Maintenance Requests"
        indexes = [
            models.Index(fields=['status', 'priority'], name='maint_status_priority_idx'),
            models.Index(fields=['property', 'status'], name='maint_property_status_idx'),
            models.Index(fields=['request_date'], name='maint_request_date_idx'),
        ]

    def __str__(self):
        return f"{self.request_number} - {self.title} ({self.get_status_display()})"

    @builtins.property
    def is_urgent(self):
        return self.priority in MaintenancePriority.URGENT

    @builtins.property
    def is_closed(self):
        return self.status in MaintenanceStatus.CLOSED

    @builtins.property
    def days_since_request(self):
        """Whole days elapsed since the request was raised"""
        return (timezone.now() - self.request_date).days


class MaintenanceImage(models.Model):
    """Image metadata attached to a maintenance request"""
    maintenance_request = models.ForeignKey(MaintenanceRequest, on_delete=models.PROTECT, related_name='images')
    file_name = models.CharField(max_length=255)
    file_path = models.CharField(max_length=500)
    content_type = models.CharField(max_length=100, blank=True)
    file_size = models.PositiveIntegerField(default=0, help_text="File size in bytes")
    image_type = models.CharField(max_length=20, choices=ImageType.CHOICES, default=ImageType.OTHER)
    caption = models.CharField(max_length=255, blank=True)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['uploaded_at', 'id']
        verbose_name = "Maintenance Image"
        verbose_name_plural = "Maintenance Images"

    def __str__(self):
        return f"{self.maintenance_request.request_number} - {self.file_name}"
