from django.db import models
from django.core.validators import MinValueValidator
from core.constants import PropertyStatus, PropertyType
from owners.models import Owner


class Property(models.Model):
    """Rentable property - belongs to exactly one owner"""
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    property_type = models.CharField(max_length=20, choices=PropertyType.CHOICES, default=PropertyType.APARTMENT)
    address = models.CharField(max_length=500)
    city = models.CharField(max_length=100)
    area = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)],
                               help_text="Area in square meters")
    bedrooms = models.PositiveSmallIntegerField(default=0)
    bathrooms = models.PositiveSmallIntegerField(default=0)
    floor = models.SmallIntegerField(null=True, blank=True)
    has_parking = models.BooleanField(default=False)
    has_elevator = models.BooleanField(default=False)
    has_balcony = models.BooleanField(default=False)
    monthly_rent = models.DecimalField(max_digits=18, decimal_places=2, validators=[MinValueValidator(0)])
    security_deposit = models.DecimalField(max_digits=18, decimal_places=2, null=True, blank=True,
                                           validators=[MinValueValidator(0)])
    status = models.CharField(max_length=20, choices=PropertyStatus.CHOICES, default=PropertyStatus.AVAILABLE)
    owner = models.ForeignKey(Owner, on_delete=models.PROTECT, related_name='properties')
    version = models.PositiveIntegerField(default=1)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name = "Property"
        verbose_name_plural = "Properties"
        indexes = [
            models.Index(fields=['status'], name='property_status_idx'),
            models.Index(fields=['city'], name='property_city_idx'),
            models.Index(fields=['property_type', 'status'], name='property_type_status_idx'),
            models.Index(fields=['monthly_rent'], name='property_rent_idx'),
        ]

    def __str__(self):
        return f"{self.title} - {self.city} ({self.get_status_display()})"

    @property
    def is_available(self):
        return self.status == PropertyStatus.AVAILABLE

    @property
    def active_contract(self):
        return self.contracts.filter(is_active=True).first()


class PropertyImage(models.Model):
    """Image metadata for a property; file storage lives elsewhere"""
    property = models.ForeignKey(Property, on_delete=models.PROTECT, related_name='images')
    file_name = models.CharField(max_length=255)
    file_path = models.CharField(max_length=500)
    content_type = models.CharField(max_length=100, blank=True)
    file_size = models.PositiveIntegerField(default=0, help_text="File size in bytes")
    caption = models.CharField(max_length=255, blank=True)
    display_order = models.PositiveSmallIntegerField(default=0)
    is_primary = models.BooleanField(default=False)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['display_order', 'id']
        verbose_name = "Property Image"
        verbose_name_plural = "Property Images"

    def __str__(self):
        return f"{self.property.title} - {self.file_name}"
