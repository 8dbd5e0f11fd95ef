from rest_framework import serializers
from core.constants import MaintenanceCategory, MaintenancePriority, MaintenanceStatus
from .models import MaintenanceRequest, MaintenanceImage


class MaintenanceRequestCreateSerializer(serializers.Serializer):
    """Input for a new maintenance request"""
    property_id = serializers.IntegerField()
    tenant_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    title = serializers.CharField(max_length=200)
    description = serializers.CharField()
    category = serializers.ChoiceField(choices=MaintenanceCategory.CHOICES, default=MaintenanceCategory.OTHER)
    priority = serializers.ChoiceField(choices=MaintenancePriority.CHOICES, default=MaintenancePriority.MEDIUM)
    estimated_cost = serializers.DecimalField(max_digits=18, decimal_places=2, required=False,
                                              allow_null=True, default=None)
    currency = serializers.CharField(max_length=3, required=False, allow_blank=True, default='')
    internal_notes = serializers.CharField(required=False, allow_blank=True, default='')


class MaintenanceImageSerializer(serializers.ModelSerializer):
    class Meta:
        model = MaintenanceImage
        fields = ['id', 'file_name', 'file_path', 'content_type', 'file_size', 'image_type', 'caption', 'uploaded_at']
        read_only_fields = fields


class MaintenanceRequestSerializer(serializers.ModelSerializer):
    """Serializer for MaintenanceRequest"""
    property_id = serializers.IntegerField(read_only=True)
    property_title = serializers.CharField(source='property.title', read_only=True)
    tenant_id = serializers.IntegerField(read_only=True)
    tenant_name = serializers.CharField(source='tenant.full_name', read_only=True, default=None)
    is_urgent = serializers.ReadOnlyField()
    days_since_request = serializers.ReadOnlyField()
    images = MaintenanceImageSerializer(many=True, read_only=True)

    class Meta:
        model = MaintenanceRequest
        fields = [
            'id', 'request_number', 'property_id', 'property_title', 'tenant_id',
            'tenant_name', 'title', 'description', 'category', 'priority', 'status',
            'estimated_cost', 'actual_cost', 'currency', 'request_date',
            'scheduled_date', 'completed_date', 'assigned_to', 'assigned_to_phone',
            'completion_notes', 'internal_notes', 'is_urgent', 'days_since_request',
            'images', 'version', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'request_number', 'status', 'actual_cost', 'request_date',
            'completed_date', 'assigned_to', 'assigned_to_phone', 'completion_notes',
            'created_at', 'updated_at'
        ]
        extra_kwargs = {'version': {'required': False}}


class MaintenanceRequestListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    property_title = serializers.CharField(source='property.title', read_only=True)
    is_urgent = serializers.ReadOnlyField()

    class Meta:
        model = MaintenanceRequest
        fields = [
            'id', 'request_number', 'property_id', 'property_title', 'title',
            'category', 'priority', 'status', 'request_date', 'assigned_to', 'is_urgent'
        ]


class AssignSerializer(serializers.Serializer):
    assigned_to = serializers.CharField(max_length=200)
    assigned_to_phone = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    scheduled_date = serializers.DateTimeField(required=False, allow_null=True, default=None)


class CompleteSerializer(serializers.Serializer):
    actual_cost = serializers.DecimalField(max_digits=18, decimal_places=2, required=False,
                                           allow_null=True, default=None)
    completion_notes = serializers.CharField(required=False, allow_blank=True, default='')


class StatusSerializer(serializers.Serializer):
    # Validated against MaintenanceStatus in the service so unknown values map to VALIDATION_ERROR
    status = serializers.CharField(max_length=20)
