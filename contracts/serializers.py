from rest_framework import serializers
from .models import Contract


class ContractCreateSerializer(serializers.Serializer):
    """Input for a new contract; the number and status are server-assigned"""
    property_id = serializers.IntegerField()
    tenant_id = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    monthly_rent = serializers.DecimalField(max_digits=18, decimal_places=2)
    security_deposit = serializers.DecimalField(max_digits=18, decimal_places=2, required=False, default=0)
    terms = serializers.CharField(required=False, allow_blank=True, default='')
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class ContractSerializer(serializers.ModelSerializer):
    """Serializer for Contract"""
    property_id = serializers.IntegerField(read_only=True)
    property_title = serializers.CharField(source='property.title', read_only=True)
    tenant_id = serializers.IntegerField(read_only=True)
    tenant_name = serializers.CharField(source='tenant.full_name', read_only=True)
    payment_count = serializers.SerializerMethodField()

    class Meta:
        model = Contract
        fields = [
            'id', 'contract_number', 'property_id', 'property_title',
            'tenant_id', 'tenant_name', 'start_date', 'end_date',
            'monthly_rent', 'security_deposit', 'is_active', 'status',
            'terms', 'notes', 'payment_count', 'version',
            'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'contract_number', 'is_active', 'status', 'created_at', 'updated_at'
        ]
        extra_kwargs = {'version': {'required': False}}

    def get_payment_count(self, obj):
        return obj.payments.count()


class ContractListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    property_title = serializers.CharField(source='property.title', read_only=True)
    tenant_name = serializers.CharField(source='tenant.full_name', read_only=True)

    class Meta:
        model = Contract
        fields = [
            'id', 'contract_number', 'property_id', 'property_title', 'tenant_id',
            'tenant_name', 'start_date', 'end_date', 'monthly_rent', 'status', 'is_active'
        ]


class TerminateContractSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, default='')
