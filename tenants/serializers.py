from rest_framework import serializers
from .models import Tenant


class TenantSerializer(serializers.ModelSerializer):
    """Serializer for Tenant"""
    # Declared explicitly so duplicate checks run in TenantService
    email = serializers.EmailField(max_length=255)
    national_id = serializers.CharField(max_length=50, required=False, allow_blank=True)
    full_name = serializers.ReadOnlyField()
    current_contract_number = serializers.SerializerMethodField()

    class Meta:
        model = Tenant
        fields = [
            'id', 'first_name', 'last_name', 'full_name', 'email', 'phone',
            'alternate_phone', 'address', 'national_id', 'occupation', 'company',
            'monthly_income', 'emergency_contact', 'date_of_birth',
            'current_contract_number', 'version', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'version': {'required': False}}

    def get_current_contract_number(self, obj):
        contract = obj.current_contract
        if contract:
            return contract.contract_number
        return None


class TenantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    full_name = serializers.ReadOnlyField()

    class Meta:
        model = Tenant
        fields = ['id', 'full_name', 'email', 'phone', 'national_id']
