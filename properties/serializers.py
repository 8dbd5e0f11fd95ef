from rest_framework import serializers
from .models import Property, PropertyImage


class PropertyImageSerializer(serializers.ModelSerializer):
    """Serializer for PropertyImage metadata"""

    class Meta:
        model = PropertyImage
        fields = [
            'id', 'file_name', 'file_path', 'content_type', 'file_size',
            'caption', 'display_order', 'is_primary', 'uploaded_at'
        ]
        read_only_fields = fields


class PropertySerializer(serializers.ModelSerializer):
    """Serializer for Property"""
    owner_id = serializers.IntegerField()
    owner_name = serializers.CharField(source='owner.full_name', read_only=True)
    images = PropertyImageSerializer(many=True, read_only=True)
    has_active_contract = serializers.SerializerMethodField()

    class Meta:
        model = Property
        fields = [
            'id', 'title', 'description', 'property_type', 'address', 'city',
            'area', 'bedrooms', 'bathrooms', 'floor', 'has_parking',
            'has_elevator', 'has_balcony', 'monthly_rent', 'security_deposit',
            'status', 'owner_id', 'owner_name', 'images', 'has_active_contract',
            'version', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'version': {'required': False}}

    def get_has_active_contract(self, obj):
        return obj.contracts.filter(is_active=True).exists()


class PropertyListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    owner_name = serializers.CharField(source='owner.full_name', read_only=True)

    class Meta:
        model = Property
        fields = [
            'id', 'title', 'property_type', 'city', 'bedrooms', 'bathrooms',
            'area', 'monthly_rent', 'status', 'owner_name'
        ]
