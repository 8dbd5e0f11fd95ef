from rest_framework import serializers
from .models import Owner


class OwnerSerializer(serializers.ModelSerializer):
    """Serializer for Owner"""
    # Declared explicitly so duplicate checks run in OwnerService
    email = serializers.EmailField(max_length=255)
    full_name = serializers.ReadOnlyField()
    property_count = serializers.SerializerMethodField()

    class Meta:
        model = Owner
        fields = [
            'id', 'first_name', 'last_name', 'full_name', 'email', 'phone',
            'address', 'national_id', 'property_count', 'version',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {'version': {'required': False}}

    def get_property_count(self, obj):
        annotated = getattr(obj, 'property_count', None)
        if annotated is not None:
            return annotated
        return obj.properties.count()


class OwnerListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    full_name = serializers.ReadOnlyField()
    property_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Owner
        fields = ['id', 'full_name', 'email', 'phone', 'property_count']
