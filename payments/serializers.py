from rest_framework import serializers
from core.constants import PaymentMethod, PaymentStatus, PaymentType
from .models import Payment


class PaymentCreateSerializer(serializers.Serializer):
    """Input for a manually recorded payment; the receipt number is server-assigned"""
    contract_id = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=18, decimal_places=2)
    due_date = serializers.DateField(required=False, allow_null=True, default=None)
    payment_type = serializers.ChoiceField(choices=PaymentType.CHOICES, default=PaymentType.RENT)
    status = serializers.ChoiceField(
        choices=[(PaymentStatus.PENDING, 'Pending'), (PaymentStatus.PAID, 'Paid')],
        default=PaymentStatus.PENDING
    )
    payment_method = serializers.ChoiceField(choices=PaymentMethod.CHOICES, required=False, allow_null=True,
                                             default=None)
    transaction_reference = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    notes = serializers.CharField(max_length=500, required=False, allow_blank=True, default='')


class PaymentSerializer(serializers.ModelSerializer):
    """Serializer for Payment"""
    contract_id = serializers.IntegerField(read_only=True)
    contract_number = serializers.CharField(source='contract.contract_number', read_only=True)
    tenant_name = serializers.CharField(source='contract.tenant.full_name', read_only=True)
    property_title = serializers.CharField(source='contract.property.title', read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id', 'receipt_number', 'contract_id', 'contract_number', 'tenant_name',
            'property_title', 'payment_type', 'status', 'amount', 'due_date',
            'payment_date', 'payment_method', 'transaction_reference', 'notes',
            'version', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'id', 'receipt_number', 'status', 'payment_date', 'created_at', 'updated_at'
        ]
        extra_kwargs = {'version': {'required': False}}


class PaymentListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    contract_number = serializers.CharField(source='contract.contract_number', read_only=True)

    class Meta:
        model = Payment
        fields = [
            'id', 'receipt_number', 'contract_id', 'contract_number', 'payment_type',
            'status', 'amount', 'due_date', 'payment_date', 'notes'
        ]


class MarkPaidSerializer(serializers.Serializer):
    transaction_reference = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    payment_method = serializers.ChoiceField(choices=PaymentMethod.CHOICES, required=False, allow_null=True,
                                             default=None)


class PaymentStatisticsSerializer(serializers.Serializer):
    """Read-only rendering of PaymentStatistics"""
    as_of = serializers.DateTimeField()
    total_payments = serializers.IntegerField()
    paid_payments = serializers.IntegerField()
    pending_payments = serializers.IntegerField()
    overdue_payments = serializers.IntegerField()
    monthly_revenue = serializers.DecimalField(max_digits=18, decimal_places=2)
    yearly_revenue = serializers.DecimalField(max_digits=18, decimal_places=2)
    total_outstanding = serializers.DecimalField(max_digits=18, decimal_places=2)
    collection_rate = serializers.DecimalField(max_digits=5, decimal_places=2)
    overdue_rate = serializers.DecimalField(max_digits=5, decimal_places=2)
