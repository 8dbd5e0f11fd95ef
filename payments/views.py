from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from core.constants import PaymentStatus
from core.dto import PaymentDTO
from api.viewsets import ServiceModelViewSet
from api.filters import choice_param, date_param, int_param, month_param
from .serializers import (
    PaymentSerializer, PaymentListSerializer, PaymentCreateSerializer,
    MarkPaidSerializer, PaymentStatisticsSerializer,
)
from .services import PaymentLedgerService


class PaymentViewSet(ServiceModelViewSet):
    """
    ViewSet for the payment ledger
    Status changes go through the mark-paid / mark-overdue actions
    """
    serializer_class = PaymentSerializer
    list_serializer_class = PaymentListSerializer
    service_class = PaymentLedgerService

    def get_queryset(self):
        params = self.request.query_params
        if self.action != 'list':
            return self.service.payment_repo.get_queryset()

        return self.service.payment_repo.filter_listing(
            status=choice_param(params, 'status', PaymentStatus.CHOICES),
            contract_id=int_param(params, 'contractId'),
            from_date=date_param(params, 'fromDate'),
            to_date=date_param(params, 'toDate'),
            month=month_param(params, 'month'),
            search=params.get('search', None),
        ).order_by('due_date', 'id')

    def create(self, request, *args, **kwargs):
        """Record a manual payment"""
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payment = self.service.record_payment(PaymentDTO(**serializer.validated_data))
        output = PaymentSerializer(payment, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_payment(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    def perform_destroy(self, instance):
        self.service.delete_payment(instance.id)

    @action(detail=True, methods=['post'], url_path='mark-paid')
    def mark_paid(self, request, pk=None):
        serializer = MarkPaidSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payment = self.service.mark_paid(
            int(pk),
            transaction_reference=serializer.validated_data['transaction_reference'],
            payment_method=serializer.validated_data['payment_method'],
        )
        return Response(PaymentSerializer(payment, context=self.get_serializer_context()).data)

    @action(detail=True, methods=['post'], url_path='mark-overdue')
    def mark_overdue(self, request, pk=None):
        payment = self.service.mark_overdue(int(pk))
        return Response(PaymentSerializer(payment, context=self.get_serializer_context()).data)

    @action(detail=False, methods=['get'])
    def statistics(self, request):
        """Ledger counts, revenue and rates for the current month and year"""
        stats = self.service.compute_statistics()
        return Response(PaymentStatisticsSerializer(stats.to_dict()).data)
