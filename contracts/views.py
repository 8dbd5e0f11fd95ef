from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from core.constants import ContractStatus
from core.dto import ContractDTO
from api.viewsets import ServiceModelViewSet
from api.filters import bool_param, choice_param, int_param
from payments.serializers import PaymentListSerializer
from .serializers import (
    ContractSerializer, ContractListSerializer, ContractCreateSerializer,
    TerminateContractSerializer,
)
from .services import ContractService


class ContractViewSet(ServiceModelViewSet):
    """
    ViewSet for Contract management
    Contracts are never deleted; they are terminated
    """
    serializer_class = ContractSerializer
    list_serializer_class = ContractListSerializer
    service_class = ContractService
    http_method_names = ['get', 'post', 'put', 'patch', 'head', 'options']

    def get_queryset(self):
        params = self.request.query_params
        if self.action != 'list':
            return self.service.contract_repo.get_queryset()

        return self.service.contract_repo.filter_listing(
            status=choice_param(params, 'status', ContractStatus.CHOICES),
            property_id=int_param(params, 'propertyId'),
            tenant_id=int_param(params, 'tenantId'),
            active=bool_param(params, 'active'),
            search=params.get('search', None),
        ).order_by('-created_at', '-id')

    def create(self, request, *args, **kwargs):
        """Create a contract and mark its property Rented"""
        serializer = ContractCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract = self.service.create_contract(ContractDTO(**serializer.validated_data))
        output = ContractSerializer(contract, context=self.get_serializer_context())
        return Response(output.data, status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_contract(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    @action(detail=True, methods=['post'])
    def terminate(self, request, pk=None):
        """Terminate the contract and make its property available again"""
        serializer = TerminateContractSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract = self.service.terminate_contract(int(pk), serializer.validated_data['reason'])
        return Response(ContractSerializer(contract, context=self.get_serializer_context()).data)

    @action(detail=True, methods=['post'], url_path='generate-payments')
    def generate_payments(self, request, pk=None):
        """Expand the contract into its monthly payment schedule"""
        payments = self.service.generate_payment_schedule(int(pk))
        serializer = PaymentListSerializer(payments, many=True, context=self.get_serializer_context())
        return Response(serializer.data, status=status.HTTP_201_CREATED)
