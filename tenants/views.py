from rest_framework.decorators import action
from api.viewsets import ServiceModelViewSet
from .serializers import TenantSerializer, TenantListSerializer
from .services import TenantService


class TenantViewSet(ServiceModelViewSet):
    """
    ViewSet for Tenant management
    Email and non-empty national ID are unique; tenants with an active
    contract cannot be deleted
    """
    serializer_class = TenantSerializer
    list_serializer_class = TenantListSerializer
    service_class = TenantService

    def get_queryset(self):
        search = self.request.query_params.get('search', None)
        return self.service.tenant_repo.search(search).order_by('last_name', 'first_name', 'id')

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        data.pop('version', None)
        serializer.instance = self.service.create_tenant(data)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_tenant(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    def perform_destroy(self, instance):
        self.service.delete_tenant(instance.id)

    @action(detail=True, methods=['get'])
    def contracts(self, request, pk=None):
        """All contracts of this tenant, newest first"""
        from contracts.serializers import ContractListSerializer

        queryset = self.service.get_contracts(int(pk))
        return self.paginated_response(queryset, ContractListSerializer)

    @action(detail=True, methods=['get'])
    def payments(self, request, pk=None):
        """All payments across this tenant's contracts, by due date"""
        from payments.serializers import PaymentListSerializer

        queryset = self.service.get_payments(int(pk))
        return self.paginated_response(queryset, PaymentListSerializer)
