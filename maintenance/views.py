from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response
from core.constants import MaintenanceCategory, MaintenancePriority, MaintenanceStatus
from core.dto import MaintenanceRequestDTO
from api.viewsets import ServiceModelViewSet
from api.filters import choice_param, int_param
from .serializers import (
    MaintenanceRequestSerializer, MaintenanceRequestListSerializer,
    MaintenanceRequestCreateSerializer, AssignSerializer, CompleteSerializer,
    StatusSerializer,
)
from .services import MaintenanceService


class MaintenanceRequestViewSet(ServiceModelViewSet):
    """
    ViewSet for maintenance requests
    Status changes go through the assign / complete / status actions
    """
    serializer_class = MaintenanceRequestSerializer
    list_serializer_class = MaintenanceRequestListSerializer
    service_class = MaintenanceService

    def get_queryset(self):
        params = self.request.query_params
        if self.action != 'list':
            return self.service.request_repo.get_queryset()

        priority = choice_param(params, 'priority', MaintenancePriority.CHOICES)
        return self.service.request_repo.filter_listing(
            status=choice_param(params, 'status', MaintenanceStatus.CHOICES),
            priority=int(priority) if priority is not None else None,
            category=choice_param(params, 'category', MaintenanceCategory.CHOICES),
            property_id=int_param(params, 'propertyId'),
            tenant_id=int_param(params, 'tenantId'),
        ).order_by('-request_date', '-id')

    def _detail(self, instance):
        return MaintenanceRequestSerializer(instance, context=self.get_serializer_context()).data

    def create(self, request, *args, **kwargs):
        serializer = MaintenanceRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.service.create_request(MaintenanceRequestDTO(**serializer.validated_data))
        return Response(self._detail(instance), status=status.HTTP_201_CREATED)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_request(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    def perform_destroy(self, instance):
        self.service.delete_request(instance.id)

    @action(detail=True, methods=['post'])
    def assign(self, request, pk=None):
        serializer = AssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.service.assign(int(pk), **serializer.validated_data)
        return Response(self._detail(instance))

    @action(detail=True, methods=['post'])
    def complete(self, request, pk=None):
        serializer = CompleteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.service.complete(int(pk), **serializer.validated_data)
        return Response(self._detail(instance))

    @action(detail=True, methods=['post'], url_path='status')
    def change_status(self, request, pk=None):
        serializer = StatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = self.service.update_status(int(pk), serializer.validated_data['status'])
        return Response(self._detail(instance))

    @action(detail=False, methods=['get'])
    def urgent(self, request):
        """Open High/Emergency requests, most urgent and oldest first"""
        return self.paginated_response(self.service.list_urgent(), MaintenanceRequestListSerializer)
