from rest_framework.decorators import action
from api.viewsets import ServiceModelViewSet
from .serializers import OwnerSerializer, OwnerListSerializer
from .services import OwnerService


class OwnerViewSet(ServiceModelViewSet):
    """
    ViewSet for Owner management
    Deleting an owner that still has properties is rejected with 409
    """
    serializer_class = OwnerSerializer
    list_serializer_class = OwnerListSerializer
    service_class = OwnerService

    def get_queryset(self):
        search = self.request.query_params.get('search', None)
        return self.service.owner_repo.search(search).order_by('last_name', 'first_name', 'id')

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        data.pop('version', None)
        serializer.instance = self.service.create_owner(data)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_owner(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    def perform_destroy(self, instance):
        self.service.delete_owner(instance.id)

    @action(detail=True, methods=['get'])
    def properties(self, request, pk=None):
        """Properties of this owner, newest first"""
        from properties.serializers import PropertyListSerializer

        queryset = self.service.get_properties(int(pk))
        return self.paginated_response(queryset, PropertyListSerializer)
