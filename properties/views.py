from rest_framework.decorators import action
from core.constants import PropertyStatus, PropertyType
from api.viewsets import ServiceModelViewSet
from api.filters import choice_param, decimal_param
from .serializers import PropertySerializer, PropertyListSerializer
from .services import PropertyService


class PropertyViewSet(ServiceModelViewSet):
    """
    ViewSet for Property management
    Supports type/status/city/price filters and free-text search
    """
    serializer_class = PropertySerializer
    list_serializer_class = PropertyListSerializer
    service_class = PropertyService

    def get_queryset(self):
        params = self.request.query_params
        if self.action != 'list':
            return self.service.property_repo.get_queryset()

        return self.service.property_repo.filter_listing(
            property_type=choice_param(params, 'type', PropertyType.CHOICES),
            status=choice_param(params, 'status', PropertyStatus.CHOICES),
            city=params.get('city', None),
            min_price=decimal_param(params, 'minPrice'),
            max_price=decimal_param(params, 'maxPrice'),
            search=params.get('search', None),
        ).order_by('-created_at', '-id')

    def perform_create(self, serializer):
        data = dict(serializer.validated_data)
        data.pop('version', None)
        serializer.instance = self.service.create_property(data)

    def perform_update(self, serializer):
        version = serializer.validated_data.pop('version', None)
        serializer.instance = self.service.update_property(
            serializer.instance.id, serializer.validated_data, expected_version=version
        )

    def perform_destroy(self, instance):
        self.service.delete_property(instance.id)

    @action(detail=False, methods=['get'])
    def search(self, request):
        """Free-text search over title, description, address and city"""
        queryset = self.service.search(request.query_params.get('query', ''))
        return self.paginated_response(queryset.order_by('-created_at', '-id'), PropertyListSerializer)
