"""
Shared ViewSet plumbing for the entity APIs.
Mutations are delegated to the app's service class; DRF handles parsing,
validation of the payload shape, pagination and rendering.
"""
from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response


class ServiceModelViewSet(viewsets.ModelViewSet):
    permission_classes = [AllowAny]
    lookup_value_regex = r'\d+'
    list_serializer_class = None
    service_class = None

    @property
    def service(self):
        if not hasattr(self, '_service'):
            self._service = self.service_class()
        return self._service

    def get_serializer_class(self):
        if self.action == 'list' and self.list_serializer_class is not None:
            return self.list_serializer_class
        return super().get_serializer_class()

    def paginated_response(self, queryset, serializer_class=None):
        """Paginate an arbitrary queryset the same way the list action does"""
        serializer_class = serializer_class or self.get_serializer_class()
        page = self.paginate_queryset(queryset)
        if page is not None:
            serializer = serializer_class(page, many=True, context=self.get_serializer_context())
            return self.get_paginated_response(serializer.data)
        serializer = serializer_class(queryset, many=True, context=self.get_serializer_context())
        return Response(serializer.data)
