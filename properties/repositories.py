"""
Property repository - Data access layer for Property domain.
"""
from django.db.models import QuerySet, Q
from core.repositories import BaseRepository
from .models import Property, PropertyImage


class PropertyRepository(BaseRepository[Property]):
    """Repository for Property model"""

    def get_queryset(self) -> QuerySet[Property]:
        return self.model.objects.select_related('owner')

    def filter_listing(self, property_type=None, status=None, city=None,
                       min_price=None, max_price=None, search=None) -> QuerySet[Property]:
        queryset = self.get_queryset()
        if property_type:
            queryset = queryset.filter(property_type=property_type)
        if status:
            queryset = queryset.filter(status=status)
        if city:
            queryset = queryset.filter(city__icontains=city)
        if min_price is not None:
            queryset = queryset.filter(monthly_rent__gte=min_price)
        if max_price is not None:
            queryset = queryset.filter(monthly_rent__lte=max_price)
        if search:
            queryset = queryset.filter(self.text_match(search))
        return queryset

    @staticmethod
    def text_match(term: str) -> Q:
        return (
            Q(title__icontains=term) |
            Q(description__icontains=term) |
            Q(address__icontains=term) |
            Q(city__icontains=term)
        )

    def search(self, term: str) -> QuerySet[Property]:
        return self.get_queryset().filter(self.text_match(term))

    def has_active_contract(self, property_id: int) -> bool:
        return self.exists(id=property_id, contracts__is_active=True)


class PropertyImageRepository(BaseRepository[PropertyImage]):
    """Repository for PropertyImage model"""

    def for_property(self, property_id: int) -> QuerySet[PropertyImage]:
        return self.get_all(property_id=property_id)
