"""
Owner repository - Data access layer for Owner domain.
"""
from django.db.models import QuerySet, Q, Count
from core.repositories import BaseRepository
from .models import Owner


class OwnerRepository(BaseRepository[Owner]):
    """Repository for Owner model"""

    def email_taken(self, email: str, exclude_id: int = None) -> bool:
        queryset = self.get_all(email__iexact=email)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def search(self, term: str = None) -> QuerySet[Owner]:
        queryset = self.get_queryset().annotate(property_count=Count('properties'))
        if term:
            queryset = queryset.filter(
                Q(first_name__icontains=term) |
                Q(last_name__icontains=term) |
                Q(email__icontains=term) |
                Q(phone__icontains=term)
            )
        return queryset
