"""
Repository pattern implementation.
Abstracts data access and provides a clean interface for domain services.
"""
from typing import Generic, TypeVar, Optional, List
from django.db.models import QuerySet, Model, F, ProtectedError
from django.db import transaction
from django.utils import timezone
import logging

from core.exceptions import NotFoundError, ConflictError, ConcurrencyError

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Model)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.
    Models handled here may carry a ``version`` column used for
    optimistic concurrency checks on update.
    """

    def __init__(self, model: type[T]):
        self.model = model

    @property
    def resource_name(self) -> str:
        return self.model._meta.verbose_name.title()

    def get_by_id(self, id: int, **filters) -> Optional[T]:
        """Get a single instance by ID"""
        return self.model.objects.filter(id=id, **filters).first()

    def get_or_raise(self, id: int, **filters) -> T:
        """Get a single instance by ID or raise NotFoundError"""
        instance = self.get_by_id(id, **filters)
        if instance is None:
            raise NotFoundError(resource_type=self.resource_name, resource_id=id)
        return instance

    def lock(self, id: int) -> T:
        """Fetch an instance with a row lock; caller must be inside a transaction"""
        instance = self.model.objects.select_for_update().filter(id=id).first()
        if instance is None:
            raise NotFoundError(resource_type=self.resource_name, resource_id=id)
        return instance

    def get_all(self, **filters) -> QuerySet[T]:
        """Get all instances matching filters"""
        return self.model.objects.filter(**filters)

    def create(self, **kwargs) -> T:
        """Create a new instance"""
        return self.model.objects.create(**kwargs)

    def update(self, instance: T, expected_version: Optional[int] = None, **kwargs) -> T:
        """
        Update an existing instance.

        When ``expected_version`` is given the write only succeeds if the
        stored version still matches, otherwise ConcurrencyError is raised.
        """
        if expected_version is not None:
            return self._update_versioned(instance, expected_version, **kwargs)

        for key, value in kwargs.items():
            setattr(instance, key, value)
        if hasattr(instance, 'version'):
            instance.version = (instance.version or 0) + 1
        instance.save()
        return instance

    def _update_versioned(self, instance: T, expected_version: int, **kwargs) -> T:
        changes = dict(kwargs)
        if any(f.name == 'updated_at' for f in self.model._meta.concrete_fields):
            changes['updated_at'] = timezone.now()

        with transaction.atomic():
            updated = self.model.objects.filter(
                id=instance.id, version=expected_version
            ).update(version=F('version') + 1, **changes)

            if not updated:
                if not self.exists(id=instance.id):
                    raise NotFoundError(resource_type=self.resource_name, resource_id=instance.id)
                raise ConcurrencyError(
                    message=f"{self.resource_name} {instance.id} was modified by another request",
                    details={'expected_version': expected_version},
                )

        instance.refresh_from_db()
        return instance

    def delete(self, instance: T) -> None:
        """Delete an instance; restricted references surface as ConflictError"""
        try:
            with transaction.atomic():
                instance.delete()
        except ProtectedError as e:
            blocking = sorted({str(obj._meta.verbose_name) for obj in e.protected_objects})
            logger.warning(f"Delete of {self.model.__name__} {instance.pk} blocked by {', '.join(blocking)}")
            raise ConflictError(
                message=f"Cannot delete {self.resource_name.lower()} while it is referenced by other records",
                code="REFERENCED_RECORD",
                details={'referenced_by': blocking},
            )

    def exists(self, **filters) -> bool:
        """Check if instance exists"""
        return self.model.objects.filter(**filters).exists()

    def count(self, **filters) -> int:
        """Count instances matching filters"""
        return self.model.objects.filter(**filters).count()

    @transaction.atomic
    def bulk_create(self, instances: List[T]) -> List[T]:
        """Bulk create instances"""
        return self.model.objects.bulk_create(instances)

    def get_queryset(self) -> QuerySet[T]:
        """Get base queryset for custom queries"""
        return self.model.objects.all()
