"""
Owner service - Business logic layer for Owner domain.
"""
from django.db import transaction, IntegrityError
from core.services import BaseService
from core.exceptions import ConflictError, ValidationError
from .repositories import OwnerRepository
from .models import Owner


class OwnerService(BaseService):
    """Service for owner records and their delete guard"""

    def __init__(self):
        super().__init__()
        self.owner_repo = OwnerRepository(Owner)

    def _duplicate_email(self, email) -> ValidationError:
        return ValidationError(
            message=f"An owner with email {email} already exists",
            code="DUPLICATE_EMAIL",
            details={'field': 'email'}
        )

    def _check_email(self, email, exclude_id=None):
        if email and self.owner_repo.email_taken(email, exclude_id=exclude_id):
            raise self._duplicate_email(email)

    def create_owner(self, data: dict) -> Owner:
        email = data.get('email')
        self._check_email(email)
        try:
            with transaction.atomic():
                owner = self.owner_repo.create(**data)
        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same email
            if email and self.owner_repo.email_taken(email):
                raise self._duplicate_email(email) from e
            raise

        self.log_info(f"Owner created: {owner.full_name}", owner_id=owner.id)
        return owner

    def update_owner(self, owner_id: int, data: dict, expected_version: int = None) -> Owner:
        owner = self.owner_repo.get_or_raise(owner_id)
        email = data.get('email')
        if email:
            self._check_email(email, exclude_id=owner.id)

        try:
            with transaction.atomic():
                owner = self.owner_repo.update(owner, expected_version=expected_version, **data)
        except IntegrityError as e:
            if email and self.owner_repo.email_taken(email, exclude_id=owner_id):
                raise self._duplicate_email(email) from e
            raise

        self.log_info(f"Owner updated: {owner.full_name}", owner_id=owner.id)
        return owner

    @transaction.atomic
    def delete_owner(self, owner_id: int) -> None:
        """Delete an owner that has no properties"""
        owner = self.owner_repo.lock(owner_id)
        property_count = owner.properties.count()
        if property_count:
            raise ConflictError(
                message="Cannot delete owner with existing properties",
                code="OWNER_HAS_PROPERTIES",
                details={'property_count': property_count}
            )

        self.owner_repo.delete(owner)
        self.log_info(f"Owner deleted: {owner.full_name}", owner_id=owner_id)

    def get_properties(self, owner_id: int):
        """Properties of one owner, newest first"""
        owner = self.owner_repo.get_or_raise(owner_id)
        return owner.properties.select_related('owner').order_by('-created_at', '-id')
