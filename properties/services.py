"""
Property service - Business logic layer for Property domain.
"""
from django.db import transaction
from core.services import BaseService
from core.constants import PropertyStatus
from core.exceptions import ConflictError, ValidationError
from core.validators import AmountValidator
from owners.models import Owner
from owners.repositories import OwnerRepository
from .repositories import PropertyRepository
from .models import Property


class PropertyService(BaseService):
    """Service for property records and their delete guard"""

    def __init__(self):
        super().__init__()
        self.property_repo = PropertyRepository(Property)
        self.owner_repo = OwnerRepository(Owner)

    def _resolve_owner(self, data: dict) -> dict:
        data = dict(data)
        owner_id = data.pop('owner_id', None)
        if owner_id is not None:
            data['owner'] = self.owner_repo.get_or_raise(owner_id)
        return data

    def _validate_amounts(self, data: dict):
        if 'monthly_rent' in data:
            AmountValidator.validate_amount(data['monthly_rent'], 'monthly_rent')
        AmountValidator.validate_amount(data.get('security_deposit'), 'security_deposit', allow_none=True)

    def _check_status(self, data: dict, prop: Property = None):
        """
        Only Available and Maintenance can be set directly; Rented follows
        the property's contracts.
        """
        target = data.get('status')
        if target is None or (prop is not None and target == prop.status):
            return
        if target == PropertyStatus.RENTED:
            raise ConflictError(
                message="A property becomes Rented only through a contract",
                code="INVALID_STATUS_TRANSITION",
                details={'status': target},
            )
        if prop is not None and (prop.status == PropertyStatus.RENTED
                                 or self.property_repo.has_active_contract(prop.id)):
            raise ConflictError(
                message="Cannot change the status of a property with an active contract",
                code="PROPERTY_HAS_ACTIVE_CONTRACT",
                details={'property_id': prop.id, 'status': target},
            )

    @transaction.atomic
    def create_property(self, data: dict) -> Property:
        data = self._resolve_owner(data)
        if 'owner' not in data:
            raise ValidationError(message="owner_id is required", code="REQUIRED_FIELD",
                                  details={'field': 'owner_id'})
        self._validate_amounts(data)
        self._check_status(data)

        prop = self.property_repo.create(**data)
        self.log_info(f"Property created: {prop.title}", property_id=prop.id, owner_id=prop.owner_id)
        return prop

    @transaction.atomic
    def update_property(self, property_id: int, data: dict, expected_version: int = None) -> Property:
        prop = self.property_repo.lock(property_id)
        data = self._resolve_owner(data)
        self._validate_amounts(data)
        self._check_status(data, prop)

        prop = self.property_repo.update(prop, expected_version=expected_version, **data)
        self.log_info(f"Property updated: {prop.title}", property_id=prop.id)
        return prop

    @transaction.atomic
    def delete_property(self, property_id: int) -> None:
        """Delete a property that has no active contract"""
        prop = self.property_repo.lock(property_id)
        if self.property_repo.has_active_contract(prop.id):
            raise ConflictError(
                message="Cannot delete property with an active contract",
                code="PROPERTY_HAS_ACTIVE_CONTRACT",
                details={'property_id': prop.id}
            )

        self.property_repo.delete(prop)
        self.log_info(f"Property deleted: {prop.title}", property_id=property_id)

    def search(self, query: str):
        if not query or not query.strip():
            raise ValidationError(message="Search query is required", code="REQUIRED_FIELD",
                                  details={'field': 'query'})
        return self.property_repo.search(query.strip())
