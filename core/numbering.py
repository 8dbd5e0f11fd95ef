"""
Human-readable sequence numbers for contracts, receipts and maintenance requests.

A number is a date-scoped prefix followed by a zero-padded sequence, e.g.
``CON-2024-000123``, ``REC-2024-000045`` or ``MR202405-0007``. The sequence is
the highest one already stored under the prefix plus one, read fresh on every
call. Uniqueness under concurrent writers comes from the unique constraint on
the number column: ``create_unique`` retries the insert with a fresh sequence
when it collides.
"""
import logging
import re
from typing import Callable

from django.conf import settings
from django.db import IntegrityError, transaction
from django.db.models import IntegerField, Max
from django.db.models.functions import Cast, Substr
from django.utils import timezone

from core.constants import NumberPrefix
from core.exceptions import ConcurrencyError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 5


class IdentifierGenerator:
    """Generates and reserves sequence numbers for one model field"""

    def __init__(self, model, field: str, prefix_format: str, width: int):
        self.model = model
        self.field = field
        self.prefix_format = prefix_format
        self.width = width

    def prefix(self, now=None) -> str:
        now = now or timezone.now()
        return now.strftime(self.prefix_format)

    def current_sequence(self, prefix: str) -> int:
        """Highest sequence stored under ``prefix``; 0 when there is none"""
        pattern = r'^' + re.escape(prefix) + r'\d+$'
        highest = (
            self.model.objects
            .filter(**{f'{self.field}__regex': pattern})
            .annotate(number_sequence=Cast(Substr(self.field, len(prefix) + 1), IntegerField()))
            .aggregate(highest=Max('number_sequence'))['highest']
        )
        return highest or 0

    def format(self, prefix: str, sequence: int) -> str:
        return f"{prefix}{sequence:0{self.width}d}"

    def next_value(self, now=None) -> str:
        prefix = self.prefix(now)
        return self.format(prefix, self.current_sequence(prefix) + 1)

    @property
    def max_attempts(self) -> int:
        return getattr(settings, 'RENTAL_NUMBERING_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS)

    def create_unique(self, build: Callable[[str], object], now=None):
        """
        Call ``build(number)`` with a freshly generated number until the insert
        succeeds.

        ``build`` must perform the insert. Each attempt runs in its own
        savepoint so a collision does not poison the surrounding transaction.
        Integrity errors that are not a collision on the number propagate.
        """
        attempts = self.max_attempts
        for attempt in range(1, attempts + 1):
            number = self.next_value(now)
            try:
                with transaction.atomic():
                    return build(number)
            except IntegrityError:
                if not self.model.objects.filter(**{self.field: number}).exists():
                    raise
                logger.warning(
                    f"{self.model.__name__}.{self.field} collision on {number} "
                    f"(attempt {attempt}/{attempts}), retrying"
                )

        raise ConcurrencyError(
            message=f"Could not reserve a unique {self.field.replace('_', ' ')} after {attempts} attempts",
            details={'field': self.field},
        )


def contract_numbers(model) -> IdentifierGenerator:
    return IdentifierGenerator(model, 'contract_number', f'{NumberPrefix.CONTRACT}-%Y-', 6)


def receipt_numbers(model) -> IdentifierGenerator:
    return IdentifierGenerator(model, 'receipt_number', f'{NumberPrefix.RECEIPT}-%Y-', 6)


def request_numbers(model) -> IdentifierGenerator:
    return IdentifierGenerator(model, 'request_number', f'{NumberPrefix.MAINTENANCE}%Y%m-', 4)


def schedule_receipt_number(contract_number: str, sequence: int) -> str:
    """Receipt number of the n-th payment of a generated schedule"""
    return f"{contract_number}-P{sequence:03d}"
