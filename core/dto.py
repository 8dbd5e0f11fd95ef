"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass, asdict
from typing import Optional
from decimal import Decimal, ROUND_HALF_UP
from datetime import date, datetime


HUNDRED = Decimal('100')
CENT = Decimal('0.01')


@dataclass
class ContractDTO:
    """Data Transfer Object for Contract"""
    property_id: int = None
    tenant_id: int = None
    start_date: date = None
    end_date: date = None
    monthly_rent: Decimal = Decimal('0')
    security_deposit: Decimal = Decimal('0')
    terms: str = ""
    notes: str = ""


@dataclass
class PaymentDTO:
    """Data Transfer Object for a manually recorded Payment"""
    contract_id: int = None
    amount: Decimal = Decimal('0')
    due_date: date = None
    payment_type: str = "Rent"
    status: str = "Pending"
    payment_method: Optional[str] = None
    transaction_reference: str = ""
    notes: str = ""


@dataclass
class MaintenanceRequestDTO:
    """Data Transfer Object for MaintenanceRequest"""
    property_id: int = None
    tenant_id: Optional[int] = None
    title: str = ""
    description: str = ""
    category: str = "Other"
    priority: int = 2
    estimated_cost: Optional[Decimal] = None
    currency: Optional[str] = None
    internal_notes: str = ""


@dataclass(frozen=True)
class PaymentStatistics:
    """Aggregate view of the payment ledger at a point in time"""
    as_of: datetime
    total_payments: int = 0
    paid_payments: int = 0
    pending_payments: int = 0
    overdue_payments: int = 0
    monthly_revenue: Decimal = Decimal('0.00')
    yearly_revenue: Decimal = Decimal('0.00')
    total_outstanding: Decimal = Decimal('0.00')

    @staticmethod
    def _percentage(part: int, whole: int) -> Decimal:
        if not whole:
            return Decimal('0.00')
        return (Decimal(part) * HUNDRED / Decimal(whole)).quantize(CENT, rounding=ROUND_HALF_UP)

    @property
    def collection_rate(self) -> Decimal:
        return self._percentage(self.paid_payments, self.total_payments)

    @property
    def overdue_rate(self) -> Decimal:
        return self._percentage(self.overdue_payments, self.total_payments)

    def to_dict(self):
        data = asdict(self)
        data['collection_rate'] = self.collection_rate
        data['overdue_rate'] = self.overdue_rate
        return data
