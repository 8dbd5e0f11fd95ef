"""
Payment ledger service - payment status transitions and ledger statistics.

Status moves Pending -> Paid, Pending -> Overdue and Overdue -> Paid. Paid is
terminal, and a Paid payment can be neither deleted nor have its amount or
due date changed.
"""
from decimal import Decimal
from dateutil.relativedelta import relativedelta
from django.db import transaction
from django.utils import timezone

from core.constants import PaymentStatus
from core.dto import PaymentDTO, PaymentStatistics
from core.exceptions import ConflictError
from core.numbering import receipt_numbers
from core.services import BaseService
from core.validators import AmountValidator, StatusValidator
from contracts.models import Contract
from contracts.repositories import ContractRepository
from .models import Payment
from .repositories import PaymentRepository

EDITABLE_FIELDS = ('amount', 'due_date', 'payment_type', 'payment_method', 'transaction_reference', 'notes')
LOCKED_WHEN_PAID = ('amount', 'due_date')
ZERO = Decimal('0.00')


class PaymentLedgerService(BaseService):
    """Service for the payment ledger"""

    def __init__(self):
        super().__init__()
        self.payment_repo = PaymentRepository(Payment)
        self.contract_repo = ContractRepository(Contract)
        self.numbers = receipt_numbers(Payment)

    def _transition(self, payment: Payment, target: str):
        if not StatusValidator.can_transition(PaymentStatus.TRANSITIONS, payment.status, target):
            raise ConflictError(
                message=f"Payment {payment.receipt_number} cannot move from {payment.status} to {target}",
                code="INVALID_STATUS_TRANSITION",
                details={'from': payment.status, 'to': target}
            )

    @transaction.atomic
    def record_payment(self, data: PaymentDTO) -> Payment:
        """Record a manual payment against a contract with a generated receipt number"""
        AmountValidator.validate_amount(data.amount, 'amount')
        StatusValidator.validate_choice(data.status, PaymentStatus.CHOICES)
        contract = self.contract_repo.get_or_raise(data.contract_id)

        payment_date = timezone.now() if data.status == PaymentStatus.PAID else None
        payment = self.numbers.create_unique(
            lambda number: self.payment_repo.create(
                receipt_number=number,
                contract=contract,
                amount=data.amount,
                due_date=data.due_date or timezone.localdate(),
                payment_type=data.payment_type,
                status=data.status,
                payment_date=payment_date,
                payment_method=data.payment_method or '',
                transaction_reference=data.transaction_reference or '',
                notes=data.notes or '',
            )
        )

        self.log_info(f"Payment recorded: {payment.receipt_number}",
                      payment_id=payment.id, contract_id=contract.id, amount=str(payment.amount))
        return payment

    @transaction.atomic
    def update_payment(self, payment_id: int, data: dict, expected_version: int = None) -> Payment:
        payment = self.payment_repo.get_or_raise(payment_id)
        changes = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}

        if payment.is_paid:
            locked = [
                field for field in LOCKED_WHEN_PAID
                if field in changes and changes[field] != getattr(payment, field)
            ]
            if locked:
                raise ConflictError(
                    message=f"Payment {payment.receipt_number} is paid; {', '.join(locked)} cannot change",
                    code="PAYMENT_ALREADY_PAID",
                    details={'fields': locked}
                )
        if 'amount' in changes:
            AmountValidator.validate_amount(changes['amount'], 'amount')

        payment = self.payment_repo.update(payment, expected_version=expected_version, **changes)
        self.log_info(f"Payment updated: {payment.receipt_number}", payment_id=payment.id)
        return payment

    @transaction.atomic
    def mark_paid(self, payment_id: int, transaction_reference: str = None,
                  payment_method: str = None) -> Payment:
        """Mark a Pending or Overdue payment as Paid now"""
        payment = self.payment_repo.lock(payment_id)
        self._transition(payment, PaymentStatus.PAID)

        changes = {'status': PaymentStatus.PAID, 'payment_date': timezone.now()}
        if transaction_reference:
            changes['transaction_reference'] = transaction_reference
        if payment_method:
            changes['payment_method'] = payment_method
        payment = self.payment_repo.update(payment, **changes)

        self.log_info(f"Payment marked paid: {payment.receipt_number}",
                      payment_id=payment.id, amount=str(payment.amount))
        return payment

    @transaction.atomic
    def mark_overdue(self, payment_id: int) -> Payment:
        """Mark a Pending payment as Overdue"""
        payment = self.payment_repo.lock(payment_id)
        self._transition(payment, PaymentStatus.OVERDUE)

        payment = self.payment_repo.update(payment, status=PaymentStatus.OVERDUE)
        self.log_info(f"Payment marked overdue: {payment.receipt_number}", payment_id=payment.id)
        return payment

    @transaction.atomic
    def delete_payment(self, payment_id: int) -> None:
        """Delete a payment that has not been paid"""
        payment = self.payment_repo.lock(payment_id)
        if payment.is_paid:
            raise ConflictError(
                message=f"Cannot delete paid payment {payment.receipt_number}",
                code="PAYMENT_ALREADY_PAID",
                details={'payment_id': payment.id}
            )

        self.payment_repo.delete(payment)
        self.log_info(f"Payment deleted: {payment.receipt_number}", payment_id=payment_id)

    def compute_statistics(self, as_of=None) -> PaymentStatistics:
        """
        Ledger statistics as of a moment (default: now).

        Monthly and yearly revenue count Paid payments whose payment date
        falls in the calendar month and year of ``as_of``. Rates are derived
        on the returned dataclass.
        """
        as_of = timezone.localtime(as_of or timezone.now())
        month_start = as_of.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        year_start = month_start.replace(month=1)

        totals = self.payment_repo.ledger_totals(
            month_start=month_start,
            month_end=month_start + relativedelta(months=1),
            year_start=year_start,
            year_end=year_start + relativedelta(years=1),
        )

        return PaymentStatistics(
            as_of=as_of,
            total_payments=totals['total'],
            paid_payments=totals['paid'],
            pending_payments=totals['pending'],
            overdue_payments=totals['overdue'],
            monthly_revenue=totals['monthly_revenue'] or ZERO,
            yearly_revenue=totals['yearly_revenue'] or ZERO,
            total_outstanding=totals['outstanding'] or ZERO,
        )
