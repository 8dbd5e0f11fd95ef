"""
Payment repository - Data access layer for the payment ledger.
"""
from django.db.models import QuerySet, Q, Count, Sum
from core.constants import PaymentStatus
from core.repositories import BaseRepository
from .models import Payment


class PaymentRepository(BaseRepository[Payment]):
    """Repository for Payment model"""

    def get_queryset(self) -> QuerySet[Payment]:
        return self.model.objects.select_related('contract', 'contract__property', 'contract__tenant')

    def filter_listing(self, status=None, contract_id=None, from_date=None,
                       to_date=None, search=None, month=None) -> QuerySet[Payment]:
        queryset = self.get_queryset()
        if status:
            queryset = queryset.filter(status=status)
        if contract_id is not None:
            queryset = queryset.filter(contract_id=contract_id)
        if from_date is not None:
            queryset = queryset.filter(due_date__gte=from_date)
        if to_date is not None:
            queryset = queryset.filter(due_date__lte=to_date)
        if month is not None:
            queryset = queryset.filter(due_date__year=month.year, due_date__month=month.month)
        if search:
            queryset = queryset.filter(
                Q(receipt_number__icontains=search) |
                Q(transaction_reference__icontains=search) |
                Q(contract__contract_number__icontains=search) |
                Q(contract__tenant__first_name__icontains=search) |
                Q(contract__tenant__last_name__icontains=search)
            )
        return queryset

    def ledger_totals(self, month_start, month_end, year_start, year_end) -> dict:
        """All statistics counters and sums in one aggregate query"""
        paid = Q(status=PaymentStatus.PAID)
        return self.model.objects.aggregate(
            total=Count('id'),
            paid=Count('id', filter=paid),
            pending=Count('id', filter=Q(status=PaymentStatus.PENDING)),
            overdue=Count('id', filter=Q(status=PaymentStatus.OVERDUE)),
            monthly_revenue=Sum('amount', filter=paid & Q(
                payment_date__gte=month_start, payment_date__lt=month_end)),
            yearly_revenue=Sum('amount', filter=paid & Q(
                payment_date__gte=year_start, payment_date__lt=year_end)),
            outstanding=Sum('amount', filter=Q(status__in=PaymentStatus.OUTSTANDING)),
        )
