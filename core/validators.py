"""
Validation utilities and validators.
Centralized validation logic following single responsibility principle.
"""
from decimal import Decimal
from core.exceptions import ValidationError as AppValidationError


MAX_AMOUNT = Decimal('9999999999999999.99')


class AmountValidator:
    """Validates money amounts"""

    @staticmethod
    def validate_amount(amount, field_name: str = "amount", allow_none: bool = False):
        """Validate a non-negative money amount"""
        if amount is None:
            if allow_none:
                return
            raise AppValidationError(
                message=f"{field_name} is required",
                code="REQUIRED_FIELD",
                details={"field": field_name}
            )
        if amount < 0:
            raise AppValidationError(
                message=f"{field_name} cannot be negative",
                code="NEGATIVE_AMOUNT",
                details={"field": field_name}
            )
        if amount > MAX_AMOUNT:
            raise AppValidationError(
                message=f"{field_name} exceeds maximum allowed",
                code="AMOUNT_TOO_LARGE",
                details={"field": field_name}
            )


class ContractValidator:
    """Validates contract operations"""

    @staticmethod
    def validate_dates(start_date, end_date):
        """Validate the contract date range"""
        if start_date is None or end_date is None:
            raise AppValidationError(
                message="Start date and end date are required",
                code="REQUIRED_FIELD",
                details={"start_date": start_date, "end_date": end_date}
            )

        if end_date < start_date:
            raise AppValidationError(
                message="End date cannot be before start date",
                code="INVALID_END_DATE",
                details={"start_date": str(start_date), "end_date": str(end_date)}
            )

    @staticmethod
    def validate_amounts(monthly_rent, security_deposit):
        AmountValidator.validate_amount(monthly_rent, "monthly_rent")
        AmountValidator.validate_amount(security_deposit, "security_deposit")


class StatusValidator:
    """Validates status values against a closed vocabulary and transition table"""

    @staticmethod
    def validate_choice(value, choices, field_name: str = "status"):
        allowed = [code for code, _label in choices]
        if value not in allowed:
            raise AppValidationError(
                message=f"Invalid {field_name}: {value}",
                code="INVALID_STATUS",
                details={"allowed": allowed}
            )

    @staticmethod
    def can_transition(transitions, current, target) -> bool:
        return target in transitions.get(current, set())
