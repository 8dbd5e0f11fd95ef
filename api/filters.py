"""
Query-string parsing for list filters.
Malformed filter values are reported as 400 instead of being ignored.
"""
from datetime import date
from decimal import Decimal, InvalidOperation

from core.exceptions import ValidationError


def _invalid(name, value, expected):
    return ValidationError(
        message=f"Invalid value for {name}: {value!r} (expected {expected})",
        code="INVALID_FILTER",
        details={'param': name}
    )


def int_param(params, name):
    value = params.get(name)
    if value in (None, ''):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise _invalid(name, value, 'an integer')


def decimal_param(params, name):
    value = params.get(name)
    if value in (None, ''):
        return None
    try:
        return Decimal(value)
    except (InvalidOperation, ValueError):
        raise _invalid(name, value, 'a number')


def date_param(params, name):
    value = params.get(name)
    if value in (None, ''):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise _invalid(name, value, 'a YYYY-MM-DD date')


def bool_param(params, name):
    value = params.get(name)
    if value in (None, ''):
        return None
    lowered = value.lower()
    if lowered in ('true', '1', 'yes'):
        return True
    if lowered in ('false', '0', 'no'):
        return False
    raise _invalid(name, value, 'true or false')


def choice_param(params, name, choices):
    value = params.get(name)
    if value in (None, ''):
        return None
    allowed = [str(code) for code, _label in choices]
    if str(value) not in allowed:
        raise _invalid(name, value, f"one of {', '.join(allowed)}")
    return value


def month_param(params, name):
    """``YYYY-MM`` as the first day of that month"""
    value = params.get(name)
    if value in (None, ''):
        return None
    try:
        return date.fromisoformat(f"{value}-01")
    except ValueError:
        raise _invalid(name, value, 'a YYYY-MM month')
