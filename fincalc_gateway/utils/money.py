"""Decimal money helpers shared by the calculators"""

from decimal import Decimal, Context, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import ContextManager, Union

from fincalc_gateway.domain.exceptions import InvalidTermsError

Numeric = Union[int, float, str, Decimal]

MINOR_UNIT = Decimal("0.01")
ZERO = Decimal("0")

# 34 digits keeps (1 + r)^360 exact enough for tens of millions
CALCULATION_PRECISION = 34


def to_decimal(value: Numeric, field: str = "value") -> Decimal:
    """
    Convert an input amount or rate into a Decimal.

    Floats go through their string form so slider values like 0.1
    become Decimal("0.1") rather than the binary approximation.

    Raises:
        InvalidTermsError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidTermsError(f"{field} must be a number, got {value!r}")

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidTermsError(f"{field} must be a number, got {value!r}") from e

    if not result.is_finite():
        raise InvalidTermsError(f"{field} must be finite, got {value!r}")

    return result


def quantize_money(value: Decimal, minor_unit: Decimal = MINOR_UNIT) -> Decimal:
    """Round half-up to the minor currency unit"""
    return value.quantize(minor_unit, rounding=ROUND_HALF_UP)


def calculation_context() -> ContextManager[Context]:
    """Local Decimal context for power/division heavy calculations"""
    return localcontext(Context(prec=CALCULATION_PRECISION, rounding=ROUND_HALF_UP))
