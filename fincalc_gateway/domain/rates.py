"""Effective deposit rate composition"""

from decimal import Decimal

from fincalc_gateway.utils.money import Numeric, ZERO, to_decimal

# Product policy: enabling capitalization adds half a percentage point
CAPITALIZATION_BONUS_PERCENT = Decimal("0.5")


def compose_rate(
    base: Numeric,
    term_bonus: Numeric,
    capitalization_enabled: bool,
    capitalization_bonus: Numeric = CAPITALIZATION_BONUS_PERCENT,
) -> Decimal:
    """
    Combine a product's base rate with its bonuses.

    effective = base + term_bonus + (capitalization_bonus if capitalization_enabled else 0)

    All values are annual percentages (13.5 means 13.5%).

    Example:
        compose_rate(12, 1, True) -> Decimal("13.5")
    """
    bonus = to_decimal(capitalization_bonus, "capitalization_bonus") if capitalization_enabled else ZERO
    return to_decimal(base, "base") + to_decimal(term_bonus, "term_bonus") + bonus
