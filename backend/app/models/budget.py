"""Budget breakdown models and the total-budget aggregator."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

from backend.app.errors import ValidationError

# Money is kept as Decimal in Python and rendered as a JSON number.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

BUDGET_CATEGORIES: tuple[str, ...] = (
    "flights",
    "hotel",
    "food",
    "activities",
    "transport",
    "misc",
)

ZERO = Decimal("0")
CENT = Decimal("0.01")

# Largest value a NUMERIC(10, 2) column holds.
MAX_AMOUNT = Decimal("99999999.99")


def exceeds_max_amount(amount: Decimal) -> bool:
    """True when ``amount`` would not fit once rounded to cents."""
    return amount > MAX_AMOUNT or amount.quantize(CENT, rounding=ROUND_HALF_UP) > MAX_AMOUNT


class BudgetInputs(BaseModel):
    """Caller-supplied category amounts; any of them may be omitted."""

    flights: Decimal | None = None
    hotel: Decimal | None = None
    food: Decimal | None = None
    activities: Decimal | None = None
    transport: Decimal | None = None
    misc: Decimal | None = None


class BudgetBreakdown(BaseModel):
    """Resolved category amounts with the derived total."""

    flights: Amount = ZERO
    hotel: Amount = ZERO
    food: Amount = ZERO
    activities: Amount = ZERO
    transport: Amount = ZERO
    misc: Amount = ZERO
    total: Amount = ZERO


def aggregate_budget(inputs: BudgetInputs | None) -> BudgetBreakdown:
    """Derive the total budget from the six category amounts.

    Missing amounts count as zero.

    Args:
        inputs: Category amounts (None means every category is zero)

    Returns:
        BudgetBreakdown whose total equals the sum of the categories

    Raises:
        ValidationError: If any category amount is negative or too large to store
    """
    inputs = inputs or BudgetInputs()

    amounts: dict[str, Decimal] = {}
    for category in BUDGET_CATEGORIES:
        value = getattr(inputs, category)
        amount = ZERO if value is None else Decimal(value)
        if amount < 0:
            raise ValidationError(f"budget.{category} must be >= 0")
        if exceeds_max_amount(amount):
            raise ValidationError(f"budget.{category} must be <= {MAX_AMOUNT}")
        amounts[category] = amount

    return BudgetBreakdown(**amounts, total=sum(amounts.values(), ZERO))
