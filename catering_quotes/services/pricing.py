"""
Quote pricing.
Pure Decimal arithmetic for line totals, quote totals, margin and
margin health. Nothing here touches the database.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Iterable, Union

from pydantic import BaseModel, ConfigDict

from catering_quotes.core.exceptions import InvalidArgument


Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
ONE = Decimal("1")


class MarginStatus(str, Enum):
    """Margin health of a quote."""
    GREEN = "green"
    AMBER = "amber"
    RED = "red"


class MarginThresholds(BaseModel):
    """Lower bounds for the green and amber margin tiers."""
    
    model_config = ConfigDict(frozen=True)
    
    green: Decimal
    amber: Decimal
    
    def classify(self, margin: Number) -> MarginStatus:
        return classify_margin(margin, self.green, self.amber)


class PricingResult(BaseModel):
    """Outcome of one quote pricing computation."""
    
    model_config = ConfigDict(frozen=True)
    
    total_cost: Decimal
    price_before_vat: Decimal
    vat_amount: Decimal
    total_price: Decimal
    margin: Decimal
    margin_status: MarginStatus


def to_decimal(value: Number) -> Decimal:
    """
    Convert to Decimal, going through str so floats keep their printed value.
    
    Raises:
        InvalidArgument: value is not a finite number
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation:
            raise InvalidArgument(f"Not a number: {value!r}") from None
    if not result.is_finite():
        raise InvalidArgument(f"Not a finite number: {value!r}")
    return result


def _check_line(unit_cost: Decimal, quantity: int, markup: Decimal) -> None:
    if unit_cost < 0:
        raise InvalidArgument("Unit cost cannot be negative")
    if quantity <= 0:
        raise InvalidArgument("Quantity must be greater than 0")
    if markup < 0:
        raise InvalidArgument("Markup percentage cannot be negative")


def compute_line_total(unit_cost: Number, quantity: int, markup: Number) -> Decimal:
    """
    Price of one quote line: unit_cost * quantity * (1 + markup).
    
    Raises:
        InvalidArgument: negative cost or markup, or non-positive quantity
    """
    unit_cost = to_decimal(unit_cost)
    markup = to_decimal(markup)
    _check_line(unit_cost, quantity, markup)
    
    line_cost = unit_cost * quantity
    return line_cost * (ONE + markup)


def compute_unit_price(unit_cost: Number, markup: Number) -> Decimal:
    """Marked-up price of a single unit."""
    unit_cost = to_decimal(unit_cost)
    markup = to_decimal(markup)
    _check_line(unit_cost, 1, markup)
    return unit_cost * (ONE + markup)


def compute_total_cost(lines: Iterable[tuple[Number, int]]) -> Decimal:
    """Sum of unit_cost * quantity over (unit_cost, quantity) pairs, without markup."""
    total = ZERO
    for unit_cost, quantity in lines:
        unit_cost = to_decimal(unit_cost)
        _check_line(unit_cost, quantity, ZERO)
        total += unit_cost * quantity
    return total


def classify_margin(margin: Number, green_threshold: Number, amber_threshold: Number) -> MarginStatus:
    """
    Map a margin ratio to green, amber or red.
    
    Both thresholds are inclusive lower bounds. Their ordering is not
    checked here.
    """
    margin = to_decimal(margin)
    if margin >= to_decimal(green_threshold):
        return MarginStatus.GREEN
    if margin >= to_decimal(amber_threshold):
        return MarginStatus.AMBER
    return MarginStatus.RED


def compute_quote_pricing(
    total_cost: Number,
    markup: Number,
    vat_rate: Number,
    green_threshold: Number,
    amber_threshold: Number,
) -> PricingResult:
    """
    Price a whole quote.
    
    Pricing formula:
        1. price_before_vat = total_cost * (1 + markup)
        2. vat = price_before_vat * vat_rate
        3. total_price = price_before_vat + vat
        4. margin = (total_price - total_cost) / total_price, or 0 when
           total_price is 0
        5. margin_status = classify_margin(margin, green, amber)
    
    total_cost is the sum of unit_cost * quantity across lines, without
    markup or VAT. No rounding is applied.
    
    Raises:
        InvalidArgument: negative cost or markup, VAT rate outside [0, 1]
    """
    total_cost = to_decimal(total_cost)
    markup = to_decimal(markup)
    vat_rate = to_decimal(vat_rate)
    
    if total_cost < 0:
        raise InvalidArgument("Total cost cannot be negative")
    if markup < 0:
        raise InvalidArgument("Markup percentage cannot be negative")
    if vat_rate < 0 or vat_rate > 1:
        raise InvalidArgument("VAT rate must be between 0 and 1")
    
    price_before_vat = total_cost * (ONE + markup)
    vat = price_before_vat * vat_rate
    total_price = price_before_vat + vat
    
    margin = (total_price - total_cost) / total_price if total_price > 0 else ZERO
    
    return PricingResult(
        total_cost=total_cost,
        price_before_vat=price_before_vat,
        vat_amount=vat,
        total_price=total_price,
        margin=margin,
        margin_status=classify_margin(margin, green_threshold, amber_threshold),
    )
