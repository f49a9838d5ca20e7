"""
Quote service.
Handles quote CRUD, pricing of line items and the status workflow.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from catering_quotes.core.config import settings
from catering_quotes.core.exceptions import NotFoundError, ValidationError
from catering_quotes.models.customer import Customer
from catering_quotes.models.food_item import FoodItem
from catering_quotes.models.quote import Quote, QuoteLineItem, QuoteStatus
from catering_quotes.schemas.quote import (
    QuoteCreate,
    QuoteUpdate,
    QuoteLineItemCreate,
    PricingPreviewRequest,
    PricingPreviewResponse,
)
from catering_quotes.services.app_settings import SettingsService
from catering_quotes.services.pricing import (
    MarginThresholds,
    compute_line_total,
    compute_quote_pricing,
    compute_total_cost,
    compute_unit_price,
)
from catering_quotes.services.quote_lifecycle import (
    assert_deletable,
    assert_transition,
    assert_updatable,
)
from catering_quotes.services.quote_number import QuoteNumberGenerator


logger = logging.getLogger(__name__)

ResolvedLine = tuple[QuoteLineItemCreate, FoodItem]


class QuoteService:
    """Service for quote operations."""

    def __init__(
        self,
        db: AsyncSession,
        number_generator: QuoteNumberGenerator | None = None,
    ):
        self.db = db
        self.settings_service = SettingsService(db)
        self.number_generator = number_generator or QuoteNumberGenerator(self)

    async def count_by_prefix(self, prefix: str) -> int:
        """Count quotes whose number starts with prefix."""
        result = await self.db.execute(
            select(func.count(Quote.id)).where(
                Quote.quote_number.startswith(prefix, autoescape=True),
            )
        )
        return result.scalar() or 0

    async def _resolve_lines(self, items: list[QuoteLineItemCreate]) -> list[ResolvedLine]:
        """Look up the food item of every line, collecting all missing IDs."""
        ids = {item.food_item_id for item in items}
        result = await self.db.execute(select(FoodItem).where(FoodItem.id.in_(ids)))
        food_items = {food_item.id: food_item for food_item in result.scalars().all()}

        errors = {}
        for index, item in enumerate(items):
            if item.food_item_id not in food_items:
                errors[f"line_items[{index}].food_item_id"] = [
                    f"Food item with ID {item.food_item_id} not found"
                ]
        if errors:
            raise ValidationError("Line item validation failed", errors=errors)

        return [(item, food_items[item.food_item_id]) for item in items]

    @staticmethod
    def _build_lines(resolved: list[ResolvedLine], markup) -> list[QuoteLineItem]:
        """Create priced line items; unset fields fall back to the food item."""
        lines = []
        for position, (item, food_item) in enumerate(resolved, start=1):
            unit_cost = item.unit_cost if item.unit_cost is not None else food_item.cost_price
            lines.append(
                QuoteLineItem(
                    food_item_id=food_item.id,
                    description=item.description or food_item.name,
                    quantity=item.quantity,
                    unit_cost=unit_cost,
                    unit_price=compute_unit_price(unit_cost, markup),
                    line_total=compute_line_total(unit_cost, item.quantity, markup),
                    display_order=item.display_order if item.display_order is not None else position,
                )
            )
        return sorted(lines, key=lambda line: line.display_order)

    @staticmethod
    def _apply_pricing(quote: Quote, thresholds: MarginThresholds) -> None:
        """Recompute the quote totals, margin and margin status from its line items."""
        total_cost = compute_total_cost(
            (line.unit_cost, line.quantity) for line in quote.line_items
        )
        pricing = compute_quote_pricing(
            total_cost,
            quote.markup_percentage,
            quote.vat_rate,
            thresholds.green,
            thresholds.amber,
        )
        quote.total_cost = pricing.total_cost
        quote.total_price = pricing.total_price
        quote.margin = pricing.margin
        quote.margin_status = pricing.margin_status

    async def create(self, data: QuoteCreate) -> Quote:
        """
        Create a draft quote with its line items.

        The quote number is generated inside the request transaction. A
        clash on the unique quote number rolls back to a savepoint and the
        next number after the clashing one is tried, up to
        QUOTE_NUMBER_MAX_ATTEMPTS times.

        Raises:
            ValidationError: Unknown customer or food item
            IntegrityError: Quote number still clashing after all attempts
        """
        customer_result = await self.db.execute(
            select(Customer).where(Customer.id == data.customer_id)
        )
        customer = customer_result.scalar_one_or_none()
        if not customer:
            raise ValidationError(
                f"Customer with ID {data.customer_id} not found",
                errors={"customer_id": [f"Customer with ID {data.customer_id} not found"]},
            )

        app_settings = await self.settings_service.get()
        thresholds = await self.settings_service.get_thresholds()
        vat_rate = data.vat_rate if data.vat_rate is not None else app_settings.default_vat_rate
        markup = (
            data.markup_percentage
            if data.markup_percentage is not None
            else app_settings.default_markup_percentage
        )

        resolved = await self._resolve_lines(data.line_items)

        max_attempts = max(1, settings.QUOTE_NUMBER_MAX_ATTEMPTS)
        taken = None
        for attempt in range(1, max_attempts + 1):
            quote_number = await self.number_generator.generate(after=taken)
            quote = Quote(
                customer_id=data.customer_id,
                quote_number=quote_number,
                status=QuoteStatus.DRAFT,
                vat_rate=vat_rate,
                markup_percentage=markup,
                event_date=data.event_date,
                notes=data.notes,
                line_items=self._build_lines(resolved, markup),
            )
            self._apply_pricing(quote, thresholds)

            try:
                async with self.db.begin_nested():
                    self.db.add(quote)
                    await self.db.flush()
            except IntegrityError as exc:
                if "quote_number" not in str(exc.orig) or attempt == max_attempts:
                    logger.error(f"Could not save quote {quote_number}: {exc.orig}")
                    raise
                logger.warning(
                    f"Quote number {quote_number} already taken, "
                    f"retrying ({attempt}/{max_attempts})"
                )
                taken = quote_number
                continue
            break

        logger.info(f"Quote created: {quote.id} - {quote.quote_number}")
        return await self.get_or_404(quote.id)

    async def get_by_id(self, quote_id: int) -> Quote | None:
        """Get quote by ID with customer and line items loaded."""
        result = await self.db.execute(
            select(Quote)
            .options(
                selectinload(Quote.line_items),
                selectinload(Quote.customer),
            )
            .where(Quote.id == quote_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, quote_id: int) -> Quote:
        """Get quote by ID or raise NotFoundError."""
        quote = await self.get_by_id(quote_id)
        if not quote:
            raise NotFoundError(f"Quote with ID {quote_id} not found")
        return quote

    async def list(
        self,
        skip: int = 0,
        limit: int = 20,
        status: QuoteStatus | None = None,
        customer_id: int | None = None,
    ) -> tuple[list[Quote], int]:
        """List quotes with pagination and filters, newest first."""
        query = select(Quote)
        count_query = select(func.count(Quote.id))

        if status:
            query = query.where(Quote.status == status)
            count_query = count_query.where(Quote.status == status)

        if customer_id:
            query = query.where(Quote.customer_id == customer_id)
            count_query = count_query.where(Quote.customer_id == customer_id)

        total_result = await self.db.execute(count_query)
        total = total_result.scalar() or 0

        query = (
            query
            .options(
                selectinload(Quote.line_items),
                selectinload(Quote.customer),
            )
            .order_by(Quote.quote_date.desc(), Quote.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(query)
        quotes = list(result.scalars().all())

        return quotes, total

    async def update(self, quote: Quote, data: QuoteUpdate) -> Quote:
        """
        Update a draft quote and recompute its pricing.

        Only fields present in the payload are applied; line_items
        replaces every line.

        Raises:
            DomainRuleViolation: If the quote is not a draft
            ValidationError: Unknown food item
        """
        assert_updatable(quote)

        update_data = data.model_dump(exclude_unset=True, exclude={"line_items"})
        for field, value in update_data.items():
            setattr(quote, field, value)

        if data.line_items is not None:
            resolved = await self._resolve_lines(data.line_items)
            quote.line_items = self._build_lines(resolved, quote.markup_percentage)
        elif "markup_percentage" in update_data:
            for line in quote.line_items:
                line.unit_price = compute_unit_price(line.unit_cost, quote.markup_percentage)
                line.line_total = compute_line_total(
                    line.unit_cost, line.quantity, quote.markup_percentage
                )

        thresholds = await self.settings_service.get_thresholds()
        self._apply_pricing(quote, thresholds)

        await self.db.flush()

        logger.info(f"Quote updated: {quote.id}")
        return await self.get_or_404(quote.id)

    async def delete(self, quote: Quote) -> None:
        """
        Delete a draft quote.

        Raises:
            DomainRuleViolation: If the quote is not a draft
        """
        assert_deletable(quote)

        quote_id = quote.id
        await self.db.delete(quote)
        await self.db.flush()

        logger.info(f"Quote deleted: {quote_id}")

    async def change_status(self, quote: Quote, target: QuoteStatus) -> Quote:
        """
        Move a quote along the status workflow.

        Raises:
            DomainRuleViolation: If the transition is not allowed
        """
        assert_transition(quote, target)

        previous = quote.status
        quote.status = target
        if target == QuoteStatus.SENT:
            quote.sent_at = datetime.now(timezone.utc)

        await self.db.flush()

        logger.info(f"Quote {quote.quote_number} status changed: {previous.value} -> {target.value}")
        return await self.get_or_404(quote.id)

    async def preview_pricing(self, data: PricingPreviewRequest) -> PricingPreviewResponse:
        """Price a set of lines with the same rules as a saved quote."""
        app_settings = await self.settings_service.get()
        thresholds = await self.settings_service.get_thresholds()
        vat_rate = data.vat_rate if data.vat_rate is not None else app_settings.default_vat_rate
        markup = (
            data.markup_percentage
            if data.markup_percentage is not None
            else app_settings.default_markup_percentage
        )

        line_totals = [
            compute_line_total(line.unit_cost, line.quantity, markup)
            for line in data.line_items
        ]
        total_cost = compute_total_cost(
            (line.unit_cost, line.quantity) for line in data.line_items
        )
        pricing = compute_quote_pricing(
            total_cost, markup, vat_rate, thresholds.green, thresholds.amber
        )

        return PricingPreviewResponse(
            vat_rate=vat_rate,
            markup_percentage=markup,
            line_totals=line_totals,
            **pricing.model_dump(),
        )
