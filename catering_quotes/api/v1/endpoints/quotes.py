"""
Quote management endpoints.
CRUD operations, pricing preview and the status workflow.
"""

from fastapi import APIRouter, Query, Response, status

from catering_quotes.api.deps import DbSession, PageParams
from catering_quotes.models.quote import QuoteStatus
from catering_quotes.schemas.quote import (
    QuoteCreate,
    QuoteUpdate,
    QuoteResponse,
    QuoteListResponse,
    PricingPreviewRequest,
    PricingPreviewResponse,
)
from catering_quotes.services.quote import QuoteService


router = APIRouter()


@router.get(
    "",
    response_model=QuoteListResponse,
    summary="List quotes",
    description="Paginated list of quotes, newest first",
)
async def list_quotes(
    db: DbSession,
    pagination: PageParams,
    status: QuoteStatus | None = Query(None, description="Filter by status"),
    customer_id: int | None = Query(None, alias="customerId", description="Filter by customer"),
) -> QuoteListResponse:
    """List all quotes with pagination."""
    service = QuoteService(db)
    quotes, total = await service.list(
        skip=pagination.offset,
        limit=pagination.page_size,
        status=status,
        customer_id=customer_id,
    )
    return QuoteListResponse.create(
        items=[QuoteResponse.model_validate(q) for q in quotes],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.post(
    "/pricing-preview",
    response_model=PricingPreviewResponse,
    summary="Preview pricing",
    description="Price a set of lines with the current settings without saving a quote",
)
async def preview_pricing(
    data: PricingPreviewRequest,
    db: DbSession,
) -> PricingPreviewResponse:
    service = QuoteService(db)
    return await service.preview_pricing(data)


@router.get(
    "/{quote_id}",
    response_model=QuoteResponse,
    summary="Get a quote",
)
async def get_quote(
    quote_id: int,
    db: DbSession,
) -> QuoteResponse:
    """Get quote by ID."""
    service = QuoteService(db)
    quote = await service.get_or_404(quote_id)
    return QuoteResponse.model_validate(quote)


@router.post(
    "",
    response_model=QuoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a quote",
    description="Create a draft quote; omitted VAT and markup use the settings defaults",
)
async def create_quote(
    data: QuoteCreate,
    db: DbSession,
) -> QuoteResponse:
    """Create a new quote."""
    service = QuoteService(db)
    quote = await service.create(data)
    return QuoteResponse.model_validate(quote)


@router.put(
    "/{quote_id}",
    response_model=QuoteResponse,
    summary="Update a quote",
    description="Only draft quotes can be updated",
)
async def update_quote(
    quote_id: int,
    data: QuoteUpdate,
    db: DbSession,
) -> QuoteResponse:
    """Update a draft quote."""
    service = QuoteService(db)
    quote = await service.get_or_404(quote_id)
    quote = await service.update(quote, data)
    return QuoteResponse.model_validate(quote)


@router.delete(
    "/{quote_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a quote",
    description="Only draft quotes can be deleted",
)
async def delete_quote(
    quote_id: int,
    db: DbSession,
) -> Response:
    """Delete a draft quote."""
    service = QuoteService(db)
    quote = await service.get_or_404(quote_id)
    await service.delete(quote)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _change_status(db: DbSession, quote_id: int, target: QuoteStatus) -> QuoteResponse:
    service = QuoteService(db)
    quote = await service.get_or_404(quote_id)
    quote = await service.change_status(quote, target)
    return QuoteResponse.model_validate(quote)


@router.post(
    "/{quote_id}/send",
    response_model=QuoteResponse,
    summary="Send a quote",
    description="Mark a draft quote as sent",
)
async def send_quote(quote_id: int, db: DbSession) -> QuoteResponse:
    return await _change_status(db, quote_id, QuoteStatus.SENT)


@router.post(
    "/{quote_id}/accept",
    response_model=QuoteResponse,
    summary="Accept a quote",
    description="Mark a sent quote as accepted by the customer",
)
async def accept_quote(quote_id: int, db: DbSession) -> QuoteResponse:
    return await _change_status(db, quote_id, QuoteStatus.ACCEPTED)


@router.post(
    "/{quote_id}/reject",
    response_model=QuoteResponse,
    summary="Reject a quote",
    description="Mark a sent quote as rejected by the customer",
)
async def reject_quote(quote_id: int, db: DbSession) -> QuoteResponse:
    return await _change_status(db, quote_id, QuoteStatus.REJECTED)


@router.post(
    "/{quote_id}/complete",
    response_model=QuoteResponse,
    summary="Complete a quote",
    description="Mark an accepted quote as delivered",
)
async def complete_quote(quote_id: int, db: DbSession) -> QuoteResponse:
    return await _change_status(db, quote_id, QuoteStatus.COMPLETED)
