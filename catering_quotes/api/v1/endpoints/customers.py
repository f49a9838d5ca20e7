"""
Customer management endpoints.
CRUD operations for customers.
"""

from fastapi import APIRouter, Query, Response, status

from catering_quotes.api.deps import DbSession, PageParams
from catering_quotes.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerListResponse,
)
from catering_quotes.services.customer import CustomerService


router = APIRouter()


@router.get(
    "",
    response_model=CustomerListResponse,
    summary="List customers",
    description="Paginated list of customers ordered by name",
)
async def list_customers(
    db: DbSession,
    pagination: PageParams,
    search: str | None = Query(None, description="Search by name or email"),
) -> CustomerListResponse:
    """List all customers with pagination."""
    service = CustomerService(db)
    customers, total = await service.list(
        skip=pagination.offset,
        limit=pagination.page_size,
        search=search,
    )
    return CustomerListResponse.create(
        items=[CustomerResponse.model_validate(c) for c in customers],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Get a customer",
)
async def get_customer(
    customer_id: int,
    db: DbSession,
) -> CustomerResponse:
    """Get customer by ID."""
    service = CustomerService(db)
    customer = await service.get_or_404(customer_id)
    return CustomerResponse.model_validate(customer)


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a customer",
)
async def create_customer(
    data: CustomerCreate,
    db: DbSession,
) -> CustomerResponse:
    """Create a new customer."""
    service = CustomerService(db)
    customer = await service.create(data)
    return CustomerResponse.model_validate(customer)


@router.put(
    "/{customer_id}",
    response_model=CustomerResponse,
    summary="Update a customer",
    description="Apply the fields present in the body; omitted fields are unchanged",
)
async def update_customer(
    customer_id: int,
    data: CustomerUpdate,
    db: DbSession,
) -> CustomerResponse:
    """Update a customer."""
    service = CustomerService(db)
    customer = await service.get_or_404(customer_id)
    customer = await service.update(customer, data)
    return CustomerResponse.model_validate(customer)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
    description="Delete a customer together with their quotes",
)
async def delete_customer(
    customer_id: int,
    db: DbSession,
) -> Response:
    """Delete a customer."""
    service = CustomerService(db)
    customer = await service.get_or_404(customer_id)
    await service.delete(customer)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
