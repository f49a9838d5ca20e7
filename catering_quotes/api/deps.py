"""
API Dependencies.
Common dependencies for database sessions and pagination.
"""

from typing import Annotated
from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from catering_quotes.core.config import settings
from catering_quotes.core.database import get_db
from catering_quotes.schemas.base import PaginationParams


def get_pagination(
    page: int = Query(1, description="Page number (1-based)"),
    page_size: int = Query(
        settings.DEFAULT_PAGE_SIZE,
        alias="pageSize",
        description=f"Items per page, clamped to 1-{settings.MAX_PAGE_SIZE}",
    ),
) -> PaginationParams:
    """
    Read pagination query parameters.
    
    Out-of-range values are corrected rather than rejected: page is at
    least 1 and pageSize is clamped to [1, MAX_PAGE_SIZE].
    """
    return PaginationParams(
        page=max(page, 1),
        page_size=min(max(page_size, 1), settings.MAX_PAGE_SIZE),
    )


# Type aliases for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
PageParams = Annotated[PaginationParams, Depends(get_pagination)]
