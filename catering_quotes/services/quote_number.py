"""
Quote number generation.
Format: QT-{year}-{sequence}, e.g. QT-2026-001.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Protocol

from catering_quotes.core.config import settings


logger = logging.getLogger(__name__)


class QuoteCounter(Protocol):
    """Storage capability the generator needs."""
    
    async def count_by_prefix(self, prefix: str) -> int:
        """Count quotes whose number starts with prefix."""
        ...


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def year_prefix(year: int, prefix: str = settings.QUOTE_NUMBER_PREFIX) -> str:
    return f"{prefix}-{year}"


def format_quote_number(year: int, sequence: int, prefix: str = settings.QUOTE_NUMBER_PREFIX) -> str:
    """Build a quote number, padding the sequence to at least three digits."""
    return f"{year_prefix(year, prefix)}-{sequence:03d}"


class QuoteNumberGenerator:
    """
    Derive the next quote number for the current UTC year.
    
    The sequence is the number of quotes already numbered in the year
    plus one, or one past a number the caller reports as taken.
    Count-then-insert is not atomic: callers must generate the number in
    the same transaction as the insert and retry on a unique-constraint
    violation, passing the clashing number back.
    """
    
    def __init__(
        self,
        counter: QuoteCounter,
        clock: Callable[[], datetime] = utc_now,
        prefix: str = settings.QUOTE_NUMBER_PREFIX,
    ):
        self.counter = counter
        self.clock = clock
        self.prefix = prefix
    
    async def generate(self, after: str | None = None) -> str:
        """
        Return the next quote number.
        
        after is a number found to be taken in the current year; the
        sequence then continues past it.
        """
        year = self.clock().year
        prefix = year_prefix(year, self.prefix)
        count = await self.counter.count_by_prefix(prefix)
        sequence = count + 1
        
        if after and after.startswith(f"{prefix}-"):
            taken = after[len(prefix) + 1:]
            if taken.isdigit():
                sequence = max(sequence, int(taken) + 1)
        
        quote_number = format_quote_number(year, sequence, self.prefix)
        logger.debug(f"Generated quote number {quote_number} ({count} existing)")
        return quote_number
