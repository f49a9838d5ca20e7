"""
Quote number generator tests.
"""

from datetime import datetime, timezone

import pytest

from catering_quotes.services.quote_number import (
    QuoteNumberGenerator,
    format_quote_number,
    year_prefix,
)


class FakeCounter:
    """In-memory stand-in for the quote store."""
    
    def __init__(self, count: int = 0, error: Exception | None = None):
        self.count = count
        self.error = error
        self.prefixes: list[str] = []
    
    async def count_by_prefix(self, prefix: str) -> int:
        self.prefixes.append(prefix)
        if self.error:
            raise self.error
        return self.count


def fixed_clock(year: int):
    return lambda: datetime(year, 6, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "count, expected",
    [
        (0, "QT-2026-001"),
        (5, "QT-2026-006"),
        (100, "QT-2026-101"),
        (999, "QT-2026-1000"),
    ],
)
async def test_generate_uses_count_plus_one(count, expected):
    generator = QuoteNumberGenerator(FakeCounter(count), clock=fixed_clock(2026))
    assert await generator.generate() == expected


@pytest.mark.asyncio
async def test_generate_counts_current_year_only():
    counter = FakeCounter(3)
    generator = QuoteNumberGenerator(counter, clock=fixed_clock(2027))
    
    assert await generator.generate() == "QT-2027-004"
    assert counter.prefixes == ["QT-2027"]


@pytest.mark.asyncio
async def test_generate_with_custom_prefix():
    generator = QuoteNumberGenerator(FakeCounter(0), clock=fixed_clock(2026), prefix="EST")
    assert await generator.generate() == "EST-2026-001"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "count, taken, expected",
    [
        # a deleted quote left a gap: count + 1 is already in use
        (2, "QT-2026-003", "QT-2026-004"),
        (2, "QT-2026-005", "QT-2026-006"),
        # count already past the reported number
        (10, "QT-2026-003", "QT-2026-011"),
        # numbers from another year or format are ignored
        (2, "QT-2025-009", "QT-2026-003"),
        (2, "QT-2026-X", "QT-2026-003"),
    ],
)
async def test_generate_continues_past_taken_number(count, taken, expected):
    generator = QuoteNumberGenerator(FakeCounter(count), clock=fixed_clock(2026))
    assert await generator.generate(after=taken) == expected


@pytest.mark.asyncio
async def test_counter_errors_propagate():
    error = ConnectionError("database unavailable")
    generator = QuoteNumberGenerator(FakeCounter(error=error), clock=fixed_clock(2026))
    
    with pytest.raises(ConnectionError) as exc_info:
        await generator.generate()
    assert exc_info.value is error


def test_format_quote_number():
    assert year_prefix(2026) == "QT-2026"
    assert format_quote_number(2026, 7) == "QT-2026-007"
    assert format_quote_number(2026, 12345) == "QT-2026-12345"
