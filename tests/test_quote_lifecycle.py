"""
Quote lifecycle rule tests.
"""

import pytest

from catering_quotes.core.exceptions import DomainRuleViolation
from catering_quotes.models.quote import Quote, QuoteStatus
from catering_quotes.services.quote_lifecycle import (
    assert_deletable,
    assert_transition,
    assert_updatable,
)


NON_DRAFT = [
    QuoteStatus.SENT,
    QuoteStatus.ACCEPTED,
    QuoteStatus.REJECTED,
    QuoteStatus.COMPLETED,
]


def make_quote(status: QuoteStatus) -> Quote:
    return Quote(quote_number="QT-2026-001", status=status)


def test_draft_can_be_updated_and_deleted():
    quote = make_quote(QuoteStatus.DRAFT)
    assert_updatable(quote)
    assert_deletable(quote)


@pytest.mark.parametrize("status", NON_DRAFT)
def test_non_draft_cannot_be_updated(status):
    with pytest.raises(DomainRuleViolation) as exc_info:
        assert_updatable(make_quote(status))
    assert exc_info.value.message == (
        f"Only Draft quotes can be updated. This quote status is '{status.value}'."
    )


@pytest.mark.parametrize("status", NON_DRAFT)
def test_non_draft_cannot_be_deleted(status):
    with pytest.raises(DomainRuleViolation) as exc_info:
        assert_deletable(make_quote(status))
    assert exc_info.value.message == (
        f"Only Draft quotes can be deleted. This quote status is '{status.value}'."
    )


@pytest.mark.parametrize(
    "current, target",
    [
        (QuoteStatus.DRAFT, QuoteStatus.SENT),
        (QuoteStatus.SENT, QuoteStatus.ACCEPTED),
        (QuoteStatus.SENT, QuoteStatus.REJECTED),
        (QuoteStatus.ACCEPTED, QuoteStatus.COMPLETED),
    ],
)
def test_allowed_transitions(current, target):
    assert_transition(make_quote(current), target)


@pytest.mark.parametrize(
    "current, target",
    [
        (QuoteStatus.DRAFT, QuoteStatus.ACCEPTED),
        (QuoteStatus.DRAFT, QuoteStatus.COMPLETED),
        (QuoteStatus.SENT, QuoteStatus.DRAFT),
        (QuoteStatus.SENT, QuoteStatus.SENT),
        (QuoteStatus.REJECTED, QuoteStatus.ACCEPTED),
        (QuoteStatus.COMPLETED, QuoteStatus.SENT),
    ],
)
def test_illegal_transitions(current, target):
    with pytest.raises(DomainRuleViolation) as exc_info:
        assert_transition(make_quote(current), target)
    assert f"from '{current.value}' to '{target.value}'" in exc_info.value.message
