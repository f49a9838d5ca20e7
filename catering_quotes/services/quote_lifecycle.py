"""
Quote lifecycle rules.
Only draft quotes can be changed or deleted; status changes follow
Draft -> Sent -> Accepted/Rejected, Accepted -> Completed.
"""

from catering_quotes.core.exceptions import DomainRuleViolation
from catering_quotes.models.quote import Quote, QuoteStatus


ALLOWED_TRANSITIONS: dict[QuoteStatus, frozenset[QuoteStatus]] = {
    QuoteStatus.DRAFT: frozenset({QuoteStatus.SENT}),
    QuoteStatus.SENT: frozenset({QuoteStatus.ACCEPTED, QuoteStatus.REJECTED}),
    QuoteStatus.ACCEPTED: frozenset({QuoteStatus.COMPLETED}),
    QuoteStatus.REJECTED: frozenset(),
    QuoteStatus.COMPLETED: frozenset(),
}


def _status_name(quote: Quote) -> str:
    return QuoteStatus(quote.status).value


def assert_updatable(quote: Quote) -> None:
    """Raise DomainRuleViolation unless the quote is a draft."""
    if quote.status != QuoteStatus.DRAFT:
        raise DomainRuleViolation(
            f"Only Draft quotes can be updated. This quote status is '{_status_name(quote)}'."
        )


def assert_deletable(quote: Quote) -> None:
    """Raise DomainRuleViolation unless the quote is a draft."""
    if quote.status != QuoteStatus.DRAFT:
        raise DomainRuleViolation(
            f"Only Draft quotes can be deleted. This quote status is '{_status_name(quote)}'."
        )


def assert_transition(quote: Quote, target: QuoteStatus) -> None:
    """Raise DomainRuleViolation if the quote cannot move to target."""
    current = QuoteStatus(quote.status)
    if target not in ALLOWED_TRANSITIONS[current]:
        raise DomainRuleViolation(
            f"Cannot change quote status from '{current.value}' to '{target.value}'."
        )
