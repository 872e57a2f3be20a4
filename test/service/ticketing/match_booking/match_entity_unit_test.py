from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.ticketing.domain.entity.match_entity import Match
from src.service.ticketing.domain.value_object.inventory_claim import InventoryClaim
from src.service.ticketing.driven_adapter.repo.match_document import document_to_match


def make_match(**overrides) -> Match:
    fields = dict(
        id='m1',
        home_team='Paro FC',
        away_team='Thimphu City',
        has_tickets=True,
        ticket_availability=5,
        revision='rev-1',
    )
    fields.update(overrides)
    return Match(**fields)


@pytest.mark.unit
class TestMatch:
    def test_title(self) -> None:
        assert make_match().title == 'Paro FC vs Thimphu City'

    def test_available_tickets__never_negative(self) -> None:
        assert make_match(ticket_availability=-3).available_tickets == 0
        assert make_match(ticket_availability=None).available_tickets == 0

    def test_ensure_bookable__exact_quantity_ok(self) -> None:
        make_match().ensure_bookable(quantity=5)

    def test_ensure_bookable__too_many(self) -> None:
        with pytest.raises(DomainError, match='Only 5 ticket\\(s\\) available. You requested 6.'):
            make_match().ensure_bookable(quantity=6)

    def test_ensure_bookable__tickets_disabled(self) -> None:
        with pytest.raises(DomainError, match='Tickets are not available for this match'):
            make_match(has_tickets=False).ensure_bookable(quantity=1)

    def test_with_tickets_claimed__returns_reduced_copy(self) -> None:
        match = make_match()

        claimed = match.with_tickets_claimed(quantity=2)

        assert claimed.ticket_availability == 3
        assert match.ticket_availability == 5


@pytest.mark.unit
class TestInventoryClaim:
    def test_remaining_after_decrement(self) -> None:
        claim = InventoryClaim(match=make_match(), quantity=2, attempts=1, decremented=True)

        assert claim.previous_availability == 5
        assert claim.remaining_availability == 3

    def test_remaining_when_write_failed(self) -> None:
        claim = InventoryClaim(
            match=make_match(), quantity=2, attempts=1, decremented=False, write_error='denied'
        )

        assert claim.remaining_availability == 5


@pytest.mark.unit
class TestMatchDocument:
    def test_document_to_match__parses_cms_fields(self) -> None:
        match = document_to_match(
            {
                '_id': 'm1',
                '_rev': 'abc',
                'homeTeam': 'Paro FC',
                'awayTeam': 'Thimphu City',
                'date': '2025-03-15T15:00:00.000Z',
                'hasTickets': True,
                'ticketAvailability': 40,
            }
        )

        assert match.date == datetime(2025, 3, 15, 15, 0, tzinfo=timezone.utc)
        assert match.revision == 'abc'
        assert match.ticket_availability == 40
        assert match.venue is None

    def test_document_to_match__missing_optional_fields(self) -> None:
        match = document_to_match({'_id': 'm2'})

        assert match.has_tickets is False
        assert match.ticket_availability is None
        assert match.date is None
