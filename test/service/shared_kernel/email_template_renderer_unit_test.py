from datetime import datetime, timezone

import pytest

from src.service.shared_kernel.driven_adapter.email.email_template_renderer import (
    EmailTemplateRenderer,
    format_match_date,
)
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.match_entity import Match


@pytest.fixture
def renderer() -> EmailTemplateRenderer:
    return EmailTemplateRenderer(
        club_name='Paro FC',
        support_email='shop@parofc.com',
        clock=lambda: datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


@pytest.mark.unit
class TestEmailTemplateRenderer:
    def test_format_match_date(self) -> None:
        kickoff = datetime(2025, 3, 15, 15, 0, tzinfo=timezone.utc)

        assert format_match_date(kickoff) == 'Saturday, March 15, 2025 at 03:00 PM'
        assert format_match_date(None) == 'TBD'

    def test_booking_admin__shows_remaining_and_escapes_input(
        self, renderer: EmailTemplateRenderer
    ) -> None:
        booking = Booking(
            booking_id='TKT-ABC-1234',
            match_id='m1',
            name='<b onmouseover=x()>Pema</b>',
            email='pema@example.com',
            quantity=2,
        )
        match = Match(id='m1', home_team='Paro FC', away_team='Thimphu <City>', venue=None)

        html = renderer.render(
            'booking_admin.html', booking=booking, match=match, remaining_availability=3
        )

        assert '3 available' in html
        assert 'onmouseover' not in html
        assert 'Thimphu <City>' not in html
        assert 'TBD' in html
