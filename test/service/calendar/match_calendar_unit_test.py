from datetime import datetime, timedelta, timezone
from urllib.parse import parse_qs, urlsplit

import pytest

from src.service.calendar.app.dto.calendar_config import CalendarConfig
from src.service.calendar.domain.match_calendar import (
    CalendarLinks,
    build_calendar_links,
    build_ics,
    escape_ics_text,
    fold_line,
    format_ics_datetime,
    format_iso_datetime,
)
from src.service.ticketing.domain.entity.match_entity import Match


NOW = datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)
CONFIG = CalendarConfig()


def make_match(**overrides) -> Match:
    fields = dict(
        id='m1',
        home_team='Paro FC',
        away_team='Thimphu City',
        date=datetime(2025, 3, 15, 15, 0, tzinfo=timezone.utc),
        competition='Bhutan Premier League',
        venue='Woochu Sports Arena, Paro',
        event='Matchday 1',
    )
    fields.update(overrides)
    return Match(**fields)


@pytest.mark.unit
class TestIcsFormatting:
    def test_format_ics_datetime__utc(self) -> None:
        assert format_ics_datetime(datetime(2025, 3, 15, 15, 0, tzinfo=timezone.utc)) == (
            '20250315T150000Z'
        )

    def test_format_ics_datetime__converts_offset_to_utc(self) -> None:
        bhutan = timezone(timedelta(hours=6))

        assert format_ics_datetime(datetime(2025, 3, 15, 21, 0, tzinfo=bhutan)) == (
            '20250315T150000Z'
        )

    def test_format_iso_datetime(self) -> None:
        assert format_iso_datetime(datetime(2025, 3, 15, 15, 0, tzinfo=timezone.utc)) == (
            '2025-03-15T15:00:00.000Z'
        )

    def test_escape_ics_text(self) -> None:
        assert escape_ics_text('a\\b;c,d\ne') == r'a\\b\;c\,d\ne'

    def test_fold_line__short_line_untouched(self) -> None:
        assert fold_line('SUMMARY:Paro FC') == 'SUMMARY:Paro FC'

    def test_fold_line__long_line_split_at_75_octets(self) -> None:
        folded = fold_line('DESCRIPTION:' + 'x' * 200)

        parts = folded.split('\r\n')
        assert len(parts[0].encode()) == 75
        assert all(part.startswith(' ') for part in parts[1:])
        assert all(len(part.encode()) <= 75 for part in parts)
        assert ''.join(part[1:] if i else part for i, part in enumerate(parts)) == (
            'DESCRIPTION:' + 'x' * 200
        )

    def test_fold_line__never_splits_multibyte_characters(self) -> None:
        folded = fold_line('SUMMARY:' + 'ཕ' * 40)

        for part in folded.split('\r\n'):
            assert len(part.encode()) <= 75


@pytest.mark.unit
class TestBuildIcs:
    def test_build_ics__document_structure(self) -> None:
        ics = build_ics([make_match()], config=CONFIG, now=NOW)
        lines = ics.split('\r\n')

        assert lines[:8] == [
            'BEGIN:VCALENDAR',
            'VERSION:2.0',
            'PRODID:-//Paro FC//Match Calendar//EN',
            'CALSCALE:GREGORIAN',
            'METHOD:PUBLISH',
            'X-WR-CALNAME:Paro FC Matches',
            'X-WR-CALDESC:Paro FC Match Schedule',
            'X-WR-TIMEZONE:UTC',
        ]
        assert lines[-1] == 'END:VCALENDAR'
        assert 'UID:paro-fc-match-m1@parofc.com' in lines
        assert 'DTSTAMP:20250301T083000Z' in lines
        assert 'DTSTART:20250315T150000Z' in lines
        assert 'DTEND:20250315T170000Z' in lines
        assert 'SUMMARY:Paro FC vs Thimphu City' in lines
        assert 'LOCATION:Woochu Sports Arena\\, Paro' in lines
        assert '\n' not in ics.replace('\r\n', '')

    def test_build_ics__one_event_per_scheduled_match(self) -> None:
        matches = [make_match(id='m1'), make_match(id='m2'), make_match(id='m3', date=None)]

        ics = build_ics(matches, config=CONFIG, now=NOW)

        assert ics.count('BEGIN:VEVENT') == 2
        assert 'paro-fc-match-m3' not in ics

    def test_build_ics__empty_calendar(self) -> None:
        ics = build_ics([], config=CONFIG, now=NOW)

        assert 'BEGIN:VEVENT' not in ics
        assert ics.endswith('END:VCALENDAR')

    def test_build_ics__description_escaped(self) -> None:
        ics = build_ics([make_match(event='Final; extra time, maybe')], config=CONFIG, now=NOW)
        unfolded = ics.replace('\r\n ', '')

        assert r'Event: Final\; extra time\, maybe\n' in unfolded

    def test_build_ics__deterministic_except_dtstamp(self) -> None:
        matches = [make_match(id='m1'), make_match(id='m2')]

        first = build_ics(matches, config=CONFIG, now=NOW)
        second = build_ics(matches, config=CONFIG, now=NOW)
        later = build_ics(matches, config=CONFIG, now=datetime(2026, 1, 1, tzinfo=timezone.utc))

        assert first == second
        assert first.replace('DTSTAMP:20250301T083000Z', 'DTSTAMP:X') == later.replace(
            'DTSTAMP:20260101T000000Z', 'DTSTAMP:X'
        )

    def test_build_ics__configurable_duration(self) -> None:
        ics = build_ics([make_match()], config=CalendarConfig(match_duration_hours=3), now=NOW)

        assert 'DTEND:20250315T180000Z' in ics.split('\r\n')


@pytest.mark.unit
class TestCalendarLinks:
    def test_links__google_template(self) -> None:
        links = build_calendar_links([make_match()], config=CONFIG)

        url = urlsplit(links.google)
        params = parse_qs(url.query)
        assert f'{url.scheme}://{url.netloc}{url.path}' == (
            'https://calendar.google.com/calendar/render'
        )
        assert params['action'] == ['TEMPLATE']
        assert params['text'] == ['Paro FC vs Thimphu City']
        assert params['dates'] == ['20250315T150000Z/20250315T170000Z']
        assert params['details'] == [
            'Competition: Bhutan Premier League\nEvent: Matchday 1\nVenue: Woochu Sports Arena, Paro'
        ]
        assert params['location'] == ['Woochu Sports Arena, Paro']

    def test_links__outlook_and_office365_compose(self) -> None:
        links = build_calendar_links([make_match()], config=CONFIG)

        assert links.outlook.startswith('https://outlook.live.com/calendar/0/deeplink/compose?')
        assert links.office365.startswith(
            'https://outlook.office.com/calendar/0/deeplink/compose?'
        )
        for url in (links.outlook, links.office365):
            params = parse_qs(urlsplit(url).query)
            assert params['subject'] == ['Paro FC vs Thimphu City']
            assert params['startdt'] == ['2025-03-15T15:00:00.000Z']
            assert params['enddt'] == ['2025-03-15T17:00:00.000Z']

    def test_links__spaces_encoded_as_plus(self) -> None:
        links = build_calendar_links([make_match()], config=CONFIG)

        assert 'text=Paro+FC+vs+Thimphu+City' in links.google

    def test_links__first_scheduled_match(self) -> None:
        matches = [make_match(id='tbd', date=None), make_match(id='m2', away_team='Transport')]

        links = build_calendar_links(matches, config=CONFIG)

        assert 'Transport' in links.google

    def test_links__no_matches(self) -> None:
        assert build_calendar_links([], config=CONFIG) == CalendarLinks(
            google='', outlook='', office365=''
        )
