"""
iCalendar (RFC 5545) export and calendar-provider deep links for matches

Everything here is pure: the same matches and the same `now` give the same
bytes. Matches without a kick-off time are left out.
"""

from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional
from urllib.parse import urlencode

import attrs

from src.service.calendar.app.dto.calendar_config import CalendarConfig
from src.service.ticketing.domain.entity.match_entity import Match


CRLF = '\r\n'
MAX_LINE_OCTETS = 75

GOOGLE_CALENDAR_URL = 'https://calendar.google.com/calendar/render'
OUTLOOK_CALENDAR_URL = 'https://outlook.live.com/calendar/0/deeplink/compose'
OFFICE365_CALENDAR_URL = 'https://outlook.office.com/calendar/0/deeplink/compose'


@attrs.frozen
class CalendarLinks:
    google: str = ''
    outlook: str = ''
    office365: str = ''


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_ics_datetime(value: datetime) -> str:
    """YYYYMMDDTHHMMSSZ"""
    return _as_utc(value).strftime('%Y%m%dT%H%M%SZ')


def format_iso_datetime(value: datetime) -> str:
    """2025-03-15T15:00:00.000Z"""
    moment = _as_utc(value)
    return f'{moment:%Y-%m-%dT%H:%M:%S}.{moment.microsecond // 1000:03d}Z'


def escape_ics_text(text: str) -> str:
    # Backslash first, otherwise the escapes added below would be doubled
    return (
        text.replace('\\', '\\\\')
        .replace(';', '\\;')
        .replace(',', '\\,')
        .replace('\r\n', '\n')
        .replace('\n', '\\n')
    )


def fold_line(line: str) -> str:
    """Split content lines longer than 75 octets; continuation lines start with a space."""
    if len(line.encode('utf-8')) <= MAX_LINE_OCTETS:
        return line

    parts: List[str] = []
    current = ''
    limit = MAX_LINE_OCTETS
    for char in line:
        if len((current + char).encode('utf-8')) > limit:
            parts.append(current)
            current = ''
            limit = MAX_LINE_OCTETS - 1  # leading space counts
        current += char
    parts.append(current)
    return (CRLF + ' ').join(parts)


def match_window(match: Match, config: CalendarConfig) -> Optional[tuple[datetime, datetime]]:
    if match.date is None:
        return None
    start = _as_utc(match.date)
    return start, start + timedelta(hours=config.match_duration_hours)


def _description_lines(match: Match, *, include_teams: bool) -> List[str]:
    lines = [
        f'Competition: {match.competition or ""}',
        f'Event: {match.event or ""}',
        f'Venue: {match.venue or ""}',
    ]
    if include_teams:
        lines += [f'Home Team: {match.home_team}', f'Away Team: {match.away_team}']
    return lines


def build_event_lines(match: Match, *, config: CalendarConfig, stamp: str) -> List[str]:
    window = match_window(match, config)
    if window is None:
        return []
    start, end = window
    description = '\n'.join(_description_lines(match, include_teams=True))
    return [
        'BEGIN:VEVENT',
        f'UID:{config.uid_prefix}-{match.id}@{config.uid_domain}',
        f'DTSTAMP:{stamp}',
        f'DTSTART:{format_ics_datetime(start)}',
        f'DTEND:{format_ics_datetime(end)}',
        f'SUMMARY:{escape_ics_text(match.title)}',
        f'DESCRIPTION:{escape_ics_text(description)}',
        f'LOCATION:{escape_ics_text(match.venue or "")}',
        'STATUS:CONFIRMED',
        'SEQUENCE:0',
        'END:VEVENT',
    ]


def build_ics(matches: Iterable[Match], *, config: CalendarConfig, now: datetime) -> str:
    stamp = format_ics_datetime(now)
    lines = [
        'BEGIN:VCALENDAR',
        'VERSION:2.0',
        f'PRODID:{config.product_id}',
        'CALSCALE:GREGORIAN',
        'METHOD:PUBLISH',
        f'X-WR-CALNAME:{escape_ics_text(config.calendar_name)}',
        f'X-WR-CALDESC:{escape_ics_text(config.calendar_description)}',
        'X-WR-TIMEZONE:UTC',
    ]
    for match in matches:
        lines.extend(build_event_lines(match, config=config, stamp=stamp))
    lines.append('END:VCALENDAR')
    return CRLF.join(fold_line(line) for line in lines)


def _first_scheduled(matches: Iterable[Match]) -> Optional[Match]:
    return next((match for match in matches if match.date is not None), None)


def build_google_calendar_url(match: Match, *, config: CalendarConfig) -> str:
    window = match_window(match, config)
    if window is None:
        return ''
    start, end = window
    params = {
        'action': 'TEMPLATE',
        'text': match.title,
        'dates': f'{format_ics_datetime(start)}/{format_ics_datetime(end)}',
        'details': '\n'.join(_description_lines(match, include_teams=False)),
        'location': match.venue or '',
    }
    return f'{GOOGLE_CALENDAR_URL}?{urlencode(params)}'


def _outlook_compose_url(base_url: str, match: Match, *, config: CalendarConfig) -> str:
    window = match_window(match, config)
    if window is None:
        return ''
    start, end = window
    params = {
        'subject': match.title,
        'startdt': format_iso_datetime(start),
        'enddt': format_iso_datetime(end),
        'body': '\n'.join(_description_lines(match, include_teams=False)),
        'location': match.venue or '',
    }
    return f'{base_url}?{urlencode(params)}'


def build_outlook_calendar_url(match: Match, *, config: CalendarConfig) -> str:
    return _outlook_compose_url(OUTLOOK_CALENDAR_URL, match, config=config)


def build_office365_calendar_url(match: Match, *, config: CalendarConfig) -> str:
    return _outlook_compose_url(OFFICE365_CALENDAR_URL, match, config=config)


def build_calendar_links(matches: Iterable[Match], *, config: CalendarConfig) -> CalendarLinks:
    """Providers only take single events, so links point at the first scheduled match."""
    match = _first_scheduled(matches)
    if match is None:
        return CalendarLinks()
    return CalendarLinks(
        google=build_google_calendar_url(match, config=config),
        outlook=build_outlook_calendar_url(match, config=config),
        office365=build_office365_calendar_url(match, config=config),
    )
