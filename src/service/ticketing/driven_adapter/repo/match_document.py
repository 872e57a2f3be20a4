from typing import Any

from src.platform.content_store.document_utils import parse_cms_datetime
from src.service.ticketing.domain.entity.match_entity import Match


MATCH_PROJECTION = """{
  _id,
  _rev,
  homeTeam,
  awayTeam,
  competition,
  date,
  venue,
  event,
  hasTickets,
  ticketAvailability
}"""


def document_to_match(document: dict[str, Any]) -> Match:
    availability = document.get('ticketAvailability')
    return Match(
        id=document['_id'],
        home_team=document.get('homeTeam') or '',
        away_team=document.get('awayTeam') or '',
        date=parse_cms_datetime(document.get('date')),
        competition=document.get('competition'),
        venue=document.get('venue'),
        event=document.get('event'),
        has_tickets=bool(document.get('hasTickets')),
        ticket_availability=int(availability) if availability is not None else None,
        revision=document.get('_rev'),
    )
