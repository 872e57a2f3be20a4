from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.ticketing.domain.entity.match_entity import Match


class MatchResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias='_id')
    home_team: str
    away_team: str
    date: Optional[datetime] = None
    competition: Optional[str] = None
    venue: Optional[str] = None
    event: Optional[str] = None
    has_tickets: bool = False
    ticket_availability: Optional[int] = None

    @classmethod
    def from_entity(cls, match: Match) -> 'MatchResponse':
        return cls(
            id=match.id,
            home_team=match.home_team,
            away_team=match.away_team,
            date=match.date,
            competition=match.competition,
            venue=match.venue,
            event=match.event,
            has_tickets=match.has_tickets,
            ticket_availability=match.ticket_availability,
        )
