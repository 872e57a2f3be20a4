from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.service.calendar.domain.match_calendar import CalendarLinks


class CalendarLinksResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    google: str
    outlook: str
    office365: str

    @classmethod
    def from_links(cls, links: CalendarLinks) -> 'CalendarLinksResponse':
        return cls(google=links.google, outlook=links.outlook, office365=links.office365)
