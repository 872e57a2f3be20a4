import re

import attrs


@attrs.frozen
class CalendarConfig:
    club_name: str = 'Paro FC'
    uid_domain: str = 'parofc.com'
    match_duration_hours: int = 2

    @property
    def uid_prefix(self) -> str:
        return re.sub(r'[^a-z0-9]+', '-', self.club_name.lower()).strip('-') + '-match'

    @property
    def product_id(self) -> str:
        return f'-//{self.club_name}//Match Calendar//EN'

    @property
    def calendar_name(self) -> str:
        return f'{self.club_name} Matches'

    @property
    def calendar_description(self) -> str:
        return f'{self.club_name} Match Schedule'
