from typing import Optional

import attrs


@attrs.define
class Player:
    id: str
    first_name: str
    last_name: str
    slug: Optional[str] = None
    number: Optional[int] = None
    position: Optional[str] = None
    image_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()
