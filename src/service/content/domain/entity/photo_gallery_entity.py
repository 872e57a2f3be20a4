from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class PhotoGallery:
    id: str
    title: str
    slug: Optional[str] = None
    category: Optional[str] = None
    date: Optional[datetime] = None
    cover_image: Optional[str] = None
