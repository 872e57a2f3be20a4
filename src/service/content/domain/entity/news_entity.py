from datetime import datetime
from typing import Any, List, Optional

import attrs


@attrs.define
class NewsArticle:
    id: str
    title: str
    slug: str
    badge: Optional[str] = None
    published_at: Optional[datetime] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    # Portable Text blocks, only loaded for the article page
    body: Optional[List[dict[str, Any]]] = None
