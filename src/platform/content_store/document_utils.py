from datetime import datetime
from typing import Any, Optional


def parse_cms_datetime(value: Any) -> Optional[datetime]:
    """CMS datetimes are ISO 8601 strings such as '2025-03-15T15:00:00.000Z'."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


def reference(document_id: str) -> dict[str, str]:
    return {'_type': 'reference', '_ref': document_id}
