"""
Human-typable reference ids

Format: <PREFIX>-<base36 epoch millis>-<4 random base36 chars>, upper-case,
e.g. TKT-MC8Z1K2P-7QX4. Independent of any CMS document id.
"""

from datetime import datetime, timezone
import re
import secrets
import string
from typing import Optional


BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 4

BOOKING_PREFIX = 'TKT'
ORDER_PREFIX = 'PFC'


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError('base36 encoding expects a non-negative integer')
    if value == 0:
        return '0'
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(BASE36_ALPHABET[remainder])
    return ''.join(reversed(digits))


def generate_reference_id(prefix: str, *, now: Optional[datetime] = None) -> str:
    moment = now or datetime.now(timezone.utc)
    millis = int(moment.timestamp() * 1000)
    suffix = ''.join(secrets.choice(BASE36_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f'{prefix}-{to_base36(millis)}-{suffix}'


def generate_booking_id(*, now: Optional[datetime] = None) -> str:
    return generate_reference_id(BOOKING_PREFIX, now=now)


def generate_order_id(*, now: Optional[datetime] = None) -> str:
    return generate_reference_id(ORDER_PREFIX, now=now)


def reference_id_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf'^{prefix}-[0-9A-Z]+-[0-9A-Z]{{{SUFFIX_LENGTH}}}$', re.IGNORECASE)
