"""Notification Status Enum"""

from enum import StrEnum


class NotificationStatus(StrEnum):
    SENT = 'sent'
    FAILED = 'failed'
    SKIPPED = 'skipped'  # no mail provider configured; message was only logged
