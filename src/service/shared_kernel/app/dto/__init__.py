"""Shared Kernel DTOs - Application Layer"""

from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.dto.notification_report import (
    NotificationOutcome,
    NotificationReport,
)

__all__ = ['EmailMessage', 'NotificationOutcome', 'NotificationReport']
