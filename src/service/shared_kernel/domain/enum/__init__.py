"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.notification_status import NotificationStatus

__all__ = ['NotificationStatus']
