"""
Best-effort notification results

The core operation (booking, order) has already succeeded when these are built;
they only tell the caller and the tests what happened to each outbound email.
"""

from typing import Optional

import attrs

from src.service.shared_kernel.domain.enum.notification_status import NotificationStatus


@attrs.frozen
class NotificationOutcome:
    kind: str  # e.g. 'booking_customer', 'order_admin'
    recipient: str
    status: NotificationStatus
    provider_id: Optional[str] = None
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status == NotificationStatus.SENT


@attrs.frozen
class NotificationReport:
    outcomes: tuple[NotificationOutcome, ...] = ()

    @property
    def all_delivered(self) -> bool:
        return bool(self.outcomes) and all(outcome.delivered for outcome in self.outcomes)

    @property
    def failures(self) -> list[NotificationOutcome]:
        return [o for o in self.outcomes if o.status == NotificationStatus.FAILED]

    def outcome_for(self, kind: str) -> Optional[NotificationOutcome]:
        return next((o for o in self.outcomes if o.kind == kind), None)

    @classmethod
    def failed(cls, *, targets: list[tuple[str, str]], error: str) -> 'NotificationReport':
        """Every message failed before it could be handed to the sender (e.g. rendering)."""
        return cls(
            outcomes=tuple(
                NotificationOutcome(
                    kind=kind, recipient=recipient, status=NotificationStatus.FAILED, error=error
                )
                for kind, recipient in targets
            )
        )
