from src.platform.exception.exceptions import EmailDeliveryError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.site_metrics import metrics
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.dto.notification_report import (
    NotificationOutcome,
    NotificationReport,
)
from src.service.shared_kernel.app.interface.i_email_sender import IEmailSender
from src.service.shared_kernel.domain.enum.notification_status import NotificationStatus


class BestEffortNotifier:
    """
    Sends each message independently and never raises

    A failure of one message does not stop the next one; every attempt ends up
    as a NotificationOutcome so callers can report it without failing the request.
    """

    def __init__(self, *, email_sender: IEmailSender) -> None:
        self.email_sender = email_sender

    async def send_one(self, *, kind: str, message: EmailMessage) -> NotificationOutcome:
        try:
            provider_id = await self.email_sender.send(message=message)
        except EmailDeliveryError as e:
            Logger.base.error(f'📧 [EMAIL] {kind} to {message.to} failed: {e.message}')
            outcome = NotificationOutcome(
                kind=kind, recipient=message.to, status=NotificationStatus.FAILED, error=e.message
            )
        except Exception as e:
            Logger.base.opt(exception=e).error(f'📧 [EMAIL] {kind} to {message.to} failed')
            outcome = NotificationOutcome(
                kind=kind, recipient=message.to, status=NotificationStatus.FAILED, error=str(e)
            )
        else:
            status = (
                NotificationStatus.SENT if self.email_sender.delivers else NotificationStatus.SKIPPED
            )
            outcome = NotificationOutcome(
                kind=kind, recipient=message.to, status=status, provider_id=provider_id
            )

        metrics.record_email(kind=kind, status=outcome.status.value)
        return outcome

    @Logger.io
    async def send_all(self, *, messages: list[tuple[str, EmailMessage]]) -> NotificationReport:
        outcomes = []
        for kind, message in messages:
            outcomes.append(await self.send_one(kind=kind, message=message))
        return NotificationReport(outcomes=tuple(outcomes))
