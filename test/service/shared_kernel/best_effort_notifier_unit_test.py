from unittest.mock import AsyncMock, PropertyMock

import pytest

from src.platform.exception.exceptions import EmailDeliveryError
from src.service.shared_kernel.app.best_effort_notifier import BestEffortNotifier
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.domain.enum.notification_status import NotificationStatus
from src.service.shared_kernel.driven_adapter.email.log_only_email_sender_impl import (
    LogOnlyEmailSender,
)


def message(to: str) -> EmailMessage:
    return EmailMessage(sender='shop@parofc.com', to=to, subject='Hi', html='<p>Hi</p>')


@pytest.fixture
def delivering_sender() -> AsyncMock:
    sender = AsyncMock()
    type(sender).delivers = PropertyMock(return_value=True)
    sender.send = AsyncMock(return_value='re_123')
    return sender


@pytest.mark.unit
class TestBestEffortNotifier:
    async def test_send_all__all_sent(self, delivering_sender: AsyncMock) -> None:
        notifier = BestEffortNotifier(email_sender=delivering_sender)

        report = await notifier.send_all(
            messages=[('a', message('a@x.com')), ('b', message('b@x.com'))]
        )

        assert report.all_delivered is True
        assert report.outcome_for('a').provider_id == 're_123'

    async def test_send_all__first_failure_does_not_stop_second(
        self, delivering_sender: AsyncMock
    ) -> None:
        delivering_sender.send.side_effect = [EmailDeliveryError('rejected', 422), 're_456']
        notifier = BestEffortNotifier(email_sender=delivering_sender)

        report = await notifier.send_all(
            messages=[('a', message('a@x.com')), ('b', message('b@x.com'))]
        )

        assert report.outcome_for('a').status == NotificationStatus.FAILED
        assert report.outcome_for('a').error == 'rejected'
        assert report.outcome_for('b').status == NotificationStatus.SENT
        assert delivering_sender.send.await_count == 2

    async def test_send_one__unexpected_error_is_contained(
        self, delivering_sender: AsyncMock
    ) -> None:
        delivering_sender.send.side_effect = RuntimeError('socket closed')
        notifier = BestEffortNotifier(email_sender=delivering_sender)

        outcome = await notifier.send_one(kind='a', message=message('a@x.com'))

        assert outcome.status == NotificationStatus.FAILED
        assert outcome.error == 'socket closed'

    async def test_send_one__log_only_sender_is_skipped(self) -> None:
        sender = LogOnlyEmailSender()
        notifier = BestEffortNotifier(email_sender=sender)

        outcome = await notifier.send_one(kind='a', message=message('a@x.com'))

        assert outcome.status == NotificationStatus.SKIPPED
        assert sender.sent_emails[0]['to'] == 'a@x.com'
