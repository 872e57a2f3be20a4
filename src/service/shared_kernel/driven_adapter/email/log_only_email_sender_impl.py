"""Email sender used when no provider key is configured."""

from datetime import datetime, timezone
from typing import Any, List
import uuid

import orjson

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.interface.i_email_sender import IEmailSender


class LogOnlyEmailSender(IEmailSender):
    """Logs messages instead of sending them; keeps them in `sent_emails` for inspection."""

    def __init__(self) -> None:
        self.sent_emails: List[dict[str, Any]] = []

    @property
    def delivers(self) -> bool:
        return False

    async def send(self, *, message: EmailMessage) -> str:
        local_id = f'log-{uuid.uuid4().hex[:12]}'
        email_data = {
            'id': local_id,
            'from': message.sender,
            'to': message.to,
            'subject': message.subject,
            'html': message.html,
            'logged_at': datetime.now(timezone.utc).isoformat(),
        }
        self.sent_emails.append(email_data)

        summary = {key: value for key, value in email_data.items() if key != 'html'}
        Logger.base.info(
            f'📧 [EMAIL-LOG-ONLY] RESEND_API_KEY not configured, not sent: '
            f'{orjson.dumps(summary, option=orjson.OPT_INDENT_2).decode()}'
        )
        return local_id
