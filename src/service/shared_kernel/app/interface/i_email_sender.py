"""Email Sender Interface (Port)

Transactional email provider: `send({from, to, subject, html}) -> ok | error`.
"""

from abc import ABC, abstractmethod

from src.service.shared_kernel.app.dto.email_message import EmailMessage


class IEmailSender(ABC):
    @property
    @abstractmethod
    def delivers(self) -> bool:
        """False when messages are only logged (no provider configured)."""
        pass

    @abstractmethod
    async def send(self, *, message: EmailMessage) -> str:
        """
        Send one message

        Returns:
            Provider message id (or a local id when only logged)

        Raises:
            EmailDeliveryError: Provider rejected the message or was unreachable
        """
        pass

    async def aclose(self) -> None:
        return None
