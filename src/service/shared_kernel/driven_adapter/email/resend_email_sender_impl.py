from typing import Optional

import httpx
import orjson

from src.platform.exception.exceptions import EmailDeliveryError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.app.interface.i_email_sender import IEmailSender


class ResendEmailSender(IEmailSender):
    """Resend transactional email API (POST /emails with a Bearer API key)."""

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str = 'https://api.resend.com/emails',
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url
        self._http = httpx.AsyncClient(
            timeout=timeout,
            headers={'Authorization': f'Bearer {api_key}'},
            transport=transport,
        )

    @property
    def delivers(self) -> bool:
        return True

    @Logger.io
    async def send(self, *, message: EmailMessage) -> str:
        try:
            response = await self._http.post(
                self.api_url,
                content=orjson.dumps(message.to_payload()),
                headers={'Content-Type': 'application/json'},
            )
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f'Email provider unreachable: {e}') from e

        if not response.is_success:
            raise EmailDeliveryError(
                f'Email provider rejected message: {response.text}', status_code=response.status_code
            )
        return str(orjson.loads(response.content).get('id', ''))

    async def aclose(self) -> None:
        await self._http.aclose()
