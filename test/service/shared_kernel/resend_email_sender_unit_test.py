import httpx
import orjson
import pytest

from src.platform.exception.exceptions import EmailDeliveryError
from src.service.shared_kernel.app.dto.email_message import EmailMessage
from src.service.shared_kernel.driven_adapter.email.resend_email_sender_impl import (
    ResendEmailSender,
)


MESSAGE = EmailMessage(
    sender='Paro FC Shop <onboarding@resend.dev>',
    to='pema@example.com',
    subject='Order Confirmed!',
    html='<p>Thanks</p>',
)


@pytest.mark.unit
class TestResendEmailSender:
    async def test_send__posts_payload_with_bearer_key(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={'id': 're_abc'})

        sender = ResendEmailSender(api_key='re_key', transport=httpx.MockTransport(handler))

        provider_id = await sender.send(message=MESSAGE)
        await sender.aclose()

        assert provider_id == 're_abc'
        [request] = captured
        assert str(request.url) == 'https://api.resend.com/emails'
        assert request.headers['Authorization'] == 'Bearer re_key'
        assert orjson.loads(request.content) == {
            'from': MESSAGE.sender,
            'to': MESSAGE.to,
            'subject': MESSAGE.subject,
            'html': MESSAGE.html,
        }

    async def test_send__provider_rejection_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(422, text='invalid from'))
        sender = ResendEmailSender(api_key='re_key', transport=transport)

        with pytest.raises(EmailDeliveryError) as exc_info:
            await sender.send(message=MESSAGE)

        assert exc_info.value.status_code == 422

    async def test_send__network_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('refused', request=request)

        sender = ResendEmailSender(api_key='re_key', transport=httpx.MockTransport(handler))

        with pytest.raises(EmailDeliveryError, match='unreachable'):
            await sender.send(message=MESSAGE)
