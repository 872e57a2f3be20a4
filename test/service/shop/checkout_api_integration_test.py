from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.service.shared_kernel.driven_adapter.email.log_only_email_sender_impl import (
    LogOnlyEmailSender,
)


CHECKOUT_URL = '/api/checkout'


def checkout_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        'customer': {
            'firstName': 'Pema',
            'lastName': 'Lhamo',
            'email': 'pema@example.com',
            'phone': '+975 17 123 456',
            'address': 'Main Street 1',
            'city': 'Paro',
        },
        'items': [
            {
                '_id': 'product-home-jersey',
                'name': 'Home Jersey 2025',
                'size': 'M',
                'quantity': 1,
                'price': 1000,
                'currency': 'BTN',
            }
        ],
        'subtotal': 1000,
        'currency': 'BTN',
    }
    payload.update(overrides)
    return payload


class TestCheckoutApi:
    def test_checkout__returns_order_id(self, client: TestClient) -> None:
        response = client.post(CHECKOUT_URL, json=checkout_payload())

        assert response.status_code == 200
        body = response.json()
        assert body['success'] is True
        assert body['orderId'].startswith('PFC-')
        assert body['message'] == 'Order placed successfully'

    def test_checkout__admin_email_first_with_totals(
        self, client: TestClient, email_sender: LogOnlyEmailSender
    ) -> None:
        response = client.post(CHECKOUT_URL, json=checkout_payload())

        order_id = response.json()['orderId']
        admin, customer = email_sender.sent_emails
        assert admin['subject'] == f'🛒 New Order #{order_id} - Pema Lhamo'
        assert customer['to'] == 'pema@example.com'
        assert customer['subject'] == f'Order Confirmed! #{order_id} - Paro FC Shop'
        assert 'Nu. 1,150' in customer['html']
        assert 'Nu. 150' in admin['html']

    def test_checkout__sale_price_used_for_line_total(
        self, client: TestClient, email_sender: LogOnlyEmailSender
    ) -> None:
        item = {**checkout_payload()['items'][0], 'quantity': 2, 'salePrice': 800}

        response = client.post(CHECKOUT_URL, json=checkout_payload(items=[item], subtotal=1600))

        assert response.status_code == 200
        assert 'Nu. 1,600' in email_sender.sent_emails[1]['html']

    def test_checkout__markup_in_customer_fields_is_stripped(
        self, client: TestClient, email_sender: LogOnlyEmailSender
    ) -> None:
        payload = checkout_payload()
        payload['customer']['firstName'] = '<img src=x onerror=alert(1)>Pema'
        payload['customer']['notes'] = '<script>steal()</script>Leave at gate'

        response = client.post(CHECKOUT_URL, json=payload)

        assert response.status_code == 200
        for email in email_sender.sent_emails:
            assert '<img' not in email['html']
            assert 'steal()' not in email['html']
            assert '<script' not in email['subject']

    def test_checkout__entity_encoded_name_stays_out_of_subject(
        self, client: TestClient, email_sender: LogOnlyEmailSender
    ) -> None:
        payload = checkout_payload()
        payload['customer']['firstName'] = 'Pema'
        payload['customer']['lastName'] = '&lt;b&gt;Lhamo&lt;/b&gt;'

        response = client.post(CHECKOUT_URL, json=payload)

        assert response.status_code == 200
        order_id = response.json()['orderId']
        admin = email_sender.sent_emails[0]
        assert admin['subject'] == f'🛒 New Order #{order_id} - Pema Lhamo'

    @pytest.mark.parametrize(
        'overrides',
        [
            {'items': []},
            {'subtotal': -1},
            {'currency': 'NU'},
            {'customer': {'firstName': 'Pema'}},
        ],
    )
    def test_checkout__invalid_payload_returns_400(
        self, client: TestClient, email_sender: LogOnlyEmailSender, overrides: dict[str, Any]
    ) -> None:
        response = client.post(CHECKOUT_URL, json=checkout_payload(**overrides))

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid request data'
        assert email_sender.sent_emails == []

    def test_checkout__too_many_lines_returns_400(self, client: TestClient) -> None:
        item = checkout_payload()['items'][0]

        response = client.post(CHECKOUT_URL, json=checkout_payload(items=[item] * 51))

        assert response.status_code == 400

    def test_checkout__invalid_item_quantity_returns_400(self, client: TestClient) -> None:
        item = {**checkout_payload()['items'][0], 'quantity': 0}

        response = client.post(CHECKOUT_URL, json=checkout_payload(items=[item]))

        assert response.status_code == 400
        assert response.json()['details'][0]['field'] == 'items.0.quantity'
