"""
Request shapes of SanityContentStoreClient, checked with httpx.MockTransport
"""

from typing import Callable

import httpx
import orjson
import pytest

from src.platform.content_store.sanity_client import SanityContentStoreClient
from src.platform.exception.exceptions import ContentStoreError, RevisionConflictError


Handler = Callable[[httpx.Request], httpx.Response]


def make_client(
    handler: Handler, *, token: str | None = 'sk-write', use_cdn: bool = True
) -> SanityContentStoreClient:
    return SanityContentStoreClient(
        project_id='4rd3jbsr',
        dataset='production',
        api_version='2024-01-01',
        token=token,
        use_cdn=use_cdn,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


def recording(requests: list[httpx.Request], response: httpx.Response) -> Handler:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return response

    return handler


@pytest.mark.unit
class TestSanityFetch:
    async def test_fetch__cdn_host_and_json_params(self, requests: list[httpx.Request]) -> None:
        client = make_client(
            recording(requests, httpx.Response(200, json={'result': [{'_id': 'm1'}]})),
            token=None,
        )

        result = await client.fetch('*[_id == $matchId]', {'matchId': 'm1'})

        assert result == [{'_id': 'm1'}]
        [request] = requests
        assert request.url.host == '4rd3jbsr.apicdn.sanity.io'
        assert request.url.path == '/v2024-01-01/data/query/production'
        assert request.url.params['query'] == '*[_id == $matchId]'
        assert request.url.params['$matchId'] == '"m1"'
        assert 'authorization' not in request.headers

    async def test_fetch__live_host_without_cdn(self, requests: list[httpx.Request]) -> None:
        client = make_client(
            recording(requests, httpx.Response(200, json={'result': None})), use_cdn=False
        )

        assert await client.fetch('*[0]') is None
        assert requests[0].url.host == '4rd3jbsr.api.sanity.io'

    async def test_fetch__error_carries_status_and_description(self) -> None:
        client = make_client(
            lambda request: httpx.Response(
                400, json={'error': {'description': 'expected expression'}}
            )
        )

        with pytest.raises(ContentStoreError) as exc_info:
            await client.fetch('*[')

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == 'expected expression'


@pytest.mark.unit
class TestSanityDocuments:
    async def test_get_document__uncached_doc_endpoint(
        self, requests: list[httpx.Request]
    ) -> None:
        client = make_client(
            recording(
                requests, httpx.Response(200, json={'documents': [{'_id': 'm1', '_rev': 'r1'}]})
            )
        )

        document = await client.get_document('m1')

        assert document == {'_id': 'm1', '_rev': 'r1'}
        assert requests[0].url.host == '4rd3jbsr.api.sanity.io'
        assert requests[0].url.path == '/v2024-01-01/data/doc/production/m1'
        assert requests[0].headers['authorization'] == 'Bearer sk-write'

    async def test_get_document__missing(self) -> None:
        client = make_client(lambda request: httpx.Response(404, json={}))

        assert await client.get_document('nope') is None


@pytest.mark.unit
class TestSanityMutations:
    async def test_create__mutation_body(self, requests: list[httpx.Request]) -> None:
        client = make_client(
            recording(
                requests,
                httpx.Response(200, json={'results': [{'id': 'b1', 'document': {'_id': 'b1'}}]}),
            )
        )

        document = await client.create({'_type': 'booking', 'quantity': 2})

        assert document == {'_id': 'b1'}
        [request] = requests
        assert request.method == 'POST'
        assert request.url.path == '/v2024-01-01/data/mutate/production'
        assert request.url.params['returnDocuments'] == 'true'
        assert orjson.loads(request.content) == {
            'mutations': [{'create': {'_type': 'booking', 'quantity': 2}}]
        }

    async def test_patch__if_revision_id_and_set(self, requests: list[httpx.Request]) -> None:
        client = make_client(
            recording(
                requests,
                httpx.Response(200, json={'results': [{'id': 'm1', 'document': {'_id': 'm1'}}]}),
            )
        )

        await client.patch('m1').set({'ticketAvailability': 3}).if_revision_id('r1').commit()

        assert orjson.loads(requests[0].content) == {
            'mutations': [
                {'patch': {'id': 'm1', 'ifRevisionID': 'r1', 'set': {'ticketAvailability': 3}}}
            ]
        }

    async def test_patch__inc(self, requests: list[httpx.Request]) -> None:
        client = make_client(
            recording(requests, httpx.Response(200, json={'results': [{'id': 'm1'}]}))
        )

        document = await client.patch('m1').inc({'ticketAvailability': 2}).commit()

        assert document == {'_id': 'm1'}
        assert orjson.loads(requests[0].content)['mutations'][0]['patch']['inc'] == {
            'ticketAvailability': 2
        }

    async def test_patch__revision_mismatch_raises_conflict(self) -> None:
        client = make_client(
            lambda request: httpx.Response(409, json={'error': {'description': 'rev mismatch'}})
        )

        with pytest.raises(RevisionConflictError):
            await client.patch('m1').set({'ticketAvailability': 3}).if_revision_id('r0').commit()

    async def test_mutation__forbidden(self) -> None:
        client = make_client(
            lambda request: httpx.Response(
                403, json={'error': {'description': 'Insufficient permissions'}}
            )
        )

        with pytest.raises(ContentStoreError) as exc_info:
            await client.create({'_type': 'booking'})

        assert exc_info.value.is_permission_error is True

    async def test_mutation__without_token_never_sends(self, requests: list[httpx.Request]) -> None:
        client = make_client(recording(requests, httpx.Response(200, json={})), token=None)

        with pytest.raises(ContentStoreError) as exc_info:
            await client.create({'_type': 'booking'})

        assert exc_info.value.status_code == 403
        assert requests == []

    async def test_unreachable_store(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout('timed out', request=request)

        client = make_client(handler)

        with pytest.raises(ContentStoreError, match='unreachable'):
            await client.fetch('*')
