"""
Sanity HTTP API client

Endpoints used:
- GET  /v{version}/data/query/{dataset}?query=...&$param=<json>   (apicdn host when CDN is on)
- GET  /v{version}/data/doc/{dataset}/{id}                          (always api host)
- POST /v{version}/data/mutate/{dataset}?returnDocuments=true       (always api host, token required)

A 409 on a patch carrying ifRevisionID is surfaced as RevisionConflictError.
"""

from typing import Any, Optional

import httpx
import orjson

from src.platform.content_store.content_store_client import ContentStoreClient, Patch
from src.platform.exception.exceptions import ContentStoreError, RevisionConflictError
from src.platform.logging.loguru_io import Logger


class SanityContentStoreClient(ContentStoreClient):
    def __init__(
        self,
        *,
        project_id: str,
        dataset: str,
        api_version: str,
        token: Optional[str] = None,
        use_cdn: bool = True,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.project_id = project_id
        self.dataset = dataset
        self.api_version = api_version.removeprefix('v')
        self.use_cdn = use_cdn
        self._token = token
        headers = {'Authorization': f'Bearer {token}'} if token else {}
        self._http = httpx.AsyncClient(timeout=timeout, headers=headers, transport=transport)

    @property
    def has_write_credentials(self) -> bool:
        return bool(self._token)

    def _base_url(self, *, cdn: bool) -> str:
        host = 'apicdn' if cdn else 'api'
        return f'https://{self.project_id}.{host}.sanity.io/v{self.api_version}/data'

    @staticmethod
    def encode_params(params: Optional[dict[str, Any]]) -> dict[str, str]:
        # GROQ parameters travel as $name=<JSON literal>
        return {
            f'${name}': orjson.dumps(value).decode() for name, value in (params or {}).items()
        }

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = orjson.loads(response.content)
        except orjson.JSONDecodeError:
            return response.text or response.reason_phrase
        error = body.get('error') if isinstance(body, dict) else None
        if isinstance(error, dict):
            return str(error.get('description') or error.get('type') or error)
        return str(body.get('message') or error or body)

    async def _send(self, request: httpx.Request) -> httpx.Response:
        try:
            return await self._http.send(request)
        except httpx.HTTPError as e:
            raise ContentStoreError(f'Content store unreachable: {e}') from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        raise ContentStoreError(self._error_message(response), status_code=response.status_code)

    @Logger.io
    async def fetch(self, query: str, params: Optional[dict[str, Any]] = None) -> Any:
        request = self._http.build_request(
            'GET',
            f'{self._base_url(cdn=self.use_cdn)}/query/{self.dataset}',
            params={'query': query, **self.encode_params(params)},
        )
        response = await self._send(request)
        self._raise_for_status(response)
        return orjson.loads(response.content).get('result')

    @Logger.io
    async def get_document(self, document_id: str) -> Optional[dict[str, Any]]:
        request = self._http.build_request(
            'GET', f'{self._base_url(cdn=False)}/doc/{self.dataset}/{document_id}'
        )
        response = await self._send(request)
        if response.status_code == 404:
            return None
        self._raise_for_status(response)
        documents = orjson.loads(response.content).get('documents') or []
        return documents[0] if documents else None

    async def _mutate(self, mutation: dict[str, Any]) -> dict[str, Any]:
        if not self.has_write_credentials:
            raise ContentStoreError('Insufficient permissions: no write token configured', 403)

        request = self._http.build_request(
            'POST',
            f'{self._base_url(cdn=False)}/mutate/{self.dataset}',
            params={'returnIds': 'true', 'returnDocuments': 'true', 'visibility': 'sync'},
            content=orjson.dumps({'mutations': [mutation]}),
            headers={'Content-Type': 'application/json'},
        )
        response = await self._send(request)
        if response.status_code == 409 and 'patch' in mutation:
            raise RevisionConflictError(mutation['patch']['id'])
        self._raise_for_status(response)

        results = orjson.loads(response.content).get('results') or []
        if not results:
            raise ContentStoreError('Mutation returned no results', status_code=response.status_code)
        return results[0].get('document') or {'_id': results[0].get('id')}

    @Logger.io
    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        return await self._mutate({'create': document})

    @Logger.io
    async def commit_patch(self, patch: Patch) -> dict[str, Any]:
        return await self._mutate(patch.to_mutation())

    async def aclose(self) -> None:
        await self._http.aclose()
