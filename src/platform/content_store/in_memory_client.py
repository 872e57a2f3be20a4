from copy import deepcopy
from datetime import datetime, timezone
from typing import Any, Optional
import uuid

import anyio

from src.platform.content_store.content_store_client import ContentStoreClient, Patch
from src.platform.exception.exceptions import ContentStoreError, RevisionConflictError


class InMemoryContentStoreClient(ContentStoreClient):
    """
    Document store with Sanity's revision semantics: every write issues a new _rev,
    and a patch carrying ifRevisionID fails when the stored _rev has moved on.

    GROQ is not interpreted; `fetch` only answers through registered query handlers.
    """

    def __init__(
        self,
        documents: Optional[list[dict[str, Any]]] = None,
        *,
        writable: bool = True,
        query_handlers: Optional[dict[str, Any]] = None,
    ) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.writable = writable
        self.query_handlers = dict(query_handlers or {})
        self.fail_creates_with: Optional[ContentStoreError] = None
        self.fail_patches_with: Optional[ContentStoreError] = None
        for document in documents or []:
            self._store(deepcopy(document))

    @property
    def has_write_credentials(self) -> bool:
        return self.writable

    def _store(self, document: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc).isoformat()
        document.setdefault('_id', str(uuid.uuid4()))
        document.setdefault('_createdAt', now)
        document['_updatedAt'] = now
        document['_rev'] = uuid.uuid4().hex
        self.documents[document['_id']] = document
        return deepcopy(document)

    async def fetch(self, query: str, params: Optional[dict[str, Any]] = None) -> Any:
        await anyio.sleep(0)
        if (handler := self.query_handlers.get(query)) is None:
            raise ContentStoreError('Query not supported by the in-memory store', 400)
        return handler(list(self.documents.values()), params or {})

    async def get_document(self, document_id: str) -> Optional[dict[str, Any]]:
        await anyio.sleep(0)
        document = self.documents.get(document_id)
        return deepcopy(document) if document else None

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        await anyio.sleep(0)
        if not self.writable:
            raise ContentStoreError('Insufficient permissions to create document', 403)
        if self.fail_creates_with:
            raise self.fail_creates_with
        if document.get('_id') in self.documents:
            raise ContentStoreError(f'Document {document["_id"]} already exists', 409)
        return self._store(deepcopy(document))

    async def commit_patch(self, patch: Patch) -> dict[str, Any]:
        await anyio.sleep(0)
        if not self.writable:
            raise ContentStoreError('Insufficient permissions to patch document', 403)
        if self.fail_patches_with:
            raise self.fail_patches_with

        # Check-and-write below runs without yielding, so it is atomic per event loop
        current = self.documents.get(patch.document_id)
        if current is None:
            raise ContentStoreError(f'Document {patch.document_id} not found', 404)
        if patch.revision_id and current['_rev'] != patch.revision_id:
            raise RevisionConflictError(patch.document_id)

        updated = deepcopy(current) | deepcopy(patch.set_fields)
        for field, amount in patch.inc_fields.items():
            updated[field] = updated.get(field, 0) + amount
        return self._store(updated)
