"""
Content Store Client

Capability interface over the headless CMS that owns all durable state:
- fetch(query, params)         -> query result (GROQ)
- get_document(id)             -> raw document (uncached, carries _rev)
- create(doc)                  -> created document
- patch(id).set(...).commit()  -> patched document

Patches accept ifRevisionID so callers can build compare-and-swap updates.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Self

import attrs


@attrs.define
class Patch:
    client: 'ContentStoreClient'
    document_id: str
    set_fields: dict[str, Any] = attrs.field(factory=dict)
    inc_fields: dict[str, int] = attrs.field(factory=dict)
    revision_id: Optional[str] = None

    def set(self, fields: dict[str, Any]) -> Self:
        self.set_fields |= fields
        return self

    def inc(self, fields: dict[str, int]) -> Self:
        self.inc_fields |= fields
        return self

    def if_revision_id(self, revision_id: str) -> Self:
        self.revision_id = revision_id
        return self

    def to_mutation(self) -> dict[str, Any]:
        body: dict[str, Any] = {'id': self.document_id}
        if self.revision_id:
            body['ifRevisionID'] = self.revision_id
        if self.set_fields:
            body['set'] = self.set_fields
        if self.inc_fields:
            body['inc'] = self.inc_fields
        return {'patch': body}

    async def commit(self) -> dict[str, Any]:
        return await self.client.commit_patch(self)


class ContentStoreClient(ABC):
    @property
    @abstractmethod
    def has_write_credentials(self) -> bool:
        """Whether this client can perform mutations."""
        pass

    @abstractmethod
    async def fetch(self, query: str, params: Optional[dict[str, Any]] = None) -> Any:
        """Run a GROQ query and return its `result`."""
        pass

    @abstractmethod
    async def get_document(self, document_id: str) -> Optional[dict[str, Any]]:
        """Read a document straight from the store (no CDN), or None if it does not exist."""
        pass

    @abstractmethod
    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        pass

    @abstractmethod
    async def commit_patch(self, patch: Patch) -> dict[str, Any]:
        """
        Raises:
            RevisionConflictError: ifRevisionID no longer matches the stored document
            ContentStoreError: any other rejected mutation
        """
        pass

    def patch(self, document_id: str) -> Patch:
        return Patch(client=self, document_id=document_id)

    async def aclose(self) -> None:
        return None
