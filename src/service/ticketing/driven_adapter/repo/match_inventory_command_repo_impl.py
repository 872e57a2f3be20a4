"""
Match Inventory Command Repository Implementation

The decrement is a single patch guarded by ifRevisionID, so it only lands if
nobody wrote the match since `get_for_update` read it.
"""

from typing import Optional

from src.platform.content_store.content_store_client import ContentStoreClient
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_match_inventory_command_repo import (
    IMatchInventoryCommandRepo,
)
from src.service.ticketing.domain.entity.match_entity import Match
from src.service.ticketing.driven_adapter.repo.match_document import document_to_match


class MatchInventoryCommandRepoImpl(IMatchInventoryCommandRepo):
    def __init__(self, *, content_store: ContentStoreClient) -> None:
        self.content_store = content_store

    @Logger.io
    async def get_for_update(self, *, match_id: str) -> Optional[Match]:
        document = await self.content_store.get_document(match_id)
        if not document or document.get('_type') != 'match':
            return None
        return document_to_match(document)

    @Logger.io
    async def decrement_availability(self, *, match: Match, quantity: int) -> Match:
        if not match.revision:
            raise ValueError('match must be read with get_for_update before decrementing')

        claimed = match.with_tickets_claimed(quantity=quantity)
        document = await (
            self.content_store.patch(match.id)
            .set({'ticketAvailability': claimed.ticket_availability})
            .if_revision_id(match.revision)
            .commit()
        )
        return document_to_match(document)

    @Logger.io
    async def restore_availability(self, *, match_id: str, quantity: int) -> None:
        await self.content_store.patch(match_id).inc({'ticketAvailability': quantity}).commit()
