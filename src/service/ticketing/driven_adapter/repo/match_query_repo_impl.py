from typing import List, Optional

from src.platform.content_store.content_store_client import ContentStoreClient
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_match_query_repo import IMatchQueryRepo
from src.service.ticketing.domain.entity.match_entity import Match
from src.service.ticketing.driven_adapter.repo.match_document import (
    MATCH_PROJECTION,
    document_to_match,
)


MATCH_BY_ID_QUERY = f'*[_type == "match" && _id == $matchId][0] {MATCH_PROJECTION}'
ALL_MATCHES_QUERY = f'*[_type == "match"] | order(date asc) {MATCH_PROJECTION}'
NEXT_TICKETS_MATCH_QUERY = (
    f'*[_type == "match" && hasTickets == true] | order(date asc) [0] {MATCH_PROJECTION}'
)


def upcoming_matches_query(limit: int) -> str:
    # GROQ slice bounds must be literals
    return f'*[_type == "match"] | order(date asc) [0...{int(limit)}] {MATCH_PROJECTION}'


class MatchQueryRepoImpl(IMatchQueryRepo):
    def __init__(self, *, content_store: ContentStoreClient) -> None:
        self.content_store = content_store

    @Logger.io
    async def get_by_id(self, *, match_id: str) -> Optional[Match]:
        document = await self.content_store.fetch(MATCH_BY_ID_QUERY, {'matchId': match_id})
        return document_to_match(document) if document else None

    @Logger.io
    async def list_all(self) -> List[Match]:
        documents = await self.content_store.fetch(ALL_MATCHES_QUERY)
        return [document_to_match(document) for document in documents or []]

    @Logger.io
    async def list_upcoming(self, *, limit: int) -> List[Match]:
        query = upcoming_matches_query(limit)
        documents = await self.content_store.fetch(query)
        return [document_to_match(document) for document in documents or []]

    @Logger.io
    async def get_next_with_tickets(self) -> Optional[Match]:
        document = await self.content_store.fetch(NEXT_TICKETS_MATCH_QUERY)
        return document_to_match(document) if document else None
