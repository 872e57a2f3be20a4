from typing import List

from src.platform.content_store.content_store_client import ContentStoreClient
from src.platform.logging.loguru_io import Logger
from src.service.content.app.interface.i_content_search_repo import IContentSearchRepo
from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.domain.entity.photo_gallery_entity import PhotoGallery
from src.service.content.domain.entity.player_entity import Player
from src.service.content.driven_adapter.repo.content_document import (
    NEWS_PROJECTION,
    PHOTO_PROJECTION,
    PLAYER_PROJECTION,
    document_to_news,
    document_to_photo_gallery,
    document_to_player,
)


SEARCH_NEWS_QUERY = (
    '*[_type == "news" && (title match $searchTerm || description match $searchTerm)]'
    f' | order(publishedAt desc) [0...5] {NEWS_PROJECTION}'
)
SEARCH_PLAYERS_QUERY = (
    '*[_type == "player" && (firstName match $searchTerm || lastName match $searchTerm)]'
    f' | order(lastName asc) [0...5] {PLAYER_PROJECTION}'
)
SEARCH_PHOTOS_QUERY = (
    '*[_type == "photo" && title match $searchTerm]'
    f' | order(date desc) [0...5] {PHOTO_PROJECTION}'
)


class ContentSearchRepoImpl(IContentSearchRepo):
    def __init__(self, *, content_store: ContentStoreClient) -> None:
        self.content_store = content_store

    @Logger.io
    async def search_news(self, *, pattern: str) -> List[NewsArticle]:
        documents = await self.content_store.fetch(SEARCH_NEWS_QUERY, {'searchTerm': pattern})
        return [document_to_news(document) for document in documents or []]

    @Logger.io
    async def search_players(self, *, pattern: str) -> List[Player]:
        documents = await self.content_store.fetch(SEARCH_PLAYERS_QUERY, {'searchTerm': pattern})
        return [document_to_player(document) for document in documents or []]

    @Logger.io
    async def search_photos(self, *, pattern: str) -> List[PhotoGallery]:
        documents = await self.content_store.fetch(SEARCH_PHOTOS_QUERY, {'searchTerm': pattern})
        return [document_to_photo_gallery(document) for document in documents or []]
