from typing import List, Optional

from src.platform.content_store.content_store_client import ContentStoreClient
from src.platform.logging.loguru_io import Logger
from src.service.content.app.interface.i_news_query_repo import INewsQueryRepo
from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.driven_adapter.repo.content_document import (
    NEWS_ARTICLE_PROJECTION,
    NEWS_PROJECTION,
    document_to_news,
)


NEWS_QUERY = f'*[_type == "news"] | order(publishedAt desc) {NEWS_PROJECTION}'
NEWS_ARTICLE_QUERY = (
    f'*[_type == "news" && slug.current == $slug][0] {NEWS_ARTICLE_PROJECTION}'
)
RELATED_NEWS_QUERY = (
    f'*[_type == "news" && slug.current != $slug] | order(publishedAt desc) [0...4] '
    f'{NEWS_PROJECTION}'
)


class NewsQueryRepoImpl(INewsQueryRepo):
    def __init__(self, *, content_store: ContentStoreClient) -> None:
        self.content_store = content_store

    @Logger.io
    async def list_all(self) -> List[NewsArticle]:
        documents = await self.content_store.fetch(NEWS_QUERY)
        return [document_to_news(document) for document in documents or []]

    @Logger.io
    async def get_by_slug(self, *, slug: str) -> Optional[NewsArticle]:
        document = await self.content_store.fetch(NEWS_ARTICLE_QUERY, {'slug': slug})
        return document_to_news(document) if document else None

    @Logger.io
    async def list_related(self, *, slug: str) -> List[NewsArticle]:
        documents = await self.content_store.fetch(RELATED_NEWS_QUERY, {'slug': slug})
        return [document_to_news(document) for document in documents or []]
