from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.content.app.dto.news_article_detail import NewsArticleDetail
from src.service.content.app.interface.i_news_query_repo import INewsQueryRepo
from src.service.content.domain.entity.news_entity import NewsArticle


class NewsQueryUseCase:
    def __init__(self, *, news_query_repo: INewsQueryRepo) -> None:
        self.news_query_repo = news_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        news_query_repo: INewsQueryRepo = Depends(Provide[Container.news_query_repo]),
    ) -> Self:
        return cls(news_query_repo=news_query_repo)

    @Logger.io
    async def list_news(self) -> List[NewsArticle]:
        articles = await self.news_query_repo.list_all()
        Logger.base.info(f'📰 [LIST_NEWS] Found {len(articles)} articles')
        return articles

    @Logger.io
    async def get_article(self, *, slug: str) -> NewsArticleDetail:
        article = await self.news_query_repo.get_by_slug(slug=slug)
        if article is None:
            raise NotFoundError('Article not found')
        related = await self.news_query_repo.list_related(slug=slug)
        return NewsArticleDetail(article=article, related=tuple(related))
