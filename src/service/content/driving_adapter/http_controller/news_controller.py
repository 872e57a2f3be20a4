from typing import List

from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.content.app.query.news_query_use_case import NewsQueryUseCase
from src.service.content.driving_adapter.http_controller.schema.content_schema import (
    NewsArticleResponse,
    NewsSummary,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_news(
    use_case: NewsQueryUseCase = Depends(NewsQueryUseCase.depends),
) -> List[NewsSummary]:
    articles = await use_case.list_news()
    return [NewsSummary.from_entity(article) for article in articles]


@router.get('/{slug}')
@Logger.io
async def get_news_article(
    slug: str,
    use_case: NewsQueryUseCase = Depends(NewsQueryUseCase.depends),
) -> NewsArticleResponse:
    return NewsArticleResponse.from_detail(await use_case.get_article(slug=slug))
