from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.content.app.query.search_content_use_case import SearchContentUseCase
from src.service.content.driving_adapter.http_controller.schema.content_schema import (
    SearchResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def search_content(
    q: str = Query(default='', max_length=100),
    use_case: SearchContentUseCase = Depends(SearchContentUseCase.depends),
) -> SearchResponse:
    results = await use_case.search(term=q)
    return SearchResponse.from_results(query=q, results=results)
