from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.query.get_match_use_case import GetMatchUseCase
from src.service.ticketing.app.query.list_matches_use_case import ListMatchesUseCase
from src.service.ticketing.driving_adapter.http_controller.schema.match_schema import (
    MatchResponse,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_matches(
    upcoming: Optional[int] = Query(default=None, ge=1, le=50),
    use_case: ListMatchesUseCase = Depends(ListMatchesUseCase.depends),
) -> List[MatchResponse]:
    matches = await use_case.list_matches(upcoming=upcoming)
    return [MatchResponse.from_entity(match) for match in matches]


@router.get('/next-with-tickets')
@Logger.io
async def get_next_match_with_tickets(
    use_case: GetMatchUseCase = Depends(GetMatchUseCase.depends),
) -> MatchResponse:
    return MatchResponse.from_entity(await use_case.get_next_with_tickets())


@router.get('/{match_id}')
@Logger.io
async def get_match(
    match_id: str,
    use_case: GetMatchUseCase = Depends(GetMatchUseCase.depends),
) -> MatchResponse:
    return MatchResponse.from_entity(await use_case.get_by_id(match_id=match_id))
