from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_match_query_repo import IMatchQueryRepo
from src.service.ticketing.domain.entity.match_entity import Match


class GetMatchUseCase:
    def __init__(self, match_query_repo: IMatchQueryRepo) -> None:
        self.match_query_repo = match_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        match_query_repo: IMatchQueryRepo = Depends(Provide[Container.match_query_repo]),
    ) -> Self:
        return cls(match_query_repo=match_query_repo)

    @Logger.io
    async def get_by_id(self, *, match_id: str) -> Match:
        match = await self.match_query_repo.get_by_id(match_id=match_id)
        if match is None:
            Logger.base.warning(f'⚠️ [GET_MATCH] Match {match_id} not found')
            raise NotFoundError('Match not found')
        return match

    @Logger.io
    async def get_next_with_tickets(self) -> Match:
        """Earliest match that has ticket sales enabled."""
        match = await self.match_query_repo.get_next_with_tickets()
        if match is None:
            raise NotFoundError('No upcoming match with tickets')
        return match
