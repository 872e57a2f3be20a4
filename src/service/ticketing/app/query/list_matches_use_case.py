from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_match_query_repo import IMatchQueryRepo
from src.service.ticketing.domain.entity.match_entity import Match


class ListMatchesUseCase:
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
    async def list_matches(self, *, upcoming: Optional[int] = None) -> List[Match]:
        """All matches by kick-off; `upcoming` keeps only the first N (home page fixture strip)."""
        if upcoming:
            matches = await self.match_query_repo.list_upcoming(limit=upcoming)
        else:
            matches = await self.match_query_repo.list_all()

        Logger.base.info(f'📅 [LIST_MATCHES] Found {len(matches)} matches')
        return matches
