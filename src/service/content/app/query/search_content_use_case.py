from typing import Self

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.content.app.interface.i_content_search_repo import IContentSearchRepo
from src.service.content.domain.value_object.search_results import (
    SearchResults,
    is_searchable,
    search_pattern,
)


class SearchContentUseCase:
    """News, players and photo galleries matching a free-text term"""

    def __init__(self, *, search_repo: IContentSearchRepo) -> None:
        self.search_repo = search_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        search_repo: IContentSearchRepo = Depends(Provide[Container.content_search_repo]),
    ) -> Self:
        return cls(search_repo=search_repo)

    @Logger.io
    async def search(self, *, term: str) -> SearchResults:
        if not is_searchable(term):
            return SearchResults()

        pattern = search_pattern(term)
        found: dict = {}

        async def run(kind: str, query) -> None:
            found[kind] = tuple(await query(pattern=pattern))

        with self.tracer.start_as_current_span(
            'use_case.search_content', attributes={'search.pattern': pattern}
        ):
            async with anyio.create_task_group() as tg:
                tg.start_soon(run, 'news', self.search_repo.search_news)
                tg.start_soon(run, 'players', self.search_repo.search_players)
                tg.start_soon(run, 'photos', self.search_repo.search_photos)

        results = SearchResults(**found)
        Logger.base.info(f'🔍 [SEARCH] {pattern!r}: {results.total} hits')
        return results
