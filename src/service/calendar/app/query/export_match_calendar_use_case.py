from datetime import datetime
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.calendar.app.dto.calendar_config import CalendarConfig
from src.service.calendar.domain.match_calendar import (
    CalendarLinks,
    build_calendar_links,
    build_ics,
)
from src.service.ticketing.app.interface.i_match_query_repo import IMatchQueryRepo


class ExportMatchCalendarUseCase:
    """Builds the fixture list as an .ics feed and as provider deep links"""

    def __init__(
        self,
        *,
        config: CalendarConfig,
        match_query_repo: IMatchQueryRepo,
        clock: Callable[[], datetime],
    ) -> None:
        self.config = config
        self.match_query_repo = match_query_repo
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        config: CalendarConfig = Depends(Provide[Container.calendar_config]),
        match_query_repo: IMatchQueryRepo = Depends(Provide[Container.match_query_repo]),
        clock: Callable[[], datetime] = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(config=config, match_query_repo=match_query_repo, clock=clock)

    @Logger.io
    async def export_ics(self) -> str:
        with self.tracer.start_as_current_span('use_case.export_match_calendar') as span:
            matches = await self.match_query_repo.list_all()
            span.set_attribute('calendar.matches', len(matches))
            Logger.base.info(f'📅 [CALENDAR] Exporting {len(matches)} matches')
            return build_ics(matches, config=self.config, now=self.clock())

    @Logger.io
    async def deep_links(self) -> CalendarLinks:
        matches = await self.match_query_repo.list_all()
        return build_calendar_links(matches, config=self.config)
