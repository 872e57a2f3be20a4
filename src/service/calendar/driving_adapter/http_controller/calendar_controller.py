from fastapi import APIRouter, Depends
from fastapi.responses import Response

from src.platform.logging.loguru_io import Logger
from src.service.calendar.app.query.export_match_calendar_use_case import (
    ExportMatchCalendarUseCase,
)
from src.service.calendar.driving_adapter.http_controller.schema.calendar_schema import (
    CalendarLinksResponse,
)


ICS_FILENAME = 'paro-fc-matches.ics'

router = APIRouter()


@router.get('/calendar.ics', response_class=Response)
@Logger.io
async def download_match_calendar(
    use_case: ExportMatchCalendarUseCase = Depends(ExportMatchCalendarUseCase.depends),
) -> Response:
    content = await use_case.export_ics()
    return Response(
        content=content,
        media_type='text/calendar; charset=utf-8',
        headers={
            'Content-Disposition': f'attachment; filename="{ICS_FILENAME}"',
            'Cache-Control': 'public, max-age=3600',
        },
    )


@router.get('/calendar/links')
@Logger.io
async def get_calendar_links(
    use_case: ExportMatchCalendarUseCase = Depends(ExportMatchCalendarUseCase.depends),
) -> CalendarLinksResponse:
    return CalendarLinksResponse.from_links(await use_case.deep_links())
