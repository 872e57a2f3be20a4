"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.calendar.app.query import export_match_calendar_use_case
from src.service.content.app.query import news_query_use_case, search_content_use_case
from src.service.shop.app.command import checkout_use_case
from src.service.ticketing.app.command import create_booking_use_case
from src.service.ticketing.app.query import get_match_use_case, list_matches_use_case


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    get_match_use_case,
    list_matches_use_case,
    checkout_use_case,
    export_match_calendar_use_case,
    news_query_use_case,
    search_content_use_case,
]
