"""
Email Template Renderer

Jinja2 environment with HTML autoescaping. Untrusted values go through the
`sanitize` filter (nh3, no tags allowed) before they are interpolated.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from src.service.shared_kernel.domain.html_sanitizer import sanitize_html
from src.service.shared_kernel.domain.price_format import format_price


TEMPLATE_DIR = Path(__file__).parent / 'templates'


def format_match_date(value: Any) -> str:
    """'Saturday, March 15, 2025 at 03:00 PM' (UTC)"""
    if not isinstance(value, datetime):
        return 'TBD' if not value else str(value)
    moment = value.astimezone(timezone.utc) if value.tzinfo else value
    return f'{moment:%A, %B} {moment.day}, {moment:%Y at %I:%M %p}'


class EmailTemplateRenderer:
    def __init__(
        self,
        *,
        club_name: str,
        support_email: str,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.club_name = club_name
        self.support_email = support_email
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            autoescape=select_autoescape(['html']),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters['sanitize'] = sanitize_html
        self.env.filters['price'] = format_price
        self.env.filters['match_date'] = format_match_date

    def render(self, template_name: str, **context: Any) -> str:
        template = self.env.get_template(template_name)
        return template.render(
            club_name=self.club_name,
            support_email=self.support_email,
            year=self._clock().year,
            **context,
        )
