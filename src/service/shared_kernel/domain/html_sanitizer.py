"""
Strip markup from untrusted strings before they reach an HTML email body or the CMS

nh3 drops every tag (and the contents of script/style), then the remaining
text is escaped so stray `<`, `>` or `&` can never form markup again.
"""

from typing import Any

from markupsafe import Markup, escape
import nh3


# Entity-encoded payloads can nest (`&amp;lt;b&amp;gt;`); give up decoding after this many rounds
MAX_DECODE_ROUNDS = 5


def strip_tags(value: Any) -> str:
    if value is None:
        return ''
    return nh3.clean(str(value), tags=set(), clean_content_tags={'script', 'style'})


def sanitize_html(value: Any) -> Markup:
    # nh3 output is entity-encoded already; unescape first so `&amp;` is not doubled
    return escape(Markup(strip_tags(value)).unescape())


def sanitize_text(value: Any) -> str:
    """
    Plain-text variant for values stored in the content store (booking name/email)

    Decoding entities can reveal tags (`&lt;img ...&gt;`), so strip and decode
    until the text stops changing. If it never settles the entity-encoded,
    inert form is returned.
    """
    text = '' if value is None else str(value)
    for _ in range(MAX_DECODE_ROUNDS):
        decoded = Markup(strip_tags(text)).unescape()
        if decoded == text:
            return decoded
        text = decoded
    return strip_tags(text)
