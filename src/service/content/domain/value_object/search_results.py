from typing import Tuple

import attrs

from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.domain.entity.photo_gallery_entity import PhotoGallery
from src.service.content.domain.entity.player_entity import Player


MIN_SEARCH_TERM_LENGTH = 2
MAX_RESULTS_PER_KIND = 5


def normalize_search_term(term: str) -> str:
    return ' '.join(term.split())


def is_searchable(term: str) -> bool:
    return len(normalize_search_term(term)) >= MIN_SEARCH_TERM_LENGTH


def search_pattern(term: str) -> str:
    """Wildcard pattern for the CMS `match` operator."""
    return f'*{normalize_search_term(term)}*'


@attrs.frozen
class SearchResults:
    news: Tuple[NewsArticle, ...] = ()
    players: Tuple[Player, ...] = ()
    photos: Tuple[PhotoGallery, ...] = ()

    @property
    def total(self) -> int:
        return len(self.news) + len(self.players) + len(self.photos)
