from abc import ABC, abstractmethod
from typing import List

from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.domain.entity.photo_gallery_entity import PhotoGallery
from src.service.content.domain.entity.player_entity import Player


class IContentSearchRepo(ABC):
    """`pattern` is already wildcarded (`*term*`)"""

    @abstractmethod
    async def search_news(self, *, pattern: str) -> List[NewsArticle]:
        pass

    @abstractmethod
    async def search_players(self, *, pattern: str) -> List[Player]:
        pass

    @abstractmethod
    async def search_photos(self, *, pattern: str) -> List[PhotoGallery]:
        pass
