from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.content.domain.entity.news_entity import NewsArticle


class INewsQueryRepo(ABC):
    @abstractmethod
    async def list_all(self) -> List[NewsArticle]:
        """Newest first"""
        pass

    @abstractmethod
    async def get_by_slug(self, *, slug: str) -> Optional[NewsArticle]:
        pass

    @abstractmethod
    async def list_related(self, *, slug: str) -> List[NewsArticle]:
        """Up to four other articles, newest first"""
        pass
