from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.content.app.dto.news_article_detail import NewsArticleDetail
from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.domain.entity.photo_gallery_entity import PhotoGallery
from src.service.content.domain.entity.player_entity import Player
from src.service.content.domain.value_object.search_results import SearchResults


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewsSummary(CamelModel):
    id: str = Field(alias='_id')
    title: str
    slug: str
    badge: Optional[str] = None
    published_at: Optional[datetime] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_entity(cls, article: NewsArticle) -> 'NewsSummary':
        return cls(
            id=article.id,
            title=article.title,
            slug=article.slug,
            badge=article.badge,
            published_at=article.published_at,
            description=article.description,
            image_url=article.image_url,
        )


class NewsArticleResponse(CamelModel):
    article: NewsSummary
    body: List[dict[str, Any]] = []
    related: List[NewsSummary] = []

    @classmethod
    def from_detail(cls, detail: NewsArticleDetail) -> 'NewsArticleResponse':
        return cls(
            article=NewsSummary.from_entity(detail.article),
            body=detail.article.body or [],
            related=[NewsSummary.from_entity(article) for article in detail.related],
        )


class PlayerSummary(CamelModel):
    id: str = Field(alias='_id')
    first_name: str
    last_name: str
    slug: Optional[str] = None
    number: Optional[int] = None
    position: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_entity(cls, player: Player) -> 'PlayerSummary':
        return cls(
            id=player.id,
            first_name=player.first_name,
            last_name=player.last_name,
            slug=player.slug,
            number=player.number,
            position=player.position,
            image_url=player.image_url,
        )


class PhotoGallerySummary(CamelModel):
    id: str = Field(alias='_id')
    title: str
    slug: Optional[str] = None
    category: Optional[str] = None
    date: Optional[datetime] = None
    cover_image: Optional[str] = None

    @classmethod
    def from_entity(cls, gallery: PhotoGallery) -> 'PhotoGallerySummary':
        return cls(
            id=gallery.id,
            title=gallery.title,
            slug=gallery.slug,
            category=gallery.category,
            date=gallery.date,
            cover_image=gallery.cover_image,
        )


class SearchResponse(CamelModel):
    query: str
    total: int
    news: List[NewsSummary]
    players: List[PlayerSummary]
    photos: List[PhotoGallerySummary]

    @classmethod
    def from_results(cls, *, query: str, results: SearchResults) -> 'SearchResponse':
        return cls(
            query=query,
            total=results.total,
            news=[NewsSummary.from_entity(article) for article in results.news],
            players=[PlayerSummary.from_entity(player) for player in results.players],
            photos=[PhotoGallerySummary.from_entity(gallery) for gallery in results.photos],
        )
