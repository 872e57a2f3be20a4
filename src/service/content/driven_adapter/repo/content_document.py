from typing import Any

from src.platform.content_store.document_utils import parse_cms_datetime
from src.service.content.domain.entity.news_entity import NewsArticle
from src.service.content.domain.entity.photo_gallery_entity import PhotoGallery
from src.service.content.domain.entity.player_entity import Player


NEWS_PROJECTION = """{
  _id,
  title,
  "slug": slug.current,
  "imageUrl": image.asset->url,
  badge,
  publishedAt,
  description
}"""

NEWS_ARTICLE_PROJECTION = """{
  _id,
  title,
  "slug": slug.current,
  "imageUrl": image.asset->url,
  badge,
  publishedAt,
  description,
  body[] {
    ...,
    _type == "image" => {
      ...,
      "url": asset->url
    }
  }
}"""

PLAYER_PROJECTION = """{
  _id,
  firstName,
  lastName,
  number,
  position,
  "imageUrl": image.asset->url,
  "slug": slug.current
}"""

PHOTO_PROJECTION = """{
  _id,
  title,
  "coverImage": coverImage.asset->url,
  category,
  date,
  "slug": slug.current
}"""


def document_to_news(document: dict[str, Any]) -> NewsArticle:
    return NewsArticle(
        id=document['_id'],
        title=document.get('title') or '',
        slug=document.get('slug') or '',
        badge=document.get('badge'),
        published_at=parse_cms_datetime(document.get('publishedAt')),
        description=document.get('description'),
        image_url=document.get('imageUrl'),
        body=document.get('body'),
    )


def document_to_player(document: dict[str, Any]) -> Player:
    number = document.get('number')
    return Player(
        id=document['_id'],
        first_name=document.get('firstName') or '',
        last_name=document.get('lastName') or '',
        slug=document.get('slug'),
        number=int(number) if number is not None else None,
        position=document.get('position'),
        image_url=document.get('imageUrl'),
    )


def document_to_photo_gallery(document: dict[str, Any]) -> PhotoGallery:
    return PhotoGallery(
        id=document['_id'],
        title=document.get('title') or '',
        slug=document.get('slug'),
        category=document.get('category'),
        date=parse_cms_datetime(document.get('date')),
        cover_image=document.get('coverImage'),
    )
