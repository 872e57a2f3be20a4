from typing import Tuple

import attrs

from src.service.content.domain.entity.news_entity import NewsArticle


@attrs.frozen
class NewsArticleDetail:
    article: NewsArticle
    related: Tuple[NewsArticle, ...] = ()
