from .article import Article, MAX_ARTICLE_ID

__all__ = [
    "Article",
    "MAX_ARTICLE_ID",
]
