from .article import ArticleForm, ArticleFormContext

__all__ = [
    "ArticleForm",
    "ArticleFormContext",
]
