"""Application service (use case) for Article operations."""

import logging

from blog.application.interfaces import ArticleRepository
from blog.application.schemas import ArticleForm
from blog.domain.entities import Article, MAX_ARTICLE_ID
from blog.domain.exceptions import ArticleValidationError, EntityNotFoundError
from blog.domain.validation import validate_article

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Fetch and write are separate store calls with no surrounding lock, so a
    row can disappear in between. A write that reports zero affected rows is
    surfaced as ``EntityNotFoundError``, the same as a failed fetch.
    ``StorageError`` from the repository propagates unchanged.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        if not 0 < article_id <= MAX_ARTICLE_ID:
            # Outside the INTEGER key range, so no row can match.
            raise EntityNotFoundError("Article", article_id)
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(self) -> list[Article]:
        return await self._repository.get_all()

    async def create_article(self, data: ArticleForm) -> Article:
        self._ensure_valid(data)
        article = await self._repository.create(Article(title=data.title, body=data.body))
        logger.info("Created article id=%s", article.id)
        return article

    async def update_article(self, article_id: int, data: ArticleForm) -> Article:
        article = await self.get_article(article_id)
        self._ensure_valid(data)
        article.update(title=data.title, body=data.body)
        affected = await self._repository.update(article)
        if affected == 0:
            logger.info("Article id=%s vanished before update", article_id)
            raise EntityNotFoundError("Article", article_id)
        logger.info("Updated article id=%s", article_id)
        return article

    async def delete_article(self, article_id: int) -> int:
        """Fetch then delete; returns the affected row count (always > 0)."""
        article = await self.get_article(article_id)
        affected = await self._repository.delete(article)
        if affected == 0:
            logger.info("Article id=%s vanished before delete", article_id)
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article id=%s", article_id)
        return affected

    @staticmethod
    def _ensure_valid(data: ArticleForm) -> None:
        errors = validate_article(data.title, data.body)
        if errors:
            logger.debug("Rejected article form: %s", errors)
            raise ArticleValidationError(errors)
