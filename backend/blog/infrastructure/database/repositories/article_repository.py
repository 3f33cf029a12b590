"""Concrete repository implementation backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.application.interfaces import ArticleRepository
from blog.domain.entities import Article
from blog.domain.exceptions import StorageError
from blog.infrastructure.database.models import ArticleModel

logger = logging.getLogger(__name__)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Update and delete are issued as single statements so the reported row
    count reflects what the database actually touched. Writes commit before
    returning, so a failed commit is reported by the write itself. Any
    SQLAlchemy failure rolls the session back and is re-raised as ``StorageError``.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(id=model.id, title=model.title, body=model.body)

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(title=entity.title, body=entity.body)

    async def _storage_error(self, operation: str, error: SQLAlchemyError) -> StorageError:
        """Roll back the failed unit of work and wrap the error for the caller."""
        try:
            await self._session.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback after failed %s also failed", operation)
        return StorageError(operation, str(error))

    async def get_by_id(self, article_id: int) -> Article | None:
        stmt = select(ArticleModel).where(ArticleModel.id == article_id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._storage_error("fetch", e) from e
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Article]:
        stmt = select(ArticleModel).order_by(ArticleModel.id)
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise await self._storage_error("list", e) from e
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        self._session.add(model)
        try:
            await self._session.flush()
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._storage_error("create", e) from e
        return self._to_entity(model)

    async def update(self, article: Article) -> int:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article.id)
            .values(title=article.title, body=article.body)
        )
        try:
            result = await self._session.execute(stmt)
            affected = result.rowcount
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._storage_error("update", e) from e
        logger.debug("UPDATE articles id=%s affected=%d", article.id, affected)
        return affected

    async def delete(self, article: Article) -> int:
        stmt = delete(ArticleModel).where(ArticleModel.id == article.id)
        try:
            result = await self._session.execute(stmt)
            affected = result.rowcount
            await self._session.commit()
        except SQLAlchemyError as e:
            raise await self._storage_error("delete", e) from e
        logger.debug("DELETE articles id=%s affected=%d", article.id, affected)
        return affected
