"""Shared fixtures: an in-memory article repository and an HTTP client bound to it."""

import dataclasses
import os

# Must be set before blog.config is first imported.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.application.interfaces import ArticleRepository
from blog.application.services import ArticleService
from blog.domain.entities import Article
from blog.domain.exceptions import StorageError


class FakeArticleRepository(ArticleRepository):
    """In-memory fake repository for unit testing.

    ``vanish_before_write`` drops the target row right before an update or
    delete runs, as a concurrent request would. Operation names placed in
    ``failing_operations`` raise ``StorageError``.
    """

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._next_id = 1
        self.vanish_before_write = False
        self.failing_operations: set[str] = set()

    def _check(self, operation: str) -> None:
        if operation in self.failing_operations:
            raise StorageError(operation, "simulated failure")

    def _vanish(self, article_id: int | None) -> None:
        if self.vanish_before_write:
            self._articles.pop(article_id, None)

    def rows(self) -> list[Article]:
        return list(self._articles.values())

    async def get_by_id(self, article_id: int) -> Article | None:
        self._check("fetch")
        article = self._articles.get(article_id)
        return dataclasses.replace(article) if article else None

    async def get_all(self) -> list[Article]:
        self._check("list")
        return [dataclasses.replace(a) for a in sorted(self._articles.values(), key=lambda a: a.id)]

    async def create(self, article: Article) -> Article:
        self._check("create")
        article.id = self._next_id
        self._next_id += 1
        self._articles[article.id] = dataclasses.replace(article)
        return article

    async def update(self, article: Article) -> int:
        self._check("update")
        self._vanish(article.id)
        if article.id not in self._articles:
            return 0
        self._articles[article.id] = dataclasses.replace(article)
        return 1

    async def delete(self, article: Article) -> int:
        self._check("delete")
        self._vanish(article.id)
        return 1 if self._articles.pop(article.id, None) else 0


@pytest.fixture
def repository() -> FakeArticleRepository:
    return FakeArticleRepository()


@pytest.fixture
def service(repository: FakeArticleRepository) -> ArticleService:
    return ArticleService(repository)


@pytest_asyncio.fixture
async def client(repository: FakeArticleRepository):
    """HTTP client for the real app with the article service backed by the fake repository."""
    from blog.infrastructure.dependencies import get_article_service
    from blog.main import app

    app.dependency_overrides[get_article_service] = lambda: ArticleService(repository)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
