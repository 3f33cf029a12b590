"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Every method raises ``StorageError`` when the backing store fails.
    Writes are committed before they return.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID, or None when no row matches."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article ordered by ID."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, article: Article) -> int:
        """Write title and body of an existing article. Returns the affected row count."""
        ...

    @abstractmethod
    async def delete(self, article: Article) -> int:
        """Delete the row matching ``article.id``. Returns the affected row count."""
        ...
