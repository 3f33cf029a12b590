"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass

# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_ARTICLE_ID = 2**63 - 1


@dataclass
class Article:
    """Core domain entity representing a blog article.

    ``id`` is assigned by the store on creation; an article that has not been
    persisted yet carries ``None``.
    """

    title: str
    body: str
    id: int | None = None

    def update(self, title: str | None = None, body: str | None = None) -> None:
        """Replace the given fields in place."""
        if title is not None:
            self.title = title
        if body is not None:
            self.body = body
