"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from fastapi import Form
from pydantic import BaseModel


class ArticleForm(BaseModel):
    """Raw values submitted by the create/edit article form.

    No length constraints live here: the form must reach the validator even
    when empty so each field can be annotated with its own message.
    """

    title: str = ""
    body: str = ""

    @classmethod
    def as_form(
        cls,
        title: str = Form(""),
        body: str = Form(""),
    ) -> "ArticleForm":
        """FastAPI dependency that builds the DTO from a urlencoded body."""
        return cls(title=title, body=body)


class ArticleFormContext(BaseModel):
    """Template context for the article form pages."""

    title: str = ""
    body: str = ""
    errors: dict[str, str] = {}
