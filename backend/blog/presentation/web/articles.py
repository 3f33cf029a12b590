"""Article HTML pages — list, show, create, edit and delete."""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from blog.application.schemas import ArticleForm, ArticleFormContext
from blog.application.services import ArticleService
from blog.domain.exceptions import ArticleValidationError, EntityNotFoundError, StorageError
from blog.infrastructure.dependencies import get_article_service
from blog.presentation.web.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])

NOT_FOUND_MESSAGE = "404 article not found"
SERVER_ERROR_MESSAGE = "500 internal server error"


def _not_found() -> HTMLResponse:
    return HTMLResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


def _server_error() -> HTMLResponse:
    return HTMLResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _render_form(request: Request, template: str, context: ArticleFormContext, **extra) -> Response:
    return templates.TemplateResponse(
        request,
        template,
        {"form": context, **extra},
    )


@router.get("", name="articles.index")
async def list_articles(
    request: Request,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Render every article as a linked list."""
    try:
        articles = await service.list_articles()
    except StorageError:
        logger.exception("Could not list articles")
        return _server_error()
    return templates.TemplateResponse(request, "articles/index.html", {"articles": articles})


@router.get("/create", name="articles.create")
async def create_article_form(request: Request) -> Response:
    """Render an empty article form."""
    return _render_form(request, "articles/create.html", ArticleFormContext())


@router.post("", name="articles.store")
async def store_article(
    request: Request,
    form: ArticleForm = Depends(ArticleForm.as_form),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Validate and persist a new article, or re-render the form with field errors."""
    try:
        article = await service.create_article(form)
    except ArticleValidationError as e:
        context = ArticleFormContext(title=form.title, body=form.body, errors=e.errors)
        return _render_form(request, "articles/create.html", context)
    except StorageError:
        logger.exception("Could not create article")
        return _server_error()
    return RedirectResponse(
        request.url_for("articles.show", article_id=article.id),
        status_code=status.HTTP_302_FOUND,
    )


@router.get("/{article_id:int}", name="articles.show")
async def show_article(
    request: Request,
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Render a single article."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        return _not_found()
    except StorageError:
        logger.exception("Could not fetch article %s", article_id)
        return _server_error()
    return templates.TemplateResponse(request, "articles/show.html", {"article": article})


@router.get("/{article_id:int}/edit", name="articles.edit")
async def edit_article_form(
    request: Request,
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Render the edit form pre-filled with the stored article."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError:
        return _not_found()
    except StorageError:
        logger.exception("Could not fetch article %s", article_id)
        return _server_error()
    context = ArticleFormContext(title=article.title, body=article.body)
    return _render_form(request, "articles/edit.html", context, article_id=article_id)


@router.post("/{article_id:int}", name="articles.update")
async def update_article(
    request: Request,
    article_id: int,
    form: ArticleForm = Depends(ArticleForm.as_form),
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Validate and save changes, or re-render the edit form with field errors."""
    try:
        await service.update_article(article_id, form)
    except EntityNotFoundError:
        return _not_found()
    except ArticleValidationError as e:
        context = ArticleFormContext(title=form.title, body=form.body, errors=e.errors)
        return _render_form(request, "articles/edit.html", context, article_id=article_id)
    except StorageError:
        logger.exception("Could not update article %s", article_id)
        return _server_error()
    return RedirectResponse(
        request.url_for("articles.show", article_id=article_id),
        status_code=status.HTTP_302_FOUND,
    )


@router.post("/{article_id:int}/delete", name="articles.delete")
async def delete_article(
    request: Request,
    article_id: int,
    service: ArticleService = Depends(get_article_service),
) -> Response:
    """Delete an article and return to the index.

    A missing row, whether absent before the fetch or removed between fetch
    and delete, yields 404. Any store failure yields 500.
    """
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError:
        return _not_found()
    except StorageError:
        logger.exception("Could not delete article %s", article_id)
        return _server_error()
    return RedirectResponse(request.url_for("articles.index"), status_code=status.HTTP_302_FOUND)
