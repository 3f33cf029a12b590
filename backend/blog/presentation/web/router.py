"""HTML router — aggregates all page routers."""

from fastapi import APIRouter

from blog.presentation.web.articles import router as articles_router
from blog.presentation.web.pages import router as pages_router

router = APIRouter()
router.include_router(pages_router)
router.include_router(articles_router)
