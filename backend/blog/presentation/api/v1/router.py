"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from blog.presentation.api.v1.endpoints.health import router as health_router
from blog.presentation.api.v1.endpoints.articles import router as articles_router
from blog.presentation.api.v1.endpoints.likes import router as likes_router
from blog.presentation.api.v1.endpoints.translate import router as translate_router
from blog.presentation.api.v1.endpoints.auth import router as auth_router
from blog.presentation.api.v1.endpoints.admin_articles import router as admin_articles_router
from blog.presentation.api.v1.endpoints.uploads import router as uploads_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(likes_router)
router.include_router(translate_router)
router.include_router(auth_router)
router.include_router(admin_articles_router)
router.include_router(uploads_router)
