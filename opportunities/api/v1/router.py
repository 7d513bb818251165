
from fastapi import APIRouter

from opportunities.schemas.common import ErrorResponse

# Auth
from opportunities.api.v1.public.auth import router as auth_router

# Public: listing types (one router per slug)
from opportunities.api.v1.public.listings import routers as listing_routers
from opportunities.api.v1.public.options import router as options_router

# Public: social
from opportunities.api.v1.public.reviews import router as reviews_router
from opportunities.api.v1.public.interactions import thumbs_up_router, bookmarks_router
from opportunities.api.v1.public.reports import router as reports_router
from opportunities.api.v1.public.views import router as views_router

# Admin
from opportunities.api.v1.admin.listings import router as admin_listings_router
from opportunities.api.v1.admin.reports import router as admin_reports_router

api_router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)

# --- Auth ---
api_router.include_router(auth_router)

# --- Public: listings ---
for listing_router in listing_routers:
    api_router.include_router(listing_router)
api_router.include_router(options_router)

# --- Public: social ---
api_router.include_router(reviews_router)
api_router.include_router(thumbs_up_router)
api_router.include_router(bookmarks_router)
api_router.include_router(reports_router)
api_router.include_router(views_router)

# --- Admin ---
api_router.include_router(admin_listings_router)
api_router.include_router(admin_reports_router)
