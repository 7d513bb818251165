
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_optional_user
from opportunities.models.user import User
from opportunities.schemas.common import Page
from opportunities.services.listings import ListingStore, STORES
from opportunities.utils.query import parse_filters


def build_listing_router(store: ListingStore) -> APIRouter:
    """
    Public routes for one listing type, mounted at `/{store.route_slug}`:
    browse approved listings, fetch one by id, and submit a new one for review.
    """
    router = APIRouter(prefix=f"/{store.route_slug}", tags=[store.route_slug])
    schema = store.out_schema

    @router.get("", response_model=Page[schema], name=f"list_{store.listing_type.value}")
    def list_listings(request: Request, db: Session = Depends(get_db)):
        """
        Approved, active listings. Filters arrive as query parameters; list
        filters are comma-separated and malformed values are ignored.
        """
        filters = parse_filters(store.filter_schema, request.query_params)
        items, total = store.list(db, filters)
        return {"items": items, "total": total}

    @router.get("/{listing_id}", response_model=schema, name=f"get_{store.listing_type.value}")
    def get_listing(listing_id: int, db: Session = Depends(get_db)):
        listing = store.get(db, listing_id)
        if not listing:
            raise HTTPException(status_code=404, detail=f"{store.label} not found")
        return listing

    @router.post(
        "",
        response_model=schema,
        status_code=status.HTTP_201_CREATED,
        name=f"create_{store.listing_type.value}",
    )
    def create_listing(
        data: store.create_schema,
        db: Session = Depends(get_db),
        current_user: Optional[User] = Depends(get_optional_user),
    ):
        """Submit a listing. It stays hidden until an admin approves it."""
        return store.create(db, data, contributor=current_user)

    return router


routers = [build_listing_router(store) for store in STORES.values()]
