
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_current_admin_user
from opportunities.models.user import User
from opportunities.schemas.admin import ListingsByType
from opportunities.schemas.common import MessageResponse
from opportunities.services import admin as admin_service
from opportunities.services.listings import ListingStore, resolve_admin_store
from opportunities.utils.coercion import coerce_admin_patch

router = APIRouter(prefix="/admin", tags=["Admin - Listings"])


def _store_or_400(listing_type: str) -> ListingStore:
    store = resolve_admin_store(listing_type)
    if store is None:
        raise HTTPException(status_code=400, detail="Invalid listing type")
    return store


def _found(store: ListingStore, listing):
    if listing is None:
        raise HTTPException(status_code=404, detail=f"{store.label} not found")
    return store.serialize(listing)


# ---------------------------------------------------------------------------
# Fan-out views
# ---------------------------------------------------------------------------


@router.get("/pending-approvals", response_model=ListingsByType)
def pending_approvals(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Every unapproved listing, grouped by type."""
    return admin_service.pending_approvals(db)


@router.get("/live-listings", response_model=ListingsByType)
def live_listings(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Approved listings grouped by type, at most 50 per type."""
    return admin_service.live_listings(db)


@router.get("/search-listings/{listing_type}", response_model=List[Dict[str, Any]])
def search_listings(
    listing_type: str,
    query: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    store = resolve_admin_store(listing_type)
    if store is None or not query:
        return []
    return [store.serialize(listing) for listing in store.search(db, query)]


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


@router.post("/approve/{listing_type}/{listing_id}")
def approve_listing(
    listing_type: str,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    store = _store_or_400(listing_type)
    return _found(store, store.approve(db, listing_id))


@router.post("/deactivate/{listing_type}/{listing_id}")
def deactivate_listing(
    listing_type: str,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Hide a listing from public results without deleting it."""
    store = _store_or_400(listing_type)
    return _found(store, store.deactivate(db, listing_id))


@router.post("/activate/{listing_type}/{listing_id}")
def activate_listing(
    listing_type: str,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    store = _store_or_400(listing_type)
    return _found(store, store.activate(db, listing_id))


@router.put("/edit/{listing_type}/{listing_id}")
def edit_listing(
    listing_type: str,
    listing_id: int,
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """
    Patch any field of a listing.

    The edit form posts strings; they are coerced back to dates, numbers,
    flags and lists before the patch is validated.
    """
    store = _store_or_400(listing_type)
    try:
        patch = store.update_schema.model_validate(coerce_admin_patch(payload))
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())
    return _found(store, store.update(db, listing_id, patch.model_dump(exclude_unset=True)))


@router.delete("/delete/{listing_type}/{listing_id}", response_model=MessageResponse)
def delete_listing(
    listing_type: str,
    listing_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin_user),
):
    """Permanently remove a listing with its reviews, thumbs-up, bookmarks and reports."""
    store = _store_or_400(listing_type)
    if not store.purge(db, listing_id):
        raise HTTPException(status_code=404, detail=f"{store.label} not found")
    return MessageResponse(message=f"{store.label} deleted")
