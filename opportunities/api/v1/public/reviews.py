
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from opportunities.db.session import get_db
from opportunities.api.deps import get_current_user
from opportunities.models.listing import ListingType
from opportunities.models.user import User
from opportunities.schemas.social import ReviewCreate, ReviewUpdate, Review as ReviewSchema
from opportunities.services import social

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/{listing_type}/{listing_id}", response_model=List[ReviewSchema])
def list_reviews(listing_type: ListingType, listing_id: int, db: Session = Depends(get_db)):
    """Reviews for a listing, newest first. No authentication required."""
    return social.list_reviews(db, listing_type, listing_id)


@router.post("", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def submit_review(
    data: ReviewCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Submit a 1-5 star review with a title and optional text.

    One review per user per listing; a second attempt returns 409.
    """
    return social.create_review(db, current_user, data)


@router.put("/{review_id}", response_model=ReviewSchema)
def update_review(
    review_id: int,
    data: ReviewUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return social.update_review(db, current_user, review_id, data)


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a review. Allowed for its author and for admins."""
    social.delete_review(db, current_user, review_id)
