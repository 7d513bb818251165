
from typing import Optional, List
from datetime import date

from opportunities.schemas.common import CamelModel


class ListingFilters(CamelModel):
    """Filters every public listing endpoint understands."""

    search: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: str = "desc"
    limit: Optional[int] = None
    offset: Optional[int] = None


class TutoringProviderFilters(ListingFilters):
    categories: Optional[List[str]] = None
    subjects: Optional[List[str]] = None
    delivery_mode: Optional[List[str]] = None
    type: Optional[str] = None


class SummerCampFilters(ListingFilters):
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    selectivity_level: Optional[List[int]] = None
    cost: Optional[List[str]] = None
    has_scholarship: Optional[bool] = None
    application_available: Optional[bool] = None
    minimum_age: Optional[int] = None


class InternshipFilters(ListingFilters):
    types: Optional[List[str]] = None
    compensation: Optional[List[str]] = None
    duration: Optional[List[str]] = None
    selectivity_level: Optional[List[int]] = None
    is_remote: Optional[bool] = None
    has_mentorship: Optional[bool] = None
    minimum_age: Optional[int] = None


class JobFilters(ListingFilters):
    categories: Optional[List[str]] = None
    compensation: Optional[List[str]] = None
    job_type: Optional[List[str]] = None
    is_remote: Optional[bool] = None
    minimum_age: Optional[int] = None
    has_training: Optional[bool] = None


class ServiceFilters(ListingFilters):
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    type: Optional[str] = None


class EventFilters(ListingFilters):
    categories: Optional[List[str]] = None
    target_audience: Optional[List[str]] = None
    cost: Optional[List[str]] = None
    zipcode: Optional[str] = None
    event_date: Optional[date] = None
    registration_required: Optional[bool] = None
