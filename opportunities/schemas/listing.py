
from typing import Annotated, Optional, List
from decimal import Decimal
from datetime import datetime, date, time

from pydantic import Field, field_validator, create_model

from opportunities.schemas.common import CamelModel, check_options
from opportunities.schemas.options import TUTORING_PROVIDER_TYPES, SELECTIVITY_LEVELS, SALARY_TYPES


# Read-only fields every listing carries in responses
class ListingMeta(CamelModel):
    id: int
    user_id: Optional[str] = None
    contributor_nickname: Optional[str] = None
    contributor_first_name: Optional[str] = None
    contributor_last_name: Optional[str] = None
    view_count: int = 0
    is_approved: bool
    is_active: bool
    submitted_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Computed per row from reviews / thumbs_up
    thumbs_up_count: int = 0
    average_rating: float = 0.0
    review_count: int = 0


# ---------------------------------------------------------------------------
# Tutoring providers
# ---------------------------------------------------------------------------


class TutoringProviderBase(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    type: str
    description: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    categories: Optional[List[str]] = None
    subjects: Optional[List[str]] = None
    delivery_mode: Optional[List[str]] = None
    photo_url: Optional[str] = None


class TutoringProviderCreate(TutoringProviderBase):
    @field_validator("type")
    @classmethod
    def _known_type(cls, v):
        return check_options(v, TUTORING_PROVIDER_TYPES, "type")


class TutoringProvider(TutoringProviderBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Summer camps
# ---------------------------------------------------------------------------


class SummerCampBase(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    selectivity_level: Optional[int] = None
    dates: Optional[str] = None
    length: Optional[str] = None
    cost_range: Optional[str] = None
    application_open: Optional[date] = None
    application_deadline: Optional[date] = None
    application_available: Optional[bool] = True
    minimum_age: Optional[int] = None
    has_scholarship: Optional[bool] = False
    eligibility: Optional[str] = None
    description: Optional[str] = None
    delivery_mode: Optional[List[str]] = None
    website: Optional[str] = None
    photo_url: Optional[str] = None


class SummerCampCreate(SummerCampBase):
    @field_validator("selectivity_level")
    @classmethod
    def _known_selectivity(cls, v):
        return check_options(v, SELECTIVITY_LEVELS, "selectivity level")


class SummerCamp(SummerCampBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Internships
# ---------------------------------------------------------------------------


class InternshipBase(CamelModel):
    company_name: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    is_remote: Optional[bool] = False
    types: Optional[List[str]] = None
    selectivity_level: Optional[int] = None
    compensation: Optional[str] = None
    description: Optional[str] = None
    duration: Optional[List[str]] = None
    internship_dates: Optional[str] = None
    length: Optional[str] = None
    delivery_mode: Optional[List[str]] = None
    minimum_age: Optional[int] = None
    application_open: Optional[date] = None
    application_deadline: Optional[date] = None
    prerequisites: Optional[str] = None
    tuition: Optional[str] = None
    eligibility: Optional[str] = None
    website: Optional[str] = None
    has_mentorship: Optional[bool] = False
    photo_url: Optional[str] = None


class InternshipCreate(InternshipBase):
    @field_validator("selectivity_level")
    @classmethod
    def _known_selectivity(cls, v):
        return check_options(v, SELECTIVITY_LEVELS, "selectivity level")


class Internship(InternshipBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Jobs
# ---------------------------------------------------------------------------


class JobBase(CamelModel):
    company_name: str = Field(min_length=1, max_length=255)
    title: str = Field(min_length=1, max_length=255)
    location: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    is_remote: Optional[bool] = False
    categories: Optional[List[str]] = None
    compensation: Optional[str] = None
    compensation_range: Optional[str] = None
    salary_min: Optional[Decimal] = None
    salary_max: Optional[Decimal] = None
    salary_type: Optional[str] = None
    job_type: Optional[List[str]] = None
    description: Optional[str] = None
    work_schedule: Optional[str] = None
    schedule: Optional[List[str]] = None
    minimum_age: Optional[int] = None
    opening_date: Optional[date] = None
    closing_date: Optional[date] = None
    is_ongoing: Optional[bool] = False
    application_deadline: Optional[date] = None
    eligibility: Optional[str] = None
    website: Optional[str] = None
    has_training: Optional[bool] = False
    has_advancement: Optional[bool] = False
    requires_transportation: Optional[bool] = False
    requires_resume: Optional[bool] = False
    photo_url: Optional[str] = None


class JobCreate(JobBase):
    @field_validator("salary_type")
    @classmethod
    def _known_salary_type(cls, v):
        return check_options(v, SALARY_TYPES, "salary type")


class Job(JobBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------


class ServiceBase(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    type: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    categories: Optional[List[str]] = None
    tags: Optional[List[str]] = None
    delivery_mode: Optional[List[str]] = None
    photo_url: Optional[str] = None


class ServiceCreate(ServiceBase):
    pass


class Service(ServiceBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EventBase(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = None
    organizer: str = Field(min_length=1, max_length=255)
    organizer_email: Optional[str] = None
    organizer_phone: Optional[str] = None
    event_date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    venue: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    categories: Optional[List[str]] = None
    target_audience: Optional[List[str]] = None
    age_range: Optional[str] = None
    cost: Optional[str] = None
    registration_required: Optional[bool] = False
    registration_link: Optional[str] = None
    contact_info: Optional[str] = None
    special_instructions: Optional[str] = None
    photo_url: Optional[str] = None


class EventCreate(EventBase):
    pass


class Event(EventBase, ListingMeta):
    pass


# ---------------------------------------------------------------------------
# Partial patches (admin edit)
# ---------------------------------------------------------------------------


def make_patch_schema(create: type[CamelModel], name: str) -> type[CamelModel]:
    """
    Every field of `create` made optional, plus the lifecycle flags.

    The patch subclasses `create`, so its option-list validators run on the
    fields an edit supplies. Length constraints are kept on the inner type.
    """
    fields = {}
    for field_name, info in create.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (Optional[annotation], None)
    fields["is_approved"] = (Optional[bool], None)
    fields["is_active"] = (Optional[bool], None)
    return create_model(name, __base__=create, **fields)


TutoringProviderUpdate = make_patch_schema(TutoringProviderCreate, "TutoringProviderUpdate")
SummerCampUpdate = make_patch_schema(SummerCampCreate, "SummerCampUpdate")
InternshipUpdate = make_patch_schema(InternshipCreate, "InternshipUpdate")
JobUpdate = make_patch_schema(JobCreate, "JobUpdate")
ServiceUpdate = make_patch_schema(ServiceCreate, "ServiceUpdate")
EventUpdate = make_patch_schema(EventCreate, "EventUpdate")
