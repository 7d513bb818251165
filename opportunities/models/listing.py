
import enum
from sqlalchemy import Column, String, Boolean, DateTime, func, Text, DECIMAL, Integer, Date, Time
from opportunities.db.session import Base
from opportunities.db.types import StringArray


class ListingType(str, enum.Enum):
    tutoring = "tutoring"
    camp = "camp"
    internship = "internship"
    job = "job"
    service = "service"
    event = "event"


class ListingMixin:
    """Columns shared by every listing table."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Weak reference to the submitting account; imported listings have none
    user_id = Column(String(64), nullable=True, index=True)
    # Copied from the user at submission time, kept in sync by profile updates
    contributor_nickname = Column(String(100), nullable=True)
    contributor_first_name = Column(String(100), nullable=True)
    contributor_last_name = Column(String(100), nullable=True)
    photo_url = Column(String, nullable=True)
    view_count = Column(Integer, nullable=False, default=0)
    is_approved = Column(Boolean, nullable=False, default=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    submitted_at = Column(DateTime(timezone=True), server_default=func.now())
    approved_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)


class TutoringProvider(ListingMixin, Base):
    __tablename__ = "tutoring_providers"
    LISTING_TYPE = ListingType.tutoring

    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)  # private_tutor, business
    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    categories = Column(StringArray(), nullable=True)
    subjects = Column(StringArray(), nullable=True)
    delivery_mode = Column(StringArray(), nullable=True)


class SummerCamp(ListingMixin, Base):
    __tablename__ = "summer_camps"
    LISTING_TYPE = ListingType.camp

    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    categories = Column(StringArray(), nullable=True)
    tags = Column(StringArray(), nullable=True)
    selectivity_level = Column(Integer, nullable=True)  # 1-4
    dates = Column(Text, nullable=True)
    length = Column(String(100), nullable=True)
    cost_range = Column(String(50), nullable=True)
    application_open = Column(Date, nullable=True)
    application_deadline = Column(Date, nullable=True)
    application_available = Column(Boolean, default=True)
    minimum_age = Column(Integer, nullable=True)
    has_scholarship = Column(Boolean, default=False)
    eligibility = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    delivery_mode = Column(StringArray(), nullable=True)
    website = Column(String, nullable=True)


class Internship(ListingMixin, Base):
    __tablename__ = "internships"
    LISTING_TYPE = ListingType.internship

    company_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    is_remote = Column(Boolean, default=False)
    types = Column(StringArray(), nullable=True)
    selectivity_level = Column(Integer, nullable=True)
    compensation = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    duration = Column(StringArray(), nullable=True)
    internship_dates = Column(Text, nullable=True)
    length = Column(String(100), nullable=True)
    delivery_mode = Column(StringArray(), nullable=True)
    minimum_age = Column(Integer, nullable=True)
    application_open = Column(Date, nullable=True)
    application_deadline = Column(Date, nullable=True)
    prerequisites = Column(Text, nullable=True)
    tuition = Column(String(100), nullable=True)
    eligibility = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    has_mentorship = Column(Boolean, default=False)


class Job(ListingMixin, Base):
    __tablename__ = "jobs"
    LISTING_TYPE = ListingType.job

    company_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    is_remote = Column(Boolean, default=False)
    categories = Column(StringArray(), nullable=True)
    compensation = Column(String(50), nullable=True)
    compensation_range = Column(String(100), nullable=True)
    salary_min = Column(DECIMAL(10, 2), nullable=True)
    salary_max = Column(DECIMAL(10, 2), nullable=True)
    salary_type = Column(String(20), nullable=True)  # hourly, monthly, yearly
    job_type = Column(StringArray(), nullable=True)
    description = Column(Text, nullable=True)
    work_schedule = Column(Text, nullable=True)
    schedule = Column(StringArray(), nullable=True)
    minimum_age = Column(Integer, nullable=True)
    opening_date = Column(Date, nullable=True)
    closing_date = Column(Date, nullable=True)
    is_ongoing = Column(Boolean, default=False)
    application_deadline = Column(Date, nullable=True)
    eligibility = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    has_training = Column(Boolean, default=False)
    has_advancement = Column(Boolean, default=False)
    requires_transportation = Column(Boolean, default=False)
    requires_resume = Column(Boolean, default=False)


class Service(ListingMixin, Base):
    __tablename__ = "services"
    LISTING_TYPE = ListingType.service

    name = Column(String(255), nullable=False)
    type = Column(String(100), nullable=True)  # business type
    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    categories = Column(StringArray(), nullable=True)
    tags = Column(StringArray(), nullable=True)
    delivery_mode = Column(StringArray(), nullable=True)


class Event(ListingMixin, Base):
    __tablename__ = "events"
    LISTING_TYPE = ListingType.event

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    organizer = Column(String(255), nullable=False)
    organizer_email = Column(String(255), nullable=True)
    organizer_phone = Column(String(50), nullable=True)
    event_date = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=True)
    end_time = Column(Time, nullable=True)
    venue = Column(String(255), nullable=True)
    address = Column(Text, nullable=True)
    city = Column(String(100), nullable=True, index=True)
    state = Column(String(50), nullable=True)
    zipcode = Column(String(20), nullable=True)
    latitude = Column(DECIMAL(10, 8), nullable=True)
    longitude = Column(DECIMAL(11, 8), nullable=True)
    categories = Column(StringArray(), nullable=True)
    target_audience = Column(StringArray(), nullable=True)
    age_range = Column(String(50), nullable=True)
    cost = Column(String(50), nullable=True)
    registration_required = Column(Boolean, default=False)
    registration_link = Column(String, nullable=True)
    contact_info = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)


LISTING_MODELS = (TutoringProvider, SummerCamp, Internship, Job, Service, Event)
