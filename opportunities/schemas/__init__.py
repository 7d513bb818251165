
from opportunities.schemas.common import Page, MessageResponse, ErrorResponse, FieldError
from opportunities.schemas.user import User, UserCreate, AdminCreate, ProfileUpdate, Token
from opportunities.schemas.listing import (
    TutoringProvider, TutoringProviderCreate, TutoringProviderUpdate,
    SummerCamp, SummerCampCreate, SummerCampUpdate,
    Internship, InternshipCreate, InternshipUpdate,
    Job, JobCreate, JobUpdate,
    Service, ServiceCreate, ServiceUpdate,
    Event, EventCreate, EventUpdate,
)
from opportunities.schemas.social import (
    ListingRef, Review, ReviewCreate, ReviewUpdate,
    ThumbsUpToggle, ThumbsUpCount, ThumbsUpStatus,
    Bookmark, BookmarkToggle, BookmarkPage,
    Report, ReportCreate, ViewTrackResult,
)
from opportunities.schemas.admin import ListingsByType
