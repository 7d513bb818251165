
from opportunities.models.user import User
from opportunities.models.listing import (
    ListingType, TutoringProvider, SummerCamp, Internship, Job, Service, Event, LISTING_MODELS,
)
from opportunities.models.social import Review, ThumbsUp, Bookmark, Report, ViewTracking
