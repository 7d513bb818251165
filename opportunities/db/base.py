
from opportunities.db.session import Base
from opportunities.models.user import User
from opportunities.models.listing import TutoringProvider, SummerCamp, Internship, Job, Service, Event
from opportunities.models.social import Review, ThumbsUp, Bookmark, Report, ViewTracking
