
from typing import List

from opportunities.schemas.common import CamelModel
from opportunities.schemas.listing import (
    TutoringProvider, SummerCamp, Internship, Job, Service, Event,
)


# Admin fan-out views: one bucket per listing type
class ListingsByType(CamelModel):
    tutoring_providers: List[TutoringProvider] = []
    summer_camps: List[SummerCamp] = []
    internships: List[Internship] = []
    jobs: List[Job] = []
    services: List[Service] = []
    events: List[Event] = []
