
from fastapi import APIRouter

from opportunities.schemas import options

router = APIRouter(prefix="/options", tags=["Options"])


@router.get("")
def form_options():
    """Suggested values for the submission and filter forms."""
    return {
        "tutoringProviderTypes": options.TUTORING_PROVIDER_TYPES,
        "tutoringCategories": options.TUTORING_CATEGORIES,
        "campCategories": options.CAMP_CATEGORIES,
        "campTags": options.CAMP_TAGS,
        "selectivityLevels": options.SELECTIVITY_LEVELS,
        "internshipTypes": options.INTERNSHIP_TYPES,
        "internshipCompensation": options.INTERNSHIP_COMPENSATION,
        "internshipDurations": options.INTERNSHIP_DURATIONS,
        "deliveryModes": options.DELIVERY_MODES,
        "jobCategories": options.JOB_CATEGORIES,
        "jobCompensation": options.JOB_COMPENSATION,
        "jobTypes": options.JOB_TYPES,
        "salaryTypes": options.SALARY_TYPES,
    }
