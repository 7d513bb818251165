
from decimal import Decimal, InvalidOperation

from pydantic.alias_generators import to_snake

from opportunities.utils.query import parse_int, parse_csv, parse_date

# Admin edit forms post everything as strings; these tables describe how each
# field is turned back into its column type before the patch is validated.

PROTECTED_FIELDS = {"id", "submitted_at", "approved_at", "created_at", "updated_at"}

DATE_FIELDS = {
    "application_open",
    "application_deadline",
    "opening_date",
    "closing_date",
    "event_date",
}

ARRAY_FIELDS = {
    "categories",
    "subjects",
    "types",
    "tags",
    "duration",
    "job_type",
    "schedule",
    "delivery_mode",
    "target_audience",
}

INT_FIELDS = {"selectivity_level", "minimum_age"}

DECIMAL_FIELDS = {"salary_min", "salary_max", "latitude", "longitude"}

FLAG_FIELDS = {
    "is_remote",
    "has_scholarship",
    "application_available",
    "has_mentorship",
    "has_training",
    "has_advancement",
    "requires_transportation",
    "requires_resume",
    "is_ongoing",
    "registration_required",
    "is_approved",
    "is_active",
}


def _to_decimal(value):
    try:
        return Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None


def coerce_admin_patch(payload: dict) -> dict:
    """
    Normalize a raw admin edit payload into a snake_case patch.

    Protected and empty-string fields are dropped, dates that do not parse
    are dropped, and numbers that do not parse become null.
    """
    patch = {}
    for key, value in payload.items():
        field = to_snake(key)
        if field in PROTECTED_FIELDS:
            continue
        if isinstance(value, str) and value == "":
            continue

        if field in DATE_FIELDS:
            if not isinstance(value, str) or not value.strip():
                continue
            parsed = parse_date(value)
            if parsed is None:
                continue
            value = parsed
        elif field in ARRAY_FIELDS:
            if isinstance(value, str):
                value = parse_csv(value)
        elif field in INT_FIELDS:
            if value is not None and not isinstance(value, bool):
                value = parse_int(value)
        elif field in DECIMAL_FIELDS:
            if value is not None:
                value = _to_decimal(value)
        elif field in FLAG_FIELDS:
            value = value is True or value == "true"

        patch[field] = value
    return patch
