
from datetime import date
from typing import Optional, List, Union, Mapping, get_args, get_origin

from pydantic.alias_generators import to_camel


def parse_int(value) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def parse_bool(value) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return None


def parse_csv(value) -> List[str]:
    return [item.strip() for item in str(value).split(",") if item.strip()]


def parse_date(value) -> Optional[date]:
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def _unwrap_optional(annotation):
    if get_origin(annotation) is Union:
        args = [a for a in get_args(annotation) if a is not type(None)]
        return args[0] if args else annotation
    return annotation


def _raw_param(params: Mapping, key: str) -> Optional[str]:
    # Repeated keys (?categories=a&categories=b) are folded into one comma list
    if hasattr(params, "getlist"):
        values = [v for v in params.getlist(key) if v != ""]
        return ",".join(values) if values else None
    value = params.get(key)
    return value if value not in (None, "") else None


def parse_filters(filter_cls, params: Mapping):
    """
    Build a typed filter object from raw query-string values.

    Keys are read in camelCase (the wire format) or snake_case. Lists arrive
    comma-joined. Anything that fails to parse is treated as absent rather
    than rejected, so a malformed `limit` or `minimumAge` never fails the
    request.
    """
    values = {}
    for name, info in filter_cls.model_fields.items():
        raw = _raw_param(params, to_camel(name))
        if raw is None and to_camel(name) != name:
            raw = _raw_param(params, name)
        if raw is None:
            continue

        annotation = _unwrap_optional(info.annotation)
        if get_origin(annotation) in (list, List):
            (item_type,) = get_args(annotation)
            items = parse_csv(raw)
            if item_type is int:
                items = [i for i in (parse_int(x) for x in items) if i is not None]
            value = items or None
        elif annotation is bool:
            value = parse_bool(raw)
        elif annotation is int:
            value = parse_int(raw)
        elif annotation is date:
            value = parse_date(raw)
        else:
            value = raw.strip() or None

        if value is not None:
            values[name] = value

    if str(values.get("sort_order", "")).lower() not in ("asc", "desc"):
        values.pop("sort_order", None)
    else:
        values["sort_order"] = values["sort_order"].lower()

    return filter_cls(**values)
