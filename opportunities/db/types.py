
from sqlalchemy import JSON, Text, func, select, literal
from sqlalchemy.dialects.postgresql import ARRAY


def StringArray():
    """text[] on PostgreSQL, a JSON list everywhere else (SQLite test runs)."""
    return ARRAY(Text).with_variant(JSON(none_as_null=True), "sqlite")


def array_overlap(column, values, dialect_name: str):
    """
    Match rows whose array column shares at least one element with `values`.

    PostgreSQL gets the native `&&` operator; SQLite walks the stored JSON
    list with json_each.
    """
    if dialect_name == "postgresql":
        return column.overlap(list(values))

    elements = func.json_each(column).table_valued("value")
    return (
        select(literal(1))
        .select_from(elements)
        .where(elements.c.value.in_(list(values)))
        .exists()
    )
