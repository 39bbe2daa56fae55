"""
Reducers that turn already-fetched, user-scoped rows into report numbers.

Every function here is pure: rows go in, totals or chart series come out.
Rows may be ORM objects or plain mappings.
"""
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

GRADES = ("A", "B", "C")


def _value(row: Any, field: str):
    if isinstance(row, dict):
        return row.get(field)
    return getattr(row, field, None)


def _to_date(value) -> date:
    """Calendar date of a date, datetime or ISO string; time of day is dropped."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.split("T")[0][:10])
    raise ValueError(f"Cannot read a date from {value!r}")


def sum_field(rows: Iterable[Any], field: str):
    """Arithmetic sum of `field` over rows. Missing values count as 0; no rows gives 0."""
    total = 0
    for row in rows:
        value = _value(row, field)
        if value is not None:
            total += value
    return total


def bucket_by_date(rows: Iterable[Any], date_field: str = "date", value_field: str = "count") -> List[Dict[str, Any]]:
    """
    Group rows by calendar date and sum `value_field` per date.

    Returns one bucket per date, ordered by date ascending:
        [{"date": date(2024, 3, 1), "count": 1000}, ...]
    """
    buckets: Dict[date, Any] = {}
    for row in rows:
        day = _to_date(_value(row, date_field))
        value = _value(row, value_field) or 0
        buckets[day] = buckets.get(day, 0) + value
    return [{"date": day, "count": buckets[day]} for day in sorted(buckets)]


def compute_profit(total_sales, total_feed_cost, total_health_cost):
    return total_sales - total_feed_cost - total_health_cost


def grade_distribution(rows: Iterable[Any], grade_field: str = "quality", value_field: str = "count") -> List[Dict[str, Any]]:
    """Eggs per quality grade, always listing A, B and C in that order."""
    counts = {grade: 0 for grade in GRADES}
    for row in rows:
        grade = _value(row, grade_field)
        grade = getattr(grade, "value", grade)
        if grade in counts:
            counts[grade] += _value(row, value_field) or 0
    return [{"grade": grade, "count": counts[grade]} for grade in GRADES]