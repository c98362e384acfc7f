"""Billing period alignment and reporting period bounds."""

import calendar
from datetime import datetime, time, timedelta

from src.domain.errors import ValidationError
from src.domain.models import PeriodGranularity, RentalKind, RentalRequest
from src.domain.services.validation import require_instant

_END_OF_DAY = time(23, 59, 59, 999999)


def next_monday(instant: datetime) -> datetime:
    """Return the first Monday strictly after ``instant``, same time of day."""
    return instant + timedelta(days=7 - instant.weekday())


def align_weekly_end(start: datetime, week_count: int) -> datetime:
    """Return the billing end of a weekly rental.

    Rentals starting on a Monday run ``week_count`` full weeks. Rentals
    starting on any other day are billed from the following Monday, so the
    end is that Monday plus ``week_count - 1`` weeks.

    Args:
        start: Pickup instant.
        week_count: Number of paid weeks, at least 1.

    Returns:
        datetime: Billing end instant.

    Raises:
        ValidationError: If ``week_count`` is not an integer >= 1.
    """
    start = require_instant("start", start)
    _require_week_count(week_count)
    if start.weekday() == calendar.MONDAY:
        return start + timedelta(weeks=week_count)
    return next_monday(start) + timedelta(weeks=week_count - 1)


def resolve_end(request: RentalRequest) -> datetime:
    """Return the end instant for a rental request.

    Weekly requests are aligned with :func:`align_weekly_end`; daily and
    claim requests keep their explicit end.

    Raises:
        ValidationError: If the field required by the rental kind is missing.
    """
    kind = RentalKind(request.kind)
    if kind == RentalKind.WEEKLY:
        if request.week_count is None:
            raise ValidationError("week_count is required for weekly rentals")
        return align_weekly_end(request.start, request.week_count)
    if request.end is None:
        raise ValidationError(f"end is required for {kind.value} rentals")
    return require_instant("end", request.end)


def month_bounds(reference: datetime) -> tuple[datetime, datetime]:
    """Return the first and last instant of the reference month."""
    reference = require_instant("reference", reference)
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    start = datetime(reference.year, reference.month, 1)
    end = datetime.combine(
        start.date().replace(day=last_day),
        _END_OF_DAY,
    )
    return start, end


def week_bounds(reference: datetime) -> tuple[datetime, datetime]:
    """Return Monday 00:00 and Sunday end of day around the reference."""
    reference = require_instant("reference", reference)
    monday = reference.date() - timedelta(days=reference.weekday())
    start = datetime.combine(monday, time.min)
    end = datetime.combine(monday + timedelta(days=6), _END_OF_DAY)
    return start, end


def year_bounds(reference: datetime) -> tuple[datetime, datetime]:
    """Return the first and last instant of the reference year."""
    reference = require_instant("reference", reference)
    start = datetime(reference.year, 1, 1)
    end = datetime.combine(start.date().replace(month=12, day=31), _END_OF_DAY)
    return start, end


def period_bounds(
    reference: datetime,
    granularity: PeriodGranularity = PeriodGranularity.MONTH,
) -> tuple[datetime, datetime]:
    """Return inclusive bounds of the period containing ``reference``."""
    granularity = PeriodGranularity(granularity)
    if granularity == PeriodGranularity.WEEK:
        return week_bounds(reference)
    if granularity == PeriodGranularity.YEAR:
        return year_bounds(reference)
    return month_bounds(reference)


def _require_week_count(week_count) -> None:
    if isinstance(week_count, bool) or not isinstance(week_count, int):
        raise ValidationError(
            f"week_count must be an integer, got {week_count!r}"
        )
    if week_count < 1:
        raise ValidationError(f"week_count must be at least 1: {week_count}")


__all__ = [
    "next_monday",
    "align_weekly_end",
    "resolve_end",
    "month_bounds",
    "week_bounds",
    "year_bounds",
    "period_bounds",
]
