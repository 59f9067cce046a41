"""
Local calendar-day arithmetic.

Feedings are stored as UTC instants. Everything a user sees ("fed twice
today", "Monday's feedings") is expressed in their local calendar, so the
helpers here translate between the two. A day is the half-open interval
[local midnight, next local midnight); across a DST change that interval is
23 or 25 hours long.
"""

import os
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple

from dateutil import tz

from app.exceptions import ServiceValidationError


def resolve_timezone(tz_name: Optional[str]) -> tzinfo:
    """Look up an IANA timezone name, raising ServiceValidationError if unknown"""
    if tz_name is None or not tz_name.strip():
        raise ServiceValidationError("Timezone is required", code="INVALID_TIMEZONE")
    name = tz_name.strip()
    if name.upper() == "UTC":
        return timezone.utc
    # gettz opens absolute paths as zone files; only zone names are accepted
    if os.path.isabs(name) or ".." in name:
        zone = None
    else:
        try:
            zone = tz.gettz(name)
        except (ValueError, OSError):
            zone = None
    if zone is None:
        raise ServiceValidationError(
            f"Unknown timezone: {name}",
            details={"tz": name},
            code="INVALID_TIMEZONE",
        )
    return zone


def to_utc(value: datetime, zone: tzinfo) -> datetime:
    """Normalize a timestamp to a UTC instant.

    A naive value is wall-clock time in ``zone``. Wall-clock times that are
    ambiguous or skipped by a DST change resolve to the first (fold=0) offset.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=zone)
    return value.astimezone(timezone.utc)


def local_date(instant: datetime, zone: tzinfo) -> date:
    """Calendar date of an instant as seen in ``zone``"""
    return to_local(instant, zone).date()


def to_local(instant: datetime, zone: tzinfo) -> datetime:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(zone)


def start_of_day(day: date, zone: tzinfo) -> datetime:
    """Local midnight that opens ``day``, as a UTC instant.

    Where a DST change skips midnight, the day opens at the first wall-clock
    time that exists (01:00 in America/Santiago on its spring-forward day).
    """
    midnight = tz.resolve_imaginary(datetime.combine(day, time.min).replace(tzinfo=zone))
    return midnight.astimezone(timezone.utc)


def day_window(now: datetime, zone: tzinfo) -> Tuple[datetime, datetime]:
    """Half-open UTC interval covering the local calendar day that contains ``now``.

    A naive ``now`` is read as wall-clock time in ``zone``.
    """
    today = local_date(to_utc(now, zone), zone)
    return start_of_day(today, zone), start_of_day(today + timedelta(days=1), zone)
