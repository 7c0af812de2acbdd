"""Local wall-clock time for notification and device token timestamps.

Rows are stored as naive datetimes in the service timezone (WIB unless
``APP_TIMEZONE`` says otherwise) and become aware again when read.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from functools import lru_cache
from typing import Final, Mapping

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE: Final[str] = "Asia/Jakarta"

# Indonesian abbreviations people actually put in .env files.
ZONE_ALIASES: Final[Mapping[str, str]] = {
    "WIB": "Asia/Jakarta",
    "WITA": "Asia/Makassar",
    "WIT": "Asia/Jayapura",
}


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone configured through ``APP_TIMEZONE``."""

    return resolve_timezone(get_settings().app_timezone)


def resolve_timezone(name: str | None) -> tzinfo:
    """Turn an IANA name, a WIB/WITA/WIT alias or a ``UTC+07:00`` offset into a tzinfo.

    Unknown values fall back to ``Asia/Jakarta`` with a warning.
    """

    candidate = (name or "").strip()
    if not candidate:
        return ZoneInfo(DEFAULT_TIMEZONE)

    candidate = ZONE_ALIASES.get(candidate.upper(), candidate)
    try:
        return ZoneInfo(candidate)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    offset = candidate.upper()
    for prefix in ("UTC", "GMT"):
        if offset.startswith(prefix):
            offset = offset[len(prefix):]
            break
    try:
        return datetime.strptime(offset, "%z").tzinfo
    except ValueError:
        logger.warning("Unknown timezone %r, using %s", name, DEFAULT_TIMEZONE)
        return ZoneInfo(DEFAULT_TIMEZONE)


def now_local() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_for_storage() -> datetime:
    """Current local time without ``tzinfo``, as written to DateTime columns."""

    return now_local().replace(tzinfo=None)


def to_local(value: datetime | None) -> datetime | None:
    """Attach or convert ``value`` to the service timezone.

    Naive values come from the database and are already local time.
    """

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())
