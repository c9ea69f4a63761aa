"""
Hijri event dates.

Event dates are stored either as a millisecond Unix timestamp string
(current editor) or as legacy free text such as ``"12 Ramadan 1446"``.
Conversion uses the Umm al-Qura calendar.
"""

import logging
import re
from datetime import datetime, timezone

from hijridate import Gregorian, Hijri

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r"^[0-9]+\Z")

HIJRI_MONTH_NAMES = (
    "محرم",
    "صفر",
    "ربیع الاول",
    "ربیع الثانی",
    "جمادی الاولی",
    "جمادی الثانیه",
    "رجب",
    "شعبان",
    "رمضان",
    "شوال",
    "ذیقعده",
    "ذیحجه",
)


def is_timestamp_format(value):
    return bool(value) and TIMESTAMP_PATTERN.match(value) is not None


def to_hijri_date(value: str) -> Hijri:
    """Hijri date of a millisecond timestamp string, taken in UTC.

    Raises ValueError for non-timestamps and OverflowError outside the
    supported Umm al-Qura range.
    """
    if not is_timestamp_format(value):
        raise ValueError(f"Not a timestamp: {value!r}")
    moment = datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
    return Gregorian(moment.year, moment.month, moment.day).to_hijri()


def hijri_date_to_timestamp(year: int, month: int, day: int) -> str:
    """Storage form of a Hijri date: milliseconds at UTC midnight of its Gregorian day."""
    gregorian = Hijri(year, month, day).to_gregorian()
    moment = datetime(gregorian.year, gregorian.month, gregorian.day, tzinfo=timezone.utc)
    return str(int(moment.timestamp()) * 1000)


def format_hijri_for_display(value):
    """``"<day> <month> <year> AH"`` for timestamps; other text is returned unchanged."""
    if not value:
        return ""
    if not is_timestamp_format(value):
        return value
    try:
        hijri = to_hijri_date(value)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning("Cannot convert %s to a Hijri date: %s", value, e)
        return value
    return f"{hijri.day} {HIJRI_MONTH_NAMES[hijri.month - 1]} {hijri.year} AH"
