from datetime import datetime
from typing import Iterable, Optional

import pytz
from dateparser import search

from kairos.config.settings import ReminderConfig


def parse_date(
    text: str,
    *,
    languages: Optional[Iterable[str]] = None,
    timezone: Optional[str] = None,
    relative_base: Optional[datetime] = None,
) -> Optional[datetime]:
    """Find a natural language date and/or time in ``text``.

    The date may be surrounded by other words ("tomorrow at 5pm please").
    Relative and incomplete expressions ("in 2 hours", "next friday 18:00") are
    resolved towards the future in ``timezone``. The first date found is
    returned as an aware UTC datetime, or ``None`` when nothing was recognized.
    """
    text = text.strip()
    if not text:
        return None

    settings = {
        "PREFER_DATES_FROM": "future",
        "RETURN_AS_TIMEZONE_AWARE": True,
        "TIMEZONE": timezone or ReminderConfig.timezone,
        "TO_TIMEZONE": "UTC",
    }
    if relative_base is not None:
        settings["RELATIVE_BASE"] = relative_base

    dates = search.search_dates(
        text,
        languages=list(languages or ReminderConfig.languages),
        settings=settings,
    )
    if not dates:
        return None

    try:
        return dates[0][1].astimezone(pytz.utc)
    except OSError:
        return None
