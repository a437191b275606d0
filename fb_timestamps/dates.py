"""Date grammars that normalize export date lines into EXIF timestamps.

Each grammar is a pure function taking the trimmed text of a timestamp block
and returning the canonical ``YYYY:MM:DD HH:MM:SS`` string, or ``None`` when
the text does not fit that grammar. ``parse_timestamp`` tries them in order.
"""

from __future__ import annotations

import datetime as dt
import re
from functools import partial
from typing import Callable, Optional, Sequence, Tuple

DateGrammar = Callable[[str], Optional[str]]

DUTCH_MONTHS = {
    "januari": 1,
    "februari": 2,
    "maart": 3,
    "april": 4,
    "mei": 5,
    "juni": 6,
    "juli": 7,
    "augustus": 8,
    "september": 9,
    "oktober": 10,
    "november": 11,
    "december": 12,
}

# "18 mei 2012 16:09"
DUTCH_PATTERN = re.compile(
    r"(\d{1,2})\s+([^\W\d_]+)\s+(\d{4})\s+(\d{1,2}):(\d{1,2})"
)

ENGLISH_TEMPLATES = (
    "%B %d, %Y at %I:%M%p",  # May 18, 2012 at 4:09PM
    "%B %d, %Y %I:%M%p",  # May 18, 2012 4:09PM
    "%d %B %Y %H:%M",  # 18 May 2012 16:09
    "%Y-%m-%d %H:%M:%S",  # 2012-05-18 16:09:00
)


def format_canonical(value: dt.datetime) -> str:
    """Render a datetime as a fixed-width EXIF timestamp."""
    return (
        f"{value.year:04d}:{value.month:02d}:{value.day:02d} "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )


def parse_dutch_timestamp(text: str) -> Optional[str]:
    """Parse ``<day> <Dutch month> <year> <hour>:<minute>``; seconds are zero."""
    match = DUTCH_PATTERN.match(text)
    if not match:
        return None
    day, month_name, year, hour, minute = match.groups()
    month = DUTCH_MONTHS.get(month_name.lower())
    if month is None:
        return None
    try:
        value = dt.datetime(int(year), month, int(day), int(hour), int(minute))
    except ValueError:
        return None
    return format_canonical(value)


def parse_with_template(template: str, text: str) -> Optional[str]:
    """Parse text that fully matches a ``strptime`` template."""
    try:
        value = dt.datetime.strptime(text, template)
    except ValueError:
        return None
    return format_canonical(value)


DATE_GRAMMARS: Tuple[DateGrammar, ...] = (
    parse_dutch_timestamp,
    *(partial(parse_with_template, template) for template in ENGLISH_TEMPLATES),
)


def parse_timestamp(
    text: str,
    grammars: Sequence[DateGrammar] = DATE_GRAMMARS,
) -> Optional[str]:
    """Return the first canonical timestamp any grammar produces for ``text``."""
    text = text.strip()
    if not text:
        return None
    for grammar in grammars:
        timestamp = grammar(text)
        if timestamp is not None:
            return timestamp
    return None
