# m3ucatalog/core/year_detector.py
from typing import NamedTuple, Optional

from m3ucatalog.core.models.regex import YEAR_RE

OPENERS = "(["
CLOSERS = ")]"


class YearInfo(NamedTuple):
    year: int
    cleaned_title: str


def detect_year(title: str) -> Optional[YearInfo]:
    """
    Pull the first 1900–2099 year out of a title.

    A single ``(``/``[`` directly before the year and ``)``/``]`` directly
    after it are removed along with it; later years are left alone.

    - "Movie Name (2022)" -> YearInfo(2022, "Movie Name")
    - "Show 2023 Episode" -> YearInfo(2023, "Show Episode")
    - "Old Film [1999]"   -> YearInfo(1999, "Old Film")
    """
    m = YEAR_RE.search(title)
    if not m:
        return None

    start, end = m.span()
    if start > 0 and title[start - 1] in OPENERS:
        start -= 1
    if end < len(title) and title[end] in CLOSERS:
        end += 1

    cleaned = title[:start] + title[end:]
    return YearInfo(int(m.group()), " ".join(cleaned.split()))
