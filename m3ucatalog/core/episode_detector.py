# m3ucatalog/core/episode_detector.py
"""
Season/episode detection for playlist titles.

Two independent strategies are composed by ``detect_episode``:

* ``scan_episode`` walks the title once looking for an ``S<n>`` marker
  followed somewhere later by ``E<n>``. It handles the common compact
  ``S01E05`` tags, including ones separated by words (``S01 Part E05``).
* ``match_episode_patterns`` is the fallback: an ordered table of regexes
  covering spaced tags, ``1x05``, ``Season 1 Episode 5`` and bare
  ``Episode 5`` / ``Ep.5`` markers.
"""
import string
from typing import NamedTuple, Optional, Tuple

from m3ucatalog.core.models.regex import EPISODE_ONLY_RE, EPISODE_PATTERNS

SEASON_MARKERS  = "Ss"
EPISODE_MARKERS = "Ee"


class Episode(NamedTuple):
    series_name: str
    season: int
    episode: int


def _read_number(title: str, pos: int) -> Optional[Tuple[int, int]]:
    """Two digits at ``pos`` if present, else one; returns (value, width)."""
    first = title[pos:pos + 1]
    if not first or first not in string.digits:
        return None
    second = title[pos + 1:pos + 2]
    if second and second in string.digits:
        return int(first + second), 2
    return int(first), 1


def _series_name(prefix: str, title: str) -> str:
    name = prefix.strip()
    return name if name else title


# ─── Strategy A: forward scan ────────────────────────────────────────────────
def scan_episode(title: str) -> Optional[Episode]:
    season: Optional[int] = None
    boundary = 0
    i = 0

    while i < len(title):
        ch = title[i]

        if season is None and ch in SEASON_MARKERS:
            number = _read_number(title, i + 1)
            if number is not None:
                season, width = number
                # end of the last non-blank character before the marker
                boundary = len(title[:i].rstrip())
                i += 1 + width
                continue

        elif season is not None and ch in EPISODE_MARKERS:
            number = _read_number(title, i + 1)
            if number is not None:
                episode, _ = number
                return Episode(_series_name(title[:boundary], title), season, episode)

        i += 1

    return None


# ─── Strategy B: ordered regex fallback ──────────────────────────────────────
def match_episode_patterns(title: str) -> Optional[Episode]:
    for pattern in EPISODE_PATTERNS:
        m = pattern.search(title)
        if m:
            return Episode(
                _series_name(title[:m.start()], title),
                int(m.group(1)),
                int(m.group(2)),
            )

    m = EPISODE_ONLY_RE.search(title)
    if m:
        return Episode(_series_name(title[:m.start()], title), 1, int(m.group(1)))

    return None


def detect_episode(title: str) -> Optional[Episode]:
    """Forward scan first; regex table only when the scan finds nothing."""
    return scan_episode(title) or match_episode_patterns(title)
