# m3ucatalog/core/models/regex.py
import re

# First 4-digit year 1900–2099, anywhere in the title. ASCII digits only.
YEAR_RE = re.compile(r"(?:19|20)[0-9]{2}")

# Fallback episode patterns, tried in order; first match wins.
# Groups are (season, episode) except the last, which only carries an episode.
EPISODE_PATTERNS = (
    # S01E01, S1E1, S01 E01, s 1 e 1
    re.compile(r"s\s*([0-9]{1,2})\s*e\s*([0-9]{1,2})", re.IGNORECASE),
    # 1x01, 1X1
    re.compile(r"([0-9]{1,2})x([0-9]{1,2})", re.IGNORECASE),
    # Season 1 Episode 1
    re.compile(r"season\s*([0-9]+)\s*episode\s*([0-9]+)", re.IGNORECASE),
)

# Episode 5, Ep 5, Ep.5 (season implied); also matches inside words ("Rep5")
EPISODE_ONLY_RE = re.compile(r"(?:episode|ep)\.?\s*([0-9]+)", re.IGNORECASE)
