# m3ucatalog/core/categorizer.py
from typing import NamedTuple

from m3ucatalog.core.episode_detector import detect_episode
from m3ucatalog.core.models.classification import Classification, LiveStream, Movie, Series
from m3ucatalog.core.year_detector import detect_year


class CategorizedItem(NamedTuple):
    classification: Classification
    title: str


def is_live_stream(url: str) -> bool:
    """A URL whose last path segment has no file extension is a live stream."""
    last_slash = url.rfind("/")
    if last_slash == -1:
        return False
    filename = url[last_slash + 1:].split("?", 1)[0]
    return "." not in filename


def categorize_item(title: str, url: str) -> CategorizedItem:
    """
    Classify one entry and clean its title.

    1. No file extension in the URL → live stream, title untouched.
    2. Strip a year from the title (kept for the classification).
    3. SxxExx-style markers in the year-less title → series episode,
       stored under the series name.
    4. Anything else is a movie.
    """
    if is_live_stream(url):
        return CategorizedItem(LiveStream(), title)

    year = None
    year_info = detect_year(title)
    if year_info:
        title, year = year_info.cleaned_title, year_info.year

    episode = detect_episode(title)
    if episode:
        return CategorizedItem(
            Series(season=episode.season, episode=episode.episode, year=year),
            episode.series_name,
        )

    return CategorizedItem(Movie(year=year), title)
