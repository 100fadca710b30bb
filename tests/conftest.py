import pytest

from m3ucatalog.core.models.classification import LiveStream, Movie, Series
from m3ucatalog.core.models.item import PlaylistItem

SAMPLE_PLAYLIST = """#EXTM3U x-tvg-url="http://epg.example.com/guide.xml"
#EXTINF:-1 tvg-logo="http://img.example.com/diehard.png" group-title="Action",Die Hard (1988)
http://vod.example.com/movies/die-hard.mkv
#EXTINF:-1 group-title="Action",Speed [1994]
http://vod.example.com/movies/speed.mp4
#EXTINF:-1 group-title="Drama",The Office S09E23
http://vod.example.com/series/office-s09e23.mkv
#EXTINF:-1 group-title="Drama",The Office S09E22
http://vod.example.com/series/office-s09e22.mkv
#EXTINF:-1 tvg-id="bbc.uk" group-title="News",BBC News
http://live.example.com/bbc
#EXTINF:-1,No Group Film
http://vod.example.com/movies/nogroup.avi
"""


@pytest.fixture
def sample_playlist() -> str:
    return SAMPLE_PLAYLIST


@pytest.fixture
def make_item():
    def _make(title, group="", kind="movie", url=None, **meta):
        classification = {
            "movie":  lambda: Movie(year=meta.get("year")),
            "series": lambda: Series(
                season=meta.get("season", 1),
                episode=meta.get("episode", 1),
                year=meta.get("year"),
            ),
            "live":   LiveStream,
        }[kind]()
        return PlaylistItem(
            title=title,
            url=url or f"http://example.com/{title.replace(' ', '_')}" + ("" if kind == "live" else ".mkv"),
            group=group,
            logo=None,
            classification=classification,
        )
    return _make
