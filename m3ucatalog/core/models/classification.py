# m3ucatalog/core/models/classification.py
from dataclasses import dataclass
from typing import Optional, Union

from m3ucatalog.core.models.enums import MediaType


@dataclass(frozen=True)
class LiveStream:
    """Stream URL without a file extension; carries no metadata."""

    @property
    def kind(self) -> MediaType:
        return MediaType.LIVE_STREAM


@dataclass(frozen=True)
class Movie:
    year: Optional[int] = None

    @property
    def kind(self) -> MediaType:
        return MediaType.MOVIE


@dataclass(frozen=True)
class Series:
    season:  int
    episode: int
    year:    Optional[int] = None

    @property
    def kind(self) -> MediaType:
        return MediaType.SERIES


Classification = Union[LiveStream, Movie, Series]
