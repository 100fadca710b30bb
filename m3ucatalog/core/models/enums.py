# m3ucatalog/core/models/enums.py
from enum import Enum


class MediaType(Enum):
    MOVIE       = "Movie"
    SERIES      = "Series"
    LIVE_STREAM = "LiveStream"
