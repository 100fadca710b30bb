# m3ucatalog/api/schemas.py

from dataclasses import asdict

from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Optional

from m3ucatalog.core.models.item import ItemPreferences, PlaylistItem
from m3ucatalog.services.category_tree import CatalogStats, CategoryNode

# --- Requests ----------------------------------------------------------------

class PlaylistRequest(BaseModel):
    content: str

class TreeRequest(PlaylistRequest):
    sticky_groups: List[str] = Field(default_factory=list)
    hidden_groups: List[str] = Field(default_factory=list)

class ItemPrefs(BaseModel):
    favorite: bool = False
    hidden:   bool = False

    def to_preferences(self) -> ItemPreferences:
        return ItemPreferences(favorite=self.favorite, hidden=self.hidden)

class CategoryRequest(PlaylistRequest):
    name: str
    preferences: Dict[str, ItemPrefs] = Field(default_factory=dict)

class SearchRequest(PlaylistRequest):
    query: str

# --- Responses ---------------------------------------------------------------

class ItemOut(BaseModel):
    title:    str
    url:      str
    group:    str
    logo:     Optional[str] = None
    category: Literal["Movie", "Series", "LiveStream"]
    year:     Optional[int] = None
    season:   Optional[int] = None
    episode:  Optional[int] = None

    @classmethod
    def from_item(cls, item: PlaylistItem) -> "ItemOut":
        return cls(**item.to_dict())

class NodeOut(BaseModel):
    name:       str
    item_count: int
    items:      List[ItemOut]

    @classmethod
    def from_node(cls, node: CategoryNode, items: Optional[List[PlaylistItem]] = None) -> "NodeOut":
        items = list(node.items) if items is None else items
        return cls(
            name=node.name,
            item_count=node.item_count,
            items=[ItemOut.from_item(i) for i in items],
        )

class TreeOut(BaseModel):
    movies:       List[NodeOut]
    series:       List[NodeOut]
    live_streams: List[NodeOut]

class StatsOut(BaseModel):
    total_count:       int
    group_count:       int
    movie_count:       int
    series_count:      int
    show_count:        int
    season_count:      int
    live_stream_count: int

    @classmethod
    def from_stats(cls, stats: CatalogStats) -> "StatsOut":
        return cls(**asdict(stats))

class VersionResponse(BaseModel):
    version: str
