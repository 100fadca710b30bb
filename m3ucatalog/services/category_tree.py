# m3ucatalog/services/category_tree.py
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from m3ucatalog.core.config import get_settings
from m3ucatalog.core.logger import setup_logger
from m3ucatalog.core.models.enums import MediaType
from m3ucatalog.core.models.item import ItemPreferences, PlaylistItem

logger = setup_logger(__name__)
tag = "[TREE]"

NO_PREFERENCES = ItemPreferences()


@dataclass(frozen=True)
class CategoryNode:
    name:  str
    items: Tuple[PlaylistItem, ...]

    @property
    def item_count(self) -> int:
        return len(self.items)

    def get_items(
        self,
        preferences: Optional[Mapping[str, ItemPreferences]] = None,
    ) -> List[PlaylistItem]:
        """Visible items, favorites first, then by title (case-insensitive)."""
        prefs = preferences or {}

        def pref(item: PlaylistItem) -> ItemPreferences:
            return prefs.get(item.url, NO_PREFERENCES)

        visible = [item for item in self.items if not pref(item).hidden]
        return sorted(visible, key=lambda item: (not pref(item).favorite, item.title.lower()))


@dataclass(frozen=True)
class CatalogStats:
    total_count:       int
    group_count:       int
    movie_count:       int
    series_count:      int
    show_count:        int
    season_count:      int
    live_stream_count: int


def _group_names(groups: Iterable[str]) -> Set[str]:
    """A bare string is one group name, not a sequence of characters."""
    if isinstance(groups, str):
        return {groups}
    return set(groups)


def _sorted_nodes(
    nodes: Iterable[CategoryNode],
    sticky_groups: Iterable[str] = (),
    hidden_groups: Iterable[str] = (),
) -> List[CategoryNode]:
    sticky = _group_names(sticky_groups)
    hidden = _group_names(hidden_groups)
    visible = [node for node in nodes if node.name not in hidden]
    return sorted(visible, key=lambda node: (node.name not in sticky, node.name.lower()))


def _item_total(nodes: Iterable[CategoryNode]) -> int:
    return sum(node.item_count for node in nodes)


@dataclass(frozen=True)
class CategoryTree:
    movies:       Tuple[CategoryNode, ...] = ()
    series:       Tuple[CategoryNode, ...] = ()
    live_streams: Tuple[CategoryNode, ...] = ()

    # ─── Construction ─────────────────────────────────────────────────────────
    @classmethod
    def build(
        cls,
        items: Iterable[PlaylistItem],
        uncategorized_label: Optional[str] = None,
    ) -> "CategoryTree":
        """Bucket items by (kind, group); empty groups go under the placeholder."""
        label = uncategorized_label or get_settings().uncategorized_label
        buckets: Dict[MediaType, Dict[str, List[PlaylistItem]]] = {
            MediaType.MOVIE:       {},
            MediaType.SERIES:      {},
            MediaType.LIVE_STREAM: {},
        }

        for item in items:
            group = item.group or label
            buckets[item.kind].setdefault(group, []).append(item)

        def nodes(kind: MediaType) -> Tuple[CategoryNode, ...]:
            return tuple(
                CategoryNode(name=name, items=tuple(grouped))
                for name, grouped in buckets[kind].items()
            )

        tree = cls(
            movies       = nodes(MediaType.MOVIE),
            series       = nodes(MediaType.SERIES),
            live_streams = nodes(MediaType.LIVE_STREAM),
        )
        logger.debug(
            "%s Built tree: %d movie, %d series, %d live groups",
            tag, len(tree.movies), len(tree.series), len(tree.live_streams),
        )
        return tree

    def _all_nodes(self) -> Iterable[CategoryNode]:
        yield from self.movies
        yield from self.series
        yield from self.live_streams

    # ─── Views ────────────────────────────────────────────────────────────────
    def get_movies(self, sticky_groups: Iterable[str] = (), hidden_groups: Iterable[str] = ()) -> List[CategoryNode]:
        return _sorted_nodes(self.movies, sticky_groups, hidden_groups)

    def get_series(self, sticky_groups: Iterable[str] = (), hidden_groups: Iterable[str] = ()) -> List[CategoryNode]:
        return _sorted_nodes(self.series, sticky_groups, hidden_groups)

    def get_live_streams(self, sticky_groups: Iterable[str] = (), hidden_groups: Iterable[str] = ()) -> List[CategoryNode]:
        return _sorted_nodes(self.live_streams, sticky_groups, hidden_groups)

    def get_all_categories(
        self,
        sticky_groups: Iterable[str] = (),
        hidden_groups: Iterable[str] = (),
    ) -> Dict[str, List[CategoryNode]]:
        sticky = _group_names(sticky_groups)
        hidden = _group_names(hidden_groups)
        return {
            "movies":       self.get_movies(sticky, hidden),
            "series":       self.get_series(sticky, hidden),
            "live_streams": self.get_live_streams(sticky, hidden),
        }

    # ─── Lookup & search ──────────────────────────────────────────────────────
    def find_category(self, name: str) -> Optional[CategoryNode]:
        return next((node for node in self._all_nodes() if node.name == name), None)

    def search(self, query: str) -> List[PlaylistItem]:
        needle = query.lower()
        return [
            item
            for node in self._all_nodes()
            for item in node.items
            if needle in item.title.lower()
        ]

    # ─── Series & totals ──────────────────────────────────────────────────────
    def shows(self, group: str) -> Dict[str, Dict[int, List[PlaylistItem]]]:
        """
        Episodes of one series group as ``{show: {season: [episodes]}}``.

        Shows and seasons keep first-seen order; episodes are ordered by number.
        Unknown group names yield an empty mapping.
        """
        node = next((n for n in self.series if n.name == group), None)
        if node is None:
            return {}

        out: Dict[str, Dict[int, List[PlaylistItem]]] = {}
        for item in node.items:
            season = max(1, item.season or 1)
            out.setdefault(item.title, {}).setdefault(season, []).append(item)

        for seasons in out.values():
            for episodes in seasons.values():
                episodes.sort(key=lambda item: item.episode or 0)
        return out

    def stats(self) -> CatalogStats:
        episodes = [item for node in self.series for item in node.items]
        return CatalogStats(
            total_count       = _item_total(self._all_nodes()),
            group_count       = len({node.name for node in self._all_nodes()}),
            movie_count       = _item_total(self.movies),
            series_count      = len(episodes),
            show_count        = len({item.title for item in episodes}),
            season_count      = len({(item.title, item.season) for item in episodes}),
            live_stream_count = _item_total(self.live_streams),
        )
