# m3ucatalog/api/routers/catalog.py
from typing import List

from fastapi import APIRouter, HTTPException

from m3ucatalog.api.schemas import (
    CategoryRequest,
    ItemOut,
    NodeOut,
    PlaylistRequest,
    SearchRequest,
    StatsOut,
    TreeOut,
    TreeRequest,
    VersionResponse,
)
from m3ucatalog.core.errors import PlaylistError
from m3ucatalog.core.logger import setup_logger
from m3ucatalog.core.models.item import PlaylistItem
from m3ucatalog.services.category_tree import CategoryTree
from m3ucatalog.services.playlist import parse_m3u
from m3ucatalog.version import __version__

logger = setup_logger(__name__)
tag = "[API]"

router = APIRouter(tags=["Catalog"])


def _parse(content: str) -> List[PlaylistItem]:
    try:
        return parse_m3u(content)
    except PlaylistError as e:
        raise HTTPException(422, detail=str(e))


def _tree(content: str) -> CategoryTree:
    return CategoryTree.build(_parse(content))


@router.post("/parse", response_model=List[ItemOut], name="catalog.parse")
async def api_parse(payload: PlaylistRequest):
    """
    Flat parse: every entry in document order.
    """
    return [ItemOut.from_item(i) for i in _parse(payload.content)]


@router.post("/tree", response_model=TreeOut, name="catalog.tree")
async def api_tree(payload: TreeRequest):
    """
    Grouped parse with hidden groups removed and sticky groups first.
    """
    views = _tree(payload.content).get_all_categories(payload.sticky_groups, payload.hidden_groups)
    return TreeOut(**{
        kind: [NodeOut.from_node(node) for node in nodes]
        for kind, nodes in views.items()
    })


@router.post("/category", response_model=NodeOut, name="catalog.category")
async def api_category(payload: CategoryRequest):
    node = _tree(payload.content).find_category(payload.name)
    if node is None:
        raise HTTPException(404, detail=f"Category {payload.name!r} not found")

    prefs = {url: p.to_preferences() for url, p in payload.preferences.items()}
    return NodeOut.from_node(node, node.get_items(prefs))


@router.post("/search", response_model=List[ItemOut], name="catalog.search")
async def api_search(payload: SearchRequest):
    results = _tree(payload.content).search(payload.query)
    logger.info("%s 🔍 '%s' matched %d items", tag, payload.query, len(results))
    return [ItemOut.from_item(i) for i in results]


@router.post("/stats", response_model=StatsOut, name="catalog.stats")
async def api_stats(payload: PlaylistRequest):
    return StatsOut.from_stats(_tree(payload.content).stats())


@router.get("/version", response_model=VersionResponse, name="catalog.version")
async def api_version():
    return VersionResponse(version=__version__)
