# m3ucatalog/services/playlist.py
from typing import List, Optional

from m3ucatalog.core.attributes import extract_attributes
from m3ucatalog.core.categorizer import categorize_item
from m3ucatalog.core.errors import PlaylistError
from m3ucatalog.core.logger import setup_logger
from m3ucatalog.core.models.item import PlaylistItem
from m3ucatalog.core.reader import read_entries
from m3ucatalog.services.category_tree import CategoryTree

logger = setup_logger(__name__)
tag = "[M3U]"


def parse_entry(metadata: str, url: str) -> Optional[PlaylistItem]:
    """Build one item from a raw entry, or None when the metadata has no title."""
    attrs = extract_attributes(metadata)
    if attrs is None:
        return None

    url = url.strip()
    categorized = categorize_item(attrs.title, url)
    return PlaylistItem(
        title          = categorized.title,
        url            = url,
        group          = attrs.group,
        logo           = attrs.logo,
        classification = categorized.classification,
    )


def parse_m3u(content: str) -> List[PlaylistItem]:
    """
    Parse a playlist into classified items, in document order.

    Raises EmptyInputError / MissingHeaderError for a missing header; every
    other malformed entry is skipped.
    """
    try:
        entries = read_entries(content)
    except PlaylistError as e:
        logger.warning("%s ❌ Rejected playlist: %s", tag, e)
        raise

    items: List[PlaylistItem] = []
    dropped = 0
    for metadata, url in entries:
        item = parse_entry(metadata, url)
        if item is None:
            dropped += 1
            logger.debug("%s ⚠️ Skipping entry without title: %s", tag, metadata)
            continue
        items.append(item)

    logger.info("%s ✅ Parsed %d items (%d without title)", tag, len(items), dropped)
    return items


def parse_m3u_with_tree(content: str, uncategorized_label: Optional[str] = None) -> CategoryTree:
    """Parse a playlist and group the result into a CategoryTree."""
    return CategoryTree.build(parse_m3u(content), uncategorized_label)
