# m3ucatalog/core/attributes.py
from typing import NamedTuple, Optional

GROUP_ATTR = 'group-title="'
LOGO_ATTR  = 'tvg-logo="'


class EntryAttributes(NamedTuple):
    title: str
    group: str
    logo:  Optional[str] = None


def _attribute(attributes: str, token: str) -> Optional[str]:
    """Value of the first ``token...\"`` occurrence; escaped quotes unsupported."""
    start = attributes.find(token)
    if start == -1:
        return None
    value_start = start + len(token)
    end = attributes.find('"', value_start)
    if end == -1:
        return None
    return attributes[value_start:end]


def extract_attributes(metadata: str) -> Optional[EntryAttributes]:
    """
    Split an ``#EXTINF`` line into title, group-title and tvg-logo.

    The title is everything after the last comma, so titles containing commas
    are truncated. Returns None when the line has no comma at all.
    """
    comma = metadata.rfind(",")
    if comma == -1:
        return None

    title = metadata[comma + 1:].strip()
    attributes = metadata[:comma]

    return EntryAttributes(
        title = title,
        group = _attribute(attributes, GROUP_ATTR) or "",
        logo  = _attribute(attributes, LOGO_ATTR),
    )
