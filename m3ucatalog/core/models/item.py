# m3ucatalog/core/models/item.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

from m3ucatalog.core.models.classification import Classification, Movie, Series
from m3ucatalog.core.models.enums import MediaType


@dataclass(frozen=True)
class PlaylistItem:
    # ── Parsed from the entry ─────────────────────────────────────────────────
    title: str                  # cleaned title/show (year & SxxExx removed)
    url:   str
    group: str                  # raw group-title, "" when absent
    logo:  Optional[str]

    # ── Derived by the categorizer ────────────────────────────────────────────
    classification: Classification

    @property
    def kind(self) -> MediaType:
        return self.classification.kind

    @property
    def year(self) -> Optional[int]:
        if isinstance(self.classification, (Movie, Series)):
            return self.classification.year
        return None

    @property
    def season(self) -> Optional[int]:
        if isinstance(self.classification, Series):
            return self.classification.season
        return None

    @property
    def episode(self) -> Optional[int]:
        if isinstance(self.classification, Series):
            return self.classification.episode
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Flat shape consumed by presentation layers."""
        return {
            "title":    self.title,
            "url":      self.url,
            "group":    self.group,
            "logo":     self.logo,
            "category": self.kind.value,
            "year":     self.year,
            "season":   self.season,
            "episode":  self.episode,
        }


@dataclass(frozen=True)
class ItemPreferences:
    favorite: bool = False
    hidden:   bool = False

