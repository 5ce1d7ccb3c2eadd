"""Timeline data model: what to render and when to ask again."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ethwidget.models.snapshot import DisplaySnapshot


@dataclass(frozen=True)
class Timeline:
    """Snapshots for the host to render, plus a refresh hint.

    Attributes:
        entries: Snapshots ordered by ``captured_at``.
        refresh_after: Earliest instant the host should refresh again.
    """

    entries: tuple[DisplaySnapshot, ...]
    refresh_after: datetime

    @property
    def current(self) -> DisplaySnapshot:
        return self.entries[-1]
