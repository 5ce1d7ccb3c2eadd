"""Refresh outcome data models: success or degraded."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ethwidget.errors import WidgetErrorCode
from ethwidget.models.snapshot import DisplaySnapshot


@dataclass(frozen=True)
class Success:
    """Both fetches completed and the snapshot holds real values."""

    snapshot: DisplaySnapshot

    @property
    def degraded(self) -> bool:
        return False


@dataclass(frozen=True)
class Degraded:
    """The cycle failed; the snapshot holds the no-data sentinel.

    Attributes:
        snapshot: Placeholder snapshot, still renderable.
        reason: Error code of the failure that degraded the cycle.
    """

    snapshot: DisplaySnapshot
    reason: WidgetErrorCode

    @property
    def degraded(self) -> bool:
        return True


RefreshOutcome = Union[Success, Degraded]
