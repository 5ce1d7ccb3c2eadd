"""Widget data models."""

from ethwidget.models.price import PriceSample
from ethwidget.models.gas import GasSample
from ethwidget.models.snapshot import DisplaySnapshot
from ethwidget.models.outcome import Degraded, RefreshOutcome, Success
from ethwidget.models.timeline import Timeline

__all__ = [
    "PriceSample",
    "GasSample",
    "DisplaySnapshot",
    "Success",
    "Degraded",
    "RefreshOutcome",
    "Timeline",
]
