"""RefreshPipeline — fetch, format and schedule one widget refresh cycle."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from typing import Any, Callable

from ethwidget.clients import create_client
from ethwidget.clients.base import BasePriceGasClient
from ethwidget.config import ApiClientType, WidgetConfig
from ethwidget.errors import NetworkError, WidgetDataError, WidgetErrorCode
from ethwidget.models.gas import GasSample
from ethwidget.models.outcome import Degraded, RefreshOutcome, Success
from ethwidget.models.price import PriceSample
from ethwidget.models.snapshot import DisplaySnapshot
from ethwidget.models.timeline import Timeline

logger = logging.getLogger(__name__)

# Values shown in the widget gallery before any data is available.
PLACEHOLDER_PRICE_USD = 3000.0
PLACEHOLDER_GAS_GWEI = 30.0

# How often a cancellable refresh checks the host's cancel event.
_CANCEL_POLL_SECONDS = 0.05


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RefreshPipeline:
    """Fan out to the price and gas endpoints, merge, format, schedule.

    Usage::

        from ethwidget import create_pipeline_from_env
        pipeline = create_pipeline_from_env()
        outcome, next_refresh_at = pipeline.refresh()
        render(outcome.snapshot)

    The pipeline keeps no state between cycles. ``refresh`` never raises
    for fetch failures; every path returns a renderable snapshot.
    """

    def __init__(
        self,
        config: WidgetConfig | None = None,
        client: BasePriceGasClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config or WidgetConfig()
        self.config.validate()

        if client is None:
            kwargs: dict[str, Any] = {}
            if self.config.client is ApiClientType.HTTP:
                kwargs["base_url"] = self.config.base_url
                kwargs["timeout"] = self.config.request_timeout_seconds
            client = create_client(self.config.client, **kwargs)
        self.client = client
        self._clock = clock or _utcnow

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> RefreshPipeline:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    # -------------------------------------------------------------- refresh

    def refresh(
        self,
        now: datetime | None = None,
        cancel: threading.Event | None = None,
    ) -> tuple[RefreshOutcome, datetime]:
        """Run one fetch-format cycle.

        Args:
            now: Cycle time; defaults to the pipeline clock.
            cancel: Set by the host to abandon the cycle early.

        Returns:
            The outcome and the recommended next refresh instant, which is
            always ``now + refresh_interval``.
        """
        if now is None:
            now = self._clock()
        next_refresh_at = now + self.config.refresh_interval

        try:
            price, gas = self._fetch_both(cancel)
            snapshot = DisplaySnapshot.from_samples(
                price,
                gas,
                captured_at=now,
                price_decimals=self.config.price_decimals,
                include_unit_suffix=self.config.include_unit_suffix,
            )
        except WidgetDataError as exc:
            logger.warning("Refresh degraded (%s): %s", exc.code.value, exc)
            return Degraded(DisplaySnapshot.no_data(now), reason=exc.code), next_refresh_at
        except Exception as exc:
            logger.warning("Refresh degraded by unexpected client error: %r", exc, exc_info=True)
            return (
                Degraded(DisplaySnapshot.no_data(now), reason=WidgetErrorCode.UNEXPECTED),
                next_refresh_at,
            )

        logger.debug(
            "Refresh ok: price=%s gas=%s level=%d",
            snapshot.price_text, snapshot.gas_text, snapshot.gas_level,
        )
        return Success(snapshot), next_refresh_at

    # ------------------------------------------------------ host-facing views

    def placeholder(self, now: datetime | None = None) -> DisplaySnapshot:
        """Static sample snapshot for galleries and previews; no network."""
        if now is None:
            now = self._clock()
        return DisplaySnapshot.from_samples(
            PriceSample(price_usd=PLACEHOLDER_PRICE_USD, observed_at=now),
            GasSample(base_fee_gwei=PLACEHOLDER_GAS_GWEI, observed_at=now),
            captured_at=now,
            price_decimals=self.config.price_decimals,
            include_unit_suffix=self.config.include_unit_suffix,
        )

    def snapshot(self, now: datetime | None = None, preview: bool = False) -> DisplaySnapshot:
        """Quick-glance snapshot: the placeholder in preview, else live data."""
        if preview:
            return self.placeholder(now)
        outcome, _ = self.refresh(now)
        return outcome.snapshot

    def timeline(self, now: datetime | None = None) -> Timeline:
        """One refresh cycle packaged as a single-entry timeline."""
        outcome, next_refresh_at = self.refresh(now)
        return Timeline(entries=(outcome.snapshot,), refresh_after=next_refresh_at)

    # ------------------------------------------------------------- internal

    def _fetch_both(self, cancel: threading.Event | None) -> tuple[PriceSample, GasSample]:
        """Run both fetches concurrently; raise on the first failure.

        Unfinished fetches are abandoned on return. Their results are
        never read, so a late answer cannot reach a snapshot.

        Abandoned fetches cannot be interrupted: each timed out or
        cancelled cycle leaves up to two worker threads running until the
        client call returns. For the HTTP client that is bounded by
        ``request_timeout_seconds`` per socket read, not per request, so a
        server trickling bytes keeps its thread alive for longer. Hosts
        refreshing every few minutes see at most a few such threads.
        """
        timeout = self.config.refresh_timeout_seconds
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="ethwidget-fetch")
        futures: tuple[Future, ...] = ()
        try:
            price_future = executor.submit(self.client.fetch_price)
            gas_future = executor.submit(self.client.fetch_gas)
            futures = (price_future, gas_future)

            deadline = time.monotonic() + timeout
            pending = set(futures)
            while pending:
                if cancel is not None and cancel.is_set():
                    raise WidgetDataError(
                        "Refresh cancelled by host",
                        code=WidgetErrorCode.CANCELLED,
                    )
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise NetworkError(
                        f"Refresh did not complete within {timeout}s",
                        code=WidgetErrorCode.TIMEOUT,
                    )
                if cancel is not None:
                    remaining = min(remaining, _CANCEL_POLL_SECONDS)
                done, pending = wait(pending, timeout=remaining, return_when=FIRST_EXCEPTION)
                for future in done:
                    exc = future.exception()
                    if exc is not None:
                        raise exc

            return price_future.result(), gas_future.result()
        finally:
            for future in futures:
                future.cancel()
            executor.shutdown(wait=False, cancel_futures=True)
