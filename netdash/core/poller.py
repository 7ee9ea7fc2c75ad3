"""
Snapshot poller with change detection.

Every interval the poller fetches the snapshot payload and only re-parses,
commits and reheats the physics when something changed: the payload text,
the requested topology selection or the surface size. At most one cycle is
in flight at a time.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from netdash.configs.settings import WireFormat
from netdash.core.context import DashboardContext
from netdash.domain.topology import Topology
from netdash.errors import FetchFailureError, MalformedSnapshotError
from netdash.io.wire import parse_snapshot
from netdash.layout.offsets import assign_offsets

logger = logging.getLogger(__name__)

SnapshotParser = Callable[[str, WireFormat], dict[str, Topology]]


class SnapshotSource(Protocol):
    """Anything that can fetch the raw snapshot payload."""

    async def fetch(self) -> str: ...


class PollStatus(Enum):
    """How a poll cycle ended."""

    SKIPPED = "skipped"
    FETCH_FAILED = "fetch_failed"
    MALFORMED = "malformed"
    UNCHANGED = "unchanged"
    UPDATED = "updated"


@dataclass(frozen=True)
class PollOutcome:
    """Summary of one poll cycle."""

    status: PollStatus
    parsed: bool = False
    resized: bool = False
    relaid_out: bool = False
    created: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()


class Poller:
    """Drives fetch, parse and commit cycles for one dashboard context."""

    def __init__(
        self,
        context: DashboardContext,
        source: SnapshotSource,
        parser: SnapshotParser = parse_snapshot,
    ) -> None:
        """
        :param context: Dashboard state the poller reads and updates
        :param source: Payload source, usually a SnapshotFetcher
        :param parser: Payload decoder, the wire parser by default
        """
        self._context = context
        self._source = source
        self._parser = parser
        self._cycle_in_progress = False

    @property
    def cycle_in_progress(self) -> bool:
        return self._cycle_in_progress

    async def wait_for_surface(self) -> None:
        """Retry on a short delay until the surface reports a non-zero size."""
        while not self._context.surface_ready:
            await asyncio.sleep(self._context.settings.size_retry_delay_s)

    async def run(self) -> None:
        """
        Poll for the lifetime of the dashboard.

        Cycles start a fixed interval apart, measured from cycle start.
        """
        await self.wait_for_surface()
        loop = asyncio.get_running_loop()
        interval = self._context.settings.poll_interval_s
        logger.info("polling every %.3gs", interval)

        while True:
            started = loop.time()
            await self.tick()
            elapsed = loop.time() - started
            await asyncio.sleep(max(0.0, interval - elapsed))

    async def request_recheck(self) -> PollOutcome:
        """Run a cycle now, e.g. after a resize or a selection change."""
        return await self.tick()

    async def tick(self) -> PollOutcome:
        """
        Run one poll cycle unless another one is in flight.

        Fetch and parse failures are logged and leave every baseline as it
        was, so the next cycle retries against the last good state.
        """
        if self._cycle_in_progress:
            logger.debug("poll cycle already in flight, skipping")
            return PollOutcome(PollStatus.SKIPPED)

        self._cycle_in_progress = True
        try:
            return await self._cycle()
        finally:
            self._cycle_in_progress = False

    async def _cycle(self) -> PollOutcome:
        context = self._context

        try:
            raw = await self._source.fetch()
        except FetchFailureError as e:
            logger.warning("snapshot fetch failed: %s", e)
            return PollOutcome(PollStatus.FETCH_FAILED)

        parsed = False
        created: list[str] = []
        removed: list[str] = []
        visible_before = [binding.name for binding in context.visible_bindings()]

        if raw != context.last_payload or (
            context.requested_selection != context.current_selection
        ):
            try:
                snapshot = self._parser(raw, context.settings.wire_format)
            except MalformedSnapshotError as e:
                logger.warning("discarding malformed snapshot: %s", e)
                return PollOutcome(PollStatus.MALFORMED)

            created = context.store.commit(snapshot)
            for binding in context.store:
                assign_offsets(binding.topology.links)

            if context.settings.prune_stale_topologies:
                for name in context.store.names():
                    if name not in snapshot:
                        context.store.remove(name)
                        removed.append(name)

            if context.requested_selection is None and snapshot:
                context.requested_selection = next(iter(snapshot))
            context.current_selection = context.requested_selection
            parsed = True

        resized = context.surface_size != context.last_surface_size
        visible_after = [binding.name for binding in context.visible_bindings()]
        relaid_out = resized or visible_after != visible_before
        if relaid_out:
            context.relayout()

        changed = parsed or resized
        if changed:
            logger.debug("reheating %d topologies", len(visible_after))
            for binding in context.visible_bindings():
                binding.physics.restart(context.settings.reheat_alpha)

        context.last_payload = raw
        context.last_surface_size = context.surface_size

        return PollOutcome(
            status=PollStatus.UPDATED if changed else PollStatus.UNCHANGED,
            parsed=parsed,
            resized=resized,
            relaid_out=relaid_out,
            created=tuple(created),
            removed=tuple(removed),
        )
