"""
Dashboard application root.

Creates the dashboard context and wires the poller, the drag controller and
the physics collaborators onto one asyncio event loop.
"""

from __future__ import annotations

import asyncio
import logging

from netdash.configs.settings import DashboardSettings
from netdash.core.context import DashboardContext
from netdash.core.drag import DragController, DragState
from netdash.core.fetcher import SnapshotFetcher
from netdash.core.poller import PollOutcome, Poller, SnapshotParser, SnapshotSource
from netdash.core.store import TopologyStore
from netdash.domain.topology import Node
from netdash.interfaces.physics import PhysicsFactory
from netdash.io.wire import parse_snapshot
from netdash.layout.spring import SpringLayoutSimulation
from netdash.utils.logging_config import configure_dashboard_logging

logger = logging.getLogger(__name__)

DEFAULT_FRAME_INTERVAL_S = 1 / 60


def default_physics_factory(name: str) -> SpringLayoutSimulation:
    return SpringLayoutSimulation(name=name)


class Dashboard:
    """
    Live topology dashboard.

    Example:
        >>> dashboard = Dashboard(DashboardSettings(base_url="http://node:8080"))
        >>> dashboard.resize(1600, 900)
        >>> asyncio.run(dashboard.run())  # doctest: +SKIP
    """

    def __init__(
        self,
        settings: DashboardSettings | None = None,
        physics_factory: PhysicsFactory | None = None,
        source: SnapshotSource | None = None,
        parser: SnapshotParser = parse_snapshot,
    ) -> None:
        """
        :param settings: Dashboard configuration, defaults from the environment
        :param physics_factory: Creates one physics collaborator per topology
        :param source: Payload source; an HTTP fetcher on ``settings.data_url``
            when omitted
        :param parser: Payload decoder
        """
        self.settings = settings or DashboardSettings()
        self.context = DashboardContext(
            settings=self.settings,
            store=TopologyStore(physics_factory or default_physics_factory),
        )

        self._fetcher: SnapshotFetcher | None = None
        if source is None:
            self._fetcher = SnapshotFetcher(
                self.settings.data_url, timeout=self.settings.fetch_timeout_s
            )
            source = self._fetcher

        self.poller = Poller(self.context, source, parser)
        self.drag = DragController(self.context)

    @property
    def store(self) -> TopologyStore:
        return self.context.store

    def resize(self, width: float, height: float) -> None:
        """Record a new surface size; the next poll cycle re-lays out."""
        self.context.surface_size = (width, height)

    async def handle_resize(self, width: float, height: float) -> PollOutcome:
        """Record a new surface size and re-check immediately."""
        self.resize(width, height)
        return await self.poller.request_recheck()

    async def select_topology(self, name: str) -> PollOutcome:
        """Request a topology in single-topology mode and re-check immediately."""
        self.context.requested_selection = name
        return await self.poller.request_recheck()

    def pointer_down(self, x: float, y: float) -> Node | None:
        return self.drag.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.drag.pointer_move(x, y)

    def pointer_up(self) -> None:
        self.drag.pointer_up()

    @property
    def dragging(self) -> bool:
        return self.drag.state is DragState.DRAGGING

    def tick_physics(self) -> bool:
        """
        Advance every visible layout by one step.

        :return: True while at least one layout is still moving
        """
        running = False
        for binding in self.context.visible_bindings():
            running = binding.physics.tick() or running
        return running

    async def animate(self, frame_interval_s: float = DEFAULT_FRAME_INTERVAL_S) -> None:
        """Tick the physics collaborators for the lifetime of the dashboard."""
        while True:
            self.tick_physics()
            await asyncio.sleep(frame_interval_s)

    async def run(self) -> None:
        """Poll and animate until cancelled."""
        configure_dashboard_logging(self.settings.log_level, self.settings.log_file)
        logger.info("dashboard polling %s", self.settings.data_url)
        try:
            await asyncio.gather(self.poller.run(), self.animate())
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        if self._fetcher is not None:
            await self._fetcher.aclose()
