"""Shared fixtures and test doubles for core tests."""

from collections.abc import Callable

import pytest

from netdash.configs.settings import DashboardSettings
from netdash.core.context import DashboardContext
from netdash.core.store import TopologyStore
from netdash.domain.topology import Link, Node
from netdash.errors import FetchFailureError
from netdash.interfaces.physics import AbstractPhysicsSimulation, TickCallback


class RecordingPhysics(AbstractPhysicsSimulation):
    """Physics double that records every call and never moves nodes."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.nodes: dict[int, Node] | None = None
        self.links: list[Link] | None = None
        self.bind_calls = 0
        self.restarts: list[float | None] = []
        self.alpha_targets: list[float] = []
        self.center: tuple[float, float] | None = None
        self.ticks = 0
        self._alpha = 1.0
        self._alpha_target = 0.0

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def alpha_target(self) -> float:
        return self._alpha_target

    def bind(self, nodes: dict[int, Node], links: list[Link]) -> None:
        self.nodes = nodes
        self.links = links
        self.bind_calls += 1

    def set_center(self, x: float, y: float) -> None:
        self.center = (x, y)

    def restart(self, alpha: float | None = None) -> None:
        self.restarts.append(alpha)
        if alpha is not None:
            self._alpha = alpha

    def set_alpha_target(self, value: float) -> None:
        self.alpha_targets.append(value)
        self._alpha_target = value

    def tick(self) -> bool:
        self.ticks += 1
        return True

    def on_tick(self, callback: TickCallback) -> None:
        pass


@pytest.fixture
def physics_registry() -> dict[str, RecordingPhysics]:
    """Physics doubles created by the store, keyed by topology name."""
    return {}


@pytest.fixture
def physics_factory(
    physics_registry: dict[str, RecordingPhysics],
) -> Callable[[str], RecordingPhysics]:
    def factory(name: str) -> RecordingPhysics:
        physics = RecordingPhysics(name)
        physics_registry[name] = physics
        return physics

    return factory


@pytest.fixture
def settings() -> DashboardSettings:
    return DashboardSettings(poll_interval_s=0.01, size_retry_delay_s=0.001)


@pytest.fixture
def store(physics_factory) -> TopologyStore:
    return TopologyStore(physics_factory)


@pytest.fixture
def context(settings: DashboardSettings, store: TopologyStore) -> DashboardContext:
    ctx = DashboardContext(settings=settings, store=store)
    ctx.surface_size = (800.0, 600.0)
    return ctx


@pytest.fixture
def fetch_failure() -> FetchFailureError:
    return FetchFailureError("connection refused")
