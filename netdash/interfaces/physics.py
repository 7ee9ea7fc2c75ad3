"""
Abstract base class for the force-directed layout collaborator.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from netdash.domain.topology import Link, Node

TickCallback = Callable[[], None]


class AbstractPhysicsSimulation(ABC):
    """
    Contract between the dashboard core and a force-directed integrator.

    The integrator owns node position state (``x, y, vx, vy``) and honours
    pinned positions (``fx, fy``). It observes the node and link
    collections it is bound to by identity: the dashboard replaces their
    contents in place between snapshots, so node objects that survive a
    snapshot keep their motion.
    """

    @abstractmethod
    def bind(self, nodes: dict[int, Node], links: list[Link]) -> None:
        """
        Observe the given collections.

        :param nodes: Live node mapping of one topology
        :param links: Live link list of the same topology
        """

    @abstractmethod
    def set_center(self, x: float, y: float) -> None:
        """Set the point the layout gravitates toward."""

    @abstractmethod
    def restart(self, alpha: float | None = None) -> None:
        """
        Resume integration.

        :param alpha: New energy level, unchanged when None
        """

    @abstractmethod
    def set_alpha_target(self, value: float) -> None:
        """Set the energy level alpha decays toward."""

    @abstractmethod
    def tick(self) -> bool:
        """
        Advance one integration step and notify tick callbacks.

        :return: False once the layout has cooled down and stopped
        """

    @abstractmethod
    def on_tick(self, callback: TickCallback) -> None:
        """Register a callback invoked after every step."""

    @property
    @abstractmethod
    def alpha(self) -> float:
        """Current energy level."""

    @property
    @abstractmethod
    def alpha_target(self) -> float:
        """Energy level alpha decays toward."""


PhysicsFactory = Callable[[str], AbstractPhysicsSimulation]
