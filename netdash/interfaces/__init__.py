"""
Interfaces to netdash's external collaborators.
"""

from netdash.interfaces.physics import AbstractPhysicsSimulation, PhysicsFactory

__all__ = [
    "AbstractPhysicsSimulation",
    "PhysicsFactory",
]
