"""
Core runtime of netdash: topology store, poller, drag controller and the
dashboard root that wires them together.
"""

from .context import DashboardContext, DragBinding
from .dashboard import Dashboard
from .drag import DragController, DragState
from .fetcher import SnapshotFetcher
from .poller import PollOutcome, Poller, PollStatus
from .store import TopologyBinding, TopologyStore

__all__ = [
    "Dashboard",
    "DashboardContext",
    "DragBinding",
    "DragController",
    "DragState",
    "SnapshotFetcher",
    "PollOutcome",
    "PollStatus",
    "Poller",
    "TopologyBinding",
    "TopologyStore",
]
