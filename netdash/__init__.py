"""
netdash - live network topology dashboard core.

Polls a backend endpoint for topology snapshots, normalizes both wire
formats into one model, fans parallel links, lays topologies out in a grid
of viewports and resolves node drags across viewports.
"""

__version__ = "1.0.0"
