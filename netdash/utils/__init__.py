"""
Utility modules for netdash.

Example:
    from netdash.utils.logging_config import configure_dashboard_logging
"""

from netdash.utils.logging_config import configure_dashboard_logging, setup_logger

__all__ = [
    "setup_logger",
    "configure_dashboard_logging",
]
