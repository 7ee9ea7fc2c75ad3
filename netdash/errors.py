"""
Custom exceptions for the netdash runtime.

Parse failures and transport failures are recoverable: the poll loop logs
them, skips the cycle and keeps the last good view.
"""


class DashboardError(Exception):
    """Base exception for all dashboard runtime errors."""

    pass


class MalformedSnapshotError(DashboardError):
    """Raised when a fetched payload cannot be decoded into topologies.

    Covers unparseable integers, missing required fields, records outside a
    topology block and links that reference unknown node ids.
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class FetchFailureError(DashboardError):
    """Raised when the snapshot endpoint cannot be reached or answers non-2xx."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LayoutOverflowWarning(UserWarning):
    """Issued when the topology count exceeds the viewport grid search bound."""

    pass
