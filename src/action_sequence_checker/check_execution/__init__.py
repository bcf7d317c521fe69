"""Check execution domain exports."""

from .check_contracts import CheckOutcome, CheckRequest, RecordedEventLog
from .check_run_use_case import CheckExecutionError, execute_check

__all__ = [
    "CheckRequest",
    "CheckOutcome",
    "RecordedEventLog",
    "CheckExecutionError",
    "execute_check",
]
