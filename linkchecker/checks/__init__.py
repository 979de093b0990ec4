"""
Link checking: request/result models and the HTTP probe.
"""

from linkchecker.checks.models import (
    CheckRequest,
    CheckResult,
    HttpError,
    InvalidInput,
    NetworkFailure,
    Success,
)
from linkchecker.checks.probe import check_link

__all__ = [
    "CheckRequest",
    "CheckResult",
    "HttpError",
    "InvalidInput",
    "NetworkFailure",
    "Success",
    "check_link",
]
