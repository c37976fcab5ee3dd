"""Runtime helpers for reporting check results to callers."""

from .reporting import ensure_valid, format_check_failure

__all__ = ["ensure_valid", "format_check_failure"]
