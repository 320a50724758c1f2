"""Exception hierarchy for load_engine input validation.

The numeric engine itself never raises; these are only used at the
data-entry boundary.
"""

from __future__ import annotations


class LoadEngineError(Exception):
    """Base exception for all load_engine errors."""


class ValidationError(LoadEngineError):
    """One or more user-entered fields failed a range or type check."""

    def __init__(self, field_errors: dict[str, str]) -> None:
        summary = ", ".join(f"{name}: {msg}" for name, msg in sorted(field_errors.items()))
        super().__init__(f"Invalid input ({summary})")
        self.field_errors = dict(field_errors)
