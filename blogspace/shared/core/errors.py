"""Error taxonomy for the BlogSpace stores.

Validation and authentication failures are raised at the store boundary
before any state is touched. Unknown identifiers in like toggles are not
errors and never reach this module.
"""

from __future__ import annotations

from typing import Dict, Optional


class BlogError(Exception):
    """Base exception for all store errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FieldValidationError(BlogError):
    """One or more input fields were rejected.

    Attributes:
        fields: Mapping of field name to a human readable reason
    """

    def __init__(self, fields: Dict[str, str]):
        self.fields = dict(fields)
        summary = "; ".join(f"{name}: {reason}" for name, reason in self.fields.items())
        super().__init__(f"Validation failed ({summary})")

    @classmethod
    def single(cls, field: str, reason: str) -> "FieldValidationError":
        return cls({field: reason})


class AuthenticationError(BlogError):
    """Credential mismatch, or an intent that needs a signed-in user."""

    def __init__(self, reason: str = "invalid credentials", identifier: Optional[str] = None):
        super().__init__(f"Authentication failed: {reason}")
        self.reason = reason
        self.identifier = identifier
