"""Base exception class for huepicker.

Every custom exception inherits from HuePickerError so callers can catch
all application errors in one place. The base class carries:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Rejected user input (a half-typed hex string, a non-numeric channel value)
is NOT an error: those paths return None and never raise.
"""

from typing import Optional


class HuePickerError(Exception):
    """
    Base exception for all huepicker errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recoverable: Whether the error can be recovered from
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
