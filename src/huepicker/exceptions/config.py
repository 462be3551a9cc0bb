"""Configuration-related exceptions.

- ConfigurationError: Base class for configuration errors
- ConfigFileInvalidError: Config file is not valid JSON
- ConfigValidationError: Config values fail validation
"""

from typing import Any, Optional

from .base import HuePickerError


class ConfigurationError(HuePickerError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigFileInvalidError(ConfigurationError):
    """Configuration file has invalid JSON syntax."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Initialize config file invalid error.

        Args:
            file_path: Path to the invalid config file
            parse_error: The parsing error message
        """
        user_msg = "Configuration file has invalid syntax"
        recovery = (
            "Check the file for trailing commas, missing quotes or unclosed braces\n"
            f"  - Edit: {file_path}\n"
            "  - Or regenerate it with 'huepicker config init --force'"
        )

        if "trailing comma" in parse_error.lower():
            user_msg = "Configuration file has a trailing comma"
            recovery = (
                f"Remove the trailing comma from {file_path}\n"
                "JSON doesn't allow commas after the last item in an object"
            )
        elif "empty" in parse_error.lower():
            user_msg = "Configuration file is empty"

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """Configuration values fail validation."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Initialize config validation error.

        Args:
            field: The configuration field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the config file (optional)
        """
        user_msg = f"Invalid configuration value for '{field}': {error_msg}"

        recovery = f"Update the '{field}' value in your configuration"
        if file_path:
            recovery += f"\nConfig file: {file_path}"

        if field == "initial_color":
            recovery += "\nUse 3, 6 or 8 hex digits, e.g. 'F00', '#FF0000' or '80FF0000'"
        elif field == "palette_type":
            recovery += "\nRun 'huepicker config show' to see the current palette type"
        elif field == "color_model":
            recovery += "\nValid color models: rgb, hsv, hsl"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
