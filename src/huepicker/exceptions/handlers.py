"""
Error conversion helpers.

Low-level errors (pydantic validation, JSON syntax) are converted into
HuePickerError subclasses here so the CLI can show a short message plus a
recovery hint, while the log keeps the technical details.

| Scenario                 | Use This                 |
|--------------------------|--------------------------|
| Config file syntax error | `ConfigFileInvalidError` |
| Config value invalid     | `ConfigValidationError`  |
| Anything else for the UI | `format_error_for_display` |
"""

import logging
from typing import Optional

from .base import HuePickerError
from .config import ConfigFileInvalidError, ConfigValidationError, ConfigurationError

logger = logging.getLogger(__name__)


def wrap_pydantic_error(error: Exception, file_path: str) -> ConfigurationError:
    """
    Convert a pydantic validation error into a configuration exception.

    Args:
        error: The pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        ConfigFileInvalidError for JSON syntax problems, otherwise
        ConfigValidationError naming the offending field(s)
    """
    from pydantic import ValidationError

    error_msg = str(error)

    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path,
            )

    logger.debug(f"Unstructured validation error for {file_path}: {error_msg}")
    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, HuePickerError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
