"""
Custom exception hierarchy for huepicker.

## Exception Hierarchy

```
HuePickerError (base)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `HuePickerError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

Interactive input never raises: a malformed hex string or channel value is
rejected by returning None, and out-of-range numbers are clamped. Broken
colour invariants are programming errors and surface as AssertionError.

### Example: Config Validation Error

```python
from huepicker.exceptions import ConfigValidationError

raise ConfigValidationError(
    field="initial_color",
    value="#GGG",
    error_msg="Not a valid hex color",
    file_path="/path/to/config.json",
)
```
"""

from .base import HuePickerError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Base
    "HuePickerError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
