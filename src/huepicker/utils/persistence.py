"""Loading and saving pydantic models as JSON files.

Used for the picker configuration. Color history is never written here.

Safety Features:
    - Automatic .bak backup before overwriting a file
    - Atomic writes using temp file + rename
    - Low-level pydantic/JSON errors are converted to ConfigurationError
      subclasses with recovery hints
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from huepicker.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Stateless JSON persistence for pydantic models.

    Example:
        ```python
        config = PydanticPersistence.load_json(Path("config.json"), PickerConfig)
        PydanticPersistence.save_json(config, Path("config.json"))
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a model from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty or not valid JSON
            ConfigValidationError: If the content fails validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")
            if not json_content.strip():
                raise ConfigFileInvalidError(str(path), "File is empty")

            model = model_type.model_validate_json(json_content)
            logger.debug(f"Loaded {model_type.__name__} from {path}")
            return model

        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        except ConfigurationError:
            raise

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}") from e

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Save a model to JSON with an optional .bak backup and an atomic write.

        Raises:
            OSError: If the file cannot be written
        """
        if create_parents:
            path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            backup_path = path.with_suffix(path.suffix + ".bak")
            shutil.copy2(path, backup_path)
            logger.debug(f"Created backup: {backup_path}")

        json_content = data.model_dump_json(indent=indent)

        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            temp_path.write_text(json_content, encoding="utf-8")
            temp_path.replace(path)
            logger.debug(f"Saved {type(data).__name__} to {path}")
        finally:
            if temp_path.exists():
                temp_path.unlink()

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[T], default_factory: Callable[[], T] | None = None
    ) -> T:
        """
        Load a model, or return a default instance when the file is missing.

        An existing but broken file still raises; it is never silently
        replaced with defaults.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            return default_factory() if default_factory else model_type()
