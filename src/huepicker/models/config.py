"""Picker configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from huepicker.models.color import HSVColor
from huepicker.models.enums import ColorModel, PaletteType
from huepicker.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".huepicker" / "config.json"


class PickerConfig(BaseModel):
    """Options recognised by the picker."""

    enable_alpha: bool = Field(
        default=True,
        description=(
            "Honour alpha edits (alpha track, alpha channel, 8-digit hex). "
            "When disabled the color is always fully opaque."
        ),
    )
    color_model: ColorModel = Field(
        default=ColorModel.RGB,
        description="Channel set exposed by the slider-only picker",
    )
    palette_type: PaletteType = Field(
        default=PaletteType.HSV_WITH_HUE,
        description="Area and companion track shown by the full picker",
    )
    initial_color: str = Field(
        default="FF0000",
        description="Starting color as 3, 6 or 8 hex digits, optional '#'",
    )
    history_size: int = Field(
        default=16, ge=0, description="Colors kept in the in-session history (0 disables it)"
    )

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str) -> str:
        """Reject text the hex codec would not accept."""
        from huepicker.colors.hex import is_valid_hex

        if not is_valid_hex(v):
            raise ValueError(f"'{v}' is not a 3, 6 or 8 digit hex color")
        return v

    def initial_hsv(self) -> HSVColor:
        """The initial color, forced opaque when alpha is disabled."""
        from huepicker.colors.hex import parse_hex

        return parse_hex(self.initial_color, allow_alpha=self.enable_alpha)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Path to config file. If None, uses ~/.huepicker/config.json

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file, keeping a .bak of the previous version."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
