"""Partial channel updates produced by pointer input."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from huepicker.models.color import HSVColor, clamp_unit, wrap_hue


class ChannelUpdate(BaseModel):
    """
    A set of HSV channels to overwrite; unset (None) channels are left alone.

    Example:
        >>> update = ChannelUpdate(saturation=0.25, value=1.0)
        >>> update.channels
        ('saturation', 'value')
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    hue: Optional[float] = None
    saturation: Optional[float] = None
    value: Optional[float] = None
    alpha: Optional[float] = None

    @field_validator("hue")
    @classmethod
    def wrap_hue_degrees(cls, v: Optional[float]) -> Optional[float]:
        return None if v is None else wrap_hue(v)

    @field_validator("saturation", "value", "alpha")
    @classmethod
    def clamp_channels(cls, v: Optional[float]) -> Optional[float]:
        return None if v is None else clamp_unit(v)

    @property
    def channels(self) -> tuple[str, ...]:
        """Names of the channels this update sets."""
        return tuple(self.model_dump(exclude_none=True))

    def apply(self, color: HSVColor) -> HSVColor:
        """Merge into `color`, preserving every channel not set here."""
        return color.with_channels(**self.model_dump(exclude_none=True))
