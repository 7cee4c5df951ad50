"""User display preferences and the color blob codec.

Defines ``Color`` and ``Preferences`` plus the symmetric encoding used to
store a color in the key-value settings area.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contact_manager.domain.errors import ColorDecodingError, ColorEncodingError

DEFAULT_FONT_SIZE = 14.0
# Value older settings files use for "never set".
FONT_SIZE_UNSET = 0.0
FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 30

_HEX_RE = re.compile(r"^#?(?P<rgb>[0-9a-fA-F]{6})(?P<alpha>[0-9a-fA-F]{2})?$")


class Color(BaseModel):
    """RGBA color with float channels in ``[0.0, 1.0]``."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(ge=0.0, le=1.0)
    green: float = Field(ge=0.0, le=1.0)
    blue: float = Field(ge=0.0, le=1.0)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def white(cls) -> Color:
        return cls(red=1.0, green=1.0, blue=1.0, alpha=1.0)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (the ``#`` is optional)."""
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid color: '{value}'. Expected #RRGGBB or #RRGGBBAA."
            )
        rgb = match.group("rgb")
        alpha = match.group("alpha") or "ff"
        channels = [int(rgb[i : i + 2], 16) / 255 for i in (0, 2, 4)]
        return cls(
            red=channels[0],
            green=channels[1],
            blue=channels[2],
            alpha=int(alpha, 16) / 255,
        )

    def to_hex(self) -> str:
        """Format as ``#RRGGBB``, or ``#RRGGBBAA`` when not fully opaque."""
        parts = [self.red, self.green, self.blue]
        if self.alpha < 1.0:
            parts.append(self.alpha)
        return "#" + "".join(f"{round(p * 255):02X}" for p in parts)


class Preferences(BaseModel):
    """Snapshot of the display preferences."""

    model_config = ConfigDict(frozen=True)

    font_size: float = DEFAULT_FONT_SIZE
    background_color: Color = Field(default_factory=Color.white)


# ---------------------------------------------------------------------------
# Blob codec
# ---------------------------------------------------------------------------


def encode_color(color: Color) -> bytes:
    """Encode *color* as a UTF-8 JSON blob.

    The channels are re-validated first, so a color built without validation
    (``Color.model_construct``) is rejected instead of written.

    Raises:
        ColorEncodingError: If the channels are not valid floats in range.
    """
    try:
        checked = Color(
            red=color.red,
            green=color.green,
            blue=color.blue,
            alpha=color.alpha,
        )
    except (AttributeError, ValidationError) as exc:
        raise ColorEncodingError(f"Cannot encode color {color!r}: {exc}") from exc
    return checked.model_dump_json().encode("utf-8")


def decode_color(blob: bytes) -> Color:
    """Decode a blob produced by :func:`encode_color`.

    Raises:
        ColorDecodingError: If *blob* is not a valid encoded color.
    """
    try:
        return Color.model_validate_json(blob)
    except ValidationError as exc:
        raise ColorDecodingError(f"Cannot decode color blob: {exc}") from exc
