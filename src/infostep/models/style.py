"""Style and layout options consumed by the renderer."""

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..constants import BRAND_PRIMARY

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class LayoutType(str, Enum):
    """Available infographic layouts."""

    VERTICAL_CARDS = "vertical-cards"
    HORIZONTAL_STEPS = "horizontal-steps"
    RADIAL_PROCESS = "radial-process"
    TIMELINE_FLOW = "timeline-flow"
    CIRCULAR_PROGRESS = "circular-progress"
    MULTI_COLUMN = "multi-column"


class CornerStyle(str, Enum):
    """Corner radius class for cards."""

    SHARP = "sharp"
    SOFT = "soft"
    EXTRA_SOFT = "extra-soft"


class BorderVariant(str, Enum):
    """Border style class for cards."""

    SOLID = "solid"
    DASHED = "dashed"
    NONE = "none"


class ExportFormat(str, Enum):
    """Export artifact formats."""

    SVG = "svg"
    HTML = "html"
    TXT = "txt"


def validate_hex_color(value: str) -> str:
    """Normalize a ``#RRGGBB`` color to upper case.

    Raises:
        ValueError: If the value is not a 6-digit hex color
    """
    if not _HEX_COLOR.match(value):
        raise ValueError(f"Expected a #RRGGBB color, got {value!r}")
    return value.upper()


class StyleOptions(BaseModel):
    """Visual style applied to a rendered infographic."""

    accent_color: str = Field(default=BRAND_PRIMARY, description="Accent color (#RRGGBB)")
    background_color: str = Field(default="#FFFFFF", description="Background color (#RRGGBB)")
    corner_style: CornerStyle = CornerStyle.SOFT
    border_variant: BorderVariant = BorderVariant.SOLID

    @field_validator("accent_color", "background_color")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return validate_hex_color(value)
