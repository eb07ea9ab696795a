"""Named project colors and hex color parsing."""

import re
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")


class ProjectColorRGB(BaseModel):
    """RGB components in the 0.0-1.0 range."""

    model_config = ConfigDict(frozen=True)

    red: float = Field(..., ge=0.0, le=1.0)
    green: float = Field(..., ge=0.0, le=1.0)
    blue: float = Field(..., ge=0.0, le=1.0)


class ProjectColorPalette:
    """Supported named colors for project `color` values.

    Examples:
        >>> ProjectColorPalette.resolve("teal")
        ProjectColorRGB(red=0.0, green=0.502, blue=0.502)
        >>> ProjectColorPalette.is_valid_hex("#1a2B3c")
        True
    """

    NAMED: Dict[str, ProjectColorRGB] = {
        "black": ProjectColorRGB(red=0.0, green=0.0, blue=0.0),
        "blue": ProjectColorRGB(red=0.0, green=0.0, blue=1.0),
        "brown": ProjectColorRGB(red=0.6471, green=0.1647, blue=0.1647),
        "cyan": ProjectColorRGB(red=0.0, green=1.0, blue=1.0),
        "gray": ProjectColorRGB(red=0.502, green=0.502, blue=0.502),
        "grey": ProjectColorRGB(red=0.502, green=0.502, blue=0.502),
        "green": ProjectColorRGB(red=0.0, green=0.502, blue=0.0),
        "indigo": ProjectColorRGB(red=0.2941, green=0.0, blue=0.5098),
        "orange": ProjectColorRGB(red=1.0, green=0.6471, blue=0.0),
        "pink": ProjectColorRGB(red=1.0, green=0.7529, blue=0.7961),
        "purple": ProjectColorRGB(red=0.502, green=0.0, blue=0.502),
        "red": ProjectColorRGB(red=1.0, green=0.0, blue=0.0),
        "teal": ProjectColorRGB(red=0.0, green=0.502, blue=0.502),
        "white": ProjectColorRGB(red=1.0, green=1.0, blue=1.0),
        "yellow": ProjectColorRGB(red=1.0, green=1.0, blue=0.0),
    }

    SORTED_NAMES: List[str] = sorted(NAMED)

    @staticmethod
    def is_valid_hex(value: str) -> bool:
        """Check for exactly `#RRGGBB`."""
        return bool(_HEX_COLOR.fullmatch(value))

    @classmethod
    def is_named(cls, value: str) -> bool:
        return value.strip().lower() in cls.NAMED

    @classmethod
    def resolve(cls, value: str) -> Optional[ProjectColorRGB]:
        """
        Resolve a hex (#RRGGBB) or named color to RGB components.

        Args:
            value: Color string as written in config.toml

        Returns:
            RGB components, or None if the value is not a supported color
        """
        trimmed = value.strip()

        if cls.is_valid_hex(trimmed):
            number = int(trimmed[1:], 16)
            return ProjectColorRGB(
                red=((number >> 16) & 0xFF) / 255.0,
                green=((number >> 8) & 0xFF) / 255.0,
                blue=(number & 0xFF) / 255.0,
            )

        return cls.NAMED.get(trimmed.lower())
