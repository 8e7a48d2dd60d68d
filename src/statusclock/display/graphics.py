"""Color handling for clock themes.

Theme colors are configured by name, X11 style: anything Pillow knows
(`SteelBlue`, `gold`, `#ff5500`, `rgb(...)`) plus the numbered greys
(`grey0` .. `grey100`, also spelled `gray`).
"""

import re
from dataclasses import dataclass

from PIL import ImageColor

_NUMBERED_GREY = re.compile(r"^gr[ae]y(\d{1,3})$", re.IGNORECASE)


@dataclass(frozen=True)
class Color:
    """RGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        # Clamp values
        object.__setattr__(self, "r", max(0, min(255, self.r)))
        object.__setattr__(self, "g", max(0, min(255, self.g)))
        object.__setattr__(self, "b", max(0, min(255, self.b)))

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Resolve an X11-style color name.

        Raises:
            ValueError: If the name is not a known color
        """
        match = _NUMBERED_GREY.match(name.strip())
        if match:
            percent = int(match.group(1))
            if percent > 100:
                raise ValueError(f"unknown color name: {name!r}")
            level = round(percent * 255 / 100)
            return cls(level, level, level)

        r, g, b = ImageColor.getrgb(name.strip())[:3]
        return cls(r, g, b)

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to hex string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
