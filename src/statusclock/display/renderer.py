"""Frame composition for the clock face.

Each frame is a Pillow image: a background filling the surface, then the
time, day, date and weather labels drawn at their configured baselines.
The finished image is handed to the surface to present.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from ..core.config import Config
from .themes import Theme

logger = logging.getLogger(__name__)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont

DEFAULT_FONT_SIZE = 12

# Directories searched for font files by family name
FONT_DIRS = [
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path("~/.local/share/fonts").expanduser(),
    Path("~/.fonts").expanduser(),
    Path("/System/Library/Fonts"),  # macOS
    Path("/Library/Fonts"),  # macOS
]

# Last resort before Pillow's built-in font, regular then bold
FALLBACK_FONTS = [
    ("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"),
    ("/usr/share/fonts/truetype/freefont/FreeSans.ttf", "/usr/share/fonts/truetype/freefont/FreeSansBold.ttf"),
]

FONT_SUFFIXES = {".ttf", ".otf", ".ttc"}


class Surface(Protocol):
    """Anything a composed frame can be presented on."""

    width: int
    height: int

    def present(self, image: Image.Image) -> None: ...


@dataclass(frozen=True)
class FontSpec:
    """Parsed fontconfig-style descriptor, e.g. `Noto Sans:style=bold:size=89`."""

    family: str
    style: str = ""
    size: int = DEFAULT_FONT_SIZE

    @classmethod
    def parse(cls, descriptor: str) -> "FontSpec":
        family, *properties = descriptor.split(":")
        style = ""
        size = DEFAULT_FONT_SIZE
        for prop in properties:
            key, _, value = prop.partition("=")
            key = key.strip().lower()
            if key == "style":
                style = value.strip()
            elif key in ("size", "pixelsize"):
                try:
                    size = max(1, round(float(value)))
                except ValueError:
                    logger.warning("Ignoring bad font size %r in %r", value, descriptor)
        return cls(family=family.strip(), style=style, size=size)

    @property
    def bold(self) -> bool:
        return "bold" in self.style.lower()


def _normalize(name: str) -> str:
    return re.sub(r"[^a-z0-9]", "", name.lower())


@lru_cache(maxsize=1)
def _font_index() -> dict[str, str]:
    """Map normalized font file stems to paths across the font directories."""
    index: dict[str, str] = {}
    for font_dir in FONT_DIRS:
        if not font_dir.is_dir():
            continue
        for path in sorted(font_dir.rglob("*")):
            if path.suffix.lower() in FONT_SUFFIXES:
                index.setdefault(_normalize(path.stem), str(path))
    logger.debug("Indexed %d font files", len(index))
    return index


def find_font_file(spec: FontSpec) -> str | None:
    """Find a font file for the family and style, or None."""
    index = _font_index()
    family = _normalize(spec.family)
    style = _normalize(spec.style)

    candidates = [family + style] if style else []
    candidates += [family + "regular", family]
    for candidate in candidates:
        if candidate in index:
            return index[candidate]

    for regular, bold in FALLBACK_FONTS:
        path = bold if spec.bold else regular
        if Path(path).exists():
            logger.info("Font %r not found, using %s", spec.family, path)
            return path
    return None


@lru_cache(maxsize=32)
def load_font(descriptor: str) -> Font:
    """Load the font for a descriptor, falling back to Pillow's default."""
    spec = FontSpec.parse(descriptor)
    path = find_font_file(spec)
    if path is not None:
        try:
            return ImageFont.truetype(path, spec.size)
        except OSError as e:
            logger.warning("Failed to load font %s: %s", path, e)

    logger.warning("No font file for %r, using Pillow default", descriptor)
    return ImageFont.load_default(spec.size)


@dataclass(frozen=True)
class Labels:
    """The four strings shown on the clock face."""

    time: str
    day: str
    date: str
    weather: str


@dataclass(frozen=True)
class LabelStyle:
    """Font and baseline position of one label."""

    font: Font
    position: tuple[int, int]


@dataclass(frozen=True)
class Layout:
    """Fonts and positions for the four labels."""

    time: LabelStyle
    day: LabelStyle
    date: LabelStyle
    weather: LabelStyle

    @classmethod
    def from_config(cls, config: Config) -> "Layout":
        """Load fonts and positions once at startup."""
        return cls(
            **{
                label: LabelStyle(
                    font=load_font(getattr(config.fonts, label)),
                    position=getattr(config.coordinates, label).to_tuple(),
                )
                for label in ("time", "day", "date", "weather")
            }
        )


class FrameRenderer:
    """Composes clock frames and presents them on a surface.

    Usage:
        renderer = FrameRenderer(surface, Layout.from_config(config))
        renderer.render(theme, Labels("12:00:00", "Mon", "06-01", "Fog 9C"))
    """

    def __init__(self, surface: Surface, layout: Layout) -> None:
        self._surface = surface
        self._layout = layout

    def compose(self, theme: Theme, labels: Labels) -> Image.Image:
        """Draw a frame without presenting it."""
        size = (self._surface.width, self._surface.height)
        image = Image.new("RGB", size, theme.background.to_tuple())
        draw = ImageDraw.Draw(image)

        for style, text, color in (
            (self._layout.time, labels.time, theme.time),
            (self._layout.day, labels.day, theme.day),
            (self._layout.date, labels.date, theme.date),
            (self._layout.weather, labels.weather, theme.weather),
        ):
            # Positions are baselines; bitmap fonts only support top-left anchoring
            anchor = "ls" if isinstance(style.font, ImageFont.FreeTypeFont) else None
            draw.text(style.position, text, font=style.font, fill=color.to_tuple(), anchor=anchor)

        return image

    def render(self, theme: Theme, labels: Labels) -> Image.Image:
        """Draw a frame and present it on the surface."""
        image = self.compose(theme, labels)
        self._surface.present(image)
        return image
