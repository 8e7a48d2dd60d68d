"""Display subsystem for the clock face.

Provides:
- Theme buckets and their selection policy
- Frame composition with Pillow
- Color name resolution

The pygame window lives in `display.surface` and is imported on demand.
"""

from .graphics import Color
from .renderer import FrameRenderer, Labels, Layout, load_font
from .themes import Theme, ThemeBucket, ThemeSet, select_bucket, weather_strip

__all__ = [
    "Color",
    "FrameRenderer",
    "Labels",
    "Layout",
    "Theme",
    "ThemeBucket",
    "ThemeSet",
    "load_font",
    "select_bucket",
    "weather_strip",
]
