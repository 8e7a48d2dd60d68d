"""Status Clock: a desktop clock themed by live status.

Features:
- Local socket listener for sync, weather and temperature updates
- Time-of-day themes, with a distinct theme while out of sync
- One-second redraws interleaved with window input events
- YAML configuration for fonts, positions and colors
"""

__version__ = "1.0.0"
