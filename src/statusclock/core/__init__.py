"""Core infrastructure module.

Provides foundational components:
- Configuration loading with validation
- Custom exception hierarchy
- Structured logging
- Thread primitives
"""

from .config import Config, default_config_path, load_config, parse_config
from .errors import (
    StatusClockError,
    ConfigurationError,
    SocketSetupError,
    SurfaceError,
)
from .logging import setup_logging
from .threading import AtomicCounter, StoppableThread

__all__ = [
    # Config
    "Config",
    "default_config_path",
    "load_config",
    "parse_config",
    # Errors
    "StatusClockError",
    "ConfigurationError",
    "SocketSetupError",
    "SurfaceError",
    # Logging
    "setup_logging",
    # Threading
    "AtomicCounter",
    "StoppableThread",
]
