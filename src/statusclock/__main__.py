"""Status clock entry point.

Usage:
    python -m statusclock [options]

Options:
    --config PATH     Path to config file (default: ~/.config/status-clock/config.yaml)
    --fullscreen      Open the window fullscreen
    --mock            Run without a window (frames stay in memory)
    --debug           Enable debug logging and echo status lines to publishers
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .apps import ClockFace, RenderScheduler, StopReason, handle_input
from .core.config import Config, default_config_path, load_config
from .core.errors import ConfigurationError, StatusClockError
from .core.logging import setup_logging
from .display import FrameRenderer, Layout, ThemeSet
from .status import StatusListener, StatusStore

logger = logging.getLogger(__name__)


class StatusClockSystem:
    """Main application coordinator.

    Owns the status store and wires it into the listener and the render
    scheduler. Every startup failure is raised before the scheduler runs.
    """

    def __init__(
        self,
        config: Config,
        fullscreen: bool = False,
        mock_mode: bool = False,
        echo: bool = False,
    ) -> None:
        """Initialize the status clock.

        Args:
            config: Validated configuration
            fullscreen: Open the window fullscreen
            mock_mode: Use the headless surface
            echo: Echo processed status lines back to publishers
        """
        self._config = config
        self._fullscreen = fullscreen
        self._mock_mode = mock_mode
        self._echo = echo or config.echo
        self.store = StatusStore()

    def _create_surface(self):
        if self._mock_mode:
            from .hardware.mock import MockSurface

            return MockSurface(self._config.width, self._config.height)

        from .display.surface import PygameSurface

        return PygameSurface(self._config.width, self._config.height, fullscreen=self._fullscreen)

    def run(self) -> StopReason:
        """Start the listener, open the surface and run the clock.

        Returns:
            Why the render loop ended

        Raises:
            StatusClockError: On any fatal startup failure
        """
        config = self._config

        # Colors resolve before anything starts so bad names fail fast
        face = ClockFace(ThemeSet.from_config(config.themes), config.days)

        listener = StatusListener(config.socket_path, self.store, echo=self._echo)
        with listener, self._create_surface() as surface:
            renderer = FrameRenderer(surface, Layout.from_config(config))
            scheduler = RenderScheduler(
                store=self.store,
                face=face,
                renderer=renderer,
                events=surface.events,
                handler=handle_input,
            )
            scheduler.redraw()
            return scheduler.run()


def configure_logging(config: Config, debug: bool = False) -> None:
    """Reconfigure logging from the loaded configuration.

    Raises:
        ConfigurationError: If the log file cannot be created
    """
    try:
        setup_logging(
            level="DEBUG" if debug else config.logging.level,
            log_format=config.logging.format,
            log_file=config.logging.file,
            max_size_mb=config.logging.max_size_mb,
            backup_count=config.logging.backup_count,
        )
    except OSError as e:
        # Keep reporting to the console after a failed file setup
        setup_logging(level="DEBUG" if debug else "INFO")
        raise ConfigurationError(
            "Cannot open log file",
            details={"path": config.logging.file, "error": e.strerror or str(e)},
            cause=e,
        ) from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="status-clock",
        description="Desktop clock themed by externally published status",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to config file (default: {default_config_path()})",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Open the window fullscreen",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Run without a window (no display required)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and echo status lines",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    # Setup initial logging
    setup_logging(level="DEBUG" if args.debug else "INFO")

    logger.info("Status Clock v%s", __version__)

    try:
        config = load_config(args.config or default_config_path())
        configure_logging(config, debug=args.debug)
    except StatusClockError as e:
        logger.error("Configuration error: %s", e)
        return 1

    system = StatusClockSystem(
        config,
        fullscreen=args.fullscreen,
        mock_mode=args.mock,
        echo=args.debug,
    )

    try:
        system.run()
        return 0

    except StatusClockError as e:
        logger.critical("Fatal error: %s", e)
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
        return 0


if __name__ == "__main__":
    sys.exit(main())
