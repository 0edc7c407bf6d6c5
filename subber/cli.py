"""
Command line entry point for the Subber sideline tracker.

Loads the roster configuration, builds the Tracker and serves the web
interface until interrupted.
"""
import logging

import click

from . import __version__
from .services import ConfigError, Tracker, load_config_file
from .ui import run_web_app
from .utils import DEFAULT_CONFIG_FILE, DEFAULT_HOST, DEFAULT_PORT
from .utils.constants import LOG_FORMAT

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT.format(version=__version__),
    )


def build_tracker(config_file: str) -> Tracker:
    """
    Build a Tracker seeded from the configuration file.

    Raises:
        ConfigError: If the configuration file is malformed
    """
    cfg = load_config_file(config_file)
    return Tracker(cfg.to_players(), commit_on_resub=cfg.commit_on_resub)


@click.command()
@click.option(
    "--config-file", "-c",
    default=DEFAULT_CONFIG_FILE, show_default=True,
    type=click.Path(dir_okay=False),
    help="JSON file to read configuration from.",
)
@click.option("--host", default=DEFAULT_HOST, show_default=True, help="Address to bind to.")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=click.IntRange(1, 65535),
              help="Port to listen on.")
@click.option("--debug", is_flag=True, help="Enable debug logging and the Flask debugger.")
@click.version_option(__version__, prog_name="subber")
def main(config_file: str, host: str, port: int, debug: bool) -> None:
    """Track game time and player substitutions from the sideline."""
    configure_logging(debug)
    logger.info("starting subber")

    try:
        tracker = build_tracker(config_file)
    except ConfigError as e:
        raise click.ClickException(f"failed to load config: {e}") from e

    run_web_app(tracker, host=host, port=port, debug=debug)
    logger.info("shutdown completed successfully")


if __name__ == "__main__":
    main()
