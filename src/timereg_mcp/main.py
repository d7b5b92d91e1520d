"""Main entry point for timereg-mcp MCP server."""

import argparse
import logging
import sys

from fastmcp import FastMCP

from timereg_mcp.config import Config
from timereg_mcp.core import FilesystemNoteStore, TimeDataManager
from timereg_mcp.resources import register_resources
from timereg_mcp.tools import register_tools

logger = logging.getLogger(__name__)


def create_server(config: Config) -> FastMCP:
    """Create and configure the MCP server with all components.

    Args:
        config: Configuration instance with all settings.
    """
    mcp = FastMCP(
        name="timereg",
        instructions=(
            "timereg reads time registrations from markdown daily notes and checks them "
            "against the expected working hours. Use get_day, get_week, get_month or "
            "get_range to inspect logged hours and validation issues."
        ),
    )

    logger.info("Using notes at %s", config.notes_root)
    store = FilesystemNoteStore(config.notes_root)
    manager = TimeDataManager(store, config.settings)

    logger.info("Registering resources...")
    register_resources(mcp, manager)

    logger.info("Registering tools...")
    register_tools(mcp, manager)

    logger.info("Server configured successfully")
    return mcp


def main() -> None:
    """Main function - starts the MCP server."""
    # Configure logging here to avoid side effects on import
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="timereg - time registrations from daily notes")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Enable strict validation (missing projects, descriptions and day bounds)",
    )
    args = parser.parse_args()

    try:
        config = Config.from_env(strict_override=True if args.strict else None)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    settings = config.settings
    logger.info("=" * 50)
    logger.info("timereg starting...")
    logger.info("  NOTES_ROOT:    %s", config.notes_root)
    logger.info("  PORT:          %s", config.port)
    logger.info("  FOLDER:        %s", settings.daily_notes_folder or "(all notes)")
    logger.info("  HOURS/DAY:     %s", settings.expected_hours_per_day)
    logger.info("  WORKING_DAYS:  %s", ",".join(str(d) for d in sorted(settings.working_days)))
    logger.info("  STRICT:        %s", settings.strict_validation)
    logger.info("=" * 50)

    try:
        mcp = create_server(config)
        logger.info("Starting MCP server on port %s...", config.port)
        mcp.run(transport="sse", host="0.0.0.0", port=config.port)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        sys.exit(0)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
