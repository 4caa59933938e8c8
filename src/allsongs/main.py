"""
AllSongs - main entry point.
"""

import sys

from .core import setup_logging
from .core.validation import validate_and_raise
from .ui.cli import AllSongsCLI

logger = setup_logging()


def main(argv=None) -> int:
    """Main entry point."""
    logger.debug("Starting AllSongs")
    try:
        try:
            validate_and_raise()
            logger.debug("Configuration validation passed")
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise
        
        return AllSongsCLI().run(argv)
    except KeyboardInterrupt:
        logger.debug("Application interrupted by user")
        raise
    except Exception:
        logger.exception("Unhandled exception occurred")
        raise
    finally:
        logger.debug("Application shutting down")


if __name__ == "__main__":
    sys.exit(main())
