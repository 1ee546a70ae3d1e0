"""
Logging setup shared by the web app and the command line.

Call once from the entry point. Never log raw passwords; log lengths and
strength labels only.
"""

import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Configure the root logger. Does nothing if handlers are already installed."""
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # werkzeug logs every request at INFO
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
