#!/usr/bin/env python3
"""
ProductFeed UI - GTK4 product list
Minimal entry point - classes are in separate modules.
"""

import logging
import signal
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("ProductFeed.UI")


def main():
    """Entry point"""
    from ui.application.product_app import main as app_main

    logger.info("ProductFeed UI starting...")

    def signal_handler(sig, frame):
        logger.info("Shutting down UI...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    return app_main(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
