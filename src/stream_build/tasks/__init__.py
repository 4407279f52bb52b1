"""
stream-build-config tasks package.

Task modules are collected into the invoke namespace by the top-level
stream_build package.
"""

import logging
import sys


def setup_logging(debug=False):
    """Set up logging configuration based on debug flag."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        logging.getLogger('stream_build').setLevel(logging.DEBUG)
        print("🐛 Debug logging enabled", file=sys.stderr)
    else:
        logging.basicConfig(level=logging.WARNING)
