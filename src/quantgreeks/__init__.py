"""Closed-form prices and Greeks for options, squeeth and concentrated liquidity."""

import logging

__version__ = "0.1.0"

logging.getLogger("quantgreeks").addHandler(logging.NullHandler())
