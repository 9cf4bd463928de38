"""restpipe: a configurable HTTP client wrapper for typed API clients."""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
