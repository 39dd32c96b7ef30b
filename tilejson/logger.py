"""tilejson logger."""

import logging

logger = logging.getLogger("tilejson")
